from fastapi import APIRouter, Depends
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from src.db.common.database_connection import get_db
from src.db.common.security import get_pwd_context
from src.db.user.services.user_service import UserService
from src.db.user.models.user_schemas import (
    LoginRequest, LoginResponse, Profile, SignupRequest, SignupResponse
)

router = APIRouter()

@router.post("/signup", response_model=SignupResponse)
def signup(
    payload: SignupRequest,
    db: Session = Depends(get_db),
    pwd_context: CryptContext = Depends(get_pwd_context),
):
    """Đăng ký tài khoản mới"""
    user_id = UserService.signup(db, payload, pwd_context)
    return SignupResponse(message="User registered successfully!", success=True, user_id=user_id)

@router.post("/login", response_model=LoginResponse)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    pwd_context: CryptContext = Depends(get_pwd_context),
):
    """Đăng nhập, trả về user_id (không cấp token)"""
    user = UserService.login(db, payload, pwd_context)
    return LoginResponse(
        message="Login successful",
        success=True,
        user_id=user.user_id,
        userEmail=user.email,
    )

@router.get("/profile/{email}", response_model=Profile)
def get_profile(email: str, db: Session = Depends(get_db)):
    """Lấy profile của user theo email"""
    return UserService.get_profile(db, email)
