from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session
from typing import List

from src.db.common.database_connection import get_db
from src.db.cart.services.cart_service import CartService
from src.db.cart.models.cart_schemas import CartAddRequest, CartLine, CartRemoveRequest

router = APIRouter()

@router.post("/cart/add", response_class=PlainTextResponse)
def add_to_cart(payload: CartAddRequest, db: Session = Depends(get_db)):
    """Thêm sách vào giỏ"""
    CartService.add_to_cart(db, payload)
    return "Book added to cart"

@router.get("/cart/{user_id}", response_model=List[CartLine])
def get_user_cart(user_id: int, db: Session = Depends(get_db)):
    """Lấy giỏ sách của user"""
    return CartService.get_user_cart(db, user_id)

@router.post("/cart/remove", response_class=PlainTextResponse)
def remove_from_cart(payload: CartRemoveRequest, db: Session = Depends(get_db)):
    """Xóa sách khỏi giỏ"""
    CartService.remove_from_cart(db, payload)
    return "Book removed from cart"
