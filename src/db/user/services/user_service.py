import logging

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Optional

from src.db.common.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    PersistenceError,
    ValidationError,
    require_fields,
)
from src.db.user.models.user_models import Account
from src.db.user.models.user_schemas import AuthenticatedUser, LoginRequest, Profile, SignupRequest

logger = logging.getLogger(__name__)


class UserService:
    @staticmethod
    def get_account_by_email(db: Session, email: str) -> Optional[Account]:
        """Lấy account theo email (so khớp chính xác, phân biệt hoa thường)"""
        return db.query(Account).filter(Account.email == email).first()

    @staticmethod
    def signup(db: Session, data: SignupRequest, pwd_context: CryptContext) -> int:
        """
        Đăng ký tài khoản mới, trả về user_id.

        Kiểm tra email trùng trước, sau đó mới hash mật khẩu và insert.
        Unique constraint trên accounts.email chặn trường hợp hai request
        cùng email vượt qua bước kiểm tra cùng lúc.
        """
        require_fields(data.full_name, data.email, data.contact, data.user_password)

        try:
            if UserService.get_account_by_email(db, data.email):
                logger.warning("Signup rejected, email already registered")
                raise ConflictError()

            try:
                hashed = pwd_context.hash(data.user_password)
            except (ValueError, TypeError):
                # bcrypt từ chối secret (vd. chứa ký tự NUL)
                logger.warning("Signup rejected, password cannot be hashed")
                raise ValidationError("Invalid password")

            account = Account(
                full_name=data.full_name,
                email=data.email,
                contact=data.contact,
                user_password=hashed,
            )
            db.add(account)
            db.commit()
            db.refresh(account)
        except IntegrityError:
            db.rollback()
            logger.warning("Signup lost a race on a duplicate email")
            raise ConflictError()
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Database error during signup")
            raise PersistenceError("Database error")

        logger.info("Registered account %s", account.user_id)
        return account.user_id

    @staticmethod
    def login(db: Session, data: LoginRequest, pwd_context: CryptContext) -> AuthenticatedUser:
        """
        Xác thực email + mật khẩu.

        Email không tồn tại và sai mật khẩu đều trả về cùng một
        AuthenticationError để không lộ thông tin tài khoản.
        """
        require_fields(data.email, data.password)

        try:
            account = UserService.get_account_by_email(db, data.email)
        except SQLAlchemyError:
            logger.exception("Database error during login")
            raise PersistenceError()

        if not account:
            # Vẫn chạy bcrypt để thời gian phản hồi giống trường hợp sai mật khẩu
            pwd_context.dummy_verify()
            logger.warning("Failed login attempt")
            raise AuthenticationError()

        try:
            valid, new_hash = pwd_context.verify_and_update(data.password, account.user_password)
        except (ValueError, TypeError):
            # Giá trị lưu trong DB không phải hash hợp lệ
            valid, new_hash = False, None

        if not valid:
            logger.warning("Failed login attempt for account %s", account.user_id)
            raise AuthenticationError()

        if new_hash:
            try:
                account.user_password = new_hash
                db.commit()
            except SQLAlchemyError:
                db.rollback()
                logger.exception("Could not rehash password for account %s", account.user_id)

        logger.info("Account %s logged in", account.user_id)
        return AuthenticatedUser(user_id=account.user_id, email=account.email)

    @staticmethod
    def get_profile(db: Session, email: str) -> Profile:
        """Lấy thông tin profile theo email"""
        try:
            account = UserService.get_account_by_email(db, email)
        except SQLAlchemyError:
            logger.exception("Database error while fetching profile")
            raise PersistenceError()

        if not account:
            raise NotFoundError("User not found")
        return Profile.model_validate(account)
