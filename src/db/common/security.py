from functools import lru_cache

from fastapi import Depends
from passlib.context import CryptContext

from src.db.common.settings import Settings, get_settings


@lru_cache()
def build_password_context(rounds: int) -> CryptContext:
    """Tạo CryptContext bcrypt với cost factor cho trước"""
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=rounds,
        # Hash cũ có cost thấp hơn sẽ được hash lại khi login thành công
        bcrypt__min_rounds=rounds,
    )


def get_pwd_context(settings: Settings = Depends(get_settings)) -> CryptContext:
    """
    Dependency trả về CryptContext dùng để hash/verify mật khẩu
    Sử dụng trong routes với: pwd_context: CryptContext = Depends(get_pwd_context)
    """
    return build_password_context(settings.bcrypt_rounds)
