from sqlalchemy import Column, Integer, String

from src.db.common.database_connection import Base


class Account(Base):
    """Model cho tài khoản người dùng"""
    __tablename__ = "accounts"

    user_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    full_name = Column(String(255), nullable=False)
    # Unique ở tầng database để chặn race giữa hai lần signup cùng email
    email = Column(String(255), unique=True, nullable=False, index=True)
    contact = Column(String(50), nullable=False)
    user_password = Column(String(255), nullable=False)  # bcrypt hash, không bao giờ là mật khẩu gốc
