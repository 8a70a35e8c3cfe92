from sqlalchemy import Column, Integer, String

from src.db.common.database_connection import Base


class Book(Base):
    """Model cho sách trong thư viện (chỉ đọc)"""
    __tablename__ = "books"

    book_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(500), nullable=False)
    category = Column(String(100), nullable=False, index=True)
