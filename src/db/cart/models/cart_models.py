from sqlalchemy import Column, Integer

from src.db.common.database_connection import Base


class CartItem(Base):
    """Model cho một dòng trong giỏ sách"""
    __tablename__ = "books_cart"

    cart_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    # Tham chiếu theo id, không có foreign key và không cascade
    user_id = Column(Integer, nullable=False, index=True)
    book_id = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
