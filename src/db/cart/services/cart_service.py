import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List

from src.db.common.exceptions import NotFoundError, PersistenceError, ValidationError, require_fields
from src.db.book.models.book_models import Book
from src.db.cart.models.cart_models import CartItem
from src.db.cart.models.cart_schemas import CartAddRequest, CartLine, CartRemoveRequest

logger = logging.getLogger(__name__)

IDS_REQUIRED = "user_id and book_id are required"


class CartService:
    @staticmethod
    def add_to_cart(db: Session, data: CartAddRequest) -> int:
        """
        Thêm sách vào giỏ, trả về cart_id.

        Luôn tạo dòng mới: thêm cùng một cuốn sách nhiều lần sẽ có nhiều
        dòng chứ không cộng dồn quantity.
        """
        require_fields(data.user_id, data.book_id, message=IDS_REQUIRED)
        quantity = 1 if data.quantity is None else data.quantity
        if quantity < 1:
            raise ValidationError("quantity must be at least 1")

        item = CartItem(user_id=data.user_id, book_id=data.book_id, quantity=quantity)
        try:
            db.add(item)
            db.commit()
            db.refresh(item)
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Database error while adding to cart")
            raise PersistenceError("Error adding to cart")
        return item.cart_id

    @staticmethod
    def get_user_cart(db: Session, user_id: int) -> List[CartLine]:
        """Lấy giỏ của user, join với books (dòng không có sách tương ứng bị bỏ qua)"""
        try:
            rows = db.query(CartItem.cart_id, Book.title, Book.book_id, CartItem.quantity)\
                .join(Book, CartItem.book_id == Book.book_id)\
                .filter(CartItem.user_id == user_id)\
                .order_by(CartItem.cart_id).all()
        except SQLAlchemyError:
            logger.exception("Database error while fetching cart of user %s", user_id)
            raise PersistenceError("Error fetching cart")
        return [
            CartLine(cart_id=row.cart_id, title=row.title, book_id=row.book_id, quantity=row.quantity)
            for row in rows
        ]

    @staticmethod
    def remove_from_cart(db: Session, data: CartRemoveRequest) -> int:
        """Xóa tất cả dòng (user_id, book_id) khỏi giỏ, trả về số dòng đã xóa"""
        require_fields(data.user_id, data.book_id, message=IDS_REQUIRED)
        try:
            deleted_count = db.query(CartItem)\
                .filter(CartItem.user_id == data.user_id, CartItem.book_id == data.book_id)\
                .delete(synchronize_session=False)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Database error while removing from cart")
            raise PersistenceError("Error removing from cart")

        if deleted_count == 0:
            raise NotFoundError("Book not found in cart")
        return deleted_count
