import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List

from src.db.common.exceptions import PersistenceError
from src.db.book.models.book_models import Book
from src.db.book.models.book_schemas import BookSummary

logger = logging.getLogger(__name__)


class BookService:
    @staticmethod
    def get_books_by_category(db: Session, category: str) -> List[BookSummary]:
        """Lấy danh sách sách theo category (so khớp chính xác), theo thứ tự insert"""
        try:
            books = db.query(Book).filter(Book.category == category)\
                .order_by(Book.book_id).all()
        except SQLAlchemyError:
            logger.exception("Database error while listing category %r", category)
            raise PersistenceError()
        return [BookSummary.model_validate(book) for book in books]
