from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from src.db.common.database_connection import get_db
from src.db.book.services.book_service import BookService
from src.db.book.models.book_schemas import BookSummary

router = APIRouter()

@router.get("/books/{category}", response_model=List[BookSummary])
def get_books_by_category(category: str, db: Session = Depends(get_db)):
    """Lấy danh sách sách theo category"""
    return BookService.get_books_by_category(db, category)
