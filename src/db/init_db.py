#!/usr/bin/env python3
"""
Script để khởi tạo database cho Library Booking API.
Chạy script này để tạo tables và dữ liệu sách mẫu:

    python -m src.db.init_db
"""

import logging
import sys

from sqlalchemy.orm import Session

from src.db.common.database_connection import SessionLocal, check_connection, init_database
from src.db.common.logging_config import setup_logging
from src.db.common.settings import get_settings
from src.db.book.models.book_models import Book

logger = logging.getLogger(__name__)

SAMPLE_BOOKS = [
    ("The Hobbit", "fantasy"),
    ("A Wizard of Earthsea", "fantasy"),
    ("Dune", "science-fiction"),
    ("Foundation", "science-fiction"),
    ("Sapiens", "history"),
    ("The Guns of August", "history"),
]


def create_sample_data(db: Session) -> int:
    """Tạo dữ liệu sách mẫu nếu bảng books còn trống, trả về số sách đã thêm"""
    if db.query(Book).first():
        logger.info("Books table already has data, skipping seed")
        return 0

    db.add_all([Book(title=title, category=category) for title, category in SAMPLE_BOOKS])
    db.commit()
    return len(SAMPLE_BOOKS)


def main():
    """Main function"""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    logger.info("Initializing database for Library Booking API...")

    # Test connection trước
    if not check_connection():
        logger.error("Please check DATABASE_URL or DB_* settings in .env file")
        sys.exit(1)

    init_database()

    db = SessionLocal()
    try:
        added = create_sample_data(db)
        logger.info("Seeded %d sample book(s)", added)
    finally:
        db.close()

    logger.info("Database initialization completed, run the API with: python main.py")


if __name__ == "__main__":
    main()
