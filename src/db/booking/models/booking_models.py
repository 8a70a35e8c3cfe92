from sqlalchemy import Column, Integer, DateTime
from datetime import datetime, timezone

from src.db.common.database_connection import Base


def utc_now() -> datetime:
    """Thời điểm hiện tại theo UTC, dạng naive vì cột là TIMESTAMP WITHOUT TIME ZONE"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Booking(Base):
    """Model cho một lượt đặt sách, không thay đổi sau khi tạo"""
    __tablename__ = "bookings"

    booking_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    book_id = Column(Integer, nullable=False)
    booking_date = Column(DateTime, nullable=False, default=utc_now)
