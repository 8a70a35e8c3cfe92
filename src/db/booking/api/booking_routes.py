from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from src.db.common.database_connection import get_db
from src.db.booking.services.booking_service import BookingService
from src.db.booking.models.booking_schemas import BookingRequest

router = APIRouter()

@router.post("/cart/book", response_class=PlainTextResponse)
def book_cart(payload: BookingRequest, db: Session = Depends(get_db)):
    """Đặt tất cả sách trong giỏ và làm trống giỏ"""
    BookingService.book(db, payload.user_id)
    return "Booking successful! Cart cleared."
