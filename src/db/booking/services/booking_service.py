"""
Chuyển giỏ sách của user thành các bản ghi booking.

Insert bookings và xóa giỏ chạy trong cùng một transaction của session:
nếu bất kỳ bước nào lỗi thì rollback toàn bộ, giỏ giữ nguyên và không có
booking nào được ghi.
"""

import logging
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Optional

from src.db.common.exceptions import PersistenceError, require_fields
from src.db.booking.models.booking_models import Booking, utc_now
from src.db.cart.models.cart_models import CartItem

logger = logging.getLogger(__name__)


class BookingService:
    @staticmethod
    def book(db: Session, user_id: Optional[int], now: Optional[datetime] = None) -> int:
        """Đặt toàn bộ sách trong giỏ của user rồi làm trống giỏ, trả về số dòng đã đặt"""
        require_fields(user_id, message="user_id is required")
        booking_date = now or utc_now()

        try:
            cart_items = db.query(CartItem).filter(CartItem.user_id == user_id)\
                .order_by(CartItem.cart_id).with_for_update().all()
            db.add_all([
                Booking(user_id=item.user_id, book_id=item.book_id, booking_date=booking_date)
                for item in cart_items
            ])
            # Insert bookings trước khi xóa giỏ
            db.flush()
            # Chỉ xóa đúng các dòng đã đặt, dòng thêm vào giỏ sau lúc đọc vẫn giữ nguyên
            cart_ids = [item.cart_id for item in cart_items]
            if cart_ids:
                db.query(CartItem).filter(CartItem.cart_id.in_(cart_ids))\
                    .delete(synchronize_session=False)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Booking failed for user %s, cart left unchanged", user_id)
            raise PersistenceError("Error booking books")

        logger.info("User %s booked %d item(s)", user_id, len(cart_items))
        return len(cart_items)
