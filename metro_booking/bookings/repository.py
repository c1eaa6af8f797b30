import logging
import math
from datetime import datetime
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import FlushError

from metro_booking.bookings.schemas import BookingStatus, BookingPage
from metro_booking.exceptions import (
    DuplicateBookingIdError, BookingNotFoundError, BookingNotCancellableError,
    StoreUnavailableError
)
from metro_booking.models import Booking

logger = logging.getLogger(__name__)

class BookingRepository:
    """Durable booking store; the only code that writes booking rows"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, **fields) -> Booking:
        """Insert a new active booking; the primary key rejects a duplicate id"""
        now = datetime.now()
        booking = Booking(
            **fields,
            status=BookingStatus.ACTIVE.value,
            created_at=now,
            updated_at=now
        )

        try:
            self.db.add(booking)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            if isinstance(e, (IntegrityError, FlushError)) and self._exists(booking.id):
                raise DuplicateBookingIdError(booking.id) from e
            logger.error("Failed to insert booking %s: %s", booking.id, e, exc_info=True)
            raise StoreUnavailableError("Failed to create booking") from e

        self.db.refresh(booking)
        return booking

    def get_by_id(self, booking_id: str) -> Booking:
        try:
            booking = self.db.query(Booking).filter(Booking.id == booking_id).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Failed to fetch booking %s: %s", booking_id, e, exc_info=True)
            raise StoreUnavailableError() from e

        if booking is None:
            raise BookingNotFoundError()
        return booking

    def list(self, page: int = 1, page_size: int = 10) -> BookingPage:
        """Bookings newest first, one page at a time"""
        page = max(page, 1)
        page_size = max(page_size, 1)

        try:
            total_count = self.db.query(Booking).count()
            items = self.db.query(Booking).order_by(
                Booking.created_at.desc(),
                Booking.id.desc()
            ).offset((page - 1) * page_size).limit(page_size).all()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Failed to list bookings: %s", e, exc_info=True)
            raise StoreUnavailableError() from e

        return BookingPage(
            items=items,
            page=page,
            page_size=page_size,
            total_count=total_count,
            total_pages=math.ceil(total_count / page_size)
        )

    def cancel(self, booking_id: str) -> None:
        """Single conditional UPDATE: only an active booking moves to cancelled"""
        try:
            updated = self.db.query(Booking).filter(
                Booking.id == booking_id,
                Booking.status == BookingStatus.ACTIVE.value
            ).update(
                {
                    Booking.status: BookingStatus.CANCELLED.value,
                    Booking.updated_at: datetime.now()
                },
                synchronize_session=False
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Failed to cancel booking %s: %s", booking_id, e, exc_info=True)
            raise StoreUnavailableError("Failed to cancel booking") from e

        if updated == 0:
            raise BookingNotCancellableError()

        # Rows loaded earlier in this session must not serve the old status
        self.db.expire_all()

    def _exists(self, booking_id: str) -> bool:
        try:
            return self.db.query(Booking.id).filter(Booking.id == booking_id).first() is not None
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.warning("Could not check whether booking %s exists: %s", booking_id, e)
            return False
