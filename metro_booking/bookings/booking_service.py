import logging
from typing import Callable, Optional
from sqlalchemy.orm import Session

from metro_booking.bookings.fare_service import FareCalculationService
from metro_booking.bookings.id_generator import generate_booking_id
from metro_booking.bookings.repository import BookingRepository
from metro_booking.bookings.schemas import BookingCreateRequest, BookingPage
from metro_booking.bookings.validation import (
    BookingValidator, parse_travel_date, parse_passenger_count, parse_total_price
)
from metro_booking.config import settings
from metro_booking.exceptions import DuplicateBookingIdError
from metro_booking.models import Booking
from metro_booking.tickets.qr_service import QRCodeService

logger = logging.getLogger(__name__)

class BookingService:
    """Service for creating, looking up and cancelling metro bookings"""

    def __init__(
        self,
        db: Session,
        qr_service: Optional[QRCodeService] = None,
        id_generator: Callable[[], str] = generate_booking_id,
        max_id_attempts: Optional[int] = None
    ):
        self.db = db
        self.repository = BookingRepository(db)
        self.validator = BookingValidator(db)
        self.fare_service = FareCalculationService(db)
        self.qr_service = qr_service or QRCodeService()
        self.id_generator = id_generator
        self.max_id_attempts = max_id_attempts or settings.BOOKING_ID_MAX_ATTEMPTS

    def create_booking(self, request: BookingCreateRequest) -> Booking:
        """Validate, price, and persist a new active booking"""

        self.validator.validate(request)

        travel_date = parse_travel_date(request.travel_date)
        passengers = parse_passenger_count(request.passengers)

        total_price = parse_total_price(request.total_price)
        if total_price is None:
            total_price = self.fare_service.compute_total(request.ticket_type, passengers)

        for attempt in range(1, self.max_id_attempts + 1):
            booking_id = self.id_generator()

            qr_payload, qr_code = self.qr_service.encode_or_none(
                booking_id=booking_id,
                from_station=request.from_station,
                to_station=request.to_station,
                travel_date=travel_date,
                travel_time=request.travel_time,
                passengers=passengers,
                ticket_type=request.ticket_type
            )

            try:
                booking = self.repository.create(
                    id=booking_id,
                    from_station=request.from_station,
                    to_station=request.to_station,
                    travel_date=travel_date,
                    travel_time=request.travel_time,
                    passengers=passengers,
                    ticket_type=request.ticket_type,
                    total_price=total_price,
                    qr_payload=qr_payload,
                    qr_code=qr_code
                )
            except DuplicateBookingIdError:
                logger.warning(
                    "Booking id %s already taken (attempt %d of %d)",
                    booking_id, attempt, self.max_id_attempts
                )
                continue

            logger.info(
                "Created booking %s: %s -> %s on %s, %d x %s, total %s",
                booking.id, booking.from_station, booking.to_station,
                booking.travel_date, booking.passengers, booking.ticket_type, booking.total_price
            )
            return booking

        raise DuplicateBookingIdError(booking_id)

    def get_booking(self, booking_id: str) -> Booking:
        return self.repository.get_by_id(booking_id)

    def list_bookings(self, page: int, page_size: int) -> BookingPage:
        return self.repository.list(page=page, page_size=page_size)

    def cancel_booking(self, booking_id: str) -> None:
        """Move an active booking to cancelled"""
        self.repository.cancel(booking_id)
        logger.info("Cancelled booking %s", booking_id)
