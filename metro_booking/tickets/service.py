import logging
from datetime import date
from typing import Optional
from sqlalchemy.orm import Session

from metro_booking.bookings.repository import BookingRepository
from metro_booking.bookings.schemas import BookingStatus
from metro_booking.exceptions import BookingNotFoundError
from metro_booking.tickets.schemas import (
    TicketSummary, TicketValidationResult, TicketValidationStatus
)

logger = logging.getLogger(__name__)

INVALID_TICKET_MESSAGE = "Invalid or expired ticket"
EXPIRED_TICKET_MESSAGE = "Ticket has expired"

class TicketValidationService:
    """Decides whether a scanned ticket may be used today.

    A cancelled booking is reported exactly like an unknown id, so a
    scanner cannot tell the two apart. An active booking whose travel
    date has passed is expired; anything else active is valid.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = BookingRepository(db)

    def validate_ticket(self, booking_id: str, today: Optional[date] = None) -> TicketValidationResult:
        today = today or date.today()

        try:
            booking = self.repository.get_by_id(booking_id)
        except BookingNotFoundError:
            booking = None

        if booking is None or booking.status != BookingStatus.ACTIVE.value:
            logger.info("Ticket %s rejected: not found or not active", booking_id)
            return TicketValidationResult(
                status=TicketValidationStatus.NOT_FOUND,
                reason=INVALID_TICKET_MESSAGE
            )

        if booking.travel_date < today:
            logger.info("Ticket %s rejected: travel date %s has passed", booking_id, booking.travel_date)
            return TicketValidationResult(
                status=TicketValidationStatus.EXPIRED,
                reason=EXPIRED_TICKET_MESSAGE
            )

        logger.info("Ticket %s validated", booking_id)
        return TicketValidationResult(
            status=TicketValidationStatus.VALID,
            booking=TicketSummary(
                id=booking.id,
                from_station=booking.from_station,
                to_station=booking.to_station,
                travel_date=booking.travel_date,
                travel_time=booking.travel_time,
                passengers=booking.passengers,
                ticket_type=booking.ticket_type
            )
        )
