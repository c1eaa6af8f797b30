from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional
from sqlalchemy.orm import Session

from metro_booking.bookings.schemas import BookingCreateRequest
from metro_booking.config import settings
from metro_booking.exceptions import (
    MissingFieldError, SameStationError, PastDateError, UnknownStationError,
    UnknownTicketTypeError, InvalidPassengerCountError, InvalidTotalPriceError
)
from metro_booking.stations.service import ReferenceDataService

# (attribute, public field name) in the order they are reported
REQUIRED_FIELDS = [
    ("from_station", "from"),
    ("to_station", "to"),
    ("travel_date", "date"),
    ("travel_time", "time"),
    ("passengers", "passengers"),
    ("ticket_type", "ticketType"),
]

# Largest total the Numeric(10, 2) column holds
MAX_TOTAL_PRICE = Decimal("99999999.99")

class BookingValidator:
    """Checks a booking request before anything is priced or persisted.

    Checks run in a fixed order and the first failure is raised:
    required fields, distinct stations, travel date, station catalog,
    ticket type catalog, passenger count, then any caller-supplied total.
    """

    def __init__(self, db: Session):
        self.db = db

    def validate(self, request: BookingCreateRequest, today: Optional[date] = None) -> None:
        today = today or date.today()

        for attribute, field in REQUIRED_FIELDS:
            if _is_blank(getattr(request, attribute)):
                raise MissingFieldError(field)

        # Free-form text; anything but a string is as good as absent
        if not isinstance(request.travel_time, str):
            raise MissingFieldError("time")

        if request.from_station == request.to_station:
            raise SameStationError()

        travel_date = parse_travel_date(request.travel_date)
        if travel_date is None or travel_date < today:
            raise PastDateError()

        if not self._is_active_station(request.from_station):
            raise UnknownStationError("from", str(request.from_station))
        if not self._is_active_station(request.to_station):
            raise UnknownStationError("to", str(request.to_station))

        if not isinstance(request.ticket_type, str) or \
                ReferenceDataService.get_active_price(self.db, request.ticket_type) is None:
            raise UnknownTicketTypeError(str(request.ticket_type))

        if parse_passenger_count(request.passengers) is None:
            raise InvalidPassengerCountError()

        if not _is_blank(request.total_price) and parse_total_price(request.total_price) is None:
            raise InvalidTotalPriceError()

    def _is_active_station(self, code: Any) -> bool:
        if not isinstance(code, str):
            return False
        return ReferenceDataService.get_active_station(self.db, code) is not None


def parse_travel_date(value: Any) -> Optional[date]:
    """Calendar date from an ISO string; None when it does not parse"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None


def parse_passenger_count(value: Any) -> Optional[int]:
    """Integer count between 1 and MAX_PASSENGERS, or None"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        count = value
    elif isinstance(value, str) and value.strip().isdecimal():
        try:
            count = int(value.strip())
        except ValueError:
            return None
    else:
        return None

    if count < 1 or count > settings.MAX_PASSENGERS:
        return None
    return count


def parse_total_price(value: Any) -> Optional[Decimal]:
    """Non-negative amount that fits the price column, or None"""
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        return None

    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        return None

    if not amount.is_finite() or amount < 0 or amount > MAX_TOTAL_PRICE:
        return None
    return amount


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()
