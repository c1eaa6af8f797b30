from typing import Any, Dict, Optional


class MetroBookingException(Exception):
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


# Client input errors


class BookingValidationError(MetroBookingException):
    """Rejected booking request; carries the offending field when there is one"""

    def __init__(self, message: str, code: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message, code=code)

    def to_detail(self) -> Dict[str, Any]:
        return {
            "error_code": self.code,
            "error_message": self.message,
            "field": self.field,
        }


class MissingFieldError(BookingValidationError):
    def __init__(self, field: str):
        super().__init__(f"Missing required field: {field}", code="MISSING_FIELD", field=field)


class SameStationError(BookingValidationError):
    def __init__(self, message: str = "From and to stations must be different"):
        super().__init__(message, code="SAME_STATION", field="to")


class PastDateError(BookingValidationError):
    def __init__(self, message: str = "Booking date cannot be in the past"):
        super().__init__(message, code="PAST_DATE", field="date")


class UnknownStationError(BookingValidationError):
    def __init__(self, field: str, code_value: str):
        super().__init__(f"Unknown station: {code_value}", code="UNKNOWN_STATION", field=field)


class UnknownTicketTypeError(BookingValidationError):
    def __init__(self, ticket_type: str):
        super().__init__(
            f"Unknown ticket type: {ticket_type}", code="UNKNOWN_TICKET_TYPE", field="ticketType"
        )


class InvalidPassengerCountError(BookingValidationError):
    def __init__(self, message: str = "Passenger count must be a positive integer"):
        super().__init__(message, code="INVALID_PASSENGER_COUNT", field="passengers")


class InvalidTotalPriceError(BookingValidationError):
    def __init__(self, message: str = "Total price must be a non-negative amount"):
        super().__init__(message, code="INVALID_TOTAL_PRICE", field="totalPrice")


# Store and lifecycle errors


class DuplicateBookingIdError(MetroBookingException):
    def __init__(self, booking_id: str):
        self.booking_id = booking_id
        super().__init__(f"Booking id already exists: {booking_id}", code="DUPLICATE_ID")


class BookingNotFoundError(MetroBookingException):
    def __init__(self, message: str = "Booking not found"):
        super().__init__(message, code="NOT_FOUND")


class BookingNotCancellableError(MetroBookingException):
    def __init__(self, message: str = "Booking not found or already cancelled"):
        super().__init__(message, code="NOT_FOUND_OR_ALREADY_CANCELLED")


class StoreUnavailableError(MetroBookingException):
    def __init__(self, message: str = "Booking store is unavailable"):
        super().__init__(message, code="STORE_UNAVAILABLE")


class QRCodeEncodeError(MetroBookingException):
    def __init__(self, message: str = "QR code generation failed"):
        super().__init__(message, code="ENCODE_FAILURE")
