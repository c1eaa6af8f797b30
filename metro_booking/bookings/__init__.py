"""
Booking Module

Booking lifecycle for the metro booking service: a request is validated,
priced, given an id and a QR code, and stored as an active booking that
can later be looked up, listed or cancelled.

Key Components:
- validation.py: ordered checks a booking request must pass
- fare_service.py: fare calculation from the active price catalog
- id_generator.py: fixed-width booking ids from clock and random digits
- repository.py: durable booking store with atomic insert and conditional cancel
- booking_service.py: creation flow with bounded retry on id collisions
- router.py: FastAPI endpoints for booking management
- schemas.py: Pydantic models for booking requests and responses
"""

from .router import router
from .booking_service import BookingService
from .fare_service import FareCalculationService
from .repository import BookingRepository
from .validation import BookingValidator
from .id_generator import generate_booking_id
from .schemas import (
    BookingCreateRequest, BookingResponse, BookingCreateResponse,
    BookingListResponse, BookingCancelResponse, BookingStatus, BookingPage
)

__all__ = [
    "router",
    "BookingService",
    "FareCalculationService",
    "BookingRepository",
    "BookingValidator",
    "generate_booking_id",
    "BookingCreateRequest",
    "BookingResponse",
    "BookingCreateResponse",
    "BookingListResponse",
    "BookingCancelResponse",
    "BookingStatus",
    "BookingPage"
]
