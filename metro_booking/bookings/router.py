import logging
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import Any, Dict, Optional

from metro_booking.config import settings
from metro_booking.database import get_db
from metro_booking.bookings.schemas import (
    BookingCreateRequest, BookingCreateResponse, BookingResponse,
    BookingListResponse, BookingCancelResponse
)
from metro_booking.bookings.booking_service import BookingService
from metro_booking.exceptions import (
    BookingValidationError, BookingNotFoundError, BookingNotCancellableError,
    DuplicateBookingIdError, StoreUnavailableError
)
from metro_booking.models import Booking

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("", response_model=BookingCreateResponse, status_code=status.HTTP_201_CREATED)
def create_booking(
    request: BookingCreateRequest,
    db: Session = Depends(get_db)
):
    """Create a new booking"""

    booking_service = BookingService(db)

    try:
        booking = booking_service.create_booking(request)
    except BookingValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.to_detail()
        )
    except (DuplicateBookingIdError, StoreUnavailableError) as e:
        logger.error("Booking creation failed: %s", e.message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create booking"
        )

    return {"success": True, "booking": serialize_booking(booking)}

@router.get("", response_model=BookingListResponse)
def list_bookings(
    page: Optional[str] = Query(None, description="Page number, starting at 1"),
    limit: Optional[str] = Query(None, description="Bookings per page"),
    db: Session = Depends(get_db)
):
    """List bookings, newest first"""

    booking_service = BookingService(db)
    page_number = parse_page_param(page, settings.DEFAULT_PAGE)
    page_size = parse_page_param(limit, settings.DEFAULT_PAGE_SIZE)

    try:
        result = booking_service.list_bookings(page_number, page_size)
    except StoreUnavailableError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )

    return {
        "bookings": [serialize_booking(booking) for booking in result.items],
        "pagination": {
            "page": result.page,
            "limit": result.page_size,
            "total": result.total_count,
            "pages": result.total_pages
        }
    }

@router.get("/{booking_id}", response_model=BookingResponse)
def get_booking(
    booking_id: str,
    db: Session = Depends(get_db)
):
    """Get booking details by ID"""

    booking_service = BookingService(db)

    try:
        booking = booking_service.get_booking(booking_id)
    except BookingNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )
    except StoreUnavailableError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )

    return serialize_booking(booking)

@router.put("/{booking_id}/cancel", response_model=BookingCancelResponse)
def cancel_booking(
    booking_id: str,
    db: Session = Depends(get_db)
):
    """Cancel an active booking"""

    booking_service = BookingService(db)

    try:
        booking_service.cancel_booking(booking_id)
    except BookingNotCancellableError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )
    except StoreUnavailableError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to cancel booking"
        )

    return {"success": True, "message": "Booking cancelled successfully"}


def parse_page_param(value: Optional[str], default: int) -> int:
    """Positive integer query parameter; anything else falls back to the default"""
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number >= 1 else default


def serialize_booking(booking: Booking) -> Dict[str, Any]:
    return {
        "id": booking.id,
        "from_station": booking.from_station,
        "to_station": booking.to_station,
        "travel_date": booking.travel_date,
        "travel_time": booking.travel_time,
        "passengers": booking.passengers,
        "ticket_type": booking.ticket_type,
        "total_price": booking.total_price,
        "qr_payload": booking.qr_payload,
        "qr_code": booking.qr_code,
        "status": booking.status,
        "created_at": booking.created_at,
        "updated_at": booking.updated_at
    }
