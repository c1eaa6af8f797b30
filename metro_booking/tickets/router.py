from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from metro_booking.database import get_db
from metro_booking.exceptions import StoreUnavailableError
from metro_booking.tickets.schemas import (
    TicketValidationRequest, TicketValidationResponse, TicketValidationStatus
)
from metro_booking.tickets.service import TicketValidationService

router = APIRouter()

_STATUS_CODES = {
    TicketValidationStatus.VALID: status.HTTP_200_OK,
    TicketValidationStatus.EXPIRED: status.HTTP_400_BAD_REQUEST,
    TicketValidationStatus.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

@router.post("/validate", response_model=TicketValidationResponse)
def validate_ticket(
    request: TicketValidationRequest,
    db: Session = Depends(get_db)
):
    """Validate a ticket scanned from its QR code"""

    if not request.booking_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Booking ID is required"
        )

    ticket_service = TicketValidationService(db)

    try:
        result = ticket_service.validate_ticket(request.booking_id)
    except StoreUnavailableError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )

    response = TicketValidationResponse(
        valid=result.is_valid,
        booking=result.booking,
        error=result.reason
    )
    return JSONResponse(
        status_code=_STATUS_CODES[result.status],
        content=jsonable_encoder(response, by_alias=True, exclude_none=True)
    )
