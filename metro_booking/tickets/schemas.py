from pydantic import BaseModel, Field
from typing import Optional
from datetime import date
from enum import Enum

class TicketValidationStatus(str, Enum):
    """Outcome of scanning a ticket"""
    VALID = "valid"
    EXPIRED = "expired"
    NOT_FOUND = "not_found"

class TicketValidationRequest(BaseModel):
    booking_id: Optional[str] = Field(None, alias="bookingId")

    class Config:
        populate_by_name = True

class TicketSummary(BaseModel):
    """What a gate or conductor sees for a valid ticket"""
    id: str
    from_station: str = Field(..., alias="from")
    to_station: str = Field(..., alias="to")
    travel_date: date = Field(..., alias="date")
    travel_time: str = Field(..., alias="time")
    passengers: int
    ticket_type: str = Field(..., alias="ticketType")

    class Config:
        populate_by_name = True

class TicketValidationResult(BaseModel):
    status: TicketValidationStatus
    booking: Optional[TicketSummary] = None
    reason: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.status == TicketValidationStatus.VALID

class TicketValidationResponse(BaseModel):
    valid: bool
    booking: Optional[TicketSummary] = None
    error: Optional[str] = None
