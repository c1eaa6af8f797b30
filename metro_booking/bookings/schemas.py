from pydantic import BaseModel, Field
from typing import List, Optional, Any
from datetime import datetime, date
from decimal import Decimal
from enum import Enum

class BookingStatus(str, Enum):
    """Booking status enumeration"""
    ACTIVE = "active"
    CANCELLED = "cancelled"

# Request Models
class BookingCreateRequest(BaseModel):
    """Request to book a trip; presence and values are checked by BookingValidator"""
    from_station: Optional[Any] = Field(None, alias="from")
    to_station: Optional[Any] = Field(None, alias="to")
    travel_date: Optional[Any] = Field(None, alias="date")
    travel_time: Optional[Any] = Field(None, alias="time")
    passengers: Optional[Any] = None
    ticket_type: Optional[Any] = Field(None, alias="ticketType")
    total_price: Optional[Any] = Field(None, alias="totalPrice")

    class Config:
        populate_by_name = True

# Response Models
class BookingResponse(BaseModel):
    """Persisted booking"""
    id: str
    from_station: str = Field(..., alias="from")
    to_station: str = Field(..., alias="to")
    travel_date: date = Field(..., alias="date")
    travel_time: str = Field(..., alias="time")
    passengers: int
    ticket_type: str = Field(..., alias="ticketType")
    total_price: Decimal = Field(..., alias="totalPrice")
    qr_payload: Optional[str] = Field(None, alias="qrPayload")
    qr_code: Optional[str] = Field(None, alias="qrCode")
    status: BookingStatus
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True

class BookingCreateResponse(BaseModel):
    success: bool = True
    booking: BookingResponse

class PaginationInfo(BaseModel):
    page: int
    limit: int
    total: int
    pages: int

class BookingListResponse(BaseModel):
    bookings: List[BookingResponse]
    pagination: PaginationInfo

class BookingCancelResponse(BaseModel):
    success: bool = True
    message: str = "Booking cancelled successfully"

# Repository Models
class BookingPage(BaseModel):
    """One page of bookings, newest first"""
    items: List[Any]
    page: int
    page_size: int
    total_count: int
    total_pages: int
