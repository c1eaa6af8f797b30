"""
Ticketing Module

Ticket-facing side of a booking:

- qr_service.py: canonical QR payload and PNG data URL rendering
- service.py: ticket validation for gates and conductors
- router.py: FastAPI endpoint for validating scanned tickets
- schemas.py: Pydantic models for validation requests and results
"""

from .router import router
from .qr_service import QRCodeService, build_qr_payload, render_qr_data_url
from .service import TicketValidationService
from .schemas import (
    TicketValidationRequest, TicketValidationResponse, TicketValidationResult,
    TicketValidationStatus, TicketSummary
)

__all__ = [
    "router",
    "QRCodeService",
    "build_qr_payload",
    "render_qr_data_url",
    "TicketValidationService",
    "TicketValidationRequest",
    "TicketValidationResponse",
    "TicketValidationResult",
    "TicketValidationStatus",
    "TicketSummary"
]
