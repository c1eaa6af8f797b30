"""
Reference Data Module

Station and ticket price catalog for the metro booking service:

- service.py: catalog queries, administrative (de)activation and idempotent seeding
- catalog.py: the default station and price catalog
- router.py: FastAPI endpoints for listing stations and prices
- schemas.py: Pydantic models for the public catalog shapes
"""

from .router import router
from .service import ReferenceDataService
from .schemas import StationSummary, PriceSummary

__all__ = [
    "router",
    "ReferenceDataService",
    "StationSummary",
    "PriceSummary"
]
