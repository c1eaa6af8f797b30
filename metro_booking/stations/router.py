import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
from metro_booking.database import get_db
from metro_booking.stations.schemas import StationSummary, PriceSummary
from metro_booking.stations.service import ReferenceDataService

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/stations", response_model=List[StationSummary])
def list_stations(db: Session = Depends(get_db)):
    """Active stations ordered by line position"""
    try:
        stations = ReferenceDataService.list_active_stations(db)
    except SQLAlchemyError:
        logger.exception("Failed to load stations")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )

    return [
        {"code": station.code, "name": station.name, "position": station.position}
        for station in stations
    ]

@router.get("/prices", response_model=List[PriceSummary])
def list_prices(db: Session = Depends(get_db)):
    """Active ticket prices"""
    try:
        prices = ReferenceDataService.list_active_prices(db)
    except SQLAlchemyError:
        logger.exception("Failed to load prices")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )

    return [
        {"ticketType": price.ticket_type, "price": price.price, "description": price.description}
        for price in prices
    ]
