from pydantic import BaseModel, Field
from decimal import Decimal
from typing import Optional

class StationSummary(BaseModel):
    code: str
    name: str
    position: int

    class Config:
        from_attributes = True

class PriceSummary(BaseModel):
    ticket_type: str = Field(..., alias="ticketType")
    price: Decimal
    description: Optional[str] = None

    class Config:
        from_attributes = True
        populate_by_name = True
