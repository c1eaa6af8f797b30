from decimal import Decimal, ROUND_HALF_UP
from sqlalchemy.orm import Session

from metro_booking.exceptions import UnknownTicketTypeError
from metro_booking.stations.service import ReferenceDataService

DAY_PASS = "day-pass"
CENTS = Decimal("0.01")

class FareCalculationService:
    """Computes booking totals from the active price catalog"""

    def __init__(self, db: Session):
        self.db = db

    def get_unit_price(self, ticket_type: str) -> Decimal:
        price = ReferenceDataService.get_active_price(self.db, ticket_type)
        if price is None:
            raise UnknownTicketTypeError(ticket_type)
        return Decimal(str(price.price))

    def compute_total(self, ticket_type: str, passenger_count: int) -> Decimal:
        """Day passes are a flat fare per booking; every other type is priced per passenger"""
        unit_price = self.get_unit_price(ticket_type)
        return calculate_total(unit_price, ticket_type, passenger_count)


def calculate_total(unit_price: Decimal, ticket_type: str, passenger_count: int) -> Decimal:
    if ticket_type == DAY_PASS:
        total = unit_price
    else:
        total = unit_price * passenger_count
    return total.quantize(CENTS, rounding=ROUND_HALF_UP)
