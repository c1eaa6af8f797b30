from decimal import Decimal

# Seed catalog loaded on first start; codes and ticket types are stable keys
DEFAULT_STATIONS = [
    {"code": "central", "name": "Central Station", "position": 1},
    {"code": "downtown", "name": "Downtown", "position": 2},
    {"code": "university", "name": "University", "position": 3},
    {"code": "mall", "name": "Shopping Mall", "position": 4},
    {"code": "hospital", "name": "City Hospital", "position": 5},
    {"code": "airport", "name": "Airport", "position": 6},
    {"code": "stadium", "name": "Sports Stadium", "position": 7},
    {"code": "park", "name": "City Park", "position": 8},
]

DEFAULT_PRICES = [
    {"ticket_type": "regular", "price": Decimal("2.50"), "description": "Standard fare"},
    {"ticket_type": "student", "price": Decimal("1.50"), "description": "Student discount fare"},
    {"ticket_type": "senior", "price": Decimal("1.75"), "description": "Senior citizen fare"},
    {"ticket_type": "day-pass", "price": Decimal("8.00"), "description": "Unlimited rides for one day"},
]
