"""
Pytest configuration and shared fixtures
"""

import os
from datetime import date, timedelta

import pytest

# Must be set before the application modules are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_ON_STARTUP"] = "true"

from fastapi.testclient import TestClient

from metro_booking.database import Base, SessionLocal, engine, init_db
from metro_booking.bookings.schemas import BookingCreateRequest


@pytest.fixture(autouse=True)
def reset_database():
    """Fresh tables and the default catalog for every test"""
    Base.metadata.drop_all(bind=engine)
    init_db()
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    from metro_booking.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def tomorrow():
    return date.today() + timedelta(days=1)


@pytest.fixture
def yesterday():
    return date.today() - timedelta(days=1)


@pytest.fixture
def booking_payload(tomorrow):
    """JSON body of a valid two-passenger regular booking"""
    return {
        "from": "central",
        "to": "airport",
        "date": tomorrow.isoformat(),
        "time": "09:00",
        "passengers": 2,
        "ticketType": "regular",
    }


@pytest.fixture
def booking_request(booking_payload):
    return BookingCreateRequest(**booking_payload)
