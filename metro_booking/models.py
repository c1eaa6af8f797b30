from datetime import datetime
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Date, Text, Numeric, CheckConstraint
from metro_booking.database import Base

# ================================
# Reference Data
# ================================
class Station(Base):
    __tablename__ = "stations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(50), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    position = Column(Integer, nullable=False)
    active = Column(Boolean, nullable=False, default=True)

class Price(Base):
    __tablename__ = "prices"

    id = Column(Integer, primary_key=True, autoincrement=True)
    ticket_type = Column(String(50), unique=True, nullable=False, index=True)
    price = Column(Numeric(10, 2), nullable=False)
    description = Column(Text)
    active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_prices_price_non_negative"),
    )

# ================================
# Bookings
# ================================
class Booking(Base):
    __tablename__ = "bookings"

    id = Column(String(10), primary_key=True)
    from_station = Column(String(50), nullable=False)
    to_station = Column(String(50), nullable=False)
    travel_date = Column(Date, nullable=False)
    travel_time = Column(String(16), nullable=False)
    passengers = Column(Integer, nullable=False)
    ticket_type = Column(String(50), nullable=False)
    total_price = Column(Numeric(10, 2), nullable=False)
    qr_payload = Column(Text)
    qr_code = Column(Text)
    status = Column(String(20), nullable=False, default="active", index=True)
    created_at = Column(DateTime, nullable=False, default=datetime.now, index=True)
    updated_at = Column(DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)

    __table_args__ = (
        CheckConstraint("from_station <> to_station", name="ck_bookings_distinct_stations"),
        CheckConstraint("passengers >= 1", name="ck_bookings_passengers_positive"),
        CheckConstraint("total_price >= 0", name="ck_bookings_total_price_non_negative"),
    )
