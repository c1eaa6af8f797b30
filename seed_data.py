#!/usr/bin/env python3

from metro_booking.database import Base, SessionLocal, engine
from metro_booking import models  # noqa: F401
from metro_booking.stations.catalog import DEFAULT_STATIONS, DEFAULT_PRICES
from metro_booking.stations.service import ReferenceDataService

def create_seed_data():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()

    try:
        print("🚀 Seeding station and price catalog for Metro Ticket Booking...")

        # Existing codes and ticket types are left as they are
        created = ReferenceDataService.seed_reference_data(db)

        active_stations = ReferenceDataService.list_active_stations(db)
        active_prices = ReferenceDataService.list_active_prices(db)

        print("✅ Catalog is up to date!")
        print(f"Created:")
        print(f"  - {created['stations']} of {len(DEFAULT_STATIONS)} stations")
        print(f"  - {created['prices']} of {len(DEFAULT_PRICES)} prices")
        print(f"Active:")
        print(f"  - {len(active_stations)} stations")
        print(f"  - {len(active_prices)} prices")

    except Exception as e:
        print(f"❌ Error creating seed data: {e}")
        raise
    finally:
        db.close()

if __name__ == "__main__":
    create_seed_data()
