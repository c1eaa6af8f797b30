import logging
from sqlalchemy.orm import Session
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from typing import Dict, Iterable, List, Optional

from metro_booking.models import Station, Price
from metro_booking.stations.catalog import DEFAULT_STATIONS, DEFAULT_PRICES

logger = logging.getLogger(__name__)

_INSERT_BY_DIALECT = {
    "sqlite": sqlite_insert,
    "postgresql": pg_insert,
}

class ReferenceDataService:
    @staticmethod
    def list_active_stations(db: Session) -> List[Station]:
        """Active stations in display order"""
        return db.query(Station).filter(
            Station.active == True
        ).order_by(Station.position, Station.code).all()

    @staticmethod
    def list_active_prices(db: Session) -> List[Price]:
        """Active ticket prices"""
        return db.query(Price).filter(
            Price.active == True
        ).order_by(Price.id).all()

    @staticmethod
    def get_active_station(db: Session, code: str) -> Optional[Station]:
        return db.query(Station).filter(
            Station.code == code,
            Station.active == True
        ).first()

    @staticmethod
    def get_active_price(db: Session, ticket_type: str) -> Optional[Price]:
        return db.query(Price).filter(
            Price.ticket_type == ticket_type,
            Price.active == True
        ).first()

    @staticmethod
    def set_station_active(db: Session, code: str, active: bool) -> bool:
        """Administrative (de)activation; returns False for an unknown code"""
        updated = db.query(Station).filter(Station.code == code).update(
            {Station.active: active}, synchronize_session=False
        )
        db.commit()
        return updated > 0

    @staticmethod
    def set_price_active(db: Session, ticket_type: str, active: bool) -> bool:
        """Administrative (de)activation; returns False for an unknown ticket type"""
        updated = db.query(Price).filter(Price.ticket_type == ticket_type).update(
            {Price.active: active}, synchronize_session=False
        )
        db.commit()
        return updated > 0

    @staticmethod
    def seed_reference_data(
        db: Session,
        stations: Optional[Iterable[dict]] = None,
        prices: Optional[Iterable[dict]] = None
    ) -> Dict[str, int]:
        """Insert the catalog, leaving rows whose code or ticket type already exist untouched"""
        station_rows = [dict(row) for row in (stations if stations is not None else DEFAULT_STATIONS)]
        price_rows = [dict(row) for row in (prices if prices is not None else DEFAULT_PRICES)]

        try:
            created = {
                "stations": _insert_missing(db, Station, "code", station_rows),
                "prices": _insert_missing(db, Price, "ticket_type", price_rows),
            }
            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info(
            "Seeded reference data: %d new stations, %d new prices",
            created["stations"], created["prices"]
        )
        return created


def _insert_missing(db: Session, model, key: str, rows: List[dict]) -> int:
    """INSERT ... ON CONFLICT DO NOTHING, with a lookup fallback for other dialects"""
    if not rows:
        return 0

    dialect = db.get_bind().dialect.name
    insert = _INSERT_BY_DIALECT.get(dialect)
    if insert is not None:
        created = 0
        for row in rows:
            stmt = insert(model).values(**row).on_conflict_do_nothing(index_elements=[key])
            created += db.execute(stmt).rowcount
        return created

    column = getattr(model, key)
    existing = {value for (value,) in db.query(column).filter(column.in_([r[key] for r in rows]))}
    missing = [model(**row) for row in rows if row[key] not in existing]
    db.add_all(missing)
    db.flush()
    return len(missing)
