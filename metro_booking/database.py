import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from metro_booking.config import settings

logger = logging.getLogger(__name__)


def _engine_kwargs(url: str) -> dict:
    """Engine options that keep every store call bounded in time"""
    if url.startswith("sqlite"):
        kwargs = {
            "connect_args": {
                "check_same_thread": False,
                "timeout": settings.DB_TIMEOUT_SECONDS,
            }
        }
        # In-memory databases live inside one connection
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return kwargs

    return {
        "pool_pre_ping": True,
        "pool_timeout": settings.DB_TIMEOUT_SECONDS,
        "connect_args": {"connect_timeout": settings.DB_TIMEOUT_SECONDS},
    }


engine = create_engine(settings.database_url, **_engine_kwargs(settings.database_url))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """FastAPI dependency yielding a request-scoped session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(seed: bool = True):
    """Create tables and, optionally, seed the station and price catalog"""
    # Imported for its side effect of registering the tables on Base
    from metro_booking import models  # noqa: F401
    from metro_booking.stations.service import ReferenceDataService

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")

    if not seed:
        return

    db = SessionLocal()
    try:
        ReferenceDataService.seed_reference_data(db)
    finally:
        db.close()
