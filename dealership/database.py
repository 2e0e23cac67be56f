"""
Database connection, session management, and table creation.
Uses SQLAlchemy; PostgreSQL in production, SQLite accepted for local runs.
All models are imported in create_tables() so one call creates every table.
"""

from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from dealership.config import settings
from dealership.errors import ConflictError, DataError
from dealership.utils.logger import get_logger

logger = get_logger(__name__)

_engine_options = {
    "pool_pre_ping": True,       # Auto-reconnect if DB connection drops
    "echo": False,               # Set True to log all SQL queries (debug only)
}
if settings.DATABASE_URL.startswith("sqlite"):
    _engine_options["connect_args"] = {"check_same_thread": False}
else:
    _engine_options.update(pool_size=10, max_overflow=20)

engine = create_engine(settings.DATABASE_URL, **_engine_options)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """FastAPI dependency: yields a DB session and closes it after request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def commit_or_raise(db: Session, conflict_message: str = "Record already exists"):
    """
    Commit the current transaction. On failure roll back and translate:
    unique/foreign-key violations become ConflictError, anything else DataError.
    """
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Integrity violation: {e.orig}")
        raise ConflictError(conflict_message) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error on commit: {e}")
        raise DataError(str(e)) from e


def create_tables():
    """
    Creates all DB tables on startup. Safe to call multiple times.
    Import all models here so SQLAlchemy knows about them.
    """
    from dealership.models.vehicle import Vehicle                          # noqa
    from dealership.models.vehicle_subtype import Car, Sedan, Suv, Truck  # noqa
    from dealership.models.part import Part, VehiclePart                   # noqa
    from dealership.models.customer import Customer                        # noqa
    from dealership.models.sale import Sale                                # noqa
    from dealership.models.id_counter import IdCounter                     # noqa

    Base.metadata.create_all(bind=engine)
