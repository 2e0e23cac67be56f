"""
Sequential human-readable identifiers: V<n> for vehicles, C<n> for customers,
S<n> for sales.

Each class has a row in id_counters that is locked (SELECT ... FOR UPDATE) and
bumped in the caller's transaction, so the counter and the insert it numbers
commit or roll back together. The first time a class is numbered the counter
is seeded from the highest identifier already stored, so existing data keeps
counting up from where it left off. Retired numbers are never handed out again.
"""

import re
from sqlalchemy import func
from sqlalchemy.orm import Session
from dealership.errors import DataError
from dealership.models.customer import Customer
from dealership.models.id_counter import IdCounter
from dealership.models.sale import Sale
from dealership.models.vehicle import Vehicle
from dealership.utils.logger import get_logger

logger = get_logger(__name__)

# entity class -> (prefix, identifier column)
ID_SEQUENCES = {
    "vehicle": ("V", Vehicle.vehicle_id),
    "customer": ("C", Customer.customer_id),
    "sale": ("S", Sale.sale_id),
}


def parse_identifier(identifier: str, prefix: str) -> int:
    """Return the numeric part of `<prefix><digits>`; anything else is a DataError."""
    match = re.fullmatch(re.escape(prefix) + r"(\d+)", identifier or "", flags=re.ASCII)
    if not match:
        raise DataError(f"Malformed identifier {identifier!r}: expected {prefix}<digits>")
    return int(match.group(1))


def last_identifier_value(db: Session, entity_class: str) -> int:
    """
    Numeric suffix of the highest stored identifier for the class, 0 if none.
    Sorting by length first keeps V10 after V9.
    """
    prefix, column = _sequence(entity_class)
    row = db.query(column).order_by(func.length(column).desc(), column.desc()).first()
    if row is None:
        return 0
    return parse_identifier(row[0], prefix)


def next_id(db: Session, entity_class: str) -> str:
    """
    Reserve the next identifier for the class. Does not commit: the caller
    inserts the record and commits both in one transaction.
    """
    prefix, _ = _sequence(entity_class)
    counter = (
        db.query(IdCounter)
        .filter(IdCounter.entity_class == entity_class)
        .with_for_update()
        .first()
    )
    if counter is None:
        seed = last_identifier_value(db, entity_class)
        logger.info(f"Seeding {entity_class} counter at {seed}")
        counter = IdCounter(entity_class=entity_class, last_value=seed)
        db.add(counter)

    counter.last_value = (counter.last_value or 0) + 1
    db.flush()
    return f"{prefix}{counter.last_value}"


def _sequence(entity_class: str):
    try:
        return ID_SEQUENCES[entity_class]
    except KeyError:
        raise ValueError(f"No identifier sequence for entity class {entity_class!r}") from None
