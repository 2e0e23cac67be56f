"""
Record service shared by the four vehicle category tables (cars, sedans,
suvs, trucks). Every function takes the ORM model it operates on.
"""

from typing import Optional
from pydantic import BaseModel
from sqlalchemy.orm import Session
from dealership.database import commit_or_raise
from dealership.errors import NotFoundError
from dealership.services.vehicle_service import get_vehicle
from dealership.utils.logger import get_logger

logger = get_logger(__name__)


def get_subtype(db: Session, model, record_id: int):
    record = db.query(model).filter(model.id == record_id).first()
    if not record:
        raise NotFoundError(f"{model.display_name} not found")
    return record


def list_subtypes(db: Session, model, vehicle_id: Optional[str] = None):
    q = db.query(model)
    if vehicle_id:
        q = q.filter(model.vehicle_id == vehicle_id)
    return q.order_by(model.id).all()


def create_subtype(db: Session, model, data: BaseModel):
    get_vehicle(db, data.vehicle_id)
    record = model(**data.model_dump())
    db.add(record)
    commit_or_raise(db, f"{model.display_name} record conflicts with an existing one")
    db.refresh(record)
    logger.info(f"{model.display_name} {record.id} added for vehicle {record.vehicle_id}")
    return record


def update_subtype(db: Session, model, record_id: int, data: BaseModel):
    record = get_subtype(db, model, record_id)
    get_vehicle(db, data.vehicle_id)
    for field, value in data.model_dump().items():
        setattr(record, field, value)
    commit_or_raise(db, f"{model.display_name} record conflicts with an existing one")
    db.refresh(record)
    logger.info(f"{model.display_name} {record_id} updated")
    return record


def delete_subtype(db: Session, model, record_id: int):
    record = get_subtype(db, model, record_id)
    db.delete(record)
    commit_or_raise(db)
    logger.info(f"{model.display_name} {record_id} deleted")
    return record
