"""
Vehicle record service: create / read / list / replace / delete.
Used by the vehicles router, and by the subtype, part and sale services to
check that a referenced vehicle exists.
"""

from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from dealership.database import commit_or_raise
from dealership.errors import ConflictError, NotFoundError, ValidationError
from dealership.models.vehicle import Vehicle, VehicleStatus
from dealership.schemas.vehicle import VehicleIn
from dealership.services.id_generator import next_id
from dealership.utils.logger import get_logger

logger = get_logger(__name__)

ALL_STATUSES = "All"


def get_vehicle(db: Session, vehicle_id: str) -> Vehicle:
    vehicle = db.query(Vehicle).filter(Vehicle.vehicle_id == vehicle_id).first()
    if not vehicle:
        raise NotFoundError("Vehicle not found")
    return vehicle


def list_vehicles(db: Session, status: Optional[str] = None) -> list[Vehicle]:
    """All vehicles, or only those in `status`. None and "All" both mean no filter."""
    q = db.query(Vehicle)
    if status and status != ALL_STATUSES:
        try:
            wanted = VehicleStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown vehicle status: {status}")
        q = q.filter(Vehicle.status == wanted)
    return q.order_by(func.length(Vehicle.vehicle_id), Vehicle.vehicle_id).all()


def create_vehicle(db: Session, data: VehicleIn) -> Vehicle:
    if db.query(Vehicle).filter(Vehicle.vin == data.vin).first():
        raise ConflictError(f"VIN {data.vin} already registered")

    vehicle = Vehicle(vehicle_id=next_id(db, "vehicle"), **data.model_dump())
    db.add(vehicle)
    commit_or_raise(db, f"Vehicle with VIN {data.vin} already exists")
    db.refresh(vehicle)
    logger.info(f"Vehicle {vehicle.vehicle_id} added: {vehicle.year} {vehicle.make} {vehicle.model}")
    return vehicle


def update_vehicle(db: Session, vehicle_id: str, data: VehicleIn) -> Vehicle:
    """Replace every field with what was submitted; omitted optionals become null."""
    vehicle = get_vehicle(db, vehicle_id)
    for field, value in data.model_dump().items():
        setattr(vehicle, field, value)
    commit_or_raise(db, f"VIN {data.vin} already registered")
    db.refresh(vehicle)
    logger.info(f"Vehicle {vehicle_id} updated (status={vehicle.status.value})")
    return vehicle


def delete_vehicle(db: Session, vehicle_id: str) -> Vehicle:
    vehicle = get_vehicle(db, vehicle_id)
    db.delete(vehicle)
    commit_or_raise(db, f"Vehicle {vehicle_id} is still referenced by other records")
    logger.info(f"Vehicle {vehicle_id} deleted")
    return vehicle
