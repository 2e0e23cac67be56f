"""
Parts inventory and vehicle-part links.
Part identifiers are chosen by the caller; link rows use a plain integer id.
"""

from typing import Optional
from sqlalchemy.orm import Session
from dealership.database import commit_or_raise
from dealership.errors import ConflictError, NotFoundError
from dealership.models.part import Part, VehiclePart
from dealership.schemas.part import PartCreate, PartFields, VehiclePartIn
from dealership.services.vehicle_service import get_vehicle
from dealership.utils.logger import get_logger

logger = get_logger(__name__)


# ── Parts ────────────────────────────────────────────────────────────────────

def get_part(db: Session, part_id: str) -> Part:
    part = db.query(Part).filter(Part.part_id == part_id).first()
    if not part:
        raise NotFoundError("Part not found")
    return part


def list_parts(db: Session, low_stock: bool = False) -> list[Part]:
    """With low_stock, only parts at or below their reorder threshold."""
    q = db.query(Part)
    if low_stock:
        q = q.filter(
            Part.reorder_threshold.isnot(None),
            Part.quantity_in_stock <= Part.reorder_threshold,
        )
    return q.order_by(Part.part_id).all()


def create_part(db: Session, data: PartCreate) -> Part:
    if db.query(Part).filter(Part.part_id == data.part_id).first():
        raise ConflictError(f"Part {data.part_id} already exists")
    part = Part(**data.model_dump())
    db.add(part)
    commit_or_raise(db, f"Part {data.part_id} already exists")
    db.refresh(part)
    logger.info(f"Part {part.part_id} added: {part.name} (stock={part.quantity_in_stock})")
    return part


def update_part(db: Session, part_id: str, data: PartFields) -> Part:
    part = get_part(db, part_id)
    for field, value in data.model_dump().items():
        setattr(part, field, value)
    commit_or_raise(db)
    db.refresh(part)
    logger.info(f"Part {part_id} updated")
    return part


def delete_part(db: Session, part_id: str) -> Part:
    part = get_part(db, part_id)
    db.delete(part)
    commit_or_raise(db, f"Part {part_id} is still installed on a vehicle")
    logger.info(f"Part {part_id} deleted")
    return part


# ── Vehicle ↔ part links ─────────────────────────────────────────────────────

def get_vehicle_part(db: Session, link_id: int) -> VehiclePart:
    link = db.query(VehiclePart).filter(VehiclePart.id == link_id).first()
    if not link:
        raise NotFoundError("Vehicle part not found")
    return link


def list_vehicle_parts(db: Session, vehicle_id: Optional[str] = None) -> list[VehiclePart]:
    q = db.query(VehiclePart)
    if vehicle_id:
        q = q.filter(VehiclePart.vehicle_id == vehicle_id)
    return q.order_by(VehiclePart.id).all()


def create_vehicle_part(db: Session, data: VehiclePartIn) -> VehiclePart:
    get_vehicle(db, data.vehicle_id)
    get_part(db, data.part_id)
    link = VehiclePart(**data.model_dump())
    db.add(link)
    commit_or_raise(db)
    db.refresh(link)
    logger.info(f"Part {link.part_id} x{link.quantity} linked to vehicle {link.vehicle_id}")
    return link


def update_vehicle_part(db: Session, link_id: int, data: VehiclePartIn) -> VehiclePart:
    link = get_vehicle_part(db, link_id)
    get_vehicle(db, data.vehicle_id)
    get_part(db, data.part_id)
    for field, value in data.model_dump().items():
        setattr(link, field, value)
    commit_or_raise(db)
    db.refresh(link)
    return link


def delete_vehicle_part(db: Session, link_id: int) -> VehiclePart:
    link = get_vehicle_part(db, link_id)
    db.delete(link)
    commit_or_raise(db)
    logger.info(f"Vehicle part link {link_id} removed")
    return link
