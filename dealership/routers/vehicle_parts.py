"""Parts installed on vehicles: /vehicleParts"""

from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from dealership.database import get_db
from dealership.dependencies import require_admin
from dealership.schemas.part import VehiclePartIn, VehiclePartOut
from dealership.services import part_service
from dealership.services.security import Claims

router = APIRouter()


@router.get("/vehicleParts", response_model=list[VehiclePartOut], summary="List vehicle-part links")
def list_links(vehicle_id: Optional[str] = None, db: Session = Depends(get_db)):
    return part_service.list_vehicle_parts(db, vehicle_id)


@router.get("/vehicleParts/{link_id}", response_model=VehiclePartOut, summary="Get one vehicle-part link")
def get_link(link_id: int, db: Session = Depends(get_db)):
    return part_service.get_vehicle_part(db, link_id)


@router.post("/vehicleParts/add", response_model=VehiclePartOut, status_code=status.HTTP_201_CREATED,
             summary="Install a part on a vehicle (admin)")
def add_link(body: VehiclePartIn, db: Session = Depends(get_db), _: Claims = Depends(require_admin)):
    return part_service.create_vehicle_part(db, body)


@router.put("/vehicleParts/edit/{link_id}", response_model=VehiclePartOut, summary="Replace a link (admin)")
def edit_link(link_id: int, body: VehiclePartIn, db: Session = Depends(get_db),
              _: Claims = Depends(require_admin)):
    return part_service.update_vehicle_part(db, link_id, body)


@router.delete("/vehicleParts/delete/{link_id}", summary="Remove a part from a vehicle (admin)")
def delete_link(link_id: int, db: Session = Depends(get_db), _: Claims = Depends(require_admin)):
    link = part_service.delete_vehicle_part(db, link_id)
    return {"message": "Vehicle part deleted successfully", "vehicle_part": VehiclePartOut.model_validate(link)}
