"""Vehicle inventory: CRUD over the vehicles table"""

from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from dealership.database import get_db
from dealership.dependencies import require_admin
from dealership.schemas.vehicle import VehicleIn, VehicleOut
from dealership.services import vehicle_service
from dealership.services.security import Claims

router = APIRouter()


@router.get("/vehicles", response_model=list[VehicleOut], summary="List vehicles, optionally by status")
def list_vehicles(status: Optional[str] = None, db: Session = Depends(get_db)):
    """status: in_stock | sold | maintenance | All (default: all)."""
    return vehicle_service.list_vehicles(db, status)


@router.post("/vehicles/add", response_model=VehicleOut, status_code=status.HTTP_201_CREATED,
             summary="Add a vehicle (admin)")
def add_vehicle(body: VehicleIn, db: Session = Depends(get_db), _: Claims = Depends(require_admin)):
    return vehicle_service.create_vehicle(db, body)


@router.put("/vehicles/edit/{vehicle_id}", response_model=VehicleOut, summary="Replace a vehicle (admin)")
def edit_vehicle(vehicle_id: str, body: VehicleIn, db: Session = Depends(get_db),
                 _: Claims = Depends(require_admin)):
    return vehicle_service.update_vehicle(db, vehicle_id, body)


@router.get("/vehicles/{vehicle_id}", response_model=VehicleOut, summary="Get one vehicle")
def get_vehicle(vehicle_id: str, db: Session = Depends(get_db)):
    return vehicle_service.get_vehicle(db, vehicle_id)


@router.delete("/vehicles/delete/{vehicle_id}", summary="Delete a vehicle (admin)")
def delete_vehicle(vehicle_id: str, db: Session = Depends(get_db), _: Claims = Depends(require_admin)):
    vehicle = vehicle_service.delete_vehicle(db, vehicle_id)
    return {"message": "Vehicle deleted successfully", "vehicle": VehicleOut.model_validate(vehicle)}
