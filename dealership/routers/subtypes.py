"""
Category routes: /cars, /sedans, /suvs, /trucks.
The four tables share one set of handlers, built per model.
"""

from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from dealership.database import get_db
from dealership.dependencies import require_admin
from dealership.models.vehicle_subtype import Car, Sedan, Suv, Truck
from dealership.schemas.vehicle_subtype import (
    CarIn, CarOut, SedanIn, SedanOut, SuvIn, SuvOut, TruckIn, TruckOut,
)
from dealership.services import subtype_service
from dealership.services.security import Claims


def build_subtype_router(model, schema_in, schema_out, prefix: str) -> APIRouter:
    router = APIRouter()
    name = model.display_name
    key = name.lower()

    @router.get(prefix, response_model=list[schema_out], summary=f"List {name} records")
    def list_records(vehicle_id: Optional[str] = None, db: Session = Depends(get_db)):
        return subtype_service.list_subtypes(db, model, vehicle_id)

    @router.get(f"{prefix}/{{record_id}}", response_model=schema_out, summary=f"Get one {name} record")
    def get_record(record_id: int, db: Session = Depends(get_db)):
        return subtype_service.get_subtype(db, model, record_id)

    @router.post(f"{prefix}/add", response_model=schema_out, status_code=status.HTTP_201_CREATED,
                 summary=f"Add a {name} record (admin)")
    def add_record(body: schema_in, db: Session = Depends(get_db), _: Claims = Depends(require_admin)):
        return subtype_service.create_subtype(db, model, body)

    @router.put(f"{prefix}/edit/{{record_id}}", response_model=schema_out, summary=f"Replace a {name} record (admin)")
    def edit_record(record_id: int, body: schema_in, db: Session = Depends(get_db),
                    _: Claims = Depends(require_admin)):
        return subtype_service.update_subtype(db, model, record_id, body)

    @router.delete(f"{prefix}/delete/{{record_id}}", summary=f"Delete a {name} record (admin)")
    def delete_record(record_id: int, db: Session = Depends(get_db), _: Claims = Depends(require_admin)):
        record = subtype_service.delete_subtype(db, model, record_id)
        return {"message": f"{name} deleted successfully", key: schema_out.model_validate(record)}

    return router


cars_router = build_subtype_router(Car, CarIn, CarOut, "/cars")
sedans_router = build_subtype_router(Sedan, SedanIn, SedanOut, "/sedans")
suvs_router = build_subtype_router(Suv, SuvIn, SuvOut, "/suvs")
trucks_router = build_subtype_router(Truck, TruckIn, TruckOut, "/trucks")
