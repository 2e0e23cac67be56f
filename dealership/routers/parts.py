"""Parts inventory: CRUD over the parts table"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from dealership.database import get_db
from dealership.dependencies import require_admin
from dealership.schemas.part import PartCreate, PartFields, PartOut
from dealership.services import part_service
from dealership.services.security import Claims

router = APIRouter()


@router.get("/parts", response_model=list[PartOut], summary="List parts")
def list_parts(low_stock: bool = False, db: Session = Depends(get_db)):
    """low_stock=true returns only parts at or below their reorder threshold."""
    return part_service.list_parts(db, low_stock)


@router.get("/parts/{part_id}", response_model=PartOut, summary="Get one part")
def get_part(part_id: str, db: Session = Depends(get_db)):
    return part_service.get_part(db, part_id)


@router.post("/parts/add", response_model=PartOut, status_code=status.HTTP_201_CREATED,
             summary="Add a part (admin)")
def add_part(body: PartCreate, db: Session = Depends(get_db), _: Claims = Depends(require_admin)):
    return part_service.create_part(db, body)


@router.put("/parts/edit/{part_id}", response_model=PartOut, summary="Replace a part (admin)")
def edit_part(part_id: str, body: PartFields, db: Session = Depends(get_db),
              _: Claims = Depends(require_admin)):
    return part_service.update_part(db, part_id, body)


@router.delete("/parts/delete/{part_id}", summary="Delete a part (admin)")
def delete_part(part_id: str, db: Session = Depends(get_db), _: Claims = Depends(require_admin)):
    part = part_service.delete_part(db, part_id)
    return {"message": "Part deleted successfully", "part": PartOut.model_validate(part)}
