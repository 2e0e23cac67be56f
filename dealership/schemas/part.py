from pydantic import BaseModel, Field
from datetime import date
from typing import Optional


class PartFields(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    part_number: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    quantity_in_stock: int = Field(default=0, ge=0)
    reorder_threshold: Optional[int] = Field(default=None, ge=0)
    reorder_quantity: Optional[int] = Field(default=None, ge=0)
    supplier_id: Optional[str] = None


class PartCreate(PartFields):
    part_id: str = Field(min_length=1)


class PartOut(PartCreate):
    class Config:
        from_attributes = True


class VehiclePartIn(BaseModel):
    vehicle_id: str
    part_id: str
    quantity: int = Field(default=1, ge=1)
    installed_date: Optional[date] = None


class VehiclePartOut(VehiclePartIn):
    id: int

    class Config:
        from_attributes = True
