from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Optional
from dealership.models.vehicle import VehicleStatus


class VehicleIn(BaseModel):
    """Body for both create and edit; edits replace the whole record."""
    make: str = Field(min_length=1)
    model: str = Field(min_length=1)
    year: int = Field(ge=1886)
    vin: str = Field(min_length=1, max_length=17)
    purchase_price: Optional[float] = Field(default=None, ge=0)
    price: float = Field(ge=0)
    date_acquired: Optional[date] = None
    status: VehicleStatus = VehicleStatus.IN_STOCK


class VehicleOut(BaseModel):
    vehicle_id: str
    make: str
    model: str
    year: int
    vin: str
    purchase_price: Optional[float]
    price: float
    date_acquired: Optional[date]
    status: VehicleStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
