from pydantic import BaseModel, Field
from typing import Optional


class VehicleSubtypeIn(BaseModel):
    vehicle_id: str
    body_type: Optional[str] = None
    fuel_type: Optional[str] = None
    transmission: Optional[str] = None
    mileage: Optional[int] = Field(default=None, ge=0)
    engine_size: Optional[float] = Field(default=None, ge=0)


class VehicleSubtypeOut(VehicleSubtypeIn):
    id: int

    class Config:
        from_attributes = True


class CarIn(VehicleSubtypeIn):
    pass


class CarOut(VehicleSubtypeOut):
    pass


class SedanIn(VehicleSubtypeIn):
    luxury_level: Optional[str] = None


class SedanOut(VehicleSubtypeOut):
    luxury_level: Optional[str] = None


class SuvIn(VehicleSubtypeIn):
    seating_capacity: Optional[int] = Field(default=None, ge=1)
    cargo_capacity: Optional[float] = None
    ground_clearance: Optional[float] = None
    awd_4wd: Optional[bool] = None


class SuvOut(VehicleSubtypeOut):
    seating_capacity: Optional[int] = None
    cargo_capacity: Optional[float] = None
    ground_clearance: Optional[float] = None
    awd_4wd: Optional[bool] = None


class TruckIn(VehicleSubtypeIn):
    bed_length: Optional[float] = None
    towing_capacity: Optional[int] = Field(default=None, ge=0)
    payload_capacity: Optional[int] = Field(default=None, ge=0)
    cab_type: Optional[str] = None


class TruckOut(VehicleSubtypeOut):
    bed_length: Optional[float] = None
    towing_capacity: Optional[int] = None
    payload_capacity: Optional[int] = None
    cab_type: Optional[str] = None
