"""
Vehicles table: every unit on the lot, keyed by a sequential "V<n>" identifier.
Subtype tables (cars, sedans, suvs, trucks) and sales reference it by vehicle_id.
"""

import enum
from sqlalchemy import Column, Date, DateTime, Enum as SQLEnum, Integer, Numeric, String
from sqlalchemy.sql import func
from dealership.database import Base


class VehicleStatus(str, enum.Enum):
    IN_STOCK = "in_stock"
    SOLD = "sold"
    MAINTENANCE = "maintenance"


class Vehicle(Base):
    __tablename__ = "vehicles"

    vehicle_id = Column(String(20), primary_key=True)
    make = Column(String(100), nullable=False)
    model = Column(String(100), nullable=False)
    year = Column(Integer, nullable=False)
    vin = Column(String(17), unique=True, nullable=False, index=True)
    purchase_price = Column(Numeric(12, 2))
    price = Column(Numeric(12, 2), nullable=False)
    date_acquired = Column(Date)
    status = Column(
        SQLEnum(VehicleStatus, values_callable=lambda e: [m.value for m in e], name="vehicle_status"),
        default=VehicleStatus.IN_STOCK,
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Vehicle {self.vehicle_id} {self.year} {self.make} {self.model} status={self.status}>"
