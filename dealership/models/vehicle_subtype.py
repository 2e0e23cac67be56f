"""
Category tables for vehicles. Each row points at a vehicles row and adds
the attributes specific to that body category.
"""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, Numeric, String
from dealership.database import Base


class VehicleSubtypeMixin:
    id = Column(Integer, primary_key=True, autoincrement=True)
    body_type = Column(String(50))
    fuel_type = Column(String(50))
    transmission = Column(String(50))
    mileage = Column(Integer)
    engine_size = Column(Numeric(4, 1))

    def __repr__(self):
        return f"<{type(self).__name__} {self.id} vehicle={self.vehicle_id}>"


class Car(VehicleSubtypeMixin, Base):
    __tablename__ = "cars"
    display_name = "Car"

    vehicle_id = Column(String(20), ForeignKey("vehicles.vehicle_id", ondelete="CASCADE"), nullable=False, index=True)


class Sedan(VehicleSubtypeMixin, Base):
    __tablename__ = "sedans"
    display_name = "Sedan"

    vehicle_id = Column(String(20), ForeignKey("vehicles.vehicle_id", ondelete="CASCADE"), nullable=False, index=True)
    luxury_level = Column(String(50))


class Suv(VehicleSubtypeMixin, Base):
    __tablename__ = "suvs"
    display_name = "SUV"

    vehicle_id = Column(String(20), ForeignKey("vehicles.vehicle_id", ondelete="CASCADE"), nullable=False, index=True)
    seating_capacity = Column(Integer)
    cargo_capacity = Column(Numeric(8, 2))
    ground_clearance = Column(Numeric(6, 2))
    awd_4wd = Column(Boolean)


class Truck(VehicleSubtypeMixin, Base):
    __tablename__ = "trucks"
    display_name = "Truck"

    vehicle_id = Column(String(20), ForeignKey("vehicles.vehicle_id", ondelete="CASCADE"), nullable=False, index=True)
    bed_length = Column(Numeric(6, 2))
    towing_capacity = Column(Integer)
    payload_capacity = Column(Integer)
    cab_type = Column(String(50))
