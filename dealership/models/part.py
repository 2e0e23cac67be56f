"""
Parts inventory and the vehicle_parts join table (which parts are installed
on which vehicle, and how many).
"""

from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric, String, Text
from dealership.database import Base


class Part(Base):
    __tablename__ = "parts"

    part_id = Column(String(50), primary_key=True)
    name = Column(String(200), nullable=False)
    description = Column(Text)
    category = Column(String(100))
    part_number = Column(String(100), index=True)
    price = Column(Numeric(10, 2))
    quantity_in_stock = Column(Integer, default=0, nullable=False)
    reorder_threshold = Column(Integer)
    reorder_quantity = Column(Integer)
    supplier_id = Column(String(50))

    def __repr__(self):
        return f"<Part {self.part_id} {self.name} stock={self.quantity_in_stock}>"


class VehiclePart(Base):
    __tablename__ = "vehicle_parts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    vehicle_id = Column(String(20), ForeignKey("vehicles.vehicle_id", ondelete="CASCADE"), nullable=False, index=True)
    part_id = Column(String(50), ForeignKey("parts.part_id", ondelete="CASCADE"), nullable=False, index=True)
    quantity = Column(Integer, default=1, nullable=False)
    installed_date = Column(Date)

    def __repr__(self):
        return f"<VehiclePart vehicle={self.vehicle_id} part={self.part_id} qty={self.quantity}>"
