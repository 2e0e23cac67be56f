"""
Sales table: one row per purchase, keyed by a sequential "S<n>" identifier.
Rows are never edited once recorded.
"""

import enum
from sqlalchemy import Column, Date, DateTime, Enum as SQLEnum, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.sql import func
from dealership.database import Base


class PaymentMethod(str, enum.Enum):
    CASH = "cash"
    CREDIT = "credit"
    FINANCE = "finance"


class Sale(Base):
    __tablename__ = "sales"

    sale_id = Column(String(20), primary_key=True)
    vehicle_id = Column(String(20), ForeignKey("vehicles.vehicle_id"), nullable=False, index=True)
    customer_id = Column(String(20), ForeignKey("customers.customer_id"), nullable=False, index=True)
    sale_date = Column(Date, nullable=False)
    sale_price = Column(Numeric(12, 2), nullable=False)
    payment_method = Column(
        SQLEnum(PaymentMethod, values_callable=lambda e: [m.value for m in e], name="payment_method"),
        nullable=False,
    )
    finance_term = Column(Integer)   # months, finance only
    notes = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Sale {self.sale_id} vehicle={self.vehicle_id} customer={self.customer_id}>"
