from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Optional
from dealership.models.sale import PaymentMethod


class SaleCreate(BaseModel):
    vehicle_id: str
    customer_id: str
    sale_date: date
    sale_price: float = Field(ge=0)
    payment_method: PaymentMethod
    finance_term: Optional[int] = Field(default=None, gt=0)   # months
    notes: Optional[str] = None


class SaleOut(SaleCreate):
    sale_id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
