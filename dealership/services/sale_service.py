"""
Sales: record a purchase and read it back.

Recording a sale does not touch the vehicle's status; marking a vehicle as
sold is a separate vehicle edit.
"""

from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from dealership.database import commit_or_raise
from dealership.errors import NotFoundError, ValidationError
from dealership.models.sale import PaymentMethod, Sale
from dealership.schemas.sale import SaleCreate
from dealership.services.customer_service import get_customer
from dealership.services.id_generator import next_id
from dealership.services.vehicle_service import get_vehicle
from dealership.utils.logger import get_logger

logger = get_logger(__name__)


def get_sale(db: Session, sale_id: str) -> Sale:
    sale = db.query(Sale).filter(Sale.sale_id == sale_id).first()
    if not sale:
        raise NotFoundError("Sale not found")
    return sale


def list_sales(db: Session, customer_id: Optional[str] = None) -> list[Sale]:
    q = db.query(Sale)
    if customer_id:
        q = q.filter(Sale.customer_id == customer_id)
    return q.order_by(func.length(Sale.sale_id), Sale.sale_id).all()


def create_sale(db: Session, data: SaleCreate) -> Sale:
    if data.payment_method == PaymentMethod.FINANCE and not data.finance_term:
        raise ValidationError("finance_term is required when payment_method is finance")

    get_vehicle(db, data.vehicle_id)
    get_customer(db, data.customer_id)

    fields = data.model_dump()
    if data.payment_method != PaymentMethod.FINANCE:
        fields["finance_term"] = None

    sale = Sale(sale_id=next_id(db, "sale"), **fields)
    db.add(sale)
    commit_or_raise(db, "Sale could not be recorded: identifier already in use")
    db.refresh(sale)
    logger.info(
        f"Sale {sale.sale_id} recorded: vehicle {sale.vehicle_id} → customer {sale.customer_id} "
        f"({sale.payment_method.value}, {sale.sale_price})"
    )
    return sale
