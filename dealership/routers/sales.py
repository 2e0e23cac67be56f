"""Sales: record purchases and list them"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from dealership.database import get_db
from dealership.dependencies import ensure_self_or_admin, get_current_claims
from dealership.schemas.sale import SaleCreate, SaleOut
from dealership.services import sale_service
from dealership.services.security import Claims

router = APIRouter()


@router.post("/sales/add", response_model=SaleOut, status_code=status.HTTP_201_CREATED,
             summary="Record a sale")
def add_sale(body: SaleCreate, db: Session = Depends(get_db),
             claims: Claims = Depends(get_current_claims)):
    """Admins may record any sale; customers only purchases for themselves."""
    ensure_self_or_admin(claims, body.customer_id)
    return sale_service.create_sale(db, body)


@router.get("/sales", response_model=list[SaleOut], summary="List sales")
def list_sales(db: Session = Depends(get_db), claims: Claims = Depends(get_current_claims)):
    """Admins see every sale, customers only their own."""
    customer_id = None if claims.is_admin else claims.customer_id
    return sale_service.list_sales(db, customer_id)


@router.get("/sales/{sale_id}", response_model=SaleOut, summary="Get one sale")
def get_sale(sale_id: str, db: Session = Depends(get_db), claims: Claims = Depends(get_current_claims)):
    sale = sale_service.get_sale(db, sale_id)
    ensure_self_or_admin(claims, sale.customer_id)
    return sale
