"""Customer registration, login and profile routes: /user"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from dealership.database import get_db
from dealership.dependencies import ensure_self_or_admin, get_current_claims, require_admin
from dealership.schemas.customer import (
    CustomerOut, CustomerUpdate, LoginRequest, LoginResponse, RegisterRequest, RegisterResponse,
)
from dealership.services import customer_service
from dealership.services.security import Claims, issue_token

router = APIRouter()


@router.post("/user/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED,
             summary="Register a customer")
def register(body: RegisterRequest, db: Session = Depends(get_db)):
    return customer_service.register_customer(db, body)


@router.post("/user/login", response_model=LoginResponse, summary="Log in (admin or customer)")
def login(body: LoginRequest, db: Session = Depends(get_db)):
    claims = customer_service.authenticate(db, body.email, body.password)
    message = "Welcome Admin" if claims.is_admin else "Login successful"
    return {"message": message, "token": issue_token(claims)}


@router.get("/user", response_model=list[CustomerOut], summary="List customers (admin)")
def list_customers(db: Session = Depends(get_db), _: Claims = Depends(require_admin)):
    return customer_service.list_customers(db)


@router.get("/user/{customer_id}", response_model=CustomerOut, summary="Customer profile")
def get_customer(customer_id: str, db: Session = Depends(get_db),
                 claims: Claims = Depends(get_current_claims)):
    ensure_self_or_admin(claims, customer_id)
    return customer_service.get_customer(db, customer_id)


@router.put("/user/edit/{customer_id}", response_model=CustomerOut, summary="Edit customer profile")
def edit_customer(customer_id: str, body: CustomerUpdate, db: Session = Depends(get_db),
                  claims: Claims = Depends(get_current_claims)):
    """Password is optional; leaving it out keeps the current one."""
    ensure_self_or_admin(claims, customer_id)
    return customer_service.update_customer(db, customer_id, body)


@router.delete("/user/delete/{customer_id}", summary="Delete a customer (admin)")
def delete_customer(customer_id: str, db: Session = Depends(get_db),
                    _: Claims = Depends(require_admin)):
    customer = customer_service.delete_customer(db, customer_id)
    return {"message": "User deleted successfully", "user": CustomerOut.model_validate(customer)}
