"""
Customer registration, login and profile management.
Admin login is checked against the configured account before the customers
table is consulted; admins never have a customers row.
"""

from email_validator import EmailNotValidError, validate_email
from sqlalchemy import func
from sqlalchemy.orm import Session
from dealership.database import commit_or_raise
from dealership.errors import AuthError, ConflictError, NotFoundError
from dealership.models.customer import Customer
from dealership.schemas.customer import CustomerUpdate, RegisterRequest
from dealership.services.id_generator import next_id
from dealership.services.security import Claims, hash_password, is_admin_login, verify_password
from dealership.utils.logger import get_logger

logger = get_logger(__name__)

LOGIN_FAILED = "Invalid email or password"


def normalize_email(email: str) -> str:
    """The form EmailStr stores on register and edit (domain lowercased)."""
    try:
        return validate_email(email, check_deliverability=False).normalized
    except EmailNotValidError:
        return email


def get_customer(db: Session, customer_id: str) -> Customer:
    customer = db.query(Customer).filter(Customer.customer_id == customer_id).first()
    if not customer:
        raise NotFoundError("User not found")
    return customer


def list_customers(db: Session) -> list[Customer]:
    return db.query(Customer).order_by(func.length(Customer.customer_id), Customer.customer_id).all()


def register_customer(db: Session, data: RegisterRequest) -> Customer:
    if db.query(Customer).filter(Customer.email == data.email).first():
        raise ConflictError("Email already registered")

    customer = Customer(
        customer_id=next_id(db, "customer"),
        username=data.username,
        first_name=data.first_name,
        last_name=data.last_name,
        email=data.email,
        phone=data.phone,
        password_hash=hash_password(data.password),
    )
    db.add(customer)
    commit_or_raise(db, "Email already registered")
    db.refresh(customer)
    logger.info(f"Customer {customer.customer_id} registered ({customer.email})")
    return customer


def authenticate(db: Session, email: str, password: str) -> Claims:
    """Claims for the admin account or a customer; AuthError (HTTP 400) otherwise."""
    if is_admin_login(email, password):
        logger.info("Admin login")
        return Claims.admin(email)

    customer = db.query(Customer).filter(Customer.email == normalize_email(email)).first()
    if not customer or not verify_password(password, customer.password_hash):
        logger.info(f"Failed login for {email}")
        raise AuthError(LOGIN_FAILED, status_code=400)
    return Claims.customer(customer.customer_id, customer.email)


def update_customer(db: Session, customer_id: str, data: CustomerUpdate) -> Customer:
    customer = get_customer(db, customer_id)

    taken = (
        db.query(Customer)
        .filter(Customer.email == data.email, Customer.customer_id != customer_id)
        .first()
    )
    if taken:
        raise ConflictError("Email already registered")

    customer.username = data.username
    customer.first_name = data.first_name
    customer.last_name = data.last_name
    customer.email = data.email
    customer.phone = data.phone
    if data.password:
        customer.password_hash = hash_password(data.password)

    commit_or_raise(db, "Email already registered")
    db.refresh(customer)
    logger.info(f"Customer {customer_id} updated")
    return customer


def delete_customer(db: Session, customer_id: str) -> Customer:
    customer = get_customer(db, customer_id)
    db.delete(customer)
    commit_or_raise(db, f"Customer {customer_id} has recorded sales")
    logger.info(f"Customer {customer_id} deleted")
    return customer
