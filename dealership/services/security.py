"""
Credential issuing and verification.

Passwords are hashed with bcrypt via passlib. Tokens are HS256 JWTs carrying
either an admin role or a customer identity; there is no server-side session
store, so an issued token stays valid until it expires (no revocation).
"""

import hmac
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from passlib.context import CryptContext

from dealership.config import settings
from dealership.errors import AuthError
from dealership.utils.logger import get_logger

logger = get_logger(__name__)

ROLE_ADMIN = "admin"
ROLE_CUSTOMER = "customer"

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


@dataclass
class Claims:
    role: str
    email: Optional[str] = None
    customer_id: Optional[str] = None    # customer tokens only

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN

    @classmethod
    def admin(cls, email: str) -> "Claims":
        return cls(role=ROLE_ADMIN, email=email)

    @classmethod
    def customer(cls, customer_id: str, email: str) -> "Claims":
        return cls(role=ROLE_CUSTOMER, email=email, customer_id=customer_id)

    def to_payload(self) -> dict:
        payload = {"role": self.role, "email": self.email}
        if self.customer_id is not None:
            payload["customer_id"] = self.customer_id
        return payload

    @classmethod
    def from_payload(cls, payload: dict) -> "Claims":
        role = payload.get("role")
        if role == ROLE_ADMIN:
            return cls.admin(payload.get("email"))
        if role == ROLE_CUSTOMER and payload.get("customer_id"):
            return cls.customer(payload["customer_id"], payload.get("email"))
        raise AuthError("Invalid token claims")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    """False on mismatch and on unusable stored hashes."""
    try:
        return pwd_context.verify(plain, hashed)
    except (ValueError, TypeError):
        logger.warning("Stored password hash could not be parsed")
        return False


def is_admin_login(email: str, password: str) -> bool:
    """Compare against the configured admin account in constant time."""
    if not settings.admin_login_enabled:
        return False
    email_ok = hmac.compare_digest((email or "").encode(), settings.ADMIN_EMAIL.encode())
    password_ok = hmac.compare_digest((password or "").encode(), settings.ADMIN_PASSWORD.encode())
    return email_ok and password_ok


def issue_token(claims: Claims, ttl: Optional[timedelta] = None) -> str:
    if ttl is None:
        ttl = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    now = datetime.now(timezone.utc)
    payload = claims.to_payload()
    payload.update({"iat": now, "exp": now + ttl})
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> Claims:
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthError("Token has expired")
    except jwt.InvalidTokenError as e:
        logger.debug(f"Rejected token: {e}")
        raise AuthError("Invalid token")
    return Claims.from_payload(payload)
