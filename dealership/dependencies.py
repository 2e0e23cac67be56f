"""
Role gating for routes. The bearer token's claims decide access:
admins may write everything, customers only their own record and purchases.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from dealership.errors import AuthError, PermissionDeniedError
from dealership.services.security import Claims, verify_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Claims:
    if credentials is None or not credentials.credentials:
        raise AuthError("Missing bearer token")
    return verify_token(credentials.credentials)


def require_admin(claims: Claims = Depends(get_current_claims)) -> Claims:
    if not claims.is_admin:
        raise PermissionDeniedError("Admin access required")
    return claims


def ensure_self_or_admin(claims: Claims, customer_id: str):
    if claims.is_admin or claims.customer_id == customer_id:
        return
    raise PermissionDeniedError("Not allowed to access another customer's records")
