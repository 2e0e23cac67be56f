"""
Error taxonomy for the dealership API.
Every error carries the HTTP status it maps to; main.py turns them into
{"error": <message>} responses.
"""

from typing import Optional


class DealershipError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(DealershipError):
    """Missing or malformed required field."""
    status_code = 400


class NotFoundError(DealershipError):
    status_code = 404


class ConflictError(DealershipError):
    """Duplicate unique field (email, VIN, identifier)."""
    status_code = 400


class AuthError(DealershipError):
    """Bad credentials, or a malformed / forged / expired token."""
    status_code = 401


class PermissionDeniedError(DealershipError):
    status_code = 403


class DataError(DealershipError):
    """Unexpected persistence failure, including malformed stored identifiers."""
    status_code = 500
