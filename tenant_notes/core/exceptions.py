"""
Domain error hierarchy

Services raise these; the application renders each one as
``{"error": message}`` with the attached status code.
"""

from fastapi import status


class TenantNotesError(Exception):
    """Base exception for expected, user-facing failures."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailed(TenantNotesError):
    """Missing or invalid input."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotAuthenticated(TenantNotesError):
    """Missing, invalid or expired token, or the account behind it is gone."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class Forbidden(TenantNotesError):
    """Role or tenant mismatch."""

    status_code = status.HTTP_403_FORBIDDEN


class PlanLimitReached(TenantNotesError):
    """Tenant plan quota exceeded."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFound(TenantNotesError):
    """Resource absent, or owned by another tenant."""

    status_code = status.HTTP_404_NOT_FOUND
