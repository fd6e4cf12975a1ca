"""
Role gate for protected endpoints
"""

from fastapi import Depends
import structlog

from tenant_notes.core.dependencies import get_current_principal
from tenant_notes.core.exceptions import Forbidden
from tenant_notes.models.user import UserRole
from tenant_notes.schemas.token import Principal

logger = structlog.get_logger(__name__)


def has_role(principal: Principal, role: UserRole) -> bool:
    """Check the role recorded in the token snapshot"""
    return principal.role == role


def require_role(role: UserRole):
    """Dependency factory: authenticate, then require ``role``.

    Unauthenticated requests fail with 401 before the role is looked at.
    """
    def check_role(
        principal: Principal = Depends(get_current_principal),
    ) -> Principal:
        if not has_role(principal, role):
            logger.info(f"Role check failed for user {principal.user_id}: {role.value} required")
            raise Forbidden(f"Forbidden - {role.value.capitalize()} access required")
        return principal
    return check_role
