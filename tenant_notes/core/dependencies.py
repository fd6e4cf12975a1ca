"""
Authentication dependencies for FastAPI

Every request re-derives its principal: the bearer token is verified and
the referenced user (and its tenant) must still exist in the database.
"""

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session
from typing import Optional
import structlog

from tenant_notes.core.auth import verify_token
from tenant_notes.core.database import get_session
from tenant_notes.core.exceptions import NotAuthenticated
from tenant_notes.models.user import User
from tenant_notes.schemas.token import Principal

logger = structlog.get_logger(__name__)
security = HTTPBearer(auto_error=False)


def authenticate(session: Session, token: Optional[str]) -> Optional[Principal]:
    """Resolve a bearer token to a principal, or None"""
    if not token:
        logger.debug("Auth rejected: missing token")
        return None

    principal = verify_token(token)
    if principal is None:
        logger.info("Auth rejected: invalid or expired token")
        return None

    # The token is a snapshot; it must not outlive the account behind it
    user = session.get(User, principal.user_id)
    if user is None or user.tenant is None:
        logger.info(f"Auth rejected: account no longer exists for user {principal.user_id}")
        return None

    return principal


def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    session: Session = Depends(get_session),
) -> Principal:
    """Get the authenticated principal from the Authorization header"""
    token = credentials.credentials if credentials else None
    principal = authenticate(session, token)
    if principal is None:
        raise NotAuthenticated()

    logger.debug(f"User authenticated: {principal.user_id} (tenant {principal.tenant_id})")
    return principal
