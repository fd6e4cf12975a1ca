"""
Auth API endpoints - Login and current principal
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session, select
import structlog

from tenant_notes.core.auth import create_access_token, verify_password
from tenant_notes.core.database import get_session
from tenant_notes.core.dependencies import get_current_principal
from tenant_notes.core.exceptions import NotAuthenticated, ValidationFailed
from tenant_notes.models.user import User
from tenant_notes.schemas.token import LoginResponse, LoginUser, Principal
from tenant_notes.schemas.user import UserLogin

logger = structlog.get_logger(__name__)
router = APIRouter()

INVALID_CREDENTIALS = "Invalid credentials"


@router.post("/login", response_model=LoginResponse)
def login_user(
    login_data: UserLogin,
    session: Session = Depends(get_session)
):
    """Exchange email and password for an access token"""
    if not login_data.email or not login_data.password:
        raise ValidationFailed("Email and password are required")

    user = session.exec(
        select(User).where(User.email == login_data.email)
    ).first()

    # Same answer for unknown email, orphaned user and wrong password
    if not user or not user.tenant:
        logger.info("Login failed: unknown account")
        raise NotAuthenticated(INVALID_CREDENTIALS)

    if not verify_password(login_data.password, user.password_hash):
        logger.info(f"Login failed: bad password for user {user.id}")
        raise NotAuthenticated(INVALID_CREDENTIALS)

    principal = Principal(
        user_id=user.id,
        email=user.email,
        role=user.role,
        tenant_id=user.tenant_id,
        tenant_slug=user.tenant.slug,
    )
    token = create_access_token(principal)

    logger.info(f"User logged in: {user.id}")

    return LoginResponse(
        token=token,
        user=LoginUser(
            id=user.id,
            email=user.email,
            role=user.role,
            tenant_slug=user.tenant.slug,
        ),
    )


@router.get("/me", response_model=Principal)
def get_current_user_info(
    principal: Principal = Depends(get_current_principal),
):
    """Get the identity carried by the caller's token"""
    return principal
