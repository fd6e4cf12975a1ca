"""
JWT Authentication utilities and password hashing
"""

from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError
from typing import Dict, Optional

from tenant_notes.core.config import get_settings
from tenant_notes.schemas.token import Principal

settings = get_settings()
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


def create_access_token(
    principal: Principal,
    expires_delta: Optional[timedelta] = None
) -> str:
    """Create JWT access token carrying the principal snapshot"""
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "sub": str(principal.user_id),
        "email": principal.email,
        "role": principal.role.value,
        "tenant_id": str(principal.tenant_id),
        "tenant_slug": principal.tenant_slug,
        "exp": expire,
        "iat": datetime.now(timezone.utc),
    }

    encoded_jwt = jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    return encoded_jwt


def decode_access_token(token: str) -> Optional[Dict]:
    """Decode and validate JWT signature and expiry"""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
        return payload
    except JWTError:
        return None


def verify_token(token: str) -> Optional[Principal]:
    """Verify token and return the principal it carries, or None"""
    payload = decode_access_token(token)
    if payload is None:
        return None

    try:
        return Principal(
            user_id=payload.get("sub"),
            email=payload.get("email"),
            role=payload.get("role"),
            tenant_id=payload.get("tenant_id"),
            tenant_slug=payload.get("tenant_slug"),
        )
    except ValidationError:
        # Signed by us but missing or malformed claims
        return None
