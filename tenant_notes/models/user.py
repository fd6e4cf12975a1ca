"""
User model with roles and tenant scoping
"""

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel, Relationship
from datetime import datetime
from typing import Optional, TYPE_CHECKING
from enum import Enum
import uuid

from tenant_notes.models.base import utcnow

if TYPE_CHECKING:
    from tenant_notes.models.tenant import Tenant


class UserRole(str, Enum):
    """User roles for RBAC"""
    ADMIN = "ADMIN"
    MEMBER = "MEMBER"


class User(SQLModel, table=True):
    """User model with tenant isolation"""

    __tablename__ = "users"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    tenant_id: uuid.UUID = Field(foreign_key="tenants.id", index=True, nullable=False)

    # Authentication
    email: str = Field(unique=True, index=True, nullable=False, max_length=255)
    password_hash: str = Field(nullable=False)

    # RBAC
    role: UserRole = Field(default=UserRole.MEMBER, nullable=False)

    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False)

    tenant: Optional["Tenant"] = Relationship()
