"""
Tenant model - Multi-tenancy foundation
"""

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel
from datetime import datetime
from typing import Optional
from enum import Enum
import uuid

from tenant_notes.models.base import utcnow


class TenantPlan(str, Enum):
    """Billing plans"""
    FREE = "FREE"
    PRO = "PRO"


class Tenant(SQLModel, table=True):
    """Tenant model for multi-tenant architecture"""

    __tablename__ = "tenants"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(nullable=False, max_length=255)
    slug: str = Field(unique=True, index=True, max_length=100, description="Unique tenant identifier used in URLs")

    # Plan is only changed through the upgrade operation
    plan: TenantPlan = Field(default=TenantPlan.FREE, nullable=False)

    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False)
    updated_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
