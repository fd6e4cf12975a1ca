"""
Subscription model - billing mirror of Tenant.plan
"""

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel
from datetime import datetime
from typing import Optional
from enum import Enum
import uuid

from tenant_notes.models.base import utcnow

from tenant_notes.models.tenant import TenantPlan


class SubscriptionStatus(str, Enum):
    """Subscription lifecycle states"""
    ACTIVE = "ACTIVE"
    PAST_DUE = "PAST_DUE"
    CANCELED = "CANCELED"


class Subscription(SQLModel, table=True):
    """One subscription per tenant, kept in step with the tenant plan"""

    __tablename__ = "subscriptions"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    tenant_id: uuid.UUID = Field(foreign_key="tenants.id", unique=True, nullable=False)
    plan: TenantPlan = Field(default=TenantPlan.FREE, nullable=False)
    status: SubscriptionStatus = Field(default=SubscriptionStatus.ACTIVE, nullable=False)

    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False)
    updated_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
