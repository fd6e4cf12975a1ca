"""
Pydantic schemas for tenants
"""

from pydantic import BaseModel, ConfigDict
import uuid

from tenant_notes.models.tenant import TenantPlan


class TenantSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    slug: str
    plan: TenantPlan


class TenantUpgradeResponse(BaseModel):
    """Upgrade result"""
    message: str
    tenant: TenantSummary


class MessageResponse(BaseModel):
    message: str
