"""
Tenant API endpoints
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from tenant_notes.core.database import get_session
from tenant_notes.core.permissions import require_role
from tenant_notes.models.user import UserRole
from tenant_notes.schemas.tenant import TenantSummary, TenantUpgradeResponse
from tenant_notes.schemas.token import Principal
from tenant_notes.services.tenants import upgrade_tenant

router = APIRouter()


@router.post("/{slug}/upgrade", response_model=TenantUpgradeResponse)
def upgrade(
    slug: str,
    principal: Principal = Depends(require_role(UserRole.ADMIN)),
    session: Session = Depends(get_session)
):
    """Upgrade the caller's tenant to the PRO plan (admins only)"""
    tenant = upgrade_tenant(session, principal, slug)
    return TenantUpgradeResponse(
        message="Tenant upgraded to Pro successfully",
        tenant=TenantSummary.model_validate(tenant),
    )
