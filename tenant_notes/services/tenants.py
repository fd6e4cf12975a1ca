"""
Tenant administration - plan upgrades
"""


from sqlmodel import Session, select
import structlog

from tenant_notes.core.exceptions import Forbidden, NotFound
from tenant_notes.models.base import utcnow
from tenant_notes.models.subscription import Subscription, SubscriptionStatus
from tenant_notes.models.tenant import Tenant, TenantPlan
from tenant_notes.models.user import UserRole
from tenant_notes.schemas.token import Principal

logger = structlog.get_logger(__name__)


def upgrade_tenant(session: Session, principal: Principal, slug: str) -> Tenant:
    """Move the caller's own tenant to PRO.

    The plan change and the subscription upsert are committed together;
    if either fails neither is kept.
    """
    if principal.role != UserRole.ADMIN:
        raise Forbidden("Forbidden - Admin access required")

    tenant = session.exec(
        select(Tenant).where(Tenant.slug == slug).with_for_update()
    ).first()
    if tenant is None:
        session.rollback()
        raise NotFound("Tenant not found")

    # An admin may only upgrade their own tenant
    if tenant.id != principal.tenant_id:
        session.rollback()
        logger.info(f"User {principal.user_id} attempted to upgrade foreign tenant {tenant.id}")
        raise Forbidden("Forbidden - Access denied")

    try:
        now = utcnow()
        tenant.plan = TenantPlan.PRO
        tenant.updated_at = now

        subscription = session.exec(
            select(Subscription).where(Subscription.tenant_id == tenant.id)
        ).first()
        if subscription is None:
            subscription = Subscription(
                tenant_id=tenant.id,
                plan=TenantPlan.PRO,
                status=SubscriptionStatus.ACTIVE,
            )
        else:
            subscription.plan = TenantPlan.PRO
            subscription.status = SubscriptionStatus.ACTIVE
            subscription.updated_at = now

        session.add(tenant)
        session.add(subscription)
        session.commit()
        session.refresh(tenant)
    except Exception as e:
        session.rollback()
        logger.error(f"Failed to upgrade tenant {tenant.id}: {e}")
        raise

    logger.info(f"Tenant upgraded to PRO: {tenant.slug}")
    return tenant
