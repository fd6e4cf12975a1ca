"""
Seed the database with demo tenants, users and notes

Safe to run repeatedly: tenants are keyed on slug and users on email.

    python -m tenant_notes.scripts.seed
"""

from typing import Tuple

from sqlmodel import Session, select
import structlog

from tenant_notes.core.auth import hash_password
from tenant_notes.core.database import engine, init_db
from tenant_notes.models import (
    Note,
    Subscription,
    SubscriptionStatus,
    Tenant,
    TenantPlan,
    User,
    UserRole,
)

logger = structlog.get_logger(__name__)

DEMO_PASSWORD = "password"

DEMO_TENANTS = [
    {
        "name": "Acme Corporation",
        "slug": "acme",
        "notes": [
            ("admin", "Welcome to Acme Notes", "This is your first note in the Acme tenant."),
            ("user", "Meeting Notes", "Team meeting scheduled for next week."),
        ],
    },
    {
        "name": "Globex Corporation",
        "slug": "globex",
        "notes": [
            ("admin", "Globex Project Ideas", "Brainstorming session for new projects."),
            ("user", "Client Feedback", "Positive feedback from our latest client."),
        ],
    },
]


def _get_or_create_tenant(session: Session, name: str, slug: str) -> Tuple[Tenant, bool]:
    tenant = session.exec(select(Tenant).where(Tenant.slug == slug)).first()
    if tenant:
        return tenant, False
    tenant = Tenant(name=name, slug=slug, plan=TenantPlan.FREE)
    session.add(tenant)
    session.flush()
    return tenant, True


def _get_or_create_user(session: Session, tenant: Tenant, email: str, role: UserRole, password_hash: str) -> Tuple[User, bool]:
    user = session.exec(select(User).where(User.email == email)).first()
    if user:
        return user, False
    user = User(email=email, password_hash=password_hash, role=role, tenant_id=tenant.id)
    session.add(user)
    session.flush()
    return user, True


def seed(session: Session) -> dict:
    """Create demo data; returns counts of what was created"""
    created = {"tenants": 0, "users": 0, "notes": 0}
    password_hash = hash_password(DEMO_PASSWORD)

    try:
        for spec in DEMO_TENANTS:
            tenant, is_new = _get_or_create_tenant(session, spec["name"], spec["slug"])
            created["tenants"] += int(is_new)

            subscription = session.exec(
                select(Subscription).where(Subscription.tenant_id == tenant.id)
            ).first()
            if subscription is None:
                session.add(Subscription(
                    tenant_id=tenant.id,
                    plan=tenant.plan,
                    status=SubscriptionStatus.ACTIVE,
                ))

            users = {}
            for key, role in (("admin", UserRole.ADMIN), ("user", UserRole.MEMBER)):
                users[key], is_new = _get_or_create_user(
                    session, tenant, f"{key}@{tenant.slug}.test", role, password_hash
                )
                created["users"] += int(is_new)

            for author, title, content in spec["notes"]:
                exists = session.exec(
                    select(Note).where(Note.tenant_id == tenant.id, Note.title == title)
                ).first()
                if exists:
                    continue
                session.add(Note(
                    title=title,
                    content=content,
                    tenant_id=tenant.id,
                    user_id=users[author].id,
                ))
                created["notes"] += 1

        session.commit()
    except Exception as e:
        session.rollback()
        logger.error(f"Seed failed: {e}")
        raise

    return created


if __name__ == "__main__":
    init_db()
    with Session(engine) as session:
        result = seed(session)
    logger.info(f"Database seeded: {result}")
    for spec in DEMO_TENANTS:
        for role in ("admin", "user"):
            print(f"  {role}@{spec['slug']}.test / {DEMO_PASSWORD}")
