"""
Test configuration for pytest
"""

import os

# Test environment variables (must be set before the app is imported)
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-jwt-secret"

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine
from typing import Generator

from tenant_notes.core.auth import create_access_token, hash_password
from tenant_notes.core.database import get_session
from tenant_notes.main import app
from tenant_notes.models import Tenant, TenantPlan, User, UserRole
from tenant_notes.schemas.token import Principal

TEST_PASSWORD = "password"
TEST_PASSWORD_HASH = hash_password(TEST_PASSWORD)

# In-memory SQLite shared across the test session and the app
test_engine = create_engine(
    "sqlite://",
    echo=False,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Create a clean database session for each test"""
    SQLModel.metadata.create_all(test_engine)

    with Session(test_engine) as session:
        yield session

    SQLModel.metadata.drop_all(test_engine)


@pytest.fixture
async def client(db: Session):
    """HTTP client bound to the app, using the test session"""
    def override_get_session():
        yield db

    app.dependency_overrides[get_session] = override_get_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def _create_tenant(db: Session, name: str, slug: str, plan: TenantPlan = TenantPlan.FREE) -> Tenant:
    tenant = Tenant(name=name, slug=slug, plan=plan)
    db.add(tenant)
    db.commit()
    db.refresh(tenant)
    return tenant


def _create_user(db: Session, tenant: Tenant, email: str, role: UserRole) -> User:
    user = User(email=email, password_hash=TEST_PASSWORD_HASH, role=role, tenant_id=tenant.id)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def acme(db: Session) -> Tenant:
    return _create_tenant(db, "Acme Corporation", "acme")


@pytest.fixture
def globex(db: Session) -> Tenant:
    return _create_tenant(db, "Globex Corporation", "globex")


@pytest.fixture
def acme_admin(db: Session, acme: Tenant) -> User:
    return _create_user(db, acme, "admin@acme.test", UserRole.ADMIN)


@pytest.fixture
def acme_member(db: Session, acme: Tenant) -> User:
    return _create_user(db, acme, "user@acme.test", UserRole.MEMBER)


@pytest.fixture
def globex_admin(db: Session, globex: Tenant) -> User:
    return _create_user(db, globex, "admin@globex.test", UserRole.ADMIN)


@pytest.fixture
def globex_member(db: Session, globex: Tenant) -> User:
    return _create_user(db, globex, "user@globex.test", UserRole.MEMBER)


def principal_for(user: User) -> Principal:
    return Principal(
        user_id=user.id,
        email=user.email,
        role=user.role,
        tenant_id=user.tenant_id,
        tenant_slug=user.tenant.slug,
    )


@pytest.fixture
def principal():
    """Build the token principal for a user"""
    return principal_for


@pytest.fixture
def auth_headers():
    """Build an Authorization header for a user"""
    def _headers(user: User) -> dict:
        token = create_access_token(principal_for(user))
        return {"Authorization": f"Bearer {token}"}
    return _headers
