"""
Tests for request authentication and the role gate
"""

import inspect

from fastapi.routing import APIRoute
import pytest
from sqlmodel import Session

from tenant_notes.core.auth import create_access_token
from tenant_notes.core.config import get_settings
from tenant_notes.core.dependencies import authenticate, get_current_principal
from tenant_notes.core.exceptions import Forbidden
from tenant_notes.core.permissions import has_role, require_role
from tenant_notes.main import app
from tenant_notes.models.tenant import Tenant
from tenant_notes.models.user import User, UserRole

settings = get_settings()


def test_authenticate_valid_token(db: Session, acme_member: User, principal):
    expected = principal(acme_member)
    token = create_access_token(expected)

    assert authenticate(db, token) == expected


def test_authenticate_missing_token(db: Session):
    assert authenticate(db, None) is None
    assert authenticate(db, "") is None


def test_authenticate_invalid_token(db: Session, acme_member: User):
    assert authenticate(db, "not-a-jwt") is None


def test_authenticate_rejects_deleted_user(db: Session, acme_member: User, principal):
    """A valid signature does not outlive the account it was issued for"""
    token = create_access_token(principal(acme_member))

    db.delete(acme_member)
    db.commit()

    assert authenticate(db, token) is None


def test_authenticate_rejects_user_without_tenant(
    db: Session, acme: Tenant, acme_member: User, principal
):
    token = create_access_token(principal(acme_member))

    db.delete(acme)
    db.commit()

    assert authenticate(db, token) is None


def test_principal_is_token_snapshot(db: Session, acme_admin: User, principal):
    """Role changes after login are not reflected until the next login"""
    token = create_access_token(principal(acme_admin))

    acme_admin.role = UserRole.MEMBER
    db.add(acme_admin)
    db.commit()

    resolved = authenticate(db, token)
    assert resolved is not None
    assert resolved.role == UserRole.ADMIN


def test_has_role(acme_admin: User, acme_member: User, principal):
    assert has_role(principal(acme_admin), UserRole.ADMIN)
    assert not has_role(principal(acme_member), UserRole.ADMIN)
    assert has_role(principal(acme_member), UserRole.MEMBER)


def test_require_role_rejects_other_role(acme_member: User, principal):
    checker = require_role(UserRole.ADMIN)

    with pytest.raises(Forbidden) as exc_info:
        checker(principal=principal(acme_member))

    assert exc_info.value.status_code == 403
    assert exc_info.value.message == "Forbidden - Admin access required"


def test_require_role_passes_principal_through(acme_admin: User, principal):
    checker = require_role(UserRole.ADMIN)
    expected = principal(acme_admin)

    assert checker(principal=expected) is expected


def test_database_bound_routes_run_in_threadpool():
    """Routes using the blocking Session must not be coroutines"""
    db_routes = [
        route for route in app.routes
        if isinstance(route, APIRoute) and route.path.startswith(settings.API_V1_PREFIX)
    ]

    assert db_routes
    for route in db_routes:
        assert not inspect.iscoroutinefunction(route.endpoint), route.path
    assert not inspect.iscoroutinefunction(get_current_principal)


@pytest.mark.asyncio
async def test_missing_authorization_header(client):
    response = await client.get("/api/v1/notes")

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


@pytest.mark.asyncio
async def test_non_bearer_authorization_header(client, acme_member: User):
    response = await client.get("/api/v1/notes", headers={"Authorization": "Basic dXNlcjpwYXNz"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_garbage_bearer_token(client, acme_member: User):
    response = await client.get("/api/v1/notes", headers={"Authorization": "Bearer garbage"})

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


@pytest.mark.asyncio
async def test_deleted_user_token_rejected_over_http(client, db: Session, acme_member: User, auth_headers):
    headers = auth_headers(acme_member)
    assert (await client.get("/api/v1/notes", headers=headers)).status_code == 200

    db.delete(acme_member)
    db.commit()

    response = await client.get("/api/v1/notes", headers=headers)
    assert response.status_code == 401
