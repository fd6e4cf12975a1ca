"""
Tests for the login and current-user endpoints
"""

import pytest
from sqlmodel import Session

from tenant_notes.core.auth import verify_token
from tenant_notes.models.tenant import Tenant
from tenant_notes.models.user import User, UserRole

TEST_PASSWORD = "password"


@pytest.mark.asyncio
async def test_login_success(client, acme: Tenant, acme_admin: User):
    response = await client.post(
        "/api/v1/auth/login",
        json={"email": "admin@acme.test", "password": TEST_PASSWORD},
    )

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"token", "user"}
    assert body["user"] == {
        "id": str(acme_admin.id),
        "email": "admin@acme.test",
        "role": "ADMIN",
        "tenantSlug": "acme",
    }

    principal = verify_token(body["token"])
    assert principal is not None
    assert principal.user_id == acme_admin.id
    assert principal.tenant_id == acme.id
    assert principal.tenant_slug == "acme"
    assert principal.role == UserRole.ADMIN


@pytest.mark.asyncio
async def test_login_wrong_password_and_unknown_email_are_indistinguishable(client, acme_admin: User):
    wrong_password = await client.post(
        "/api/v1/auth/login",
        json={"email": "admin@acme.test", "password": "not-the-password"},
    )
    unknown_email = await client.post(
        "/api/v1/auth/login",
        json={"email": "nobody@acme.test", "password": TEST_PASSWORD},
    )

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"error": "Invalid credentials"}


@pytest.mark.asyncio
async def test_login_user_whose_tenant_is_gone(client, db: Session, acme: Tenant, acme_admin: User):
    db.delete(acme)
    db.commit()

    response = await client.post(
        "/api/v1/auth/login",
        json={"email": "admin@acme.test", "password": TEST_PASSWORD},
    )

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid credentials"}


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    {"email": "admin@acme.test"},
    {"password": TEST_PASSWORD},
    {"email": "", "password": TEST_PASSWORD},
    {},
])
async def test_login_missing_fields(client, acme_admin: User, payload):
    response = await client.post("/api/v1/auth/login", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Email and password are required"}


@pytest.mark.asyncio
async def test_login_malformed_body(client):
    response = await client.post(
        "/api/v1/auth/login",
        content="not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert "error" in response.json()


@pytest.mark.asyncio
async def test_me_returns_token_principal(client, acme: Tenant, acme_member: User, auth_headers):
    response = await client.get("/api/v1/auth/me", headers=auth_headers(acme_member))

    assert response.status_code == 200
    assert response.json() == {
        "userId": str(acme_member.id),
        "email": "user@acme.test",
        "role": "MEMBER",
        "tenantId": str(acme.id),
        "tenantSlug": "acme",
    }


@pytest.mark.asyncio
async def test_me_requires_auth(client):
    response = await client.get("/api/v1/auth/me")

    assert response.status_code == 401
