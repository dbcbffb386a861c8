"""
Tests for the session endpoints.

Each test exercises the full HTTP path: cookies, dependencies, and the
exception middleware status mapping.
"""

import logging
import uuid

import pytest
from httpx import ASGITransport, AsyncClient
from jose import jwt

from session_auth.domain.models.user_domain_model import Role
from session_auth.main import create_app

from tests.conftest import STRONG_PASSWORD

BASE = "/api/v1/user"

REGISTRATION = {
    "firstName": "Ana",
    "emailId": "ana@example.com",
    "password": STRONG_PASSWORD,
}


async def _register(client, **overrides):
    body = {**REGISTRATION, **overrides}
    return await client.post(f"{BASE}/register", json=body)


class TestRegisterEndpoint:
    @pytest.mark.asyncio
    async def test_register_sets_session_cookie(self, async_client):
        response = await _register(async_client)

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Registered & logged in successfully"
        assert data["user"]["emailId"] == "ana@example.com"
        assert data["user"]["role"] == "user"
        assert "password" not in data["user"]

        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith("token=")
        assert "HttpOnly" in set_cookie
        assert "Max-Age=3600" in set_cookie
        assert "Path=/" in set_cookie
        assert "samesite=none" in set_cookie.lower()
        # Secure only in production
        assert "Secure" not in set_cookie

    @pytest.mark.asyncio
    async def test_role_in_body_is_ignored(self, async_client):
        response = await _register(async_client, role="admin")

        assert response.status_code == 201
        assert response.json()["user"]["role"] == "user"

    @pytest.mark.asyncio
    async def test_invalid_input_is_400(self, async_client):
        response = await _register(async_client, firstName="Al", password="weak")

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "INVALID_INPUT"
        assert set(body["errors"]) == {"firstName", "password"}
        assert "set-cookie" not in response.headers

    @pytest.mark.asyncio
    async def test_malformed_body_is_400(self, async_client):
        response = await async_client.post(f"{BASE}/register", json=["not", "an", "object"])

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_INPUT"

    @pytest.mark.asyncio
    async def test_duplicate_email_is_409(self, async_client):
        await _register(async_client)

        response = await _register(async_client, firstName="Other")

        assert response.status_code == 409


class TestLoginEndpoint:
    @pytest.mark.asyncio
    async def test_login_then_check(self, async_client):
        await _register(async_client)
        async_client.cookies.clear()

        response = await async_client.post(
            f"{BASE}/login", json={"emailId": "ana@example.com", "password": STRONG_PASSWORD}
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Logged in successfully"
        assert "token" in async_client.cookies

        check = await async_client.get(f"{BASE}/check")
        assert check.status_code == 200
        assert check.json()["user"]["firstName"] == "Ana"

    @pytest.mark.asyncio
    async def test_bad_credentials_are_generic_401(self, async_client):
        await _register(async_client)
        async_client.cookies.clear()

        unknown = await async_client.post(
            f"{BASE}/login", json={"emailId": "nobody@example.com", "password": STRONG_PASSWORD}
        )
        wrong = await async_client.post(
            f"{BASE}/login", json={"emailId": "ana@example.com", "password": "Wr0ng!Password"}
        )

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json() == wrong.json()
        assert unknown.json()["detail"] == "Invalid Credentials"
        assert "set-cookie" not in unknown.headers


class TestLogoutEndpoint:
    @pytest.mark.asyncio
    async def test_logout_revokes_and_clears_cookie(self, async_client):
        await _register(async_client)
        token = async_client.cookies["token"]

        response = await async_client.post(f"{BASE}/logout")

        assert response.status_code == 200
        assert response.json()["message"] == "Logged out successfully"
        assert "token" not in async_client.cookies

        # The old token is refused even if replayed by hand
        replay = await async_client.get(f"{BASE}/check", headers={"Authorization": f"Bearer {token}"})
        assert replay.status_code == 401
        assert replay.json()["code"] == "INVALID_TOKEN"

    @pytest.mark.asyncio
    async def test_logout_without_session_succeeds(self, async_client, revocation_store):
        response = await async_client.post(f"{BASE}/logout")

        assert response.status_code == 200
        assert revocation_store.writes == 0

    @pytest.mark.asyncio
    async def test_store_outage_is_503_and_keeps_cookie(self, async_client, revocation_store):
        await _register(async_client)
        revocation_store.available = False

        response = await async_client.post(f"{BASE}/logout")

        assert response.status_code == 503
        assert response.json()["code"] == "REVOCATION_STORE_UNAVAILABLE"
        assert "set-cookie" not in response.headers
        assert "token" in async_client.cookies

    @pytest.mark.asyncio
    async def test_out_of_range_expiry_is_ignored(self, async_client, revocation_store):
        forged = jwt.encode({"sub": "x", "role": "user", "iat": 1, "exp": 10 ** 20}, "k")

        response = await async_client.post(f"{BASE}/logout", headers={"Authorization": f"Bearer {forged}"})

        assert response.status_code == 200
        assert revocation_store.writes == 0

    @pytest.mark.asyncio
    async def test_logout_needs_no_database(self, settings, revocation_store, token_service):
        # No user repository override and no engine: logout must not open a DB session
        application = create_app(settings, revocation_store=revocation_store, with_database=False)
        token = token_service.issue(str(uuid.uuid4()), "ana@example.com", Role.USER)

        async with AsyncClient(transport=ASGITransport(app=application), base_url="https://test") as client:
            response = await client.post(f"{BASE}/logout", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert revocation_store.writes == 1

    @pytest.mark.asyncio
    async def test_request_log_names_session_source_not_token(self, async_client, token_service, caplog):
        token = token_service.issue(str(uuid.uuid4()), "ana@example.com", Role.USER)
        caplog.set_level(logging.INFO, logger="session_auth.shared.middleware.logging_middleware")

        await async_client.post(f"{BASE}/logout", headers={"Authorization": f"Bearer {token}"})

        assert "Session: bearer" in caplog.text
        assert token not in caplog.text

    @pytest.mark.asyncio
    async def test_store_outage_blocks_authenticated_routes(self, async_client, revocation_store):
        await _register(async_client)
        revocation_store.available = False

        response = await async_client.get(f"{BASE}/check")

        assert response.status_code == 503


class TestProtectedEndpoints:
    @pytest.mark.asyncio
    async def test_check_without_session_is_401(self, async_client):
        response = await async_client.get(f"{BASE}/check")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_plain_user_cannot_register_others(self, async_client):
        await _register(async_client)

        response = await async_client.post(
            f"{BASE}/admin/register",
            json={"firstName": "Bob", "emailId": "bob@example.com", "password": STRONG_PASSWORD, "role": "admin"},
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_admin_registers_user_with_role(self, async_client, admin_user):
        login = await async_client.post(
            f"{BASE}/login", json={"emailId": admin_user.email_id, "password": STRONG_PASSWORD}
        )
        assert login.status_code == 200

        response = await async_client.post(
            f"{BASE}/admin/register",
            json={"firstName": "Bob", "emailId": "bob@example.com", "password": STRONG_PASSWORD, "role": "admin"},
        )

        assert response.status_code == 201
        assert response.json()["user"]["role"] == "admin"
        assert response.json()["message"] == "User Registered Successfully"

    @pytest.mark.asyncio
    async def test_delete_profile(self, async_client, user_repository):
        await _register(async_client)

        response = await async_client.delete(f"{BASE}/profile")

        assert response.status_code == 200
        assert response.json()["message"] == "Deleted Successfully"
        assert not user_repository.users
        assert (await async_client.get(f"{BASE}/check")).status_code == 401
