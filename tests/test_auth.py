"""Tests for authentication endpoints and sign-in methods."""

import httpx
import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.errors import AuthenticationError
from app.core.security import create_session_token, session_user_id
from app.models.user import User
from app.services.auth_service import (
    AuthService,
    CredentialsAuth,
    FederatedAuth,
    GoogleTokenVerifier,
)
from app.services.user_service import UserService

settings = get_settings()

CLIENT_ID = "dashboard.apps.googleusercontent.com"


def google_verifier(status_code: int = 200, **claims) -> GoogleTokenVerifier:
    """Build a verifier answering from a canned tokeninfo response."""
    body = {
        "aud": CLIENT_ID,
        "email": "new.editor@example.com",
        "email_verified": "true",
        "name": "New Editor",
        "picture": "https://lh3.example/photo.jpg",
    }
    body.update(claims)

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["id_token"] == "google-id-token"
        return httpx.Response(status_code, json=body)

    return GoogleTokenVerifier(
        client_id=CLIENT_ID,
        tokeninfo_url="https://oauth2.example/tokeninfo",
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_login_success(client: AsyncClient, admin_user: User):
    """Test successful login."""
    response = await client.post(
        "/api/v1/auth",
        json={"email": "Admin@Example.com", "password": "admin"},
    )

    assert response.status_code == 200
    data = response.json()
    assert session_user_id(data["token"]) == admin_user.id
    assert settings.session_cookie_name in response.cookies


@pytest.mark.asyncio
async def test_login_invalid_password(client: AsyncClient, admin_user: User):
    """Test login with wrong password."""
    response = await client.post(
        "/api/v1/auth",
        json={"email": "admin@example.com", "password": "wrongpassword"},
    )

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid email or password"


@pytest.mark.asyncio
async def test_login_nonexistent_user(client: AsyncClient):
    """Test login with non-existent user."""
    response = await client.post(
        "/api/v1/auth",
        json={"email": "nobody@example.com", "password": "password"},
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_inactive_user(
    client: AsyncClient, db_session: AsyncSession, test_user: User
):
    """Disabled accounts cannot sign in."""
    test_user.is_active = False
    await db_session.commit()

    response = await client.post(
        "/api/v1/auth",
        json={"email": test_user.email, "password": "testpassword"},
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_missing_fields(client: AsyncClient):
    """Test login with missing fields."""
    response = await client.post(
        "/api/v1/auth",
        json={"email": "admin@example.com"},
    )

    assert response.status_code == 422  # Validation error


@pytest.mark.asyncio
async def test_login_invalid_email(client: AsyncClient):
    """Malformed emails are rejected before any lookup."""
    response = await client.post(
        "/api/v1/auth",
        json={"email": "not-an-email", "password": "password"},
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_session_cookie_authenticates(client: AsyncClient, test_user: User):
    """The cookie set at login is enough to reach protected routes."""
    login = await client.post(
        "/api/v1/auth",
        json={"email": test_user.email, "password": "testpassword"},
    )
    assert login.status_code == 200

    response = await client.get("/api/v1/auth/me")

    assert response.status_code == 200
    data = response.json()
    assert data["email"] == test_user.email
    assert data["isSuperuser"] is False

    events = await client.get("/api/v1/events")
    assert events.status_code == 200


@pytest.mark.asyncio
async def test_logout_clears_session(client: AsyncClient, test_user: User):
    """After logout the cookie no longer authenticates."""
    await client.post(
        "/api/v1/auth",
        json={"email": test_user.email, "password": "testpassword"},
    )

    response = await client.post("/api/v1/auth/logout")
    assert response.status_code == 200

    me = await client.get("/api/v1/auth/me")
    assert me.status_code == 401


@pytest.mark.asyncio
async def test_me_with_bearer(client: AsyncClient, admin_user: User, admin_auth_headers: dict):
    """Bearer tokens identify the user."""
    response = await client.get("/api/v1/auth/me", headers=admin_auth_headers)

    assert response.status_code == 200
    assert response.json()["isSuperuser"] is True


@pytest.mark.asyncio
async def test_me_unauthenticated(client: AsyncClient):
    """Test /me without auth."""
    response = await client.get("/api/v1/auth/me")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_invalid_token_rejected(client: AsyncClient):
    """Garbage tokens do not authenticate."""
    response = await client.get(
        "/api/v1/auth/me",
        headers={"Authorization": "Bearer not-a-jwt"},
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_change_password(
    client: AsyncClient, test_user: User, auth_headers: dict
):
    """Test password change."""
    response = await client.put(
        "/api/v1/users/me/password",
        json={"currentPassword": "testpassword", "password": "newpassword123"},
        headers=auth_headers,
    )

    assert response.status_code == 204

    login = await client.post(
        "/api/v1/auth",
        json={"email": test_user.email, "password": "newpassword123"},
    )
    assert login.status_code == 200


@pytest.mark.asyncio
async def test_change_password_wrong_current(
    client: AsyncClient, test_user: User, auth_headers: dict
):
    """The current password must match."""
    response = await client.put(
        "/api/v1/users/me/password",
        json={"currentPassword": "guess", "password": "newpassword123"},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Current password is incorrect"


@pytest.mark.asyncio
async def test_change_password_federated_account(
    client: AsyncClient, db_session: AsyncSession
):
    """Accounts created through Google sign-in have no password to change."""
    user = await UserService(db_session).create_user("google.user@example.com", name="G")
    token = create_session_token(user.id, user.email)

    response = await client.put(
        "/api/v1/users/me/password",
        json={"currentPassword": "", "password": "newpassword123"},
        headers={"Authorization": f"Bearer {token}"},
    )

    assert response.status_code == 400
    assert "Google" in response.json()["detail"]
    await db_session.refresh(user)
    assert user.hashed_password is None


@pytest.mark.asyncio
async def test_change_password_too_short(
    client: AsyncClient, test_user: User, auth_headers: dict
):
    """New passwords need at least eight characters."""
    response = await client.put(
        "/api/v1/users/me/password",
        json={"currentPassword": "testpassword", "password": "short"},
        headers=auth_headers,
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_change_password_unauthorized(client: AsyncClient, test_user: User):
    """Test password change without auth."""
    response = await client.put(
        "/api/v1/users/me/password",
        json={"currentPassword": "testpassword", "password": "newpassword123"},
    )

    assert response.status_code == 401


class TestAuthService:
    """Tests for sign-in method dispatch."""

    @pytest.mark.asyncio
    async def test_credentials(self, db_session: AsyncSession, test_user: User):
        """Credentials resolve to the matching user."""
        service = AuthService(db_session, verifier=google_verifier())

        user = await service.authenticate(CredentialsAuth(test_user.email, "testpassword"))

        assert user.id == test_user.id

    @pytest.mark.asyncio
    async def test_federated_creates_user(self, db_session: AsyncSession):
        """A verified unknown email gets a password-less account."""
        service = AuthService(db_session, verifier=google_verifier())

        user = await service.authenticate(FederatedAuth("google-id-token"))

        assert user.email == "new.editor@example.com"
        assert user.name == "New Editor"
        assert user.hashed_password is None

        # The account cannot be used with a password
        users = UserService(db_session)
        assert await users.authenticate(user.email, "") is None

    @pytest.mark.asyncio
    async def test_federated_existing_user(self, db_session: AsyncSession, test_user: User):
        """A known email signs in as the existing account."""
        service = AuthService(
            db_session,
            verifier=google_verifier(email=test_user.email),
        )

        token = await service.login(FederatedAuth("google-id-token"))

        assert session_user_id(token.token) == test_user.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("status_code", "claims"),
        [
            (400, {}),
            (200, {"aud": "someone-else"}),
            (200, {"email_verified": "false"}),
        ],
    )
    async def test_federated_rejected(self, db_session: AsyncSession, status_code, claims):
        """Invalid, foreign or unverified tokens are refused."""
        service = AuthService(
            db_session,
            verifier=google_verifier(status_code, **claims),
        )

        with pytest.raises(AuthenticationError):
            await service.authenticate(FederatedAuth("google-id-token"))

    @pytest.mark.asyncio
    async def test_federated_not_configured(self, db_session: AsyncSession):
        """Without a client id federated sign-in is unavailable."""
        verifier = google_verifier()
        verifier.client_id = None
        service = AuthService(db_session, verifier=verifier)

        with pytest.raises(AuthenticationError):
            await service.authenticate(FederatedAuth("google-id-token"))
