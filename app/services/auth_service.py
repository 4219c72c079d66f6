"""Auth service for administrator sign-in.

Two sign-in methods share one entry point, ``AuthService.authenticate``:

- ``CredentialsAuth``: email and password checked against the bcrypt hash
- ``FederatedAuth``: a Google ID token verified with Google's tokeninfo
  endpoint; unknown verified emails get a password-less account
"""

from dataclasses import dataclass
from typing import Any, Union

import httpx
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.errors import AuthenticationError
from app.core.security import create_session_token
from app.models.user import User
from app.schemas.auth import Token
from app.services.user_service import UserService

settings = get_settings()


@dataclass(frozen=True)
class CredentialsAuth:
    """Email and password sign-in."""

    email: str
    password: str


@dataclass(frozen=True)
class FederatedAuth:
    """Identity-provider sign-in with an ID token."""

    provider_token: str


AuthMethod = Union[CredentialsAuth, FederatedAuth]


class GoogleTokenVerifier:
    """Verify Google ID tokens through the tokeninfo endpoint."""

    def __init__(
        self,
        client_id: str | None = None,
        tokeninfo_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.client_id = client_id or settings.google_client_id
        self.tokeninfo_url = tokeninfo_url or settings.google_tokeninfo_url
        self._transport = transport
        self._timeout = 10.0

    async def verify(self, id_token: str) -> dict[str, Any]:
        """Return the verified token claims.

        Raises:
            AuthenticationError: If the token is invalid, issued for another
                client, or carries an unverified email.
        """
        if not self.client_id:
            raise AuthenticationError("Federated sign-in is not configured")

        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                response = await client.get(
                    self.tokeninfo_url,
                    params={"id_token": id_token},
                    timeout=self._timeout,
                )
            except httpx.RequestError as e:
                logger.error(f"Google tokeninfo connection error: {e}")
                raise AuthenticationError("Identity provider unavailable") from e

        if response.status_code != 200:
            logger.warning(f"Google rejected ID token: {response.status_code}")
            raise AuthenticationError("Invalid identity token")

        claims = response.json()
        if claims.get("aud") != self.client_id:
            logger.warning(f"ID token issued for another client: {claims.get('aud')}")
            raise AuthenticationError("Invalid identity token")
        if str(claims.get("email_verified")).lower() != "true" or not claims.get("email"):
            raise AuthenticationError("Identity provider email is not verified")
        return claims


class AuthService:
    """Authentication service."""

    def __init__(self, db: AsyncSession, verifier: GoogleTokenVerifier | None = None):
        self.db = db
        self.user_service = UserService(db)
        self.verifier = verifier or GoogleTokenVerifier()

    async def authenticate(self, method: AuthMethod) -> User:
        """Resolve a sign-in method to an active user.

        Raises:
            AuthenticationError: If the method cannot be verified.
        """
        if isinstance(method, CredentialsAuth):
            user = await self.user_service.authenticate(method.email, method.password)
            if not user:
                logger.info(f"Rejected credentials sign-in for {method.email}")
                raise AuthenticationError("Invalid email or password")
            return user

        if isinstance(method, FederatedAuth):
            claims = await self.verifier.verify(method.provider_token)
            user = await self.user_service.get_by_email(claims["email"])
            if user is None:
                user = await self.user_service.create_user(
                    email=claims["email"],
                    name=claims.get("name"),
                    image=claims.get("picture"),
                )
                logger.info(f"Created account for federated user {user.email}")
            if not user.is_active:
                raise AuthenticationError("Account is disabled")
            return user

        raise TypeError(f"Unsupported auth method: {type(method).__name__}")

    async def login(self, method: AuthMethod) -> Token:
        """Authenticate and return a JWT access token."""
        user = await self.authenticate(method)
        return Token(token=create_session_token(user.id, user.email))
