"""User service for administrator account management."""

from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import AuthenticationError
from app.core.security import check_password, hash_password
from app.models.user import User
from app.services.base_service import BaseService


class UserService(BaseService[User]):
    """User service for authentication and management."""

    entity_name = "User"

    def __init__(self, db: AsyncSession):
        super().__init__(db, User)

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email."""
        result = await self.db.execute(
            select(User).where(User.email == email.strip().lower())
        )
        return result.scalar_one_or_none()

    async def authenticate(self, email: str, password: str) -> User | None:
        """Authenticate an active user by email and password."""
        user = await self.get_by_email(email)
        if not user or not user.is_active:
            return None
        if not check_password(password, user.hashed_password):
            return None
        return user

    async def change_password(
        self,
        user: User,
        current_password: str,
        new_password: str,
    ) -> None:
        """Replace a user's password after checking the current one.

        Raises:
            AuthenticationError: If the account has no password (federated
                sign-in only) or the current password does not match.
        """
        if not user.hashed_password:
            raise AuthenticationError("This account signs in with Google and has no password")
        if not check_password(current_password, user.hashed_password):
            logger.info(f"Rejected password change for {user.email}")
            raise AuthenticationError("Current password is incorrect")

        user.hashed_password = hash_password(new_password)
        await self.update(user)
        logger.info(f"Password changed for {user.email}")

    async def create_user(
        self,
        email: str,
        password: str | None = None,
        name: str | None = None,
        image: str | None = None,
        is_superuser: bool = False,
    ) -> User:
        """Create new user. Federated accounts are created without a password."""
        user = User(
            email=email.strip().lower(),
            name=name,
            image=image,
            hashed_password=hash_password(password) if password else None,
            is_active=True,
            is_superuser=is_superuser,
        )
        return await self.create(user)
