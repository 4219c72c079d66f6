"""Account endpoints for the signed-in administrator."""

from fastapi import APIRouter, HTTPException, status

from app.core.deps import CurrentUserRequired, DBSession
from app.core.errors import AuthenticationError
from app.schemas.auth import ChangePassword
from app.services.user_service import UserService

router = APIRouter()


@router.put("/me/password", status_code=status.HTTP_204_NO_CONTENT)
async def change_own_password(
    data: ChangePassword,
    db: DBSession,
    current_user: CurrentUserRequired,
) -> None:
    """
    Change the signed-in user's password.

    - **currentPassword**: password in use now
    - **password**: new password (min 8 characters)

    Accounts created through Google sign-in have no password to change.
    """
    try:
        await UserService(db).change_password(current_user, data.current_password, data.password)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e
