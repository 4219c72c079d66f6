"""Authentication API endpoints."""

from fastapi import APIRouter, HTTPException, Response, status

from app.core.config import get_settings
from app.core.deps import CurrentUserRequired, DBSession
from app.core.errors import AuthenticationError
from app.schemas.auth import FederatedLogin, Token, UserDTO, UserLogin
from app.services.auth_service import AuthMethod, AuthService, CredentialsAuth, FederatedAuth

settings = get_settings()

router = APIRouter()


async def _login(method: AuthMethod, db: DBSession, response: Response) -> Token:
    auth_service = AuthService(db)
    try:
        token = await auth_service.login(method)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        ) from e

    response.set_cookie(
        key=settings.session_cookie_name,
        value=token.token,
        max_age=settings.jwt_access_token_expire_minutes * 60,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    return token


@router.post("", response_model=Token)
async def login(credentials: UserLogin, db: DBSession, response: Response) -> Token:
    """
    Login with email and password and get a JWT access token.

    The token is also set as the session cookie.
    """
    return await _login(CredentialsAuth(credentials.email, credentials.password), db, response)


@router.post("/google", response_model=Token)
async def login_google(data: FederatedLogin, db: DBSession, response: Response) -> Token:
    """
    Login with a Google ID token.

    - **token**: ID token obtained by the browser from Google sign-in
    """
    return await _login(FederatedAuth(data.token), db, response)


@router.post("/logout")
async def logout(response: Response) -> dict:
    """Clear the session cookie."""
    response.delete_cookie(settings.session_cookie_name)
    return {"status": "success"}


@router.get("/me", response_model=UserDTO)
async def me(current_user: CurrentUserRequired) -> UserDTO:
    """Get the signed-in user."""
    return UserDTO.model_validate(current_user)
