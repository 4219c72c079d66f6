"""Service layer for business logic."""

from app.services.about_us_service import AboutUsService
from app.services.auth_service import AuthService
from app.services.billboard_service import BillboardService
from app.services.event_service import EventService
from app.services.user_service import UserService

__all__ = [
    "AboutUsService",
    "AuthService",
    "BillboardService",
    "EventService",
    "UserService",
]
