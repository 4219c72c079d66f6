"""Database models."""

from app.models.about_us import AboutUs
from app.models.billboard import Billboard
from app.models.event import Event
from app.models.user import User

__all__ = [
    "AboutUs",
    "Billboard",
    "Event",
    "User",
]
