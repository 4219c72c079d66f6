"""
Model registry for table creation.

Import all models here to ensure they are registered with SQLAlchemy metadata.
"""

from app.db.base import Base
from app.models.about_us import AboutUs
from app.models.billboard import Billboard
from app.models.event import Event
from app.models.user import User

__all__ = [
    "AboutUs",
    "Base",
    "Billboard",
    "Event",
    "User",
]
