"""AboutUs model for the "about us" page sections."""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class AboutUs(Base):
    """AboutUs section database model."""

    __tablename__ = "about_us"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    title: Mapped[str] = mapped_column(String(80))
    description: Mapped[str] = mapped_column(Text)
    image: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    # Renders the image on the opposite side of the text
    reverse: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
