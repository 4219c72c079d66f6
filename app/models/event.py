"""Event model for published events."""

import json
import uuid
from datetime import datetime

from sqlalchemy import DateTime, Index, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Event(Base):
    """Event database model - an event with its billboard and media."""

    __tablename__ = "events"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )

    title: Mapped[str] = mapped_column(String(80))
    description: Mapped[str] = mapped_column(String(150))
    address: Mapped[str] = mapped_column(String(200))
    start_date: Mapped[datetime] = mapped_column(DateTime, index=True)
    end_date: Mapped[datetime] = mapped_column(DateTime)

    # Media
    billboard: Mapped[str] = mapped_column(String(1024))
    images: Mapped[str | None] = mapped_column(Text, nullable=True)  # JSON list of URLs
    podcast_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    video_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (
        Index("ix_events_start_end", "start_date", "end_date"),
    )

    def get_images(self) -> list[str]:
        """Deserialize images JSON to list."""
        if not self.images:
            return []
        try:
            return json.loads(self.images)
        except json.JSONDecodeError:
            return []

    def set_images(self, images: list[str]) -> None:
        """Serialize images list to JSON."""
        self.images = json.dumps(images) if images else None

    def media_urls(self) -> list[str]:
        """All media URLs referenced by this event."""
        urls = [self.billboard, *self.get_images(), self.podcast_url]
        return [url for url in urls if url]
