"""Billboard model for homepage promotional banners."""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Billboard(Base):
    """Billboard promo database model."""

    __tablename__ = "billboards"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    title: Mapped[str] = mapped_column(String(80))
    description: Mapped[str | None] = mapped_column(String(110), nullable=True)
    button_label: Mapped[str] = mapped_column(String(80))
    href: Mapped[str] = mapped_column(String(1024))
    image: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
