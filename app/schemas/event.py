"""Event schemas for form submissions and API responses."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from app.models.event import Event


class EventFields(BaseModel):
    """Scalar fields submitted when creating or updating an event."""

    title: str = Field(..., min_length=1, max_length=80)
    description: str = Field(..., min_length=1, max_length=150)
    address: str = Field(..., min_length=1, max_length=200)
    start_date: datetime = Field(..., alias="startDate")
    end_date: datetime = Field(..., alias="endDate")

    model_config = {"populate_by_name": True, "str_strip_whitespace": True}

    @field_validator("start_date", "end_date")
    @classmethod
    def to_naive_utc(cls, v: datetime) -> datetime:
        """Store timestamps as naive UTC."""
        if v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v

    @field_validator("end_date")
    @classmethod
    def end_not_before_start(cls, v: datetime, info: ValidationInfo) -> datetime:
        start = info.data.get("start_date")
        if start is not None and v < start:
            raise ValueError("The end date cannot be earlier than the start date")
        return v


class EventDTO(BaseModel):
    """Event response schema."""

    id: str
    title: str
    description: str
    address: str
    start_date: datetime = Field(..., alias="startDate")
    end_date: datetime = Field(..., alias="endDate")
    billboard: str
    images: list[str] = []
    podcast_url: str | None = Field(None, alias="podcastUrl")
    video_url: str | None = Field(None, alias="videoUrl")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_model(cls, event: Event) -> "EventDTO":
        return cls(
            id=event.id,
            title=event.title,
            description=event.description,
            address=event.address,
            start_date=event.start_date,
            end_date=event.end_date,
            billboard=event.billboard,
            images=event.get_images(),
            podcast_url=event.podcast_url,
            video_url=event.video_url,
            created_at=event.created_at,
            updated_at=event.updated_at,
        )


class EventListResponse(BaseModel):
    """Event list response schema."""

    events: list[EventDTO]
    total: int
