"""About-us section schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class AboutUsFields(BaseModel):
    """Fields submitted for an about-us section."""

    title: str = Field(..., min_length=1, max_length=80)
    description: str = Field(..., min_length=1, max_length=890)
    reverse: bool = False

    model_config = {"str_strip_whitespace": True}


class AboutUsDTO(BaseModel):
    """About-us section response schema."""

    id: str
    title: str
    description: str
    image: str | None = None
    reverse: bool = False
    created_at: datetime | None = Field(None, alias="createdAt")

    model_config = {"populate_by_name": True, "from_attributes": True}
