"""Billboard promo schemas."""

from datetime import datetime

from pydantic import AnyHttpUrl, BaseModel, Field, field_validator


class BillboardFields(BaseModel):
    """Fields submitted for a billboard promo."""

    title: str = Field(..., min_length=1, max_length=80)
    description: str | None = Field(None, max_length=110)
    button_label: str = Field(..., min_length=1, max_length=80, alias="buttonLabel")
    href: AnyHttpUrl

    model_config = {"populate_by_name": True, "str_strip_whitespace": True}

    @field_validator("description")
    @classmethod
    def empty_description_is_none(cls, v: str | None) -> str | None:
        return v or None


class BillboardDTO(BaseModel):
    """Billboard promo response schema."""

    id: str
    title: str
    description: str | None = None
    button_label: str = Field(..., alias="buttonLabel")
    href: str
    image: str | None = None
    created_at: datetime | None = Field(None, alias="createdAt")

    model_config = {"populate_by_name": True, "from_attributes": True}
