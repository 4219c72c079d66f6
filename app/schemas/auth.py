"""Authentication schemas."""

import re

from pydantic import BaseModel, Field, field_validator

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class UserLogin(BaseModel):
    """Credentials login request schema."""

    email: str = Field(..., description="Account email")
    password: str = Field(..., min_length=1, description="Account password")

    @field_validator("email")
    @classmethod
    def valid_email(cls, v: str) -> str:
        v = v.strip().lower()
        if not _EMAIL_RE.match(v):
            raise ValueError("Invalid email address")
        return v


class FederatedLogin(BaseModel):
    """Federated identity login request schema."""

    token: str = Field(..., min_length=1, description="Identity provider ID token")


class Token(BaseModel):
    """JWT token response schema."""

    token: str = Field(..., description="JWT access token")


class ChangePassword(BaseModel):
    """Change password request schema."""

    current_password: str = Field(..., alias="currentPassword", description="Current password")
    password: str = Field(..., min_length=8, description="New password")

    model_config = {"populate_by_name": True}


class UserDTO(BaseModel):
    """Authenticated user response schema."""

    id: str
    email: str
    name: str | None = None
    image: str | None = None
    is_superuser: bool = Field(False, alias="isSuperuser")

    model_config = {"populate_by_name": True, "from_attributes": True}
