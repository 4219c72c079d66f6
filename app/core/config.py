"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MIB = 1024 * 1024


class Settings(BaseSettings):
    """Application settings loaded from environment variables and config files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App Info
    app_name: str = "Content Dashboard API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 1

    # Database
    data_save_folder: str = "./data"
    db_file: str = "dashboard.db"
    database_url_override: str | None = Field(default=None, alias="DATABASE_URL")

    @property
    def database_url(self) -> str:
        """Database URL, SQLite inside the data folder unless overridden."""
        if self.database_url_override:
            return self.database_url_override
        db_path = Path(self.data_save_folder) / self.db_file
        return f"sqlite+aiosqlite:///{db_path}"

    # JWT Authentication
    jwt_secret_key: str = Field(
        default="change-me-in-production-4f1c2a9e7b",
        alias="JWT_SECRET_KEY",
    )
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 60 * 24  # 24 hours
    jwt_issuer: str = "content-dashboard"
    jwt_audience: str = "content-dashboard"
    bcrypt_rounds: int = Field(default=12, ge=4, le=31, alias="BCRYPT_ROUNDS")
    session_cookie_name: str = "dashboard_session"
    session_cookie_secure: bool = False

    # Default administrator seeded at startup
    admin_email: str = Field(default="admin@example.com", alias="ADMIN_EMAIL")
    admin_password: str | None = Field(default=None, alias="ADMIN_PASSWORD")

    # Federated sign-in (Google)
    google_client_id: str | None = Field(default=None, alias="AUTH_GOOGLE_ID")
    google_tokeninfo_url: str = "https://oauth2.googleapis.com/tokeninfo"

    # Media Store
    media_backend: Literal["local", "http"] = Field(
        default="local",
        alias="MEDIA_BACKEND",
    )
    media_root: str = Field(default="./data/media", alias="MEDIA_ROOT")
    media_base_url: str = Field(
        default="http://localhost:8000/media",
        alias="MEDIA_BASE_URL",
    )
    media_service_url: str = Field(
        default="http://localhost:9000",
        alias="MEDIA_SERVICE_URL",
        description="Remote media service base URL (http backend)",
    )
    media_service_api_key: str | None = Field(default=None, alias="MEDIA_SERVICE_API_KEY")
    media_service_timeout: float = 30.0

    # Upload limits (bytes)
    max_image_size: int = 4 * MIB
    max_about_us_image_size: int = 1 * MIB
    max_audio_size: int | None = None

    # CORS
    cors_origins: list[str] = ["*"]
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    @field_validator("media_base_url", "media_service_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Remove trailing slash so URLs can be joined with '/'."""
        return v.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
