"""Runtime configuration read from the environment or a `.env` file."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Settings for the API process; names map to upper-case environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="SQLAlchemy URL of the notification and project store",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key used to verify identity provider JWT tokens",
        min_length=1,
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Number of minutes before locally issued access tokens expire",
        gt=0,
    )
    app_timezone: str = Field(
        default="UTC",
        description="IANA timezone name (or UTC±HH:MM offset) used for timestamps",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Origins allowed to call the API from a browser",
    )
    notification_list_limit: int = Field(
        default=20,
        description="Default number of notifications returned by list endpoints",
        gt=0,
        le=200,
    )
    activity_list_limit: int = Field(
        default=10,
        description="Default number of activities returned by the project feed",
        gt=0,
        le=200,
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level applied when the application starts",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError("LOG_LEVEL must be a standard logging level name")
        return normalized


@lru_cache
def get_settings() -> Settings:
    """Build the settings once per process."""

    return Settings()


__all__ = ["Settings", "get_settings"]
