"""Environment configuration and validation.

This module defines strongly-typed application settings loaded from environment variables
(optionally via a local `.env` file): Botsify API credentials, the Telegram bot token and resolver
tuning.
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = "https://dev.botsify.com/api"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    telegram_bot_token: str | None = Field(default=None, alias="TELEGRAM_BOT_TOKEN")

    botsify_api_base_url: str = Field(default=DEFAULT_API_BASE_URL, alias="BOTSIFY_API_BASE_URL")
    botsify_api_key: str = Field(alias="BOTSIFY_API_KEY", min_length=1)
    botsify_bot_id: str = Field(alias="BOTSIFY_BOT_ID", min_length=1)
    botsify_api_timeout_s: float = Field(default=60.0, alias="BOTSIFY_API_TIMEOUT_S", gt=0)

    resolver_min_confidence: float = Field(
        default=0.5, alias="RESOLVER_MIN_CONFIDENCE", ge=0.0, le=1.0
    )

    @field_validator("botsify_api_base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        """Only http(s) endpoints are accepted; a trailing slash is dropped."""

        if not value.startswith(("http://", "https://")):
            raise ValueError("BOTSIFY_API_BASE_URL must be an http(s) URL")
        return value.rstrip("/")


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is missing or invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
