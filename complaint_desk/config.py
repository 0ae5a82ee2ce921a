"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    app_timezone: str | None = Field(
        default="UTC",
        description="IANA timezone name or UTC offset used for stored timestamps",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Origins allowed to call the API from a browser",
    )
    openai_api_key: str | None = Field(
        default=None,
        description="OpenAI API key; email drafting and ticket analysis are disabled without it",
    )
    openai_base_url: str | None = Field(
        default=None,
        description="Optional base URL for OpenAI compatible endpoints",
    )
    openai_model: str = Field(default="gpt-4.1-mini", min_length=1)
    openai_temperature: float = Field(default=0.4, ge=0, le=2)
    openai_max_output_tokens: int | None = Field(default=2048)
    smtp_timeout_seconds: float = Field(
        default=30,
        gt=0,
        description="Timeout applied to every tenant SMTP conversation",
    )
    notification_mark_read_delay_seconds: float = Field(
        default=2.0,
        ge=0,
        description=(
            "Delay between opening the notification menu and marking every "
            "notification as read, so the unread badge stays visible briefly"
        ),
    )
    presence_threshold_seconds: int = Field(
        default=300,
        gt=0,
        description="Age of the last heartbeat under which a user counts as online",
    )

    @model_validator(mode="after")
    def _normalize_openai_key(self) -> "Settings":
        if self.openai_api_key is not None and not self.openai_api_key.strip():
            self.openai_api_key = None
        if self.openai_max_output_tokens is not None and self.openai_max_output_tokens <= 0:
            self.openai_max_output_tokens = None
        return self

    @property
    def text_generation_enabled(self) -> bool:
        """Return ``True`` when an OpenAI key is available for text generation."""

        return bool(self.openai_api_key)


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
