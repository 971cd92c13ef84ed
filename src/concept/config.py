"""Application configuration via pydantic-settings."""

from functools import lru_cache
from typing import Literal, get_args

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class Settings(BaseSettings):
    """CLI settings loaded from CONCEPT_* environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_prefix="concept_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Notion
    token: str = ""
    page_size: int = 100  # max allowed by blocks.children.list
    timeout_ms: int | None = None

    # Trimming
    skip_unchanged: bool = False

    # App
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Return cached settings. Lazy initialization to avoid import-time errors."""
    return Settings()
