"""Typed settings configuration - single source of truth."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Request log
    database_url: str | None = None
    request_log_backend: Literal["memory", "sql"] = "memory"
    request_log_max_entries: int | None = None

    # Completion service
    openai_api_key: SecretStr | None = None
    openai_model: str = "gpt-4o-mini"
    openai_temperature: float = 0.7
    openai_max_tokens: int = 4000

    # Generation
    generation_policy: Literal["deterministic", "assisted"] = "assisted"
    llm_timeout_seconds: float = 30.0

    # Uploads (bytes)
    max_upload_bytes: int = 50 * 1024 * 1024

    # Listing
    recent_notes_limit: int = 5


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
