"""Configuration management using Pydantic Settings."""
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ERGOSCORE_",
        case_sensitive=False,
    )

    # Application
    app_name: str = "ErgoScore Risk Engine"
    app_version: str = "1.0.0"
    debug: bool = False

    # Classification text falls back to this locale when the caller's is unknown
    default_locale: str = Field(default="en", pattern="^(en|fa)$")

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # HTTP
    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"])


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
