"""Application settings and configuration management."""
from __future__ import annotations

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables or defaults."""

    APP_CONFIG_PATH: str = Field(default="app_config.json")
    FALLBACK_GREETING: str = "Hello! I'm ready to interview you."
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"])
    SESSION_LIMIT: int = Field(default=500, ge=1)

    model_config = SettingsConfigDict(env_file=".env", validate_assignment=True, extra="ignore")


settings = Settings()
