"""
Application configuration and settings.
Centralized configuration management using Pydantic Settings.
"""
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

# Fixed upstream timeout, not read from the environment
GEMINI_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class GeminiConfig:
    """Immutable Gemini connection settings shared by the client and controller."""

    api_key: str
    default_model: str = DEFAULT_GEMINI_MODEL
    base_url: str = DEFAULT_GEMINI_BASE_URL
    timeout_seconds: float = GEMINI_TIMEOUT_SECONDS


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        env_file=[".env", ".env.local"],  # .env.local overrides .env
    )

    # Application settings
    app_name: str = "AI Assistant Service"
    environment: str = Field(default="local", description="local, staging or production")

    # Gemini settings
    gemini_api_key: str = Field(..., min_length=1, description="Google Gemini API key")
    gemini_model: str = Field(default=DEFAULT_GEMINI_MODEL, min_length=1)
    gemini_base_url: str = Field(default=DEFAULT_GEMINI_BASE_URL, min_length=1)

    # CORS settings
    allowed_origins: Optional[List[str]] = None

    # Logging settings
    log_level: str = "INFO"
    enable_request_logging: bool = True

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    def gemini_config(self) -> GeminiConfig:
        """Snapshot the Gemini settings as an immutable value."""
        return GeminiConfig(
            api_key=self.gemini_api_key,
            default_model=self.gemini_model,
            base_url=self.gemini_base_url.rstrip("/"),
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
