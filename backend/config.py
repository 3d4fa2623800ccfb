"""
Configuration management for the Enum Options API.

Loads settings from .env via pydantic-settings.
"""
import logging

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ── Application ─────────────────────────────────────────────────
    app_name: str = "Enum Options API"
    app_version: str = "1.0.0"
    environment: str = "development"
    log_level: str = "INFO"

    # ── Options ─────────────────────────────────────────────────────
    options_cache_seconds: int = 300     # enums are static, cache client-side
    select_css_class: str = "form-select"
    select_placeholder: Optional[str] = None  # leading empty <option> label

    # ── CORS ────────────────────────────────────────────────────────
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173,http://127.0.0.1:5173"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # allow unknown .env keys without crashing
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def validate_production_settings(self):
        """
        Validate settings for production safety.

        Enforces explicit CORS origins in production. Called during app startup.
        """
        if self.environment == "production":
            if "*" in self.cors_origins:
                raise ValueError(
                    "CORS_ORIGINS must not contain '*' in production. "
                    "Set explicit allowed origins."
                )
            logger.info("Production settings validated")
        else:
            if "*" in self.cors_origins:
                logger.warning("CORS_ORIGINS contains '*' (open access)")


# Global settings instance
settings = Settings()
