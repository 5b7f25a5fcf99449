"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AISettings(BaseSettings):
    """Hosted generative model configuration."""

    model_config = SettingsConfigDict(env_prefix="AI_")

    provider: Literal["gemini"] = "gemini"
    api_key: str | None = None
    host: str = "https://generativelanguage.googleapis.com"
    api_version: str = "v1beta"
    model_name: str = "gemini-3-pro-preview"
    image_model: str = "gemini-2.5-flash-image"
    timeout: int = 120
    temperature: float | None = None

    # Circuit breaker settings
    failure_threshold: int = 3
    cooldown_seconds: int = 60

    # Retry settings (1 attempt = no retry)
    max_retries: int = 1
    retry_delay: float = 1.0
    retry_multiplier: float = 2.0


class StorageSettings(BaseSettings):
    """Storage configuration."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    data_dir: Path = Path("data")
    db_name: str = "lansky.db"

    # SQLite settings
    busy_timeout: int = 30000  # ms

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_name


class APISettings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    cors_origins: list[str] = ["*"]

    # Upload limits for the image editor
    max_upload_size: int = 10 * 1024 * 1024  # 10 MB
    allowed_image_types: list[str] = [
        "image/png",
        "image/jpeg",
        "image/webp",
        "image/gif",
    ]


class AdminSettings(BaseSettings):
    """Admin console configuration."""

    model_config = SettingsConfigDict(env_prefix="ADMIN_")

    # Admin routes are disabled while no token is configured
    token: str | None = None


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Lansky Ledger"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    ai: AISettings = Field(default_factory=AISettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    api: APISettings = Field(default_factory=APISettings)
    admin: AdminSettings = Field(default_factory=AdminSettings)

    @field_validator("storage", mode="before")
    @classmethod
    def ensure_data_dir(cls, v: Any) -> StorageSettings:
        if isinstance(v, dict):
            settings = StorageSettings(**v)
        else:
            settings = v or StorageSettings()
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        return settings


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
