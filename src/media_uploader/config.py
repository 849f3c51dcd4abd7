"""Uploader configuration using Pydantic settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import ModelChoice


class Settings(BaseSettings):
    """Runtime configuration for the uploader.

    Every field can be overridden with a ``MEDIA_UPLOADER_`` prefixed
    environment variable or an entry in ``.env``.
    """

    model_config = SettingsConfigDict(env_file=".env", env_prefix="MEDIA_UPLOADER_", extra="ignore")

    # Prediction service
    api_base: str = "https://deepfake-detector-api-l4ru.onrender.com"
    predict_path: str = "/api/predict"
    default_model: ModelChoice = ModelChoice.V1
    request_timeout: float = 120.0
    user_agent: str = "media-uploader/0.1"

    # Logging
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache configuration for the current process."""

    return Settings()  # type: ignore[arg-type]


settings = get_settings()

__all__ = ["Settings", "get_settings", "settings"]
