"""
Application settings for ClimaTrack.

Values come from environment variables with sensible defaults, so the
API runs out of the box and can be tuned per deployment:

- CLIMATRACK_API_PREFIX: prefix mounted in front of every route ("")
- CLIMATRACK_CORS_ORIGINS: comma separated list of allowed origins ("*")
- CLIMATRACK_FALLBACK_MAX_STEPS: days inspected by the fallback search (3)
- CLIMATRACK_LOG_LEVEL: loguru level ("INFO")
- CLIMATRACK_LOG_DIR: directory for the rotating log file (disabled if unset)
- CLIMATRACK_JSON_LOGS: "1" to serialize the file sink as JSON
"""

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class AppSettings(BaseModel):
    """Runtime configuration for the FastAPI application."""

    # Environment-derived defaults go through the same checks as kwargs
    model_config = ConfigDict(validate_default=True)

    PROJECT_NAME: str = "ClimaTrack"
    VERSION: str = "1.0.0"
    API_PREFIX: str = Field(
        default_factory=lambda: os.getenv("CLIMATRACK_API_PREFIX", "")
    )
    BACKEND_CORS_ORIGINS: list[str] = Field(
        default_factory=lambda: _split_origins(
            os.getenv("CLIMATRACK_CORS_ORIGINS", "*")
        )
    )
    FALLBACK_MAX_STEPS: int = Field(
        default_factory=lambda: int(
            os.getenv("CLIMATRACK_FALLBACK_MAX_STEPS", "3")
        ),
        ge=1,
    )
    LOG_LEVEL: str = Field(
        default_factory=lambda: os.getenv("CLIMATRACK_LOG_LEVEL", "INFO")
    )
    LOG_DIR: str | None = Field(
        default_factory=lambda: os.getenv("CLIMATRACK_LOG_DIR") or None
    )
    JSON_LOGS: bool = Field(
        default_factory=lambda: os.getenv("CLIMATRACK_JSON_LOGS", "0") == "1"
    )


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """
    Lazy settings singleton.

    Environment is read once per process; tests that need other values
    call ``get_settings.cache_clear()`` after patching the environment.
    """
    return AppSettings()
