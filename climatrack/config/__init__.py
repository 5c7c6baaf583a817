"""Configuration (settings and logging) for ClimaTrack."""

from .logging_config import get_logger, setup_logging
from .settings import AppSettings, get_settings

__all__ = ["AppSettings", "get_settings", "get_logger", "setup_logging"]
