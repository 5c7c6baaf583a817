"""
Logging setup based on loguru.

Usage:
    from climatrack.config.logging_config import setup_logging, get_logger

    setup_logging(log_level="INFO", log_dir="logs", json_logs=False)
    logger = get_logger(__name__)

Standard library loggers (uvicorn, httpx, fastapi) are redirected into
loguru so every record goes through the same sinks.
"""

import logging
import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Forward stdlib logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk back to the frame that issued the logging call
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(
    log_level: str = "INFO",
    log_dir: str | None = None,
    json_logs: bool = False,
) -> None:
    """
    Configure loguru sinks.

    Args:
        log_level: Minimum level for every sink
        log_dir: Directory for a rotating ``climatrack.log`` file
            (no file sink when None)
        json_logs: Serialize the file sink as JSON lines
    """
    logger.remove()
    logger.add(
        sys.stdout,
        level=log_level,
        colorize=True,
        format=CONSOLE_FORMAT,
    )

    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        logger.add(
            path / "climatrack.log",
            level=log_level,
            rotation="10 MB",
            retention="14 days",
            serialize=json_logs,
            enqueue=True,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "httpx"):
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False

    logger.info(
        f"Logging configured | level={log_level} | "
        f"file={'on' if log_dir else 'off'}"
    )


def get_logger(name: str | None = None):
    """Return the shared loguru logger bound to a module name."""
    if name is None:
        return logger
    return logger.bind(module=name)
