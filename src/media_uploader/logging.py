"""Centralised logging configuration with JSON output."""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional

import structlog

DEFAULT_LOG_LEVEL = "INFO"

_configured = False


_PROCESSORS = (
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.add_log_level,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(),
)


def _configure_structlog(level: str) -> None:
    structlog.configure(
        processors=list(_PROCESSORS),
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(level: Optional[str] = None, force: bool = False) -> None:
    """Initialise stdlib + structlog JSON logging.

    Logs go to stderr so they never mix with the rendered status on stdout.
    """

    global _configured
    if _configured and not force:
        return

    if level is None:
        from .config import settings

        level = settings.log_level or DEFAULT_LOG_LEVEL

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
        force=force,
    )
    _configure_structlog(level)
    _configured = True


def get_logger(name: str, **initial_values: Any) -> structlog.stdlib.BoundLogger:
    """Return a bound structured logger."""

    configure_logging()
    logger = structlog.get_logger(name)
    if initial_values:
        return logger.bind(**initial_values)
    return logger


__all__ = ["configure_logging", "get_logger"]
