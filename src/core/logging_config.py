"""Structured logging configuration.

This module initializes structlog with a stable JSON event format.
Modules call ``get_logger(__name__)`` once and log snake_case events.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.config import BoostBoxConfig


def configure_logging(config: BoostBoxConfig | None = None) -> None:
    """Configure structlog processors and minimum level.

    Args:
        config: Optional runtime config; DEV enables debug output.
    """
    level = logging.DEBUG if config is not None and config.is_dev else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(sys.__stderr__),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Applies the default configuration on first use so library callers
    get JSON events on stderr at info level without extra setup.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger that accepts keyword event fields.
    """
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name)
