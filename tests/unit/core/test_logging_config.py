"""Unit tests for structured logging setup."""

from __future__ import annotations

import structlog

from core.logging_config import get_logger


def test_get_logger_configures_structlog_on_first_use(capsys) -> None:
    """Library callers should get configured loggers that keep stdout clean."""
    structlog.reset_defaults()

    logger = get_logger("tests.logging")
    logger.debug("debug_event", field=1)
    logger.info("info_event", field=2)

    assert structlog.is_configured() and capsys.readouterr().out == ""
