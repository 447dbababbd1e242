"""Unit tests for conquest_support.core.logging."""

from __future__ import annotations

import json
import logging

import pytest
from rich.logging import RichHandler

from conquest_support.core.config import LoggingConfig
from conquest_support.core.logging import PACKAGE_LOGGER, JsonFormatter, configure_logging


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_text_format_uses_rich_handler() -> None:
    logger = configure_logging(LoggingConfig(level="WARNING"))
    assert logger.name == "conquest_support"
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)


def test_reconfigure_replaces_handler() -> None:
    configure_logging()
    logger = configure_logging(LoggingConfig(format="json"))
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, JsonFormatter)


def test_json_formatter_output() -> None:
    record = logging.LogRecord(
        name="conquest_support.core.overlay.coordinator",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Overlay %s -> %s",
        args=("none", "email_choice"),
        exc_info=None,
    )
    entry = json.loads(JsonFormatter().format(record))
    assert entry["level"] == "INFO"
    assert entry["logger"] == "conquest_support.core.overlay.coordinator"
    assert entry["message"] == "Overlay none -> email_choice"
    assert "ts" in entry
