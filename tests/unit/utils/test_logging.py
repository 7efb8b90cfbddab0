"""Unit tests for structlog configuration."""

import os
from unittest.mock import patch

import pytest
import structlog

from guard_clause.config.settings import reload_settings
from guard_clause.utils.logging import configure_logging


def _renderer():
    return structlog.get_config()["processors"][-1]


def test_configure_logging_json_renderer() -> None:
    configure_logging(level="INFO", fmt="json")
    assert isinstance(_renderer(), structlog.processors.JSONRenderer)


def test_configure_logging_console_renderer() -> None:
    configure_logging(level="DEBUG", fmt="console")
    assert isinstance(_renderer(), structlog.dev.ConsoleRenderer)


def test_configure_logging_defaults_from_settings() -> None:
    with patch.dict(os.environ, {"LOG_LOG_FORMAT": "console"}):
        reload_settings()
    configure_logging()
    assert isinstance(_renderer(), structlog.dev.ConsoleRenderer)


def test_configure_logging_unknown_format_raises() -> None:
    with pytest.raises(ValueError):
        configure_logging(fmt="xml")


def test_level_filter_drops_debug(capsys) -> None:
    configure_logging(level="WARNING", fmt="json")
    log = structlog.get_logger("test")
    log.debug("hidden")
    log.warning("shown", key="value")
    out = capsys.readouterr().out
    assert "hidden" not in out
    assert '"event": "shown"' in out
    assert '"level": "warning"' in out
