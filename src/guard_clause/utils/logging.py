"""Structured logging setup (structlog)."""

from __future__ import annotations

import logging
from typing import Optional

import structlog

from guard_clause.config.settings import get_settings


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configure structlog for the application.

    ``level`` and ``fmt`` default to LOG_LEVEL / LOG_FORMAT from settings.
    ``fmt`` is either "json" or "console".
    """
    log_settings = get_settings().logging
    level = (level or log_settings.log_level).upper()
    fmt = (fmt or log_settings.log_format).lower()
    if fmt not in ("json", "console"):
        raise ValueError(f"Unknown log format: {fmt!r}")

    renderer = structlog.processors.JSONRenderer() if fmt == "json" else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        cache_logger_on_first_use=False,
    )
