"""Pytest configuration and shared fixtures."""

import pytest
import structlog

from guard_clause.clause import clear_call_site_cache
from guard_clause.config.settings import reload_settings


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: tests that combine several guards at a call site")


@pytest.fixture(autouse=True)
def fresh_settings():
    """Rebuild settings, clear resolved call sites and reset structlog around each test."""
    settings = reload_settings()
    clear_call_site_cache()
    yield settings
    reload_settings()
    structlog.reset_defaults()
