"""Configuration for guard_clause."""

from guard_clause.config.settings import (
    GuardSettings,
    LoggingSettings,
    Settings,
    get_settings,
    reload_settings,
)

__all__ = ["GuardSettings", "LoggingSettings", "Settings", "get_settings", "reload_settings"]
