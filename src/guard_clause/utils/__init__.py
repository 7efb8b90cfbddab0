"""Shared utilities and helpers for the guard-clause package."""

from guard_clause.utils.logging import configure_logging

__all__ = ["configure_logging"]
