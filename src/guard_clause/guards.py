"""
Static guard functions.

Each function inspects a single value and either returns it unchanged or
raises :class:`~guard_clause.exceptions.InvalidOperationError`. Returning the
value lets the guards be used inline, e.g. ``self.name = reject_if_blank(name)``.
"""

from __future__ import annotations

from typing import Optional, TypeVar

import structlog

from guard_clause.config.settings import get_settings
from guard_clause.exceptions import InvalidOperationError

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def _violation(guard: str) -> InvalidOperationError:
    if get_settings().guard.log_violations:
        logger.debug("guard_violation", guard=guard)
    return InvalidOperationError()


def reject_if_absent(value: T) -> T:
    """Return ``value``; raise InvalidOperationError if it is None."""
    if value is None:
        raise _violation("reject_if_absent")
    return value


def reject_if_present(value: Optional[T]) -> Optional[T]:
    """Return ``value`` (which is None); raise InvalidOperationError otherwise."""
    if value is not None:
        raise _violation("reject_if_present")
    return value


def reject_if_out_of_range(value: int, lower: int, upper: int) -> int:
    """
    Raise InvalidOperationError if ``value`` lies inside ``[lower, upper]``.

    Both bounds are inclusive. Note the polarity: the guard rejects values
    *within* the range and lets values outside it through. With
    ``lower > upper`` the range is empty and nothing is rejected.
    """
    if lower <= value <= upper:
        raise _violation("reject_if_out_of_range")
    return value


def reject_if_blank(value: Optional[str]) -> str:
    """
    Return ``value``; raise InvalidOperationError if it is None or empty.

    Only zero-length strings are blank. Whitespace-only strings pass.
    """
    if value is None or len(value) == 0:
        raise _violation("reject_if_blank")
    return value
