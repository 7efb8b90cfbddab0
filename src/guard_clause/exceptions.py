"""
Guard failure types.

The ``reject_if_*`` functions raise :class:`InvalidOperationError`, which
carries no payload. The fluent clause raises :class:`InvalidArgumentError`
(or its :class:`ArgumentNullError` subclass) with the parameter name and a
message. :func:`describe_failure` turns any of them into a structured
:class:`GuardViolation` for logging or reporting.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class GuardError(Exception):
    """Base class for every failure raised by a guard."""


class InvalidOperationError(GuardError, RuntimeError):
    """A guard condition was violated. No message or parameter name attached."""


class InvalidArgumentError(GuardError, ValueError):
    """An argument failed a fluent guard check."""

    def __init__(self, message: Optional[str] = None, param_name: str = "") -> None:
        self.message = message or ""
        self.param_name = param_name or ""
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.param_name:
            if self.message:
                return f"{self.message} (Parameter '{self.param_name}')"
            return f"Parameter '{self.param_name}'"
        return self.message


class ArgumentNullError(InvalidArgumentError):
    """An argument was None where a value is required."""

    default_message = "Value cannot be None."

    def __init__(self, param_name: str = "", message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message, param_name)


class GuardViolation(BaseModel):
    """Structured description of a raised guard failure."""

    error_type: str = Field(..., description="Exception class name")
    param_name: Optional[str] = Field(default=None, description="Offending parameter, if known")
    message: str = Field(default="", description="Human-readable message")


def describe_failure(exc: GuardError) -> GuardViolation:
    """Build a GuardViolation from a raised guard error."""
    if isinstance(exc, InvalidArgumentError):
        return GuardViolation(
            error_type=type(exc).__name__,
            param_name=exc.param_name or None,
            message=exc.message,
        )
    return GuardViolation(error_type=type(exc).__name__, message=str(exc))
