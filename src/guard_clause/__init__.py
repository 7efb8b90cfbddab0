"""
guard_clause: precondition checks that raise on violation and return the value otherwise.

Static guards (``reject_if_absent``, ``reject_if_present``,
``reject_if_out_of_range``, ``reject_if_blank``) and a fluent clause
(``against(value).when(...)``) for use at the top of functions and constructors.
"""

from guard_clause.clause import GuardClause, against
from guard_clause.config.settings import get_settings
from guard_clause.exceptions import (
    ArgumentNullError,
    GuardError,
    GuardViolation,
    InvalidArgumentError,
    InvalidOperationError,
    describe_failure,
)
from guard_clause.guards import (
    reject_if_absent,
    reject_if_blank,
    reject_if_out_of_range,
    reject_if_present,
)
from guard_clause.utils.logging import configure_logging

__all__ = [
    # Static guards
    "reject_if_absent",
    "reject_if_present",
    "reject_if_out_of_range",
    "reject_if_blank",
    # Fluent clause
    "against",
    "GuardClause",
    # Errors
    "GuardError",
    "InvalidOperationError",
    "InvalidArgumentError",
    "ArgumentNullError",
    "GuardViolation",
    "describe_failure",
    # Ambient
    "configure_logging",
    "get_settings",
]
