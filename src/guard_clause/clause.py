"""
Fluent guard clause.

``against(value)`` wraps a value together with the name of the expression that
produced it; the returned :class:`GuardClause` exposes chainable checks::

    def __init__(self, port):
        self.port = against(port).when_null().when(lambda p: p <= 0, "Port must be positive.").value

When ``param_name`` is omitted, the source text of the argument at the call
site is recovered from the caller's frame (``"port"`` above). If the source is
unavailable (REPL, frozen app, aliased import) the name is left empty.
"""

from __future__ import annotations

import ast
import functools
import inspect
import linecache
from types import CodeType, FrameType
from typing import Callable, Dict, Generic, List, Optional, Tuple, TypeVar

import structlog

from guard_clause.config.settings import get_settings
from guard_clause.exceptions import ArgumentNullError, InvalidArgumentError

logger = structlog.get_logger(__name__)

T = TypeVar("T")

ENTRY_POINT = "against"

# Resolved names per call site, keyed on (code object, bytecode offset).
_SITE_NAMES: Dict[Tuple[CodeType, int], str] = {}
MAX_CACHED_SITES = 4096


# -----------------------------------------------------------------------------
# Call-site expression capture
# -----------------------------------------------------------------------------


@functools.lru_cache(maxsize=128)
def _parse_module(source: str) -> Optional[ast.Module]:
    try:
        return ast.parse(source)
    except SyntaxError:
        return None


def _is_entry_point(func: ast.expr) -> bool:
    if isinstance(func, ast.Name):
        return func.id == ENTRY_POINT
    if isinstance(func, ast.Attribute):
        return func.attr == ENTRY_POINT
    return False


def _value_argument(call: ast.Call) -> Optional[ast.expr]:
    if call.args:
        return call.args[0]
    for kw in call.keywords:
        if kw.arg == "value":
            return kw.value
    return None


def _call_site_expression(frame: FrameType) -> str:
    """Return the source text of the value passed to ``against()`` from ``frame``."""
    info = inspect.getframeinfo(frame, context=0)
    source = "".join(linecache.getlines(info.filename, frame.f_globals))
    if not source:
        return ""
    tree = _parse_module(source)
    if tree is None:
        return ""

    lineno = frame.f_lineno
    candidates: List[ast.Call] = [
        node
        for node in ast.walk(tree)
        if isinstance(node, ast.Call)
        and _is_entry_point(node.func)
        and node.lineno <= lineno <= (node.end_lineno or node.lineno)
    ]

    # Python 3.11+ reports exact instruction positions; use them to pick
    # between several calls on the same line.
    positions = getattr(info, "positions", None)
    if positions is not None and positions.end_lineno is not None and len(candidates) > 1:
        candidates = [
            node
            for node in candidates
            if node.end_lineno == positions.end_lineno and node.end_col_offset == positions.end_col_offset
        ]

    if len(candidates) != 1:
        return ""
    arg = _value_argument(candidates[0])
    if arg is None:
        return ""
    return ast.get_source_segment(source, arg) or ""


def _call_site_name(frame: FrameType) -> str:
    """Resolve the call site in ``frame`` once; later calls from it hit the cache."""
    key = (frame.f_code, frame.f_lasti)
    name = _SITE_NAMES.get(key)
    if name is None:
        name = _call_site_expression(frame)
        if len(_SITE_NAMES) >= MAX_CACHED_SITES:
            _SITE_NAMES.clear()
        _SITE_NAMES[key] = name
    return name


def clear_call_site_cache() -> None:
    """Forget resolved call-site names (e.g. after source files were reloaded)."""
    _SITE_NAMES.clear()
    _parse_module.cache_clear()


# -----------------------------------------------------------------------------
# GuardClause
# -----------------------------------------------------------------------------


class GuardClause(Generic[T]):
    """A value and its diagnostic name, with chainable checks."""

    __slots__ = ("value", "param_name")

    def __init__(self, value: T, param_name: str = "") -> None:
        self.value = value
        self.param_name = param_name

    def __repr__(self) -> str:
        return f"GuardClause(value={self.value!r}, param_name={self.param_name!r})"

    def _log(self, guard: str) -> None:
        if get_settings().guard.log_violations:
            logger.debug("guard_violation", guard=guard, param_name=self.param_name)

    def when(self, predicate: Callable[[T], bool], message: Optional[str] = None) -> "GuardClause[T]":
        """Raise InvalidArgumentError if ``predicate(value)`` is true."""
        if predicate(self.value):
            self._log("when")
            if message is None:
                message = get_settings().guard.default_message
            raise InvalidArgumentError(message, self.param_name)
        return self

    def when_null(self) -> "GuardClause[T]":
        """Raise ArgumentNullError if the value is None."""
        if self.value is None:
            self._log("when_null")
            raise ArgumentNullError(self.param_name)
        return self

    def when_not_null(self) -> "GuardClause[T]":
        """Raise InvalidArgumentError if the value is not None."""
        if self.value is not None:
            self._log("when_not_null")
            raise InvalidArgumentError(get_settings().guard.not_null_message, self.param_name)
        return self


def against(value: T, param_name: Optional[str] = None) -> GuardClause[T]:
    """
    Start a fluent guard clause for ``value``.

    Args:
        value: The value to check.
        param_name: Name reported in failures. Defaults to the source text
            of the ``value`` argument at the call site when it can be
            recovered, otherwise an empty string.
    """
    if param_name is None:
        param_name = ""
        if get_settings().guard.capture_param_names:
            frame = inspect.currentframe()
            caller = frame.f_back if frame is not None else None
            try:
                if caller is not None:
                    param_name = _call_site_name(caller)
            finally:
                del frame, caller
    return GuardClause(value, param_name)
