"""Structured logging for contract checks.

Purpose
    Every check this package performs (a constructor probe, a harness outcome,
    a package walk) reports one log record on the ``lib_test_contracts`` logger.
    Each record carries a ``context`` mapping naming what was checked, so a test
    session can filter or assert on the diagnostics without parsing messages.

Contents
    - ``TRACE_ID``: context variable holding the active test-session trace id.
    - ``get_logger``: the package logger (silent until a host attaches handlers).
    - ``bind_trace_id``: binds or clears the active trace id.
    - ``log_debug`` / ``log_info`` / ``log_error``: emit one check record.

Record layout
    ``record.context == {"trace_id": ..., "subject": ..., "check": ..., **details}``
    where *subject* is the class, computation shape, package or target being
    looked at and *check* names the probe or outcome. Probes and harness
    outcomes log at debug, a fully verified exception class logs at info, and
    every violation or import failure logs at error.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Final

TRACE_ID: ContextVar[str | None] = ContextVar("lib_test_contracts_trace_id", default=None)
"""Trace id attached to every check record, ``None`` when unbound."""

_LOGGER: Final[logging.Logger] = logging.getLogger("lib_test_contracts")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Return the package logger so a host test suite may attach handlers."""

    return _LOGGER


def bind_trace_id(trace_id: str | None) -> None:
    """Bind *trace_id* to subsequent check records; ``None`` clears it.

    Examples
    --------
    >>> bind_trace_id('session-1')
    >>> TRACE_ID.get()
    'session-1'
    >>> bind_trace_id(None)
    >>> TRACE_ID.get() is None
    True
    """

    TRACE_ID.set(trace_id)


def log_debug(event: str, subject: str, check: str, **details: Any) -> None:
    """Record a routine step such as a single constructor probe."""

    _emit(logging.DEBUG, event, subject, check, details)


def log_info(event: str, subject: str, check: str, **details: Any) -> None:
    """Record a completed check such as a fully verified exception class."""

    _emit(logging.INFO, event, subject, check, details)


def log_error(event: str, subject: str, check: str, **details: Any) -> None:
    """Record a violation or an import failure."""

    _emit(logging.ERROR, event, subject, check, details)


def check_context(subject: str, check: str, details: dict[str, Any] | None = None) -> dict[str, Any]:
    """Return the ``context`` mapping attached to a check record.

    Examples
    --------
    >>> check_context('ValueError', 'no-args', {'diagnostic': 'x'})
    {'trace_id': None, 'subject': 'ValueError', 'check': 'no-args', 'diagnostic': 'x'}
    """

    context: dict[str, Any] = {"trace_id": TRACE_ID.get(), "subject": subject, "check": check}
    if details:
        context.update(details)
    return context


def _emit(level: int, event: str, subject: str, check: str, details: dict[str, Any]) -> None:
    _LOGGER.log(level, event, extra={"context": check_context(subject, check, details)})
