"""Failure assertion harness.

Purpose
-------
Let a unit test state "this call must fail", optionally naming the expected
exception type and an explanation that prefixes every diagnostic.

Contents
--------
* :class:`Assignment` – wraps a value-producing zero-argument callable.
* :class:`Execution` – wraps a zero-argument callable whose result is ignored.
* :data:`UNIVERSAL_FAILURE` – default expected type; any exception matches.
* :func:`assert_fails` – the single routine both shapes go through.
* :func:`assert_assignment_fails` / :func:`assert_execution_fails` – shape
  explicit shortcuts.

System Role
-----------
Each call invokes the computation exactly once on the caller's thread. A
mismatch is raised as
:class:`~lib_test_contracts.domain.errors.FailureExpectationViolation`; the
expected failure of the computation is swallowed and reported as success.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Final, Generic, TypeVar, Union

from ..domain.errors import FailureExpectationViolation
from ..observability import log_debug, log_error

V = TypeVar("V")

ExpectedFailure = Union[type[BaseException], tuple[type[BaseException], ...]]

UNIVERSAL_FAILURE: Final[type[BaseException]] = BaseException


@dataclass(frozen=True)
class Assignment(Generic[V]):
    """A deferred computation that produces a value."""

    function: Callable[[], V]
    label: ClassVar[str] = "Assignment"

    def __post_init__(self) -> None:
        _require_callable(self.function)

    def __call__(self) -> V:
        return self.function()


@dataclass(frozen=True)
class Execution:
    """A deferred computation run for its side effects only."""

    function: Callable[[], Any]
    label: ClassVar[str] = "Execution"

    def __post_init__(self) -> None:
        _require_callable(self.function)

    def __call__(self) -> None:
        self.function()


def assert_fails(
    computation: Assignment[Any] | Execution | Callable[[], Any],
    message: str | None = None,
    expected: ExpectedFailure = UNIVERSAL_FAILURE,
) -> None:
    """Invoke ``computation`` once and require it to raise ``expected``.

    Why
        ``pytest.raises`` reports a bare "DID NOT RAISE"; this harness keeps an
        explanation and both type names in every diagnostic so failures read the
        same in any runner.

    Inputs
        computation: :class:`Assignment`, :class:`Execution` or a bare
            zero-argument callable (treated as an :class:`Assignment`).
        message: Explanation prefixed to every diagnostic. It is never matched
            against the raised exception's message.
        expected: Exception type (or tuple of types) the computation must raise.
            Subclasses match. Defaults to :data:`UNIVERSAL_FAILURE`.
    Outputs
        ``None`` when the computation raised a matching exception.
    Raises
        FailureExpectationViolation: the computation returned normally, or
            raised something that is not an instance of ``expected``.
        TypeError: ``computation`` is not callable or ``expected`` is not an
            exception type.

    Examples
    --------
    >>> assert_fails(lambda: int("x"), expected=ValueError)
    >>> assert_fails(lambda: 42, "parsing should fail")
    Traceback (most recent call last):
    ...
    lib_test_contracts.domain.errors.FailureExpectationViolation: parsing should fail; Assignment did not throw any exception
    """

    wrapped = _as_computation(computation)
    expected_name = _describe_expected(expected)
    try:
        wrapped()
    except BaseException as exc:
        if isinstance(exc, expected):
            log_debug("failure-expected", wrapped.label, "type-ok", expected=expected_name, actual=type(exc).__name__)
            return None
        diagnostic = (
            f"{message}; {wrapped.label} failed on unexpected Throwable, "
            f"expected ({expected_name}), but got ({type(exc).__name__})."
        )
        log_error("failure-type-mismatch", wrapped.label, "type-mismatch", diagnostic=diagnostic)
        raise FailureExpectationViolation(diagnostic) from exc
    diagnostic = f"{message}; {wrapped.label} did not throw any exception"
    log_error("failure-not-raised", wrapped.label, "not-raised", diagnostic=diagnostic)
    raise FailureExpectationViolation(diagnostic)


def assert_assignment_fails(
    function: Callable[[], Any],
    message: str | None = None,
    expected: ExpectedFailure = UNIVERSAL_FAILURE,
) -> None:
    """Shortcut for ``assert_fails(Assignment(function), ...)``."""

    assert_fails(Assignment(function), message, expected)


def assert_execution_fails(
    function: Callable[[], Any],
    message: str | None = None,
    expected: ExpectedFailure = UNIVERSAL_FAILURE,
) -> None:
    """Shortcut for ``assert_fails(Execution(function), ...)``."""

    assert_fails(Execution(function), message, expected)


def _as_computation(computation: object) -> Assignment[Any] | Execution:
    if isinstance(computation, (Assignment, Execution)):
        return computation
    return Assignment(computation)


def _require_callable(function: object) -> Callable[[], Any]:
    if not callable(function):
        raise TypeError(f"computation must be callable, got {function!r}")
    return function


def _describe_expected(expected: object) -> str:
    """Validate ``expected`` and render the name(s) used in diagnostics.

    Examples
    --------
    >>> _describe_expected(KeyError)
    'KeyError'
    >>> _describe_expected((KeyError, IndexError))
    'KeyError, IndexError'
    """

    candidates = expected if isinstance(expected, tuple) else (expected,)
    if not candidates or not all(_is_exception_class(item) for item in candidates):
        raise TypeError(f"expected must be an exception class or a tuple of them, got {expected!r}")
    return ", ".join(item.__name__ for item in candidates)


def _is_exception_class(candidate: object) -> bool:
    return isinstance(candidate, type) and issubclass(candidate, BaseException)
