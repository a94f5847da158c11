"""Domain-level exception hierarchy.

Purpose
-------
Expose the two error families of ``lib_test_contracts``: reported failures,
which signal that the code under test broke a contract, and toolkit errors,
which signal that the toolkit itself was used incorrectly.

Contents
--------
* :class:`ReportedFailure` – umbrella for every failed contract check. Derives
  from :class:`AssertionError` so test runners report it as a failed assertion.
* :class:`ExceptionContractViolation` – an exception class lacks the canonical
  constructor shape or propagates message/cause incorrectly.
* :class:`FailureExpectationViolation` – a computation expected to fail did not,
  or failed with an unexpected type.
* :class:`ToolkitError` – umbrella for usage errors.
* :class:`TargetResolutionError` – a ``module:qualname`` target cannot be found.
* :class:`PackageScanError` – a package prefix cannot be imported while scanning.

System Role
-----------
Every class declares the canonical four-shape constructor itself, so the
hierarchy passes :func:`lib_test_contracts.verify_exception_class`.
"""

from __future__ import annotations


def describe_cause(cause: BaseException) -> str:
    """Return the message used when an exception is built from a cause only.

    Examples
    --------
    >>> describe_cause(ValueError())
    'ValueError'
    >>> describe_cause(KeyError('missing'))
    "KeyError: 'missing'"
    """

    text = str(cause)
    name = type(cause).__name__
    return f"{name}: {text}" if text else name


def _split_arguments(
    message: str | BaseException | None,
    cause: BaseException | None,
) -> tuple[str | None, BaseException | None]:
    """Treat a lone exception argument as the cause of the new error."""

    if cause is None and isinstance(message, BaseException):
        return describe_cause(message), message
    return message, cause


class ReportedFailure(AssertionError):
    """Base type for every contract check that did not hold.

    Why
    ----
    Test frameworks treat :class:`AssertionError` as "the test failed" rather
    than "the test crashed"; deriving from it keeps that distinction.

    What
    ----
    Accepts ``()``, ``(message)``, ``(cause)`` and ``(message, cause)``.
    """

    def __init__(self, message: str | BaseException | None = None, cause: BaseException | None = None) -> None:
        message, cause = _split_arguments(message, cause)
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self.__cause__ = cause


class ExceptionContractViolation(ReportedFailure):
    """Raised when an exception class violates the canonical constructor contract.

    Typical Sources
    ---------------
    Missing or non-local ``__init__``, an instance of the wrong concrete type, or
    a message/cause that does not match the probe values.
    """

    def __init__(self, message: str | BaseException | None = None, cause: BaseException | None = None) -> None:
        super().__init__(message, cause)


class FailureExpectationViolation(ReportedFailure):
    """Raised when a computation expected to fail returned, or failed unexpectedly."""

    def __init__(self, message: str | BaseException | None = None, cause: BaseException | None = None) -> None:
        super().__init__(message, cause)


class ToolkitError(Exception):
    """Base type for usage errors emitted by ``lib_test_contracts``.

    Why
    ----
    Keeps "the toolkit could not do its job" apart from "the code under test is
    wrong" so callers never mistake one for the other.
    """

    def __init__(self, message: str | BaseException | None = None, cause: BaseException | None = None) -> None:
        message, cause = _split_arguments(message, cause)
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self.__cause__ = cause


class TargetResolutionError(ToolkitError):
    """Raised when a ``module:qualname`` target cannot be imported or resolved."""

    def __init__(self, message: str | BaseException | None = None, cause: BaseException | None = None) -> None:
        super().__init__(message, cause)


class PackageScanError(ToolkitError):
    """Raised when a package prefix (or one of its subpackages) fails to import."""

    def __init__(self, message: str | BaseException | None = None, cause: BaseException | None = None) -> None:
        super().__init__(message, cause)
