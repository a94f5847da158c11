"""Exception contract verifier.

Purpose
-------
Check that an exception class declares the canonical four-shape constructor
(no arguments, message, cause, message and cause) and that each shape produces
an instance of exactly that class with the message and cause bound correctly.

Contents
--------
* :data:`MISSING_CONSTRUCTOR` – diagnostic template for an unusable constructor.
* :func:`resolve_constructor` – introspect the class and return the callable for
  one constructor role.
* :func:`check_constructor` – invoke one role and assert its postconditions.
* :func:`verify_exception_class` – run every role in order.

System Role
-----------
Pure application logic on top of :mod:`lib_test_contracts.domain`. Violations
surface as :class:`~lib_test_contracts.domain.errors.ExceptionContractViolation`.
"""

from __future__ import annotations

import inspect
from typing import Callable, Final, NoReturn

from ..domain.errors import ExceptionContractViolation
from ..domain.probes import DEFAULT_PROBE_VALUES, ConstructorProbe, ProbeValues
from ..observability import log_debug, log_error, log_info

MISSING_CONSTRUCTOR: Final[str] = "Class {name} is missing standard and accessible exception constructor."


def resolve_constructor(
    exception_type: type[BaseException],
    probe: ConstructorProbe,
) -> Callable[..., BaseException]:
    """Return the callable that builds ``exception_type`` for ``probe``.

    Why
        Only a constructor declared on the class itself counts. An inherited
        ``__init__`` still builds instances of the right type, but it means the
        class never stated its own constructor shape.

    Raises
        TypeError: ``exception_type`` is not an exception class.
        ExceptionContractViolation: the class declares no ``__init__`` of its
            own, the declared one cannot be introspected, or its signature does
            not accept the probe's arguments.
    """

    _require_exception_class(exception_type)
    initializer = vars(exception_type).get("__init__")
    if initializer is None:
        _violation(exception_type, probe, MISSING_CONSTRUCTOR.format(name=_name(exception_type)))
    try:
        signature = inspect.signature(initializer)
    except (TypeError, ValueError) as exc:
        _violation(exception_type, probe, MISSING_CONSTRUCTOR.format(name=_name(exception_type)), exc)
    try:
        signature.bind(exception_type, *([None] * probe.arity))
    except TypeError as exc:
        _violation(exception_type, probe, MISSING_CONSTRUCTOR.format(name=_name(exception_type)), exc)
    return exception_type


def check_constructor(
    exception_type: type[BaseException],
    probe: ConstructorProbe,
    values: ProbeValues = DEFAULT_PROBE_VALUES,
) -> None:
    """Build ``exception_type`` through ``probe`` and assert the resulting state.

    Inputs
        exception_type: Class under test.
        probe: Constructor role to exercise.
        values: Message/cause values handed to the constructor.
    Side Effects
        Logs the probe at debug level and any violation at error level.

    Examples
    --------
    >>> check_constructor(ExceptionContractViolation, ConstructorProbe.MESSAGE_ONLY)
    """

    constructor = resolve_constructor(exception_type, probe)
    arguments = probe.arguments(values)
    log_debug("constructor-probe", _name(exception_type), probe.label)
    try:
        instance = constructor(*arguments)
    except Exception as exc:
        _violation(
            exception_type,
            probe,
            f"Constructor {probe.label} of {_name(exception_type)} raised {type(exc).__name__}: {exc}",
            exc,
        )
    if type(instance) is not exception_type:
        _violation(
            exception_type,
            probe,
            f"Right exception not thrown. It is {type(instance).__name__} instead of {_name(exception_type)}",
        )
    _CHECKS[probe](exception_type, probe, instance, arguments, values)


def verify_exception_class(
    exception_type: type[BaseException],
    values: ProbeValues = DEFAULT_PROBE_VALUES,
) -> None:
    """Verify all four constructor roles of ``exception_type``, in order.

    The first violating role stops the verification.
    """

    for probe in ConstructorProbe:
        check_constructor(exception_type, probe, values)
    log_info("exception-contract-verified", _name(exception_type), "all")


def _check_no_args(
    exception_type: type[BaseException],
    probe: ConstructorProbe,
    instance: BaseException,
    arguments: tuple[object, ...],
    values: ProbeValues,
) -> None:
    message = str(instance)
    if message:
        _violation(exception_type, probe, f"{_prefix(exception_type, probe)} expected no message, got {message!r}")


def _check_message_only(
    exception_type: type[BaseException],
    probe: ConstructorProbe,
    instance: BaseException,
    arguments: tuple[object, ...],
    values: ProbeValues,
) -> None:
    _expect_message(exception_type, probe, instance, values.message)


def _check_cause_only(
    exception_type: type[BaseException],
    probe: ConstructorProbe,
    instance: BaseException,
    arguments: tuple[object, ...],
    values: ProbeValues,
) -> None:
    (cause,) = arguments
    cause_name = type(cause).__name__
    message = str(instance)
    if cause_name not in message:
        _violation(
            exception_type,
            probe,
            f"{_prefix(exception_type, probe)} expected message mentioning {cause_name}, got {message!r}",
        )
    if instance.__cause__ is not cause:
        _violation(
            exception_type,
            probe,
            f"{_prefix(exception_type, probe)} expected the supplied {cause_name} as cause, got {instance.__cause__!r}",
        )


def _check_message_and_cause(
    exception_type: type[BaseException],
    probe: ConstructorProbe,
    instance: BaseException,
    arguments: tuple[object, ...],
    values: ProbeValues,
) -> None:
    _expect_message(exception_type, probe, instance, values.message)
    cause = instance.__cause__
    if not isinstance(cause, values.cause_type):
        _violation(
            exception_type,
            probe,
            f"{_prefix(exception_type, probe)} expected cause of type {values.cause_type.__name__}, got {cause!r}",
        )
    if str(cause) != values.cause_message:
        _violation(
            exception_type,
            probe,
            f"{_prefix(exception_type, probe)} expected cause message {values.cause_message!r}, got {str(cause)!r}",
        )


_CHECKS: Final = {
    ConstructorProbe.NO_ARGS: _check_no_args,
    ConstructorProbe.MESSAGE_ONLY: _check_message_only,
    ConstructorProbe.CAUSE_ONLY: _check_cause_only,
    ConstructorProbe.MESSAGE_AND_CAUSE: _check_message_and_cause,
}


def _expect_message(
    exception_type: type[BaseException],
    probe: ConstructorProbe,
    instance: BaseException,
    expected: str,
) -> None:
    message = str(instance)
    if message != expected:
        _violation(exception_type, probe, f"{_prefix(exception_type, probe)} expected message {expected!r}, got {message!r}")


def _violation(
    exception_type: type[BaseException],
    probe: ConstructorProbe,
    diagnostic: str,
    cause: BaseException | None = None,
) -> NoReturn:
    """Log and raise an :class:`ExceptionContractViolation`."""

    log_error("exception-contract-violation", _name(exception_type), probe.label, diagnostic=diagnostic)
    raise ExceptionContractViolation(diagnostic) from cause


def _require_exception_class(candidate: object) -> None:
    if not (isinstance(candidate, type) and issubclass(candidate, BaseException)):
        raise TypeError(f"expected an exception class, got {candidate!r}")


def _prefix(exception_type: type[BaseException], probe: ConstructorProbe) -> str:
    return f"Constructor {probe.label} of {_name(exception_type)}:"


def _name(exception_type: type[BaseException]) -> str:
    return exception_type.__name__
