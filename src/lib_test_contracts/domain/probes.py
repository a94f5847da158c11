"""Constructor probe roles and the canonical values used to exercise them.

Purpose
-------
Name the four constructor shapes a contract-compliant exception class must
support and build the argument tuples the verifier feeds into each one.

Contents
--------
* :class:`ProbeValues` – message/cause values passed to the constructors.
* :data:`DEFAULT_PROBE_VALUES` – ``"abc"``, ``"def"`` and :class:`ValueError`.
* :class:`ConstructorProbe` – the closed set of constructor roles.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final


@dataclass(frozen=True)
class ProbeValues:
    """Arguments handed to the constructor probes.

    Attributes
    ----------
    message:
        Message passed to the MESSAGE_ONLY and MESSAGE_AND_CAUSE roles.
    cause_message:
        Message carried by the cause passed to MESSAGE_AND_CAUSE.
    cause_type:
        Exception type instantiated (fresh per probe) as the cause.
    """

    message: str = "abc"
    cause_message: str = "def"
    cause_type: type[BaseException] = ValueError

    def __post_init__(self) -> None:
        if not (isinstance(self.cause_type, type) and issubclass(self.cause_type, BaseException)):
            raise TypeError(f"cause_type must be an exception class, got {self.cause_type!r}")


DEFAULT_PROBE_VALUES: Final[ProbeValues] = ProbeValues()


class ConstructorProbe(Enum):
    """The four canonical constructor roles, in verification order."""

    NO_ARGS = ("no-args", 0)
    MESSAGE_ONLY = ("message-only", 1)
    CAUSE_ONLY = ("cause-only", 1)
    MESSAGE_AND_CAUSE = ("message-and-cause", 2)

    def __init__(self, label: str, arity: int) -> None:
        self.label = label
        self.arity = arity

    def arguments(self, values: ProbeValues = DEFAULT_PROBE_VALUES) -> tuple[object, ...]:
        """Return a fresh argument tuple for this role.

        Examples
        --------
        >>> ConstructorProbe.MESSAGE_ONLY.arguments()
        ('abc',)
        >>> ConstructorProbe.MESSAGE_AND_CAUSE.arguments()
        ('abc', ValueError('def'))
        """

        if self is ConstructorProbe.NO_ARGS:
            return ()
        if self is ConstructorProbe.MESSAGE_ONLY:
            return (values.message,)
        if self is ConstructorProbe.CAUSE_ONLY:
            return (values.cause_type(),)
        return (values.message, values.cause_type(values.cause_message))
