"""Predicate composition over a class index.

Purpose
-------
Answer "which concrete classes under these packages lack method X" and "which
lack interface Y" on top of any :class:`~lib_test_contracts.application.ports.ClassIndex`.

Contents
--------
* :func:`is_plain_class` – keeps ordinary classes, drops enums, protocols,
  named tuples and anonymous classes.
* :func:`declares_method` – checks the class's own namespace only.
* :func:`classes_without_method` / :func:`classes_without_interface` – sorted
  ``module.QualName`` lists.
* :func:`class_name` – the name format used in results.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Sequence

from .ports import ClassIndex
from ..observability import log_debug


def class_name(cls: type) -> str:
    """Return the ``module.QualName`` form used in scan results.

    Examples
    --------
    >>> from collections import OrderedDict
    >>> class_name(OrderedDict)
    'collections.OrderedDict'
    """

    return f"{cls.__module__}.{cls.__qualname__}"


def is_plain_class(cls: type) -> bool:
    """Return ``True`` for ordinary classes the scanner should report on.

    Enums, :class:`typing.Protocol` definitions, ``NamedTuple`` record types and
    classes created inside functions are skipped.
    """

    if issubclass(cls, Enum):
        return False
    if getattr(cls, "_is_protocol", False):
        return False
    if issubclass(cls, tuple) and hasattr(cls, "_fields"):
        return False
    return "<locals>" not in cls.__qualname__


def declares_method(cls: type, method_name: str) -> bool:
    """Return ``True`` when *method_name* is bound to a callable in ``cls`` itself.

    Inherited methods do not count.

    Examples
    --------
    >>> class Base:
    ...     def __repr__(self):
    ...         return "Base()"
    >>> class Child(Base):
    ...     pass
    >>> declares_method(Base, "__repr__"), declares_method(Child, "__repr__")
    (True, False)
    """

    attribute = vars(cls).get(method_name)
    if attribute is None:
        return False
    return callable(attribute) or isinstance(attribute, (staticmethod, classmethod))


def classes_without_method(index: ClassIndex, method_name: str, packages: Sequence[str]) -> list[str]:
    """Return the plain classes under *packages* that do not declare *method_name*."""

    return _select(index, packages, lambda cls: not declares_method(cls, method_name), f"method:{method_name}")


def classes_without_interface(index: ClassIndex, interface: type, packages: Sequence[str]) -> list[str]:
    """Return the plain classes under *packages* that are not subclasses of *interface*.

    *interface* may be any class, an :class:`abc.ABC` or a
    :func:`typing.runtime_checkable` protocol.
    """

    if not isinstance(interface, type):
        raise TypeError(f"interface must be a class, got {interface!r}")
    return _select(index, packages, lambda cls: not issubclass(cls, interface), f"interface:{class_name(interface)}")


def _select(
    index: ClassIndex,
    packages: Sequence[str],
    predicate: Callable[[type], bool],
    check: str,
) -> list[str]:
    names = {class_name(cls) for cls in index.classes(packages) if is_plain_class(cls) and predicate(cls)}
    result = sorted(names)
    log_debug("class-scan", ",".join(packages), check, matches=len(result))
    return result
