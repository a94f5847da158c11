"""Application-layer ports describing adapter responsibilities.

Purpose
-------
Define the structural contract the class scanner depends on so the filtering
logic can run against any class source: the default module walker, a fixed
list in tests, or a future index built from another tool.

Contents
--------
* :class:`ClassIndex` – yields the classes declared under package prefixes.

System Role
-----------
These protocols enforce Dependency Inversion (DIP). Each adapter implements one
protocol so the application layer can request behaviour via abstraction.
"""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence, runtime_checkable


@runtime_checkable
class ClassIndex(Protocol):
    """Enumerate the classes declared in the modules under package prefixes.

    Why
    ----
    Keep import and module-walking concerns out of the predicate logic in
    :mod:`lib_test_contracts.application.class_filter`.
    """

    def classes(self, packages: Sequence[str]) -> Iterable[type]:
        """Yield every class declared (including nested classes) under *packages*."""
