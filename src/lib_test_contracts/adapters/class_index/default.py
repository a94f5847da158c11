"""Module-walking class index.

Purpose
-------
Implement :class:`lib_test_contracts.application.ports.ClassIndex` by importing
each package prefix and walking its submodules with :mod:`pkgutil`.

Key behaviours
--------------
* Reports only classes whose ``__module__`` is the module being inspected, so
  re-exports are not counted twice.
* Descends into nested classes.
* Skips test modules (``tests``, ``test``, ``test_*``, ``*_test``, ``conftest``)
  unless ``include_tests`` is set; only production classes are scanned by
  default.
* Wraps import failures in :class:`~lib_test_contracts.domain.errors.PackageScanError`.
"""

from __future__ import annotations

import importlib
import pkgutil
from types import ModuleType
from typing import Iterator, Sequence

from ...domain.errors import PackageScanError
from ...observability import log_debug, log_error

_TEST_MODULE_NAMES = frozenset({"test", "tests", "conftest"})


def is_test_module(module_name: str) -> bool:
    """Return ``True`` when any segment of *module_name* names a test module.

    Examples
    --------
    >>> is_test_module('pkg.tests.helpers'), is_test_module('pkg.test_core')
    (True, True)
    >>> is_test_module('pkg.testing')
    False
    """

    for segment in module_name.split("."):
        if segment in _TEST_MODULE_NAMES or segment.startswith("test_") or segment.endswith("_test"):
            return True
    return False


class ModuleWalkClassIndex:
    """Enumerate classes by importing package prefixes and their submodules."""

    def __init__(self, *, include_tests: bool = False) -> None:
        """Configure whether test modules participate in the scan.

        Parameters
        ----------
        include_tests:
            When ``False`` (default) modules recognised by :func:`is_test_module`
            are left out of the results.
        """

        self._include_tests = include_tests

    def classes(self, packages: Sequence[str]) -> list[type]:
        """Return the classes declared under *packages*, ordered by name.

        Raises
        ------
        PackageScanError
            A prefix or one of its subpackages cannot be imported.
        """

        found: dict[str, type] = {}
        for package in packages:
            for module in self._modules(package):
                for cls in _declared_classes(module):
                    found.setdefault(f"{cls.__module__}.{cls.__qualname__}", cls)
        return [found[name] for name in sorted(found)]

    def _modules(self, package: str) -> Iterator[ModuleType]:
        root = _import(package)
        if self._include_tests or not is_test_module(root.__name__):
            yield root
            yield from self._submodules(root)
        log_debug("package-scanned", package, "walk")

    def _submodules(self, package: ModuleType) -> Iterator[ModuleType]:
        search_path = getattr(package, "__path__", None)
        if search_path is None:
            return
        for info in pkgutil.iter_modules(search_path, prefix=f"{package.__name__}."):
            if not self._include_tests and is_test_module(info.name):
                continue
            module = _import(info.name)
            yield module
            if info.ispkg:
                yield from self._submodules(module)


def _import(name: str) -> ModuleType:
    try:
        return importlib.import_module(name)
    except ImportError as exc:
        log_error("package-scan-failed", name, "import")
        raise PackageScanError(f"Cannot import {name}", exc) from exc


def _declared_classes(module: ModuleType) -> Iterator[type]:
    for value in list(vars(module).values()):
        if isinstance(value, type) and value.__module__ == module.__name__:
            yield from _with_nested(value)


def _with_nested(cls: type) -> Iterator[type]:
    yield cls
    for value in list(vars(cls).values()):
        if isinstance(value, type) and value.__qualname__ == f"{cls.__qualname__}.{value.__name__}":
            yield from _with_nested(value)
