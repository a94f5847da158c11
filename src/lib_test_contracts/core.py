"""Composition root for ``lib_test_contracts``.

Purpose
-------
Wire the default class index into the class filters, resolve ``module:qualname``
targets for the CLI, and re-export the stable public functions of the verifier
and the harness.

Contents
--------
* :func:`classes_without_method` / :func:`classes_without_interface` – scans
  bound to :class:`ModuleWalkClassIndex` unless another index is supplied.
* :func:`print_classes_without_method` / :func:`print_classes_without_interface` –
  write the scan results to an injected text stream.
* :func:`load_target` – import ``package.module:Qual.Name`` targets.

System Role
-----------
This module connects adapters with the application layer. It is the only
place that picks a concrete :class:`~lib_test_contracts.application.ports.ClassIndex`.
"""

from __future__ import annotations

import importlib
from typing import TextIO

import click

from .adapters.class_index.default import ModuleWalkClassIndex
from .application import class_filter
from .application.class_filter import class_name
from .application.exception_contract import check_constructor, resolve_constructor, verify_exception_class
from .application.failure_assertion import (
    UNIVERSAL_FAILURE,
    Assignment,
    Execution,
    assert_assignment_fails,
    assert_execution_fails,
    assert_fails,
)
from .application.ports import ClassIndex
from .domain.errors import (
    ExceptionContractViolation,
    FailureExpectationViolation,
    PackageScanError,
    ReportedFailure,
    TargetResolutionError,
    ToolkitError,
)
from .domain.probes import DEFAULT_PROBE_VALUES, ConstructorProbe, ProbeValues
from .observability import log_debug


def classes_without_method(
    method_name: str,
    *packages: str,
    index: ClassIndex | None = None,
) -> list[str]:
    """Return the classes under *packages* that do not declare *method_name*.

    Why
    ----
    Lets a test suite insist that every class in a package defines, say, its
    own ``__repr__``.

    Parameters
    ----------
    method_name:
        Attribute name looked up in each class's own namespace.
    packages:
        One or more importable package (or module) names.
    index:
        Class source; defaults to :class:`ModuleWalkClassIndex`.

    Returns
    -------
    list[str]
        Sorted ``module.QualName`` strings.
    """

    return class_filter.classes_without_method(_index(index), method_name, _require_packages(packages))


def classes_without_interface(
    interface: type,
    *packages: str,
    index: ClassIndex | None = None,
) -> list[str]:
    """Return the classes under *packages* that do not subclass *interface*."""

    return class_filter.classes_without_interface(_index(index), interface, _require_packages(packages))


def print_classes_without_method(
    method_name: str,
    *packages: str,
    stream: TextIO | None = None,
    index: ClassIndex | None = None,
) -> None:
    """Write a header and the result of :func:`classes_without_method`, one per line.

    *stream* defaults to standard output, resolved on every call.

    Examples
    --------
    >>> import io
    >>> buffer = io.StringIO()
    >>> print_classes_without_method("__repr__", "json.decoder", stream=buffer)
    >>> buffer.getvalue().splitlines()[0]
    'Classes without __repr__() method:'
    """

    names = classes_without_method(method_name, *packages, index=index)
    _write_report(f"Classes without {method_name}() method:", names, stream)


def print_classes_without_interface(
    interface: type,
    *packages: str,
    stream: TextIO | None = None,
    index: ClassIndex | None = None,
) -> None:
    """Write a header and the result of :func:`classes_without_interface`, one per line."""

    names = classes_without_interface(interface, *packages, index=index)
    _write_report(f"Classes without interface {class_name(interface)}", names, stream)


def load_target(target: str) -> object:
    """Import ``package.module:Qual.Name`` and return the named object.

    Raises
    ------
    TargetResolutionError
        The target is malformed, the module cannot be imported, or an attribute
        along the qualified name is missing.

    Examples
    --------
    >>> load_target("collections:OrderedDict").__name__
    'OrderedDict'
    """

    module_name, separator, qualname = target.partition(":")
    if not separator or not module_name or not qualname:
        raise TargetResolutionError(f"Target {target!r} must look like 'package.module:Name'")
    try:
        resolved: object = importlib.import_module(module_name)
    except ImportError as exc:
        raise TargetResolutionError(f"Cannot import module {module_name!r} for target {target!r}", exc) from exc
    for attribute in qualname.split("."):
        try:
            resolved = getattr(resolved, attribute)
        except AttributeError as exc:
            raise TargetResolutionError(f"Target {target!r} has no attribute {attribute!r}", exc) from exc
    log_debug("target-resolved", target, "load")
    return resolved


def _index(index: ClassIndex | None) -> ClassIndex:
    return index if index is not None else ModuleWalkClassIndex()


def _require_packages(packages: tuple[str, ...]) -> tuple[str, ...]:
    if not packages:
        raise ValueError("at least one package name is required")
    return packages


def _write_report(header: str, names: list[str], stream: TextIO | None) -> None:
    click.echo(header, file=stream)
    for name in names:
        click.echo(name, file=stream)


__all__ = [
    "Assignment",
    "ConstructorProbe",
    "DEFAULT_PROBE_VALUES",
    "Execution",
    "ExceptionContractViolation",
    "FailureExpectationViolation",
    "PackageScanError",
    "ProbeValues",
    "ReportedFailure",
    "TargetResolutionError",
    "ToolkitError",
    "UNIVERSAL_FAILURE",
    "assert_assignment_fails",
    "assert_execution_fails",
    "assert_fails",
    "check_constructor",
    "classes_without_interface",
    "classes_without_method",
    "load_target",
    "print_classes_without_interface",
    "print_classes_without_method",
    "resolve_constructor",
    "verify_exception_class",
]
