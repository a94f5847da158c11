"""Public package surface for exception-contract and failure-assertion checks.

``lib_test_contracts`` verifies structural contracts of code under test:
exception classes must declare the canonical four-shape constructor, and
operations expected to fail must fail with the right type. Both the verifier and
the harness are re-exported here together with the class scanner, so
``import lib_test_contracts`` is all a test module needs.
"""

from __future__ import annotations

from .core import (
    DEFAULT_PROBE_VALUES,
    UNIVERSAL_FAILURE,
    Assignment,
    ConstructorProbe,
    ExceptionContractViolation,
    Execution,
    FailureExpectationViolation,
    PackageScanError,
    ProbeValues,
    ReportedFailure,
    TargetResolutionError,
    ToolkitError,
    assert_assignment_fails,
    assert_execution_fails,
    assert_fails,
    check_constructor,
    classes_without_interface,
    classes_without_method,
    load_target,
    print_classes_without_interface,
    print_classes_without_method,
    resolve_constructor,
    verify_exception_class,
)
from .observability import bind_trace_id, get_logger

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
    "bind_trace_id",
    "check_constructor",
    "classes_without_interface",
    "classes_without_method",
    "get_logger",
    "load_target",
    "print_classes_without_interface",
    "print_classes_without_method",
    "resolve_constructor",
    "verify_exception_class",
]
