"""Public scanning and target-loading API as exposed by the package root."""

from __future__ import annotations

import io

import pytest

import lib_test_contracts
from lib_test_contracts import (
    TargetResolutionError,
    classes_without_interface,
    classes_without_method,
    load_target,
    print_classes_without_interface,
    print_classes_without_method,
)
from lib_test_contracts.adapters.class_index.default import ModuleWalkClassIndex


def test_classes_without_method(sample_package: str) -> None:
    assert classes_without_method("__repr__", sample_package) == [
        f"{sample_package}.shapes.Circle",
        f"{sample_package}.shapes.Drawable",
        f"{sample_package}.shapes.Loose",
        f"{sample_package}.sub.extra.Plain",
    ]


def test_classes_without_method_with_explicit_index(sample_package: str) -> None:
    names = classes_without_method("__repr__", sample_package, index=ModuleWalkClassIndex(include_tests=True))
    assert f"{sample_package}.tests.test_shapes.FakeShape" in names


def test_classes_without_interface(sample_package: str) -> None:
    drawable = load_target(f"{sample_package}.shapes:Drawable")
    assert classes_without_interface(drawable, sample_package) == [
        f"{sample_package}.shapes.Loose",
        f"{sample_package}.shapes.Loose.Inner",
        f"{sample_package}.sub.extra.Helper",
        f"{sample_package}.sub.extra.Plain",
    ]


def test_print_variant_writes_header_then_one_name_per_line(sample_package: str) -> None:
    buffer = io.StringIO()
    print_classes_without_method("__repr__", sample_package, stream=buffer)
    lines = buffer.getvalue().splitlines()
    assert lines[0] == "Classes without __repr__() method:"
    assert lines[1:] == classes_without_method("__repr__", sample_package)


def test_print_interface_variant_names_the_interface(sample_package: str) -> None:
    drawable = load_target(f"{sample_package}.shapes:Drawable")
    buffer = io.StringIO()
    print_classes_without_interface(drawable, sample_package, stream=buffer)
    lines = buffer.getvalue().splitlines()
    assert lines[0] == f"Classes without interface {sample_package}.shapes.Drawable"
    assert len(lines) == 5


def test_print_variant_defaults_to_stdout(sample_package: str, capsys: pytest.CaptureFixture[str]) -> None:
    print_classes_without_method("__repr__", f"{sample_package}.sub")
    assert capsys.readouterr().out.splitlines() == [
        "Classes without __repr__() method:",
        f"{sample_package}.sub.extra.Plain",
    ]


def test_scan_requires_a_package() -> None:
    with pytest.raises(ValueError, match="at least one package"):
        classes_without_method("__repr__")


def test_load_target_resolves_nested_qualnames(sample_package: str) -> None:
    inner = load_target(f"{sample_package}.shapes:Loose.Inner")
    assert inner.__qualname__ == "Loose.Inner"


@pytest.mark.parametrize(
    ("target", "fragment"),
    [
        ("collections", "must look like"),
        ("collections:", "must look like"),
        (":OrderedDict", "must look like"),
        ("no_such_module_xyz:Thing", "Cannot import module"),
        ("collections:NoSuchThing", "has no attribute 'NoSuchThing'"),
    ],
)
def test_load_target_errors(target: str, fragment: str) -> None:
    with pytest.raises(TargetResolutionError, match=fragment):
        load_target(target)


def test_package_root_reexports_the_core_api() -> None:
    assert lib_test_contracts.assert_fails is lib_test_contracts.core.assert_fails
    assert lib_test_contracts.verify_exception_class is lib_test_contracts.core.verify_exception_class
