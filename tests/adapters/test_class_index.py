"""Module-walking class index against throwaway packages on disk."""

from __future__ import annotations

import pytest

from lib_test_contracts.adapters.class_index.default import ModuleWalkClassIndex, is_test_module
from lib_test_contracts.domain.errors import PackageScanError


def _names(classes: list[type]) -> list[str]:
    return [f"{cls.__module__}.{cls.__qualname__}" for cls in classes]


def test_index_lists_declared_and_nested_classes(sample_package: str) -> None:
    names = _names(ModuleWalkClassIndex().classes([sample_package]))
    expected = [
        f"{sample_package}.shapes.{qualname}"
        for qualname in ("Circle", "Color", "Drawable", "Loose", "Loose.Inner", "Point", "Sizer", "Square")
    ] + [f"{sample_package}.sub.extra.{qualname}" for qualname in ("Helper", "Plain")]
    assert names == sorted(expected)


def test_reexported_classes_are_reported_once(sample_package: str) -> None:
    names = _names(ModuleWalkClassIndex().classes([sample_package, f"{sample_package}.sub"]))
    assert names.count(f"{sample_package}.shapes.Square") == 1
    assert f"{sample_package}.sub.extra.Square" not in names


def test_test_modules_are_skipped_unless_requested(sample_package: str) -> None:
    fake = f"{sample_package}.tests.test_shapes.FakeShape"
    assert fake not in _names(ModuleWalkClassIndex().classes([sample_package]))
    assert fake in _names(ModuleWalkClassIndex(include_tests=True).classes([sample_package]))


def test_single_module_prefix_is_supported(sample_package: str) -> None:
    names = _names(ModuleWalkClassIndex().classes([f"{sample_package}.sub.extra"]))
    assert names == [f"{sample_package}.sub.extra.Helper", f"{sample_package}.sub.extra.Plain"]


def test_unknown_package_raises_scan_error() -> None:
    with pytest.raises(PackageScanError, match="Cannot import no_such_package_xyz") as info:
        ModuleWalkClassIndex().classes(["no_such_package_xyz"])
    assert isinstance(info.value.__cause__, ImportError)


def test_broken_submodule_raises_scan_error(write_package) -> None:
    name = write_package({"__init__.py": "", "broken.py": "import no_such_dependency_xyz\n"})
    with pytest.raises(PackageScanError, match=f"Cannot import {name}.broken"):
        ModuleWalkClassIndex().classes([name])


@pytest.mark.parametrize(
    ("module_name", "expected"),
    [
        ("pkg.tests", True),
        ("pkg.test", True),
        ("pkg.test_core", True),
        ("pkg.core_test", True),
        ("pkg.conftest", True),
        ("pkg.testing", False),
        ("pkg.contest", False),
        ("lib_test_contracts.core", False),
    ],
)
def test_is_test_module(module_name: str, expected: bool) -> None:
    assert is_test_module(module_name) is expected
