"""Shared fixtures: throwaway importable packages for the class scanner."""

from __future__ import annotations

import sys
import textwrap
import uuid
from pathlib import Path
from typing import Callable, Iterator, Mapping

import pytest

SAMPLE_FILES: Mapping[str, str] = {
    "__init__.py": "",
    "shapes.py": '''
        import abc
        from enum import Enum
        from typing import NamedTuple, Protocol


        class Drawable(abc.ABC):
            @abc.abstractmethod
            def draw(self):
                ...


        class Square(Drawable):
            def draw(self):
                return "square"

            def __repr__(self):
                return "Square()"


        class Circle(Drawable):
            def draw(self):
                return "circle"


        class Loose:
            class Inner:
                def __repr__(self):
                    return "Inner()"


        class Color(Enum):
            RED = 1


        class Point(NamedTuple):
            x: int
            y: int


        class Sizer(Protocol):
            def size(self) -> int:
                ...


        def factory():
            class Hidden:
                pass

            return Hidden
    ''',
    "sub/__init__.py": "",
    "sub/extra.py": '''
        from ..shapes import Square


        class Helper:
            def __repr__(self):
                return "Helper()"


        class Plain:
            pass
    ''',
    "tests/__init__.py": "",
    "tests/test_shapes.py": '''
        class FakeShape:
            pass
    ''',
}

PackageWriter = Callable[[Mapping[str, str]], str]


@pytest.fixture()
def write_package(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[PackageWriter]:
    """Return a factory that writes an importable package and yields its unique name."""

    created: list[str] = []

    def _write(files: Mapping[str, str]) -> str:
        name = f"scan_sample_{uuid.uuid4().hex[:8]}"
        root = tmp_path / name
        for relative, body in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(body), encoding="utf-8")
        created.append(name)
        return name

    monkeypatch.syspath_prepend(str(tmp_path))
    yield _write
    for name in created:
        for module in [key for key in sys.modules if key == name or key.startswith(f"{name}.")]:
            del sys.modules[module]


@pytest.fixture()
def sample_package(write_package: PackageWriter) -> str:
    """Write the standard sample package and return its import name."""

    return write_package(SAMPLE_FILES)
