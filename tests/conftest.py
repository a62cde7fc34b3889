"""Shared pytest configuration, marker assignment and image fixtures."""

from __future__ import annotations

from typing import TypeAlias

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

ImageFactory: TypeAlias = Callable[..., Path]


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


_PIL_FORMATS = {".jpg": "JPEG", ".jpeg": "JPEG", ".png": "PNG", ".gif": "GIF"}


@pytest.fixture
def make_image() -> ImageFactory:
    """Return a factory writing a small gradient image to a path."""

    def _make(
        path: Path,
        size: tuple[int, int] = (40, 30),
        mode: str = "RGB",
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        width, height = size
        image = Image.new("RGB", size)
        image.putdata(
            [
                (x * 255 // width, y * 255 // height, 128)
                for y in range(height)
                for x in range(width)
            ]
        )
        if mode != "RGB":
            image = image.convert(mode)
        image.save(path, format=_PIL_FORMATS[path.suffix.lower()])
        return path

    return _make
