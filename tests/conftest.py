"""Shared pytest configuration, marker assignment and image fixtures."""

from __future__ import annotations

from collections.abc import Callable
from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image


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


def _encode(
    pillow_format: str,
    size: tuple[int, int],
    mode: str,
    color: tuple[int, ...] | int,
    **params: object,
) -> bytes:
    buffer = BytesIO()
    Image.new(mode, size, color).save(buffer, format=pillow_format, **params)
    return buffer.getvalue()


@pytest.fixture
def webp_bytes() -> Callable[..., bytes]:
    """Factory for lossless WebP payloads."""

    def _make(
        size: tuple[int, int] = (7, 5),
        mode: str = "RGB",
        color: tuple[int, ...] = (200, 40, 10),
    ) -> bytes:
        return _encode("WEBP", size, mode, color, lossless=True)

    return _make


@pytest.fixture
def jpeg_bytes() -> Callable[..., bytes]:
    """Factory for JPEG payloads."""

    def _make(
        size: tuple[int, int] = (9, 4),
        mode: str = "RGB",
        color: tuple[int, ...] = (10, 120, 220),
    ) -> bytes:
        return _encode("JPEG", size, mode, color, quality=90)

    return _make
