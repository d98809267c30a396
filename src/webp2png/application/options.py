"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_REPORT_FILENAME = "conversion_errors.txt"
DEFAULT_SOURCE_EXTENSION = ".webp"
DEFAULT_TARGET_SUFFIX = ".png"


@dataclass(frozen=True)
class ConversionOptions:
    """Shared conversion options passed through use-cases."""

    report_filename: str = DEFAULT_REPORT_FILENAME
    source_extension: str = DEFAULT_SOURCE_EXTENSION
    target_suffix: str = DEFAULT_TARGET_SUFFIX
