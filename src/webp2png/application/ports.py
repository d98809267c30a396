"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from webp2png.application.results import ConversionReport
from webp2png.types import BinaryWriter, DecodedImage


class ImageEncoder(Protocol):
    """Write a decoded image to an open binary handle."""

    def __call__(self, image: DecodedImage, handle: BinaryWriter) -> None:
        """Encode image into handle."""


class ReportWriter(Protocol):
    """Persist an aggregated failure report."""

    def __call__(self, report: ConversionReport, path: Path) -> None:
        """Write report to path."""


class ProgressReporter(Protocol):
    """Receive human-facing notices from the directory processor."""

    def no_files(self, input_dir: Path) -> None:
        """No eligible files were found."""

    def found(self, count: int) -> None:
        """Eligible files were found."""

    def converted(self, file_name: str, output_name: str) -> None:
        """A file was converted and verified."""

    def failed(self, file_name: str, message: str) -> None:
        """A file failed conversion or verification."""

    def report_written(self, path: Path) -> None:
        """The failure report was written."""

    def report_failed(self, path: Path, message: str) -> None:
        """The failure report could not be written."""

    def summary(self, success_count: int, eligible_count: int) -> None:
        """The run finished."""
