"""Application-layer use-cases and option objects."""

from __future__ import annotations

from pathlib import Path

from webp2png.application.options import ConversionOptions
from webp2png.application.ports import ImageEncoder, ProgressReporter, ReportWriter
from webp2png.application.results import (
    BatchResult,
    ConversionFailure,
    ConversionOutcome,
    ConversionReport,
    ConversionResult,
    ConversionSuccess,
    ConversionTask,
)
from webp2png.types import DecoderChain


def build_conversion_options(
    *,
    report_filename: str | None = None,
    source_extension: str | None = None,
    target_suffix: str | None = None,
) -> ConversionOptions:
    """Build typed conversion options via lazy use-case import."""
    from webp2png.application.use_cases import build_conversion_options as _impl

    return _impl(
        report_filename=report_filename,
        source_extension=source_extension,
        target_suffix=target_suffix,
    )


def convert_file(
    task: ConversionTask,
    *,
    decoders: DecoderChain | None = None,
    encoder: ImageEncoder | None = None,
) -> ConversionResult:
    """Convert a single image file via lazy use-case import."""
    from webp2png.application.use_cases import convert_file as _impl

    return _impl(task, decoders=decoders, encoder=encoder)


def convert_directory(
    *,
    input_dir: Path,
    output_dir: Path | None,
    options: ConversionOptions,
    decoders: DecoderChain | None = None,
    encoder: ImageEncoder | None = None,
    reporter: ProgressReporter | None = None,
    report_writer: ReportWriter | None = None,
) -> BatchResult:
    """Convert a directory of images via lazy use-case import."""
    from webp2png.application.use_cases import convert_directory as _impl

    return _impl(
        input_dir=input_dir,
        output_dir=output_dir,
        options=options,
        decoders=decoders,
        encoder=encoder,
        reporter=reporter,
        report_writer=report_writer,
    )


__all__ = [
    "BatchResult",
    "ConversionFailure",
    "ConversionOptions",
    "ConversionOutcome",
    "ConversionReport",
    "ConversionResult",
    "ConversionSuccess",
    "ConversionTask",
    "build_conversion_options",
    "convert_directory",
    "convert_file",
]
