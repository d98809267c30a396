"""Public file-based conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from webp2png.application.ports import ProgressReporter
from webp2png.application.results import BatchResult, ConversionResult, ConversionTask
from webp2png.application.use_cases import build_conversion_options
from webp2png.application.use_cases import convert_directory
from webp2png.application.use_cases import convert_file
from webp2png.errors import ConversionError
from webp2png.schemas import FileConversionConfig


def convert_webp_file_to_png(
    input_path: Path,
    output_path: Optional[Path] = None,
    target_suffix: str = ".png",
) -> ConversionResult:
    """Convert one WebP (or JPEG-in-WebP) file to PNG.

    When ``output_path`` is omitted, the input's extension is replaced by
    ``target_suffix`` in the same directory.
    """
    try:
        config = FileConversionConfig(
            input_path=input_path,
            output_path=output_path,
            target_suffix=target_suffix,
        )
    except ValidationError as exc:
        raise ConversionError(f"Invalid file conversion parameters: {exc}") from exc
    return convert_file(
        ConversionTask(input_path=config.input_path, output_path=config.output_path)
    )


def convert_webp_directory_to_png(
    input_dir: Path,
    output_dir: Optional[Path] = None,
    report_filename: Optional[str] = None,
    reporter: Optional[ProgressReporter] = None,
) -> BatchResult:
    """Convert every ``.webp`` file directly inside ``input_dir`` to PNG."""
    options = build_conversion_options(report_filename=report_filename)
    return convert_directory(
        input_dir=input_dir,
        output_dir=output_dir,
        options=options,
        reporter=reporter,
    )
