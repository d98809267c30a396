"""Top-level API for WebP to PNG conversion."""

from __future__ import annotations

from pathlib import Path

from webp2png.application.results import BatchResult, ConversionResult

__version__ = "0.1.0"


def convert_webp_to_png(
    input_path: str | Path,
    output_path: str | Path | None = None,
) -> ConversionResult:
    """Convert a single WebP image to PNG.

    Parameters
    ----------
    input_path : str | Path
        Source image. JPEG data behind a ``.webp`` name is accepted.
    output_path : str | Path | None, default=None
        Destination PNG path. When omitted, defaults to
        ``input_path.with_suffix(".png")``.

    Returns
    -------
    ConversionResult
        Paths, detected source format and pixel dimensions.
    """
    from .api import convert_webp_file_to_png as _impl

    return _impl(
        input_path=Path(input_path),
        output_path=Path(output_path) if output_path is not None else None,
    )


def convert_webp_directory(
    input_dir: str | Path,
    output_dir: str | Path | None = None,
) -> BatchResult:
    """Convert every ``.webp`` file in a directory to PNG.

    Parameters
    ----------
    input_dir : str | Path
        Directory scanned (non-recursively) for ``.webp`` files.
    output_dir : str | Path | None, default=None
        Destination directory, created if needed. Defaults to ``input_dir``.

    Returns
    -------
    BatchResult
        Per-file outcomes, counts and the error report path, if any.
    """
    from .api import convert_webp_directory_to_png as _impl

    return _impl(
        input_dir=Path(input_dir),
        output_dir=Path(output_dir) if output_dir else None,
    )


__all__ = [
    "convert_webp_to_png",
    "convert_webp_directory",
]
