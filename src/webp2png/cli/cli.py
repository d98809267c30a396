#!/usr/bin/env python3
"""
webp2png.cli.cli

Typer-based CLI for converting WebP images to PNG.

Examples
--------
Convert one file next to its source:

    webp2png image.webp

Convert one file to an explicit destination:

    webp2png image.webp output.png

Convert every ``.webp`` file of a directory, in place or into another one:

    webp2png ./images
    webp2png ./images ./converted
"""

from __future__ import annotations

import logging
import stat
import traceback
from pathlib import Path

import typer

from webp2png.errors import ConversionError

app = typer.Typer(
    name="webp2png",
    help="Convert WebP images (single file or whole directory) to PNG.",
    add_completion=False,
)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _printable(text: str) -> str:
    """Escape surrogates left by undecodable file names."""
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


class EchoProgressReporter:
    """Progress reporter printing batch notices to the terminal."""

    def no_files(self, input_dir: Path) -> None:
        typer.echo(f"No WebP files found in directory: {input_dir}")

    def found(self, count: int) -> None:
        typer.echo(f"Found WebP files: {count}")

    def converted(self, file_name: str, output_name: str) -> None:
        typer.secho(
            f"✓ Converted: {_printable(file_name)} -> {_printable(output_name)}",
            fg=typer.colors.GREEN,
        )

    def failed(self, file_name: str, message: str) -> None:
        typer.secho(
            f"✗ Failed to convert {_printable(file_name)}: {_printable(message)}",
            fg=typer.colors.RED,
            err=True,
        )

    def report_written(self, path: Path) -> None:
        typer.echo(f"\nError report written: {path}")

    def report_failed(self, path: Path, message: str) -> None:
        typer.secho(
            f"Warning: could not write error report {path}: {message}",
            fg=typer.colors.YELLOW,
            err=True,
        )

    def summary(self, success_count: int, eligible_count: int) -> None:
        typer.echo(f"\nDone. Converted {success_count} of {eligible_count}")


def _configure_logging(verbose: bool) -> None:
    """Route library logging to stderr at the requested level."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.secho(f"✗ {type(exc).__name__}: {_printable(str(exc))}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo(
            "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
            err=True,
        )
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _convert_single(input_path: Path, output_path: Path | None) -> None:
    from webp2png.api import convert_webp_file_to_png

    result = convert_webp_file_to_png(input_path=input_path, output_path=output_path)
    note = f" (decoded as {result.decoded_as.upper()})" if result.decoded_as != "webp" else ""
    names = f"{result.input_path.name} -> {result.output_path.name}"
    typer.secho(
        f"✓ Converted: {_printable(names)}{note}",
        fg=typer.colors.GREEN,
    )


def _convert_batch(
    input_dir: Path, output_dir: Path | None, report_name: str | None
) -> None:
    from webp2png.api import convert_webp_directory_to_png

    convert_webp_directory_to_png(
        input_dir=input_dir,
        output_dir=output_dir,
        report_filename=report_name,
        reporter=EchoProgressReporter(),
    )


@app.command()
def main(
    ctx: typer.Context,
    input_path: Path | None = typer.Argument(
        None,
        help="A .webp file, or a directory whose .webp files are converted.",
    ),
    output_path: Path | None = typer.Argument(
        None,
        help="Output .png file, or output directory in directory mode.",
    ),
    report_name: str | None = typer.Option(
        None,
        "--report-name",
        help="File name of the error report written in directory mode.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
) -> None:
    """Convert a WebP file, or every WebP file in a directory, to PNG.

    Parameters
    ----------
    input_path : Path | None, default=None
        Source file or directory. Must exist. Without it, help is shown
        and the command exits 1.
    output_path : Path | None, default=None
        Destination file or directory. Defaults to the input's location.
    report_name : str | None, default=None
        Override for the ``conversion_errors.txt`` report name.

    Notes
    -----
    - Files whose ``.webp`` name hides JPEG data are decoded as JPEG.
    - Per-file failures in directory mode do not change the exit code.
    """
    if input_path is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=1)
    _configure_logging(verbose)

    try:
        mode = input_path.stat().st_mode
    except OSError as exc:
        typer.secho(f"✗ Error: {_printable(str(exc))}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    is_dir = stat.S_ISDIR(mode)

    try:
        if is_dir:
            _convert_batch(input_path, output_path, report_name)
        else:
            _convert_single(input_path, output_path)
    except ConversionError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_conversion_error(exc, debug))


if __name__ == "__main__":
    app()
