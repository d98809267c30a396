"""Application use-cases orchestrating conversion workflows."""

from __future__ import annotations

import contextlib
import logging
from pathlib import Path

from pydantic import ValidationError

from webp2png.adapters.codecs import DEFAULT_DECODERS, encode_png
from webp2png.application.options import ConversionOptions
from webp2png.application.ports import ImageEncoder, ProgressReporter, ReportWriter
from webp2png.application.results import (
    BatchResult,
    BatchState,
    ConversionFailure,
    ConversionOutcome,
    ConversionReport,
    ConversionResult,
    ConversionSuccess,
    ConversionTask,
)
from webp2png.errors import ConversionError, DecodeError, EncodeError, SyncError
from webp2png.infrastructure.filesystem import (
    close_destination,
    create_destination,
    discard_destination,
    ensure_directory,
    list_eligible_files,
    read_input_bytes,
    sync_to_disk,
    verify_output,
)
from webp2png.infrastructure.reporting import LoggingProgressReporter, write_report
from webp2png.schemas import DirectoryConversionConfig
from webp2png.types import DecodedImage, DecoderChain, FormatName

logger = logging.getLogger(__name__)


def decode_with_fallback(
    data: bytes, decoders: DecoderChain
) -> tuple[FormatName, DecodedImage]:
    """Try each ``(format, decode)`` pair in order and return the first success.

    Raises
    ------
    DecodeError
        Carrying every attempt's error message when all decoders fail.
    """
    attempts: list[tuple[str, str]] = []
    for format_name, decode in decoders:
        try:
            image = decode(data)
        except Exception as exc:
            attempts.append((format_name, str(exc) or type(exc).__name__))
            logger.debug("%s decode failed: %s", format_name, exc)
            continue
        if attempts:
            logger.debug(
                "decoded as %s after %s failed",
                format_name,
                ", ".join(name for name, _ in attempts),
            )
        return format_name, image
    raise DecodeError(attempts)


def convert_file(
    task: ConversionTask,
    *,
    decoders: DecoderChain | None = None,
    encoder: ImageEncoder | None = None,
) -> ConversionResult:
    """Use-case: convert one image file to PNG.

    The destination is created only after a successful decode. A failed
    encode removes the partial destination; a successful one is synced to
    disk before returning.
    """
    decoders = decoders or DEFAULT_DECODERS
    encoder = encoder or encode_png

    data = read_input_bytes(task.input_path)
    decoded_as, image = decode_with_fallback(data, decoders)

    handle = create_destination(task.output_path)
    try:
        encoder(image, handle)
    except Exception as exc:
        discard_destination(handle, task.output_path)
        raise EncodeError(f"failed to encode PNG: {exc}") from exc
    try:
        sync_to_disk(handle, task.output_path)
    except SyncError:
        with contextlib.suppress(OSError):
            handle.close()
        raise
    close_destination(handle, task.output_path)

    width, height = image.size
    return ConversionResult(
        input_path=task.input_path,
        output_path=task.output_path,
        decoded_as=decoded_as,
        width=width,
        height=height,
    )


def destination_name(file_name: str, extension: str, target_suffix: str) -> str:
    """Replace the matched ``extension`` of ``file_name`` with ``target_suffix``."""
    if file_name.lower().endswith(extension.lower()):
        return file_name[: len(file_name) - len(extension)] + target_suffix
    return str(Path(file_name).with_suffix(target_suffix))


def _convert_one(
    task: ConversionTask,
    *,
    decoders: DecoderChain | None,
    encoder: ImageEncoder | None,
) -> ConversionOutcome:
    file_name = task.input_path.name
    try:
        convert_file(task, decoders=decoders, encoder=encoder)
        verify_output(task.output_path, file_name)
    except ConversionError as exc:
        logger.info("%s failed with %s: %s", file_name, exc.kind, exc)
        return ConversionFailure(file_name=file_name, message=str(exc))
    return ConversionSuccess(file_name=file_name, output_path=task.output_path)


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
    """Use-case: convert every eligible file of a directory.

    Per-file failures are recorded and reported, never raised. Only listing
    the input directory and creating the output directory are fatal.

    Raises
    ------
    ListError
        If ``input_dir`` cannot be listed.
    MkdirError
        If ``output_dir`` cannot be created.
    """
    try:
        config = DirectoryConversionConfig(
            input_dir=input_dir,
            output_dir=output_dir,
            report_filename=options.report_filename,
            source_extension=options.source_extension,
        )
    except ValidationError as exc:
        raise ConversionError(f"Invalid directory conversion parameters: {exc}") from exc

    reporter = reporter or LoggingProgressReporter()
    report_writer = report_writer or write_report

    file_names = list_eligible_files(config.input_dir, config.source_extension)
    target_dir = config.target_dir
    if not file_names:
        reporter.no_files(config.input_dir)
        return BatchResult(
            input_dir=config.input_dir, output_dir=target_dir, eligible_count=0
        )
    reporter.found(len(file_names))

    if config.creates_output_dir:
        ensure_directory(target_dir)

    state = BatchState()
    for file_name in file_names:
        output_name = destination_name(
            file_name, config.source_extension, options.target_suffix
        )
        task = ConversionTask(
            input_path=config.input_dir / file_name,
            output_path=target_dir / output_name,
        )
        outcome = _convert_one(task, decoders=decoders, encoder=encoder)
        if isinstance(outcome, ConversionSuccess):
            reporter.converted(file_name, output_name)
        else:
            reporter.failed(outcome.file_name, outcome.message)
        state = state.record(outcome)

    report_path: Path | None = None
    if state.failures:
        candidate = target_dir / config.report_filename
        try:
            report_writer(ConversionReport(failures=state.failures), candidate)
        except (OSError, ValueError) as exc:
            reporter.report_failed(candidate, str(exc))
        else:
            report_path = candidate
            reporter.report_written(candidate)

    reporter.summary(state.success_count, len(file_names))
    return BatchResult(
        input_dir=config.input_dir,
        output_dir=target_dir,
        eligible_count=len(file_names),
        outcomes=state.outcomes,
        report_path=report_path,
    )


def build_conversion_options(
    *,
    report_filename: str | None = None,
    source_extension: str | None = None,
    target_suffix: str | None = None,
) -> ConversionOptions:
    """Build typed option object from command/API params."""
    defaults = ConversionOptions()
    return ConversionOptions(
        report_filename=report_filename or defaults.report_filename,
        source_extension=source_extension or defaults.source_extension,
        target_suffix=target_suffix or defaults.target_suffix,
    )
