"""Failure report rendering and default progress reporting."""

from __future__ import annotations

import logging
from pathlib import Path

from webp2png.application.results import ConversionReport

logger = logging.getLogger(__name__)

REPORT_TITLE = "Отчет об ошибках конвертации"
REPORT_RULE = "=" * 32
REPORT_TOTAL = "Всего ошибок: {count}"
REPORT_FILE = "{number}. Файл: {name}"
REPORT_ERROR = "   Ошибка: {message}"


def render_report(report: ConversionReport) -> str:
    """Render the human-readable failure report."""
    lines = [REPORT_TITLE, REPORT_RULE, "", REPORT_TOTAL.format(count=report.count), ""]
    for number, failure in report.entries():
        lines.append(REPORT_FILE.format(number=number, name=failure.file_name))
        lines.append(REPORT_ERROR.format(message=failure.message))
        lines.append("")
    return "\n".join(lines) + "\n"


def write_report(report: ConversionReport, path: Path) -> None:
    """Write the rendered report to ``path`` as UTF-8.

    Undecodable file names are written with backslash escapes.
    """
    path.write_text(
        render_report(report), encoding="utf-8", errors="backslashreplace"
    )


class LoggingProgressReporter:
    """Progress reporter that forwards notices to the module logger."""

    def no_files(self, input_dir: Path) -> None:
        logger.info("no eligible files found in %s", input_dir)

    def found(self, count: int) -> None:
        logger.info("found %d eligible file(s)", count)

    def converted(self, file_name: str, output_name: str) -> None:
        logger.info("converted %s -> %s", file_name, output_name)

    def failed(self, file_name: str, message: str) -> None:
        logger.error("conversion of %s failed: %s", file_name, message)

    def report_written(self, path: Path) -> None:
        logger.info("error report written to %s", path)

    def report_failed(self, path: Path, message: str) -> None:
        logger.warning("could not write error report %s: %s", path, message)

    def summary(self, success_count: int, eligible_count: int) -> None:
        logger.info("conversion finished: %d of %d succeeded", success_count, eligible_count)
