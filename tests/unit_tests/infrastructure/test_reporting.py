"""Unit tests for failure report rendering."""

from __future__ import annotations

from pathlib import Path

import pytest

from webp2png.application.results import ConversionFailure, ConversionReport
from webp2png.infrastructure.reporting import (
    LoggingProgressReporter,
    render_report,
    write_report,
)

EXPECTED = """\
Отчет об ошибках конвертации
================================

Всего ошибок: 2

1. Файл: broken.webp
   Ошибка: unsupported or corrupt image

2. Файл: empty.webp
   Ошибка: output file is empty

"""


def _report() -> ConversionReport:
    return ConversionReport(
        failures=(
            ConversionFailure(file_name="broken.webp", message="unsupported or corrupt image"),
            ConversionFailure(file_name="empty.webp", message="output file is empty"),
        )
    )


def test_render_report_layout() -> None:
    """Render header, total and numbered entries in order."""
    assert render_report(_report()) == EXPECTED


def test_write_report_is_utf8(tmp_path: Path) -> None:
    target = tmp_path / "conversion_errors.txt"
    write_report(_report(), target)
    assert target.read_bytes().decode("utf-8") == EXPECTED


def test_logging_reporter_emits_failures(caplog: pytest.LogCaptureFixture) -> None:
    reporter = LoggingProgressReporter()
    with caplog.at_level("INFO", logger="webp2png.infrastructure.reporting"):
        reporter.failed("a.webp", "boom")
        reporter.summary(1, 2)
    assert "conversion of a.webp failed: boom" in caplog.text
    assert "1 of 2 succeeded" in caplog.text


def test_write_report_escapes_undecodable_names(tmp_path: Path) -> None:
    """Write surrogate-escaped file names as backslash escapes."""
    target = tmp_path / "conversion_errors.txt"
    report = ConversionReport(
        failures=(ConversionFailure(file_name="bad\udcff.webp", message="corrupt"),)
    )

    write_report(report, target)

    assert "1. Файл: bad\\udcff.webp" in target.read_text(encoding="utf-8")
