"""End-to-end smoke test for the installed console script."""

from __future__ import annotations

import subprocess
from pathlib import Path

import webp2png


def test_package_import_smoke() -> None:
    """Ensure package can be imported in the test process."""
    assert webp2png.__version__


def test_cli_help_smoke() -> None:
    """Ensure the installed CLI entrypoint responds to --help."""
    result = subprocess.run(
        ["webp2png", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert "Convert a WebP file" in result.stdout


def test_cli_missing_input_fails_cleanly(tmp_path: Path) -> None:
    """Ensure a missing input path exits with status 1."""
    result = subprocess.run(
        ["webp2png", str(tmp_path / "definitely-missing.webp")],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 1
    assert "no such file" in result.stderr.lower()
