"""Unit tests for input schemas and the error taxonomy."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from webp2png import api as api_module
from webp2png.errors import (
    BatchError,
    ConversionError,
    DecodeError,
    ListError,
    MkdirError,
    ReadError,
    VerificationError,
)
from webp2png.schemas import DirectoryConversionConfig, FileConversionConfig


@pytest.mark.parametrize(
    ("output_path", "expected"),
    [
        (None, Path("images/cat.png")),
        ("", Path("images/cat.png")),
        ("   ", Path("images/cat.png")),
        (Path("out/dog.png"), Path("out/dog.png")),
    ],
)
def test_file_config_derives_output_path(
    output_path: Path | str | None, expected: Path
) -> None:
    config = FileConversionConfig(input_path=Path("images/cat.webp"), output_path=output_path)
    assert config.output_path == expected


def test_file_config_rejects_bad_suffix() -> None:
    with pytest.raises(ValidationError):
        FileConversionConfig(input_path=Path("a.webp"), target_suffix="png")


def test_directory_config_defaults_to_input_dir() -> None:
    """Treat a missing or blank output directory as the input directory."""
    for output_dir in (None, ""):
        config = DirectoryConversionConfig(input_dir=Path("in"), output_dir=output_dir)
        assert config.output_dir is None
        assert config.target_dir == Path("in")
        assert config.creates_output_dir is False


def test_directory_config_same_output_dir_is_not_created() -> None:
    config = DirectoryConversionConfig(input_dir=Path("in"), output_dir=Path("in"))
    assert config.creates_output_dir is False
    other = DirectoryConversionConfig(input_dir=Path("in"), output_dir=Path("out"))
    assert other.creates_output_dir is True
    assert other.target_dir == Path("out")


@pytest.mark.parametrize("name", ["", "  ", "a/b.txt", "a\\b.txt", ".."])
def test_directory_config_rejects_bad_report_names(name: str) -> None:
    with pytest.raises(ValidationError):
        DirectoryConversionConfig(input_dir=Path("in"), report_filename=name)


def test_error_kinds_and_hierarchy() -> None:
    """Map every failure to a stable kind under a common base."""
    assert ReadError.kind == "ReadFailed"
    assert VerificationError.kind == "VerificationFailed"
    assert ListError.kind == "ListFailed"
    assert MkdirError.kind == "MkdirFailed"
    assert issubclass(ListError, BatchError)
    assert issubclass(BatchError, ConversionError)
    assert ConversionError("x").exit_code == 1


def test_decode_error_message_names_both_formats() -> None:
    exc = DecodeError([("webp", "bad header"), ("jpeg", "bad marker")])
    assert exc.kind == "DecodeFailed"
    assert str(exc) == (
        "unsupported or corrupt image (tried formats WEBP, JPEG): "
        "webp: bad header; jpeg: bad marker"
    )


def test_api_wraps_invalid_parameters() -> None:
    with pytest.raises(ConversionError, match="Invalid file conversion parameters"):
        api_module.convert_webp_file_to_png(Path("a.webp"), target_suffix="png")
