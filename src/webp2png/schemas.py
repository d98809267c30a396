"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class FileConversionConfig(BaseModel):
    """Validated input for single-file conversion.

    When ``output_path`` is omitted or blank it is derived from ``input_path``
    by replacing the extension with ``target_suffix``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_path: Path
    output_path: Path
    target_suffix: str = Field(default=".png", pattern=r"^\.[A-Za-z0-9]+$")

    @model_validator(mode="before")
    @classmethod
    def _derive_output_path(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "input_path" not in data:
            return data
        output_path = data.get("output_path")
        if output_path is None or (isinstance(output_path, str) and not output_path.strip()):
            suffix = data.get("target_suffix") or ".png"
            data = {
                **data,
                "output_path": Path(data["input_path"]).with_suffix(suffix),
            }
        return data


class DirectoryConversionConfig(BaseModel):
    """Validated input for directory conversion."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_dir: Path
    output_dir: Path | None = None
    report_filename: str = "conversion_errors.txt"
    source_extension: str = Field(default=".webp", pattern=r"^\.[A-Za-z0-9]+$")

    @field_validator("output_dir", mode="before")
    @classmethod
    def _blank_output_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("report_filename")
    @classmethod
    def _validate_report_filename(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise ValueError("report_filename cannot be empty.")
        if "/" in name or "\\" in name or name in {".", ".."}:
            raise ValueError("report_filename must be a plain file name.")
        return name

    @property
    def target_dir(self) -> Path:
        """Directory receiving converted files and the failure report."""
        return self.output_dir if self.output_dir is not None else self.input_dir

    @property
    def creates_output_dir(self) -> bool:
        return self.output_dir is not None and self.output_dir != self.input_dir
