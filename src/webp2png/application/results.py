"""Application-layer task and result objects."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from webp2png.types import FormatName


@dataclass(frozen=True)
class ConversionTask:
    """Single input/output pair handed to the file converter."""

    input_path: Path
    output_path: Path


@dataclass(frozen=True)
class ConversionResult:
    """Structured single-file conversion outcome."""

    input_path: Path
    output_path: Path
    decoded_as: FormatName
    width: int
    height: int


@dataclass(frozen=True)
class ConversionSuccess:
    """Converted and verified file."""

    file_name: str
    output_path: Path


@dataclass(frozen=True)
class ConversionFailure:
    """File whose conversion or verification failed."""

    file_name: str
    message: str


type ConversionOutcome = ConversionSuccess | ConversionFailure


@dataclass(frozen=True)
class ConversionReport:
    """Read-only view over failures in discovery order."""

    failures: tuple[ConversionFailure, ...]

    @property
    def count(self) -> int:
        return len(self.failures)

    def entries(self) -> Iterator[tuple[int, ConversionFailure]]:
        """Yield ``(number, failure)`` pairs numbered from 1."""
        return enumerate(self.failures, start=1)


@dataclass(frozen=True)
class BatchState:
    """Accumulator threaded through a directory run.

    Each call to :meth:`record` returns a new state; nothing is shared between
    runs.
    """

    outcomes: tuple[ConversionOutcome, ...] = ()

    def record(self, outcome: ConversionOutcome) -> BatchState:
        return BatchState(outcomes=(*self.outcomes, outcome))

    @property
    def success_count(self) -> int:
        return sum(1 for item in self.outcomes if isinstance(item, ConversionSuccess))

    @property
    def failures(self) -> tuple[ConversionFailure, ...]:
        return tuple(
            item for item in self.outcomes if isinstance(item, ConversionFailure)
        )


@dataclass(frozen=True)
class BatchResult:
    """Structured directory conversion outcome."""

    input_dir: Path
    output_dir: Path
    eligible_count: int
    outcomes: tuple[ConversionOutcome, ...] = ()
    report_path: Path | None = None

    @property
    def success_count(self) -> int:
        return sum(1 for item in self.outcomes if isinstance(item, ConversionSuccess))

    @property
    def failures(self) -> tuple[ConversionFailure, ...]:
        return tuple(
            item for item in self.outcomes if isinstance(item, ConversionFailure)
        )
