"""Domain errors raised by the conversion pipeline."""

from __future__ import annotations

from collections.abc import Sequence


class ConversionError(Exception):
    """Base error for a failed conversion step.

    Attributes
    ----------
    kind : str
        Stable identifier of the failing step.
    exit_code : int
        Process exit code used by the CLI.
    """

    kind = "ConversionFailed"
    exit_code = 1


class ReadError(ConversionError):
    """Input file could not be read."""

    kind = "ReadFailed"


class DecodeError(ConversionError):
    """Every decoder in the fallback chain rejected the input."""

    kind = "DecodeFailed"

    def __init__(self, attempts: Sequence[tuple[str, str]]) -> None:
        self.attempts = tuple(attempts)
        formats = ", ".join(name.upper() for name, _ in self.attempts)
        details = "; ".join(f"{name}: {message}" for name, message in self.attempts)
        super().__init__(
            f"unsupported or corrupt image (tried formats {formats}): {details}"
        )


class CreateError(ConversionError):
    """Destination file could not be created."""

    kind = "CreateFailed"


class EncodeError(ConversionError):
    """PNG encoding failed after a successful decode."""

    kind = "EncodeFailed"


class SyncError(ConversionError):
    """Encoded output could not be flushed to persistent storage."""

    kind = "SyncFailed"


class VerificationError(ConversionError):
    """Output is missing or empty despite a reported success."""

    kind = "VerificationFailed"


class BatchError(ConversionError):
    """Error that aborts a whole directory run."""


class ListError(BatchError):
    """Input directory could not be listed."""

    kind = "ListFailed"


class MkdirError(BatchError):
    """Output directory could not be created."""

    kind = "MkdirFailed"
