"""Filesystem helpers used by the conversion use-cases."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from webp2png.errors import (
    CreateError,
    ListError,
    MkdirError,
    ReadError,
    SyncError,
    VerificationError,
)
from webp2png.types import BinaryWriter

logger = logging.getLogger(__name__)


def read_input_bytes(path: Path) -> bytes:
    """Read a whole input file into memory.

    Raises
    ------
    ReadError
        If the file is missing, unreadable, or a directory.
    """
    try:
        return path.read_bytes()
    except OSError as exc:
        raise ReadError(f"failed to read file {path}: {exc}") from exc


def create_destination(path: Path) -> BinaryWriter:
    """Open ``path`` for binary writing, truncating existing content."""
    try:
        return path.open("wb")
    except OSError as exc:
        raise CreateError(f"failed to create output file {path}: {exc}") from exc


def sync_to_disk(handle: BinaryWriter, path: Path) -> None:
    """Flush buffered writes and force them to persistent storage."""
    try:
        handle.flush()
        os.fsync(handle.fileno())
    except OSError as exc:
        raise SyncError(f"failed to sync output file {path}: {exc}") from exc


def close_destination(handle: BinaryWriter, path: Path) -> None:
    """Close a written destination; a failing final flush is a sync failure."""
    try:
        handle.close()
    except OSError as exc:
        raise SyncError(f"failed to close output file {path}: {exc}") from exc


def discard_destination(handle: BinaryWriter, path: Path) -> None:
    """Close a partially written destination and remove it. Never raises."""
    try:
        handle.close()
    except OSError as exc:
        logger.warning("could not close %s: %s", path, exc)
    remove_quietly(path)


def remove_quietly(path: Path) -> bool:
    """Best-effort removal; failures are logged, never raised."""
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        logger.warning("could not remove %s: %s", path, exc)
        return False
    return True


def verify_output(path: Path, source_name: str) -> int:
    """Check that ``path`` exists and is non-empty.

    An empty file is deleted before the error is raised.

    Returns
    -------
    int
        Size of the verified output in bytes.

    Raises
    ------
    VerificationError
        If the output is missing or empty.
    """
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise VerificationError(
            f"output file {path} not found after converting {source_name}"
        ) from exc
    if size == 0:
        remove_quietly(path)
        raise VerificationError(
            f"output file {path} is empty after converting {source_name}"
        )
    return size


def list_eligible_files(directory: Path, extension: str) -> list[str]:
    """Return non-directory entry names ending in ``extension``, sorted.

    Matching is case-insensitive and does not recurse.

    Raises
    ------
    ListError
        If the directory cannot be read.
    """
    suffix = extension.lower()
    try:
        with os.scandir(directory) as entries:
            names = [
                entry.name
                for entry in entries
                if not entry.is_dir(follow_symlinks=False)
                and entry.name.lower().endswith(suffix)
            ]
    except OSError as exc:
        raise ListError(f"failed to read directory {directory}: {exc}") from exc
    return sorted(names)


def ensure_directory(path: Path) -> None:
    """Create ``path`` and missing parents."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise MkdirError(f"failed to create output directory {path}: {exc}") from exc
