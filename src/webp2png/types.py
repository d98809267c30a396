"""Shared type aliases and protocols for converter modules."""

from __future__ import annotations

from collections.abc import Callable
from typing import IO, Literal, Protocol

type FormatName = Literal["webp", "jpeg"]


class DecodedImage(Protocol):
    """Marker protocol for in-memory decoded images."""

    @property
    def size(self) -> tuple[int, int]:
        """Return ``(width, height)`` in pixels."""


type BinaryWriter = IO[bytes]
type DecodeFunction = Callable[[bytes], DecodedImage]
type DecoderChain = tuple[tuple[FormatName, DecodeFunction], ...]
