"""Pillow-backed codec adapters."""

from __future__ import annotations

from io import BytesIO
from typing import cast

from PIL import Image, UnidentifiedImageError

from webp2png.types import BinaryWriter, DecodedImage, DecoderChain

# Modes the PNG writer stores without conversion.
PNG_NATIVE_MODES = frozenset({"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"})


def _decode_as(data: bytes, pillow_format: str) -> Image.Image:
    try:
        image = Image.open(BytesIO(data), formats=[pillow_format])
    except UnidentifiedImageError as exc:
        raise ValueError(f"data is not a valid {pillow_format} image") from exc
    # Decode eagerly; truncated payloads must fail as decode errors.
    image.load()
    return image


def decode_webp(data: bytes) -> DecodedImage:
    """Decode WebP bytes into a Pillow image."""
    return _decode_as(data, "WEBP")


def decode_jpeg(data: bytes) -> DecodedImage:
    """Decode JPEG bytes into a Pillow image."""
    return _decode_as(data, "JPEG")


def encode_png(image: DecodedImage, handle: BinaryWriter) -> None:
    """Encode a decoded image as PNG into ``handle``.

    Modes PNG cannot hold (CMYK, YCbCr, ...) are converted to RGB or RGBA.
    No ICC profile, EXIF or text chunks are written.
    """
    pil_image = cast(Image.Image, image)
    if pil_image.mode not in PNG_NATIVE_MODES:
        target_mode = "RGBA" if "A" in pil_image.getbands() else "RGB"
        pil_image = pil_image.convert(target_mode)
    pil_image.save(handle, format="PNG", icc_profile=None, exif=b"")


DEFAULT_DECODERS: DecoderChain = (
    ("webp", decode_webp),
    ("jpeg", decode_jpeg),
)
