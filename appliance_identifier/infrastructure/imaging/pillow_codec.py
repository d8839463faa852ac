"""Pillow-based decoding of uploads and JPEG encoding for storage."""

from __future__ import annotations

import io

from PIL import Image, ImageOps, UnidentifiedImageError

from appliance_identifier.domain.entities.errors import (
    ImageEncodingError,
    InvalidImageError,
)

DEFAULT_JPEG_QUALITY = 80

# JPEG has no alpha or palette support
_JPEG_COMPATIBLE_MODES = {"RGB", "L", "CMYK"}


def decode_image(data: bytes) -> Image.Image:
    """
    Decode uploaded bytes into an upright RGB image.

    Raises:
        InvalidImageError: If the bytes are empty or not a supported image
    """
    if not data:
        raise InvalidImageError("Uploaded image is empty")
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            upright = ImageOps.exif_transpose(img)
            return upright.convert("RGB")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        raise InvalidImageError(
            f"Could not decode image: {exc}", {"size_bytes": len(data)}
        ) from exc


class PillowJpegEncoder:
    """``IImageEncoder`` producing baseline JPEG bytes."""

    def __init__(self, quality: int = DEFAULT_JPEG_QUALITY) -> None:
        if not 1 <= quality <= 95:
            raise ValueError(f"JPEG quality must be within [1, 95], got {quality}")
        self.quality = quality

    def encode(self, image: Image.Image) -> bytes:
        if not isinstance(image, Image.Image):
            raise ImageEncodingError(
                f"Cannot encode object of type {type(image).__name__} as JPEG"
            )
        try:
            if image.mode not in _JPEG_COMPATIBLE_MODES:
                image = image.convert("RGB")
            buffer = io.BytesIO()
            image.save(buffer, format="JPEG", quality=self.quality)
        except (OSError, ValueError) as exc:
            raise ImageEncodingError(f"JPEG encoding failed: {exc}") from exc
        return buffer.getvalue()
