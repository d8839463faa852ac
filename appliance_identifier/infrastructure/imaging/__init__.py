"""Image handling - Infrastructure Layer."""

from .pillow_codec import PillowJpegEncoder, decode_image

__all__ = ["PillowJpegEncoder", "decode_image"]
