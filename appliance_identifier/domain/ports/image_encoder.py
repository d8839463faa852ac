"""Port for turning a captured image into storable bytes."""

from __future__ import annotations

from typing import Any, Protocol


class IImageEncoder(Protocol):
    """Lossy still-image encoder."""

    def encode(self, image: Any) -> bytes:
        """
        Encode ``image`` for storage.

        Raises:
            ImageEncodingError: If the image cannot be encoded
        """
        ...
