"""
Image classifier ports.

``IImageClassifier`` is what the application layer awaits.
``IClassificationEngine`` models a native, callback-driven inference
engine that an adapter bridges into the awaitable form.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Protocol, Sequence

from appliance_identifier.domain.entities.classification import ClassificationResult

ClassificationCallback = Callable[
    [Optional[Sequence[ClassificationResult]], Optional[BaseException]], None
]
"""Invoked with ``(predictions, None)`` on success or ``(None, error)``."""


class IImageClassifier(Protocol):
    """Awaitable image classifier."""

    @property
    def model_metadata(self) -> Dict[str, str]:
        """Version and provenance of the model in use."""
        ...

    @property
    def is_available(self) -> bool:
        """False once the classifier can no longer accept images."""
        ...

    async def classify(self, image: Any) -> ClassificationResult:
        """
        Classify ``image`` and return the top prediction.

        Raises:
            ClassifierNoResultError: If nothing usable was predicted
            ClassifierBackendError: If the engine failed
        """
        ...


class IClassificationEngine(Protocol):
    """Callback-based inference engine."""

    @property
    def model_metadata(self) -> Dict[str, str]:
        ...

    @property
    def is_running(self) -> bool:
        ...

    def submit(self, image: Any, on_complete: ClassificationCallback) -> None:
        """
        Start classifying ``image``; ``on_complete`` is called later,
        possibly from another thread. ``submit`` itself may also raise.
        """
        ...

    def shutdown(self) -> None:
        ...
