"""
Classification engines.

``ThreadPoolClassificationEngine`` runs a synchronous predictor on a
worker pool and reports through a completion callback, the same shape
as platform inference APIs. ``StaticPredictor`` is the predictor used
when no trained model is deployed.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, List, Optional, Sequence

from appliance_identifier.domain.entities.classification import ClassificationResult
from appliance_identifier.domain.ports.image_classifier import ClassificationCallback

Predictor = Callable[[Any], Sequence[ClassificationResult]]


class StaticPredictor:
    """Predicts the same label for every image."""

    def __init__(self, label: str, confidence: float) -> None:
        if not 0.0 <= confidence <= 1.0:
            raise ValueError(f"confidence must be within [0, 1], got {confidence}")
        self.label = label
        self.confidence = confidence

    def __call__(self, image: Any) -> List[ClassificationResult]:
        return [ClassificationResult(label=self.label, confidence=self.confidence)]


class ThreadPoolClassificationEngine:
    """Callback-based engine executing ``predictor`` on worker threads."""

    def __init__(
        self,
        predictor: Predictor,
        max_workers: int = 1,
        metadata: Optional[Dict[str, str]] = None,
    ) -> None:
        self._predictor = predictor
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="classifier-inference",
        )
        self._metadata = dict(metadata or {})
        self._running = True

    @property
    def model_metadata(self) -> Dict[str, str]:
        return self._metadata

    @property
    def is_running(self) -> bool:
        return self._running

    def submit(self, image: Any, on_complete: ClassificationCallback) -> None:
        self._executor.submit(self._run, image, on_complete)

    def _run(self, image: Any, on_complete: ClassificationCallback) -> None:
        try:
            predictions = self._predictor(image)
        except Exception as exc:
            on_complete(None, exc)
            return
        on_complete(predictions, None)

    def shutdown(self) -> None:
        self._running = False
        self._executor.shutdown(wait=True)
