"""
Callback-to-awaitable classifier bridge.

Native inference engines report through a completion callback that may
run on any thread and, with some engines, more than once for a single
request (an error callback followed by a raise from the submit call,
for example). ``CallbackImageClassifier`` turns that into a coroutine
that settles exactly once.
"""

from __future__ import annotations

import asyncio
import threading
from typing import Any, Dict, Optional, Sequence

from appliance_identifier.domain.entities.classification import ClassificationResult
from appliance_identifier.domain.entities.errors import (
    ClassifierBackendError,
    ClassifierError,
    ClassifierNoResultError,
)
from appliance_identifier.domain.ports.image_classifier import IClassificationEngine
from appliance_identifier.shared import get_logger

logger = get_logger(__name__)


class CompletionLatch:
    """One-shot flag; only the first ``try_fire`` call returns True."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._fired = False

    def try_fire(self) -> bool:
        with self._lock:
            if self._fired:
                return False
            self._fired = True
            return True

    @property
    def fired(self) -> bool:
        with self._lock:
            return self._fired


def _settle_future(
    future: asyncio.Future,
    predictions: Optional[Sequence[ClassificationResult]],
    error: Optional[BaseException],
) -> None:
    if future.done():
        # the awaiting task was cancelled
        return

    if error is not None:
        if isinstance(error, ClassifierError):
            future.set_exception(error)
        else:
            backend_error = ClassifierBackendError(
                f"Classification engine failed: {error}",
                {"error_type": type(error).__name__},
            )
            backend_error.__cause__ = error
            future.set_exception(backend_error)
        return

    if not predictions:
        future.set_exception(ClassifierNoResultError())
        return

    top = max(predictions, key=lambda prediction: prediction.confidence)
    future.set_result(
        ClassificationResult(label=top.label, confidence=float(top.confidence))
    )


class CallbackImageClassifier:
    """``IImageClassifier`` backed by an ``IClassificationEngine``."""

    def __init__(self, engine: IClassificationEngine) -> None:
        self._engine = engine

    @property
    def model_metadata(self) -> Dict[str, str]:
        return dict(self._engine.model_metadata)

    @property
    def is_available(self) -> bool:
        return self._engine.is_running

    async def classify(self, image: Any) -> ClassificationResult:
        """
        Classify ``image`` and return the highest-confidence prediction.

        Raises:
            ClassifierNoResultError: If the engine reported no predictions
            ClassifierBackendError: If the engine reported or raised an error
        """
        loop = asyncio.get_running_loop()
        future: asyncio.Future = loop.create_future()
        latch = CompletionLatch()

        def on_complete(
            predictions: Optional[Sequence[ClassificationResult]],
            error: Optional[BaseException],
        ) -> None:
            if not latch.try_fire():
                logger.warning("classifier.duplicate_completion_ignored")
                return
            try:
                loop.call_soon_threadsafe(_settle_future, future, predictions, error)
            except RuntimeError:
                # the caller's loop is already closed; nobody is waiting
                logger.debug("classifier.completion_after_loop_closed")

        try:
            self._engine.submit(image, on_complete)
        except Exception as exc:
            on_complete(None, exc)

        result: ClassificationResult = await future
        logger.debug(
            "classifier.result", label=result.label, confidence=result.confidence
        )
        return result

    def shutdown(self) -> None:
        self._engine.shutdown()
