"""Classifier adapters - Infrastructure Layer."""

from .callback_classifier import CallbackImageClassifier
from .engines import StaticPredictor, ThreadPoolClassificationEngine

__all__ = [
    "CallbackImageClassifier",
    "ThreadPoolClassificationEngine",
    "StaticPredictor",
]
