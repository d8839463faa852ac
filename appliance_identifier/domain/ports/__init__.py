"""Ports that infrastructure adapters must satisfy."""

from .health_monitor import IHealthMonitor
from .image_classifier import ClassificationCallback, IClassificationEngine, IImageClassifier
from .image_encoder import IImageEncoder

__all__ = [
    "IHealthMonitor",
    "IImageClassifier",
    "IClassificationEngine",
    "ClassificationCallback",
    "IImageEncoder",
]
