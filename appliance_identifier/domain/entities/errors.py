"""
Domain Errors

Every failure the core can report is a distinct subclass of
``DomainError`` so callers can branch on the kind instead of parsing
messages.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ApplianceValidationError(DomainError):
    """Raised when appliance data violates a domain invariant."""


class ClassifierError(DomainError):
    """Base class for failures reported by the image classifier."""


class ClassifierNoResultError(ClassifierError):
    """Raised when the classifier produced no usable prediction."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__("Classifier returned no result", details)


class ClassifierBackendError(ClassifierError):
    """Raised when the underlying classification engine fails."""


class PersistenceError(DomainError):
    """Base class for failures of the appliance record store."""


class ApplianceNotFoundError(PersistenceError):
    """Raised when no stored record matches a storage handle."""

    def __init__(self, handle: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Appliance with handle {handle} not found", details)


class StorageFailureError(PersistenceError):
    """Raised when the durable store fails to read or write."""


class ImageEncodingError(DomainError):
    """Raised when an image cannot be encoded for storage."""


class InvalidImageError(DomainError):
    """Raised when uploaded bytes are not a decodable image."""
