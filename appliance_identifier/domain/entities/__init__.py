"""
Domain Entities Package

Value types and errors shared by every layer.
"""

from .appliance import ApplianceRecord, ApplianceRecordDraft, StorageHandle, utc_now
from .classification import ClassificationResult
from .energy import (
    ASSUMED_HOURS_PER_DAY,
    COST_PER_KILOWATT_HOUR,
    DAYS_PER_MONTH,
    EnergyProfile,
    continuous_daily_kilowatt_hours,
)
from .errors import (
    ApplianceNotFoundError,
    ApplianceValidationError,
    ClassifierBackendError,
    ClassifierError,
    ClassifierNoResultError,
    DomainError,
    ImageEncodingError,
    InvalidImageError,
    PersistenceError,
    StorageFailureError,
)
from .health import (
    ApplicationInfo,
    ClassifierHealth,
    ServiceIdentity,
    ServiceStatus,
    StorageHealth,
    SystemHealth,
)

__all__ = [
    "ApplianceRecord",
    "ApplianceRecordDraft",
    "StorageHandle",
    "utc_now",
    "ClassificationResult",
    "EnergyProfile",
    "continuous_daily_kilowatt_hours",
    "COST_PER_KILOWATT_HOUR",
    "ASSUMED_HOURS_PER_DAY",
    "DAYS_PER_MONTH",
    "DomainError",
    "ApplianceValidationError",
    "ClassifierError",
    "ClassifierNoResultError",
    "ClassifierBackendError",
    "PersistenceError",
    "ApplianceNotFoundError",
    "StorageFailureError",
    "ImageEncodingError",
    "InvalidImageError",
    "SystemHealth",
    "StorageHealth",
    "ClassifierHealth",
    "ServiceIdentity",
    "ServiceStatus",
    "ApplicationInfo",
]
