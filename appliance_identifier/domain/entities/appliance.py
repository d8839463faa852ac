"""
Domain Entities - Appliance

Immutable value types describing an identified appliance, before and
after it has been persisted. Records are snapshots: they are built by
the record store at the moment a value leaves it and never refer back
into store state, so they can be shared freely between tasks and
threads.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from .energy import (
    COST_PER_KILOWATT_HOUR,
    DAYS_PER_MONTH,
    continuous_daily_kilowatt_hours,
)
from .errors import ApplianceValidationError

_HANDLE_SEPARATOR = ":"


def _to_storage_precision(moment: datetime) -> datetime:
    """Normalize to aware UTC with millisecond resolution."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.replace(microsecond=moment.microsecond // 1000 * 1000)


def utc_now() -> datetime:
    """Current time at the precision records are stored with."""
    return _to_storage_precision(datetime.now(timezone.utc))


@dataclass(frozen=True)
class StorageHandle:
    """Opaque reference to one record inside one record store.

    Only the store that issued a handle can resolve it; any other store
    treats it as unknown.
    """

    store_id: str
    key: str

    @property
    def token(self) -> str:
        """String form used to carry the handle across the HTTP boundary."""
        return f"{self.store_id}{_HANDLE_SEPARATOR}{self.key}"

    @classmethod
    def from_token(cls, token: str) -> "StorageHandle":
        store_id, separator, key = token.rpartition(_HANDLE_SEPARATOR)
        if not separator or not store_id or not key:
            raise ApplianceValidationError(
                f"Malformed storage handle: {token!r}", {"token": token}
            )
        return cls(store_id=store_id, key=key)

    def __str__(self) -> str:
        return self.token


@dataclass(frozen=True)
class ApplianceRecordDraft:
    """An enriched identification that has not been persisted yet."""

    name: str
    category: str
    estimated_wattage_watts: float
    confidence: float
    captured_at: datetime = field(default_factory=utc_now)
    image_bytes: Optional[bytes] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ApplianceValidationError(
                f"Confidence must be within [0, 1], got {self.confidence}",
                {"confidence": self.confidence},
            )
        if self.estimated_wattage_watts <= 0:
            raise ApplianceValidationError(
                f"Estimated wattage must be positive, got {self.estimated_wattage_watts}",
                {"estimated_wattage_watts": self.estimated_wattage_watts},
            )
        if self.image_bytes is not None and not isinstance(self.image_bytes, bytes):
            object.__setattr__(self, "image_bytes", bytes(self.image_bytes))
        object.__setattr__(
            self, "captured_at", _to_storage_precision(self.captured_at)
        )

    @property
    def daily_kilowatt_hours(self) -> float:
        return continuous_daily_kilowatt_hours(self.estimated_wattage_watts)


@dataclass(frozen=True)
class ApplianceRecord:
    """A persisted appliance identification.

    Consumption and cost are derived on read. Daily energy assumes the
    appliance runs around the clock, independent of the reference
    profile's usage hours.
    """

    id: UUID
    storage_handle: StorageHandle
    name: str
    category: str
    estimated_wattage_watts: float
    confidence: float
    captured_at: datetime
    image_bytes: Optional[bytes] = field(default=None, repr=False)

    @classmethod
    def from_draft(
        cls, draft: ApplianceRecordDraft, record_id: UUID, handle: StorageHandle
    ) -> "ApplianceRecord":
        return cls(
            id=record_id,
            storage_handle=handle,
            name=draft.name,
            category=draft.category,
            estimated_wattage_watts=draft.estimated_wattage_watts,
            confidence=draft.confidence,
            captured_at=draft.captured_at,
            image_bytes=draft.image_bytes,
        )

    @property
    def daily_kilowatt_hours(self) -> float:
        return continuous_daily_kilowatt_hours(self.estimated_wattage_watts)

    @property
    def monthly_cost_estimate(self) -> float:
        return self.daily_kilowatt_hours * DAYS_PER_MONTH * COST_PER_KILOWATT_HOUR

    @property
    def has_image(self) -> bool:
        return self.image_bytes is not None
