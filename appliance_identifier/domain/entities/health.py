"""
Health domain entities.

Availability of the two things an identification depends on: the
appliance record store and the image classifier. The store reports
whether saved appliances survive a restart; the classifier reports the
model that produced the labels.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Mapping, Optional


class ServiceStatus(str, Enum):
    """High-level availability for a component or the system."""

    UP = "up"
    DEGRADED = "degraded"
    DOWN = "down"
    UNKNOWN = "unknown"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]


_SEVERITY = {
    ServiceStatus.UP: 0,
    ServiceStatus.UNKNOWN: 1,
    ServiceStatus.DEGRADED: 2,
    ServiceStatus.DOWN: 3,
}


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class StorageHealth:
    """State of the appliance record store."""

    backend: str
    status: ServiceStatus
    durable: bool
    store_id: Optional[str] = None
    message: Optional[str] = None
    latency_ms: Optional[float] = None
    checked_at: datetime = field(default_factory=_utc_now)

    @property
    def accepts_saves(self) -> bool:
        return self.status is ServiceStatus.UP


@dataclass(frozen=True, slots=True)
class ClassifierHealth:
    """State of the image classifier and the model behind it."""

    status: ServiceStatus
    model_version: str = "unknown"
    model_type: str = "unknown"
    metadata: Dict[str, str] = field(default_factory=dict)
    checked_at: datetime = field(default_factory=_utc_now)

    @classmethod
    def from_metadata(
        cls, status: ServiceStatus, metadata: Mapping[str, str]
    ) -> "ClassifierHealth":
        return cls(
            status=status,
            model_version=metadata.get("version", "unknown"),
            model_type=metadata.get("model_type", "unknown"),
            metadata=dict(metadata),
        )


@dataclass(frozen=True, slots=True)
class SystemHealth:
    """Record store and classifier health; the worst of the two wins."""

    storage: StorageHealth
    classifier: ClassifierHealth

    @property
    def status(self) -> ServiceStatus:
        return max(
            (self.storage.status, self.classifier.status),
            key=lambda status: status.severity,
        )


@dataclass(frozen=True, slots=True)
class ServiceIdentity:
    """Build identity of the running service."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str


@dataclass(frozen=True, slots=True)
class ApplicationInfo:
    """Operational metadata surfaced by the /info endpoint."""

    identity: ServiceIdentity
    started_at: datetime
    uptime_seconds: float
    health: SystemHealth
    reference_profile_count: int
