"""DTOs for system health and application info responses."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, Field

from appliance_identifier.domain.entities.health import (
    ApplicationInfo,
    ClassifierHealth,
    ServiceStatus,
    StorageHealth,
    SystemHealth,
)


class StorageHealthDTO(BaseModel):
    """Serializable state of the appliance record store."""

    backend: str = Field(description="Configured record store (mongo or memory)")
    status: ServiceStatus
    durable: bool = Field(description="Whether saved appliances survive a restart")
    accepts_saves: bool
    store_id: Optional[str] = None
    message: Optional[str] = None
    latency_ms: Optional[float] = None
    checked_at: datetime

    @classmethod
    def from_domain(cls, storage: StorageHealth) -> "StorageHealthDTO":
        return cls(
            backend=storage.backend,
            status=storage.status,
            durable=storage.durable,
            accepts_saves=storage.accepts_saves,
            store_id=storage.store_id,
            message=storage.message,
            latency_ms=storage.latency_ms,
            checked_at=storage.checked_at,
        )


class ClassifierHealthDTO(BaseModel):
    """Serializable state of the image classifier."""

    status: ServiceStatus
    model_version: str
    model_type: str
    metadata: Dict[str, str] = Field(
        default_factory=dict, description="Metadata of the deployed classifier"
    )
    checked_at: datetime

    @classmethod
    def from_domain(cls, classifier: ClassifierHealth) -> "ClassifierHealthDTO":
        return cls(
            status=classifier.status,
            model_version=classifier.model_version,
            model_type=classifier.model_type,
            metadata=classifier.metadata,
            checked_at=classifier.checked_at,
        )


class SystemHealthDTO(BaseModel):
    """DTO representing the /health response payload."""

    status: ServiceStatus = Field(description="Worst status of storage and classifier")
    storage: StorageHealthDTO
    classifier: ClassifierHealthDTO

    @classmethod
    def from_domain(cls, health: SystemHealth) -> "SystemHealthDTO":
        return cls(
            status=health.status,
            storage=StorageHealthDTO.from_domain(health.storage),
            classifier=ClassifierHealthDTO.from_domain(health.classifier),
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "up",
                "storage": {
                    "backend": "mongo",
                    "status": "up",
                    "durable": True,
                    "accepts_saves": True,
                    "store_id": "appliance_identifier.appliances",
                    "message": "MongoDB ping successful",
                    "latency_ms": 3.1,
                    "checked_at": "2025-10-13T12:00:00Z",
                },
                "classifier": {
                    "status": "up",
                    "model_version": "1.0",
                    "model_type": "StaticPredictor",
                    "metadata": {"version": "1.0", "model_type": "StaticPredictor"},
                    "checked_at": "2025-10-13T12:00:00Z",
                },
            }
        }
    }


class ApplicationInfoDTO(BaseModel):
    """DTO representing metadata returned by /info."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    status: ServiceStatus
    storage: StorageHealthDTO
    classifier: ClassifierHealthDTO
    reference_profile_count: int = Field(
        description="Entries in the bundled wattage reference table"
    )

    @classmethod
    def from_domain(cls, info: ApplicationInfo) -> "ApplicationInfoDTO":
        identity = info.identity
        return cls(
            name=identity.name,
            description=identity.description,
            version=identity.version,
            environment=identity.environment,
            git_commit=identity.git_commit,
            build_time=identity.build_time,
            started_at=info.started_at,
            uptime_seconds=info.uptime_seconds,
            status=info.health.status,
            storage=StorageHealthDTO.from_domain(info.health.storage),
            classifier=ClassifierHealthDTO.from_domain(info.health.classifier),
            reference_profile_count=info.reference_profile_count,
        )
