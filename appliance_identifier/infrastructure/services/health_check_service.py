"""Infrastructure implementation of the health monitor."""

from __future__ import annotations

from time import perf_counter
from typing import Optional

import pymongo.errors

from appliance_identifier.domain.entities.health import (
    ClassifierHealth,
    ServiceStatus,
    StorageHealth,
)
from appliance_identifier.domain.ports.health_monitor import IHealthMonitor
from appliance_identifier.domain.ports.image_classifier import IImageClassifier
from appliance_identifier.domain.repositories.appliance_repository import (
    IApplianceRepository,
)
from appliance_identifier.infrastructure.database.mongo_database import MongoDatabase
from appliance_identifier.shared import EnumStorageBackend


class HealthCheckService(IHealthMonitor):
    """Checks the configured appliance record store and the classifier."""

    def __init__(
        self,
        storage_backend: str,
        appliance_repository: IApplianceRepository,
        image_classifier: IImageClassifier,
        mongo_database: Optional[MongoDatabase] = None,
    ) -> None:
        self._storage_backend = EnumStorageBackend(storage_backend)
        self._appliance_repository = appliance_repository
        self._image_classifier = image_classifier
        self._mongo_database = mongo_database

    async def check_storage(self) -> StorageHealth:
        store_id = self._appliance_repository.store_id

        if self._storage_backend is EnumStorageBackend.MEMORY:
            return StorageHealth(
                backend=self._storage_backend.value,
                status=ServiceStatus.UP,
                durable=False,
                store_id=store_id,
                message="Appliance records are kept in memory and lost on restart.",
            )

        if self._mongo_database is None:
            return StorageHealth(
                backend=self._storage_backend.value,
                status=ServiceStatus.UNKNOWN,
                durable=True,
                store_id=store_id,
                message="Mongo database client not configured.",
            )

        start = perf_counter()
        try:
            await self._mongo_database.ping()
        except pymongo.errors.PyMongoError as exc:
            return StorageHealth(
                backend=self._storage_backend.value,
                status=ServiceStatus.DOWN,
                durable=True,
                store_id=store_id,
                message=f"MongoDB ping failed: {exc}",
                latency_ms=(perf_counter() - start) * 1000,
            )
        return StorageHealth(
            backend=self._storage_backend.value,
            status=ServiceStatus.UP,
            durable=True,
            store_id=store_id,
            message="MongoDB ping successful",
            latency_ms=(perf_counter() - start) * 1000,
        )

    async def check_classifier(self) -> ClassifierHealth:
        status = (
            ServiceStatus.UP
            if self._image_classifier.is_available
            else ServiceStatus.DOWN
        )
        return ClassifierHealth.from_metadata(status, self._image_classifier.model_metadata)
