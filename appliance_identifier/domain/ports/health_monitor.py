"""Port through which the application layer asks for component health."""

from __future__ import annotations

from typing import Protocol

from appliance_identifier.domain.entities.health import ClassifierHealth, StorageHealth


class IHealthMonitor(Protocol):
    """Checks the record store and the classifier independently."""

    async def check_storage(self) -> StorageHealth:
        """Report whether appliance records can be saved and if they persist."""
        ...

    async def check_classifier(self) -> ClassifierHealth:
        """Report whether images can be classified and by which model."""
        ...
