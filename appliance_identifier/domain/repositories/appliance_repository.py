"""
Appliance Repository Interface

The persistence boundary for identified appliances. Implementations
must serialize every operation against one store instance (a single
writer) and hand back freshly built, immutable snapshots only.
"""

from abc import ABC, abstractmethod
from typing import List

from appliance_identifier.domain.entities.appliance import (
    ApplianceRecord,
    ApplianceRecordDraft,
    StorageHandle,
)


class IApplianceRepository(ABC):
    """Interface for appliance record stores."""

    store_id: str
    """Identifies this store instance inside every handle it issues."""

    @abstractmethod
    async def list_all(self) -> List[ApplianceRecord]:
        """
        Return every stored record, most recent first.

        Records are ordered by ``captured_at`` descending; records with the
        same timestamp are ordered by insertion, latest insertion first.

        Raises:
            StorageFailureError: If the store cannot be read
        """
        pass

    @abstractmethod
    async def save(self, draft: ApplianceRecordDraft) -> ApplianceRecord:
        """
        Persist a draft as a new record.

        The write is atomic: either the full record is stored or nothing is.

        Args:
            draft: The enriched, not yet persisted appliance data

        Returns:
            Snapshot of the stored record with its id and storage handle

        Raises:
            StorageFailureError: If the record cannot be written
        """
        pass

    @abstractmethod
    async def delete(self, handle: StorageHandle) -> None:
        """
        Remove the record addressed by ``handle``.

        Raises:
            ApplianceNotFoundError: If no record in this store has the handle
            StorageFailureError: If the store cannot be written
        """
        pass

    @abstractmethod
    async def find_by_handle(self, handle: StorageHandle) -> ApplianceRecord:
        """
        Return the snapshot addressed by ``handle``.

        Raises:
            ApplianceNotFoundError: If no record in this store has the handle
            StorageFailureError: If the store cannot be read
        """
        pass
