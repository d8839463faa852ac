"""
In-memory Appliance Repository - Infrastructure Layer

Process-local record store for development and tests. An
``asyncio.Lock`` serializes every operation, and callers receive
copies of the stored records.
"""

import asyncio
import dataclasses
from typing import Dict, List, Tuple
from uuid import uuid4

from appliance_identifier.domain.entities.appliance import (
    ApplianceRecord,
    ApplianceRecordDraft,
    StorageHandle,
)
from appliance_identifier.domain.entities.errors import ApplianceNotFoundError
from appliance_identifier.domain.repositories.appliance_repository import (
    IApplianceRepository,
)
from appliance_identifier.shared import get_logger

logger = get_logger(__name__)


class InMemoryApplianceRepository(IApplianceRepository):
    """Lock-guarded, non-durable appliance record store."""

    def __init__(self) -> None:
        self.store_id = f"memory-{uuid4().hex}"
        self._lock = asyncio.Lock()
        self._records: Dict[str, Tuple[int, ApplianceRecord]] = {}
        self._sequence = 0

    async def list_all(self) -> List[ApplianceRecord]:
        async with self._lock:
            entries = sorted(
                self._records.values(),
                key=lambda entry: (entry[1].captured_at, entry[0]),
                reverse=True,
            )
            return [dataclasses.replace(record) for _, record in entries]

    async def save(self, draft: ApplianceRecordDraft) -> ApplianceRecord:
        handle = StorageHandle(store_id=self.store_id, key=uuid4().hex)
        record = ApplianceRecord.from_draft(draft, uuid4(), handle)
        async with self._lock:
            self._sequence += 1
            self._records[handle.key] = (self._sequence, record)
        logger.info("appliance.saved", appliance_id=str(record.id), name=record.name)
        return dataclasses.replace(record)

    async def find_by_handle(self, handle: StorageHandle) -> ApplianceRecord:
        async with self._lock:
            entry = self._records.get(handle.key) if handle.store_id == self.store_id else None
            if entry is None:
                raise ApplianceNotFoundError(handle.token)
            return dataclasses.replace(entry[1])

    async def delete(self, handle: StorageHandle) -> None:
        async with self._lock:
            if handle.store_id != self.store_id or handle.key not in self._records:
                raise ApplianceNotFoundError(handle.token)
            del self._records[handle.key]
        logger.info("appliance.deleted", handle=handle.token)
