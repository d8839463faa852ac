"""
MongoDB Appliance Repository - Infrastructure Layer

Stores appliance records in a MongoDB collection. Every call goes
through the ``MongoDatabase`` writer lane, and every returned record
is rebuilt from the stored document, never shared with the driver.
"""

from datetime import timezone
from typing import Any, Dict, List
from uuid import UUID, uuid4

import pymongo
import pymongo.errors

from appliance_identifier.domain.entities.appliance import (
    ApplianceRecord,
    ApplianceRecordDraft,
    StorageHandle,
)
from appliance_identifier.domain.entities.errors import (
    ApplianceNotFoundError,
    StorageFailureError,
)
from appliance_identifier.domain.repositories.appliance_repository import (
    IApplianceRepository,
)
from appliance_identifier.infrastructure.database import MongoDatabase
from appliance_identifier.shared import get_logger

logger = get_logger(__name__)


class MongoApplianceRepository(IApplianceRepository):
    """MongoDB implementation of the appliance record store."""

    SEQUENCE_NAME = "appliance_insertions"

    def __init__(self, mongo_database: MongoDatabase, collection_name: str = "appliances"):
        """
        Initialize the repository.

        Args:
            mongo_database: MongoDB database client
            collection_name: Collection holding the appliance documents
        """
        self.db = mongo_database
        self.collection_name = collection_name
        self.store_id = f"{mongo_database.name}.{collection_name}"

    def _to_document(
        self, draft: ApplianceRecordDraft, record_id: UUID, key: str
    ) -> Dict[str, Any]:
        return {
            "id": str(record_id),
            "key": key,
            "name": draft.name,
            "category": draft.category,
            "estimated_wattage_watts": draft.estimated_wattage_watts,
            "confidence": draft.confidence,
            "captured_at": draft.captured_at,
            "image_bytes": draft.image_bytes,
        }

    def _to_entity(self, document: Dict[str, Any]) -> ApplianceRecord:
        captured_at = document["captured_at"]
        if captured_at.tzinfo is None:
            captured_at = captured_at.replace(tzinfo=timezone.utc)
        image_bytes = document.get("image_bytes")
        return ApplianceRecord(
            id=UUID(document["id"]),
            storage_handle=StorageHandle(store_id=self.store_id, key=document["key"]),
            name=document["name"],
            category=document["category"],
            estimated_wattage_watts=float(document["estimated_wattage_watts"]),
            confidence=float(document["confidence"]),
            captured_at=captured_at,
            image_bytes=bytes(image_bytes) if image_bytes is not None else None,
        )

    def _owns(self, handle: StorageHandle) -> bool:
        return handle.store_id == self.store_id

    async def list_all(self) -> List[ApplianceRecord]:
        """Return every record, newest capture first, then newest insert."""
        try:
            documents = await self.db.find_many(
                self.collection_name,
                {},
                sort=[
                    ("captured_at", pymongo.DESCENDING),
                    ("sequence", pymongo.DESCENDING),
                ],
            )
        except pymongo.errors.PyMongoError as e:
            raise StorageFailureError(f"Failed to list appliances: {e}") from e
        return [self._to_entity(document) for document in documents]

    async def save(self, draft: ApplianceRecordDraft) -> ApplianceRecord:
        """
        Persist a draft as a new document.

        Raises:
            StorageFailureError: If the insert fails
        """
        record_id = uuid4()
        key = uuid4().hex
        try:
            stored = await self.db.insert_sequenced(
                self.collection_name,
                self._to_document(draft, record_id, key),
                self.SEQUENCE_NAME,
            )
        except pymongo.errors.PyMongoError as e:
            raise StorageFailureError(f"Failed to save appliance: {e}") from e
        logger.info(
            "appliance.saved",
            appliance_id=str(record_id),
            name=draft.name,
            sequence=stored["sequence"],
        )
        return ApplianceRecord.from_draft(
            draft, record_id, StorageHandle(store_id=self.store_id, key=key)
        )

    async def find_by_handle(self, handle: StorageHandle) -> ApplianceRecord:
        if not self._owns(handle):
            raise ApplianceNotFoundError(handle.token)
        try:
            document = await self.db.find_one(self.collection_name, {"key": handle.key})
        except pymongo.errors.PyMongoError as e:
            raise StorageFailureError(f"Failed to load appliance: {e}") from e
        if document is None:
            raise ApplianceNotFoundError(handle.token)
        return self._to_entity(document)

    async def delete(self, handle: StorageHandle) -> None:
        """
        Delete the document addressed by ``handle``.

        Raises:
            ApplianceNotFoundError: If the handle is foreign or already deleted
            StorageFailureError: If the delete fails
        """
        if not self._owns(handle):
            raise ApplianceNotFoundError(handle.token)
        try:
            deleted = await self.db.delete_one(self.collection_name, {"key": handle.key})
        except pymongo.errors.PyMongoError as e:
            raise StorageFailureError(f"Failed to delete appliance: {e}") from e
        if not deleted:
            raise ApplianceNotFoundError(handle.token)
        logger.info("appliance.deleted", handle=handle.token)
