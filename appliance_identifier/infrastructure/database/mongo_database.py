"""
MongoDB Database - Infrastructure Layer

Thin asynchronous facade over a synchronous pymongo client. Every
operation is executed on one dedicated writer thread, which gives all
callers of a ``MongoDatabase`` instance a single total order of reads
and writes without any coordination on their side.
"""

import asyncio
import functools
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, TypeVar

import pymongo.errors
from pymongo import MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

T = TypeVar("T")

SortSpec = Sequence[Tuple[str, int]]


class MongoDatabase:
    """MongoDB database client with a single-writer execution lane."""

    COUNTERS_COLLECTION = "counters"

    def __init__(
        self,
        mongo_uri: str,
        db_name: str,
        server_selection_timeout_ms: int = 5000,
    ):
        """
        Initialize the MongoDB database client.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to use
            server_selection_timeout_ms: How long to wait for a server
        """
        self.client: MongoClient = MongoClient(
            mongo_uri,
            tz_aware=True,
            serverSelectionTimeoutMS=server_selection_timeout_ms,
        )
        self.db: Database = self.client[db_name]
        self._writer = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="mongo-writer"
        )

    @property
    def name(self) -> str:
        return self.db.name

    def get_collection(self, collection_name: str) -> Collection:
        return self.db[collection_name]

    async def run(self, operation: Callable[..., T], *args: Any) -> T:
        """Execute ``operation(*args)`` on the writer thread and await it."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            self._writer, functools.partial(operation, *args)
        )

    async def find_one(
        self, collection_name: str, query: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        return await self.run(self.db[collection_name].find_one, query)

    async def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort: Optional[SortSpec] = None,
    ) -> List[Dict[str, Any]]:
        """
        Find every document matching ``query``.

        Args:
            collection_name: Name of the collection
            query: Query to match documents
            sort: Ordered list of (field, direction) pairs

        Returns:
            The matching documents, materialized on the writer thread
        """

        def _find() -> List[Dict[str, Any]]:
            cursor = self.db[collection_name].find(query)
            if sort:
                cursor = cursor.sort(list(sort))
            return list(cursor)

        return await self.run(_find)

    async def insert_sequenced(
        self,
        collection_name: str,
        document: Dict[str, Any],
        sequence_name: str,
        sequence_field: str = "sequence",
    ) -> Dict[str, Any]:
        """
        Stamp ``document`` with the next value of a counter and insert it.

        Counter allocation and insert run as one unit of work on the
        writer thread. A failed insert leaves a gap in the sequence but
        never a partial document.

        Returns:
            The inserted document, including the sequence value

        Raises:
            pymongo.errors.PyMongoError: If the counter update or insert fails
        """

        def _insert() -> Dict[str, Any]:
            counter = self.db[self.COUNTERS_COLLECTION].find_one_and_update(
                {"_id": sequence_name},
                {"$inc": {"value": 1}},
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
            stamped = dict(document)
            stamped[sequence_field] = counter["value"]
            result = self.db[collection_name].insert_one(stamped)
            if not result.acknowledged:
                raise pymongo.errors.OperationFailure(
                    f"Insert into {collection_name} was not acknowledged"
                )
            return stamped

        return await self.run(_insert)

    async def delete_one(self, collection_name: str, query: Dict[str, Any]) -> bool:
        """
        Delete the first document matching ``query``.

        Returns:
            True if a document was removed, False if none matched
        """

        def _delete() -> bool:
            result = self.db[collection_name].delete_one(query)
            if not result.acknowledged:
                raise pymongo.errors.OperationFailure(
                    f"Delete from {collection_name} was not acknowledged"
                )
            return result.deleted_count > 0

        return await self.run(_delete)

    async def ping(self) -> None:
        """Round-trip to the server; raises if it is unreachable."""
        await asyncio.to_thread(self.client.admin.command, "ping")

    def _safe_drop_index(self, collection_name: str, index_name: str) -> None:
        try:
            self.db[collection_name].drop_index(index_name)
        except pymongo.errors.OperationFailure:
            # Index doesn't exist, nothing to do
            pass

    async def create_indexes(self, collection_name: str = "appliances") -> None:
        """Create the indexes the appliance collection relies on."""

        def _create() -> None:
            self._safe_drop_index(collection_name, "captured_at_sequence_idx")
            self.db[collection_name].create_index(
                [("captured_at", pymongo.DESCENDING), ("sequence", pymongo.DESCENDING)],
                name="captured_at_sequence_idx",
            )
            self.db[collection_name].create_index(
                "key", name="key_idx", unique=True
            )

        await self.run(_create)

    def close(self) -> None:
        """Drain the writer thread and close the connection."""
        self._writer.shutdown(wait=True)
        self.client.close()
