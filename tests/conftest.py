from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Callable, Dict, Iterator, List, Sequence

import pytest

from appliance_identifier.domain.entities.appliance import ApplianceRecordDraft

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


BASE_CAPTURE_TIME = datetime(2025, 10, 13, 16, 0, 0, tzinfo=timezone.utc)


@pytest.fixture()
def make_draft() -> Callable[..., ApplianceRecordDraft]:
    def _make(
        name: str = "washing machine",
        category: str = "Laundry",
        wattage: float = 500.0,
        confidence: float = 0.88,
        minutes: int = 0,
        image_bytes: bytes | None = b"\xff\xd8jpeg",
    ) -> ApplianceRecordDraft:
        return ApplianceRecordDraft(
            name=name,
            category=category,
            estimated_wattage_watts=wattage,
            confidence=confidence,
            captured_at=BASE_CAPTURE_TIME + timedelta(minutes=minutes),
            image_bytes=image_bytes,
        )

    return _make


def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
    return all(document.get(key) == value for key, value in query.items())


class FakeCursor:
    def __init__(self, documents: Sequence[Dict[str, Any]]):
        self._documents = list(documents)

    def sort(self, keys: Any, direction: int | None = None) -> "FakeCursor":
        if isinstance(keys, str):
            keys = [(keys, direction or 1)]
        for field, field_direction in reversed(list(keys)):
            self._documents.sort(key=lambda doc: doc.get(field), reverse=field_direction < 0)
        return self

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        return iter(self._documents)


class FakeCollection:
    def __init__(self) -> None:
        self.documents: List[Dict[str, Any]] = []
        self.dropped_indexes: List[str] = []
        self.created_indexes: List[tuple[Any, ...]] = []

    def find_one(self, query: Dict[str, Any]) -> Dict[str, Any] | None:
        for document in self.documents:
            if _matches(document, query):
                return dict(document)
        return None

    def find(self, query: Dict[str, Any]) -> FakeCursor:
        return FakeCursor(
            [dict(doc) for doc in self.documents if _matches(doc, query)]
        )

    def insert_one(self, document: Dict[str, Any]) -> Any:
        self.documents.append(dict(document))
        return SimpleNamespace(acknowledged=True, inserted_id=document.get("id"))

    def delete_one(self, query: Dict[str, Any]) -> Any:
        for index, document in enumerate(self.documents):
            if _matches(document, query):
                del self.documents[index]
                return SimpleNamespace(deleted_count=1, acknowledged=True)
        return SimpleNamespace(deleted_count=0, acknowledged=True)

    def find_one_and_update(
        self,
        query: Dict[str, Any],
        update: Dict[str, Any],
        upsert: bool = False,
        return_document: Any = None,
    ) -> Dict[str, Any] | None:
        target = next((doc for doc in self.documents if _matches(doc, query)), None)
        if target is None:
            if not upsert:
                return None
            target = dict(query)
            self.documents.append(target)
        for field, amount in update.get("$inc", {}).items():
            target[field] = target.get(field, 0) + amount
        return dict(target)

    def drop_index(self, index_name: str) -> None:
        self.dropped_indexes.append(index_name)

    def create_index(self, keys: Any, name: str | None = None, **kwargs: Any) -> Any:
        self.created_indexes.append((keys, name, kwargs))
        return name or keys


class FakeDatabase:
    def __init__(self, name: str) -> None:
        self.name = name
        self.collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())


class FakeMongoClient:
    def __init__(self, uri: str, **kwargs: Any) -> None:
        self.uri = uri
        self.options = kwargs
        self.databases: Dict[str, FakeDatabase] = {}
        self.closed = False
        self.commands: List[str] = []
        self.admin = SimpleNamespace(command=self._command)

    def __getitem__(self, name: str) -> FakeDatabase:
        return self.databases.setdefault(name, FakeDatabase(name))

    def _command(self, command: str) -> Dict[str, Any]:
        self.commands.append(command)
        return {"ok": 1}

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def fake_mongo_client(monkeypatch) -> None:
    monkeypatch.setattr(
        "appliance_identifier.infrastructure.database.mongo_database.MongoClient",
        FakeMongoClient,
    )


@pytest.fixture()
def mongo_database(fake_mongo_client) -> Iterator[Any]:
    from appliance_identifier.infrastructure.database import MongoDatabase

    database = MongoDatabase("mongodb://localhost:27017", "appliance_test")
    yield database
    database.close()
