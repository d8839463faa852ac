from __future__ import annotations

import threading
from typing import cast

import pytest

from appliance_identifier.infrastructure.database import MongoDatabase
from tests.conftest import FakeCollection, FakeMongoClient


def test_client_is_timezone_aware(mongo_database) -> None:
    client = cast(FakeMongoClient, mongo_database.client)
    assert client.options["tz_aware"] is True
    assert mongo_database.name == "appliance_test"


@pytest.mark.asyncio
async def test_insert_sequenced_and_find(mongo_database) -> None:
    first = await mongo_database.insert_sequenced("items", {"id": "1"}, "items_seq")
    second = await mongo_database.insert_sequenced("items", {"id": "2"}, "items_seq")

    assert first["sequence"] == 1
    assert second["sequence"] == 2
    assert await mongo_database.find_one("items", {"id": "2"}) == second


@pytest.mark.asyncio
async def test_sequences_are_independent_per_name(mongo_database) -> None:
    await mongo_database.insert_sequenced("a", {"id": "1"}, "seq_a")
    other = await mongo_database.insert_sequenced("b", {"id": "1"}, "seq_b")

    assert other["sequence"] == 1


@pytest.mark.asyncio
async def test_insert_sequenced_does_not_mutate_input(mongo_database) -> None:
    document = {"id": "1"}
    await mongo_database.insert_sequenced("items", document, "items_seq")
    assert "sequence" not in document


@pytest.mark.asyncio
async def test_find_many_sorts_by_every_key(mongo_database) -> None:
    for doc_id, group in (("a", 1), ("b", 2), ("c", 1)):
        await mongo_database.insert_sequenced(
            "items", {"id": doc_id, "group": group}, "items_seq"
        )

    results = await mongo_database.find_many(
        "items", {}, sort=[("group", -1), ("sequence", -1)]
    )

    assert [doc["id"] for doc in results] == ["b", "c", "a"]


@pytest.mark.asyncio
async def test_delete_one_reports_whether_a_document_was_removed(mongo_database) -> None:
    await mongo_database.insert_sequenced("items", {"id": "1"}, "items_seq")

    assert await mongo_database.delete_one("items", {"id": "1"}) is True
    assert await mongo_database.delete_one("items", {"id": "1"}) is False


@pytest.mark.asyncio
async def test_operations_run_on_single_writer_thread(mongo_database) -> None:
    thread_names = set()

    def _record() -> None:
        thread_names.add(threading.current_thread().name)

    for _ in range(5):
        await mongo_database.run(_record)

    assert len(thread_names) == 1
    assert next(iter(thread_names)).startswith("mongo-writer")


@pytest.mark.asyncio
async def test_create_indexes_drops_and_creates(mongo_database) -> None:
    collection = cast(FakeCollection, mongo_database.db["appliances"])

    await mongo_database.create_indexes("appliances")

    assert collection.dropped_indexes == ["captured_at_sequence_idx"]
    names = {entry[1] for entry in collection.created_indexes}
    assert names == {"captured_at_sequence_idx", "key_idx"}


@pytest.mark.asyncio
async def test_ping_issues_admin_command(mongo_database) -> None:
    await mongo_database.ping()
    assert cast(FakeMongoClient, mongo_database.client).commands == ["ping"]


def test_close_closes_client(fake_mongo_client) -> None:
    database = MongoDatabase("mongodb://localhost:27017", "appliance_test")
    database.close()
    assert cast(FakeMongoClient, database.client).closed is True
