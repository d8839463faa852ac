from __future__ import annotations

import asyncio
from typing import cast

import pymongo.errors
import pytest

from appliance_identifier.domain.entities.appliance import StorageHandle
from appliance_identifier.domain.entities.errors import (
    ApplianceNotFoundError,
    StorageFailureError,
)
from appliance_identifier.infrastructure.repositories import MongoApplianceRepository
from tests.conftest import FakeCollection


@pytest.fixture()
def repository(mongo_database) -> MongoApplianceRepository:
    return MongoApplianceRepository(mongo_database)


def _collection(repository: MongoApplianceRepository) -> FakeCollection:
    return cast(FakeCollection, repository.db.get_collection(repository.collection_name))


def test_store_id_names_database_and_collection(repository) -> None:
    assert repository.store_id == "appliance_test.appliances"


@pytest.mark.asyncio
async def test_save_then_list_round_trips_record(repository, make_draft) -> None:
    saved = await repository.save(make_draft(image_bytes=b"jpeg"))

    listed = await repository.list_all()

    assert listed == [saved]
    assert listed[0].image_bytes == b"jpeg"
    assert listed[0].storage_handle.store_id == repository.store_id


@pytest.mark.asyncio
async def test_save_stamps_increasing_sequence(repository, make_draft) -> None:
    await repository.save(make_draft(name="lamp"))
    await repository.save(make_draft(name="fan"))

    sequences = [doc["sequence"] for doc in _collection(repository).documents]
    assert sequences == [1, 2]


@pytest.mark.asyncio
async def test_list_orders_by_capture_time_then_insertion(repository, make_draft) -> None:
    oldest = await repository.save(make_draft(name="lamp", minutes=0))
    newest = await repository.save(make_draft(name="fan", minutes=10))
    tie_first = await repository.save(make_draft(name="oven", minutes=5))
    tie_second = await repository.save(make_draft(name="toaster", minutes=5))

    listed = await repository.list_all()

    assert [record.id for record in listed] == [
        newest.id,
        tie_second.id,
        tie_first.id,
        oldest.id,
    ]


@pytest.mark.asyncio
async def test_record_without_image_round_trips(repository, make_draft) -> None:
    saved = await repository.save(make_draft(image_bytes=None))

    found = await repository.find_by_handle(saved.storage_handle)

    assert found.image_bytes is None
    assert found.has_image is False


@pytest.mark.asyncio
async def test_delete_then_second_delete_is_not_found(repository, make_draft) -> None:
    saved = await repository.save(make_draft())

    await repository.delete(saved.storage_handle)

    assert await repository.list_all() == []
    with pytest.raises(ApplianceNotFoundError):
        await repository.delete(saved.storage_handle)


@pytest.mark.asyncio
async def test_foreign_handle_is_not_found(repository, make_draft) -> None:
    saved = await repository.save(make_draft())
    foreign = StorageHandle(store_id="other.appliances", key=saved.storage_handle.key)

    with pytest.raises(ApplianceNotFoundError):
        await repository.delete(foreign)
    with pytest.raises(ApplianceNotFoundError):
        await repository.find_by_handle(foreign)

    assert len(await repository.list_all()) == 1


@pytest.mark.asyncio
async def test_concurrent_saves_are_all_listed(repository, make_draft) -> None:
    saved = await asyncio.gather(
        *(repository.save(make_draft(name=f"lamp {i}")) for i in range(20))
    )

    listed = await repository.list_all()

    assert {record.id for record in listed} == {record.id for record in saved}
    sequences = sorted(doc["sequence"] for doc in _collection(repository).documents)
    assert sequences == list(range(1, 21))


@pytest.mark.asyncio
async def test_driver_failure_is_reported_as_storage_failure(
    repository, make_draft, monkeypatch
) -> None:
    def _fail(*args, **kwargs):
        raise pymongo.errors.ServerSelectionTimeoutError("no servers")

    monkeypatch.setattr(_collection(repository), "insert_one", _fail)

    with pytest.raises(StorageFailureError):
        await repository.save(make_draft())


@pytest.mark.asyncio
async def test_list_failure_is_reported_as_storage_failure(
    repository, monkeypatch
) -> None:
    def _fail(*args, **kwargs):
        raise pymongo.errors.AutoReconnect("connection lost")

    monkeypatch.setattr(_collection(repository), "find", _fail)

    with pytest.raises(StorageFailureError):
        await repository.list_all()
