from __future__ import annotations

import asyncio

import pytest

from appliance_identifier.domain.entities.appliance import StorageHandle
from appliance_identifier.domain.entities.errors import ApplianceNotFoundError
from appliance_identifier.infrastructure.repositories import InMemoryApplianceRepository


@pytest.mark.asyncio
async def test_save_then_list_returns_equal_record(make_draft) -> None:
    repository = InMemoryApplianceRepository()
    draft = make_draft()

    saved = await repository.save(draft)
    listed = await repository.list_all()

    assert listed == [saved]
    assert saved.name == draft.name
    assert saved.storage_handle.store_id == repository.store_id


@pytest.mark.asyncio
async def test_list_orders_by_capture_time_descending(make_draft) -> None:
    repository = InMemoryApplianceRepository()
    older = await repository.save(make_draft(name="lamp", minutes=0))
    newer = await repository.save(make_draft(name="fan", minutes=5))

    assert [record.id for record in await repository.list_all()] == [newer.id, older.id]


@pytest.mark.asyncio
async def test_equal_capture_times_list_latest_insert_first(make_draft) -> None:
    repository = InMemoryApplianceRepository()
    first = await repository.save(make_draft(name="lamp"))
    second = await repository.save(make_draft(name="fan"))

    assert [record.id for record in await repository.list_all()] == [second.id, first.id]


@pytest.mark.asyncio
async def test_empty_store_lists_nothing() -> None:
    assert await InMemoryApplianceRepository().list_all() == []


@pytest.mark.asyncio
async def test_delete_removes_record(make_draft) -> None:
    repository = InMemoryApplianceRepository()
    kept = await repository.save(make_draft(name="lamp"))
    removed = await repository.save(make_draft(name="fan"))

    await repository.delete(removed.storage_handle)

    assert await repository.list_all() == [kept]


@pytest.mark.asyncio
async def test_second_delete_reports_not_found(make_draft) -> None:
    repository = InMemoryApplianceRepository()
    saved = await repository.save(make_draft())
    await repository.delete(saved.storage_handle)

    with pytest.raises(ApplianceNotFoundError):
        await repository.delete(saved.storage_handle)


@pytest.mark.asyncio
async def test_handle_from_another_store_is_not_found(make_draft) -> None:
    first = InMemoryApplianceRepository()
    second = InMemoryApplianceRepository()
    saved = await first.save(make_draft())

    with pytest.raises(ApplianceNotFoundError):
        await second.delete(saved.storage_handle)
    with pytest.raises(ApplianceNotFoundError):
        await second.find_by_handle(saved.storage_handle)

    assert await first.list_all() == [saved]


@pytest.mark.asyncio
async def test_forged_key_is_not_found(make_draft) -> None:
    repository = InMemoryApplianceRepository()
    await repository.save(make_draft())

    with pytest.raises(ApplianceNotFoundError):
        await repository.delete(StorageHandle(store_id=repository.store_id, key="nope"))


@pytest.mark.asyncio
async def test_find_by_handle_returns_stored_image(make_draft) -> None:
    repository = InMemoryApplianceRepository()
    saved = await repository.save(make_draft(image_bytes=b"jpeg-bytes"))

    found = await repository.find_by_handle(saved.storage_handle)

    assert found == saved
    assert found.image_bytes == b"jpeg-bytes"


@pytest.mark.asyncio
async def test_concurrent_saves_are_all_listed(make_draft) -> None:
    repository = InMemoryApplianceRepository()

    saved = await asyncio.gather(
        *(repository.save(make_draft(name=f"lamp {i}")) for i in range(25))
    )
    listed = await repository.list_all()

    assert len(listed) == 25
    assert {record.id for record in listed} == {record.id for record in saved}
    assert len({record.storage_handle for record in listed}) == 25


@pytest.mark.asyncio
async def test_listing_while_deleting_sees_consistent_snapshots(make_draft) -> None:
    repository = InMemoryApplianceRepository()
    records = [await repository.save(make_draft(name=f"fan {i}")) for i in range(10)]

    results = await asyncio.gather(
        *(repository.delete(record.storage_handle) for record in records[:5]),
        repository.list_all(),
    )

    snapshot = results[-1]
    assert len(snapshot) in range(5, 11)
    assert len(await repository.list_all()) == 5
