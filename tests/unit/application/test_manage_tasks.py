"""Tests for task submission and listing with in-memory stores."""

from __future__ import annotations

import asyncio
import json

import pytest

from techdispatch.adapters.persistence.repositories import StoreTaskRepository
from techdispatch.application.ports.blob_store import BlobStore
from techdispatch.application.use_cases.manage_tasks import ListTasksUseCase, SubmitTaskUseCase
from techdispatch.domain.entities.task import Task
from techdispatch.domain.exceptions import CorruptStoreError, NotFoundError, StorageIOError

KEY = "tasks.json"


class FailingWriteStore(BlobStore):
    def __init__(self, existing: bytes | None = None):
        self._existing = existing

    async def read_all(self, key):
        if self._existing is None:
            raise NotFoundError(key)
        return self._existing

    async def write_all(self, key, data):
        raise StorageIOError(key, "disk full")

    async def exists(self, key):
        return self._existing is not None

    async def delete(self, key):
        pass


def _use_cases(store: BlobStore) -> tuple[SubmitTaskUseCase, ListTasksUseCase]:
    repo = StoreTaskRepository(store, KEY)
    return SubmitTaskUseCase(task_repo=repo), ListTasksUseCase(task_repo=repo)


@pytest.mark.asyncio
async def test_add_on_empty_store_then_list(memory_store):
    submit, list_tasks = _use_cases(memory_store)

    await submit.execute(Task(priority=3, duration=1.5, distance_km=10))

    assert await list_tasks.execute() == [Task(priority=3, duration=1.5, distance_km=10)]


@pytest.mark.asyncio
async def test_list_before_any_submission_is_not_found(memory_store):
    _, list_tasks = _use_cases(memory_store)
    with pytest.raises(NotFoundError):
        await list_tasks.execute()


@pytest.mark.asyncio
async def test_list_of_empty_store_is_empty_not_missing(make_store):
    _, list_tasks = _use_cases(make_store({KEY: []}))
    assert await list_tasks.execute() == []


@pytest.mark.asyncio
async def test_sequential_adds_preserve_order(memory_store):
    submit, list_tasks = _use_cases(memory_store)
    tasks = [Task(priority=p, duration=p * 0.5, distance_km=p * 3) for p in range(1, 8)]

    for t in tasks:
        await submit.execute(t)

    assert await list_tasks.execute() == tasks


@pytest.mark.asyncio
async def test_add_appends_after_existing_records(make_store):
    store = make_store({KEY: [
        {"Task Priority": 9, "Task Duration": 4.0, "Distance to Task in km": 2},
    ]})
    submit, list_tasks = _use_cases(store)

    await submit.execute(Task(priority=1, duration=1.0, distance_km=1))

    assert await list_tasks.execute() == [
        Task(priority=9, duration=4.0, distance_km=2),
        Task(priority=1, duration=1.0, distance_km=1),
    ]


@pytest.mark.asyncio
async def test_concurrent_adds_lose_nothing(memory_store):
    submit, list_tasks = _use_cases(memory_store)
    tasks = [Task(priority=i, duration=1.0, distance_km=i) for i in range(50)]

    await asyncio.gather(*(submit.execute(t) for t in tasks))

    stored = await list_tasks.execute()
    assert len(stored) == 50
    assert sorted(stored, key=lambda t: t.priority) == tasks
    assert memory_store.writes == 50


@pytest.mark.asyncio
async def test_add_on_corrupt_store_fails_without_writing(make_store):
    store = make_store({KEY: b"{not json"})
    submit, _ = _use_cases(store)

    with pytest.raises(CorruptStoreError):
        await submit.execute(Task(priority=1, duration=1.0, distance_km=1))

    assert store.blobs[KEY] == b"{not json"
    assert store.writes == 0


@pytest.mark.asyncio
async def test_list_on_corrupt_store_raises(make_store):
    _, list_tasks = _use_cases(make_store({KEY: [{"Task Priority": "high"}]}))
    with pytest.raises(CorruptStoreError):
        await list_tasks.execute()


@pytest.mark.asyncio
async def test_write_failure_propagates():
    submit, _ = _use_cases(FailingWriteStore())
    with pytest.raises(StorageIOError, match="disk full"):
        await submit.execute(Task(priority=1, duration=1.0, distance_km=1))


@pytest.mark.asyncio
async def test_write_failure_releases_lock_for_next_add():
    store = FailingWriteStore()
    repo = StoreTaskRepository(store, KEY)
    for _ in range(2):
        with pytest.raises(StorageIOError):
            await asyncio.wait_for(repo.add(Task(priority=1, duration=1.0, distance_km=1)), 1)


@pytest.mark.asyncio
async def test_stored_document_uses_wire_names(memory_store):
    submit, _ = _use_cases(memory_store)
    await submit.execute(Task(priority=2, duration=0.75, distance_km=14))

    assert json.loads(memory_store.blobs[KEY]) == [
        {"Task Priority": 2, "Task Duration": 0.75, "Distance to Task in km": 14},
    ]
