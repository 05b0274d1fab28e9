"""Repository implementations over a BlobStore holding JSON arrays."""

from __future__ import annotations

import asyncio
import logging

from techdispatch.adapters.serialization.codec import (
    decode_assigned_tasks,
    decode_predictions,
    decode_tasks,
    encode_tasks,
)
from techdispatch.application.ports.assigned_task_repo import AssignedTaskRepository
from techdispatch.application.ports.blob_store import BlobStore
from techdispatch.application.ports.prediction_repo import PredictionRepository
from techdispatch.application.ports.task_repo import TaskRepository
from techdispatch.domain.entities.assigned_task import AssignedTask
from techdispatch.domain.entities.prediction import PredictionRecord
from techdispatch.domain.entities.task import Task
from techdispatch.domain.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class StoreTaskRepository(TaskRepository):
    """Append-only task list kept as a single JSON document.

    Every ``add`` is a full read-modify-write of the document. The instance
    lock serializes those cycles, so share one instance per store key.
    """

    def __init__(self, store: BlobStore, key: str):
        self._store = store
        self._key = key
        self._lock = asyncio.Lock()

    async def add(self, task: Task) -> None:
        async with self._lock:
            try:
                raw = await self._store.read_all(self._key)
            except NotFoundError:
                logger.info("Task store %s does not exist yet, starting a new one", self._key)
                tasks: list[Task] = []
            else:
                tasks = decode_tasks(self._key, raw)
            tasks.append(task)
            await self._store.write_all(self._key, encode_tasks(tasks))

    async def list(self) -> list[Task]:
        raw = await self._store.read_all(self._key)
        return decode_tasks(self._key, raw)


class StoreAssignedTaskRepository(AssignedTaskRepository):
    def __init__(self, store: BlobStore, key: str):
        self._store = store
        self._key = key

    async def get_all(self) -> list[AssignedTask]:
        raw = await self._store.read_all(self._key)
        return decode_assigned_tasks(self._key, raw)


class StorePredictionRepository(PredictionRepository):
    def __init__(self, store: BlobStore, key: str):
        self._store = store
        self._key = key

    async def get_latest(self) -> list[PredictionRecord]:
        raw = await self._store.read_all(self._key)
        return decode_predictions(self._key, raw)
