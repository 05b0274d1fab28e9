"""Task submission and listing use cases."""

from __future__ import annotations

import logging

from techdispatch.application.ports.task_repo import TaskRepository
from techdispatch.domain.entities.task import Task

logger = logging.getLogger(__name__)


class SubmitTaskUseCase:
    """Record a newly submitted task."""

    def __init__(self, task_repo: TaskRepository):
        self._tasks = task_repo

    async def execute(self, task: Task) -> Task:
        """Persist *task*; any storage error propagates to the caller."""
        await self._tasks.add(task)
        logger.info(
            "Task recorded: priority=%d, duration=%s h, distance=%d km",
            task.priority, task.duration, task.distance_km,
        )
        return task


class ListTasksUseCase:
    def __init__(self, task_repo: TaskRepository):
        self._tasks = task_repo

    async def execute(self) -> list[Task]:
        tasks = await self._tasks.list()
        logger.debug("Listing %d submitted tasks", len(tasks))
        return tasks
