"""Port interface for submitted task persistence."""

from abc import ABC, abstractmethod

from techdispatch.domain.entities.task import Task


class TaskRepository(ABC):
    @abstractmethod
    async def add(self, task: Task) -> None:
        """Append a task. Concurrent calls must never lose each other's task."""
        ...

    @abstractmethod
    async def list(self) -> list[Task]:
        """Return tasks in submission order.

        Raises NotFoundError when nothing was ever submitted.
        """
        ...
