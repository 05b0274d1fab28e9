"""Port interface for historical assignment records (read-only)."""

from abc import ABC, abstractmethod

from techdispatch.domain.entities.assigned_task import AssignedTask


class AssignedTaskRepository(ABC):
    @abstractmethod
    async def get_all(self) -> list[AssignedTask]:
        ...
