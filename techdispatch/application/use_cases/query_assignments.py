"""FilterAssignedTasksUseCase — historical assignments of one technician."""

from __future__ import annotations

import logging

from techdispatch.application.ports.assigned_task_repo import AssignedTaskRepository
from techdispatch.domain.entities.assigned_task import AssignedTask
from techdispatch.domain.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class FilterAssignedTasksUseCase:
    """Look up the assignment ledger by technician identity."""

    def __init__(self, assigned_repo: AssignedTaskRepository):
        self._assigned = assigned_repo

    async def execute(self, technician_id: str | None) -> list[AssignedTask]:
        """Return every record of *technician_id*, in ledger order.

        An unknown technician yields an empty list. A missing or blank id is
        rejected before the store is touched; it never means "match all".

        Raises:
            InvalidArgumentError: technician_id is None, empty or blank.
        """
        if technician_id is None or not technician_id.strip():
            raise InvalidArgumentError("Missing 'technicianid' query parameter")

        records = await self._assigned.get_all()
        matched = [r for r in records if r.technician_id == technician_id]
        logger.info(
            "Technician %s: %d of %d assignment records",
            technician_id, len(matched), len(records),
        )
        return matched
