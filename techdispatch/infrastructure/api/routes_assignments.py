"""Assignment endpoints — technician history and best-technician selection."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from techdispatch.adapters.serialization.codec import records_to_wire
from techdispatch.application.use_cases.assign_technicians import ComputeAssignmentsUseCase
from techdispatch.application.use_cases.query_assignments import FilterAssignedTasksUseCase
from techdispatch.domain.policies.best_technician import sorted_assignments
from techdispatch.infrastructure.api.dependencies import (
    get_compute_assignments_uc,
    get_filter_assigned_uc,
)

router = APIRouter(tags=["assignments"])


@router.get("/viewassignmentbytech")
async def view_assignments_by_technician(
    technicianid: str | None = Query(default=None),
    uc: FilterAssignedTasksUseCase = Depends(get_filter_assigned_uc),
):
    """Historical assignments of one technician ([] when there are none)."""
    return records_to_wire(await uc.execute(technicianid))


@router.get("/assigntasktotech")
async def assign_tasks_to_technicians(
    uc: ComputeAssignmentsUseCase = Depends(get_compute_assignments_uc),
):
    """Best technician per task signature, ordered by signature."""
    best = await uc.execute()
    return records_to_wire(sorted_assignments(best))
