"""Task endpoints — submit and list new tasks."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from techdispatch.adapters.serialization.codec import decode_task_submission, tasks_to_wire
from techdispatch.application.use_cases.manage_tasks import ListTasksUseCase, SubmitTaskUseCase
from techdispatch.infrastructure.api.dependencies import get_list_tasks_uc, get_submit_task_uc

router = APIRouter(tags=["tasks"])


@router.post("/addnewtask", response_class=PlainTextResponse, status_code=201)
async def add_new_task(
    request: Request,
    uc: SubmitTaskUseCase = Depends(get_submit_task_uc),
):
    """Append one task. The body is parsed here so bad input never reaches storage."""
    task = decode_task_submission(await request.body())
    await uc.execute(task)
    return "Added New Task"


@router.get("/viewallnewtasks")
async def view_all_new_tasks(uc: ListTasksUseCase = Depends(get_list_tasks_uc)):
    """List submitted tasks in submission order."""
    return tasks_to_wire(await uc.execute())
