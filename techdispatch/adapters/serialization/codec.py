"""JSON codec — bytes in the stores and request bodies to domain entities."""

from __future__ import annotations

import json
import logging

from pydantic import TypeAdapter, ValidationError

from techdispatch.adapters.serialization.schemas import (
    AssignedTaskSchema,
    PredictionSchema,
    TaskSchema,
)
from techdispatch.domain.entities.assigned_task import AssignedTask
from techdispatch.domain.entities.assignment import Assignment
from techdispatch.domain.entities.prediction import PredictionRecord
from techdispatch.domain.entities.task import Task
from techdispatch.domain.exceptions import CorruptStoreError, InvalidInputError

logger = logging.getLogger(__name__)

# A stored "null" document is an empty array written by an older writer
_task_list = TypeAdapter(list[TaskSchema] | None)
_assigned_list = TypeAdapter(list[AssignedTaskSchema] | None)
_prediction_list = TypeAdapter(list[PredictionSchema] | None)


def _describe(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "document"
    return f"{location}: {first['msg']} ({exc.error_count()} error(s))"


def _decode_list(adapter: TypeAdapter, key: str, raw: bytes) -> list:
    try:
        items = adapter.validate_json(raw, strict=True)
    except ValidationError as e:
        reason = _describe(e)
        logger.error("Cannot parse store %s: %s", key, reason)
        raise CorruptStoreError(key, reason) from e
    return [item.to_domain() for item in items or []]


def decode_task_submission(raw: bytes) -> Task:
    """Parse one task from a request body.

    Raises:
        InvalidInputError: body is empty or not a valid task object.
    """
    if not raw or not raw.strip():
        raise InvalidInputError("Request body required")
    try:
        schema = TaskSchema.model_validate_json(raw, strict=True)
    except ValidationError as e:
        raise InvalidInputError(f"Invalid task: {_describe(e)}") from e
    return schema.to_domain()


def decode_tasks(key: str, raw: bytes) -> list[Task]:
    return _decode_list(_task_list, key, raw)


def decode_assigned_tasks(key: str, raw: bytes) -> list[AssignedTask]:
    return _decode_list(_assigned_list, key, raw)


def decode_predictions(key: str, raw: bytes) -> list[PredictionRecord]:
    return _decode_list(_prediction_list, key, raw)


def _dump(items: list[dict]) -> bytes:
    return json.dumps(items, indent=2, ensure_ascii=False).encode("utf-8")


def encode_tasks(tasks: list[Task]) -> bytes:
    return _dump(tasks_to_wire(tasks))


def tasks_to_wire(tasks: list[Task]) -> list[dict]:
    return [TaskSchema.from_domain(t).model_dump(by_alias=True) for t in tasks]


def records_to_wire(records: list[AssignedTask] | list[Assignment]) -> list[dict]:
    """Assigned-task shape for ledger records and selector winners alike."""
    return [AssignedTaskSchema.from_record(r).to_wire() for r in records]
