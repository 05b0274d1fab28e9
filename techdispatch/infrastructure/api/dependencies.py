"""FastAPI dependency injection — wires storage adapters into use cases."""

from __future__ import annotations

import logging

from fastapi import Depends

from techdispatch.adapters.persistence.database import async_session_factory
from techdispatch.adapters.persistence.repositories import (
    StoreAssignedTaskRepository,
    StorePredictionRepository,
    StoreTaskRepository,
)
from techdispatch.adapters.storage.file_store import FileBlobStore
from techdispatch.adapters.storage.sql_store import SqlBlobStore
from techdispatch.application.ports.assigned_task_repo import AssignedTaskRepository
from techdispatch.application.ports.blob_store import BlobStore
from techdispatch.application.ports.prediction_repo import PredictionRepository
from techdispatch.application.ports.task_repo import TaskRepository
from techdispatch.application.use_cases.assign_technicians import ComputeAssignmentsUseCase
from techdispatch.application.use_cases.manage_tasks import ListTasksUseCase, SubmitTaskUseCase
from techdispatch.application.use_cases.query_assignments import FilterAssignedTasksUseCase
from techdispatch.config import settings

logger = logging.getLogger(__name__)


def build_blob_store() -> BlobStore:
    if settings.storage_backend == "sql":
        logger.info("Using SQL blob store")
        return SqlBlobStore(async_session_factory, timeout=settings.storage_timeout_seconds)
    logger.info("Using file blob store in %s", settings.data_dir)
    return FileBlobStore(settings.data_dir, timeout=settings.storage_timeout_seconds)


# Process-wide singletons: the task repository lock only serializes adds
# that go through this one instance.
_blob_store = build_blob_store()
_task_repo = StoreTaskRepository(_blob_store, settings.tasks_key)


def get_blob_store() -> BlobStore:
    return _blob_store


def get_task_repo() -> TaskRepository:
    return _task_repo


def get_assigned_task_repo(store: BlobStore = Depends(get_blob_store)) -> AssignedTaskRepository:
    return StoreAssignedTaskRepository(store, settings.assigned_tasks_key)


def get_prediction_repo(store: BlobStore = Depends(get_blob_store)) -> PredictionRepository:
    return StorePredictionRepository(store, settings.predictions_key)


def get_submit_task_uc(repo: TaskRepository = Depends(get_task_repo)) -> SubmitTaskUseCase:
    return SubmitTaskUseCase(task_repo=repo)


def get_list_tasks_uc(repo: TaskRepository = Depends(get_task_repo)) -> ListTasksUseCase:
    return ListTasksUseCase(task_repo=repo)


def get_filter_assigned_uc(
    repo: AssignedTaskRepository = Depends(get_assigned_task_repo),
) -> FilterAssignedTasksUseCase:
    return FilterAssignedTasksUseCase(assigned_repo=repo)


def get_compute_assignments_uc(
    repo: PredictionRepository = Depends(get_prediction_repo),
) -> ComputeAssignmentsUseCase:
    return ComputeAssignmentsUseCase(
        prediction_repo=repo,
        precision=settings.signature_duration_precision,
    )
