"""ComputeAssignmentsUseCase — best technician per task from the latest predictions."""

from __future__ import annotations

import logging

from techdispatch.application.ports.prediction_repo import PredictionRepository
from techdispatch.domain.entities.assignment import Assignment
from techdispatch.domain.policies.best_technician import select_best_technicians
from techdispatch.domain.value_objects.task_signature import (
    DEFAULT_DURATION_PRECISION,
    TaskSignature,
)

logger = logging.getLogger(__name__)


class ComputeAssignmentsUseCase:
    """Recompute assignments from the current prediction snapshot on every call."""

    def __init__(
        self,
        prediction_repo: PredictionRepository,
        precision: int | None = DEFAULT_DURATION_PRECISION,
    ):
        self._predictions = prediction_repo
        self._precision = precision

    async def execute(self) -> dict[TaskSignature, Assignment]:
        predictions = await self._predictions.get_latest()
        best = select_best_technicians(predictions, precision=self._precision)
        logger.info(
            "Selected %d assignments from %d predictions",
            len(best), len(predictions),
        )
        return best
