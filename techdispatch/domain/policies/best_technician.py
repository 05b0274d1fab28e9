"""BestTechnicianPolicy — pick the highest-scoring technician per task signature."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from techdispatch.domain.entities.assignment import Assignment
from techdispatch.domain.entities.prediction import PredictionRecord
from techdispatch.domain.value_objects.task_signature import (
    DEFAULT_DURATION_PRECISION,
    TaskSignature,
)


def select_best_technicians(
    predictions: Iterable[PredictionRecord],
    precision: int | None = DEFAULT_DURATION_PRECISION,
) -> dict[TaskSignature, Assignment]:
    """Reduce scored predictions to one winning assignment per task signature.

    Records are visited in input order. The first record seen for a signature
    becomes its candidate; a later record replaces the candidate only when its
    probability is strictly greater. Ties therefore keep the first-seen
    technician.

    Probabilities are compared as given: no range check, no clamping.

    Args:
        predictions: scored (technician, task) pairs from one batch.
        precision: decimal places of duration used to build the signature.

    Returns:
        Mapping of signature to winning assignment. Enumeration order is not
        meaningful; use :func:`sorted_assignments` for a stable order.
    """
    best: dict[TaskSignature, Assignment] = {}
    for p in predictions:
        key = TaskSignature.of(p.priority, p.duration, p.distance_km, precision)
        current = best.get(key)
        if current is None or p.probability > current.probability:
            best[key] = Assignment(
                technician_id=p.technician_id,
                priority=p.priority,
                duration=p.duration,
                distance_km=p.distance_km,
                probability=p.probability,
            )
    return best


def sorted_assignments(best: Mapping[TaskSignature, Assignment]) -> list[Assignment]:
    """Return the winners ordered by task signature."""
    return [best[key] for key in sorted(best)]
