"""Tests for BestTechnicianPolicy."""

import random

from techdispatch.domain.entities.assignment import Assignment
from techdispatch.domain.entities.prediction import PredictionRecord
from techdispatch.domain.policies.best_technician import (
    select_best_technicians,
    sorted_assignments,
)
from techdispatch.domain.value_objects.task_signature import TaskSignature


def _pred(tech: str, priority: int, duration: float, distance: int, probability: float) -> PredictionRecord:
    return PredictionRecord(
        technician_id=tech, priority=priority, duration=duration,
        distance_km=distance, probability=probability,
    )


def test_empty_input_gives_empty_mapping():
    assert select_best_technicians([]) == {}


def test_higher_probability_wins():
    """Scenario: B (0.9) beats A (0.6) for the same task."""
    best = select_best_technicians([
        _pred("A", 1, 2.0, 5, 0.6),
        _pred("B", 1, 2.0, 5, 0.9),
    ])
    assert list(best) == [TaskSignature.of(1, 2.0, 5)]
    assert best[TaskSignature.of(1, 2.0, 5)].technician_id == "B"


def test_higher_probability_wins_regardless_of_position():
    best = select_best_technicians([
        _pred("B", 1, 2.0, 5, 0.9),
        _pred("A", 1, 2.0, 5, 0.6),
    ])
    assert best[TaskSignature.of(1, 2.0, 5)].technician_id == "B"


def test_tie_keeps_first_seen():
    """Scenario: X then Y at 0.5 each → X."""
    best = select_best_technicians([
        _pred("X", 1, 2.0, 5, 0.5),
        _pred("Y", 1, 2.0, 5, 0.5),
    ])
    assert best[TaskSignature.of(1, 2.0, 5)].technician_id == "X"


def test_tie_after_a_replacement_keeps_the_replacement():
    best = select_best_technicians([
        _pred("A", 1, 2.0, 5, 0.2),
        _pred("B", 1, 2.0, 5, 0.7),
        _pred("C", 1, 2.0, 5, 0.7),
    ])
    assert best[TaskSignature.of(1, 2.0, 5)].technician_id == "B"


def test_one_assignment_per_signature_with_max_probability():
    rng = random.Random(42)
    signatures = [(p, d, k) for p in (1, 2) for d in (0.5, 1.25) for k in (3, 10)]
    preds = [
        _pred(f"T{i}", *rng.choice(signatures), round(rng.random(), 3))
        for i in range(200)
    ]

    best = select_best_technicians(preds)

    present = {TaskSignature.of(p.priority, p.duration, p.distance_km) for p in preds}
    assert set(best) == present
    for sig, assignment in best.items():
        group = [p for p in preds if TaskSignature.of(p.priority, p.duration, p.distance_km) == sig]
        top = max(p.probability for p in group)
        assert assignment.probability == top
        first_top = next(p for p in group if p.probability == top)
        assert assignment.technician_id == first_top.technician_id


def test_assignment_carries_winner_fields():
    best = select_best_technicians([_pred("Z", 4, 3.5, 20, 0.8)])
    assert best[TaskSignature.of(4, 3.5, 20)] == Assignment(
        technician_id="Z", priority=4, duration=3.5, distance_km=20,
    )


def test_out_of_range_probabilities_compared_as_is():
    best = select_best_technicians([
        _pred("A", 1, 1.0, 1, 1.5),
        _pred("B", 1, 1.0, 1, -0.2),
        _pred("C", 2, 1.0, 1, -0.5),
        _pred("D", 2, 1.0, 1, -0.1),
    ])
    assert best[TaskSignature.of(1, 1.0, 1)].technician_id == "A"
    assert best[TaskSignature.of(2, 1.0, 1)].technician_id == "D"


def test_precision_controls_grouping():
    preds = [
        _pred("A", 1, 1.001, 5, 0.4),
        _pred("B", 1, 1.004, 5, 0.6),
    ]
    assert len(select_best_technicians(preds, precision=2)) == 1
    assert len(select_best_technicians(preds, precision=None)) == 2


def test_sorted_assignments_orders_by_signature():
    best = select_best_technicians([
        _pred("C", 3, 1.0, 1, 0.5),
        _pred("A", 1, 2.0, 9, 0.5),
        _pred("B", 1, 2.0, 4, 0.5),
    ])
    assert [a.technician_id for a in sorted_assignments(best)] == ["B", "A", "C"]


def test_input_is_not_consumed_twice():
    """Works with a one-shot iterator."""
    best = select_best_technicians(iter([_pred("A", 1, 1.0, 1, 0.3)]))
    assert len(best) == 1


def test_rounding_matches_two_decimal_formatting():
    """1.015 formats as 1.01, so it is a different task from 1.02."""
    best = select_best_technicians([
        _pred("A", 1, 1.015, 5, 0.9),
        _pred("B", 1, 1.02, 5, 0.5),
    ])
    assert len(best) == 2
    assert best[TaskSignature.of(1, 1.015, 5)].technician_id == "A"
    assert best[TaskSignature.of(1, 1.02, 5)].technician_id == "B"
