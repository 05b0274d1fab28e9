"""PredictionRecord — one technician scored against one task signature."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PredictionRecord:
    technician_id: str
    priority: int
    duration: float
    distance_km: int
    probability: float
