"""Assignment entity — the winning technician for one task signature."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Assignment:
    technician_id: str
    priority: int
    duration: float
    distance_km: int
    # Score of the winning prediction; never part of the API payload
    probability: float = field(default=0.0, compare=False)
