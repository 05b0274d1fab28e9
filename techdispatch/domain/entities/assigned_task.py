"""AssignedTask entity — a historical technician-to-task record."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AssignedTask:
    technician_id: str
    priority: int
    duration: float
    distance_km: int
