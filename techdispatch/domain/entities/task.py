"""Task entity — a pending job submitted for technician assignment."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Task:
    priority: int
    duration: float  # hours
    distance_km: int
