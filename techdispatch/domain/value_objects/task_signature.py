"""TaskSignature value object — the structural identity of a task."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal

DEFAULT_DURATION_PRECISION = 2


@dataclass(frozen=True, order=True)
class TaskSignature:
    """Immutable (priority, duration, distance) key used to group predictions.

    Duration is held as a Decimal so equality never depends on float
    formatting. Build instances through :meth:`of` to apply the precision.
    """

    priority: int
    duration: Decimal
    distance_km: int

    @classmethod
    def of(
        cls,
        priority: int,
        duration: float,
        distance_km: int,
        precision: int | None = DEFAULT_DURATION_PRECISION,
    ) -> TaskSignature:
        """Build a signature, quantizing duration to *precision* decimal places.

        The exact binary value of the duration is rounded half-even, the same
        digits printf-style "%.2f" formatting yields, so 1.015 (stored as
        1.01499...) becomes 1.01. ``precision=None`` compares durations exactly.

        Raises:
            ValueError: if precision is negative.
        """
        return cls(
            priority=priority,
            duration=quantize_duration(duration, precision),
            distance_km=distance_km,
        )


def quantize_duration(duration: float, precision: int | None) -> Decimal:
    value = Decimal(duration)
    if precision is None:
        return value.normalize()
    if precision < 0:
        raise ValueError("Duration precision must be >= 0")
    return value.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_EVEN)
