"""Port interface for the latest prediction batch (read-only snapshot)."""

from abc import ABC, abstractmethod

from techdispatch.domain.entities.prediction import PredictionRecord


class PredictionRepository(ABC):
    @abstractmethod
    async def get_latest(self) -> list[PredictionRecord]:
        ...
