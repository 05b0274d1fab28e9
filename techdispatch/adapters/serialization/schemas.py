"""Pydantic wire schemas — JSON field names shared by the API and the stores."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from techdispatch.domain.entities.assigned_task import AssignedTask
from techdispatch.domain.entities.assignment import Assignment
from techdispatch.domain.entities.prediction import PredictionRecord
from techdispatch.domain.entities.task import Task


class TaskSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, strict=True)

    priority: int = Field(validation_alias="Task Priority", serialization_alias="Task Priority")
    duration: float = Field(validation_alias="Task Duration", serialization_alias="Task Duration")
    distance_km: int = Field(
        validation_alias="Distance to Task in km",
        serialization_alias="Distance to Task in km",
    )

    def to_domain(self) -> Task:
        return Task(priority=self.priority, duration=self.duration, distance_km=self.distance_km)

    @classmethod
    def from_domain(cls, task: Task) -> TaskSchema:
        return cls(priority=task.priority, duration=task.duration, distance_km=task.distance_km)


class AssignedTaskSchema(TaskSchema):
    technician_id: str = Field(validation_alias="Technician ID", serialization_alias="Technician ID")

    def to_domain(self) -> AssignedTask:
        return AssignedTask(
            technician_id=self.technician_id,
            priority=self.priority,
            duration=self.duration,
            distance_km=self.distance_km,
        )

    @classmethod
    def from_record(cls, record: AssignedTask | Assignment) -> AssignedTaskSchema:
        return cls(
            technician_id=record.technician_id,
            priority=record.priority,
            duration=record.duration,
            distance_km=record.distance_km,
        )

    def to_wire(self) -> dict:
        """Dump with "Technician ID" first, matching the stored files."""
        data = self.model_dump(by_alias=True)
        return {"Technician ID": data.pop("Technician ID"), **data}


class PredictionSchema(AssignedTaskSchema):
    probability: float

    def to_domain(self) -> PredictionRecord:
        return PredictionRecord(
            technician_id=self.technician_id,
            priority=self.priority,
            duration=self.duration,
            distance_km=self.distance_km,
            probability=self.probability,
        )
