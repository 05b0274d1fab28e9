"""Application configuration via Pydantic Settings.

NOTE: Every setting is mapped to an explicit environment variable name
(DATA_DIR, STORAGE_BACKEND, ...) to avoid silent misconfiguration.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Storage
    storage_backend: Literal["file", "sql"] = Field(default="file", validation_alias="STORAGE_BACKEND")
    data_dir: str = Field(default="data", validation_alias="DATA_DIR")
    database_url: str = Field(
        default="sqlite+aiosqlite:///./data/techdispatch.db",
        validation_alias="DATABASE_URL",
    )
    storage_timeout_seconds: float = Field(default=5.0, gt=0, validation_alias="STORAGE_TIMEOUT_SECONDS")

    # Store keys (file names for the file backend)
    tasks_key: str = Field(default="tasks.json", validation_alias="TASKS_KEY")
    assigned_tasks_key: str = Field(
        default="automl_training_data.json",
        validation_alias="ASSIGNED_TASKS_KEY",
    )
    predictions_key: str = Field(default="ml_prediction.json", validation_alias="PREDICTIONS_KEY")

    # Selector: decimal places of duration in the task signature, None = exact
    signature_duration_precision: int | None = Field(
        default=2,
        validation_alias="SIGNATURE_DURATION_PRECISION",
    )

    # App
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("signature_duration_precision", mode="before")
    @classmethod
    def _blank_means_exact(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("signature_duration_precision")
    @classmethod
    def _non_negative(cls, v: int | None) -> int | None:
        if v is not None and v < 0:
            raise ValueError("SIGNATURE_DURATION_PRECISION must be >= 0")
        return v


settings = Settings()
