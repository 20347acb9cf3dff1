"""
Training session schemas.

A session is logged once after the workout is completed and is immutable
afterwards, except for the late ``equipment_synced`` flag.  The training
stress score is derived on demand and never stored.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class DisciplineKind(str, Enum):
    """Enumerated workout disciplines."""

    ENDURANCE_RUN = "endurance_run"
    INDOOR_CYCLE = "indoor_cycle"
    ROW = "row"
    STRENGTH = "strength"
    OTHER = "other"


# Disciplines where an average power reading is meaningful for TSS.
POWER_TRACKABLE = frozenset({
    DisciplineKind.ENDURANCE_RUN,
    DisciplineKind.INDOOR_CYCLE,
    DisciplineKind.ROW,
})


class TrainingSessionBase(BaseModel):
    """Fields of a completed workout that feed the load model."""

    date: datetime.date = Field(
        ..., description="Calendar date the session was performed",
    )
    discipline: DisciplineKind = Field(
        ..., description="Workout discipline",
    )
    duration_minutes: float = Field(
        ..., gt=0.0, le=1440.0,
        description="Moving duration (minutes)",
    )
    distance_km: float = Field(
        0.0, ge=0.0,
        description="Distance covered (km)",
    )
    average_heart_rate: float = Field(
        0.0, ge=0.0,
        description="Average heart rate (bpm), 0 if not recorded",
    )
    subjective_effort: int = Field(
        ..., ge=1, le=10,
        description="Session RPE on a 1-10 scale",
    )
    average_power: Optional[float] = Field(
        None, ge=0.0,
        description="Average power (watts), if a power meter was used",
    )


class TrainingSessionCreate(TrainingSessionBase):
    """Schema for logging a training session."""

    notes: Optional[str] = Field(
        None, max_length=1000, description="Optional session notes"
    )


class EquipmentSyncUpdate(BaseModel):
    """Schema for the late equipment-sync flag."""

    equipment_synced: bool = True


class TrainingSessionResponse(TrainingSessionBase):
    """Schema for training sessions in API responses."""

    id: int
    notes: Optional[str]
    equipment_synced: bool
    training_stress_score: float = Field(
        ..., ge=0.0,
        description="Derived training stress score of this session",
    )
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True
