"""
Training session database model.

Stores completed workouts.  The training stress score is not stored: it
is derived from these columns whenever the load is reconstructed.
"""

import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


class TrainingSession(SQLModel, table=True):
    """A single completed training session.

    Immutable once logged, except for ``equipment_synced`` which is set
    when the equipment sync arrives late.
    """

    __tablename__ = "training_sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    date: datetime.date = Field(nullable=False, index=True)
    discipline: str = Field(nullable=False, max_length=32, index=True)

    duration_minutes: float = Field(nullable=False)
    distance_km: float = Field(default=0.0, nullable=False)
    average_heart_rate: float = Field(default=0.0, nullable=False)
    subjective_effort: int = Field(nullable=False)
    average_power: Optional[float] = Field(default=None)

    notes: Optional[str] = Field(default=None, max_length=1000)
    equipment_synced: bool = Field(default=False, nullable=False)

    # Timestamps
    created_at: datetime.datetime = Field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc),
        sa_type=DateTime(timezone=True),
    )
    updated_at: datetime.datetime = Field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc),
        sa_type=DateTime(timezone=True),
    )
