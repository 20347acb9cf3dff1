"""
Biometric record database model.

Defines the biometric_records table for daily recovery tracking.
"""

import datetime
from typing import Optional

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel


class BiometricLog(SQLModel, table=True):
    """
    Daily biometric record.

    Stores HRV, resting heart rate, sleep, body mass and the readiness
    score computed for that day.  One entry per day (enforced by unique
    constraint).  Zero means "not measured".
    """
    __tablename__ = "biometric_records"
    __table_args__ = (
        UniqueConstraint("date", name="uq_biometric_date"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    date: datetime.date = Field(nullable=False, index=True)

    hrv: float = Field(default=0.0, nullable=False)
    resting_heart_rate: float = Field(default=0.0, nullable=False)
    sleep_hours: float = Field(default=0.0, nullable=False)
    body_mass_kg: float = Field(default=0.0, nullable=False)

    readiness_score: float = Field(default=0.0, nullable=False)

    # Timestamps
    created_at: datetime.datetime = Field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc),
        sa_type=DateTime(timezone=True),
    )
    updated_at: datetime.datetime = Field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc),
        sa_type=DateTime(timezone=True),
    )
