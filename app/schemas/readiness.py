"""
Readiness schemas.

The readiness score fuses two pillars into a single 0-100 value:

    biological = 0.4 × HRV + 0.4 × RHR + 0.2 × sleep
    mechanical = clamp(100 + 2 × (ctl - atl), 0, 100)
    final      = 0.6 × biological + 0.4 × mechanical

With no load history the final score is the biological score alone.  A
significant caloric deficit the day before (< -500 kcal) multiplies the
final score by 0.85.

Status labels are operational categories, not diagnoses:

- ``primed``       — score >= 65
- ``moderate``     — 40 <= score < 65
- ``compromised``  — score < 40 (mission override required)
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.biometrics import MorningBiometrics
from app.schemas.load import LoadProfile
from app.schemas.mission import MissionDirective


class Baselines(BaseModel):
    """Rolling biological baselines derived from past records."""

    hrv: float = Field(..., ge=0.0, description="Baseline HRV (ms)")
    resting_heart_rate: float = Field(..., ge=0.0, description="Baseline RHR (bpm)")
    sleep_hours: float = Field(..., ge=0.0, description="Baseline sleep (hours)")


class ReadinessAssessment(BaseModel):
    """Full breakdown of a readiness computation."""

    score: float = Field(..., ge=0.0, le=100.0, description="Final readiness 0-100")
    status: str = Field(..., description="One of: primed, moderate, compromised")
    requires_override: bool = Field(
        ..., description="True when the scheduled mission must be overridden",
    )

    hrv_score: float = Field(..., ge=0.0, le=100.0)
    rhr_score: float = Field(..., ge=0.0, le=100.0)
    sleep_score: float = Field(..., ge=0.0, le=100.0)
    biological_score: float = Field(..., ge=0.0, le=100.0)
    mechanical_score: Optional[float] = Field(
        None, ge=0.0, le=100.0,
        description="Load-balance score (None when there is no load history)",
    )
    energy_governor_applied: bool = Field(
        ..., description="True if yesterday's caloric deficit reduced the score",
    )

    baselines: Baselines
    load: LoadProfile
    context_note: str = Field(..., description="Human-readable interpretive note")


class SystemAlert(BaseModel):
    """Alert payload handed to the external notification collaborator."""

    identifier: str
    title: str
    body: str


class DailyBriefingRequest(BaseModel):
    """Inputs of a daily scoring pass."""

    date: Optional[datetime.date] = Field(
        None, description="Day being scored (defaults to today)",
    )
    biometrics: MorningBiometrics
    body_mass_kg: float = Field(0.0, ge=0.0)
    yesterday_energy_balance: float = Field(
        0.0, description="Yesterday's net energy balance (kcal, signed)",
    )
    scheduled: Optional[MissionDirective] = Field(
        None, description="Scheduled directive to prescribe against the new score",
    )


class DailyBriefingResponse(BaseModel):
    """Everything the dashboard needs after the morning scoring pass."""

    date: datetime.date
    readiness: ReadinessAssessment
    alert: Optional[SystemAlert] = None
    prescription_tier: Optional[str] = None
    directive: Optional[MissionDirective] = None
