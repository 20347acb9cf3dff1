"""
Daily biometric record schemas.

One record per calendar day holding the morning recovery signals and the
readiness score computed from them.  A zero value means "not measured",
never "measured as zero" — the baseline aggregator skips it.
"""

import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Value-object schemas
# ---------------------------------------------------------------------------

class MorningBiometrics(BaseModel):
    """Freshly acquired recovery signals for a single morning."""

    hrv: float = Field(
        0.0, ge=0.0,
        description="Heart rate variability (ms), 0 if not measured",
    )
    resting_heart_rate: float = Field(
        0.0, ge=0.0,
        description="Resting heart rate (bpm), 0 if not measured",
    )
    sleep_hours: float = Field(
        0.0, ge=0.0, le=24.0,
        description="Sleep duration of the previous night (hours), 0 if not measured",
    )


class BiometricRecord(MorningBiometrics):
    """A complete daily biometric record as consumed by the engine."""

    date: datetime.date = Field(
        ...,
        description="Calendar date this record belongs to (YYYY-MM-DD)",
    )
    body_mass_kg: float = Field(
        0.0, ge=0.0,
        description="Morning body mass (kg), 0 if not measured",
    )
    readiness_score: float = Field(
        0.0, ge=0.0, le=100.0,
        description="Readiness score computed for this day (0-100)",
    )


# ---------------------------------------------------------------------------
# Entity schemas (Create / Response)
# ---------------------------------------------------------------------------

class BiometricRecordCreate(MorningBiometrics):
    """Schema for creating or updating the record of a given date."""

    body_mass_kg: float = Field(
        0.0, ge=0.0,
        description="Morning body mass (kg), 0 if not measured",
    )


class BiometricRecordResponse(BiometricRecord):
    """Schema for biometric records in API responses."""

    id: int
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True
