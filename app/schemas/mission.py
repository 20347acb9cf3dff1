"""
Mission directive schemas.

A directive is a single day's prescribed or scheduled workout.  It is
produced by the external plan-ingestion collaborator and possibly
rewritten by the prescriber when readiness is low.
"""

from enum import Enum

from pydantic import BaseModel, Field

from app.schemas.training_session import DisciplineKind


class FuelTier(str, Enum):
    """Coarse nutrition-intensity bucket attached to a session."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    RACE = "race"


class MissionDirective(BaseModel):
    """A prescribed or scheduled workout instruction."""

    title: str = Field(..., description="Session title, e.g. 'TEMPO 6x800m'")
    discipline: DisciplineKind = Field(DisciplineKind.ENDURANCE_RUN)
    intensity_target: str = Field(
        "",
        description="Free-form intensity text, may embed power tokens such as '300W'",
    )
    fuel_tier: FuelTier = Field(FuelTier.MEDIUM)
    notes: str = Field("", description="Coach notes")
    is_altered: bool = Field(
        False,
        description="True if low readiness caused the system to rewrite the directive",
    )


class PrescriptionRequest(BaseModel):
    """Request body of the stand-alone prescription endpoint."""

    directive: MissionDirective
    readiness_score: float = Field(..., ge=0.0, le=100.0)


class PrescriptionResponse(BaseModel):
    """Outcome of a prescription pass."""

    tier: str = Field(..., description="One of: critical, moderate, nominal")
    directive: MissionDirective
