"""Pydantic schemas for request/response validation."""

from app.schemas.biometrics import (
    BiometricRecord,
    BiometricRecordCreate,
    BiometricRecordResponse,
    MorningBiometrics,
)
from app.schemas.training_session import (
    DisciplineKind,
    EquipmentSyncUpdate,
    TrainingSessionBase,
    TrainingSessionCreate,
    TrainingSessionResponse,
)
from app.schemas.load import LoadProfile, LoadProfileResponse
from app.schemas.mission import (
    FuelTier,
    MissionDirective,
    PrescriptionRequest,
    PrescriptionResponse,
)
from app.schemas.readiness import (
    Baselines,
    DailyBriefingRequest,
    DailyBriefingResponse,
    ReadinessAssessment,
    SystemAlert,
)

__all__ = [
    "BiometricRecord",
    "BiometricRecordCreate",
    "BiometricRecordResponse",
    "MorningBiometrics",
    "DisciplineKind",
    "EquipmentSyncUpdate",
    "TrainingSessionBase",
    "TrainingSessionCreate",
    "TrainingSessionResponse",
    "LoadProfile",
    "LoadProfileResponse",
    "FuelTier",
    "MissionDirective",
    "PrescriptionRequest",
    "PrescriptionResponse",
    "Baselines",
    "DailyBriefingRequest",
    "DailyBriefingResponse",
    "ReadinessAssessment",
    "SystemAlert",
]
