"""Business logic services."""

from app.services.biometric_service import BiometricService
from app.services.training_session_service import TrainingSessionService
from app.services.readiness_service import DailyReadinessService

__all__ = [
    "BiometricService",
    "TrainingSessionService",
    "DailyReadinessService",
]
