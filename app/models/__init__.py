"""SQLModel database models."""

from app.models.biometric import BiometricLog
from app.models.training_session import TrainingSession

__all__ = [
    "BiometricLog",
    "TrainingSession",
]
