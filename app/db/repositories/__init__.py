"""Database repositories."""

from app.db.repositories.biometric import BiometricRepository
from app.db.repositories.training_session import TrainingSessionRepository

__all__ = [
    "BiometricRepository",
    "TrainingSessionRepository",
]
