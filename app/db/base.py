"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.biometric import BiometricLog  # noqa: F401
from app.models.training_session import TrainingSession  # noqa: F401
