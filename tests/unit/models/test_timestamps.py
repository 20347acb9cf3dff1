"""Timestamp defaults of the table models."""

import datetime

from app.models.biometric import BiometricLog
from app.models.training_session import TrainingSession


class TestTimestamps:
    def test_biometric_timestamps_are_timezone_aware(self):
        entry = BiometricLog(date=datetime.date(2026, 3, 1))
        assert entry.created_at.tzinfo is not None
        assert entry.updated_at.utcoffset() == datetime.timedelta(0)

    def test_session_timestamps_are_timezone_aware(self):
        entry = TrainingSession(
            date=datetime.date(2026, 3, 1),
            discipline="other",
            duration_minutes=45.0,
            subjective_effort=5,
        )
        assert entry.created_at.tzinfo is not None
        assert entry.updated_at.utcoffset() == datetime.timedelta(0)
