"""
Training session service.

Logs completed workouts and exposes them with their derived training
stress score.  Sessions are immutable once logged; only the late
equipment-sync flag can be flipped.
"""

import datetime

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from app.db.repositories.training_session import TrainingSessionRepository
from app.engine.load import compute_training_stress
from app.models.training_session import TrainingSession
from app.schemas.training_session import (TrainingSessionBase, TrainingSessionCreate, TrainingSessionResponse, )


class TrainingSessionService:
    """Service for training session business logic."""

    def __init__(self, session: Session):
        self.repository = TrainingSessionRepository(session)

    def create(self, data: TrainingSessionCreate) -> TrainingSessionResponse:
        entry = TrainingSession(date=data.date, discipline=data.discipline.value,
                                duration_minutes=data.duration_minutes, distance_km=data.distance_km,
                                average_heart_rate=data.average_heart_rate,
                                subjective_effort=data.subjective_effort, average_power=data.average_power,
                                notes=data.notes, )
        entry = self.repository.create(entry)
        response = self._to_response(entry)
        logger.info(f"Session {entry.id} logged ({entry.discipline}, {entry.date}, "
                    f"TSS {response.training_stress_score:.1f})")
        return response

    def get_by_id(self, entry_id: int) -> TrainingSessionResponse:
        entry = self._get_entry(entry_id)
        return self._to_response(entry)

    def get_range(self, start: datetime.date, end: datetime.date, ) -> list[TrainingSessionResponse]:
        entries = self.repository.get_by_date_range(start, end)
        return [self._to_response(e) for e in entries]

    def get_history_until(self, end: datetime.date) -> list[TrainingSessionBase]:
        """Full session history up to *end*, as engine value objects."""
        entries = self.repository.get_history_until(end)
        return [TrainingSessionBase.model_validate(e, from_attributes=True) for e in entries]

    def set_equipment_synced(self, entry_id: int, synced: bool) -> TrainingSessionResponse:
        entry = self._get_entry(entry_id)
        entry.equipment_synced = synced
        entry.updated_at = datetime.datetime.now(datetime.timezone.utc)
        entry = self.repository.update(entry)
        return self._to_response(entry)

    def delete(self, entry_id: int) -> None:
        self._get_entry(entry_id)
        self.repository.delete(entry_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_entry(self, entry_id: int) -> TrainingSession:
        entry = self.repository.get_by_id(entry_id)
        if not entry:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Training session not found", )
        return entry

    @staticmethod
    def _to_response(entry: TrainingSession) -> TrainingSessionResponse:
        base = TrainingSessionBase.model_validate(entry, from_attributes=True)
        return TrainingSessionResponse(**base.model_dump(), id=entry.id, notes=entry.notes,
                                       equipment_synced=entry.equipment_synced,
                                       training_stress_score=compute_training_stress(base),
                                       created_at=entry.created_at, updated_at=entry.updated_at, )
