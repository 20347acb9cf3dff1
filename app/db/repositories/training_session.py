"""
Training session repository.

Handles database operations for :class:`TrainingSession`.
The load model always reads the full history up to the scored day.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.training_session import TrainingSession


class TrainingSessionRepository:
    """Repository for TrainingSession database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: TrainingSession) -> TrainingSession:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[TrainingSession]:
        return self.session.get(TrainingSession, entry_id)

    def get_by_date_range(self, start: datetime.date, end: datetime.date, ) -> list[TrainingSession]:
        statement = (select(TrainingSession).where(TrainingSession.date >= start,
                                                   TrainingSession.date <= end, ).order_by(TrainingSession.date,
                                                                                           TrainingSession.id))
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # History queries for the load model
    # ------------------------------------------------------------------

    def get_history_until(self, end: datetime.date) -> list[TrainingSession]:
        """All sessions on or before *end*, oldest first."""
        statement = (select(TrainingSession).where(TrainingSession.date <= end, ).order_by(TrainingSession.date,
                                                                                          TrainingSession.id))
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update(self, entry: TrainingSession) -> TrainingSession:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, entry_id: int) -> bool:
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False
