"""
Biometric record repository.

Handles database operations for BiometricLog model.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.biometric import BiometricLog


class BiometricRepository:
    """Repository for BiometricLog database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: BiometricLog) -> BiometricLog:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[BiometricLog]:
        return self.session.get(BiometricLog, entry_id)

    def get_by_date(self, date: datetime.date) -> Optional[BiometricLog]:
        """Get the single record of a specific date."""
        statement = select(BiometricLog).where(BiometricLog.date == date)
        return self.session.exec(statement).first()

    def get_by_date_range(
        self, start: datetime.date, end: datetime.date,
    ) -> list[BiometricLog]:
        """Get records within a date range (inclusive)."""
        statement = (
            select(BiometricLog)
            .where(
                BiometricLog.date >= start,
                BiometricLog.date <= end,
            )
            .order_by(BiometricLog.date)
        )
        return list(self.session.exec(statement).all())

    def get_before(
        self, date: datetime.date, limit: Optional[int] = None,
    ) -> list[BiometricLog]:
        """Get records strictly before *date*, newest first."""
        statement = (
            select(BiometricLog)
            .where(BiometricLog.date < date)
            .order_by(BiometricLog.date.desc())
        )
        if limit is not None:
            statement = statement.limit(limit)
        return list(self.session.exec(statement).all())

    def get_all(self, skip: int = 0, limit: int = 100) -> list[BiometricLog]:
        """Get all records with pagination, most recent first."""
        statement = (
            select(BiometricLog)
            .order_by(BiometricLog.date.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(self.session.exec(statement).all())

    def update(self, entry: BiometricLog) -> BiometricLog:
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
