"""
Biometric record service.

Business logic for daily biometric records.  A record can be created for
any day, but once a day is over its record is history and may no longer
be overwritten.
"""

import datetime
from typing import Optional

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from app.db.repositories.biometric import BiometricRepository
from app.models.biometric import BiometricLog
from app.schemas.biometrics import (
    BiometricRecord,
    BiometricRecordCreate,
    BiometricRecordResponse,
)


class BiometricService:
    """Service for biometric record business logic."""

    def __init__(self, session: Session):
        self.repository = BiometricRepository(session)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def upsert(
        self,
        date: datetime.date,
        data: BiometricRecordCreate,
        readiness_score: Optional[float] = None,
    ) -> tuple[BiometricRecordResponse, bool]:
        """Create or update the record of the given date.

        Returns:
            Tuple of (response, created) where created is True if new entry.

        Raises:
            HTTPException 409: the record exists and belongs to a past day.
        """
        existing = self.repository.get_by_date(date)

        if existing:
            if date < datetime.date.today():
                raise HTTPException(
                    status_code=status.HTTP_409_CONFLICT,
                    detail=f"Biometric record for {date} is historic and cannot be modified",
                )
            for key, value in data.model_dump().items():
                setattr(existing, key, value)
            if readiness_score is not None:
                existing.readiness_score = readiness_score
            existing.updated_at = datetime.datetime.now(datetime.timezone.utc)
            entry = self.repository.update(existing)
            return self._to_response(entry), False

        entry = BiometricLog(date=date, readiness_score=readiness_score or 0.0, **data.model_dump())
        entry = self.repository.create(entry)
        logger.info(f"Biometric record created for {date}")
        return self._to_response(entry), True

    def get_by_date(self, date: datetime.date) -> BiometricRecordResponse:
        entry = self.repository.get_by_date(date)
        if not entry:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No biometric record for {date}",
            )
        return self._to_response(entry)

    def get_range(
        self, start: datetime.date, end: datetime.date,
    ) -> list[BiometricRecordResponse]:
        entries = self.repository.get_by_date_range(start, end)
        return [self._to_response(e) for e in entries]

    def get_all(self, skip: int = 0, limit: int = 100) -> list[BiometricRecordResponse]:
        entries = self.repository.get_all(skip, limit)
        return [self._to_response(e) for e in entries]

    def get_history_before(
        self, date: datetime.date, limit: Optional[int] = None,
    ) -> list[BiometricRecord]:
        """Records strictly before *date*, as engine value objects."""
        entries = self.repository.get_before(date, limit)
        return [BiometricRecord.model_validate(e, from_attributes=True) for e in entries]

    def delete_by_date(self, date: datetime.date) -> None:
        entry = self.repository.get_by_date(date)
        if not entry:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No biometric record for {date}",
            )
        self.repository.delete(entry.id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _to_response(entry: BiometricLog) -> BiometricRecordResponse:
        return BiometricRecordResponse.model_validate(entry, from_attributes=True)
