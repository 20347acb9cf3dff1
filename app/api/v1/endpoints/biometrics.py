"""
Biometric record endpoints.

Daily record CRUD with date-based upsert.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.biometrics import BiometricRecordCreate, BiometricRecordResponse
from app.services.biometric_service import BiometricService

router = APIRouter()


@router.put("/{date}", summary="Create or update the biometric record of a date.",
            response_model=BiometricRecordResponse, )
def upsert_biometrics(date: datetime.date, data: BiometricRecordCreate, response: Response,
                      db: Session = Depends(get_db), ):
    """Upsert: creates the record if it doesn't exist, replaces today's values if it does."""
    service = BiometricService(db)
    entry, created = service.upsert(date, data)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return entry


@router.get("", summary="List biometric records with optional filters.",
            response_model=list[BiometricRecordResponse], )
def list_biometrics(start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                    end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
                    skip: int = Query(0, ge=0, description="Records to skip"),
                    limit: int = Query(100, ge=1, le=500, description="Max records to return"),
                    db: Session = Depends(get_db), ):
    """
    Query biometric records. Filter precedence:
    - start + end: returns records in range
    - no filters: returns paginated list (most recent first)
    """
    service = BiometricService(db)

    if start and end:
        return service.get_range(start, end)

    return service.get_all(skip, limit)


@router.get("/{date}", summary="Get the biometric record of a specific date.",
            response_model=BiometricRecordResponse, )
def get_biometrics(date: datetime.date, db: Session = Depends(get_db), ):
    service = BiometricService(db)
    return service.get_by_date(date)


@router.delete("/{date}", summary="Delete the biometric record of a specific date.",
               status_code=status.HTTP_204_NO_CONTENT, )
def delete_biometrics(date: datetime.date, db: Session = Depends(get_db), ):
    service = BiometricService(db)
    service.delete_by_date(date)
