"""
Training session endpoints.

Logging and retrieval of completed workouts.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.training_session import (EquipmentSyncUpdate, TrainingSessionCreate, TrainingSessionResponse, )
from app.services.training_session_service import TrainingSessionService

router = APIRouter()


@router.post("", summary="Log a completed training session.", response_model=TrainingSessionResponse,
             status_code=status.HTTP_201_CREATED, )
def create_session(data: TrainingSessionCreate, db: Session = Depends(get_db), ):
    service = TrainingSessionService(db)
    return service.create(data)


@router.get("", summary="List training sessions with optional date range.",
            response_model=list[TrainingSessionResponse], )
def list_sessions(start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                  end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
                  db: Session = Depends(get_db), ):
    service = TrainingSessionService(db)
    if start and end:
        return service.get_range(start, end)
    # Default: last 42 days (one chronic time constant)
    end_date = datetime.date.today()
    start_date = end_date - datetime.timedelta(days=42)
    return service.get_range(start_date, end_date)


@router.get("/{session_id}", summary="Get a training session.", response_model=TrainingSessionResponse, )
def get_session(session_id: int, db: Session = Depends(get_db), ):
    service = TrainingSessionService(db)
    return service.get_by_id(session_id)


@router.patch("/{session_id}/equipment-sync", summary="Flag the late equipment sync of a session.",
              response_model=TrainingSessionResponse, )
def sync_equipment(session_id: int, data: EquipmentSyncUpdate, db: Session = Depends(get_db), ):
    service = TrainingSessionService(db)
    return service.set_equipment_synced(session_id, data.equipment_synced)


@router.delete("/{session_id}", summary="Delete a training session.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_session(session_id: int, db: Session = Depends(get_db), ):
    service = TrainingSessionService(db)
    service.delete(session_id)
