"""
Analytics endpoints — training load, daily readiness, and mission prescription.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.load import LoadProfileResponse
from app.schemas.mission import PrescriptionRequest, PrescriptionResponse
from app.schemas.readiness import DailyBriefingRequest, DailyBriefingResponse
from app.services.readiness_service import DailyReadinessService

router = APIRouter()


@router.get(
    "/load",
    summary="Get chronic/acute training load reconstructed from the full history.",
    response_model=LoadProfileResponse,
)
def get_training_load(
    as_of: Optional[datetime.date] = Query(
        None, description="Reference date (defaults to today)"
    ),
    db: Session = Depends(get_db),
):
    ref_date = as_of or datetime.date.today()
    return DailyReadinessService(db).compute_load(ref_date)


@router.post(
    "/readiness",
    summary="Score today's readiness, persist it and prescribe the scheduled mission.",
    response_model=DailyBriefingResponse,
)
def run_daily_readiness(
    data: DailyBriefingRequest,
    db: Session = Depends(get_db),
):
    return DailyReadinessService(db).run_daily_briefing(data)


@router.post(
    "/prescription",
    summary="Prescribe a scheduled mission for a given readiness score.",
    response_model=PrescriptionResponse,
)
def prescribe(data: PrescriptionRequest):
    return DailyReadinessService.prescribe(data.directive, data.readiness_score)
