"""
Daily readiness service.

Orchestrates one scoring pass end to end:

1. load the biometric history (strictly before the scored day),
2. load the **full** session history up to the scored day and rebuild the
   load profile from it — never a cached one, so sessions logged since
   the last pass are always counted,
3. fuse everything into the readiness score,
4. persist the score into the day's biometric record,
5. evaluate the critical alert and prescribe the scheduled directive.

The engine itself stays pure; this is the only place that touches the
database around it.
"""

import datetime
from typing import Optional

from loguru import logger
from sqlmodel import Session

from app.core.config import settings
from app.engine.alerts import evaluate_critical_alert
from app.engine.baseline import BaselineConfig
from app.engine.load import compute_load_profile
from app.engine.prescriber import classify_tier, prescribe_mission
from app.engine.readiness import ReadinessConfig, compute_readiness
from app.schemas.biometrics import BiometricRecordCreate
from app.schemas.load import LoadProfile, LoadProfileResponse
from app.schemas.mission import MissionDirective, PrescriptionResponse
from app.schemas.readiness import DailyBriefingRequest, DailyBriefingResponse
from app.services.biometric_service import BiometricService
from app.services.training_session_service import TrainingSessionService


class DailyReadinessService:
    """Service running the daily readiness pass."""

    def __init__(self, session: Session, readiness_config: Optional[ReadinessConfig] = None):
        self.biometrics = BiometricService(session)
        self.sessions = TrainingSessionService(session)
        self.readiness_config = readiness_config or ReadinessConfig(
            baseline=BaselineConfig(max_entries=settings.BASELINE_MAX_ENTRIES),
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compute_load(self, as_of: datetime.date) -> LoadProfileResponse:
        history = self.sessions.get_history_until(as_of)
        profile = compute_load_profile(history, as_of=as_of)
        return LoadProfileResponse(ctl=profile.ctl, atl=profile.atl, balance=profile.balance, as_of=as_of,
                                   sessions_considered=len(history), )

    def run_daily_briefing(self, request: DailyBriefingRequest) -> DailyBriefingResponse:
        day = request.date or datetime.date.today()
        today = request.biometrics

        history = self.biometrics.get_history_before(day)
        load: LoadProfile = compute_load_profile(self.sessions.get_history_until(day), as_of=day)

        assessment = compute_readiness(
            today_hrv=today.hrv,
            today_rhr=today.resting_heart_rate,
            today_sleep=today.sleep_hours,
            yesterday_energy_balance=request.yesterday_energy_balance,
            history=history,
            load=load,
            config=self.readiness_config,
        )
        logger.info(f"Readiness for {day}: {assessment.score:.1f} ({assessment.status})")

        record = BiometricRecordCreate(**today.model_dump(), body_mass_kg=request.body_mass_kg)
        self.biometrics.upsert(day, record, readiness_score=assessment.score)

        alert = evaluate_critical_alert(assessment.score)
        if alert is not None:
            logger.warning(f"Critical fatigue alert raised for {day} (readiness {assessment.score:.1f})")

        tier = None
        directive = None
        if request.scheduled is not None:
            prescription = self.prescribe(request.scheduled, assessment.score)
            tier = prescription.tier
            directive = prescription.directive

        return DailyBriefingResponse(date=day, readiness=assessment, alert=alert, prescription_tier=tier,
                                     directive=directive, )

    @staticmethod
    def prescribe(scheduled: MissionDirective, readiness_score: float) -> PrescriptionResponse:
        tier = classify_tier(scheduled, readiness_score)
        directive = prescribe_mission(scheduled, readiness_score)
        if directive.is_altered and not scheduled.is_altered:
            logger.info(f"Directive '{scheduled.title}' altered ({tier}) at readiness {readiness_score:.1f}")
        return PrescriptionResponse(tier=tier, directive=directive)
