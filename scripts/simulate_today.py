"""What would the dashboard tell you TODAY (2026-03-10)?

Runs the whole engine on a hand-entered training block: rebuilds the
load curve, scores this morning's readiness and prescribes the
scheduled session.
"""

import datetime
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.engine.alerts import evaluate_critical_alert
from app.engine.load import compute_load_profile, compute_training_stress
from app.engine.prescriber import classify_tier, prescribe_mission
from app.engine.readiness import compute_readiness
from app.schemas.biometrics import BiometricRecord
from app.schemas.mission import FuelTier, MissionDirective
from app.schemas.training_session import DisciplineKind, TrainingSessionBase

TODAY = datetime.date(2026, 3, 10)

# ─── (date, discipline, minutes, km, avg HR, RPE, avg W) ────────────
RAW_SESSIONS = [
    ("2026-02-16", "endurance_run", 45, 8.5, 142, 4, 215),
    ("2026-02-17", "strength", 50, 0.0, 110, 6, None),
    ("2026-02-18", "indoor_cycle", 60, 0.0, 148, 6, 205),
    ("2026-02-20", "endurance_run", 55, 10.2, 150, 6, 240),
    ("2026-02-22", "endurance_run", 95, 18.0, 146, 6, 225),
    ("2026-02-24", "row", 40, 8.0, 151, 7, 190),
    ("2026-02-25", "endurance_run", 50, 10.0, 162, 8, 285),
    ("2026-02-27", "strength", 45, 0.0, 112, 6, None),
    ("2026-03-01", "endurance_run", 110, 21.1, 150, 7, 232),
    ("2026-03-03", "indoor_cycle", 75, 0.0, 155, 7, 230),
    ("2026-03-04", "endurance_run", 55, 11.0, 165, 9, 300),
    ("2026-03-06", "endurance_run", 60, 11.5, 158, 8, 270),
    ("2026-03-07", "endurance_run", 120, 23.5, 152, 8, 238),
    ("2026-03-08", "indoor_cycle", 90, 0.0, 150, 7, 225),
    ("2026-03-09", "endurance_run", 50, 10.0, 164, 9, 295),
]

# ─── (date, HRV ms, RHR bpm, sleep h) ───────────────────────────────
RAW_BIOMETRICS = [
    ("2026-03-01", 58, 49, 7.8),
    ("2026-03-02", 61, 48, 8.2),
    ("2026-03-03", 57, 50, 7.1),
    ("2026-03-04", 55, 51, 7.4),
    ("2026-03-05", 60, 49, 0.0),
    ("2026-03-06", 52, 52, 6.9),
    ("2026-03-07", 0, 53, 7.0),
    ("2026-03-08", 49, 54, 6.5),
    ("2026-03-09", 46, 55, 6.8),
]

MORNING = {"hrv": 41.0, "rhr": 58.0, "sleep": 5.9}
YESTERDAY_ENERGY_BALANCE = -650.0

SCHEDULED = MissionDirective(
    title="TEMPO 3x12min",
    discipline=DisciplineKind.ENDURANCE_RUN,
    intensity_target="280W - 290W",
    fuel_tier=FuelTier.HIGH,
    notes="Hold form on the last rep.",
)


def build_sessions():
    return [
        TrainingSessionBase(
            date=datetime.date.fromisoformat(d), discipline=DisciplineKind(kind),
            duration_minutes=minutes, distance_km=km, average_heart_rate=hr,
            subjective_effort=rpe, average_power=watts,
        )
        for d, kind, minutes, km, hr, rpe, watts in RAW_SESSIONS
    ]


def build_history():
    return [
        BiometricRecord(date=datetime.date.fromisoformat(d), hrv=hrv, resting_heart_rate=rhr, sleep_hours=sleep)
        for d, hrv, rhr, sleep in RAW_BIOMETRICS
    ]


def main():
    sessions = build_sessions()
    history = build_history()

    load = compute_load_profile(sessions, as_of=TODAY)
    assessment = compute_readiness(
        MORNING["hrv"], MORNING["rhr"], MORNING["sleep"],
        YESTERDAY_ENERGY_BALANCE, history, load,
    )
    directive = prescribe_mission(SCHEDULED, assessment.score)

    print()
    print("=" * 65)
    print(f"  Daily Readiness — {TODAY.strftime('%A %d %B %Y')}")
    print("=" * 65)
    print()

    print(f"  {'Date':<12} {'Discipline':<15} {'TSS':>7}")
    print("  " + "-" * 36)
    for s in sorted(sessions, key=lambda s: s.date):
        print(f"  {s.date.isoformat():<12} {s.discipline.value:<15} {compute_training_stress(s):>7.1f}")
    print()

    print(f"  CTL {load.ctl:6.1f}   ATL {load.atl:6.1f}   Balance {load.balance:+6.1f}")
    print()
    print(f"  HRV score        {assessment.hrv_score:6.1f}")
    print(f"  RHR score        {assessment.rhr_score:6.1f}")
    print(f"  Sleep score      {assessment.sleep_score:6.1f}")
    print(f"  Biological       {assessment.biological_score:6.1f}")
    mechanical = f"{assessment.mechanical_score:6.1f}" if assessment.mechanical_score is not None else "    --"
    print(f"  Mechanical       {mechanical}")
    print(f"  Energy governor  {'applied' if assessment.energy_governor_applied else 'no'}")
    print()
    print(f"  READINESS        {assessment.score:6.1f}  ({assessment.status})")
    print(f"  {assessment.context_note}")
    print()

    alert = evaluate_critical_alert(assessment.score)
    if alert:
        print(f"  ALERT: {alert.title}")
        print(f"  {alert.body}")
        print()

    print("  " + "-" * 63)
    print(f"  MISSION ({classify_tier(SCHEDULED, assessment.score)})")
    print("  " + "-" * 63)
    print(f"  {directive.title}")
    print(f"  Target: {directive.intensity_target}")
    print(f"  Fuel:   {directive.fuel_tier.value}")
    print(f"  Notes:  {directive.notes}")
    print()


if __name__ == "__main__":
    main()
