"""
Readiness scorer — fuses recovery signals and load balance into 0-100.

Model
-----
Three biological sub-scores compare today against the rolling baseline,
each clamped to [0, 100]:

    hrv   = today_hrv / baseline_hrv × 100        (higher HRV is better)
    rhr   = baseline_rhr / today_rhr × 100        (inverted: lower RHR is better)
    sleep = today_sleep / max(8, baseline_sleep) × 100

    biological = 0.4 × hrv + 0.4 × rhr + 0.2 × sleep

The mechanical pillar maps the training stress balance onto the same
scale, so every point of fatigue below zero costs two points:

    mechanical = clamp(100 + 2 × (ctl - atl), 0, 100)

Fusion is 60/40 biological/mechanical.  Without any load history the
mechanical pillar carries no information and the biological score is used
alone.  Finally, the energy governor multiplies the result by 0.85 when
yesterday's net energy balance was below -500 kcal.

Every ratio whose denominator is zero falls back to 1.0, so the function
is total over non-negative inputs.
"""

from __future__ import annotations

from typing import Optional, Sequence

from pydantic import BaseModel, Field

from app.engine.baseline import BaselineConfig, compute_baselines
from app.schemas.biometrics import BiometricRecord
from app.schemas.load import LoadProfile
from app.schemas.readiness import Baselines, ReadinessAssessment

# ======================================================================
# Configuration
# ======================================================================

OVERRIDE_THRESHOLD = 40.0
PRIMED_THRESHOLD = 65.0

# Status thresholds on the final score.
_READINESS_THRESHOLDS: list[tuple[str, float, float]] = [
    ("compromised", 0.0, OVERRIDE_THRESHOLD),
    ("moderate", OVERRIDE_THRESHOLD, PRIMED_THRESHOLD),
    ("primed", PRIMED_THRESHOLD, float("inf")),
]


class ReadinessConfig(BaseModel):
    """Weights and thresholds of the readiness fusion."""

    hrv_weight: float = Field(0.4, ge=0.0, le=1.0)
    rhr_weight: float = Field(0.4, ge=0.0, le=1.0)
    sleep_weight: float = Field(0.2, ge=0.0, le=1.0)

    biological_weight: float = Field(0.6, ge=0.0, le=1.0)
    mechanical_weight: float = Field(0.4, ge=0.0, le=1.0)
    balance_multiplier: float = Field(2.0, ge=0.0)

    sleep_target_floor: float = Field(8.0, gt=0.0, description="Minimum sleep target (hours)")

    deficit_threshold_kcal: float = Field(-500.0, description="Governor fires strictly below this")
    deficit_penalty: float = Field(0.85, ge=0.0, le=1.0)

    baseline: BaselineConfig = Field(default_factory=BaselineConfig)


DEFAULT_READINESS_CONFIG = ReadinessConfig()


# ======================================================================
# Helpers
# ======================================================================


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return min(max(value, low), high)


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return 1.0
    return numerator / denominator


def _label_readiness(score: float) -> str:
    """Map a readiness score to its status label."""
    for label, low, high in _READINESS_THRESHOLDS:
        if low <= score < high:
            return label
    return "primed"


def requires_override(score: float) -> bool:
    """Whether the scheduled mission must be overridden.

    Strict: a score of exactly 40.0 does not trigger the override.
    """
    return score < OVERRIDE_THRESHOLD


def _generate_readiness_note(
    hrv_score: float,
    rhr_score: float,
    sleep_score: float,
    load: LoadProfile,
    governor_applied: bool,
    status: str,
) -> str:
    """Generate a human-readable readiness note."""
    parts: list[str] = []

    if hrv_score < 80.0:
        parts.append(f"HRV below baseline ({hrv_score:.0f}%)")
    if rhr_score < 90.0:
        parts.append(f"Resting heart rate elevated ({rhr_score:.0f}%)")
    if sleep_score < 75.0:
        parts.append(f"Short sleep ({sleep_score:.0f}% of target)")
    if load.has_history and load.balance < -10.0:
        parts.append(f"Accumulated fatigue (balance {load.balance:.1f})")
    if governor_applied:
        parts.append("Caloric deficit yesterday, score reduced by 15%")

    if not parts:
        if status == "primed":
            return "All systems nominal. Ready for the scheduled session."
        return "No single limiter identified."

    return ". ".join(parts) + "."


# ======================================================================
# Main entry points
# ======================================================================


def compute_readiness(
    today_hrv: float,
    today_rhr: float,
    today_sleep: float,
    yesterday_energy_balance: float,
    history: Sequence[BiometricRecord],
    load: LoadProfile,
    config: Optional[ReadinessConfig] = None,
) -> ReadinessAssessment:
    """Compute today's readiness with its full breakdown.

    Args:
        today_hrv: This morning's HRV (ms).
        today_rhr: This morning's resting heart rate (bpm).
        today_sleep: Last night's sleep (hours).
        yesterday_energy_balance: Net kcal of yesterday (negative = deficit).
        history: Past daily records, excluding today.
        load: Load profile computed from the freshest session history.
        config: Optional :class:`ReadinessConfig` override.

    Returns:
        :class:`ReadinessAssessment` whose ``score`` lies in [0, 100].
    """
    cfg = config or DEFAULT_READINESS_CONFIG

    baselines: Baselines = compute_baselines(
        history, today_hrv, today_rhr, today_sleep, cfg.baseline,
    )

    hrv_score = _clamp(_ratio(today_hrv, baselines.hrv) * 100.0)
    rhr_score = _clamp(_ratio(baselines.resting_heart_rate, today_rhr) * 100.0)
    sleep_target = max(cfg.sleep_target_floor, baselines.sleep_hours)
    sleep_score = _clamp(today_sleep / sleep_target * 100.0)

    biological = _clamp(
        cfg.hrv_weight * hrv_score
        + cfg.rhr_weight * rhr_score
        + cfg.sleep_weight * sleep_score
    )

    mechanical: Optional[float] = None
    if load.has_history:
        mechanical = _clamp(100.0 + load.balance * cfg.balance_multiplier)
        final = cfg.biological_weight * biological + cfg.mechanical_weight * mechanical
    else:
        final = biological

    governor_applied = yesterday_energy_balance < cfg.deficit_threshold_kcal
    if governor_applied:
        final *= cfg.deficit_penalty

    final = _clamp(final)
    status = _label_readiness(final)

    return ReadinessAssessment(
        score=final,
        status=status,
        requires_override=requires_override(final),
        hrv_score=hrv_score,
        rhr_score=rhr_score,
        sleep_score=sleep_score,
        biological_score=biological,
        mechanical_score=mechanical,
        energy_governor_applied=governor_applied,
        baselines=baselines,
        load=load,
        context_note=_generate_readiness_note(
            hrv_score, rhr_score, sleep_score, load, governor_applied, status,
        ),
    )


def compute_readiness_score(
    today_hrv: float,
    today_rhr: float,
    today_sleep: float,
    yesterday_energy_balance: float,
    history: Sequence[BiometricRecord],
    load: LoadProfile,
    config: Optional[ReadinessConfig] = None,
) -> float:
    """Scalar shortcut of :func:`compute_readiness`."""
    return compute_readiness(
        today_hrv, today_rhr, today_sleep, yesterday_energy_balance,
        history, load, config,
    ).score
