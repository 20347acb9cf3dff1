"""
Biological baselines — rolling averages of past recovery signals.

Each field (HRV, RHR, sleep) is averaged independently over the history,
skipping zero values: a zero means the signal was not measured that day,
so a night without a sleep reading still contributes its HRV.

When a field has no valid history the baseline falls back to today's own
value, which makes today's ratio exactly 1.0 (a neutral day).  Sleep falls
back to the 8-hour target when today's sleep is missing too.
"""

from __future__ import annotations

from typing import Optional, Sequence

from pydantic import BaseModel, Field

from app.schemas.biometrics import BiometricRecord
from app.schemas.readiness import Baselines

# ======================================================================
# Configuration
# ======================================================================

DEFAULT_SLEEP_HOURS = 8.0


class BaselineConfig(BaseModel):
    """Configuration for the baseline aggregation."""

    max_entries: Optional[int] = Field(
        None, ge=1,
        description="Average only the N most recent valid entries per field (None = all history)",
    )
    fallback_sleep_hours: float = Field(DEFAULT_SLEEP_HOURS, gt=0.0)


DEFAULT_BASELINE_CONFIG = BaselineConfig()


# ======================================================================
# Core computation
# ======================================================================


def _mean_of_valid(values: list[float], max_entries: Optional[int]) -> Optional[float]:
    """Mean of the positive values (newest first), or ``None`` if none."""
    valid = [v for v in values if v > 0.0]
    if max_entries is not None:
        valid = valid[:max_entries]
    if not valid:
        return None
    return sum(valid) / len(valid)


def compute_baselines(
    history: Sequence[BiometricRecord],
    today_hrv: float,
    today_rhr: float,
    today_sleep: float,
    config: Optional[BaselineConfig] = None,
) -> Baselines:
    """Compute the HRV, RHR and sleep baselines.

    Args:
        history: Past daily records, excluding today.  Any order.
        today_hrv: Today's HRV (ms), fallback for an empty HRV history.
        today_rhr: Today's resting heart rate (bpm), fallback for RHR.
        today_sleep: Last night's sleep (hours), fallback for sleep.
        config: Optional :class:`BaselineConfig` override.

    Returns:
        :class:`Baselines`.  Never raises.
    """
    cfg = config or DEFAULT_BASELINE_CONFIG
    newest_first = sorted(history, key=lambda r: r.date, reverse=True)

    hrv = _mean_of_valid([r.hrv for r in newest_first], cfg.max_entries)
    rhr = _mean_of_valid([r.resting_heart_rate for r in newest_first], cfg.max_entries)
    sleep = _mean_of_valid([r.sleep_hours for r in newest_first], cfg.max_entries)

    if sleep is None:
        sleep = today_sleep if today_sleep > 0.0 else cfg.fallback_sleep_hours

    return Baselines(
        hrv=hrv if hrv is not None else today_hrv,
        resting_heart_rate=rhr if rhr is not None else today_rhr,
        sleep_hours=sleep,
    )
