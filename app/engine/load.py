"""
Training load — chronic/acute load reconstructed day by day.

Every session is reduced to a single training stress score (TSS).  Daily
TSS then feeds two exponentially-weighted moving averages:

    ctl(d) = ctl(d-1) + (stress(d) - ctl(d-1)) / 42     (fitness)
    atl(d) = atl(d-1) + (stress(d) - atl(d-1)) / 7      (fatigue)

The recursion runs over **every** calendar day from the first session to
``as_of``, including days without sessions: a rest day must still decay
the existing load towards zero (by 41/42 and 6/7 respectively).  Jumping
from one session day to the next would produce the wrong curve.

Training stress score
---------------------

Power-based, when the session carries an average power and the discipline
supports it:

    tss = duration_s × P × (P / FTP) / (FTP × 3600) × 100

with a fixed assumed FTP of 250 W (intensity factor = P / FTP).

Effort-based fallback otherwise:

    tss = (RPE / 10)² × duration_min × 100 / 60

so an hour at RPE 10 is worth 100, the same as an hour at FTP.

Design choices
--------------
1. **Recompute from full history** on every call — no hidden state.
2. **Checkpoint resume** — a previously returned :class:`LoadProfile` can
   be passed back; the loop restarts the day after it, with identical
   results as long as no earlier session changed.
3. **Order-independent daily sums** — ``math.fsum`` so shuffled input
   yields bit-for-bit identical output.
"""

from __future__ import annotations

import datetime
import math
from collections import defaultdict
from typing import Optional, Sequence

from pydantic import BaseModel, Field

from app.schemas.load import LoadProfile
from app.schemas.training_session import POWER_TRACKABLE, TrainingSessionBase

# ======================================================================
# Configuration
# ======================================================================

_ASSUMED_FTP = 250.0
_CHRONIC_DAYS = 42.0
_ACUTE_DAYS = 7.0


class LoadConfig(BaseModel):
    """Configuration for the training-load model."""

    assumed_ftp: float = Field(_ASSUMED_FTP, gt=0.0, description="Functional threshold power (watts)")
    chronic_time_constant: float = Field(_CHRONIC_DAYS, gt=1.0)
    acute_time_constant: float = Field(_ACUTE_DAYS, gt=1.0)


DEFAULT_LOAD_CONFIG = LoadConfig()


# ======================================================================
# Per-session stress
# ======================================================================


def compute_training_stress(
    session: TrainingSessionBase,
    config: Optional[LoadConfig] = None,
) -> float:
    """Training stress score of a single session."""
    cfg = config or DEFAULT_LOAD_CONFIG
    power = session.average_power

    if power and power > 0 and session.discipline in POWER_TRACKABLE:
        ftp = cfg.assumed_ftp
        duration_s = session.duration_minutes * 60.0
        return (duration_s * power * (power / ftp)) / (ftp * 3600.0) * 100.0

    effort = session.subjective_effort / 10.0
    return effort * effort * session.duration_minutes * (100.0 / 60.0)


def _daily_stress(
    sessions: Sequence[TrainingSessionBase],
    config: LoadConfig,
) -> dict[datetime.date, float]:
    """Sum the TSS of all sessions per calendar day."""
    per_day: dict[datetime.date, list[float]] = defaultdict(list)
    for s in sessions:
        per_day[s.date].append(compute_training_stress(s, config))
    return {day: math.fsum(values) for day, values in per_day.items()}


# ======================================================================
# Main entry point
# ======================================================================


def compute_load_profile(
    sessions: Sequence[TrainingSessionBase],
    as_of: Optional[datetime.date] = None,
    config: Optional[LoadConfig] = None,
    checkpoint: Optional[LoadProfile] = None,
) -> LoadProfile:
    """Reconstruct chronic and acute load at the end of ``as_of``.

    Args:
        sessions: Full session history, in any order.
        as_of: Last day to simulate (defaults to today).  Sessions after
            it are ignored.
        config: Optional :class:`LoadConfig` override.
        checkpoint: Optional profile from an earlier call over the same
            history.  Ignored if it lies after ``as_of``.

    Returns:
        :class:`LoadProfile`; zero load when there is no history.
    """
    cfg = config or DEFAULT_LOAD_CONFIG
    end = as_of or datetime.date.today()

    relevant = [s for s in sessions if s.date <= end]
    if not relevant:
        return LoadProfile(ctl=0.0, atl=0.0, as_of=None)

    first_day = min(s.date for s in relevant)
    daily = _daily_stress(relevant, cfg)

    ctl = 0.0
    atl = 0.0
    day = first_day
    if checkpoint is not None and checkpoint.as_of is not None and checkpoint.as_of <= end:
        ctl = checkpoint.ctl
        atl = checkpoint.atl
        day = max(first_day, checkpoint.as_of + datetime.timedelta(days=1))

    one_day = datetime.timedelta(days=1)
    while day <= end:
        stress = daily.get(day, 0.0)
        ctl = ctl + (stress - ctl) / cfg.chronic_time_constant
        atl = atl + (stress - atl) / cfg.acute_time_constant
        day += one_day

    return LoadProfile(ctl=ctl, atl=atl, as_of=end)
