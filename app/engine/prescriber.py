"""
Mission prescriber — rewrites a scheduled directive when readiness is low.

Tiered decision, evaluated in order, first match wins:

1. **critical** — score < 40 on a demanding session (interval, tempo or
   long-session marker in the title or intensity text): the session is
   replaced by a zone-1 recovery flush on a low fuel tier.
2. **moderate** — 40 <= score < 65 on a demanding session: every power
   token in the intensity text is scaled down by 10% and a note is
   prepended to the coach notes.
3. **nominal** — anything else: the directive is returned unchanged.

Only demanding sessions are touched.  An easy run on a bad day stays an
easy run.

Power tokens live inside free text ("300W - 310W").  Rescaling is
token-based and best-effort: a token that does not parse as a number
(after stripping one trailing ``W``) passes through untouched.  The input
directive is never mutated; a new one is returned.
"""

from __future__ import annotations

import math
import re
from typing import Optional

from loguru import logger
from pydantic import BaseModel, Field

from app.engine.readiness import OVERRIDE_THRESHOLD, PRIMED_THRESHOLD
from app.schemas.mission import FuelTier, MissionDirective

# ======================================================================
# Configuration
# ======================================================================

RECOVERY_TITLE_PREFIX = "SYSTEM RECOVERY:"
RECOVERY_INTENSITY = "ZONE 1 FLUSH (< 150W)"
MODERATE_SCALE_FACTOR = 0.9

_DEFAULT_MARKERS: tuple[str, ...] = ("INTERVAL", "TEMPO", "LONG")

_WHITESPACE = re.compile(r"(\s+)")


class PrescriberConfig(BaseModel):
    """Configuration for the mission prescriber."""

    critical_threshold: float = Field(OVERRIDE_THRESHOLD)
    moderate_threshold: float = Field(PRIMED_THRESHOLD)
    scale_factor: float = Field(MODERATE_SCALE_FACTOR, gt=0.0, le=1.0)
    intensity_markers: tuple[str, ...] = Field(default=_DEFAULT_MARKERS)


DEFAULT_PRESCRIBER_CONFIG = PrescriberConfig()


# ======================================================================
# Token rescaling
# ======================================================================


def _scale_token(token: str, factor: float) -> str:
    """Scale a single ``"300W"`` / ``"300"`` token, or return it as is."""
    suffix = ""
    number = token
    if token.endswith("W"):
        number = token[:-1]
        suffix = "W"

    try:
        value = float(number)
    except ValueError:
        return token
    if not math.isfinite(value):
        return token

    return f"{math.floor(value * factor)}{suffix}"


def scale_power_tokens(text: str, factor: float = MODERATE_SCALE_FACTOR) -> str:
    """Scale every numeric power token of *text* by *factor*, rounding down.

    Whitespace is preserved as is.  Never raises.

    >>> scale_power_tokens("300W - 310W")
    '270W - 279W'
    """
    parts = _WHITESPACE.split(text)
    return "".join(
        part if not part or part.isspace() else _scale_token(part, factor)
        for part in parts
    )


# ======================================================================
# Tier classification
# ======================================================================


def _is_demanding(directive: MissionDirective, markers: tuple[str, ...]) -> bool:
    """True if the title or intensity text names a demanding session."""
    haystack = f"{directive.title} {directive.intensity_target}".upper()
    # Markers must start a word: "LONG RUN" and "INTERVALS" match, "ALONG" does not.
    return any(re.search(rf"\b{re.escape(marker.upper())}", haystack) for marker in markers)


def classify_tier(
    directive: MissionDirective,
    readiness_score: float,
    config: Optional[PrescriberConfig] = None,
) -> str:
    """Return ``"critical"``, ``"moderate"`` or ``"nominal"``."""
    cfg = config or DEFAULT_PRESCRIBER_CONFIG
    if not _is_demanding(directive, cfg.intensity_markers):
        return "nominal"
    if readiness_score < cfg.critical_threshold:
        return "critical"
    if readiness_score < cfg.moderate_threshold:
        return "moderate"
    return "nominal"


# ======================================================================
# Main entry point
# ======================================================================


def prescribe_mission(
    scheduled: MissionDirective,
    readiness_score: float,
    config: Optional[PrescriberConfig] = None,
) -> MissionDirective:
    """Prescribe today's directive from the scheduled one.

    Args:
        scheduled: Directive produced by the plan.
        readiness_score: Today's readiness (0-100).
        config: Optional :class:`PrescriberConfig` override.

    Returns:
        A new :class:`MissionDirective` for critical/moderate tiers, the
        scheduled directive itself for the nominal tier.
    """
    cfg = config or DEFAULT_PRESCRIBER_CONFIG
    tier = classify_tier(scheduled, readiness_score, cfg)

    if tier == "critical":
        logger.debug(f"Critical override of '{scheduled.title}' at readiness {readiness_score:.1f}")
        title = scheduled.title
        if not title.startswith(RECOVERY_TITLE_PREFIX):
            title = f"{RECOVERY_TITLE_PREFIX} {title}"
        return scheduled.model_copy(update={
            "title": title,
            "intensity_target": RECOVERY_INTENSITY,
            "fuel_tier": FuelTier.LOW,
            "notes": (
                f"CRITICAL FATIGUE DETECTED. Readiness is {int(readiness_score)}/100. "
                "Scheduled session overridden. Flush the legs, hydrate and recover. "
                "Do not push."
            ),
            "is_altered": True,
        })

    if tier == "moderate":
        logger.debug(f"Scaling power targets of '{scheduled.title}' at readiness {readiness_score:.1f}")
        note = (
            f"READINESS {int(readiness_score)}/100: power targets reduced by "
            f"{round((1.0 - cfg.scale_factor) * 100)}%."
        )
        notes = f"{note} {scheduled.notes}" if scheduled.notes else note
        return scheduled.model_copy(update={
            "intensity_target": scale_power_tokens(scheduled.intensity_target, cfg.scale_factor),
            "notes": notes,
            "is_altered": True,
        })

    return scheduled
