"""
Critical-fatigue alerting.

The alert threshold (< 35) sits below the mission override threshold
(< 40): a score between 35 and 40 rewrites the session
silently, only a score below 35 pushes a lock-screen alert.  Delivery is
left to the external notification collaborator.
"""

from typing import Optional

from app.schemas.readiness import SystemAlert

CRITICAL_ALERT_THRESHOLD = 35.0
CRITICAL_ALERT_ID = "critical_fatigue_alert"


def requires_critical_alert(score: float) -> bool:
    return score < CRITICAL_ALERT_THRESHOLD


def evaluate_critical_alert(score: float) -> Optional[SystemAlert]:
    """Build the critical-fatigue alert for *score*, or ``None``."""
    if not requires_critical_alert(score):
        return None
    return SystemAlert(
        identifier=CRITICAL_ALERT_ID,
        title="SYSTEM FAULT: HIGH FATIGUE",
        body=(
            f"Readiness has dropped to {int(score)}/100. Central nervous system is "
            "depleted. Override today's mission and prioritize immediate recovery."
        ),
    )
