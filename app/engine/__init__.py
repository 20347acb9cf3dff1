"""Readiness engine — baselines, training load, readiness fusion, mission prescription."""

from app.engine.alerts import evaluate_critical_alert
from app.engine.baseline import BaselineConfig, compute_baselines
from app.engine.load import LoadConfig, compute_load_profile, compute_training_stress
from app.engine.prescriber import PrescriberConfig, prescribe_mission, scale_power_tokens
from app.engine.readiness import (
    ReadinessConfig,
    compute_readiness,
    compute_readiness_score,
    requires_override,
)

__all__ = [
    "BaselineConfig",
    "LoadConfig",
    "PrescriberConfig",
    "ReadinessConfig",
    "compute_baselines",
    "compute_load_profile",
    "compute_readiness",
    "compute_readiness_score",
    "compute_training_stress",
    "evaluate_critical_alert",
    "prescribe_mission",
    "requires_override",
    "scale_power_tokens",
]
