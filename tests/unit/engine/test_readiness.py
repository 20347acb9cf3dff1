"""
Unit tests for the readiness fusion.

All inputs are built in memory; baselines come from plain record lists.
"""

import datetime
import itertools

import pytest

from app.engine.readiness import (
    OVERRIDE_THRESHOLD,
    ReadinessConfig,
    compute_readiness,
    compute_readiness_score,
    requires_override,
)
from app.schemas.biometrics import BiometricRecord
from app.schemas.load import LoadProfile

DAY0 = datetime.date(2026, 3, 1)
NO_LOAD = LoadProfile()


# ======================================================================
# Helpers
# ======================================================================


def _history(days: int = 7, hrv: float = 60.0, rhr: float = 50.0, sleep: float = 8.0) -> list[BiometricRecord]:
    return [
        BiometricRecord(
            date=DAY0 + datetime.timedelta(days=i),
            hrv=hrv,
            resting_heart_rate=rhr,
            sleep_hours=sleep,
        )
        for i in range(days)
    ]


def _load(ctl: float, atl: float) -> LoadProfile:
    return LoadProfile(ctl=ctl, atl=atl, as_of=DAY0)


# ======================================================================
# Reference scenarios
# ======================================================================


class TestColdStart:
    def test_cold_start_score(self):
        a = compute_readiness(50, 55, 7.0, 0.0, [], NO_LOAD)
        assert a.hrv_score == pytest.approx(100.0)
        assert a.rhr_score == pytest.approx(100.0)
        assert a.sleep_score == pytest.approx(87.5)
        assert a.biological_score == pytest.approx(97.5)
        assert a.mechanical_score is None
        assert a.score == pytest.approx(97.5)
        assert a.status == "primed"
        assert a.requires_override is False

    def test_cold_start_baselines_mirror_today(self):
        a = compute_readiness(50, 55, 7.0, 0.0, [], NO_LOAD)
        assert a.baselines.hrv == 50
        assert a.baselines.resting_heart_rate == 55
        assert a.baselines.sleep_hours == 7.0

    def test_energy_governor(self):
        a = compute_readiness(50, 55, 7.0, -600.0, [], NO_LOAD)
        assert a.energy_governor_applied is True
        assert a.score == pytest.approx(82.875)

    def test_governor_boundary_is_strict(self):
        a = compute_readiness(50, 55, 7.0, -500.0, [], NO_LOAD)
        assert a.energy_governor_applied is False
        assert a.score == pytest.approx(97.5)


# ======================================================================
# Fusion
# ======================================================================


class TestFusion:
    def test_mechanical_pillar(self):
        """balance -10 → mechanical 80 → 0.6 × 97.5 + 0.4 × 80."""
        a = compute_readiness(50, 55, 7.0, 0.0, [], _load(50.0, 60.0))
        assert a.mechanical_score == pytest.approx(80.0)
        assert a.score == pytest.approx(90.5)

    def test_positive_balance_is_capped(self):
        a = compute_readiness(50, 55, 7.0, 0.0, [], _load(60.0, 10.0))
        assert a.mechanical_score == pytest.approx(100.0)

    def test_deep_fatigue_floors_mechanical(self):
        a = compute_readiness(50, 55, 7.0, 0.0, [], _load(20.0, 90.0))
        assert a.mechanical_score == 0.0
        assert a.score == pytest.approx(0.6 * 97.5)

    def test_baseline_ratios(self):
        history = _history(hrv=60, rhr=50, sleep=8)
        a = compute_readiness(45, 62.5, 6.0, 0.0, history, NO_LOAD)
        assert a.hrv_score == pytest.approx(75.0)
        assert a.rhr_score == pytest.approx(80.0)
        assert a.sleep_score == pytest.approx(75.0)
        assert a.biological_score == pytest.approx(0.4 * 75 + 0.4 * 80 + 0.2 * 75)

    def test_sub_scores_are_clamped(self):
        history = _history(hrv=40, rhr=60, sleep=6)
        a = compute_readiness(80, 40, 12.0, 0.0, history, NO_LOAD)
        assert a.hrv_score == 100.0
        assert a.rhr_score == 100.0
        assert a.sleep_score == 100.0

    def test_sleep_target_uses_larger_baseline(self):
        history = _history(sleep=9.0)
        a = compute_readiness(60, 50, 8.0, 0.0, history, NO_LOAD)
        assert a.sleep_score == pytest.approx(8.0 / 9.0 * 100)

    def test_zero_inputs_do_not_raise(self):
        a = compute_readiness(0, 0, 0, 0, [], NO_LOAD)
        assert 0.0 <= a.score <= 100.0

    def test_zero_today_rhr_is_neutral(self):
        a = compute_readiness(60, 0, 8.0, 0.0, _history(), NO_LOAD)
        assert a.rhr_score == pytest.approx(100.0)

    def test_custom_weights(self):
        cfg = ReadinessConfig(hrv_weight=1.0, rhr_weight=0.0, sleep_weight=0.0)
        a = compute_readiness(30, 50, 8.0, 0.0, _history(hrv=60), NO_LOAD, cfg)
        assert a.score == pytest.approx(50.0)


# ======================================================================
# Properties
# ======================================================================


class TestProperties:
    def test_score_always_in_range(self):
        values = [0.0, 1.0, 35.0, 60.0, 250.0]
        loads = [NO_LOAD, _load(10, 80), _load(80, 10)]
        for hrv, rhr, sleep, load, energy in itertools.product(values, values, [0.0, 5.0, 14.0], loads, [0.0, -900.0]):
            score = compute_readiness_score(hrv, rhr, sleep, energy, _history(), load)
            assert 0.0 <= score <= 100.0

    def test_idempotent(self):
        history = _history()
        first = compute_readiness(42, 58, 6.5, -700.0, history, _load(40, 55))
        second = compute_readiness(42, 58, 6.5, -700.0, history, _load(40, 55))
        assert first == second

    def test_hrv_is_monotonic(self):
        history = _history()
        scores = [compute_readiness_score(hrv, 50, 8.0, 0.0, history, NO_LOAD) for hrv in range(0, 120, 5)]
        assert scores == sorted(scores)

    def test_rhr_is_inversely_monotonic(self):
        history = _history()
        scores = [compute_readiness_score(60, rhr, 8.0, 0.0, history, NO_LOAD) for rhr in range(40, 120, 5)]
        assert scores == sorted(scores, reverse=True)

    def test_more_fatigue_never_raises_score(self):
        scores = [compute_readiness_score(60, 50, 8.0, 0.0, _history(), _load(50, atl)) for atl in range(50, 110, 5)]
        assert scores == sorted(scores, reverse=True)


# ======================================================================
# Override rule and labels
# ======================================================================


class TestOverride:
    def test_threshold_value(self):
        assert OVERRIDE_THRESHOLD == 40.0

    @pytest.mark.parametrize(
        "score, expected",
        [
            (39.999, True),
            (0.0, True),
            (40.0, False),
            (40.001, False),
            (100.0, False),
        ],
    )
    def test_requires_override(self, score, expected):
        assert requires_override(score) is expected

    def test_status_labels(self):
        assert compute_readiness(50, 55, 7.0, 0.0, [], NO_LOAD).status == "primed"
        compromised = compute_readiness(10, 100, 2.0, -900.0, _history(), _load(10, 80))
        assert compromised.status == "compromised"
        assert compromised.requires_override is True


class TestContextNote:
    def test_nominal_note(self):
        a = compute_readiness(60, 50, 8.0, 0.0, _history(), NO_LOAD)
        assert a.context_note == "All systems nominal. Ready for the scheduled session."

    def test_flags_are_listed(self):
        a = compute_readiness(30, 70, 4.0, -800.0, _history(), _load(30, 60))
        note = a.context_note
        assert "HRV below baseline" in note
        assert "Resting heart rate elevated" in note
        assert "Short sleep" in note
        assert "Accumulated fatigue" in note
        assert "Caloric deficit" in note
