"""Tests for the critical-fatigue alert."""

import pytest

from app.engine.alerts import CRITICAL_ALERT_ID, evaluate_critical_alert, requires_critical_alert


class TestCriticalAlert:
    @pytest.mark.parametrize("score", [0.0, 20.0, 34.9])
    def test_fires_below_35(self, score):
        alert = evaluate_critical_alert(score)
        assert alert is not None
        assert alert.identifier == CRITICAL_ALERT_ID
        assert alert.title == "SYSTEM FAULT: HIGH FATIGUE"
        assert f"{int(score)}/100" in alert.body

    @pytest.mark.parametrize("score", [35.0, 38.0, 39.9, 80.0])
    def test_silent_from_35(self, score):
        assert evaluate_critical_alert(score) is None
        assert requires_critical_alert(score) is False

    def test_override_band_without_alert(self):
        """37 rewrites the mission but does not raise an alert."""
        from app.engine.readiness import requires_override

        assert requires_override(37.0) is True
        assert evaluate_critical_alert(37.0) is None
