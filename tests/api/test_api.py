"""
API tests for the readiness service.

Each test runs against a fresh in-memory SQLite database wired in
through the ``get_db`` dependency override.
"""

import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.db import base  # noqa: F401  (registers the tables)
from app.db.session import get_db
from app.main import app

TODAY = datetime.date.today()
YESTERDAY = TODAY - datetime.timedelta(days=1)


# ======================================================================
# Fixtures / helpers
# ======================================================================


@pytest.fixture
def client():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)

    def _get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def _biometrics(hrv: float = 60.0, rhr: float = 50.0, sleep: float = 8.0) -> dict:
    return {"hrv": hrv, "resting_heart_rate": rhr, "sleep_hours": sleep}


def _session_payload(day: datetime.date, **overrides) -> dict:
    payload = {
        "date": day.isoformat(),
        "discipline": "other",
        "duration_minutes": 60,
        "subjective_effort": 10,
    }
    payload.update(overrides)
    return payload


# ======================================================================
# Health
# ======================================================================


class TestHealth:
    def test_health(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json()["status"] == "healthy"


# ======================================================================
# Biometric records
# ======================================================================


class TestBiometrics:
    def test_upsert_today_creates_then_updates(self, client):
        url = f"/api/v1/biometrics/{TODAY.isoformat()}"
        r = client.put(url, json=_biometrics())
        assert r.status_code == 201
        assert r.json()["hrv"] == 60.0

        r = client.put(url, json=_biometrics(hrv=55.0))
        assert r.status_code == 200
        assert r.json()["hrv"] == 55.0

    def test_past_record_is_immutable(self, client):
        url = f"/api/v1/biometrics/{YESTERDAY.isoformat()}"
        assert client.put(url, json=_biometrics()).status_code == 201
        assert client.put(url, json=_biometrics(hrv=10.0)).status_code == 409
        assert client.get(url).json()["hrv"] == 60.0

    def test_missing_record_is_404(self, client):
        r = client.get(f"/api/v1/biometrics/{TODAY.isoformat()}")
        assert r.status_code == 404

    def test_negative_values_are_rejected(self, client):
        r = client.put(f"/api/v1/biometrics/{TODAY.isoformat()}", json=_biometrics(hrv=-1.0))
        assert r.status_code == 422

    def test_list_and_delete(self, client):
        for offset in range(3):
            day = TODAY - datetime.timedelta(days=offset)
            client.put(f"/api/v1/biometrics/{day.isoformat()}", json=_biometrics())

        assert len(client.get("/api/v1/biometrics").json()) == 3

        r = client.delete(f"/api/v1/biometrics/{TODAY.isoformat()}")
        assert r.status_code == 204
        assert len(client.get("/api/v1/biometrics").json()) == 2


# ======================================================================
# Training sessions
# ======================================================================


class TestTrainingSessions:
    def test_create_reports_stress_score(self, client):
        r = client.post("/api/v1/training/sessions", json=_session_payload(TODAY))
        assert r.status_code == 201
        body = r.json()
        assert body["training_stress_score"] == pytest.approx(100.0)
        assert body["equipment_synced"] is False

    def test_power_based_stress(self, client):
        payload = _session_payload(TODAY, discipline="indoor_cycle", average_power=300)
        r = client.post("/api/v1/training/sessions", json=payload)
        assert r.json()["training_stress_score"] == pytest.approx(144.0)

    def test_effort_out_of_range(self, client):
        r = client.post("/api/v1/training/sessions", json=_session_payload(TODAY, subjective_effort=11))
        assert r.status_code == 422

    def test_equipment_sync_flag(self, client):
        session_id = client.post("/api/v1/training/sessions", json=_session_payload(TODAY)).json()["id"]
        r = client.patch(
            f"/api/v1/training/sessions/{session_id}/equipment-sync",
            json={"equipment_synced": True},
        )
        assert r.status_code == 200
        assert r.json()["equipment_synced"] is True

    def test_unknown_session_is_404(self, client):
        assert client.get("/api/v1/training/sessions/999").status_code == 404
        assert client.delete("/api/v1/training/sessions/999").status_code == 404

    def test_default_listing_covers_recent_sessions(self, client):
        client.post("/api/v1/training/sessions", json=_session_payload(YESTERDAY))
        client.post("/api/v1/training/sessions",
                    json=_session_payload(TODAY - datetime.timedelta(days=100)))
        assert len(client.get("/api/v1/training/sessions").json()) == 1


# ======================================================================
# Analytics
# ======================================================================


class TestAnalytics:
    def test_load_without_history(self, client):
        r = client.get("/api/v1/analytics/load", params={"as_of": TODAY.isoformat()})
        assert r.status_code == 200
        body = r.json()
        assert body["ctl"] == 0.0
        assert body["atl"] == 0.0
        assert body["sessions_considered"] == 0

    def test_load_after_one_session(self, client):
        client.post("/api/v1/training/sessions", json=_session_payload(TODAY))
        body = client.get("/api/v1/analytics/load", params={"as_of": TODAY.isoformat()}).json()
        assert body["ctl"] == pytest.approx(100.0 / 42)
        assert body["atl"] == pytest.approx(100.0 / 7)
        assert body["balance"] == pytest.approx(100.0 / 42 - 100.0 / 7)
        assert body["sessions_considered"] == 1

    def test_cold_start_briefing(self, client):
        r = client.post(
            "/api/v1/analytics/readiness",
            json={"date": TODAY.isoformat(), "biometrics": _biometrics(50, 55, 7.0)},
        )
        assert r.status_code == 200
        body = r.json()
        assert body["readiness"]["score"] == pytest.approx(97.5)
        assert body["readiness"]["mechanical_score"] is None
        assert body["alert"] is None
        assert body["directive"] is None

        stored = client.get(f"/api/v1/biometrics/{TODAY.isoformat()}").json()
        assert stored["readiness_score"] == pytest.approx(97.5)

    def test_briefing_with_governor(self, client):
        r = client.post(
            "/api/v1/analytics/readiness",
            json={
                "date": TODAY.isoformat(),
                "biometrics": _biometrics(50, 55, 7.0),
                "yesterday_energy_balance": -600,
            },
        )
        body = r.json()
        assert body["readiness"]["energy_governor_applied"] is True
        assert body["readiness"]["score"] == pytest.approx(82.875)

    def test_exhausted_athlete_gets_recovery_and_alert(self, client):
        for offset in range(1, 4):
            day = TODAY - datetime.timedelta(days=offset)
            client.put(f"/api/v1/biometrics/{day.isoformat()}", json=_biometrics(60, 50, 8.0))
        client.post("/api/v1/training/sessions", json=_session_payload(YESTERDAY, duration_minutes=180))

        r = client.post(
            "/api/v1/analytics/readiness",
            json={
                "date": TODAY.isoformat(),
                "biometrics": _biometrics(12, 100, 4.0),
                "yesterday_energy_balance": -800,
                "scheduled": {"title": "TEMPO 6x800m", "intensity_target": "300W"},
            },
        )
        assert r.status_code == 200
        body = r.json()

        assert body["readiness"]["score"] < 35.0
        assert body["readiness"]["requires_override"] is True
        assert body["readiness"]["status"] == "compromised"
        assert body["alert"]["identifier"] == "critical_fatigue_alert"
        assert body["prescription_tier"] == "critical"
        assert body["directive"]["title"].startswith("SYSTEM RECOVERY:")
        assert body["directive"]["fuel_tier"] == "low"
        assert body["directive"]["is_altered"] is True

    def test_prescription_endpoint(self, client):
        r = client.post(
            "/api/v1/analytics/prescription",
            json={
                "directive": {"title": "Long intervals", "intensity_target": "300W - 310W"},
                "readiness_score": 55,
            },
        )
        assert r.status_code == 200
        body = r.json()
        assert body["tier"] == "moderate"
        assert body["directive"]["intensity_target"] == "270W - 279W"

    def test_prescription_rejects_out_of_range_score(self, client):
        r = client.post(
            "/api/v1/analytics/prescription",
            json={"directive": {"title": "TEMPO"}, "readiness_score": 140},
        )
        assert r.status_code == 422


# ======================================================================
# Writes over existing rows
# ======================================================================


class TestUpdates:
    def test_briefing_updates_existing_record(self, client):
        client.put(f"/api/v1/biometrics/{TODAY.isoformat()}", json=_biometrics(50, 55, 7.0))
        r = client.post(
            "/api/v1/analytics/readiness",
            json={"date": TODAY.isoformat(), "biometrics": _biometrics(50, 55, 7.0)},
        )
        assert r.status_code == 200

        stored = client.get(f"/api/v1/biometrics/{TODAY.isoformat()}").json()
        assert stored["readiness_score"] == pytest.approx(97.5)
