from __future__ import annotations

from datetime import date, datetime

from starlette.testclient import TestClient

from golfscore.api.app import app
from golfscore.core.errors import ProviderError
from golfscore.domain.models import DaylightWindow, GeoPoint, HourlyObservation, Location, RoundWindow
from golfscore.ingestion.weather_client import RoundForecast


class _StubWeatherClient:
    def get_round_forecast(self, *, lat: float, lon: float, play_date: date, round_window: RoundWindow):
        # Calm, warm, dry and clear: every factor at or near 100.
        observations = [
            HourlyObservation(
                timestamp=datetime(play_date.year, play_date.month, play_date.day, h, 0),
                temperature_c=17.0,
                wind_speed=4.0,
                cloud_cover_percent=10.0,
                rain_mm=0.0,
                rain_probability_percent=5.0,
            )
            for h in range(round_window.start_hour, round_window.start_hour + round_window.round_length_hours)
        ]
        return RoundForecast(observations=observations, daylight=DaylightWindow(sunrise_hour=6, sunset_hour=20))


class _FailingWeatherClient:
    def get_round_forecast(self, **kwargs):
        raise ProviderError("Failed to fetch weather data: boom")


class _StubGeocodingClient:
    def search(self, query: str, *, limit: int | None = None):
        return [Location(name=f"{query} Golf Club", point=GeoPoint(lat=55.0, lon=-4.0))]


def _payload(**overrides) -> dict:
    payload = {
        "location": {"name": "St Andrews, Scotland", "point": {"lat": 56.3398, "lon": -2.7967}},
        "play_date": "2025-09-26",
        "round_window": {"start_hour": 12, "round_length_hours": 5},
    }
    payload.update(overrides)
    return payload


def test_api_score_returns_report_timeline_and_breakdown(monkeypatch):
    # Patch the cached clients factory so API tests stay offline.
    import golfscore.api.routes as routes

    monkeypatch.setattr(routes, "_clients", lambda: (_StubWeatherClient(), _StubGeocodingClient()))

    with TestClient(app) as c:
        resp = c.post("/api/score", json=_payload())
    assert resp.status_code == 200
    data = resp.json()

    score = data["report"]["score"]
    assert score["overall"] == 99
    assert score["emoji"] == "⛳🌟"
    assert data["report"]["band"] == "good"
    assert data["report"]["lightness"]["label"] == "Optimal daylight"
    assert [row["time"] for row in data["timeline"]] == ["12:00", "13:00", "14:00", "15:00", "16:00"]
    assert data["request"]["round_window"]["end_hour"] == 17

    meta = data["meta"]
    assert meta["forecast"] == "live"
    assert meta["wind_speed_unit"] == "mph"
    assert meta["interpretation"].startswith("Near-perfect")
    assert meta["breakdown"][0] == "Weather components:"
    assert isinstance(meta["elapsed_ms"], int)


def test_api_score_maps_provider_failures_to_502(monkeypatch):
    import golfscore.api.routes as routes

    monkeypatch.setattr(routes, "_clients", lambda: (_FailingWeatherClient(), _StubGeocodingClient()))

    with TestClient(app) as c:
        resp = c.post("/api/score", json=_payload())
    assert resp.status_code == 502
    assert resp.json()["detail"] == {"code": "UPSTREAM_ERROR", "message": "Failed to fetch weather data"}


def test_api_score_rejects_disallowed_overrides(monkeypatch):
    import golfscore.api.routes as routes

    monkeypatch.setattr(routes, "_clients", lambda: (_StubWeatherClient(), _StubGeocodingClient()))

    with TestClient(app) as c:
        resp = c.post("/api/score", json=_payload(settings_overrides={"weather": {"base_url": "http://x"}}))
    assert resp.status_code == 400
    assert resp.json()["detail"]["code"] == "VALIDATION_ERROR"


def test_api_score_validates_round_length():
    with TestClient(app) as c:
        resp = c.post("/api/score", json=_payload(round_window={"start_hour": 12, "round_length_hours": 7}))
    assert resp.status_code == 422


def test_api_reference_endpoints(monkeypatch):
    import golfscore.api.routes as routes

    monkeypatch.setattr(routes, "_clients", lambda: (_StubWeatherClient(), _StubGeocodingClient()))

    with TestClient(app) as c:
        assert c.get("/api/health").json() == {"status": "ok"}

        courses = c.get("/api/courses").json()
        assert courses[0]["name"] == "St Andrews, Scotland"

        found = c.get("/api/locations", params={"q": "Troon"}).json()
        assert found[0]["name"] == "Troon Golf Club"

        thresholds = c.get("/api/thresholds").json()
    assert set(thresholds["tables"]) >= {"temperature", "wind", "cloud_cover"}
    assert [r["label"] for r in thresholds["daylight_rules"]][0] == "Optimal daylight"
    assert thresholds["wind_speed_unit"] == "mph"
