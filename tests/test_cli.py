from __future__ import annotations

import json

from golfscore.cli import main


def _payload(day: str = "2025-09-26") -> dict:
    hours = range(24)
    return {
        "hourly": {
            "time": [f"{day}T{h:02d}:00" for h in hours],
            "temperature_2m": [17.0 for _ in hours],
            "precipitation": [0.0 for _ in hours],
            "rain": [0.0 for _ in hours],
            "weathercode": [0 for _ in hours],
            "cloudcover": [10.0 for _ in hours],
            "windspeed_10m": [4.0 for _ in hours],
            "windgusts_10m": [6.0 for _ in hours],
            "winddirection_10m": [90.0 for _ in hours],
            "precipitation_probability": [5 for _ in hours],
        },
        "daily": {"sunrise": [f"{day}T06:58"], "sunset": [f"{day}T19:12"]},
    }


def test_cli_courses_lists_the_default_course_first(capsys):
    # `courses` is purely config-driven, so no network stub is needed.
    assert main(["courses"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].endswith("St Andrews, Scotland")


def test_cli_score_prints_timeline_and_recommendation(monkeypatch, capsys):
    # Stub the HTTP helper so the real client parsing and hour selection still run.
    monkeypatch.setattr("golfscore.ingestion.weather_client.get_json", lambda url, **kw: _payload())

    code = main(["score", "--date", "2025-09-26", "--tee-time", "12:00", "--round-length", "4", "--explain"])
    assert code == 0
    out = capsys.readouterr().out

    # 12:00 + 4 hours; the gust (6 mph) is too light for the penalty.
    assert "Round: 12:00-16:00 (4 hours)" in out
    assert "  12:00 ☀️ 17°C wind 4 mph (gust 6) cloud 10% rain 0.0mm (5%) clear sky" in out
    assert "Optimal daylight" in out
    assert "PERFECT CONDITIONS! We're going to have a ball  [99/100]" in out


def test_cli_score_json_output(monkeypatch, capsys):
    monkeypatch.setattr("golfscore.ingestion.weather_client.get_json", lambda url, **kw: _payload())

    code = main(["score", "--date", "2025-09-26", "--lat", "55.5", "--lon", "-4.6", "--name", "Troon", "--json"])
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["request"]["location"]["name"] == "Troon"
    assert data["report"]["score"]["overall"] == 99


def test_cli_reports_errors_without_a_traceback(capsys):
    # Non-ISO dates are rejected before any request is made.
    assert main(["score", "--date", "26/09/2025"]) == 1
    assert capsys.readouterr().err.startswith("error: ")
