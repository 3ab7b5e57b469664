from __future__ import annotations

from datetime import datetime

import pytest

from golfscore.domain.models import DaylightWindow, HourlyObservation, RoundWindow, WeatherInputs
from golfscore.features.timeline import build_timeline, compass_direction, weather_icon
from golfscore.scoring.composite import score_golf_weather
from golfscore.scoring.explain import breakdown_lines, interpretation, one_line_summary

WEIGHTS = {"temperature": 0.25, "wind": 0.25, "rain": 0.35, "sunshine": 0.15}


@pytest.mark.parametrize("degrees,point", [(0, "N"), (22, "N"), (23, "NE"), (90, "E"), (225, "SW"), (350, "N"), (720, "N")])
def test_compass_direction(degrees, point):
    assert compass_direction(degrees) == point


def test_weather_icon_prefers_precipitation_over_cloud():
    # Condition keywords win; cloud cover only picks between the sun/cloud icons.
    assert weather_icon("Drizzle", 100) == "🌧️"
    assert weather_icon("Snow", 10) == "❄️"
    assert weather_icon("Thunderstorm", 10) == "⛈️"
    assert weather_icon("Fog", 10) == "🌫️"
    assert weather_icon("Clouds", 80) == "☁️"
    assert weather_icon("Clear", 60) == "⛅"
    assert weather_icon("Clouds", 10) == "🌤️"
    assert weather_icon("Clear", 10) == "☀️"


def test_build_timeline_rounds_for_display():
    # Display rows round half up; 270 degrees maps to west.
    obs = HourlyObservation(
        timestamp=datetime(2025, 9, 26, 13, 0),
        temperature_c=14.5,
        wind_speed=6.4,
        wind_gust=None,
        wind_direction=270.0,
        cloud_cover_percent=62.0,
        rain_mm=0.3,
        rain_probability_percent=35.0,
        weather_category="Rain",
        description="light rain",
    )
    (row,) = build_timeline([obs])
    assert row.time == "13:00"
    assert (row.temperature, row.wind_speed, row.wind_gust, row.wind_direction) == (15, 6, None, "W")
    assert row.icon == "🌧️"


def _report(start=10, sunrise=6, sunset=20):
    inputs = WeatherInputs(
        avg_temperature_c=12.0,
        avg_wind_speed=9.0,
        max_wind_gust=9.0,
        avg_cloud_cover_percent=70.0,
        total_rain_mm=0.0,
        avg_rain_probability_percent=25.0,
        hours=5,
    )
    return score_golf_weather(inputs, RoundWindow(start_hour=start), DaylightWindow(sunrise_hour=sunrise, sunset_hour=sunset))


def test_breakdown_lines_show_each_weighted_contribution():
    report = _report()
    lines = breakdown_lines(report, WEIGHTS)
    # 70*0.25 + 70*0.25 + 90*0.35 + 50*0.15 = 74
    # 90 * 0.35 is 31.499999999999996 in floating point, so the rain line rounds down.
    assert "  Rain: 90/100 × 35% = 31" in lines
    assert "  Temperature: 70/100 × 25% = 18" in lines
    assert "  Base weather score: 74/100" in lines
    assert lines[-2] == "Final: base 74 × daylight 1.00 = 74/100"
    assert lines[-1] == interpretation(74)


def test_breakdown_mentions_daylight_reduction():
    report = _report(start=4, sunrise=7, sunset=19)
    lines = breakdown_lines(report, WEIGHTS)
    assert any("reduces score by 90%" in line for line in lines)


def test_one_line_summary():
    assert one_line_summary(_report()).startswith("overall=74 | temperature=70 | wind=70")


@pytest.mark.parametrize("overall,prefix", [(95, "Near-perfect"), (80, "Excellent"), (62, "Good"), (45, "Decent"), (31, "Challenging"), (3, "Poor")])
def test_interpretation(overall, prefix):
    assert interpretation(overall).startswith(prefix)
