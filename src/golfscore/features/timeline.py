"""
Round timeline rows.

Turns observations into the per-hour display rows shown above the score cards: rounded
numbers, a compass direction for the wind and a single weather icon per hour.
"""

from __future__ import annotations

from typing import Sequence

from golfscore.domain.models import HourlyObservation, TimelineHour
from golfscore.scoring.numbers import round_half_up

COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


def compass_direction(degrees: float) -> str:
    """Map a bearing to the nearest of 8 compass points."""
    return COMPASS_POINTS[round_half_up((degrees % 360) / 45) % 8]


def weather_icon(category: str, cloud_cover_percent: float) -> str:
    condition = category.lower()
    # Precipitation first, then cloud cover.
    if "rain" in condition or "drizzle" in condition:
        return "🌧️"
    if "snow" in condition:
        return "❄️"
    if "thunder" in condition:
        return "⛈️"
    if "fog" in condition:
        return "🌫️"
    if "cloud" in condition or cloud_cover_percent > 25:
        if cloud_cover_percent > 75:
            return "☁️"
        if cloud_cover_percent > 50:
            return "⛅"
        return "🌤️"
    return "☀️"


def build_timeline(observations: Sequence[HourlyObservation]) -> list[TimelineHour]:
    rows: list[TimelineHour] = []
    for o in observations:
        rows.append(
            TimelineHour(
                time=o.timestamp.strftime("%H:%M"),
                hour=o.timestamp.hour,
                temperature=round_half_up(o.temperature_c),
                wind_speed=round_half_up(o.wind_speed),
                wind_gust=round_half_up(o.wind_gust) if o.wind_gust is not None else None,
                wind_direction=compass_direction(o.wind_direction) if o.wind_direction is not None else None,
                cloud_cover=round_half_up(o.cloud_cover_percent),
                rain_mm=o.rain_mm,
                rain_probability=round_half_up(o.rain_probability_percent),
                conditions=o.weather_category,
                description=o.description,
                icon=weather_icon(o.weather_category, o.cloud_cover_percent),
            )
        )
    return rows
