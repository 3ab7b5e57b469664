# src/golfscore/features/weather.py
"""
Weather aggregation.

Reduces the hourly observations that fall inside the round into the scalar inputs the
scorers consume:
- mean temperature, wind speed, cloud cover and rain probability (simple, unweighted)
- maximum gust (an hour without a gust reading contributes its mean wind speed)
- total rain

Values stay unrounded here; bucket lookups must see the raw numbers.
"""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from golfscore.core.errors import PreconditionError
from golfscore.domain.models import HourlyObservation, WeatherInputs

# Stand-in hour used when the provider has nothing for the requested date
# (typically because it is beyond the forecast horizon).
FALLBACK_TEMPERATURE_C = 14.0
FALLBACK_WIND_SPEED = 6.0
FALLBACK_WIND_GUST = 9.0
FALLBACK_CLOUD_COVER_PERCENT = 40.0
FALLBACK_RAIN_PROBABILITY_PERCENT = 15.0


def fallback_observation(timestamp: datetime) -> HourlyObservation:
    """Build the fixed demo observation substituted for an empty forecast."""
    return HourlyObservation(
        timestamp=timestamp,
        temperature_c=FALLBACK_TEMPERATURE_C,
        wind_speed=FALLBACK_WIND_SPEED,
        wind_gust=FALLBACK_WIND_GUST,
        cloud_cover_percent=FALLBACK_CLOUD_COVER_PERCENT,
        rain_mm=0.0,
        rain_probability_percent=FALLBACK_RAIN_PROBABILITY_PERCENT,
        weather_category="Clouds",
        description="partly cloudy",
    )


def _mean(values: list[float]) -> float:
    return sum(values) / len(values)


def summarize_observations(observations: Sequence[HourlyObservation]) -> WeatherInputs:
    """Aggregate the round's hourly observations.

    Raises:
        PreconditionError: If `observations` is empty. Callers substitute
            `fallback_observation` instead of passing an empty forecast.
    """
    if not observations:
        raise PreconditionError("at least one hourly observation is required to score a round")

    return WeatherInputs(
        avg_temperature_c=_mean([o.temperature_c for o in observations]),
        avg_wind_speed=_mean([o.wind_speed for o in observations]),
        max_wind_gust=max(o.wind_gust if o.wind_gust is not None else o.wind_speed for o in observations),
        avg_cloud_cover_percent=_mean([o.cloud_cover_percent for o in observations]),
        total_rain_mm=sum(o.rain_mm for o in observations),
        avg_rain_probability_percent=_mean([o.rain_probability_percent for o in observations]),
        hours=len(observations),
    )
