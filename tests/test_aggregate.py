from __future__ import annotations

from datetime import datetime

import pytest

from golfscore.core.errors import PreconditionError
from golfscore.domain.models import HourlyObservation
from golfscore.features.weather import fallback_observation, summarize_observations


def _obs(hour: int, **kw) -> HourlyObservation:
    values = dict(
        timestamp=datetime(2025, 9, 26, hour, 0),
        temperature_c=15.0,
        wind_speed=5.0,
        wind_gust=None,
        cloud_cover_percent=50.0,
        rain_mm=0.0,
        rain_probability_percent=10.0,
    )
    values.update(kw)
    return HourlyObservation(**values)


def test_summary_uses_simple_means_sums_and_max():
    obs = [
        _obs(12, temperature_c=14.0, wind_speed=4.0, wind_gust=9.0, cloud_cover_percent=20.0, rain_mm=0.1, rain_probability_percent=10.0),
        _obs(13, temperature_c=16.0, wind_speed=6.0, wind_gust=18.0, cloud_cover_percent=40.0, rain_mm=0.0, rain_probability_percent=30.0),
        _obs(14, temperature_c=19.0, wind_speed=8.0, wind_gust=12.0, cloud_cover_percent=90.0, rain_mm=0.4, rain_probability_percent=50.0),
    ]
    summary = summarize_observations(obs)
    assert summary.avg_temperature_c == pytest.approx(49.0 / 3)
    assert summary.avg_wind_speed == pytest.approx(6.0)
    assert summary.max_wind_gust == 18.0
    assert summary.avg_cloud_cover_percent == pytest.approx(50.0)
    assert summary.total_rain_mm == pytest.approx(0.5)
    assert summary.avg_rain_probability_percent == pytest.approx(30.0)
    assert summary.hours == 3


def test_hours_without_gusts_contribute_their_wind_speed():
    # The first hour has no gust reading, so its 14 mph mean wind counts as the gust.
    obs = [_obs(12, wind_speed=14.0), _obs(13, wind_speed=3.0, wind_gust=9.0)]
    assert summarize_observations(obs).max_wind_gust == 14.0


def test_values_are_not_rounded():
    # 14.96 must stay below 15 so it lands in the 10-15°C bucket.
    summary = summarize_observations([_obs(12, temperature_c=14.96)])
    assert summary.avg_temperature_c == 14.96


def test_empty_sequence_is_a_precondition_error():
    # Averages over nothing would be NaN; fail fast instead.
    with pytest.raises(PreconditionError):
        summarize_observations([])


def test_fallback_observation_uses_the_demo_values():
    fb = fallback_observation(datetime(2026, 3, 1, 12, 0))
    summary = summarize_observations([fb])
    assert (summary.avg_temperature_c, summary.avg_wind_speed, summary.max_wind_gust) == (14.0, 6.0, 9.0)
    assert (summary.avg_cloud_cover_percent, summary.total_rain_mm, summary.avg_rain_probability_percent) == (40.0, 0.0, 15.0)
    assert fb.description == "partly cloudy"
