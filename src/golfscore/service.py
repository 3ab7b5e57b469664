"""
Round scoring orchestrator.

Wires the layers together for one request:
- request (`ScoreRequest`) + per-request settings overrides
- ingestion (Open-Meteo forecast for the round's hours)
- aggregation + scoring (`golfscore.features.weather`, `golfscore.scoring.composite`)
- display rows (`golfscore.features.timeline`)

The scoring core itself is pure; every network call happens here, before it runs.
"""

from __future__ import annotations

import logging
import time
from datetime import date, datetime
from typing import Protocol
from zoneinfo import ZoneInfo

from golfscore.config.overrides import apply_settings_overrides
from golfscore.config.settings import Settings, get_settings
from golfscore.domain.models import GolfScoreResult, RoundWindow, ScoreRequest
from golfscore.features.timeline import build_timeline
from golfscore.features.weather import summarize_observations
from golfscore.ingestion.weather_client import RoundForecast, WeatherClient
from golfscore.scoring.composite import score_golf_weather

logger = logging.getLogger(__name__)


class ForecastSource(Protocol):
    def get_round_forecast(self, *, lat: float, lon: float, play_date: date, round_window: RoundWindow) -> RoundForecast: ...


def score_round(
    request: ScoreRequest,
    *,
    settings: Settings | None = None,
    weather_client: ForecastSource | None = None,
) -> GolfScoreResult:
    """Fetch the forecast for the requested round and score it."""
    t0 = time.perf_counter()
    # Overrides produce a new Settings object; the shared cached one is never mutated.
    settings = apply_settings_overrides(settings or get_settings(), request.settings_overrides)
    weather_client = weather_client or WeatherClient(settings)

    forecast = weather_client.get_round_forecast(
        lat=request.location.point.lat,
        lon=request.location.point.lon,
        play_date=request.play_date,
        round_window=request.round_window,
    )

    # The weather client already substituted the fallback hour, so this never sees an empty list.
    inputs = summarize_observations(forecast.observations)
    report = score_golf_weather(inputs, request.round_window, forecast.daylight, settings.scoring)

    logger.info(
        "Scored %s on %s at %02d:00 (%dh): overall=%d base=%.2f daylight=x%.2f",
        request.location.name,
        request.play_date.isoformat(),
        request.round_window.start_hour,
        request.round_window.round_length_hours,
        report.score.overall,
        report.base_score,
        report.daylight_modifier,
    )

    return GolfScoreResult(
        generated_at=datetime.now(ZoneInfo(settings.app.timezone)),
        request=request,
        daylight=forecast.daylight,
        report=report,
        timeline=build_timeline(forecast.observations),
        meta={
            # "fallback" means the date had no forecast hours and demo conditions were scored.
            "forecast": "fallback" if forecast.is_fallback else "live",
            "hours": inputs.hours,
            "wind_speed_unit": settings.weather.wind_speed_unit,
            "short_day_penalty": settings.scoring.daylight.short_day_penalty,
            "elapsed_ms": int((time.perf_counter() - t0) * 1000),
        },
    )
