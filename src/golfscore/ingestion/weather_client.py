"""
Weather ingestion client (Open-Meteo).

This module fetches the hourly forecast for a coordinate and date and normalizes it
into `HourlyObservation`s for the hours of the round, plus the sunrise/sunset hours
for that date.

Wind is requested in mph so the provider's numbers feed the wind table unchanged.
The scoring layer (`golfscore.scoring`) turns the aggregated observations into scores.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Any

import httpx

from golfscore.config.settings import Settings
from golfscore.core.errors import ProviderError
from golfscore.core.http import get_json
from golfscore.core.time import hour_of_day, parse_provider_timestamp
from golfscore.domain.models import DaylightWindow, HourlyObservation, RoundWindow
from golfscore.features.weather import fallback_observation

logger = logging.getLogger(__name__)

# Drizzle codes with less precipitation than this are shown as plain cloud.
DRIZZLE_MIN_PRECIPITATION_MM = 0.2


@dataclass(frozen=True)
class RoundForecast:
    """Observations covering the round plus the day's daylight window."""

    observations: list[HourlyObservation]
    daylight: DaylightWindow = field(default_factory=DaylightWindow)
    is_fallback: bool = False


def describe_weather_code(code: int | None, *, rain_mm: float = 0.0, precipitation_mm: float = 0.0) -> tuple[str, str]:
    """Map a WMO weather code to a (category, description) pair."""
    if code is None or code == 0:
        return "Clear", "clear sky"
    if code <= 3:
        return "Clouds", {1: "mainly clear", 2: "partly cloudy"}.get(code, "overcast")
    if code <= 49:
        return "Fog", "foggy"
    if 51 <= code <= 55:
        # Models report drizzle codes for damp air; only call it drizzle when something falls.
        if rain_mm > 0 or precipitation_mm > DRIZZLE_MIN_PRECIPITATION_MM:
            return "Drizzle", "light drizzle"
        return "Clouds", "cloudy"
    if 56 <= code <= 57:
        return "Drizzle", "freezing drizzle"
    if 61 <= code <= 67:
        return "Rain", "light rain" if code <= 63 else "moderate rain"
    if 71 <= code <= 77:
        return "Snow", "snow"
    if 80 <= code <= 82:
        return "Rain", "rain showers"
    if code >= 95:
        return "Thunderstorm", "thunderstorm"
    return "Clouds", "cloudy"


def _value_at(values: Any, i: int) -> Any:
    if isinstance(values, list) and i < len(values):
        return values[i]
    return None


def _optional_float(value: Any) -> float | None:
    return float(value) if value is not None else None


class WeatherClient:
    """Fetches Open-Meteo hourly data and normalizes it into a `RoundForecast`."""

    def __init__(self, settings: Settings):
        self._settings = settings

    def _fetch_open_meteo(self, lat: float, lon: float, start_date: date, end_date: date) -> dict[str, Any]:
        """Call Open-Meteo and return the raw JSON response as a dict."""
        cfg = self._settings.weather
        params = {
            "latitude": lat,
            "longitude": lon,
            "hourly": ",".join(cfg.hourly_fields),
            "daily": ",".join(cfg.daily_fields),
            "wind_speed_unit": cfg.wind_speed_unit,
            "timezone": cfg.timezone,
            "start_date": start_date.isoformat(),
            "end_date": end_date.isoformat(),
        }
        try:
            payload = get_json(
                cfg.base_url,
                params=params,
                headers={"User-Agent": self._settings.app.user_agent},
                timeout_seconds=self._settings.app.http_timeout_seconds,
            )
        except (httpx.HTTPError, ValueError) as e:
            raise ProviderError(f"Failed to fetch weather data: {e}") from e
        if not isinstance(payload, dict):
            raise ProviderError("Failed to fetch weather data: unexpected payload shape")
        return payload

    def get_round_forecast(self, *, lat: float, lon: float, play_date: date, round_window: RoundWindow) -> RoundForecast:
        """Return the observations for the hours of the round (fallback hour when none)."""
        tee_off = datetime.combine(play_date, time(hour=round_window.start_hour))
        finish = tee_off + timedelta(hours=round_window.round_length_hours)

        logger.info("Fetching forecast for lat=%.4f lon=%.4f date=%s", lat, lon, play_date.isoformat())
        payload = self._fetch_open_meteo(lat, lon, play_date, finish.date())

        observations = [o for o in parse_hourly(payload) if tee_off <= o.timestamp.replace(tzinfo=None) < finish]
        daylight = parse_daylight(payload)

        if not observations:
            logger.warning(
                "No forecast hours for %s %02d:00 (beyond the forecast horizon?); using fallback observation",
                play_date.isoformat(),
                round_window.start_hour,
            )
            return RoundForecast(observations=[fallback_observation(tee_off)], daylight=daylight, is_fallback=True)

        return RoundForecast(observations=observations, daylight=daylight)


def parse_hourly(payload: dict[str, Any]) -> list[HourlyObservation]:
    """Normalize an Open-Meteo `hourly` block; hours missing core fields are skipped."""
    hourly = payload.get("hourly") or {}
    times = hourly.get("time") or []
    if not isinstance(times, list):
        return []

    out: list[HourlyObservation] = []
    for i, t in enumerate(times):
        try:
            rain = float(_value_at(hourly.get("rain"), i) or 0.0)
            precipitation = float(_value_at(hourly.get("precipitation"), i) or 0.0)
            code = _value_at(hourly.get("weathercode"), i)
            category, description = describe_weather_code(
                int(code) if code is not None else None, rain_mm=rain, precipitation_mm=precipitation
            )
            out.append(
                HourlyObservation(
                    timestamp=parse_provider_timestamp(t),
                    temperature_c=float(_value_at(hourly.get("temperature_2m"), i)),
                    wind_speed=float(_value_at(hourly.get("windspeed_10m"), i)),
                    wind_gust=_optional_float(_value_at(hourly.get("windgusts_10m"), i)),
                    wind_direction=_optional_float(_value_at(hourly.get("winddirection_10m"), i)),
                    cloud_cover_percent=float(_value_at(hourly.get("cloudcover"), i)),
                    rain_mm=rain,
                    rain_probability_percent=float(_value_at(hourly.get("precipitation_probability"), i) or 0.0),
                    weather_category=category,
                    description=description,
                )
            )
        except (TypeError, ValueError):
            # pydantic.ValidationError is a ValueError; a partial hour is dropped, not guessed.
            logger.debug("Skipping malformed forecast hour %r", t)
            continue
    return out


def parse_daylight(payload: dict[str, Any]) -> DaylightWindow:
    """Read sunrise/sunset hours for the first day of the `daily` block."""
    daily = payload.get("daily") or {}
    sunrise = hour_of_day(_value_at(daily.get("sunrise"), 0))
    sunset = hour_of_day(_value_at(daily.get("sunset"), 0))
    if sunrise is None or sunset is None:
        return DaylightWindow()
    return DaylightWindow(sunrise_hour=sunrise, sunset_hour=sunset)
