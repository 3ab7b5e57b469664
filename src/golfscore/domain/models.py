"""
Domain models (Pydantic).

These types represent the stable "contract" between layers:
- provider output (`HourlyObservation`, `DaylightWindow`)
- request input (`RoundWindow`, `ScoreRequest`)
- explainable scoring output (`ScoreResult`, `GolfWeatherScore`, `GolfScoreReport`)

Every model is frozen: a score is recomputed per request, never patched in place.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class GeoPoint(_Frozen):
    """A geographic point in decimal degrees."""

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class Location(_Frozen):
    """A named place returned by the geocoder or the popular-courses list."""

    name: str
    point: GeoPoint


class HourlyObservation(_Frozen):
    """One forecast hour. Wind values are in mph."""

    timestamp: datetime
    temperature_c: float
    wind_speed: float
    wind_gust: float | None = None
    wind_direction: float | None = None
    cloud_cover_percent: float = Field(..., ge=0, le=100)
    rain_mm: float = Field(0.0, ge=0)
    rain_probability_percent: float = Field(0.0, ge=0, le=100)
    weather_category: str = "Clear"
    description: str = "clear sky"


class RoundWindow(_Frozen):
    """Tee time and round length.

    `end_hour` is deliberately not wrapped: a 22:00 tee time with a 4 hour round ends at 26,
    which is what the daylight rules compare against sunset.
    """

    start_hour: int = Field(..., ge=0, le=23)
    round_length_hours: Literal[3, 4, 5, 6] = 5

    @computed_field  # type: ignore[prop-decorator]
    @property
    def end_hour(self) -> int:
        return self.start_hour + self.round_length_hours

    @property
    def display_end_hour(self) -> int:
        return self.end_hour % 24


class DaylightWindow(_Frozen):
    """Sunrise/sunset hour-of-day; both absent when the provider has no data."""

    sunrise_hour: int | None = Field(default=None, ge=0, le=23)
    sunset_hour: int | None = Field(default=None, ge=0, le=23)

    @property
    def is_known(self) -> bool:
        return self.sunrise_hour is not None and self.sunset_hour is not None


class BucketView(_Frozen):
    """One row of a factor's threshold table, flagged when it is the one that matched."""

    label: str
    score: int
    active: bool = False


class ScoreResult(_Frozen):
    """Explainable score for one factor (temperature/wind/rain/sunshine/lightness)."""

    score: int = Field(..., ge=0, le=100)
    label: str
    explanation: str
    buckets: list[BucketView] = Field(default_factory=list)
    base_score: int | None = None
    modifier: float | None = None
    adjustment: float | None = None


class GolfWeatherScore(_Frozen):
    """The headline numbers shown on the score cards."""

    temperature: int = Field(..., ge=0, le=100)
    wind: int = Field(..., ge=0, le=100)
    rain: int = Field(..., ge=0, le=100)
    sunshine: int = Field(..., ge=0, le=100)
    lightness: int = Field(..., ge=0, le=100)
    overall: int = Field(..., ge=0, le=100)
    recommendation: str
    emoji: str


class WeatherInputs(_Frozen):
    """Aggregated scalar inputs as fed to the scorers (unrounded)."""

    avg_temperature_c: float
    avg_wind_speed: float
    max_wind_gust: float
    avg_cloud_cover_percent: float
    total_rain_mm: float
    avg_rain_probability_percent: float
    hours: int = Field(..., ge=1)


class GolfScoreReport(_Frozen):
    """Composite score plus the per-factor breakdown used by the expandable UI panel."""

    score: GolfWeatherScore
    temperature: ScoreResult
    wind: ScoreResult
    rain: ScoreResult
    sunshine: ScoreResult
    lightness: ScoreResult
    base_score: float
    daylight_modifier: float = Field(..., ge=0, le=1)
    band: Literal["good", "fair", "poor"]
    inputs: WeatherInputs


class ScoreRequest(_Frozen):
    """Explicit request object for one scoring run (location, date, tee time)."""

    location: Location
    play_date: date
    round_window: RoundWindow
    settings_overrides: dict[str, Any] | None = None


class TimelineHour(_Frozen):
    """Display row for one hour of the round."""

    time: str
    hour: int
    temperature: int
    wind_speed: int
    wind_gust: int | None = None
    wind_direction: str | None = None
    cloud_cover: int
    rain_mm: float
    rain_probability: int
    conditions: str
    description: str
    icon: str


class GolfScoreResult(_Frozen):
    """Full service response: what was asked, what the forecast said, and the score."""

    generated_at: datetime
    request: ScoreRequest
    daylight: DaylightWindow
    report: GolfScoreReport
    timeline: list[TimelineHour]
    meta: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _validate_timeline(self) -> "GolfScoreResult":
        if not self.timeline:
            raise ValueError("timeline must contain at least one hour")
        return self
