# src/golfscore/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/golfscore/config/defaults.yaml`, then optionally overridden by:
- environment variables (e.g., `GOLFSCORE_LOG_LEVEL`, `GOLFSCORE_TIMEZONE`)
- an external YAML file via `GOLFSCORE_CONFIG_PATH`

Design rule:
- Provider URLs, weights and the disputed daylight rule live in YAML, not in business logic.
- Bucket tables are fixed and live in `golfscore.scoring.thresholds`.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field

from golfscore.core.env import load_dotenv_if_present


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `golfscore.config`."""
    text = resources.files("golfscore.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "GolfScore"
    timezone: str = "Europe/London"
    http_timeout_seconds: float = 15
    log_level: str = "INFO"
    user_agent: str = "golfscore/0.1.0 (+https://local)"


class WeatherSettings(BaseModel):
    base_url: str = "https://api.open-meteo.com/v1/forecast"
    timezone: str = "auto"
    wind_speed_unit: Literal["mph"] = "mph"
    hourly_fields: list[str] = Field(
        default_factory=lambda: [
            "temperature_2m",
            "precipitation",
            "rain",
            "weathercode",
            "cloudcover",
            "windspeed_10m",
            "windgusts_10m",
            "winddirection_10m",
            "precipitation_probability",
        ]
    )
    daily_fields: list[str] = Field(default_factory=lambda: ["sunrise", "sunset"])


class Course(BaseModel):
    name: str
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class GeocodingSettings(BaseModel):
    base_url: str = "https://nominatim.openstreetmap.org/search"
    limit: int = Field(5, ge=1, le=50)
    min_query_length: int = 2
    golf_suffix: str = "golf course"
    popular_courses: list[Course] = Field(default_factory=list)


class DaylightSettings(BaseModel):
    neutral_score: int = Field(85, ge=0, le=100)
    # Disputed rule: only one variant of the app penalised short winter days.
    short_day_penalty: bool = False
    short_day_hours: int = Field(9, ge=0, le=24)
    short_day_multiplier: float = Field(0.9, ge=0, le=1)


class FactorWeights(BaseModel):
    # A partial mapping keeps the defaults for the factors it leaves out.
    temperature: float = Field(0.25, ge=0)
    wind: float = Field(0.25, ge=0)
    rain: float = Field(0.35, ge=0)
    sunshine: float = Field(0.15, ge=0)


class ScoringSettings(BaseModel):
    weights: FactorWeights = Field(default_factory=FactorWeights)
    daylight: DaylightSettings = Field(default_factory=DaylightSettings)


class RoundSettings(BaseModel):
    default_start_hour: int = Field(12, ge=0, le=23)
    default_length_hours: Literal[3, 4, 5, 6] = 5


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    weather: WeatherSettings = Field(default_factory=WeatherSettings)
    geocoding: GeocodingSettings = Field(default_factory=GeocodingSettings)
    scoring: ScoringSettings = Field(default_factory=ScoringSettings)
    round: RoundSettings = Field(default_factory=RoundSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    load_dotenv_if_present()
    data = dict(data)

    log_level = os.getenv("GOLFSCORE_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    timezone = os.getenv("GOLFSCORE_TIMEZONE")
    if timezone:
        data.setdefault("app", {})["timezone"] = timezone

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("GOLFSCORE_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
