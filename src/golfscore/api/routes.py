"""
API routes.

Endpoints:
- POST `/api/score`: score the weather for a round (main entrypoint).
- GET  `/api/locations?q=`: golf course / place search.
- GET  `/api/courses`: built-in popular courses.
- GET  `/api/thresholds`: the bucket tables, for rendering the breakdown panel.
- GET  `/api/health`: liveness probe.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import APIRouter, HTTPException

from golfscore.config.overrides import apply_settings_overrides
from golfscore.config.settings import get_settings
from golfscore.core.errors import ProviderError
from golfscore.domain.models import GolfScoreResult, Location, ScoreRequest
from golfscore.ingestion.geocoding_client import GeocodingClient, popular_courses
from golfscore.ingestion.weather_client import WeatherClient
from golfscore.scoring.daylight import DAYLIGHT_RULES
from golfscore.scoring.explain import breakdown_lines, interpretation
from golfscore.scoring.thresholds import describe_tables
from golfscore.service import score_round

router = APIRouter()


@lru_cache
def _clients() -> tuple[WeatherClient, GeocodingClient]:
    settings = get_settings()
    return WeatherClient(settings), GeocodingClient(settings)


@router.get("/api/health")
def get_health() -> dict:
    return {"status": "ok"}


@router.post("/api/score", response_model=GolfScoreResult)
def post_score(request: ScoreRequest) -> GolfScoreResult:
    """Fetch the forecast for the requested round and return the explainable score."""
    settings = get_settings()
    weather_client, _ = _clients()
    try:
        result = score_round(request, settings=settings, weather_client=weather_client)
        # Re-derived here so the breakdown uses the same weights the score did.
        effective = apply_settings_overrides(settings, request.settings_overrides)
    except ProviderError as e:
        raise HTTPException(
            status_code=502,
            detail={"code": "UPSTREAM_ERROR", "message": "Failed to fetch weather data"},
        ) from e
    except ValueError as e:
        raise HTTPException(
            status_code=400,
            detail={"code": "VALIDATION_ERROR", "message": str(e)},
        ) from e
    # Anything unexpected still gets the structured `{code, message}` body.
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail={"code": "INTERNAL_ERROR", "message": str(e)},
        ) from e

    meta = {
        **result.meta,
        "interpretation": interpretation(result.report.score.overall),
        "breakdown": breakdown_lines(result.report, effective.scoring.weights.model_dump()),
    }
    return result.model_copy(update={"meta": meta})


@router.get("/api/locations", response_model=list[Location])
def get_locations(q: str, limit: int | None = None) -> list[Location]:
    """Search locations; short queries return an empty list rather than an error."""
    _, geocoder = _clients()
    try:
        return geocoder.search(q, limit=limit)
    except ProviderError as e:
        raise HTTPException(
            status_code=502,
            detail={"code": "UPSTREAM_ERROR", "message": "Location search failed"},
        ) from e


@router.get("/api/courses", response_model=list[Location])
def get_courses() -> list[Location]:
    return popular_courses(get_settings())


# Static reference data for rendering the expandable breakdown tables.
@router.get("/api/thresholds")
def get_thresholds() -> dict:
    """Return every bucket table plus the ordered daylight rules."""
    settings = get_settings()
    return {
        "tables": describe_tables(),
        "daylight_rules": [{"label": r.label, "score": r.score} for r in DAYLIGHT_RULES],
        "weights": settings.scoring.weights.model_dump(),
        "wind_speed_unit": settings.weather.wind_speed_unit,
    }
