"""
Location search client (Nominatim / OpenStreetMap).

Search results are biased towards golf courses: a query that does not already
mention golf is sent as "<query> golf course".
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from golfscore.config.settings import Settings
from golfscore.core.errors import ProviderError
from golfscore.core.http import get_json
from golfscore.domain.models import GeoPoint, Location

logger = logging.getLogger(__name__)


def popular_courses(settings: Settings) -> list[Location]:
    """Configured shortlist shown before the user types; the first entry is the default."""
    return [
        Location(name=c.name, point=GeoPoint(lat=c.lat, lon=c.lon))
        for c in settings.geocoding.popular_courses
    ]


class GeocodingClient:
    def __init__(self, settings: Settings):
        self._settings = settings

    def build_query(self, query: str) -> str:
        query = query.strip()
        if "golf" in query.lower():
            return query
        return f"{query} {self._settings.geocoding.golf_suffix}"

    def search(self, query: str, *, limit: int | None = None) -> list[Location]:
        """Return matching locations (empty for queries that are too short to search)."""
        cfg = self._settings.geocoding
        if len(query.strip()) < cfg.min_query_length:
        # Single characters match half the planet; skip the request entirely.
            return []

        params = {"q": self.build_query(query), "format": "json", "limit": int(limit or cfg.limit)}
        logger.info("Searching locations for %r", params["q"])
        try:
            payload = get_json(
                cfg.base_url,
                params=params,
                headers={"User-Agent": self._settings.app.user_agent},
                timeout_seconds=self._settings.app.http_timeout_seconds,
            )
        except (httpx.HTTPError, ValueError) as e:
            raise ProviderError(f"Location search failed: {e}") from e

        return parse_search_results(payload)


def parse_search_results(payload: Any) -> list[Location]:
    # Nominatim returns a JSON object (not a list) for errors such as rate limiting.
    if not isinstance(payload, list):
        return []
    out: list[Location] = []
    for item in payload:
        try:
            out.append(
                Location(
                    name=str(item["display_name"]),
                    point=GeoPoint(lat=float(item["lat"]), lon=float(item["lon"])),
                )
            )
        except (KeyError, TypeError, ValueError):
            continue
    return out
