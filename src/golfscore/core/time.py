"""
Tee-time and provider timestamp parsing.

Open-Meteo returns local wall-clock timestamps without an offset (`2025-09-26T12:00`)
when called with `timezone=auto`, so hour-of-day is read straight off the naive value.
"""

from __future__ import annotations

from datetime import date, datetime, time


def parse_tee_time(value: str) -> time:
    """Parse `HH:MM` (or `HH`) into a `time`.

    Raises:
        ValueError: If the value is not a valid 24h clock time.
    """
    value = value.strip()
    if ":" not in value:
        value = f"{value}:00"
    hours, minutes = value.split(":", 1)
    return time(hour=int(hours), minute=int(minutes))


def parse_date(value: str) -> date:
    """Parse an ISO `YYYY-MM-DD` date."""
    return date.fromisoformat(value.strip())


def parse_provider_timestamp(value: str) -> datetime:
    """Parse an Open-Meteo local timestamp; a trailing `Z` is accepted as UTC."""
    value = str(value).strip()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def hour_of_day(value: str | None) -> int | None:
    """Return the hour component of a provider timestamp, or None when missing/unparseable."""
    if not value:
        return None
    try:
        return parse_provider_timestamp(value).hour
    except ValueError:
        return None


def format_hour(hour: int) -> str:
    """Render an hour (possibly past midnight) as a `HH:00` clock label."""
    return f"{hour % 24:02d}:00"
