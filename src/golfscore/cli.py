"""
GolfScore CLI entrypoint.

This CLI is intended for quick local checks without the web UI.
It delegates all scoring logic to `golfscore.service.score_round`.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from golfscore.config.settings import get_settings
from golfscore.core.errors import GolfScoreError
from golfscore.core.logging import configure_logging
from golfscore.core.time import format_hour, parse_date, parse_tee_time
from golfscore.domain.models import GeoPoint, Location, RoundWindow, ScoreRequest
from golfscore.ingestion.geocoding_client import GeocodingClient, popular_courses
from golfscore.scoring.explain import breakdown_lines, one_line_summary
from golfscore.service import score_round


def _resolve_location(args: argparse.Namespace) -> Location:
    """Use explicit coordinates, else the named popular course, else the default course."""
    settings = get_settings()
    courses = popular_courses(settings)
    # Explicit coordinates win over any course name.
    if args.lat is not None and args.lon is not None:
        return Location(name=args.name or f"{args.lat:.4f},{args.lon:.4f}", point=GeoPoint(lat=args.lat, lon=args.lon))
    if args.name:
        for course in courses:
            if course.name.lower().startswith(args.name.lower()):
                return course
        raise ValueError(f"Unknown course '{args.name}'; pass --lat/--lon or see `golfscore courses`")
    if not courses:
        raise ValueError("No default course configured; pass --lat/--lon")
    return courses[0]


def _cmd_score(args: argparse.Namespace) -> int:
    """Handle the `score` subcommand."""
    settings = get_settings()
    tee_time = parse_tee_time(args.tee_time) if args.tee_time else None
    start_hour = tee_time.hour if tee_time else settings.round.default_start_hour
    length = int(args.round_length or settings.round.default_length_hours)

    # Per-run knobs go through the same whitelist the API uses.
    overrides: dict[str, Any] | None = None
    if args.short_day_penalty:
        overrides = {"scoring": {"daylight": {"short_day_penalty": True}}}

    request = ScoreRequest(
        location=_resolve_location(args),
        play_date=parse_date(args.date),
        round_window=RoundWindow(start_hour=start_hour, round_length_hours=length),
        settings_overrides=overrides,
    )
    result = score_round(request, settings=settings)

    # JSON mode prints the full result (including the timeline) and nothing else.
    if args.json:
        print(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2))
        return 0

    report = result.report
    rw = request.round_window
    print(f"{request.location.name} on {request.play_date.isoformat()}")
    print(f"Round: {format_hour(rw.start_hour)}-{format_hour(rw.display_end_hour)} ({rw.round_length_hours} hours)")
    if result.meta.get("forecast") == "fallback":
        print("No forecast available for this date yet; showing typical conditions.")
    print("Timeline:")
    for hour in result.timeline:
        gust = f" (gust {hour.wind_gust})" if hour.wind_gust is not None else ""
        print(
            f"  {hour.time} {hour.icon} {hour.temperature}°C wind {hour.wind_speed} mph{gust} "
            f"cloud {hour.cloud_cover}% rain {hour.rain_mm:.1f}mm ({hour.rain_probability}%) {hour.description}"
        )
    print(one_line_summary(report))
    if args.explain:
        for factor in (report.temperature, report.wind, report.rain, report.sunshine, report.lightness):
            print("  " + factor.explanation.replace("\n", "\n  "))
        for line in breakdown_lines(report, settings.scoring.weights.model_dump()):
            print(line)
    print(f"{report.score.emoji}  {report.score.recommendation}  [{report.score.overall}/100]")
    return 0


def _cmd_search(args: argparse.Namespace) -> int:
    settings = get_settings()
    results = GeocodingClient(settings).search(args.query, limit=args.limit)
    if args.json:
        print(json.dumps([r.model_dump(mode="json") for r in results], ensure_ascii=False, indent=2))
        return 0
    if not results:
        print("No locations found.")
    for loc in results:
        print(f"{loc.point.lat:.4f},{loc.point.lon:.4f}  {loc.name}")
    return 0


def _cmd_courses(_: argparse.Namespace) -> int:
    for course in popular_courses(get_settings()):
        print(f"{course.point.lat:.4f},{course.point.lon:.4f}  {course.name}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the GolfScore CLI."""
    parser = argparse.ArgumentParser(prog="golfscore")
    sub = parser.add_subparsers(dest="command", required=True)

    sc = sub.add_parser("score", help="Score the weather for a round of golf.")
    sc.add_argument("--date", required=True, help="ISO date (e.g. 2025-09-26)")
    sc.add_argument("--tee-time", default=None, help="24h tee time, HH:MM (default from config)")
    sc.add_argument("--round-length", type=int, choices=[3, 4, 5, 6], default=None, help="Hours (default from config)")
    sc.add_argument("--lat", type=float, default=None)
    sc.add_argument("--lon", type=float, default=None)
    sc.add_argument("--name", default=None, help="Location label, or the prefix of a popular course")
    sc.add_argument(
        "--short-day-penalty",
        action="store_true",
        help="Apply the extra x0.9 daylight penalty on days with under 9 hours of light",
    )
    sc.add_argument("--explain", action="store_true", help="Print the per-factor breakdown")
    sc.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    sc.set_defaults(func=_cmd_score)

    se = sub.add_parser("search", help="Search golf courses / places by name.")
    se.add_argument("query")
    se.add_argument("--limit", type=int, default=None)
    se.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    se.set_defaults(func=_cmd_search)

    co = sub.add_parser("courses", help="List the built-in popular courses.")
    co.set_defaults(func=_cmd_courses)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m golfscore.cli`."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    func: Any = getattr(args, "func")
    # Domain and validation errors become a one-line message and exit code 1.
    try:
        return int(func(args))
    except (GolfScoreError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
