"""
Daylight modifier.

Classifies the round window against sunrise/sunset and turns the result into a
multiplier for the weather score. The rules overlap (a round that starts in the dark
*and* ends in the dark matches "Very early" before it can reach "Total darkness"), so
they are evaluated strictly in the order listed and the first match wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from golfscore.config.settings import DaylightSettings
from golfscore.core.time import format_hour
from golfscore.domain.models import BucketView, DaylightWindow, RoundWindow, ScoreResult

NO_DATA_LABEL = "Daylight data unavailable"


@dataclass(frozen=True)
class DaylightRule:
    label: str
    score: int
    matches: Callable[[int, int, int, int], bool]


# Each predicate receives (start, end, sunrise, sunset); `end` is not wrapped past midnight.
DAYLIGHT_RULES: tuple[DaylightRule, ...] = (
    DaylightRule("Optimal daylight", 100, lambda s, e, rise, set_: s >= rise + 2 and e <= set_ - 1),
    DaylightRule("Shoulder hours", 85, lambda s, e, rise, set_: s >= rise and e <= set_),
    DaylightRule("Early start", 50, lambda s, e, rise, set_: s < rise and rise - s < 2 and e <= set_),
    DaylightRule("Late finish", 60, lambda s, e, rise, set_: s >= rise and e > set_ and e - set_ < 2),
    DaylightRule("Very early", 10, lambda s, e, rise, set_: s < rise and rise - s >= 2),
    DaylightRule("Very late", 20, lambda s, e, rise, set_: e > set_ and e - set_ >= 2),
    DaylightRule("Total darkness", 0, lambda s, e, rise, set_: s < rise and e > set_),
)


@dataclass(frozen=True)
class DaylightAssessment:
    result: ScoreResult
    modifier: float


def classify_daylight(start_hour: int, end_hour: int, sunrise_hour: int, sunset_hour: int) -> DaylightRule | None:
    """Return the first rule matching the window, or None when no rule applies."""
    for rule in DAYLIGHT_RULES:
        if rule.matches(start_hour, end_hour, sunrise_hour, sunset_hour):
            return rule
    return None


def is_short_day(daylight: DaylightWindow, settings: DaylightSettings) -> bool:
    if not daylight.is_known:
        return False
    return (daylight.sunset_hour - daylight.sunrise_hour) < settings.short_day_hours


def score_daylight(
    round_window: RoundWindow,
    daylight: DaylightWindow,
    settings: DaylightSettings | None = None,
) -> DaylightAssessment:
    """Score the round against the daylight window and derive the multiplier.

    Missing sunrise/sunset is a recognised degraded mode: the neutral score is reported
    and the multiplier stays at 1.0 so the weather score passes through untouched.
    """
    cfg = settings or DaylightSettings()
    views = [BucketView(label=r.label, score=r.score) for r in DAYLIGHT_RULES]
    start, end = round_window.start_hour, round_window.end_hour

    # Degraded mode: report the neutral score but leave the weather score untouched.
    if not daylight.is_known:
        explanation = (
            f"Playing: {format_hour(start)}-{format_hour(end)}\n"
            "Daylight: no sunrise/sunset data\n"
            f"Score: {cfg.neutral_score}/100 (not applied)"
        )
        result = ScoreResult(score=cfg.neutral_score, label=NO_DATA_LABEL, explanation=explanation, buckets=views, modifier=1.0)
        return DaylightAssessment(result=result, modifier=1.0)

    sunrise, sunset = daylight.sunrise_hour, daylight.sunset_hour
    rule = classify_daylight(start, end, sunrise, sunset)
    # No rule matched: fall back to the neutral score rather than failing.
    score = rule.score if rule else cfg.neutral_score
    label = rule.label if rule else "Unknown"

    modifier = score / 100
    lines = [
        f"Playing: {format_hour(start)}-{format_hour(end)}",
        f"Daylight: {format_hour(sunrise)}-{format_hour(sunset)}",
        f"Scoring bracket: {label}",
        f"Score: {score}/100",
    ]
    if cfg.short_day_penalty and is_short_day(daylight, cfg):
        modifier *= cfg.short_day_multiplier
        lines.append(f"Short day ({sunset - sunrise}h of light): × {cfg.short_day_multiplier:.0%}")

    views = [BucketView(label=r.label, score=r.score, active=r is rule) for r in DAYLIGHT_RULES]
    result = ScoreResult(score=score, label=label, explanation="\n".join(lines), buckets=views, modifier=modifier)
    return DaylightAssessment(result=result, modifier=modifier)
