"""
Factor scorers.

Each scorer is a pure function from aggregated weather values to an explainable
`ScoreResult`: the 0..100 score, the label of the bucket that matched, a multi-line
explanation for the breakdown panel, and the full table with the matched row flagged.

Comparisons always use the raw (unrounded) value; rounding only happens in the text.
"""

from __future__ import annotations

from golfscore.domain.models import ScoreResult
from golfscore.scoring.numbers import clamp_score, round_half_up
from golfscore.scoring.thresholds import (
    CLOUD_COVER_BUCKETS,
    RAIN_AMOUNT_BUCKETS,
    RAIN_PROBABILITY_BUCKETS,
    TEMPERATURE_BUCKETS,
    WIND_BUCKETS,
    bucket_views,
    find_bucket,
)

GUST_PENALTY_MIN_GUST = 10.0
GUST_PENALTY_MARGIN = 10.0
GUST_PENALTY_MULTIPLIER = 0.8

# Light rain is softened further by how likely it is: (amount upper bound, probability divisor).
RAIN_PROBABILITY_DIVISORS: tuple[tuple[float, float], ...] = ((0.5, 10.0), (1.0, 15.0), (2.0, 20.0))


def score_temperature(temperature_c: float) -> ScoreResult:
    bucket = find_bucket(TEMPERATURE_BUCKETS, temperature_c, factor="temperature")
    explanation = (
        f"Temperature: {temperature_c:.1f}°C\n"
        f"Scoring bracket: {bucket.label}\n"
        f"Score: {bucket.score}/100"
    )
    return ScoreResult(
        score=bucket.score,
        label=bucket.label,
        explanation=explanation,
        buckets=bucket_views(TEMPERATURE_BUCKETS, bucket),
    )


def has_gust_penalty(wind_speed: float, wind_gust: float) -> bool:
    """Gusty rounds: gusts above 10 mph that are also more than 10 mph over the mean wind."""
    return wind_gust > GUST_PENALTY_MIN_GUST and wind_gust > wind_speed + GUST_PENALTY_MARGIN


def score_wind(wind_speed: float, wind_gust: float | None = None) -> ScoreResult:
    """Score mean wind speed (mph), penalising gusty rounds by 20%.

    A missing gust reading falls back to the wind speed itself, which can never trigger
    the penalty.
    """
    gust = wind_speed if wind_gust is None else wind_gust
    bucket = find_bucket(WIND_BUCKETS, wind_speed, factor="wind speed")
    penalised = has_gust_penalty(wind_speed, gust)
    modifier = GUST_PENALTY_MULTIPLIER if penalised else 1.0
    final = clamp_score(bucket.score * modifier) if penalised else bucket.score

    lines = [f"Wind Speed: {wind_speed:.1f} mph", f"Base bracket: {bucket.label}"]
    if penalised:
        lines.append(f"Gust penalty: × 80% (gusts up to {round_half_up(gust)} mph)")
    lines.append(f"Final Score: {final}/100")

    return ScoreResult(
        score=final,
        label=bucket.label,
        explanation="\n".join(lines),
        buckets=bucket_views(WIND_BUCKETS, bucket),
        base_score=bucket.score,
        modifier=modifier,
    )


def score_cloud_cover(cloud_cover_percent: float) -> ScoreResult:
    bucket = find_bucket(CLOUD_COVER_BUCKETS, cloud_cover_percent, factor="cloud cover")
    explanation = (
        f"Cloud Cover: {clamp_score(cloud_cover_percent)}%\n"
        f"Scoring bracket: {bucket.label}\n"
        f"Score: {bucket.score}/100"
    )
    return ScoreResult(
        score=bucket.score,
        label=bucket.label,
        explanation=explanation,
        buckets=bucket_views(CLOUD_COVER_BUCKETS, bucket),
    )


def _rain_probability_adjustment(rain_mm: float, probability: float) -> float:
    if probability <= 0:
        return 0.0
    for upper, divisor in RAIN_PROBABILITY_DIVISORS:
        if rain_mm < upper:
            return probability / divisor
    return 0.0


def score_rain(rain_mm: float, rain_probability_percent: float) -> ScoreResult:
    """Score total rain over the round.

    A dry forecast is graded on probability alone. Once any rain is forecast the amount
    decides the bracket, and light amounts (< 2mm) lose a few more points in proportion
    to the probability.
    """
    if rain_mm == 0:
        bucket = find_bucket(RAIN_PROBABILITY_BUCKETS, rain_probability_percent, factor="rain probability")
        explanation = (
            "No rain expected\n"
            f"Probability: {clamp_score(rain_probability_percent)}%\n"
            f"Bracket: {bucket.label}\n"
            f"Final Score: {bucket.score}/100"
        )
        return ScoreResult(
            score=bucket.score,
            label=bucket.label,
            explanation=explanation,
            buckets=bucket_views(RAIN_PROBABILITY_BUCKETS, bucket),
            base_score=bucket.score,
        )

    bucket = find_bucket(RAIN_AMOUNT_BUCKETS, rain_mm, factor="rain amount")
    adjustment = _rain_probability_adjustment(rain_mm, rain_probability_percent)
    final = clamp_score(bucket.score - adjustment)

    lines = [f"Rain amount: {rain_mm:.1f}mm", f"Base bracket: {bucket.label} ({bucket.score} points)"]
    if adjustment > 0:
        lines.append(
            f"Probability adjustment: -{clamp_score(adjustment)} "
            f"({clamp_score(rain_probability_percent)}% chance)"
        )
    lines.append(f"Final Score: {final}/100")

    return ScoreResult(
        score=final,
        label=bucket.label,
        explanation="\n".join(lines),
        buckets=bucket_views(RAIN_AMOUNT_BUCKETS, bucket),
        base_score=bucket.score,
        adjustment=adjustment,
    )
