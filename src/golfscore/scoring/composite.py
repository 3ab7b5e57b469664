"""
Composite scorer.

Combines the four weather factor scores into a weighted base score, applies the
daylight multiplier, and picks the recommendation tier. This is the only place the
headline "Golf Score" is computed; everything that renders it calls `score_golf_weather`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from golfscore.config.settings import ScoringSettings
from golfscore.domain.models import (
    DaylightWindow,
    GolfScoreReport,
    GolfWeatherScore,
    RoundWindow,
    WeatherInputs,
)
from golfscore.scoring.daylight import score_daylight
from golfscore.scoring.factors import score_cloud_cover, score_rain, score_temperature, score_wind
from golfscore.scoring.numbers import clamp_score, normalize_weights

ComponentName = Literal["temperature", "wind", "rain", "sunshine"]


@dataclass(frozen=True)
class RecommendationTier:
    text: str
    emoji: str


DARK_TIER = RecommendationTier("Playing in the dark? Might as well go to the pub!", "🌚🍺")
DUSK_TIER = RecommendationTier("Finishing in darkness - this will be grim!", "🌚⛳")

# (minimum overall score, tier), checked top-down.
SCORE_TIERS: tuple[tuple[int, RecommendationTier], ...] = (
    (90, RecommendationTier("PERFECT CONDITIONS! We're going to have a ball", "⛳🌟")),
    (75, RecommendationTier("For the time of year, we'll take it.", "⛳😄")),
    (60, RecommendationTier("Decent - we've done worse", "⛳😊")),
    (45, RecommendationTier("Yuk but we'll survive!", "⛳🌧️")),
    (30, RecommendationTier("This will be grim - are we sure it's a good idea?", "⛳💨")),
)
WORST_TIER = RecommendationTier("Can we get our money back and just go on the piss instead?", "🍺🌧️")

DUSK_MODIFIER_THRESHOLD = 0.2


def recommend_tier(overall: int, daylight_modifier: float) -> RecommendationTier:
    """Pick the recommendation; darkness overrides the weather-based tiers."""
    if daylight_modifier == 0:
        return DARK_TIER
    if daylight_modifier <= DUSK_MODIFIER_THRESHOLD:
        return DUSK_TIER
    for minimum, tier in SCORE_TIERS:
        if overall >= minimum:
            return tier
    return WORST_TIER


def score_band(overall: int) -> Literal["good", "fair", "poor"]:
    """Coarse colour band for the score ring."""
    if overall >= 75:
        return "good"
    if overall >= 50:
        return "fair"
    return "poor"


def weighted_base(scores: dict[ComponentName, int], weights: dict[str, float]) -> float:
    """Weighted sum of the factor scores (weights renormalised to sum to 1)."""
    w = normalize_weights(weights)
    return sum(float(scores[name]) * w[name] for name in scores)


def score_golf_weather(
    inputs: WeatherInputs,
    round_window: RoundWindow,
    daylight: DaylightWindow,
    settings: ScoringSettings | None = None,
) -> GolfScoreReport:
    """Compute the full, explainable golf weather score.

    Pure and deterministic: the same inputs and settings always produce the same report.
    """
    cfg = settings or ScoringSettings()

    temperature = score_temperature(inputs.avg_temperature_c)
    wind = score_wind(inputs.avg_wind_speed, inputs.max_wind_gust)
    rain = score_rain(inputs.total_rain_mm, inputs.avg_rain_probability_percent)
    sunshine = score_cloud_cover(inputs.avg_cloud_cover_percent)
    lightness = score_daylight(round_window, daylight, cfg.daylight)

    base = weighted_base(
        {
            "temperature": temperature.score,
            "wind": wind.score,
            "rain": rain.score,
            "sunshine": sunshine.score,
        },
        cfg.weights.model_dump(),
    )
    # The modifier multiplies the base directly; it is not re-bucketed.
    modifier = max(0.0, min(1.0, lightness.modifier))
    overall = clamp_score(base * modifier)
    # Darkness tiers are chosen from the modifier, so a high base cannot mask a night round.
    tier = recommend_tier(overall, modifier)

    score = GolfWeatherScore(
        temperature=temperature.score,
        wind=wind.score,
        rain=rain.score,
        sunshine=sunshine.score,
        lightness=lightness.result.score,
        overall=overall,
        recommendation=tier.text,
        emoji=tier.emoji,
    )
    return GolfScoreReport(
        score=score,
        temperature=temperature,
        wind=wind,
        rain=rain,
        sunshine=sunshine,
        lightness=lightness.result,
        base_score=base,
        daylight_modifier=modifier,
        band=score_band(overall),
        inputs=inputs,
    )
