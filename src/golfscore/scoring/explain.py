"""
Small explainability formatting helpers.

Used by the CLI (and the API's `breakdown` field) to print the score calculation the
way the breakdown panel shows it.
"""

from __future__ import annotations

from golfscore.domain.models import GolfScoreReport
from golfscore.scoring.numbers import normalize_weights, round_half_up

_FACTOR_LABELS: tuple[tuple[str, str], ...] = (
    ("rain", "Rain"),
    ("temperature", "Temperature"),
    ("wind", "Wind"),
    ("sunshine", "Sunshine"),
)

# (minimum overall score, text), checked top-down.
_INTERPRETATIONS: tuple[tuple[int, str], ...] = (
    (90, "Near-perfect conditions! The weather gods are smiling on you."),
    (75, "Excellent conditions for golf. Very enjoyable round expected."),
    (60, "Good conditions. Some minor challenges but definitely playable."),
    (45, "Decent conditions. Be prepared for some weather-related difficulties."),
    (30, "Challenging conditions. Only for dedicated golfers!"),
)


def interpretation(overall: int) -> str:
    """Return the "what this means" sentence for an overall score."""
    for minimum, text in _INTERPRETATIONS:
        if overall >= minimum:
            return text
    return "Poor conditions. Consider postponing unless you enjoy suffering."


def one_line_summary(report: GolfScoreReport) -> str:
    """Render a compact single-line summary for a report."""
    s = report.score
    return (
        f"overall={s.overall} | temperature={s.temperature} | wind={s.wind} | rain={s.rain} "
        f"| sunshine={s.sunshine} | lightness={s.lightness} (x{report.daylight_modifier:.2f})"
    )


def breakdown_lines(report: GolfScoreReport, weights: dict[str, float]) -> list[str]:
    """Render the score calculation step by step."""
    w = normalize_weights(weights)
    s = report.score
    lines = ["Weather components:"]
    for key, label in _FACTOR_LABELS:
        value = getattr(s, key)
        lines.append(f"  {label}: {value}/100 × {w[key]:.0%} = {round_half_up(value * w[key])}")
    lines.append(f"  Base weather score: {round_half_up(report.base_score)}/100")

    lines.append("Daylight modifier:")
    lines.append(f"  Daylight score: {s.lightness}/100 ({report.lightness.label})")
    if report.daylight_modifier < 1:
        lines.append(
            f"  Playing outside optimal daylight hours reduces score by "
            f"{round_half_up((1 - report.daylight_modifier) * 100)}%"
        )
    if report.daylight_modifier == 0:
        lines.append("  Playing in complete darkness - score reduced to 0!")

    lines.append(
        f"Final: base {round_half_up(report.base_score)} × daylight {report.daylight_modifier:.2f} = {s.overall}/100"
    )
    lines.append(interpretation(s.overall))
    return lines
