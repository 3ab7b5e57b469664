"""
Shared numeric helpers for the scorers.

- `round_half_up`: scores round .5 upwards (98.5 -> 99), not to the nearest even integer
- `clamp_score`: keep values within 0..100 for stable UI/output
- `normalize_weights`: convert arbitrary non-negative weights into a 1.0-summing distribution
"""

from __future__ import annotations

import math


def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties away from negative infinity."""
    return int(math.floor(float(x) + 0.5))


def clamp_score(x: float) -> int:
    """Round and clamp a number into the integer [0, 100] range."""
    return max(0, min(100, round_half_up(x)))


def normalize_weights(weights: dict[str, float]) -> dict[str, float]:
    """Normalize a dict of weights so they sum to 1.0 (non-negative)."""
    cleaned = {k: max(0.0, float(v)) for k, v in weights.items()}
    total = sum(cleaned.values())
    if total <= 0:
        # All-zero weights: treat every factor equally rather than dividing by zero.
        return {k: 1.0 / len(weights) for k in weights}
    return {k: v / total for k, v in cleaned.items()}
