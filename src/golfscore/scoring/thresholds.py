"""
Threshold tables.

Each factor is scored by looking a value up in an ordered bucket table. Tables cover
(-inf, +inf) without gaps, lower bounds are inclusive and upper bounds exclusive, so a
boundary value such as 15 °C belongs to the bucket that starts at 15.

These tables are the single source of truth: UI code renders them, it never re-declares them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from golfscore.core.errors import ScoringError
from golfscore.domain.models import BucketView

INF = math.inf


@dataclass(frozen=True)
class ThresholdBucket:
    """A half-open `[lower, upper)` range mapped to a 0..100 score."""

    lower: float
    upper: float
    score: int
    label: str

    def contains(self, value: float) -> bool:
        return self.lower <= value < self.upper


TEMPERATURE_BUCKETS: tuple[ThresholdBucket, ...] = (
    ThresholdBucket(-INF, 5, 20, "< 5°C"),
    ThresholdBucket(5, 10, 40, "5-10°C"),
    ThresholdBucket(10, 15, 70, "10-15°C"),
    ThresholdBucket(15, 20, 100, "15-20°C"),
    ThresholdBucket(20, 25, 90, "20-25°C"),
    ThresholdBucket(25, INF, 60, "> 25°C"),
)

WIND_BUCKETS: tuple[ThresholdBucket, ...] = (
    ThresholdBucket(-INF, 2, 100, "< 2 mph"),
    ThresholdBucket(2, 5, 95, "2-5 mph"),
    ThresholdBucket(5, 8, 85, "5-8 mph"),
    ThresholdBucket(8, 12, 70, "8-12 mph"),
    ThresholdBucket(12, 15, 50, "12-15 mph"),
    ThresholdBucket(15, 20, 30, "15-20 mph"),
    ThresholdBucket(20, INF, 10, "> 20 mph"),
)

RAIN_AMOUNT_BUCKETS: tuple[ThresholdBucket, ...] = (
    ThresholdBucket(-INF, 0.5, 85, "< 0.5mm"),
    ThresholdBucket(0.5, 1, 70, "0.5-1mm"),
    ThresholdBucket(1, 2, 50, "1-2mm"),
    ThresholdBucket(2, 5, 25, "2-5mm"),
    ThresholdBucket(5, INF, 5, "> 5mm"),
)

# Used only when the round is forecast completely dry.
RAIN_PROBABILITY_BUCKETS: tuple[ThresholdBucket, ...] = (
    ThresholdBucket(-INF, 10, 100, "< 10% chance"),
    ThresholdBucket(10, 20, 95, "10-20% chance"),
    ThresholdBucket(20, 30, 90, "20-30% chance"),
    ThresholdBucket(30, 40, 85, "30-40% chance"),
    ThresholdBucket(40, INF, 80, "> 40% chance"),
)

CLOUD_COVER_BUCKETS: tuple[ThresholdBucket, ...] = (
    ThresholdBucket(-INF, 20, 100, "< 20%"),
    ThresholdBucket(20, 40, 85, "20-40%"),
    ThresholdBucket(40, 60, 70, "40-60%"),
    ThresholdBucket(60, 80, 50, "60-80%"),
    ThresholdBucket(80, INF, 30, "> 80%"),
)

TABLES: dict[str, tuple[ThresholdBucket, ...]] = {
    "temperature": TEMPERATURE_BUCKETS,
    "wind": WIND_BUCKETS,
    "rain_amount": RAIN_AMOUNT_BUCKETS,
    "rain_probability": RAIN_PROBABILITY_BUCKETS,
    "cloud_cover": CLOUD_COVER_BUCKETS,
}


def find_bucket(buckets: Sequence[ThresholdBucket], value: float, *, factor: str = "value") -> ThresholdBucket:
    """Return the first bucket (ascending) whose range contains `value`.

    Raises:
        ScoringError: If no bucket matches (only possible for NaN given exhaustive tables).
    """
    for bucket in buckets:
        if bucket.contains(value):
            return bucket
    raise ScoringError(f"{factor} {value!r} is outside every scoring bucket")


def bucket_views(buckets: Sequence[ThresholdBucket], active: ThresholdBucket | None) -> list[BucketView]:
    """Render a table as display rows with the matched bucket flagged."""
    return [BucketView(label=b.label, score=b.score, active=b is active) for b in buckets]


def describe_tables() -> dict[str, list[dict[str, object]]]:
    """JSON-friendly dump of every table (infinite bounds become None)."""
    out: dict[str, list[dict[str, object]]] = {}
    for name, buckets in TABLES.items():
        out[name] = [
            {
                "lower": None if math.isinf(b.lower) else b.lower,
                "upper": None if math.isinf(b.upper) else b.upper,
                "score": b.score,
                "label": b.label,
            }
            for b in buckets
        ]
    return out
