from __future__ import annotations

import math

import pytest

from golfscore.core.errors import ScoringError
from golfscore.scoring.thresholds import (
    TABLES,
    TEMPERATURE_BUCKETS,
    WIND_BUCKETS,
    bucket_views,
    describe_tables,
    find_bucket,
)


@pytest.mark.parametrize("name", sorted(TABLES))
def test_tables_cover_the_real_line_without_gaps(name):
    # Open-ended first and last buckets, and each upper bound is the next lower bound.
    buckets = TABLES[name]
    assert buckets[0].lower == -math.inf
    assert buckets[-1].upper == math.inf
    for prev, nxt in zip(buckets, buckets[1:]):
        assert prev.upper == nxt.lower


@pytest.mark.parametrize("name", sorted(TABLES))
def test_every_value_matches_exactly_one_bucket(name):
    buckets = TABLES[name]
    # Values straddle every boundary used by any table.
    for value in (-1000.0, -0.001, 0.0, 0.49, 0.5, 4.999, 5.0, 19.99, 20.0, 45.0, 99.0, 1000.0):
        matches = [b for b in buckets if b.contains(value)]
        assert len(matches) == 1


def test_boundary_values_resolve_to_the_upper_bucket():
    # Lower bounds are inclusive, upper bounds exclusive.
    assert find_bucket(TEMPERATURE_BUCKETS, 15.0).label == "15-20°C"
    assert find_bucket(TEMPERATURE_BUCKETS, 14.999).label == "10-15°C"
    assert find_bucket(WIND_BUCKETS, 20.0).label == "> 20 mph"


def test_nan_falls_outside_every_bucket():
    # NaN compares false against every bound, so no bucket claims it.
    with pytest.raises(ScoringError, match="temperature"):
        find_bucket(TEMPERATURE_BUCKETS, float("nan"), factor="temperature")


def test_bucket_views_flag_only_the_matched_row():
    active = find_bucket(WIND_BUCKETS, 6.0)
    views = bucket_views(WIND_BUCKETS, active)
    assert [v.label for v in views] == [b.label for b in WIND_BUCKETS]
    assert [v.label for v in views if v.active] == ["5-8 mph"]


def test_describe_tables_is_json_friendly():
    tables = describe_tables()
    # Infinite bounds are not valid JSON, so they are emitted as null.
    assert tables["temperature"][0] == {"lower": None, "upper": 5, "score": 20, "label": "< 5°C"}
    assert tables["cloud_cover"][-1]["upper"] is None
