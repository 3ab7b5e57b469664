from __future__ import annotations

# We use pytest because the repository already standardizes on it for automated checks.
import pytest

# We import the existing Settings loader so tests run with the real default config structure.
from golfscore.config.settings import get_settings

# We test the override helper directly because it is pure (no network).
from golfscore.config.overrides import apply_settings_overrides


def test_apply_settings_overrides_returns_same_object_when_none():
    settings = get_settings()

    out = apply_settings_overrides(settings, None)

    # Identity equality is intentional here: the function returns early without rebuilding the model.
    assert out is settings


def test_apply_settings_overrides_can_enable_the_short_day_penalty():
    # Load the baseline settings (do not mutate it; it is shared via lru_cache).
    settings = get_settings()

    out = apply_settings_overrides(settings, {"scoring": {"daylight": {"short_day_penalty": True}}})

    assert out.scoring.daylight.short_day_penalty is True
    # Untouched siblings survive the deep merge.
    assert out.scoring.daylight.short_day_hours == 9
    # The original shared settings should remain unchanged (no cross-request leakage).
    assert settings.scoring.daylight.short_day_penalty is False


def test_apply_settings_overrides_rejects_disallowed_keys_with_clear_path():
    settings = get_settings()

    # Provider URLs are not tunable per request.
    overrides = {"weather": {"base_url": "http://evil.invalid"}}

    with pytest.raises(ValueError, match=r"disallowed key: 'weather'"):
        apply_settings_overrides(settings, overrides)


def test_apply_settings_overrides_rejects_wrong_value_shapes_for_restricted_subtrees():
    settings = get_settings()

    # `scoring` is a restricted subtree, so its override must be a mapping, not a scalar.
    with pytest.raises(ValueError, match=r"settings_overrides key 'scoring' must be a mapping"):
        apply_settings_overrides(settings, {"scoring": 1})


def test_apply_settings_overrides_revalidates_values():
    settings = get_settings()

    # Pydantic rejects an out-of-range multiplier after the merge.
    with pytest.raises(ValueError):
        apply_settings_overrides(settings, {"scoring": {"daylight": {"short_day_multiplier": 3}}})


def test_apply_settings_overrides_accepts_a_partial_weights_mapping():
    settings = get_settings()

    # Only one weight is overridden; the merge keeps the other three from the baseline.
    out = apply_settings_overrides(settings, {"scoring": {"weights": {"rain": 0.5}}})

    assert out.scoring.weights.rain == 0.5
    assert out.scoring.weights.sunshine == 0.15
