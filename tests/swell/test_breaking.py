# ABOUTME: Tests for breaking wave height calculation and display formatting
# ABOUTME: Validates period, direction and tide-push multipliers

import pytest

from surfcast.spots.profiles import SPOT_PROFILES
from surfcast.swell.breaking import (
    calculate_breaking_wave_height,
    calculate_tide_push_multiplier,
    format_wave_height,
    get_direction_factor,
    get_period_multiplier,
)

LIDO = SPOT_PROFILES["lido"]
ROCKAWAY = SPOT_PROFILES["rockaway"]


class TestPeriodMultiplier:
    """Tests for get_period_multiplier"""

    @pytest.mark.parametrize("period,expected", [
        (3, 0.6), (4.9, 0.6),
        (5, 0.8), (7.9, 0.8),
        (8, 1.0), (10.5, 1.0),
        (11, 1.1), (13.9, 1.1),
        (14, 1.15), (20, 1.15),
    ])
    def test_buckets(self, period, expected):
        assert get_period_multiplier(period) == expected

    def test_non_decreasing(self):
        periods = [p / 10 for p in range(10, 250)]
        values = [get_period_multiplier(p) for p in periods]
        assert values == sorted(values)


class TestDirectionFactor:
    """Tests for get_direction_factor"""

    def test_unknown_direction_is_neutral(self):
        assert get_direction_factor(None, LIDO) == 1.0

    def test_open_window_is_neutral(self):
        assert get_direction_factor(150, LIDO) == 1.0

    def test_west_block(self):
        assert get_direction_factor(270, LIDO) == 0.1

    @pytest.mark.parametrize("direction,expected", [(102, 0.75), (97, 0.6), (92, 0.5), (60, 0.35)])
    def test_east_wrap_graduates(self, direction, expected):
        assert get_direction_factor(direction, LIDO) == expected


class TestTidePush:
    """Tests for calculate_tide_push_multiplier"""

    def test_rising_mid_tide_on_head_high_waves(self):
        assert calculate_tide_push_multiplier("rising", 2.0, 4.0) == 1.15

    def test_heavier_push_above_five_feet(self):
        assert calculate_tide_push_multiplier("rising", 2.0, 5.5) == 1.25

    @pytest.mark.parametrize("phase,tide,breaking", [
        ("falling", 2.0, 4.0),
        (None, 2.0, 4.0),
        ("rising", None, 4.0),
        ("rising", 0.0, 4.0),
        ("rising", 3.5, 4.0),
        ("rising", 2.0, 2.9),
    ])
    def test_inactive(self, phase, tide, breaking):
        assert calculate_tide_push_multiplier(phase, tide, breaking) == 1.0


class TestBreakingWaveHeight:
    """Tests for calculate_breaking_wave_height"""

    def test_baseline(self):
        # 3ft @ 9s from the window at Rockaway: 3 × 1.1 × 1.0 × 1.0
        assert calculate_breaking_wave_height(3.0, 9, ROCKAWAY, 150) == pytest.approx(3.3)

    def test_long_period_groundswell_at_lido(self):
        # 3ft @ 14s: 3 × 1.2 × 1.15
        assert calculate_breaking_wave_height(3.0, 14, LIDO, 150) == pytest.approx(4.14)

    def test_blocked_direction_kills_height(self):
        assert calculate_breaking_wave_height(4.0, 10, LIDO, 270) == pytest.approx(0.44)

    def test_unknown_direction_is_not_penalized(self):
        with_direction = calculate_breaking_wave_height(3.0, 9, ROCKAWAY, 150)
        without = calculate_breaking_wave_height(3.0, 9, ROCKAWAY, None)
        assert with_direction == without

    def test_tide_push_applies_after_other_multipliers(self):
        # 3ft @ 9s = 3.3ft before push, rising 2ft tide adds 15%
        height = calculate_breaking_wave_height(3.0, 9, ROCKAWAY, 150, tide_ft=2.0, tide_phase="rising")
        assert height == pytest.approx(3.3 * 1.15)

    def test_small_swell_damping(self):
        # 1.5ft @ 9s: 1.5 × 0.8 × 1.0
        assert calculate_breaking_wave_height(1.5, 9, LIDO, 150) == pytest.approx(1.2)


class TestFormatWaveHeight:
    """Tests for format_wave_height"""

    @pytest.mark.parametrize("height,expected", [
        (0.3, "<1ft"),
        (1.0, "1ft"),
        (2.9, "3ft"),
        (2.6, "2-3ft"),
        (4.4, "4-5ft"),
        (4.8, "5ft"),
    ])
    def test_formatting(self, height, expected):
        assert format_wave_height(height) == expected
