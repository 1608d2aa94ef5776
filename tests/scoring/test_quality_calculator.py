# ABOUTME: Tests for the quality sub-scorers and post-sum adjustments
# ABOUTME: Each scorer is exercised on its own without building full conditions

import pytest

from surfcast.scoring.calculator import QualityCalculator
from surfcast.scoring.models import SurfConditions
from surfcast.spots.profiles import SPOT_PROFILES
from surfcast.swell.models import SECONDARY, SwellComponent

LIDO = SPOT_PROFILES["lido"]
LONG_BEACH = SPOT_PROFILES["long-beach"]
ROCKAWAY = SPOT_PROFILES["rockaway"]


@pytest.fixture
def calculator():
    return QualityCalculator()


class TestSwellSize:
    """Tests for score_swell_size"""

    @pytest.mark.parametrize("height,expected", [
        (0.0, 5), (0.99, 5), (1.0, 20), (1.99, 20), (2.0, 35),
        (3.0, 50), (4.99, 50), (5.0, 60), (12.0, 60),
    ])
    def test_buckets(self, calculator, height, expected):
        assert calculator.score_swell_size(height) == expected


class TestDirection:
    """Tests for score_direction"""

    def test_unknown_direction_is_neutral(self, calculator):
        assert calculator.score_direction(None, LIDO) == 0

    @pytest.mark.parametrize("direction", [110, 145, 180])
    def test_within_tolerance_scores_zero(self, calculator, direction):
        assert calculator.score_direction(direction, LIDO) == 0

    def test_outside_tolerance_scores_standard_penalty(self, calculator):
        assert calculator.score_direction(200, LIDO) == -10
        assert calculator.score_direction(340, LIDO) == -10

    def test_blocked_bands(self, calculator):
        assert calculator.score_direction(270, LIDO) == -20
        assert calculator.score_direction(300, LIDO) == -18

    @pytest.mark.parametrize("direction,expected", [(102, -5), (97, -8), (92, -12), (45, -15)])
    def test_east_wrap_graduates(self, calculator, direction, expected):
        assert calculator.score_direction(direction, LIDO) == expected


class TestTide:
    """Tests for score_tide"""

    def test_unknown_tide_is_neutral(self, calculator):
        assert calculator.score_tide(None, 3.0, LIDO) == 0

    def test_shorebreak_above_five_feet(self, calculator):
        assert calculator.score_tide(5.5, 6.0, LIDO) == -20
        assert calculator.score_tide(5.5, 1.0, ROCKAWAY) == -20

    def test_big_vs_small_waves(self, calculator):
        assert calculator.score_tide(4.5, 4.5, ROCKAWAY) == 10
        assert calculator.score_tide(4.5, 2.0, ROCKAWAY) == 4
        assert calculator.score_tide(3.0, 4.5, ROCKAWAY) == 20
        assert calculator.score_tide(3.0, 2.0, ROCKAWAY) == 15
        assert calculator.score_tide(2.0, 4.5, ROCKAWAY) == 15
        assert calculator.score_tide(2.0, 2.0, ROCKAWAY) == 20

    def test_high_tide_small_wave_penalty_is_spot_specific(self, calculator):
        assert calculator.score_tide(3.8, 2.5, LIDO) == -10
        assert calculator.score_tide(3.8, 2.5, LONG_BEACH) == -10
        assert calculator.score_tide(3.8, 2.5, ROCKAWAY) == 4
        assert calculator.score_tide(3.8, 3.5, LIDO) == 4


class TestWind:
    """Tests for score_wind"""

    def test_missing_wind_is_neutral(self, calculator):
        assert calculator.score_wind(None, 0, LIDO) == 0
        assert calculator.score_wind(10, None, LIDO) == 0

    def test_premium_offshore(self, calculator):
        assert calculator.score_wind(10, 0, LONG_BEACH) == 20
        assert calculator.score_wind(15, 0, LONG_BEACH) == 15
        assert calculator.score_wind(30, 0, LONG_BEACH) == 10

    def test_lido_gale_override(self, calculator):
        assert calculator.score_wind(22, 0, LIDO) == 10
        assert calculator.score_wind(30, 0, LIDO) == 5

    def test_ne_depends_on_wave_size(self, calculator):
        assert calculator.score_wind(10, 45, LIDO, breaking_height_ft=2.0) == 3
        assert calculator.score_wind(10, 45, LIDO, breaking_height_ft=4.5) == 8

    def test_rockaway_tolerates_wnw_and_west(self, calculator):
        assert calculator.score_wind(8, 300, ROCKAWAY) == 12
        assert calculator.score_wind(8, 300, LIDO) == 5
        assert calculator.score_wind(12, 270, ROCKAWAY) == -12
        assert calculator.score_wind(12, 270, LIDO) == -20

    def test_onshore_worsens_with_speed(self, calculator):
        assert calculator.score_wind(5, 180, LIDO) == -10
        assert calculator.score_wind(8, 180, LIDO) == -45
        assert calculator.score_wind(12, 180, LIDO) == -60


class TestGusts:
    """Tests for score_gusts"""

    def test_onshore_harsher_than_cross_shore(self, calculator):
        assert calculator.score_gusts(10, 18, 180) == -10
        assert calculator.score_gusts(10, 18, 90) == -5

    def test_gust_buckets(self, calculator):
        assert calculator.score_gusts(10, 22, 180) == -15
        assert calculator.score_gusts(10, 26, 180) == -20
        assert calculator.score_gusts(10, 26, 270) == -10

    def test_offshore_gusts_are_free(self, calculator):
        assert calculator.score_gusts(10, 26, 0) == 0
        assert calculator.score_gusts(10, 26, 315) == 0
        assert calculator.score_gusts(10, 26, 45) == 0

    def test_steady_or_light_gusts_ignored(self, calculator):
        assert calculator.score_gusts(15, 18, 180) == 0
        assert calculator.score_gusts(5, 14, 180) == 0
        assert calculator.score_gusts(10, None, 180) == 0


def conditions(**overrides):
    values = dict(
        breaking_height_ft=1.5,
        swell_height_ft=1.8,
        period_s=9.0,
        swell_direction_deg=150.0,
        wind_speed_kts=8.0,
        wind_direction_deg=0.0,
    )
    values.update(overrides)
    return SurfConditions(**values)


class TestOffshoreSmallWaveBonus:
    """Tests for offshore_small_wave_bonus"""

    def test_lido_premium_offshore(self, calculator):
        assert calculator.offshore_small_wave_bonus(conditions(), LIDO) == 15

    def test_graduated_by_tier(self, calculator):
        assert calculator.offshore_small_wave_bonus(conditions(wind_direction_deg=45), LIDO) == 5
        assert calculator.offshore_small_wave_bonus(conditions(wind_direction_deg=180), LIDO) == 0

    def test_only_for_lido(self, calculator):
        assert calculator.offshore_small_wave_bonus(conditions(), LONG_BEACH) == 0

    def test_requires_small_waves_and_period(self, calculator):
        assert calculator.offshore_small_wave_bonus(conditions(breaking_height_ft=2.5), LIDO) == 0
        assert calculator.offshore_small_wave_bonus(conditions(period_s=7.0), LIDO) == 0
        assert calculator.offshore_small_wave_bonus(conditions(wind_speed_kts=None), LIDO) == 0


class TestSecondarySwellBonus:
    """Tests for secondary_swell_bonus"""

    def secondary(self, height=2.0, period=11.0, direction=150.0):
        return SwellComponent(height, period, direction, SECONDARY)

    def test_long_period_secondary_from_good_direction(self, calculator):
        c = conditions(period_s=6.0, secondary_swell=self.secondary())
        assert calculator.secondary_swell_bonus(c) == 15

    def test_other_direction_gets_less(self, calculator):
        c = conditions(period_s=6.0, secondary_swell=self.secondary(direction=90))
        assert calculator.secondary_swell_bonus(c) == 8

    def test_mid_period_secondary(self, calculator):
        c = conditions(period_s=6.0, secondary_swell=self.secondary(period=9.0))
        assert calculator.secondary_swell_bonus(c) == 10

    def test_not_applied_when_dominant_is_organized(self, calculator):
        c = conditions(period_s=8.0, secondary_swell=self.secondary())
        assert calculator.secondary_swell_bonus(c) == 0

    def test_not_applied_for_small_secondary(self, calculator):
        c = conditions(period_s=6.0, secondary_swell=self.secondary(height=1.0))
        assert calculator.secondary_swell_bonus(c) == 0
        assert calculator.secondary_swell_bonus(conditions(period_s=6.0)) == 0


class TestWindSlop:
    """Tests for wind_slop_penalty"""

    def test_short_period_with_size(self, calculator):
        assert calculator.wind_slop_penalty(conditions(period_s=5.0, swell_height_ft=2.5)) == -15

    def test_not_applied(self, calculator):
        assert calculator.wind_slop_penalty(conditions(period_s=5.5, swell_height_ft=2.5)) == 0
        assert calculator.wind_slop_penalty(conditions(period_s=4.0, swell_height_ft=1.5)) == 0
        assert calculator.wind_slop_penalty(conditions(period_s=None)) == 0
