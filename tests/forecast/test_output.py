# ABOUTME: Tests for forecast output generation per spot and hour
# ABOUTME: Validates dominant swell wiring, flat output, timelines and buoy-derived hours

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from surfcast.buoy.models import BuoyReading, WindObservation
from surfcast.forecast.models import ForecastHour
from surfcast.forecast.output import (
    generate_forecast_output,
    generate_timeline,
    hour_from_buoy,
    underlying_swell,
)
from surfcast.forecast.tides import RISING, TideState
from surfcast.scoring.calculator import calculate_quality_score
from surfcast.scoring.models import ZERO_BREAKDOWN, SurfConditions
from surfcast.spots.profiles import SPOT_PROFILES, UnknownSpotError
from surfcast.swell.breaking import calculate_breaking_wave_height
from surfcast.swell.models import PRIMARY, SECONDARY, WIND, SwellComponent

T0 = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


def good_hour(timestamp=T0, **overrides):
    fields = dict(
        timestamp=timestamp,
        primary_height_ft=3.0,
        primary_period_s=10.0,
        primary_direction_deg=150.0,
        secondary_height_ft=1.0,
        secondary_period_s=12.0,
        secondary_direction_deg=170.0,
        wind_wave_height_ft=1.0,
        wind_wave_period_s=4.0,
        wind_wave_direction_deg=200.0,
        wave_height_ft=3.4,
        wind_speed_kts=8.0,
        wind_direction_deg=0.0,
        tide_ft=2.0,
        tide_phase="falling",
    )
    fields.update(overrides)
    return ForecastHour(**fields)


class TestGenerateForecastOutput:
    """Tests for generate_forecast_output"""

    def test_matches_direct_calculation(self):
        output = generate_forecast_output(good_hour(), "lido")
        profile = SPOT_PROFILES["lido"]

        breaking = calculate_breaking_wave_height(3.0, 10.0, profile, 150.0, 2.0, "falling")
        expected = calculate_quality_score(SurfConditions(
            breaking_height_ft=breaking,
            swell_height_ft=3.0,
            period_s=10.0,
            swell_direction_deg=150.0,
            tide_ft=2.0,
            tide_phase="falling",
            wind_speed_kts=8.0,
            wind_direction_deg=0.0,
            secondary_swell=SwellComponent(1.0, 12.0, 170.0, SECONDARY),
        ), profile)

        assert output.spot == "lido"
        assert output.breaking_height_ft == pytest.approx(breaking)
        assert output.quality_score == expected.score
        assert output.quality_rating == expected.rating
        assert output.reason == expected.reason
        assert output.swell_period_s == 10.0
        assert output.wave_height_ft == 3.4
        assert 0 <= output.quality_score <= 100

    def test_accepts_canonical_name(self):
        assert generate_forecast_output(good_hour(), "Rockaway Beach").spot == "rockaway"

    def test_unknown_spot_raises(self):
        with pytest.raises(UnknownSpotError):
            generate_forecast_output(good_hour(), "montauk")

    def test_no_swell_gives_flat_output(self):
        hour = ForecastHour(timestamp=T0, wind_speed_kts=10, wind_direction_deg=180, tide_ft=1.0)
        output = generate_forecast_output(hour, "long-beach")
        assert output.breaking_height_ft == 0.0
        assert output.quality_score == 0
        assert output.quality_rating == "Don't Bother"
        assert output.breakdown == ZERO_BREAKDOWN
        assert output.reason == "No valid swell data"
        assert output.wind_speed_kts == 10
        assert output.display_height == "<1ft"

    def test_energetic_wind_swell_drives_forecast(self):
        hour = good_hour(
            primary_height_ft=1.0, primary_period_s=8.0,
            wind_wave_height_ft=3.0, wind_wave_period_s=6.0,
            secondary_height_ft=None,
        )
        output = generate_forecast_output(hour, "lido")
        assert output.swell_period_s == 6.0
        assert output.swell_direction_deg == 200.0


class TestUnderlyingSwell:
    """Tests for underlying_swell"""

    def test_picks_strongest_non_wind_other_than_dominant(self):
        primary = SwellComponent(3.0, 10.0, 150.0, PRIMARY)
        secondary = SwellComponent(1.0, 12.0, 170.0, SECONDARY)
        wind = SwellComponent(2.0, 6.0, 200.0, WIND)
        assert underlying_swell([primary, secondary, wind], primary) is secondary
        assert underlying_swell([primary, wind], wind) is primary
        assert underlying_swell([wind], wind) is None


class TestGenerateTimeline:
    """Tests for generate_timeline"""

    def test_preserves_order(self):
        hours = [good_hour(T0 + timedelta(hours=i)) for i in range(4)]
        timeline = generate_timeline(hours, "rockaway")
        assert [o.timestamp for o in timeline] == [h.timestamp for h in hours]
        assert all(o.spot == "rockaway" for o in timeline)

    def test_failed_hour_is_left_out(self):
        hours = [good_hour(T0), good_hour(T0 + timedelta(hours=1))]
        real = generate_forecast_output(hours[0], "lido")

        with patch('surfcast.forecast.output.forecast_for_profile') as mock_forecast:
            mock_forecast.side_effect = [ValueError("bad hour"), real]
            timeline = generate_timeline(hours, "lido")

        assert timeline == [real]

    def test_unknown_spot_raises(self):
        with pytest.raises(UnknownSpotError):
            generate_timeline([good_hour()], "montauk")


class TestHourFromBuoy:
    """Tests for hour_from_buoy"""

    def make_reading(self, **overrides):
        fields = dict(
            timestamp=T0,
            wave_height_ft=3.5,
            swell_height_ft=3.0,
            swell_period_s=10.0,
            swell_direction_deg=135.0,
            wind_wave_height_ft=1.0,
            wind_wave_period_s=4.0,
            wind_wave_direction_deg=292.5,
            wind_speed_kts=9.0,
            wind_direction_deg=350.0,
            wind_gust_kts=14.0,
        )
        fields.update(overrides)
        return BuoyReading(**fields)

    def test_maps_swell_and_station_wind(self):
        hour = hour_from_buoy(self.make_reading())
        assert hour.timestamp == T0
        assert hour.primary.height_ft == 3.0
        assert hour.wind_wave.period_s == 4.0
        assert hour.secondary is None
        assert hour.wind_speed_kts == 9.0
        assert hour.tide_ft is None

    def test_supplied_wind_and_tide_win(self):
        wind = WindObservation(timestamp=T0, wind_speed_kts=15.0, wind_direction_deg=180.0, wind_gust_kts=None)
        tide = TideState(height_ft=2.5, phase=RISING)
        when = T0 + timedelta(minutes=20)

        hour = hour_from_buoy(self.make_reading(), wind=wind, tide=tide, when=when)

        assert hour.wind_speed_kts == 15.0
        assert hour.wind_direction_deg == 180.0
        assert hour.wind_gust_kts is None
        assert hour.tide_ft == 2.5
        assert hour.tide_phase == RISING
        assert hour.timestamp == when
