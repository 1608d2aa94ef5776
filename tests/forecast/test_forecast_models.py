# ABOUTME: Tests for ForecastHour and ForecastOutput records
# ABOUTME: Validates provider dict parsing, component extraction and serialization

from datetime import datetime, timezone

from surfcast.confidence.models import ConfidenceTier
from surfcast.forecast.models import ForecastHour, ForecastOutput
from surfcast.scoring.models import QualityBreakdown

T0 = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


class TestForecastHour:
    """Tests for ForecastHour"""

    def test_from_dict(self):
        hour = ForecastHour.from_dict({
            "timestamp": "2025-01-15T12:00:00Z",
            "primary_height_ft": "3.0",
            "primary_period_s": 10,
            "primary_direction_deg": 150,
            "wind_speed_kts": None,
            "tide_phase": "rising",
            "provider": "ignored",
        })
        assert hour.timestamp == T0
        assert hour.primary_height_ft == 3.0
        assert hour.primary_period_s == 10.0
        assert hour.wind_speed_kts is None
        assert hour.tide_phase == "rising"
        assert hour.secondary_height_ft is None

    def test_naive_timestamp_becomes_utc(self):
        hour = ForecastHour.from_dict({"timestamp": "2025-01-15T12:00:00"})
        assert hour.timestamp.tzinfo == timezone.utc

    def test_components_skip_incomplete_trains(self):
        hour = ForecastHour(
            timestamp=T0,
            primary_height_ft=3.0,
            primary_period_s=10.0,
            secondary_height_ft=1.0,
            secondary_period_s=None,
            wind_wave_height_ft=1.5,
            wind_wave_period_s=4.0,
        )
        assert [c.type for c in hour.components] == ["primary", "wind"]
        assert hour.secondary is None

    def test_no_components(self):
        assert ForecastHour(timestamp=T0).components == []


class TestForecastOutput:
    """Tests for ForecastOutput"""

    def make_output(self, **overrides):
        fields = dict(
            timestamp=T0,
            spot="lido",
            breaking_height_ft=3.2,
            quality_score=55,
            quality_rating="Go Surf",
            breakdown=QualityBreakdown(swell_quality=35, direction=0, tide=10, wind=10),
            reason="offshore winds",
            swell_height_ft=3.0,
            swell_period_s=10.0,
        )
        fields.update(overrides)
        return ForecastOutput(**fields)

    def test_to_dict(self):
        data = self.make_output(confidence=ConfidenceTier.HIGH).to_dict()
        assert data["timestamp"] == "2025-01-15T12:00:00+00:00"
        assert data["display_height"] == "3ft"
        assert data["quality_score"] == 55
        assert data["breakdown"]["tide"] == 10
        assert data["raw_data"]["swell_period_s"] == 10.0
        assert data["confidence"] == "HIGH"
        assert data["is_stale"] is False

    def test_str(self):
        text = str(self.make_output())
        assert "lido" in text
        assert "Go Surf (55)" in text
