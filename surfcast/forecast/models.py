# ABOUTME: Data models for per-hour forecast inputs and per (spot, hour) forecast output
# ABOUTME: ForecastHour is the upstream record; ForecastOutput is what consumers get back

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from surfcast.confidence.models import ConfidenceTier
from surfcast.scoring.models import QualityBreakdown
from surfcast.swell.breaking import format_wave_height
from surfcast.swell.models import PRIMARY, SECONDARY, WIND, SwellComponent


def _parse_timestamp(value) -> datetime:
    if isinstance(value, datetime):
        timestamp = value
    else:
        timestamp = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp


def _optional_float(value) -> Optional[float]:
    return float(value) if value is not None else None


@dataclass(frozen=True)
class ForecastHour:
    """One hour of upstream forecast for one spot: up to three swell trains, wind and tide"""
    timestamp: datetime
    primary_height_ft: Optional[float] = None
    primary_period_s: Optional[float] = None
    primary_direction_deg: Optional[float] = None
    secondary_height_ft: Optional[float] = None
    secondary_period_s: Optional[float] = None
    secondary_direction_deg: Optional[float] = None
    wind_wave_height_ft: Optional[float] = None
    wind_wave_period_s: Optional[float] = None
    wind_wave_direction_deg: Optional[float] = None
    wave_height_ft: Optional[float] = None  # combined significant height, if the provider has one
    wind_speed_kts: Optional[float] = None
    wind_direction_deg: Optional[float] = None
    wind_gust_kts: Optional[float] = None
    tide_ft: Optional[float] = None
    tide_phase: Optional[str] = None

    @property
    def primary(self) -> Optional[SwellComponent]:
        return SwellComponent.from_fields(
            self.primary_height_ft, self.primary_period_s, self.primary_direction_deg, PRIMARY
        )

    @property
    def secondary(self) -> Optional[SwellComponent]:
        return SwellComponent.from_fields(
            self.secondary_height_ft, self.secondary_period_s, self.secondary_direction_deg, SECONDARY
        )

    @property
    def wind_wave(self) -> Optional[SwellComponent]:
        return SwellComponent.from_fields(
            self.wind_wave_height_ft, self.wind_wave_period_s, self.wind_wave_direction_deg, WIND
        )

    @property
    def components(self) -> list:
        """Present components only, primary first."""
        return [c for c in (self.primary, self.secondary, self.wind_wave) if c is not None]

    @classmethod
    def from_dict(cls, data: dict) -> "ForecastHour":
        """
        Build from a provider record keyed by field name.

        Unknown keys are ignored; missing keys stay None.
        """
        kwargs = {"timestamp": _parse_timestamp(data["timestamp"])}
        for name in cls.__dataclass_fields__:
            if name == "timestamp" or name not in data:
                continue
            if name == "tide_phase":
                kwargs[name] = data[name]
            else:
                kwargs[name] = _optional_float(data[name])
        return cls(**kwargs)


@dataclass(frozen=True)
class ForecastOutput:
    """Forecast for one spot and hour: breaking height, score, rating and why"""
    timestamp: datetime
    spot: str
    breaking_height_ft: float
    quality_score: int
    quality_rating: str
    breakdown: QualityBreakdown
    reason: str
    swell_height_ft: Optional[float] = None
    swell_period_s: Optional[float] = None
    swell_direction_deg: Optional[float] = None
    wave_height_ft: Optional[float] = None
    tide_ft: Optional[float] = None
    tide_phase: Optional[str] = None
    wind_speed_kts: Optional[float] = None
    wind_direction_deg: Optional[float] = None
    wind_gust_kts: Optional[float] = None
    is_stale: bool = False
    confidence: Optional[ConfidenceTier] = None
    verification_height_ft: Optional[float] = None

    def __str__(self) -> str:
        return (
            f"{self.spot} {self.timestamp:%Y-%m-%d %H:%M}: "
            f"{self.display_height} {self.quality_rating} ({self.quality_score}) - {self.reason}"
        )

    @property
    def primary_estimate_ft(self) -> Optional[float]:
        """Breaking height to verify against, None when the hour had no swell data."""
        if self.swell_height_ft is None:
            return None
        return self.breaking_height_ft

    @property
    def display_height(self) -> str:
        return format_wave_height(self.breaking_height_ft)

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp.isoformat(),
            "spot": self.spot,
            "breaking_height_ft": self.breaking_height_ft,
            "display_height": self.display_height,
            "quality_score": self.quality_score,
            "quality_rating": self.quality_rating,
            "breakdown": self.breakdown.to_dict(),
            "reason": self.reason,
            "raw_data": {
                "swell_height_ft": self.swell_height_ft,
                "swell_period_s": self.swell_period_s,
                "swell_direction_deg": self.swell_direction_deg,
                "wave_height_ft": self.wave_height_ft,
                "tide_ft": self.tide_ft,
                "tide_phase": self.tide_phase,
                "wind_speed_kts": self.wind_speed_kts,
                "wind_direction_deg": self.wind_direction_deg,
                "wind_gust_kts": self.wind_gust_kts,
            },
            "is_stale": self.is_stale,
            "confidence": self.confidence.value if self.confidence else None,
        }
