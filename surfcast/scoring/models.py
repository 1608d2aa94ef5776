# ABOUTME: Data models for surf quality inputs, component breakdown and results
# ABOUTME: Provides structured representation of scores, ratings and reasons

from dataclasses import asdict, dataclass
from typing import Optional

from surfcast.swell.models import SwellComponent


@dataclass(frozen=True)
class SurfConditions:
    """Everything the scorer looks at for one spot and hour"""
    breaking_height_ft: float
    swell_height_ft: Optional[float] = None      # offshore height of the dominant component
    period_s: Optional[float] = None
    swell_direction_deg: Optional[float] = None
    tide_ft: Optional[float] = None
    tide_phase: Optional[str] = None
    wind_speed_kts: Optional[float] = None
    wind_direction_deg: Optional[float] = None
    wind_gust_kts: Optional[float] = None
    secondary_swell: Optional[SwellComponent] = None

    @property
    def has_wind(self) -> bool:
        return self.wind_speed_kts is not None and self.wind_direction_deg is not None


@dataclass(frozen=True)
class QualityBreakdown:
    """Signed component scores before bonuses and clamps"""
    swell_quality: int  # 0 to 60
    direction: int      # -20 to 0, penalty only
    tide: int           # -20 to 20
    wind: int           # -60 to 20

    @property
    def total(self) -> int:
        return self.swell_quality + self.direction + self.tide + self.wind

    def to_dict(self) -> dict:
        return asdict(self)


ZERO_BREAKDOWN = QualityBreakdown(swell_quality=0, direction=0, tide=0, wind=0)


@dataclass(frozen=True)
class QualityResult:
    """Final score for one spot and hour"""
    score: int  # 0-100
    rating: str
    breakdown: QualityBreakdown
    reason: str
    gust_penalty: int = 0

    def __post_init__(self):
        if not 0 <= self.score <= 100:
            raise ValueError(f"Score must be 0-100, got {self.score}")
