# ABOUTME: Data models for forecast confidence: tiers, per-hour records and summaries
# ABOUTME: Verification points come from an independent model run for the same hours

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class ConfidenceTier(str, Enum):
    """Agreement between the primary and verification forecasts"""
    HIGH = "HIGH"
    MED = "MED"
    LOW = "LOW"


# Worst first
TIER_SEVERITY = (ConfidenceTier.LOW, ConfidenceTier.MED, ConfidenceTier.HIGH)


@dataclass(frozen=True)
class VerificationPoint:
    """One hour of the independent forecast, heights in feet"""
    timestamp: datetime
    wave_height_ft: Optional[float] = None
    swell_height_ft: Optional[float] = None
    swell_period_s: Optional[float] = None
    swell_direction_deg: Optional[float] = None
    source: str = "ecmwf"


@dataclass(frozen=True)
class ConfidenceRecord:
    timestamp: datetime
    primary_ft: float
    verification_ft: float
    difference_ft: float
    tier: ConfidenceTier


@dataclass
class ConfidenceSummary:
    """Tier counts over a window plus the overall tier"""
    overall: Optional[ConfidenceTier] = None
    counts: dict = field(default_factory=lambda: {tier: 0 for tier in ConfidenceTier})
    policy: str = "worst"

    @property
    def total_with_data(self) -> int:
        return sum(self.counts.values())

    @property
    def high_count(self) -> int:
        return self.counts.get(ConfidenceTier.HIGH, 0)

    @property
    def med_count(self) -> int:
        return self.counts.get(ConfidenceTier.MED, 0)

    @property
    def low_count(self) -> int:
        return self.counts.get(ConfidenceTier.LOW, 0)

    def to_dict(self) -> dict:
        return {
            "overall": self.overall.value if self.overall else None,
            "high": self.high_count,
            "med": self.med_count,
            "low": self.low_count,
            "total_with_data": self.total_with_data,
            "policy": self.policy,
        }
