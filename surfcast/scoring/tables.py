# ABOUTME: Named, ordered constant tables for the surf quality scorer
# ABOUTME: Wind tiers, direction bands, tide bands, gust buckets and clamp thresholds

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from surfcast.spots.geometry import normalize_degrees


@dataclass(frozen=True)
class SpeedBand:
    """One wind-speed bucket. limit=None is the catch-all top bucket."""
    limit: Optional[float]
    score: int
    inclusive: bool = True

    def matches(self, speed_kts: float) -> bool:
        if self.limit is None:
            return True
        if self.inclusive:
            return speed_kts <= self.limit
        return speed_kts < self.limit


def lookup_speed_band(bands: tuple, speed_kts: float) -> int:
    """Score of the first band whose limit admits the speed."""
    for band in bands:
        if band.matches(speed_kts):
            return band.score
    return bands[-1].score


# ============================================================================
# WIND DIRECTION TIERS (8-tier system)
# All three south-facing Long Island beaches face ~180, so N is dead offshore.
# ============================================================================

class WindTier(Enum):
    PREMIUM_OFFSHORE = "premium offshore"        # N, NNW, NNE core
    SOLID_OFFSHORE = "solid offshore"            # NW plus NNE fringe
    OKAY_OFFSHORE = "okay offshore"              # NE, wave-size dependent
    SIDE_OFFSHORE = "side-offshore"              # WNW
    BAD_SIDE_OFFSHORE = "bad side-offshore"      # ENE, chop with no cleanup
    SIDE_SHORE_EAST = "side-shore east"          # E
    SIDE_SHORE_WEST = "side-shore west"          # W
    ONSHORE = "onshore"                          # ESE through WSW


@dataclass(frozen=True)
class WindSector:
    """Arc from start to end in degrees; start > end wraps through north."""
    tier: WindTier
    start: float
    end: float
    include_start: bool = True
    include_end: bool = False

    def _after_start(self, d: float) -> bool:
        return d >= self.start if self.include_start else d > self.start

    def _before_end(self, d: float) -> bool:
        return d <= self.end if self.include_end else d < self.end

    def contains(self, degrees: float) -> bool:
        d = normalize_degrees(degrees)
        if self.start <= self.end:
            return self._after_start(d) and self._before_end(d)
        return self._after_start(d) or self._before_end(d)


# Boundaries follow whole-degree rules: 20 is premium, 50 okay, 70 ENE, 110 E.
# Fractions between them fall to the next tier round the compass.
WIND_SECTORS = (
    WindSector(WindTier.PREMIUM_OFFSHORE, 330, 20, include_end=True),
    WindSector(WindTier.SOLID_OFFSHORE, 310, 330),
    WindSector(WindTier.SOLID_OFFSHORE, 20, 35, include_start=False),
    WindSector(WindTier.OKAY_OFFSHORE, 35, 50, include_end=True),
    WindSector(WindTier.BAD_SIDE_OFFSHORE, 50, 70, include_start=False, include_end=True),
    WindSector(WindTier.SIDE_SHORE_EAST, 70, 110, include_start=False, include_end=True),
    WindSector(WindTier.ONSHORE, 110, 260, include_start=False),
    WindSector(WindTier.SIDE_SHORE_WEST, 260, 290),
    WindSector(WindTier.SIDE_OFFSHORE, 290, 310),
)

OFFSHORE_TIERS = frozenset({
    WindTier.PREMIUM_OFFSHORE,
    WindTier.SOLID_OFFSHORE,
    WindTier.OKAY_OFFSHORE,
})

# Exempt from the strong-wind angular cap
BENEFICIAL_TIERS = OFFSHORE_TIERS | {WindTier.SIDE_OFFSHORE}


def classify_wind_direction(degrees: float) -> WindTier:
    """Map a wind bearing (direction the wind blows FROM) to its tier."""
    for sector in WIND_SECTORS:
        if sector.contains(degrees):
            return sector.tier
    return WindTier.ONSHORE


# Breaking height at which NE wind stops hurting
BIG_WAVE_THRESHOLD_FT = 4.0

WIND_SPEED_TABLES = {
    WindTier.PREMIUM_OFFSHORE: (
        SpeedBand(12, 20), SpeedBand(18, 15), SpeedBand(None, 10),
    ),
    WindTier.SOLID_OFFSHORE: (
        SpeedBand(12, 18), SpeedBand(18, 12), SpeedBand(None, 8),
    ),
    WindTier.OKAY_OFFSHORE: (
        SpeedBand(12, 3), SpeedBand(18, 0), SpeedBand(None, -5),
    ),
    WindTier.SIDE_OFFSHORE: (
        SpeedBand(10, 5), SpeedBand(15, 0, inclusive=False),
        SpeedBand(20, -15, inclusive=False), SpeedBand(None, -30),
    ),
    WindTier.BAD_SIDE_OFFSHORE: (
        SpeedBand(10, -5), SpeedBand(15, -20, inclusive=False),
        SpeedBand(20, -40, inclusive=False), SpeedBand(None, -55),
    ),
    WindTier.SIDE_SHORE_EAST: (
        SpeedBand(10, -12), SpeedBand(18, -25), SpeedBand(None, -45),
    ),
    WindTier.SIDE_SHORE_WEST: (
        SpeedBand(10, -8), SpeedBand(15, -20, inclusive=False), SpeedBand(None, -40),
    ),
    WindTier.ONSHORE: (
        SpeedBand(6, -10), SpeedBand(10, -45), SpeedBand(None, -60),
    ),
}

# NE offshore on big days (>= BIG_WAVE_THRESHOLD_FT)
OKAY_OFFSHORE_BIG_WAVE_BANDS = (
    SpeedBand(12, 8), SpeedBand(18, 4), SpeedBand(None, 0),
)

# Per-spot replacement tables, attached to SpotProfile.wind_table_overrides
PREMIUM_OFFSHORE_GALE_BANDS = (
    SpeedBand(12, 20), SpeedBand(18, 15), SpeedBand(25, 10), SpeedBand(None, 5),
)
SIDE_OFFSHORE_TOLERANT_BANDS = (
    SpeedBand(10, 12), SpeedBand(15, 6, inclusive=False),
    SpeedBand(20, -8, inclusive=False), SpeedBand(None, -20),
)
SIDE_SHORE_WEST_TOLERANT_BANDS = (
    SpeedBand(10, -3), SpeedBand(15, -12, inclusive=False), SpeedBand(None, -30),
)


# ============================================================================
# SWELL DIRECTION BANDS
# Shared by the breaking-height calculator (height_factor) and the scorer
# (score, cap) so the two always agree on where a band starts.
# ============================================================================

@dataclass(frozen=True)
class DirectionBand:
    name: str
    low: float
    high: float
    height_factor: float
    score: int
    cap: int
    blocked: bool = False
    high_inclusive: bool = False

    def contains(self, degrees: float) -> bool:
        if degrees < self.low:
            return False
        if self.high_inclusive:
            return degrees <= self.high
        return degrees < self.high


SOUTH_SHORE_DIRECTION_BANDS = (
    DirectionBand("west block", 247.5, 292.5, 0.1, -20, 35, blocked=True, high_inclusive=True),
    DirectionBand("northwest block", 292.5, 330.0, 0.1, -18, 35, blocked=True, high_inclusive=True),
    DirectionBand("east wrap 100-104", 100.0, 105.0, 0.75, -5, 55),
    DirectionBand("east wrap 95-99", 95.0, 100.0, 0.6, -8, 48),
    DirectionBand("east wrap 90-94", 90.0, 95.0, 0.5, -12, 42),
    DirectionBand("east wrap below 90", 0.0, 90.0, 0.35, -15, 35),
)


def find_direction_band(bands: tuple, degrees: Optional[float]) -> Optional[DirectionBand]:
    """First band containing the bearing, or None (also for unknown direction)."""
    if degrees is None:
        return None
    d = normalize_degrees(degrees)
    for band in bands:
        if band.contains(d):
            return band
    return None


# Outside every band but beyond the spot's tolerance
DIRECTION_DRIFT_PENALTY = -10


# ============================================================================
# SWELL SIZE
# ============================================================================

# (upper bound exclusive in ft, points)
SWELL_SIZE_BANDS = (
    (1.0, 5),    # flat
    (2.0, 20),   # small but rideable
    (3.0, 35),   # fun size
    (5.0, 50),   # good size
)
SWELL_SIZE_MAX_SCORE = 60  # pumping


# ============================================================================
# TIDE
# ============================================================================

@dataclass(frozen=True)
class TideBand:
    """Applies when tide is strictly above `above_ft` (None = everything else)."""
    above_ft: Optional[float]
    big_wave_score: int
    small_wave_score: int


TIDE_BANDS = (
    TideBand(5.0, -20, -20),   # shorebreak
    TideBand(4.0, 10, 4),      # marginal / mushy
    TideBand(3.5, 15, 4),      # upper range / mushy
    TideBand(2.5, 20, 15),     # optimal for big swell
    TideBand(None, 15, 20),    # optimal for small swell
)

# 3.5-4.0 ft band, for spots whose bars go soft at high tide
HIGH_TIDE_BAND_LOW_FT = 3.5
HIGH_TIDE_BAND_HIGH_FT = 4.0
HIGH_TIDE_SMALL_WAVE_FT = 3.0
HIGH_TIDE_SMALL_WAVE_SCORE = -10


# ============================================================================
# GUSTS
# ============================================================================

GUST_MIN_DIFFERENTIAL_KTS = 5.0
GUST_MIN_KTS = 15.0
# Offshore gusts (315-45, inclusive) clean up rather than chop
GUST_OFFSHORE_FROM_DEG = 315.0
GUST_OFFSHORE_TO_DEG = 45.0
GUST_ONSHORE_LOW_DEG = 135.0
GUST_ONSHORE_HIGH_DEG = 225.0

# (gusts strictly above, onshore penalty, cross-shore penalty)
GUST_PENALTY_BANDS = (
    (25.0, -20, -10),
    (20.0, -15, -8),
    (15.0, -10, -5),
)


# ============================================================================
# BONUSES AND PENALTIES APPLIED AFTER SUMMATION
# ============================================================================

OFFSHORE_SMALL_WAVE_MAX_HEIGHT_FT = 2.5
OFFSHORE_SMALL_WAVE_MIN_PERIOD_S = 8.0

TIDE_PUSH_MAX_TIDE_FT = 3.0
TIDE_PUSH_MIN_BREAKING_FT = 3.0
TIDE_PUSH_HEAVY_BREAKING_FT = 5.0
TIDE_PUSH_STANDARD = 1.15
TIDE_PUSH_HEAVY = 1.25

SECONDARY_DOMINANT_MAX_PERIOD_S = 7.0
SECONDARY_MIN_HEIGHT_FT = 1.5
SECONDARY_MIN_PERIOD_S = 8.0
SECONDARY_GOOD_DIRECTION = (110.0, 200.0)
# (period at least, bonus good direction, bonus other direction)
SECONDARY_BONUS_BANDS = (
    (10.0, 15, 8),
    (8.0, 10, 5),
)

WIND_SLOP_MAX_PERIOD_S = 5.0
WIND_SLOP_MIN_HEIGHT_FT = 2.0
WIND_SLOP_PENALTY = -15


# ============================================================================
# CLAMP CASCADE
# ============================================================================

SMALL_WAVE_HEIGHT_FT = 2.0
SMALL_WAVE_LENIENT_MIN_HEIGHT_FT = 1.0
SMALL_WAVE_LENIENT_MIN_PERIOD_S = 6.0
SMALL_WAVE_FLAT_CAP = 30

# Onshore arc used by the hard caps (ESE through WSW)
ONSHORE_CAP_LOW_DEG = 110.0
ONSHORE_CAP_HIGH_DEG = 259.0

LIGHT_ONSHORE_MIN_KTS = 4.3
LIGHT_ONSHORE_MAX_KTS = 6.0
LIGHT_ONSHORE_CAP = 50
STRONG_ONSHORE_CAP = 39


@dataclass(frozen=True)
class AngularCap:
    """Cap when wind is stronger than min_speed and further than min_angle off ideal."""
    min_speed_kts: float
    min_angle_deg: float
    cap: int
    exempt_beneficial: bool


ANGULAR_CAPS = (
    AngularCap(15.0, 45.0, 60, exempt_beneficial=False),
    AngularCap(20.0, 30.0, 39, exempt_beneficial=True),
)

JUNK_MAX_HEIGHT_FT = 2.0
JUNK_MIN_ONSHORE_KTS = 10.0
JUNK_CAP = 20


# ============================================================================
# RATINGS
# ============================================================================

DONT_BOTHER = "Don't Bother"
WORTH_A_LOOK = "Worth a Look"
GO_SURF = "Go Surf"
FIRING = "Firing"
ALL_TIME = "All-Time"

# (score at most, label); last entry catches everything above
RATING_BANDS = (
    (39, DONT_BOTHER),
    (59, WORTH_A_LOOK),
    (75, GO_SURF),
    (90, FIRING),
    (None, ALL_TIME),
)
