# ABOUTME: Static per-spot configuration for Lido Beach, Long Beach and Rockaway Beach
# ABOUTME: Lookup by canonical name or short key; unknown spots are a hard error

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from surfcast.scoring.tables import (
    PREMIUM_OFFSHORE_GALE_BANDS,
    SIDE_OFFSHORE_TOLERANT_BANDS,
    SIDE_SHORE_WEST_TOLERANT_BANDS,
    SOUTH_SHORE_DIRECTION_BANDS,
    WindTier,
)

# Small swells lose energy to friction and can't use canyon or inlet mechanics
SMALL_SWELL_DAMPING_HEIGHT_FT = 2.0
SMALL_SWELL_DAMPING_MULTIPLIER = 0.8

_EMPTY = MappingProxyType({})


class UnknownSpotError(LookupError):
    """Raised when a spot identifier has no profile."""

    def __init__(self, identifier: str):
        super().__init__(f"No profile found for spot: {identifier}")
        self.identifier = identifier


@dataclass(frozen=True)
class SpotProfile:
    """Everything the height calculator and scorer need to know about a break"""
    key: str
    name: str
    latitude: float
    longitude: float
    swell_target_deg: float      # ideal swell direction
    swell_tolerance_deg: float   # deviation allowed without penalty
    min_period_s: float          # shortest period the break turns into surf
    multiplier: float            # spot multiplier below the long-period threshold
    long_period_multiplier: float
    long_period_threshold_s: float = 12.0
    ideal_wind_deg: float = 0.0  # dead offshore for a south-facing beach
    penalize_small_waves_high_tide: bool = False
    # Small-wave clamp caps by offshore tier; empty means flat cap only
    small_wave_offshore_caps: Mapping[WindTier, int] = field(default_factory=lambda: _EMPTY)
    small_wave_offshore_bonus: Mapping[WindTier, int] = field(default_factory=lambda: _EMPTY)
    wind_table_overrides: Mapping[WindTier, tuple] = field(default_factory=lambda: _EMPTY)
    direction_bands: tuple = SOUTH_SHORE_DIRECTION_BANDS

    def spot_multiplier(self, swell_height_ft: float, period_s: float) -> float:
        """
        Period-tiered amplification for this break.

        Args:
            swell_height_ft: Offshore height of the driving component
            period_s: Its period

        Returns:
            Multiplier applied to offshore height
        """
        if swell_height_ft < SMALL_SWELL_DAMPING_HEIGHT_FT:
            return SMALL_SWELL_DAMPING_MULTIPLIER
        if period_s >= self.long_period_threshold_s:
            return self.long_period_multiplier
        return self.multiplier

    def is_usable_period(self, period_s: Optional[float]) -> bool:
        return period_s is not None and period_s >= self.min_period_s


_OFFSHORE_SMALL_WAVE_CAPS = MappingProxyType({
    WindTier.PREMIUM_OFFSHORE: 60,
    WindTier.SOLID_OFFSHORE: 55,
    WindTier.OKAY_OFFSHORE: 45,
    WindTier.SIDE_OFFSHORE: 42,
})


SPOT_PROFILES = MappingProxyType({
    "lido": SpotProfile(
        key="lido",
        name="Lido Beach",
        latitude=40.5892,
        longitude=-73.6256,
        swell_target_deg=145,     # center of 110-180
        swell_tolerance_deg=35,
        min_period_s=6,
        multiplier=1.1,
        # Hudson Canyon refraction only engages on long-period groundswell
        long_period_multiplier=1.2,
        penalize_small_waves_high_tide=True,
        small_wave_offshore_caps=_OFFSHORE_SMALL_WAVE_CAPS,
        small_wave_offshore_bonus=MappingProxyType({
            WindTier.PREMIUM_OFFSHORE: 15,
            WindTier.SOLID_OFFSHORE: 10,
            WindTier.OKAY_OFFSHORE: 5,
            WindTier.SIDE_OFFSHORE: 3,
        }),
        wind_table_overrides=MappingProxyType({
            WindTier.PREMIUM_OFFSHORE: PREMIUM_OFFSHORE_GALE_BANDS,
        }),
    ),
    "long-beach": SpotProfile(
        key="long-beach",
        name="Long Beach",
        latitude=40.5884,
        longitude=-73.6579,
        swell_target_deg=140,     # SE, window 105-175 clear of the east-wrap bands
        swell_tolerance_deg=35,
        min_period_s=5,
        multiplier=1.05,          # jetty-driven sandbars
        long_period_multiplier=1.15,
        penalize_small_waves_high_tide=True,
        small_wave_offshore_caps=_OFFSHORE_SMALL_WAVE_CAPS,
    ),
    "rockaway": SpotProfile(
        key="rockaway",
        name="Rockaway Beach",
        latitude=40.5834,
        longitude=-73.8168,
        swell_target_deg=145,
        swell_tolerance_deg=35,
        min_period_s=5,
        multiplier=1.1,           # deep in the NY Bight shadow
        long_period_multiplier=1.2,
        # Orientation tolerates WNW and W far better than its neighbours
        wind_table_overrides=MappingProxyType({
            WindTier.SIDE_OFFSHORE: SIDE_OFFSHORE_TOLERANT_BANDS,
            WindTier.SIDE_SHORE_WEST: SIDE_SHORE_WEST_TOLERANT_BANDS,
        }),
    ),
})

SPOT_ALIASES = MappingProxyType({
    "Lido Beach": "lido",
    "Long Beach": "long-beach",
    "Rockaway Beach": "rockaway",
    "LIDO_BEACH": "lido",
    "LONG_BEACH": "long-beach",
    "ROCKAWAY": "rockaway",
})


def get_profile(identifier: str) -> Optional[SpotProfile]:
    """
    Look up a spot by key ("lido") or canonical name ("Lido Beach").

    Returns:
        SpotProfile, or None when the identifier is unknown
    """
    profile = SPOT_PROFILES.get(identifier)
    if profile is not None:
        return profile
    key = SPOT_ALIASES.get(identifier)
    if key is not None:
        return SPOT_PROFILES.get(key)
    return None


def require_profile(identifier: str) -> SpotProfile:
    """Like get_profile, but an unknown spot raises UnknownSpotError."""
    profile = get_profile(identifier)
    if profile is None:
        raise UnknownSpotError(identifier)
    return profile


def get_spot_key(spot_name: str) -> Optional[str]:
    profile = get_profile(spot_name)
    return profile.key if profile else None
