# ABOUTME: Breaking wave height calculator from offshore swell to beach face height
# ABOUTME: Spot, period, direction and tide-push multipliers applied to the dominant component

import math
from typing import Optional

from surfcast.scoring.tables import (
    TIDE_PUSH_HEAVY,
    TIDE_PUSH_HEAVY_BREAKING_FT,
    TIDE_PUSH_MAX_TIDE_FT,
    TIDE_PUSH_MIN_BREAKING_FT,
    TIDE_PUSH_STANDARD,
    find_direction_band,
)
from surfcast.spots.profiles import SpotProfile
from surfcast.swell.models import SwellComponent

RISING = "rising"

# (period upper bound exclusive, multiplier)
PERIOD_MULTIPLIER_BANDS = (
    (5.0, 0.6),    # wind chop, weak energy
    (8.0, 0.8),    # short period, some energy loss
    (11.0, 1.0),   # baseline for Long Island
    (14.0, 1.1),   # long period, extra push
)
GROUNDSWELL_PERIOD_MULTIPLIER = 1.15  # 14s+


def get_period_multiplier(period_s: float) -> float:
    """Step function of period; non-decreasing across buckets."""
    for upper, multiplier in PERIOD_MULTIPLIER_BANDS:
        if period_s < upper:
            return multiplier
    return GROUNDSWELL_PERIOD_MULTIPLIER


def get_direction_factor(swell_direction_deg: Optional[float], profile: SpotProfile) -> float:
    """
    Landmass shadow reduction for the swell's arrival direction.

    Unknown direction is neutral (1.0): no data is not assumed ideal or blocked.
    """
    band = find_direction_band(profile.direction_bands, swell_direction_deg)
    if band is None:
        return 1.0
    return band.height_factor


def calculate_tide_push_multiplier(
    tide_phase: Optional[str],
    tide_ft: Optional[float],
    breaking_height_ft: float,
) -> float:
    """
    Incoming tide over shallow bars adds push to waves that are already overhead-ish.

    Active when the tide is rising, sits between 0 and 3 ft, and the waves
    are at least 3 ft. Above 5 ft the push is heavier.

    Args:
        tide_phase: 'rising', 'falling', 'high', 'low' or None
        tide_ft: Tide height in feet or None
        breaking_height_ft: Breaking height before the push

    Returns:
        1.0, 1.15 or 1.25
    """
    if tide_phase != RISING or tide_ft is None:
        return 1.0
    if not (0 < tide_ft <= TIDE_PUSH_MAX_TIDE_FT):
        return 1.0
    if breaking_height_ft < TIDE_PUSH_MIN_BREAKING_FT:
        return 1.0
    if breaking_height_ft > TIDE_PUSH_HEAVY_BREAKING_FT:
        return TIDE_PUSH_HEAVY
    return TIDE_PUSH_STANDARD


def calculate_breaking_wave_height(
    swell_height_ft: float,
    period_s: float,
    profile: SpotProfile,
    swell_direction_deg: Optional[float] = None,
    tide_ft: Optional[float] = None,
    tide_phase: Optional[str] = None,
) -> float:
    """
    Predicted breaking wave face height at the spot.

    breaking = offshore × spot multiplier × period multiplier × direction factor × tide push

    Args:
        swell_height_ft: Offshore height of the dominant component
        period_s: Its period in seconds
        profile: Spot profile
        swell_direction_deg: Arrival direction or None
        tide_ft: Current tide height or None
        tide_phase: Current tide phase or None

    Returns:
        Breaking height in feet
    """
    spot_multiplier = profile.spot_multiplier(swell_height_ft, period_s)
    height = (
        swell_height_ft
        * spot_multiplier
        * get_period_multiplier(period_s)
        * get_direction_factor(swell_direction_deg, profile)
    )
    return height * calculate_tide_push_multiplier(tide_phase, tide_ft, height)


def breaking_height_for(
    component: SwellComponent,
    profile: SpotProfile,
    tide_ft: Optional[float] = None,
    tide_phase: Optional[str] = None,
) -> float:
    return calculate_breaking_wave_height(
        component.height_ft,
        component.period_s,
        profile,
        component.direction_deg,
        tide_ft,
        tide_phase,
    )


def _round_half_up(value: float) -> float:
    return math.floor(value + 0.5)


def format_wave_height(height_ft: float) -> str:
    """
    Display string for a breaking height.

    Rounds to the nearest half foot; whole feet show singly, halves as a range.
    Examples: 0.3 -> "<1ft", 2.9 -> "3ft", 4.4 -> "4-5ft"
    """
    if height_ft < 0.5:
        return "<1ft"

    rounded = _round_half_up(height_ft * 2) / 2
    whole = int(_round_half_up(rounded))
    if abs(rounded - whole) < 0.2:
        return f"{whole}ft"
    return f"{math.floor(rounded)}-{math.ceil(rounded)}ft"
