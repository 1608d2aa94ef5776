# ABOUTME: Combines dominant swell selection, breaking height and quality scoring into forecast output
# ABOUTME: One ForecastOutput per (spot, hour); no swell at all gives a well-defined flat output

import logging
from datetime import datetime
from typing import Iterable, Optional

from surfcast.buoy.models import BuoyReading, WindObservation
from surfcast.debug import debug_log
from surfcast.forecast.models import ForecastHour, ForecastOutput
from surfcast.forecast.tides import TideState
from surfcast.scoring.calculator import calculate_quality_score_traced
from surfcast.scoring.models import ZERO_BREAKDOWN, SurfConditions
from surfcast.scoring.reasons import NO_SWELL_REASON
from surfcast.scoring.tables import DONT_BOTHER
from surfcast.spots.profiles import SpotProfile, require_profile
from surfcast.swell.breaking import breaking_height_for
from surfcast.swell.models import WIND, SwellComponent
from surfcast.swell.selector import select_dominant_swell

log = logging.getLogger(__name__)


def flat_output(hour: ForecastHour, spot: str, is_stale: bool = False) -> ForecastOutput:
    """Degenerate output when no swell component is present: nothing to surf, not an error."""
    return ForecastOutput(
        timestamp=hour.timestamp,
        spot=spot,
        breaking_height_ft=0.0,
        quality_score=0,
        quality_rating=DONT_BOTHER,
        breakdown=ZERO_BREAKDOWN,
        reason=NO_SWELL_REASON,
        wave_height_ft=hour.wave_height_ft,
        tide_ft=hour.tide_ft,
        tide_phase=hour.tide_phase,
        wind_speed_kts=hour.wind_speed_kts,
        wind_direction_deg=hour.wind_direction_deg,
        wind_gust_kts=hour.wind_gust_kts,
        is_stale=is_stale,
    )


def underlying_swell(components: Iterable[SwellComponent], dominant: SwellComponent) -> Optional[SwellComponent]:
    """Most energetic non-wind component other than the dominant one."""
    others = [c for c in components if c is not dominant and c.type != WIND]
    if not others:
        return None
    return max(others, key=lambda c: c.energy)


def build_conditions(
    hour: ForecastHour,
    dominant: SwellComponent,
    breaking_height_ft: float,
) -> SurfConditions:
    return SurfConditions(
        breaking_height_ft=breaking_height_ft,
        swell_height_ft=dominant.height_ft,
        period_s=dominant.period_s,
        swell_direction_deg=dominant.direction_deg,
        tide_ft=hour.tide_ft,
        tide_phase=hour.tide_phase,
        wind_speed_kts=hour.wind_speed_kts,
        wind_direction_deg=hour.wind_direction_deg,
        wind_gust_kts=hour.wind_gust_kts,
        secondary_swell=underlying_swell(hour.components, dominant),
    )


def forecast_for_profile(
    hour: ForecastHour,
    profile: SpotProfile,
    is_stale: bool = False,
) -> ForecastOutput:
    """
    Forecast one hour at an already-resolved spot.

    Args:
        hour: Upstream swell, wind and tide for the hour
        profile: Spot profile
        is_stale: Carried through when the inputs came from an old buoy reading

    Returns:
        ForecastOutput
    """
    components = hour.components
    dominant = select_dominant_swell(components)
    if dominant is None:
        return flat_output(hour, profile.key, is_stale)

    if not profile.is_usable_period(dominant.period_s):
        debug_log(f"{profile.key}: {dominant} is below the {profile.min_period_s:.0f}s the break needs", "FORECAST")

    breaking = breaking_height_for(dominant, profile, hour.tide_ft, hour.tide_phase)
    conditions = build_conditions(hour, dominant, breaking)
    result = calculate_quality_score_traced(conditions, profile)

    return ForecastOutput(
        timestamp=hour.timestamp,
        spot=profile.key,
        breaking_height_ft=breaking,
        quality_score=result.score,
        quality_rating=result.rating,
        breakdown=result.breakdown,
        reason=result.reason,
        swell_height_ft=dominant.height_ft,
        swell_period_s=dominant.period_s,
        swell_direction_deg=dominant.direction_deg,
        wave_height_ft=hour.wave_height_ft,
        tide_ft=hour.tide_ft,
        tide_phase=hour.tide_phase,
        wind_speed_kts=hour.wind_speed_kts,
        wind_direction_deg=hour.wind_direction_deg,
        wind_gust_kts=hour.wind_gust_kts,
        is_stale=is_stale,
    )


def generate_forecast_output(hour: ForecastHour, spot_id: str, is_stale: bool = False) -> ForecastOutput:
    """
    Forecast one hour for a spot identified by key or name.

    Raises:
        UnknownSpotError: spot_id has no profile
    """
    return forecast_for_profile(hour, require_profile(spot_id), is_stale)


def generate_timeline(hours: Iterable[ForecastHour], spot_id: str) -> list:
    """
    Forecast every hour for one spot, in input order.

    An hour that fails to compute is logged and left out; the rest of the
    timeline still comes back.

    Raises:
        UnknownSpotError: spot_id has no profile
    """
    profile = require_profile(spot_id)
    timeline = []
    for hour in hours:
        try:
            timeline.append(forecast_for_profile(hour, profile))
        except (TypeError, ValueError, ArithmeticError):
            log.exception(f"Forecast failed for {profile.key} at {hour.timestamp}")
    return timeline


def hour_from_buoy(
    reading: BuoyReading,
    wind: Optional[WindObservation] = None,
    tide: Optional[TideState] = None,
    when: Optional[datetime] = None,
) -> ForecastHour:
    """
    Current-conditions hour from a buoy reading.

    The buoy's swell is the primary train and its wind waves the wind train.
    Caller-supplied wind replaces the buoy's own station wind.
    """
    wind_speed = reading.wind_speed_kts
    wind_direction = reading.wind_direction_deg
    wind_gust = reading.wind_gust_kts
    if wind is not None:
        wind_speed = wind.wind_speed_kts
        wind_direction = wind.wind_direction_deg
        wind_gust = wind.wind_gust_kts

    return ForecastHour(
        timestamp=when or reading.timestamp,
        primary_height_ft=reading.swell_height_ft,
        primary_period_s=reading.swell_period_s,
        primary_direction_deg=reading.swell_direction_deg,
        wind_wave_height_ft=reading.wind_wave_height_ft,
        wind_wave_period_s=reading.wind_wave_period_s,
        wind_wave_direction_deg=reading.wind_wave_direction_deg,
        wave_height_ft=reading.wave_height_ft,
        wind_speed_kts=wind_speed,
        wind_direction_deg=wind_direction,
        wind_gust_kts=wind_gust,
        tide_ft=tide.height_ft if tide else None,
        tide_phase=tide.phase if tide else None,
    )
