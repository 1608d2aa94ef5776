# ABOUTME: Parsers for NDBC realtime text feeds (.spec spectral and .txt standard meteorological)
# ABOUTME: Returns the most recent usable line; missing-value sentinels become None, never zero

import logging
from datetime import datetime, timezone
from typing import Iterator, Optional

from surfcast.buoy.models import STALE_THRESHOLD_SECONDS, BuoyReading, WindObservation
from surfcast.spots.geometry import compass_to_degrees

log = logging.getLogger(__name__)

METERS_TO_FEET = 3.28084
MPS_TO_KNOTS = 1.94384

MISSING_VALUES = frozenset({"MM", "-", "--", "999", "999.0", "99.0", "99.00", "9999.0"})

# .spec:  YY MM DD hh mm WVHT SwH SwP WWH WWP SwD WWD STEEPNESS APD MWD
SPEC_COLUMNS = 15
SPEC_WVHT, SPEC_SWH, SPEC_SWP, SPEC_WWH, SPEC_WWP = 5, 6, 7, 8, 9
SPEC_SWD, SPEC_WWD, SPEC_STEEPNESS, SPEC_APD, SPEC_MWD = 10, 11, 12, 13, 14

# .txt:  YY MM DD hh mm WDIR WSPD GST WVHT DPD APD MWD PRES ATMP WTMP DEWP VIS PTDY TIDE
STDMET_MIN_COLUMNS = 8
STDMET_WDIR, STDMET_WSPD, STDMET_GST = 5, 6, 7


def parse_value(token: str) -> Optional[float]:
    """Numeric field, or None for a missing-value sentinel or junk."""
    token = token.strip()
    if not token or token in MISSING_VALUES:
        return None
    try:
        return float(token)
    except ValueError:
        return None


def parse_direction(token: str) -> Optional[float]:
    """16-point cardinal token ("SE", "WNW") to degrees; anything else is None."""
    if token.strip() in MISSING_VALUES:
        return None
    return compass_to_degrees(token)


def parse_text(token: str) -> Optional[str]:
    token = token.strip()
    if not token or token in MISSING_VALUES:
        return None
    return token


def parse_timestamp(parts: list) -> datetime:
    """UTC timestamp from the five leading columns; two-digit years are 20xx."""
    year = int(parts[0])
    if year < 100:
        year += 2000
    return datetime(
        year,
        int(parts[1]),
        int(parts[2]),
        int(parts[3]),
        int(parts[4]),
        tzinfo=timezone.utc,
    )


def _data_lines(text: str) -> Iterator[list]:
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        yield stripped.split()


def _meters_to_feet(value: Optional[float]) -> Optional[float]:
    return value * METERS_TO_FEET if value is not None else None


def _mps_to_knots(value: Optional[float]) -> Optional[float]:
    return value * MPS_TO_KNOTS if value is not None else None


def parse_spec_line(
    parts: list,
    now: Optional[datetime] = None,
    stale_threshold_seconds: int = STALE_THRESHOLD_SECONDS,
) -> Optional[BuoyReading]:
    """
    One spectral data line to a BuoyReading.

    Returns:
        BuoyReading, or None when the line is short, malformed, or lacks
        swell height or swell period
    """
    if len(parts) < SPEC_COLUMNS:
        return None

    try:
        timestamp = parse_timestamp(parts)
    except ValueError:
        return None

    swell_height_m = parse_value(parts[SPEC_SWH])
    swell_period_s = parse_value(parts[SPEC_SWP])
    if swell_height_m is None or swell_period_s is None:
        return None

    reading = BuoyReading(
        timestamp=timestamp,
        wave_height_ft=_meters_to_feet(parse_value(parts[SPEC_WVHT])),
        swell_height_ft=_meters_to_feet(swell_height_m),
        swell_period_s=swell_period_s,
        swell_direction_deg=parse_direction(parts[SPEC_SWD]),
        wind_wave_height_ft=_meters_to_feet(parse_value(parts[SPEC_WWH])),
        wind_wave_period_s=parse_value(parts[SPEC_WWP]),
        wind_wave_direction_deg=parse_direction(parts[SPEC_WWD]),
        steepness=parse_text(parts[SPEC_STEEPNESS]),
        average_period_s=parse_value(parts[SPEC_APD]),
        mean_wave_direction_deg=parse_value(parts[SPEC_MWD]),
    )
    return reading.restamped(now, stale_threshold_seconds)


def parse_spec_feed(
    text: str,
    now: Optional[datetime] = None,
    stale_threshold_seconds: int = STALE_THRESHOLD_SECONDS,
) -> Optional[BuoyReading]:
    """
    Most recent usable reading from a .spec feed.

    NDBC lists newest first, so this is the first data line with both swell
    height and swell period present. Lines missing either are skipped in
    favor of the next one rather than patched up.

    Args:
        text: Raw feed body
        now: Reference time for the staleness flag (default: current UTC time)
        stale_threshold_seconds: Age beyond which the reading is flagged stale

    Returns:
        BuoyReading, or None when no line qualifies
    """
    for parts in _data_lines(text):
        reading = parse_spec_line(parts, now, stale_threshold_seconds)
        if reading is not None:
            return reading
        log.debug("Skipping unusable spectral line: %s", " ".join(parts))
    log.warning("No valid spectral data lines found")
    return None


def parse_stdmet_line(parts: list) -> Optional[WindObservation]:
    if len(parts) < STDMET_MIN_COLUMNS:
        return None
    try:
        timestamp = parse_timestamp(parts)
    except ValueError:
        return None

    direction = parse_value(parts[STDMET_WDIR])
    speed = _mps_to_knots(parse_value(parts[STDMET_WSPD]))
    if direction is None and speed is None:
        return None

    return WindObservation(
        timestamp=timestamp,
        wind_speed_kts=speed,
        wind_direction_deg=direction,
        wind_gust_kts=_mps_to_knots(parse_value(parts[STDMET_GST])),
    )


def parse_stdmet_feed(text: str) -> Optional[WindObservation]:
    """Most recent line of a .txt feed carrying wind speed or direction."""
    for parts in _data_lines(text):
        observation = parse_stdmet_line(parts)
        if observation is not None:
            return observation
    log.warning("No valid wind lines found in meteorological feed")
    return None
