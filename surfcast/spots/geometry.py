# ABOUTME: Compass and angle helpers shared by the buoy parser and scoring
# ABOUTME: Handles 360 degree wraparound and 16-point cardinal conversion

from typing import Optional

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)

COMPASS_DEGREES = {point: index * 22.5 for index, point in enumerate(COMPASS_POINTS)}


def normalize_degrees(degrees: float) -> float:
    """Fold any angle into [0, 360)."""
    return degrees % 360


def calculate_angular_distance(deg1: float, deg2: float) -> float:
    """
    Shortest angular distance between two bearings.

    Args:
        deg1: First bearing in degrees
        deg2: Second bearing in degrees

    Returns:
        Distance in degrees, always within [0, 180]
    """
    diff = abs(normalize_degrees(deg1) - normalize_degrees(deg2))
    if diff > 180:
        diff = 360 - diff
    return diff


def compass_to_degrees(token: Optional[str]) -> Optional[float]:
    """Convert "SE", "wnw" etc. to degrees; unknown tokens give None."""
    if token is None:
        return None
    return COMPASS_DEGREES.get(token.strip().upper())


def degrees_to_compass(degrees: float) -> str:
    """Nearest 16-point compass label for a bearing."""
    index = int(round(normalize_degrees(degrees) / 22.5)) % 16
    return COMPASS_POINTS[index]
