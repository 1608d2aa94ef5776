# ABOUTME: Application configuration including buoy station, cache windows and API settings
# ABOUTME: Centralized config read from environment so deployments can retune without code changes

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration"""

    # Buoy 44065: NY Harbor Entrance, 15 NM SE of Breezy Point.
    # Closest nearshore buoy to Rockaway / Long Beach / Lido.
    BUOY_STATION_ID = os.getenv("BUOY_STATION_ID", "44065")
    BUOY_BASE_URL = os.getenv("BUOY_BASE_URL", "https://www.ndbc.noaa.gov/data/realtime2")

    # Buoy cache TTL: NOAA updates roughly hourly, 15 minutes keeps load low
    BUOY_CACHE_TTL_SECONDS = int(os.getenv("BUOY_CACHE_TTL_SECONDS", "900"))

    # Reading staleness: older than this is flagged, not dropped
    BUOY_STALE_THRESHOLD_SECONDS = int(os.getenv("BUOY_STALE_THRESHOLD_SECONDS", "7200"))  # 2 hours

    HTTP_TIMEOUT_SECONDS = int(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))
    USER_AGENT = os.getenv("USER_AGENT", "Surfcast/1.0 (surf forecast application)")

    # Independent verification forecast (ECMWF via Stormglass)
    # Free tier is 10 requests/day, so leave empty to disable
    STORMGLASS_API_KEY = os.getenv("STORMGLASS_API_KEY", "")
    STORMGLASS_HOURS_AHEAD = int(os.getenv("STORMGLASS_HOURS_AHEAD", "48"))

    # Multi-hour confidence aggregation: "worst" (pessimistic) or "majority"
    CONFIDENCE_SUMMARY_POLICY = os.getenv("CONFIDENCE_SUMMARY_POLICY", "worst").lower()
    CONFIDENCE_MIN_COUNT = int(os.getenv("CONFIDENCE_MIN_COUNT", "1"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Debug mode
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"

    @classmethod
    def buoy_spec_url(cls, station_id: str = None) -> str:
        """Spectral feed: separated swell and wind-wave components."""
        return f"{cls.BUOY_BASE_URL}/{station_id or cls.BUOY_STATION_ID}.spec"

    @classmethod
    def buoy_stdmet_url(cls, station_id: str = None) -> str:
        """Standard meteorological feed: wind speed, direction, gusts."""
        return f"{cls.BUOY_BASE_URL}/{station_id or cls.BUOY_STATION_ID}.txt"
