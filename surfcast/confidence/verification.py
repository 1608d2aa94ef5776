# ABOUTME: Stormglass API client for the independent ECMWF wave forecast
# ABOUTME: Supplies verification points for confidence banding; empty list when unavailable

import logging
import requests
from datetime import datetime, timedelta, timezone
from typing import Optional

from surfcast.confidence.models import VerificationPoint
from surfcast.config import Config
from surfcast.spots.profiles import SpotProfile

log = logging.getLogger(__name__)

METERS_TO_FEET = 3.28084


def _meters_to_feet(value) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value) * METERS_TO_FEET
    except (TypeError, ValueError):
        return None


def _parse_time(value: str) -> datetime:
    # Stormglass sends "2024-01-15T06:00:00+00:00"
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class StormglassClient:
    """
    Client for Stormglass point forecasts, ECMWF source only.

    Free tier allows 10 requests per day, so callers should fetch once per
    spot per day and keep the result.
    """

    BASE_URL = "https://api.stormglass.io/v2/weather/point"
    PARAMS = "waveHeight,swellHeight,swellPeriod,swellDirection"
    SOURCE = "ecmwf"

    def __init__(self, api_key: str = None, hours_ahead: int = None, timeout: int = None):
        self.api_key = api_key if api_key is not None else Config.STORMGLASS_API_KEY
        self.hours_ahead = hours_ahead if hours_ahead is not None else Config.STORMGLASS_HOURS_AHEAD
        self.timeout = timeout if timeout is not None else Config.HTTP_TIMEOUT_SECONDS

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def fetch_for_spot(self, profile: SpotProfile, now: Optional[datetime] = None) -> list:
        """
        Fetch hourly ECMWF wave data for a spot.

        Returns:
            List of VerificationPoint, empty when unconfigured or on any error.
        """
        if not self.is_configured:
            log.warning("Stormglass API key not configured - skipping fetch")
            return []

        start = now or datetime.now(timezone.utc)
        end = start + timedelta(hours=self.hours_ahead)
        params = {
            "lat": profile.latitude,
            "lng": profile.longitude,
            "params": self.PARAMS,
            "source": self.SOURCE,
            "start": start.isoformat(),
            "end": end.isoformat(),
        }
        headers = {"Authorization": self.api_key}

        try:
            response = requests.get(self.BASE_URL, params=params, headers=headers, timeout=self.timeout)

            if response.status_code == 402:
                log.error("Stormglass daily quota exceeded (402)")
                return []
            if response.status_code == 401:
                log.error("Stormglass rejected API key (401)")
                return []
            if response.status_code != 200:
                log.error(f"Stormglass HTTP error: {response.status_code} - {response.text}")
                return []

            data = response.json()

        except (requests.RequestException, ValueError) as e:
            log.error(f"Stormglass request failed: {e}")
            return []

        meta = data.get("meta", {})
        log.info(f"Stormglass cost: {meta.get('cost', 'unknown')}, daily quota: {meta.get('dailyQuota', 'unknown')}")
        return self._parse_response(data, profile)

    def _parse_response(self, data: dict, profile: SpotProfile) -> list:
        """Parse Stormglass response into VerificationPoints."""
        hours = data.get("hours") or []
        if not hours:
            log.warning(f"Stormglass returned no hourly data for {profile.name}")
            return []

        points = []
        for hour in hours:
            try:
                timestamp = _parse_time(hour["time"])
            except (KeyError, TypeError, ValueError) as e:
                log.error(f"Stormglass hour skipped, bad time: {e}")
                continue

            points.append(VerificationPoint(
                timestamp=timestamp,
                wave_height_ft=_meters_to_feet((hour.get("waveHeight") or {}).get(self.SOURCE)),
                swell_height_ft=_meters_to_feet((hour.get("swellHeight") or {}).get(self.SOURCE)),
                swell_period_s=(hour.get("swellPeriod") or {}).get(self.SOURCE),
                swell_direction_deg=(hour.get("swellDirection") or {}).get(self.SOURCE),
                source=self.SOURCE,
            ))

        log.info(f"Stormglass: {len(points)} ECMWF points for {profile.name}")
        return points
