# ABOUTME: NOAA NDBC client for real-time buoy swell and wind data
# ABOUTME: Fetches the spectral feed for swell components and the met feed for wind

import logging
import requests
from datetime import datetime
from typing import Optional

from surfcast.buoy.models import BuoyReading, WindObservation
from surfcast.buoy.parser import parse_spec_feed, parse_stdmet_feed
from surfcast.config import Config

log = logging.getLogger(__name__)


class BuoyClient:
    """
    Client for NDBC realtime2 text feeds.

    Buoy 44065 (NY Harbor Entrance, 15 NM SE of Breezy Point) is the
    closest nearshore buoy to Rockaway, Long Beach and Lido.
    """

    def __init__(
        self,
        station_id: str = None,
        timeout: int = None,
        stale_threshold_seconds: int = None,
    ):
        self.station_id = station_id or Config.BUOY_STATION_ID
        self.timeout = timeout if timeout is not None else Config.HTTP_TIMEOUT_SECONDS
        self.stale_threshold_seconds = (
            stale_threshold_seconds if stale_threshold_seconds is not None
            else Config.BUOY_STALE_THRESHOLD_SECONDS
        )

    def _get_text(self, url: str) -> Optional[str]:
        headers = {"User-Agent": Config.USER_AGENT}
        try:
            response = requests.get(url, headers=headers, timeout=self.timeout)

            if response.status_code != 200:
                log.error(f"NDBC HTTP error for {url}: {response.status_code}")
                return None

            return response.text

        except requests.RequestException as e:
            log.error(f"NDBC request failed for {url}: {e}")
            return None

    def fetch_spectral(self, now: Optional[datetime] = None) -> Optional[BuoyReading]:
        """
        Fetch the latest spectral reading.

        Returns:
            BuoyReading on success, None on network error or no usable line.
        """
        text = self._get_text(Config.buoy_spec_url(self.station_id))
        if text is None:
            return None
        return parse_spec_feed(text, now=now, stale_threshold_seconds=self.stale_threshold_seconds)

    def fetch_wind(self) -> Optional[WindObservation]:
        text = self._get_text(Config.buoy_stdmet_url(self.station_id))
        if text is None:
            return None
        return parse_stdmet_feed(text)

    def fetch(self, now: Optional[datetime] = None) -> Optional[BuoyReading]:
        """
        Fetch swell plus wind for the station.

        Wind comes from a separate feed; if it fails the swell reading is
        still returned with wind fields left as None.

        Returns:
            BuoyReading on success, None when the spectral feed has no data.
        """
        reading = self.fetch_spectral(now=now)
        if reading is None:
            return None

        wind = self.fetch_wind()
        if wind is None:
            log.warning(f"Buoy {self.station_id}: wind feed unavailable, returning swell only")
            return reading

        log.info(f"Buoy {self.station_id}: {reading}")
        return reading.with_wind(wind)
