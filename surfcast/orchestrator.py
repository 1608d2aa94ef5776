# ABOUTME: Main forecast orchestrator coordinating buoy cache, scoring and confidence banding
# ABOUTME: Entry point for consumers asking for current conditions or multi-hour timelines

import logging
from dataclasses import replace
from typing import Iterable, Optional

from surfcast.buoy.client import BuoyClient
from surfcast.buoy.models import BuoyReading, WindObservation
from surfcast.cache.manager import BuoyCache
from surfcast.confidence.banding import build_confidence_records, summarize_confidence
from surfcast.confidence.models import ConfidenceSummary
from surfcast.config import Config
from surfcast.debug import debug_log
from surfcast.forecast.models import ForecastHour, ForecastOutput
from surfcast.forecast.output import forecast_for_profile, generate_timeline, hour_from_buoy
from surfcast.forecast.tides import TideState
from surfcast.spots.profiles import UnknownSpotError, require_profile

log = logging.getLogger(__name__)


class ForecastOrchestrator:
    """Orchestrates buoy data, forecast scoring and confidence for all spots"""

    def __init__(
        self,
        buoy_client: Optional[BuoyClient] = None,
        cache: Optional[BuoyCache] = None,
        summary_policy: str = None,
        summary_min_count: int = None,
    ):
        self.buoy_client = buoy_client or BuoyClient()
        self.cache = cache or BuoyCache(
            fetcher=self.buoy_client.fetch,
            ttl_seconds=Config.BUOY_CACHE_TTL_SECONDS,
            stale_threshold_seconds=Config.BUOY_STALE_THRESHOLD_SECONDS,
        )
        self.summary_policy = summary_policy or Config.CONFIDENCE_SUMMARY_POLICY
        self.summary_min_count = (
            summary_min_count if summary_min_count is not None else Config.CONFIDENCE_MIN_COUNT
        )

    def get_buoy_reading(self) -> Optional[BuoyReading]:
        """
        Latest buoy reading, fetching if the cache has expired.

        Returns:
            BuoyReading with a current is_stale flag, or None when the buoy has
            never returned data.
        """
        reading = self.cache.get()
        if reading is None:
            debug_log("No buoy data available", "ORCHESTRATOR")
        elif reading.is_stale:
            log.warning(f"Buoy reading is stale: {reading.timestamp.isoformat()}")
        return reading

    def current_conditions(
        self,
        spot_id: str,
        wind: Optional[WindObservation] = None,
        tide: Optional[TideState] = None,
    ) -> Optional[ForecastOutput]:
        """
        Score the spot right now from the buoy.

        Args:
            spot_id: Spot key or name
            wind: Overrides the buoy's station wind when given
            tide: Current tide height and phase, if known

        Returns:
            ForecastOutput flagged is_stale when the buoy is old, or None
            when there is no buoy data at all.

        Raises:
            UnknownSpotError: spot_id has no profile
        """
        profile = require_profile(spot_id)
        reading = self.get_buoy_reading()
        if reading is None:
            return None

        hour = hour_from_buoy(reading, wind=wind, tide=tide)
        output = forecast_for_profile(hour, profile, is_stale=reading.is_stale)
        debug_log(str(output), "ORCHESTRATOR")
        return output

    def forecast_timeline(
        self,
        spot_id: str,
        hours: Iterable[ForecastHour],
        verification: Optional[list] = None,
    ) -> list:
        """
        Multi-hour forecast for one spot.

        Confidence is attached to hours that have a verification point;
        others keep confidence=None.

        Raises:
            UnknownSpotError: spot_id has no profile
        """
        timeline = generate_timeline(hours, spot_id)
        if not verification:
            return timeline

        records = build_confidence_records(timeline, verification)
        return [
            replace(output, confidence=record.tier, verification_height_ft=record.verification_ft)
            if record is not None else output
            for output, record in zip(timeline, records)
        ]

    def forecast_all_spots(
        self,
        hours_by_spot: dict,
        verification_by_spot: Optional[dict] = None,
    ) -> dict:
        """
        Timelines for several spots.

        An unknown spot is logged and left out; the others still come back.

        Returns:
            {spot_id: [ForecastOutput, ...]}
        """
        verification_by_spot = verification_by_spot or {}
        results = {}
        for spot_id, hours in hours_by_spot.items():
            try:
                results[spot_id] = self.forecast_timeline(
                    spot_id,
                    hours,
                    verification_by_spot.get(spot_id),
                )
            except UnknownSpotError as e:
                log.error(f"Skipping spot: {e}")
        return results

    def confidence_summary(self, timeline: list) -> ConfidenceSummary:
        """Aggregate the timeline's confidence tiers with the configured policy."""
        return summarize_confidence(
            (output.confidence for output in timeline),
            policy=self.summary_policy,
            min_count=self.summary_min_count,
        )
