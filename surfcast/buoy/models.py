# ABOUTME: Data models for NOAA buoy observations (spectral swell split plus station wind)
# ABOUTME: Every field but the timestamp may be None; None means no signal, never zero

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional

from surfcast.spots.geometry import degrees_to_compass
from surfcast.swell.models import PRIMARY, WIND, SwellComponent
from surfcast.swell.selector import select_dominant_swell

STALE_THRESHOLD_SECONDS = 2 * 60 * 60


@dataclass
class WindObservation:
    """Station wind from the standard meteorological feed"""
    timestamp: datetime
    wind_speed_kts: Optional[float] = None
    wind_direction_deg: Optional[float] = None
    wind_gust_kts: Optional[float] = None


@dataclass
class BuoyReading:
    """Latest spectral reading from a wave buoy, heights already in feet"""
    timestamp: datetime
    is_stale: bool = False
    wave_height_ft: Optional[float] = None        # WVHT, combined significant height
    swell_height_ft: Optional[float] = None       # SwH, background groundswell
    swell_period_s: Optional[float] = None
    swell_direction_deg: Optional[float] = None
    wind_wave_height_ft: Optional[float] = None   # WWH, local chop
    wind_wave_period_s: Optional[float] = None
    wind_wave_direction_deg: Optional[float] = None
    steepness: Optional[str] = None
    average_period_s: Optional[float] = None
    mean_wave_direction_deg: Optional[float] = None
    # From the companion meteorological feed; absent when that feed failed
    wind_speed_kts: Optional[float] = None
    wind_direction_deg: Optional[float] = None
    wind_gust_kts: Optional[float] = None

    def __str__(self) -> str:
        swell = (
            f"{self.swell_height_ft:.1f}ft @ {self.swell_period_s:.0f}s"
            if self.swell_height_ft is not None and self.swell_period_s is not None
            else "no swell"
        )
        stale = " (stale)" if self.is_stale else ""
        return f"Buoy {self.timestamp:%Y-%m-%d %H:%M}Z: {swell}{stale}"

    @property
    def swell_component(self) -> Optional[SwellComponent]:
        return SwellComponent.from_fields(
            self.swell_height_ft, self.swell_period_s, self.swell_direction_deg, PRIMARY
        )

    @property
    def wind_wave_component(self) -> Optional[SwellComponent]:
        return SwellComponent.from_fields(
            self.wind_wave_height_ft, self.wind_wave_period_s, self.wind_wave_direction_deg, WIND
        )

    @property
    def dominant_component(self) -> Optional[SwellComponent]:
        """Swell or wind-wave train by H²×T energy; ties go to the swell."""
        return select_dominant_swell([self.swell_component, self.wind_wave_component])

    @property
    def dominant_period_s(self) -> Optional[float]:
        dominant = self.dominant_component
        if dominant is not None:
            return dominant.period_s
        return self.average_period_s

    @property
    def direction_label(self) -> str:
        if self.mean_wave_direction_deg is None:
            return "N/A"
        return degrees_to_compass(self.mean_wave_direction_deg)

    @property
    def has_wind(self) -> bool:
        return self.wind_speed_kts is not None and self.wind_direction_deg is not None

    def age_seconds(self, now: Optional[datetime] = None) -> float:
        now = now or datetime.now(timezone.utc)
        return (now - self.timestamp).total_seconds()

    def is_stale_at(
        self,
        now: Optional[datetime] = None,
        threshold_seconds: int = STALE_THRESHOLD_SECONDS,
    ) -> bool:
        """
        Check if this reading is stale.

        Args:
            now: Reference time (default: current UTC time)
            threshold_seconds: Max age in seconds (default 7200 = 2 hours)

        Returns:
            True if reading is older than threshold
        """
        return self.age_seconds(now) > threshold_seconds

    def restamped(
        self,
        now: Optional[datetime] = None,
        threshold_seconds: int = STALE_THRESHOLD_SECONDS,
    ) -> "BuoyReading":
        """Copy with is_stale recomputed against now."""
        return replace(self, is_stale=self.is_stale_at(now, threshold_seconds))

    def with_wind(self, wind: Optional[WindObservation]) -> "BuoyReading":
        if wind is None:
            return self
        return replace(
            self,
            wind_speed_kts=wind.wind_speed_kts,
            wind_direction_deg=wind.wind_direction_deg,
            wind_gust_kts=wind.wind_gust_kts,
        )
