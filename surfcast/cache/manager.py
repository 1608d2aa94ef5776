# ABOUTME: Single-slot in-memory cache for the latest buoy reading
# ABOUTME: Fixed TTL for refetching, staleness flag recomputed on every read

import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Optional

from surfcast.buoy.models import STALE_THRESHOLD_SECONDS, BuoyReading
from surfcast.debug import debug_log

log = logging.getLogger(__name__)


class BuoyCache:
    """
    Cache for the buoy feed.

    TTL (default 15 minutes) decides when to refetch. Staleness (reading older
    than 2 hours) is a separate flag restamped on each read, so a cached but
    stale reading is still returned with is_stale=True.

    The slot is replaced atomically. While one caller refreshes, others keep
    getting the cached reading; a failed fetch never evicts it.
    """

    def __init__(
        self,
        fetcher: Callable[[], Optional[BuoyReading]],
        ttl_seconds: int = 900,
        stale_threshold_seconds: int = STALE_THRESHOLD_SECONDS,
        clock: Callable[[], datetime] = None,
    ):
        self.fetcher = fetcher
        self.ttl_seconds = ttl_seconds
        self.stale_threshold_seconds = stale_threshold_seconds
        self._clock = clock or (lambda: datetime.now(timezone.utc))

        # (reading, fetched_at) or None
        self._slot: Optional[tuple] = None
        self._refresh_lock = threading.Lock()

    # ==================== Slot ====================

    def set(self, reading: BuoyReading, fetched_at: Optional[datetime] = None) -> None:
        self._slot = (reading, fetched_at or self._clock())

    def peek(self) -> Optional[BuoyReading]:
        """Cached reading regardless of TTL, staleness restamped."""
        slot = self._slot
        if slot is None:
            return None
        return slot[0].restamped(self._clock(), self.stale_threshold_seconds)

    def fetched_at(self) -> Optional[datetime]:
        slot = self._slot
        return slot[1] if slot else None

    def is_expired(self) -> bool:
        """Check if the slot needs a refetch."""
        slot = self._slot
        if slot is None:
            return True
        age = self._clock() - slot[1]
        return age.total_seconds() >= self.ttl_seconds

    def clear(self) -> None:
        """Drop the cached reading so the next get() refetches."""
        self._slot = None
        log.info("Buoy cache cleared")

    # ==================== Read-through ====================

    def get(self) -> Optional[BuoyReading]:
        """
        Cached reading if within TTL, otherwise refetch.

        Returns:
            BuoyReading with a current is_stale flag, or None when nothing has
            ever been fetched successfully.
        """
        if not self.is_expired():
            return self.peek()
        return self.refresh()

    def refresh(self, force: bool = False) -> Optional[BuoyReading]:
        """
        Fetch a fresh reading into the slot.

        If another refresh is already running and there is something cached,
        return the cached reading instead of waiting. With an empty slot,
        wait for the running refresh to finish.

        Args:
            force: Refetch even if the slot is still within TTL
        """
        acquired = self._refresh_lock.acquire(blocking=False)
        if not acquired:
            if self._slot is not None:
                debug_log("Refresh in flight, serving cached reading", "CACHE")
                return self.peek()
            self._refresh_lock.acquire()

        try:
            # Someone else may have filled the slot while we waited
            if not force and not self.is_expired():
                return self.peek()

            reading = self.fetcher()
            if reading is None:
                log.warning("Buoy fetch returned no data, keeping cached reading")
                return self.peek()

            self.set(reading)
            debug_log(f"Cached buoy reading from {reading.timestamp.isoformat()}", "CACHE")
            return self.peek()
        finally:
            self._refresh_lock.release()
