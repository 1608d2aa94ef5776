# ABOUTME: Tide height and phase at a moment, from high/low tide predictions
# ABOUTME: Linear interpolation between the surrounding events; phase follows the next event

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

HIGH = "H"
LOW = "L"

RISING = "rising"
FALLING = "falling"


@dataclass(frozen=True)
class TidePrediction:
    """One predicted high or low tide (NOAA CO-OPS hilo style)"""
    time: datetime
    height_ft: float
    kind: str  # "H" or "L"


@dataclass(frozen=True)
class TideState:
    height_ft: float
    phase: str
    next_event: Optional[TidePrediction] = None


def tide_state_at(predictions: list, when: datetime) -> Optional[TideState]:
    """
    Estimate tide height and phase at a given time.

    Args:
        predictions: High/low events in any order
        when: Moment of interest, same tz-awareness as the predictions

    Returns:
        TideState rounded to 0.1 ft, or None with fewer than two events or
        nothing after `when`
    """
    if len(predictions) < 2:
        return None

    ordered = sorted(predictions, key=lambda p: p.time)
    next_event = next((p for p in ordered if p.time > when), None)
    if next_event is None:
        return None

    previous = None
    for p in ordered:
        if p.time <= when:
            previous = p

    phase = RISING if next_event.kind == HIGH else FALLING

    if previous is None:
        height = next_event.height_ft
    else:
        total = (next_event.time - previous.time).total_seconds()
        elapsed = (when - previous.time).total_seconds()
        progress = elapsed / total if total > 0 else 1.0
        height = previous.height_ft + (next_event.height_ft - previous.height_ft) * progress

    return TideState(height_ft=round(height, 1), phase=phase, next_event=next_event)
