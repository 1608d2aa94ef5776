# ABOUTME: Human-readable explanation for a quality score
# ABOUTME: Built from the breakdown and raw inputs, never from the clamped final score

from typing import Optional

from surfcast.scoring.models import QualityBreakdown

NEUTRAL_REASON = "marginal conditions"
NO_SWELL_REASON = "No valid swell data"


def _period_reasons(breaking_height_ft: float, period_s: Optional[float]) -> list:
    if period_s is None:
        return []
    reasons = []
    if period_s < 5:
        reasons.append("junk period")
    if breaking_height_ft < 2 and period_s < 6:
        reasons.append("too small and weak")
    return reasons


def _swell_reason(breakdown: QualityBreakdown) -> Optional[str]:
    if breakdown.swell_quality >= 50:
        return "good swell"
    if breakdown.swell_quality <= 5:
        return "weak swell"
    return None


def _direction_reason(breakdown: QualityBreakdown, swell_direction_deg: Optional[float]) -> Optional[str]:
    if swell_direction_deg is None:
        return None
    if breakdown.direction == 0:
        return "ideal direction"
    if breakdown.direction <= -18:
        return "blocked direction"
    if breakdown.direction <= -15:
        return "poor wrap"
    return "off-angle"


def _tide_reason(
    breakdown: QualityBreakdown,
    breaking_height_ft: float,
    tide_ft: Optional[float],
) -> Optional[str]:
    if tide_ft is None:
        return None
    big = breaking_height_ft >= 4.0
    if tide_ft > 5.0:
        return "shore-break"
    if tide_ft > 4.0:
        return "holdable tide" if big else "mushy tide"
    if tide_ft > 3.0:
        return "optimal tide" if big else "mushy tide"
    if breakdown.tide >= 18:
        return "optimal tide"
    return None


def _wind_reason(breakdown: QualityBreakdown) -> Optional[str]:
    if breakdown.wind >= 15:
        return "offshore winds"
    if breakdown.wind <= -20:
        return "onshore winds"
    if breakdown.wind < 0:
        return "wind issues"
    if breakdown.wind > 0:
        return "favorable winds"
    return None


def generate_reason(
    breakdown: QualityBreakdown,
    breaking_height_ft: float,
    period_s: Optional[float],
    tide_ft: Optional[float],
    swell_direction_deg: Optional[float] = None,
) -> str:
    """
    Short comma list of notable conditions.

    Order is fixed: period, size, swell, direction, tide, wind. Unknown
    direction or tide contributes nothing rather than a guess.

    Returns:
        e.g. "good swell, ideal direction, offshore winds"
    """
    reasons = _period_reasons(breaking_height_ft, period_s)
    for reason in (
        _swell_reason(breakdown),
        _direction_reason(breakdown, swell_direction_deg),
        _tide_reason(breakdown, breaking_height_ft, tide_ft),
        _wind_reason(breakdown),
    ):
        if reason:
            reasons.append(reason)
    return ", ".join(reasons) if reasons else NEUTRAL_REASON
