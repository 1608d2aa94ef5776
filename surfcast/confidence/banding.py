# ABOUTME: Confidence banding by comparing primary breaking height to an independent forecast
# ABOUTME: Per-hour HIGH/MED/LOW tiers plus a tunable multi-hour summary policy

from datetime import datetime, timezone
from typing import Iterable, Optional

from surfcast.confidence.models import (
    TIER_SEVERITY,
    ConfidenceRecord,
    ConfidenceSummary,
    ConfidenceTier,
    VerificationPoint,
)

HIGH_MAX_DIFF_FT = 0.5   # exclusive
MED_MAX_DIFF_FT = 1.5    # exclusive

WORST_POLICY = "worst"
MAJORITY_POLICY = "majority"
SUMMARY_POLICIES = (WORST_POLICY, MAJORITY_POLICY)

MAJORITY_HIGH_SHARE = 0.6
MAJORITY_LOW_SHARE = 0.4

DISCREPANCY_THRESHOLD_FT = 1.0

BADGE_TEXT = {
    ConfidenceTier.HIGH: "High Confidence",
    ConfidenceTier.LOW: "Forecast Uncertain",
}


def classify_difference(difference_ft: float) -> ConfidenceTier:
    """0.5 ft is already MED and 1.5 ft already LOW."""
    if difference_ft < HIGH_MAX_DIFF_FT:
        return ConfidenceTier.HIGH
    if difference_ft < MED_MAX_DIFF_FT:
        return ConfidenceTier.MED
    return ConfidenceTier.LOW


def calculate_confidence(
    primary_ft: Optional[float],
    verification_ft: Optional[float],
) -> Optional[ConfidenceTier]:
    """Tier for one hour, or None when either source has no estimate."""
    if primary_ft is None or verification_ft is None:
        return None
    return classify_difference(abs(primary_ft - verification_ft))


def hour_key(timestamp: datetime) -> datetime:
    """UTC clock hour used to line up the two sources; naive times are UTC."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc).replace(minute=0, second=0, microsecond=0)


def index_by_hour(points: Iterable[VerificationPoint]) -> dict:
    return {hour_key(point.timestamp): point for point in points}


def confidence_record(
    timestamp: datetime,
    primary_ft: Optional[float],
    verification: Optional[VerificationPoint],
) -> Optional[ConfidenceRecord]:
    """
    Compare one hour's breaking height against the verification swell height.

    Returns:
        ConfidenceRecord, or None when either estimate is missing
    """
    verification_ft = verification.swell_height_ft if verification else None
    if primary_ft is None or verification_ft is None:
        return None
    difference = abs(primary_ft - verification_ft)
    return ConfidenceRecord(
        timestamp=timestamp,
        primary_ft=primary_ft,
        verification_ft=verification_ft,
        difference_ft=difference,
        tier=classify_difference(difference),
    )


def build_confidence_records(timeline: list, verification: Iterable[VerificationPoint]) -> list:
    """
    One entry per timeline hour, aligned by UTC hour.

    Args:
        timeline: Items with .timestamp and .primary_estimate_ft (None for hours
            with no swell data)
        verification: Independent forecast points

    Returns:
        List the same length as timeline; None where no comparison exists
    """
    by_hour = index_by_hour(verification)
    return [
        confidence_record(
            item.timestamp,
            item.primary_estimate_ft,
            by_hour.get(hour_key(item.timestamp)),
        )
        for item in timeline
    ]


def count_tiers(tiers: Iterable[Optional[ConfidenceTier]]) -> dict:
    counts = {tier: 0 for tier in ConfidenceTier}
    for tier in tiers:
        if tier is not None:
            counts[tier] += 1
    return counts


def _worst_tier(counts: dict, min_count: int) -> ConfidenceTier:
    """Worst tier seen at least min_count times; a lone LOW hour is never diluted away."""
    for tier in TIER_SEVERITY:
        if counts[tier] >= min_count:
            return tier
    # Nothing reaches min_count: fall back to the worst tier present at all
    for tier in TIER_SEVERITY:
        if counts[tier] > 0:
            return tier
    return ConfidenceTier.HIGH


def _majority_tier(counts: dict) -> ConfidenceTier:
    total = sum(counts.values())
    if counts[ConfidenceTier.HIGH] / total >= MAJORITY_HIGH_SHARE:
        return ConfidenceTier.HIGH
    if counts[ConfidenceTier.LOW] / total >= MAJORITY_LOW_SHARE:
        return ConfidenceTier.LOW
    return ConfidenceTier.MED


def summarize_confidence(
    tiers: Iterable[Optional[ConfidenceTier]],
    policy: str = WORST_POLICY,
    min_count: int = 1,
) -> ConfidenceSummary:
    """
    Aggregate per-hour tiers over a window.

    Args:
        tiers: Per-hour tiers; None entries (no comparison) are ignored
        policy: "worst" (pessimistic, default) or "majority"
        min_count: Under "worst", hours a tier needs before it can win

    Returns:
        ConfidenceSummary; overall is None when no hour had both sources
    """
    if policy not in SUMMARY_POLICIES:
        raise ValueError(f"Unknown confidence summary policy: {policy}")

    counts = count_tiers(tiers)
    summary = ConfidenceSummary(counts=counts, policy=policy)
    if summary.total_with_data == 0:
        return summary

    if policy == MAJORITY_POLICY:
        summary.overall = _majority_tier(counts)
    else:
        summary.overall = _worst_tier(counts, max(1, min_count))
    return summary


def find_height_discrepancy(
    timeline: list,
    verification: Iterable[VerificationPoint],
    threshold_ft: float = DISCREPANCY_THRESHOLD_FT,
) -> tuple:
    """
    Largest offshore wave height disagreement at or above threshold.

    Args:
        timeline: Items with .timestamp and .wave_height_ft
        verification: Independent forecast points
        threshold_ft: Smallest difference worth warning about

    Returns:
        (has_large_discrepancy, max_diff_ft); max_diff_ft is None when
        nothing reached the threshold
    """
    by_hour = index_by_hour(verification)
    max_diff = None
    for item in timeline:
        point = by_hour.get(hour_key(item.timestamp))
        if point is None or point.wave_height_ft is None or item.wave_height_ft is None:
            continue
        diff = abs(item.wave_height_ft - point.wave_height_ft)
        if diff >= threshold_ft and (max_diff is None or diff > max_diff):
            max_diff = diff
    return max_diff is not None, max_diff


def badge_text(tier: Optional[ConfidenceTier]) -> Optional[str]:
    """Display badge; MED and unknown get none."""
    return BADGE_TEXT.get(tier)
