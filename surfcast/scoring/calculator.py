# ABOUTME: Core surf quality scoring: sub-scorers, post-sum bonuses and the clamp cascade
# ABOUTME: Converts breaking height, swell direction, tide and wind into a 0-100 score and rating

import math
from typing import Optional

from surfcast.debug import traced
from surfcast.scoring import tables
from surfcast.scoring.models import QualityBreakdown, QualityResult, SurfConditions
from surfcast.scoring.reasons import generate_reason
from surfcast.scoring.tables import WindTier, classify_wind_direction, find_direction_band
from surfcast.spots.geometry import calculate_angular_distance, normalize_degrees
from surfcast.spots.profiles import SpotProfile
from surfcast.swell.breaking import calculate_tide_push_multiplier


def score_to_rating(score: int) -> str:
    """Map a 0-100 score to its label."""
    for upper, label in tables.RATING_BANDS:
        if upper is None or score <= upper:
            return label
    return tables.ALL_TIME


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _is_onshore_for_caps(wind_direction_deg: float) -> bool:
    d = normalize_degrees(wind_direction_deg)
    return tables.ONSHORE_CAP_LOW_DEG <= d <= tables.ONSHORE_CAP_HIGH_DEG


class QualityCalculator:
    """
    Calculates 0-100 surf quality for one spot and hour.

    Stateless: every method is a pure function of its arguments, so a single
    instance can be shared across threads and repeated calls give identical
    results.

    Scoring philosophy: size sets the ceiling, wind decides whether you get
    anywhere near it. Direction only ever takes points away. Hard caps stop
    a big number from hiding a dealbreaker (blocked swell, onshore slop).
    """

    # ==================== Sub-scorers ====================

    def score_swell_size(self, breaking_height_ft: float) -> int:
        """0-60 points from breaking height at the beach."""
        for upper, points in tables.SWELL_SIZE_BANDS:
            if breaking_height_ft < upper:
                return points
        return tables.SWELL_SIZE_MAX_SCORE

    def score_direction(self, swell_direction_deg: Optional[float], profile: SpotProfile) -> int:
        """
        Penalty-only direction score, -20 to 0.

        Blocked and shadow bands come first; otherwise the swell is compared
        against the spot's ideal direction and tolerance. Unknown direction
        is neutral.
        """
        if swell_direction_deg is None:
            return 0

        band = find_direction_band(profile.direction_bands, swell_direction_deg)
        if band is not None:
            return band.score

        distance = calculate_angular_distance(swell_direction_deg, profile.swell_target_deg)
        if distance <= profile.swell_tolerance_deg:
            return 0
        return tables.DIRECTION_DRIFT_PENALTY

    def score_tide(
        self,
        tide_ft: Optional[float],
        breaking_height_ft: float,
        profile: SpotProfile,
    ) -> int:
        """
        Tide score, -20 to 20.

        Low-to-mid tide suits small waves, mid tide suits big ones, and
        anything above 5 ft is shorebreak everywhere. Spots that go soft at
        high tide punish small waves in the 3.5-4.0 ft band.
        """
        if tide_ft is None:
            return 0

        if (
            profile.penalize_small_waves_high_tide
            and tables.HIGH_TIDE_BAND_LOW_FT < tide_ft <= tables.HIGH_TIDE_BAND_HIGH_FT
            and breaking_height_ft < tables.HIGH_TIDE_SMALL_WAVE_FT
        ):
            return tables.HIGH_TIDE_SMALL_WAVE_SCORE

        big = breaking_height_ft >= tables.BIG_WAVE_THRESHOLD_FT
        for band in tables.TIDE_BANDS:
            if band.above_ft is None or tide_ft > band.above_ft:
                return band.big_wave_score if big else band.small_wave_score
        return 0

    def wind_bands_for(self, tier: WindTier, profile: SpotProfile, breaking_height_ft: float) -> tuple:
        """Speed table for a tier, after per-spot overrides."""
        override = profile.wind_table_overrides.get(tier)
        if override is not None:
            return override
        if tier is WindTier.OKAY_OFFSHORE and breaking_height_ft >= tables.BIG_WAVE_THRESHOLD_FT:
            return tables.OKAY_OFFSHORE_BIG_WAVE_BANDS
        return tables.WIND_SPEED_TABLES[tier]

    def score_wind(
        self,
        wind_speed_kts: Optional[float],
        wind_direction_deg: Optional[float],
        profile: SpotProfile,
        breaking_height_ft: float = 0.0,
    ) -> int:
        """Wind score, -60 to +20. Missing wind data is neutral."""
        if wind_speed_kts is None or wind_direction_deg is None:
            return 0
        tier = classify_wind_direction(wind_direction_deg)
        bands = self.wind_bands_for(tier, profile, breaking_height_ft)
        return tables.lookup_speed_band(bands, wind_speed_kts)

    def score_gusts(
        self,
        wind_speed_kts: Optional[float],
        wind_gust_kts: Optional[float],
        wind_direction_deg: Optional[float],
    ) -> int:
        """
        Gust penalty, 0 to -20.

        Only gusty (>5 kt over sustained) and strong (>15 kt) wind that isn't
        offshore is penalized; onshore gusts blow sections out harder than
        cross-shore ones.
        """
        if wind_speed_kts is None or wind_gust_kts is None or wind_direction_deg is None:
            return 0

        if wind_gust_kts - wind_speed_kts <= tables.GUST_MIN_DIFFERENTIAL_KTS:
            return 0
        if wind_gust_kts <= tables.GUST_MIN_KTS:
            return 0

        d = normalize_degrees(wind_direction_deg)
        if d >= tables.GUST_OFFSHORE_FROM_DEG or d <= tables.GUST_OFFSHORE_TO_DEG:
            return 0

        onshore = tables.GUST_ONSHORE_LOW_DEG <= d <= tables.GUST_ONSHORE_HIGH_DEG
        for above, onshore_penalty, cross_penalty in tables.GUST_PENALTY_BANDS:
            if wind_gust_kts > above:
                return onshore_penalty if onshore else cross_penalty
        return 0

    def score_breakdown(self, conditions: SurfConditions, profile: SpotProfile) -> QualityBreakdown:
        breaking = conditions.breaking_height_ft
        return QualityBreakdown(
            swell_quality=self.score_swell_size(breaking),
            direction=self.score_direction(conditions.swell_direction_deg, profile),
            tide=self.score_tide(conditions.tide_ft, breaking, profile),
            wind=self.score_wind(
                conditions.wind_speed_kts,
                conditions.wind_direction_deg,
                profile,
                breaking,
            ),
        )

    # ==================== Post-sum adjustments ====================

    def offshore_small_wave_bonus(self, conditions: SurfConditions, profile: SpotProfile) -> int:
        """Clean offshore wind makes small, organized swell worth paddling out for."""
        if not profile.small_wave_offshore_bonus:
            return 0
        if conditions.breaking_height_ft >= tables.OFFSHORE_SMALL_WAVE_MAX_HEIGHT_FT:
            return 0
        if not conditions.has_wind:
            return 0
        if conditions.period_s is None or conditions.period_s < tables.OFFSHORE_SMALL_WAVE_MIN_PERIOD_S:
            return 0
        tier = classify_wind_direction(conditions.wind_direction_deg)
        return profile.small_wave_offshore_bonus.get(tier, 0)

    def secondary_swell_bonus(self, conditions: SurfConditions) -> int:
        """
        Reward organized groundswell hiding under short-period wind slop.

        Applies when the dominant component is under 7s but the secondary is
        at least 1.5 ft and 8s. SE-S secondaries (110-200) earn the full bonus.
        """
        secondary = conditions.secondary_swell
        if secondary is None or conditions.period_s is None:
            return 0
        if conditions.period_s >= tables.SECONDARY_DOMINANT_MAX_PERIOD_S:
            return 0
        if secondary.height_ft < tables.SECONDARY_MIN_HEIGHT_FT:
            return 0
        if secondary.period_s < tables.SECONDARY_MIN_PERIOD_S:
            return 0

        low, high = tables.SECONDARY_GOOD_DIRECTION
        good_direction = (
            secondary.direction_deg is not None
            and low <= secondary.direction_deg <= high
        )
        for min_period, good_bonus, other_bonus in tables.SECONDARY_BONUS_BANDS:
            if secondary.period_s >= min_period:
                return good_bonus if good_direction else other_bonus
        return 0

    def wind_slop_penalty(self, conditions: SurfConditions) -> int:
        """Short-period (<=5s) waves of any real size are just chop."""
        if conditions.period_s is None or conditions.swell_height_ft is None:
            return 0
        if (
            conditions.period_s <= tables.WIND_SLOP_MAX_PERIOD_S
            and conditions.swell_height_ft >= tables.WIND_SLOP_MIN_HEIGHT_FT
        ):
            return tables.WIND_SLOP_PENALTY
        return 0

    # ==================== Clamp cascade ====================

    def small_wave_cap(self, conditions: SurfConditions, profile: SpotProfile) -> Optional[int]:
        """
        Cap for small or short-period surf.

        Spots with offshore small-wave caps get a tier-dependent ceiling when
        waves are 1-2 ft, the period is at least 6s and wind direction is known.
        Everything else small or short-period is capped flat at 30.
        """
        breaking = conditions.breaking_height_ft
        period = conditions.period_s
        short_period = period is not None and period < tables.SMALL_WAVE_LENIENT_MIN_PERIOD_S
        if breaking >= tables.SMALL_WAVE_HEIGHT_FT and not short_period:
            return None

        if (
            breaking < tables.SMALL_WAVE_HEIGHT_FT
            and profile.small_wave_offshore_caps
            and conditions.wind_direction_deg is not None
            and breaking >= tables.SMALL_WAVE_LENIENT_MIN_HEIGHT_FT
            and period is not None
            and not short_period
        ):
            tier = classify_wind_direction(conditions.wind_direction_deg)
            return profile.small_wave_offshore_caps.get(tier, tables.SMALL_WAVE_FLAT_CAP)

        return tables.SMALL_WAVE_FLAT_CAP

    def direction_cap(self, conditions: SurfConditions, profile: SpotProfile) -> Optional[int]:
        band = find_direction_band(profile.direction_bands, conditions.swell_direction_deg)
        return band.cap if band is not None else None

    def onshore_wind_cap(self, conditions: SurfConditions) -> Optional[int]:
        """Light onshore (4.3-6 kt) caps at 50, anything stronger at 39."""
        if not conditions.has_wind or not _is_onshore_for_caps(conditions.wind_direction_deg):
            return None
        speed = conditions.wind_speed_kts
        if speed > tables.LIGHT_ONSHORE_MAX_KTS:
            return tables.STRONG_ONSHORE_CAP
        if speed >= tables.LIGHT_ONSHORE_MIN_KTS:
            return tables.LIGHT_ONSHORE_CAP
        return None

    def angular_wind_cap(self, conditions: SurfConditions, profile: SpotProfile) -> Optional[int]:
        """Strong wind well off the ideal offshore axis."""
        if not conditions.has_wind:
            return None
        angle = calculate_angular_distance(conditions.wind_direction_deg, profile.ideal_wind_deg)
        beneficial = classify_wind_direction(conditions.wind_direction_deg) in tables.BENEFICIAL_TIERS

        cap = None
        for rule in tables.ANGULAR_CAPS:
            if conditions.wind_speed_kts <= rule.min_speed_kts or angle <= rule.min_angle_deg:
                continue
            if rule.exempt_beneficial and beneficial:
                continue
            cap = rule.cap if cap is None else min(cap, rule.cap)
        return cap

    def junk_conditions_cap(self, conditions: SurfConditions) -> Optional[int]:
        """Small waves plus real onshore wind is unsurfable."""
        if not conditions.has_wind:
            return None
        if (
            conditions.breaking_height_ft < tables.JUNK_MAX_HEIGHT_FT
            and _is_onshore_for_caps(conditions.wind_direction_deg)
            and conditions.wind_speed_kts > tables.JUNK_MIN_ONSHORE_KTS
        ):
            return tables.JUNK_CAP
        return None

    def applicable_caps(self, conditions: SurfConditions, profile: SpotProfile) -> list:
        """
        Caps in cascade order as (name, cap) pairs, only those whose condition holds.
        """
        caps = (
            ("small wave", self.small_wave_cap(conditions, profile)),
            ("direction", self.direction_cap(conditions, profile)),
            ("onshore wind", self.onshore_wind_cap(conditions)),
            ("wind angle", self.angular_wind_cap(conditions, profile)),
            ("junk conditions", self.junk_conditions_cap(conditions)),
        )
        return [(name, cap) for name, cap in caps if cap is not None]

    def apply_clamps(self, raw_score: float, conditions: SurfConditions, profile: SpotProfile) -> float:
        """Each cap can only lower the score."""
        score = raw_score
        for _, cap in self.applicable_caps(conditions, profile):
            score = min(score, cap)
        return score

    # ==================== Composition ====================

    def raw_score(self, conditions: SurfConditions, profile: SpotProfile, breakdown: QualityBreakdown) -> float:
        """Summed components plus bonuses and penalties, before any cap."""
        score = float(breakdown.total)
        score += self.score_gusts(
            conditions.wind_speed_kts,
            conditions.wind_gust_kts,
            conditions.wind_direction_deg,
        )
        score += self.offshore_small_wave_bonus(conditions, profile)
        score *= calculate_tide_push_multiplier(
            conditions.tide_phase,
            conditions.tide_ft,
            conditions.breaking_height_ft,
        )
        score += self.secondary_swell_bonus(conditions)
        score += self.wind_slop_penalty(conditions)
        return score

    def calculate(self, conditions: SurfConditions, profile: SpotProfile) -> QualityResult:
        """
        Calculate quality score for one spot and hour.

        Args:
            conditions: Breaking height plus the swell, tide and wind inputs
            profile: Spot being scored

        Returns:
            QualityResult with integer score 0-100, rating, breakdown and reason
        """
        breakdown = self.score_breakdown(conditions, profile)
        raw = self.raw_score(conditions, profile, breakdown)
        clamped = self.apply_clamps(raw, conditions, profile)
        score = max(0, min(100, _round_half_up(clamped)))

        return QualityResult(
            score=score,
            rating=score_to_rating(score),
            breakdown=breakdown,
            reason=generate_reason(
                breakdown,
                conditions.breaking_height_ft,
                conditions.period_s,
                conditions.tide_ft,
                conditions.swell_direction_deg,
            ),
            gust_penalty=self.score_gusts(
                conditions.wind_speed_kts,
                conditions.wind_gust_kts,
                conditions.wind_direction_deg,
            ),
        )


_calculator = QualityCalculator()


def calculate_quality_score(conditions: SurfConditions, profile: SpotProfile) -> QualityResult:
    return _calculator.calculate(conditions, profile)


calculate_quality_score_traced = traced("SCORING")(calculate_quality_score)
