# ABOUTME: Data model for a single swell component in one forecast hour
# ABOUTME: Energy is derived from height and period, never stored separately

from dataclasses import dataclass
from typing import Optional

PRIMARY = "primary"
SECONDARY = "secondary"
WIND = "wind"

# Tie-break order when two components carry equal energy
COMPONENT_PRIORITY = (PRIMARY, SECONDARY, WIND)


@dataclass(frozen=True)
class SwellComponent:
    """One swell train: primary groundswell, secondary swell, or local wind waves"""
    height_ft: float
    period_s: float
    direction_deg: Optional[float]
    type: str

    @property
    def energy(self) -> float:
        """H² × T, proportional to wave power per unit crest length."""
        return self.height_ft * self.height_ft * self.period_s

    @classmethod
    def from_fields(
        cls,
        height_ft: Optional[float],
        period_s: Optional[float],
        direction_deg: Optional[float],
        type: str,
    ) -> Optional["SwellComponent"]:
        """
        Build a component from nullable upstream fields.

        Returns:
            SwellComponent, or None when height or period is missing or not positive
        """
        if height_ft is None or period_s is None:
            return None
        if height_ft <= 0 or period_s <= 0:
            return None
        return cls(
            height_ft=float(height_ft),
            period_s=float(period_s),
            direction_deg=float(direction_deg) if direction_deg is not None else None,
            type=type,
        )

    def __str__(self) -> str:
        direction = f"{self.direction_deg:.0f}°" if self.direction_deg is not None else "?"
        return f"{self.type}: {self.height_ft:.1f}ft @ {self.period_s:.0f}s from {direction}"
