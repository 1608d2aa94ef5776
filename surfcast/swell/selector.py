# ABOUTME: Picks which swell component drives the forecast for one hour
# ABOUTME: Max H²×T energy, sub-5s chop only competes when nothing else exists

from typing import Iterable, Optional

from surfcast.swell.models import COMPONENT_PRIORITY, SwellComponent

# Below this period energy is wind chop, not surfable wave energy
SURFABLE_PERIOD_FLOOR_S = 5.0


def _rank(component: SwellComponent) -> tuple:
    try:
        priority = COMPONENT_PRIORITY.index(component.type)
    except ValueError:
        priority = len(COMPONENT_PRIORITY)
    # Highest energy first, then primary > secondary > wind
    return (-component.energy, priority)


def select_dominant_swell(
    components: Iterable[Optional[SwellComponent]],
) -> Optional[SwellComponent]:
    """
    Choose the component that should drive the forecast.

    Direction never disqualifies a component here; blocked and shadowed
    directions are penalized later by the height calculator and the scorer.

    Args:
        components: Up to three components; None entries are ignored

    Returns:
        The dominant component, or None when there is no swell at all
    """
    present = [c for c in components if c is not None and c.height_ft > 0 and c.period_s > 0]
    if not present:
        return None

    surfable = [c for c in present if c.period_s >= SURFABLE_PERIOD_FLOOR_S]
    candidates = surfable or present
    return min(candidates, key=_rank)
