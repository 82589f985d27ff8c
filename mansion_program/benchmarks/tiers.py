"""
Size tier resolution.

Tier is a pure function of target floor area using fixed, ordered
thresholds. Ties resolve to the smaller tier: an area equal to a threshold
belongs to the next tier up, never the one below.
"""

from __future__ import annotations
import math
from typing import Tuple, Union

from ..core.enums import SizeTier
from ..errors import UnknownTierError

# (exclusive upper bound in SF, tier) - checked in order
TIER_THRESHOLDS: Tuple[Tuple[float, SizeTier], ...] = (
    (7_500, SizeTier.TIER_5K),
    (12_500, SizeTier.TIER_10K),
    (17_500, SizeTier.TIER_15K),
)
TOP_TIER = SizeTier.TIER_20K


def resolve_tier(target_area_sf: float) -> SizeTier:
    """
    Select the size tier for a target floor area.

    Args:
        target_area_sf: Target gross floor area in square feet

    Returns:
        SizeTier for the area

    Raises:
        UnknownTierError: area is negative, NaN or infinite
    """
    try:
        area = float(target_area_sf)
    except (TypeError, ValueError):
        raise UnknownTierError(area=target_area_sf) from None

    if not math.isfinite(area) or area < 0:
        raise UnknownTierError(area=target_area_sf)

    for upper_bound, tier in TIER_THRESHOLDS:
        if area < upper_bound:
            return tier
    return TOP_TIER


def parse_tier(tier_id: Union[str, SizeTier]) -> SizeTier:
    """Coerce a tier id ("10k") to SizeTier, raising UnknownTierError."""
    if isinstance(tier_id, SizeTier):
        return tier_id
    try:
        return SizeTier(str(tier_id).strip().lower())
    except ValueError:
        raise UnknownTierError(tier_id) from None
