"""
mansion_program Benchmarks Module

Size tier resolution, the space registry and the per-tier benchmark presets.
"""

from .tiers import TIER_THRESHOLDS, TOP_TIER, resolve_tier, parse_tier
from .registry import (
    Zone,
    ZONES,
    SpaceDefinition,
    SPACE_REGISTRY,
    get_space_definition,
    spaces_for_tier,
)
from .library import (
    BRIDGE_IDS,
    TIER_BRIDGES,
    TIER_PROVIDED_BRIDGES,
    PresetLibrary,
    PRESET_LIBRARY,
    get_preset,
)

__all__ = [
    # Tiers
    "TIER_THRESHOLDS",
    "TOP_TIER",
    "resolve_tier",
    "parse_tier",

    # Registry
    "Zone",
    "ZONES",
    "SpaceDefinition",
    "SPACE_REGISTRY",
    "get_space_definition",
    "spaces_for_tier",

    # Presets
    "BRIDGE_IDS",
    "TIER_BRIDGES",
    "TIER_PROVIDED_BRIDGES",
    "PresetLibrary",
    "PRESET_LIBRARY",
    "get_preset",
]
