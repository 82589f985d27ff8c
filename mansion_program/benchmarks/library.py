"""
mansion_program Benchmark Library

Static presets keyed by size tier. Each preset holds the tier's space list,
its benchmark ("desired") adjacency matrix and its bridge requirements.

Matrices are populated symmetrically from tier layers: a tier's matrix is
its own layer merged over every smaller tier's layer.
"""

from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from ..core.enums import Relationship, SizeTier
from ..core.models import AdjacencyMatrix, MatrixKey, Preset
from .registry import spaces_for_tier
from .tiers import parse_tier, resolve_tier

logger = logging.getLogger(__name__)

A = Relationship.ADJACENT
N = Relationship.NEAR
B = Relationship.BUFFERED
S = Relationship.SEPARATE

Pair = Tuple[str, str, Relationship]

BRIDGE_IDS = ("butlerPantry", "guestAutonomy", "soundLock", "wetFeetIntercept", "opsCore")

TIER_TARGET_AREA: Dict[SizeTier, float] = {
    SizeTier.TIER_5K: 5_000.0,
    SizeTier.TIER_10K: 10_000.0,
    SizeTier.TIER_15K: 15_000.0,
    SizeTier.TIER_20K: 20_000.0,
}

TIER_BRIDGES: Dict[SizeTier, Tuple[str, ...]] = {
    SizeTier.TIER_5K: (),
    SizeTier.TIER_10K: ("butlerPantry", "soundLock"),
    SizeTier.TIER_15K: ("butlerPantry", "soundLock", "wetFeetIntercept", "opsCore"),
    SizeTier.TIER_20K: BRIDGE_IDS,
}

# Bridges the benchmark layouts include before any choice is made
TIER_PROVIDED_BRIDGES: Dict[SizeTier, Tuple[str, ...]] = {
    SizeTier.TIER_5K: (),
    SizeTier.TIER_10K: BRIDGE_IDS,
    SizeTier.TIER_15K: BRIDGE_IDS,
    SizeTier.TIER_20K: BRIDGE_IDS,
}


def symmetric(pairs: Iterable[Pair]) -> Dict[MatrixKey, Relationship]:
    """Expand undirected pairs to both ordered keys; a repeated pair is a data error."""
    entries: Dict[MatrixKey, Relationship] = {}
    for a, b, rel in pairs:
        for key in ((a, b), (b, a)):
            if key in entries:
                raise ValueError(f"Benchmark pair {a}-{b} defined twice")
            entries[key] = rel
    return entries


class PresetLibrary:
    """Repository of benchmark presets, one per size tier."""

    def __init__(self):
        self._layers: Dict[SizeTier, Dict[MatrixKey, Relationship]] = {}
        self._presets: Dict[SizeTier, Preset] = {}

        self._load_5k_layer()
        self._load_10k_layer()
        self._load_15k_layer()
        self._load_20k_layer()

        for tier in SizeTier:
            self.register(self._build_preset(tier))

    def register(self, preset: Preset) -> None:
        """Register a preset under its tier id."""
        self._presets[parse_tier(preset.id)] = preset

    def get(self, tier_id) -> Preset:
        """Get preset by tier id; raises UnknownTierError."""
        return self._presets[parse_tier(tier_id)]

    def preset_for_area(self, target_area_sf: float) -> Preset:
        return self._presets[resolve_tier(target_area_sf)]

    def all_presets(self) -> List[Preset]:
        return [self._presets[t] for t in sorted(self._presets, key=lambda t: t.rank)]

    def tier_ids(self) -> List[str]:
        return [p.id for p in self.all_presets()]

    # -------------------------------------------------------------------------
    # Assembly
    # -------------------------------------------------------------------------

    def _build_preset(self, tier: SizeTier) -> Preset:
        entries: Dict[MatrixKey, Relationship] = {}
        for layer_tier in SizeTier:
            if layer_tier.rank <= tier.rank:
                entries.update(self._layers.get(layer_tier, {}))

        required = set(TIER_BRIDGES[tier])
        preset = Preset(
            id=tier.value,
            name=f"{tier.value.upper()} SF Benchmark",
            spaces=spaces_for_tier(tier),
            adjacency_matrix=AdjacencyMatrix(entries),
            bridge_requirements={bridge_id: bridge_id in required for bridge_id in BRIDGE_IDS},
            provided_bridges=TIER_PROVIDED_BRIDGES[tier],
            target_area=TIER_TARGET_AREA[tier],
            description=f"Benchmark program for a {tier.value} square foot residence",
        )
        logger.debug(
            f"Built preset {preset.id}: {len(preset.spaces)} spaces, "
            f"{len(preset.adjacency_matrix)} relationships"
        )
        return preset

    # -------------------------------------------------------------------------
    # Tier layers
    # -------------------------------------------------------------------------

    def _load_5k_layer(self) -> None:
        self._layers[SizeTier.TIER_5K] = symmetric([
            # Arrival sequence
            ("FOY", "OFF", A),
            ("FOY", "GR", A),
            ("FOY", "DR", N),
            ("FOY", "FR", B),
            ("FOY", "KIT", B),
            ("FOY", "STAIR", A),
            ("FOY", "MUD", S),
            ("FOY", "GAR", S),
            ("FOY", "SCUL", S),
            ("GR", "DR", A),
            ("GR", "TERR", N),
            ("GR", "FR", N),
            ("OFF", "FR", B),
            ("OFF", "PRIHALL", S),

            # Kitchen and family hub
            ("DR", "KIT", N),
            ("DR", "SCUL", B),
            ("FR", "KIT", A),
            ("FR", "TERR", A),
            ("FR", "BKF", A),
            ("KIT", "BKF", A),
            ("KIT", "SCUL", A),
            ("KIT", "MUD", N),
            ("KIT", "TERR", N),

            # Service spine
            ("SCUL", "MUD", A),
            ("MUD", "GAR", A),
            ("MUD", "LND", N),
            ("LND", "MEP", N),

            # Primary suite
            ("STAIR", "PRIHALL", A),
            ("PRIHALL", "PRI", A),
            ("PRI", "PRIBATH", A),
            ("PRI", "PRICL", A),
            ("PRIBATH", "PRICL", A),
            ("PRI", "FR", S),
            ("PRI", "STAIR", N),

            # Secondary bedrooms
            ("STAIR", "KID1", N),
            ("STAIR", "KID2", N),
            ("KID1", "KID2", A),
            ("PRIHALL", "KID1", N),

            # Guest suite
            ("GST1", "PRI", S),
            ("GST1", "KIT", S),
            ("GST1", "FR", N),
            ("GST1", "FOY", B),
            ("GST1", "PRIHALL", S),
            ("GST1", "STAIR", N),
        ])

    def _load_10k_layer(self) -> None:
        self._layers[SizeTier.TIER_10K] = symmetric([
            # Chef's kitchen, wine and library
            ("CHEF", "KIT", N),
            ("CHEF", "SCUL", A),
            ("CHEF", "DR", B),
            ("CHEF", "FOY", S),
            ("WINE", "DR", A),
            ("WINE", "KIT", B),
            ("WINE", "SCUL", B),
            ("WINE", "FOY", S),
            ("LIB", "FR", A),
            ("LIB", "FOY", S),
            ("LIB", "OFF", N),

            # Media
            ("MEDIA", "FR", N),
            ("MEDIA", "PRI", S),
            ("MEDIA", "GST1", S),
            ("MEDIA", "STAIR", B),
            ("MEDIA", "FOY", S),

            # Wellness and pool
            ("GYM", "FR", N),
            ("GYM", "POOLSUP", A),
            ("GYM", "PRIHALL", S),
            ("POOL", "TERR", A),
            ("POOL", "POOLSUP", A),
            ("POOL", "FOY", S),

            # Second guest suite
            ("GST2", "GST1", A),
            ("GST2", "PRI", S),
            ("GST2", "MEDIA", S),

            # Operations core
            ("OPS", "MUD", N),
            ("OPS", "GAR", A),
            ("OPS", "LND", N),
            ("OPS", "FOY", S),
        ])

    def _load_15k_layer(self) -> None:
        self._layers[SizeTier.TIER_15K] = symmetric([
            ("SAL", "FOY", N),
            ("SAL", "GR", A),
            ("SAL", "DR", N),
            ("SAL", "TERR", B),
            ("SPA", "GYM", A),
            ("SPA", "POOL", A),
            ("SPA", "POOLSUP", A),
            ("GYM", "POOL", A),
            ("PRILNG", "PRI", A),
            ("PRILNG", "PRIHALL", A),
            ("GST3", "GST2", A),
            ("GST3", "PRI", S),
            ("STF", "OPS", A),
            ("STF", "FOY", S),
            ("STF", "KIT", N),
        ])

    def _load_20k_layer(self) -> None:
        self._layers[SizeTier.TIER_20K] = symmetric([
            ("THR", "MEDIA", A),
            ("THR", "PRI", S),
            ("THR", "GST1", S),
            ("THR", "FR", B),
        ])


# Singleton instance
PRESET_LIBRARY = PresetLibrary()


def get_preset(tier_id, library: Optional[PresetLibrary] = None) -> Preset:
    """Benchmark preset for a tier id ("5k", "10k", "15k", "20k")."""
    return (library or PRESET_LIBRARY).get(tier_id)
