"""
Unit tests for mansion_program benchmarks.

Tests tier resolution, the space registry and the preset library.
"""

import math

import pytest

from mansion_program.core import Relationship, SizeTier
from mansion_program.errors import UnknownTierError
from mansion_program.benchmarks import (
    # Tiers
    resolve_tier,
    parse_tier,
    # Registry
    ZONES,
    SPACE_REGISTRY,
    get_space_definition,
    spaces_for_tier,
    # Presets
    BRIDGE_IDS,
    PresetLibrary,
    PRESET_LIBRARY,
    get_preset,
)
from mansion_program.validation import evaluate_red_flags


# =============================================================================
# TIER RESOLUTION TESTS
# =============================================================================

class TestResolveTier:
    """Test tier selection by target area."""

    @pytest.mark.parametrize("area,expected", [
        (0, SizeTier.TIER_5K),
        (5_000, SizeTier.TIER_5K),
        (7_499, SizeTier.TIER_5K),
        (7_499.99, SizeTier.TIER_5K),
        (7_500, SizeTier.TIER_10K),
        (12_499, SizeTier.TIER_10K),
        (12_500, SizeTier.TIER_15K),
        (17_499, SizeTier.TIER_15K),
        (17_500, SizeTier.TIER_20K),
        (45_000, SizeTier.TIER_20K),
    ])
    def test_boundaries(self, area, expected):
        """Test thresholds are exclusive upper bounds."""
        assert resolve_tier(area) is expected

    def test_numeric_string_accepted(self):
        """Test numeric strings are converted."""
        assert resolve_tier("10000") is SizeTier.TIER_10K

    @pytest.mark.parametrize("area", [-1, -0.5, math.nan, math.inf, -math.inf, "large", None])
    def test_invalid_area_raises(self, area):
        """Test negative, non-finite and non-numeric areas raise UnknownTierError."""
        with pytest.raises(UnknownTierError) as exc_info:
            resolve_tier(area)
        assert exc_info.value.code == "MVP_101"

    def test_parse_tier(self):
        """Test tier id parsing is forgiving about case and whitespace."""
        assert parse_tier("10k") is SizeTier.TIER_10K
        assert parse_tier(" 20K ") is SizeTier.TIER_20K
        assert parse_tier(SizeTier.TIER_5K) is SizeTier.TIER_5K

    def test_parse_unknown_tier(self):
        """Test unknown tier ids raise UnknownTierError."""
        with pytest.raises(UnknownTierError) as exc_info:
            parse_tier("30k")
        assert exc_info.value.tier_id == "30k"


# =============================================================================
# REGISTRY TESTS
# =============================================================================

class TestSpaceRegistry:
    """Test the space registry."""

    def test_codes_unique(self):
        """Test every space is defined once."""
        codes = [d.code for d in SPACE_REGISTRY]
        assert len(codes) == len(set(codes))

    def test_zones_known(self):
        """Test every space belongs to a defined zone."""
        zone_codes = {z.code for z in ZONES}
        assert all(d.zone in zone_codes for d in SPACE_REGISTRY)

    def test_spaces_grow_with_tier(self):
        """Test a larger tier never drops a space."""
        previous = set()
        for tier in SizeTier:
            codes = {s.code for s in spaces_for_tier(tier)}
            assert previous <= codes
            previous = codes

    def test_tier_specific_spaces(self):
        """Test spaces that only exist at larger tiers."""
        assert "SAL" not in {s.code for s in spaces_for_tier(SizeTier.TIER_10K)}
        assert "SAL" in {s.code for s in spaces_for_tier(SizeTier.TIER_15K)}
        assert "THR" in {s.code for s in spaces_for_tier(SizeTier.TIER_20K)}

    def test_area_per_tier(self):
        """Test target area comes from the tier column."""
        foyer = get_space_definition("FOY")
        assert foyer.to_space(SizeTier.TIER_5K).target_area == 220
        assert foyer.to_space(SizeTier.TIER_20K).target_area == 500
        assert get_space_definition("NOPE") is None

    def test_ordered_by_zone(self):
        """Test spaces are ordered by zone then registry order."""
        spaces = spaces_for_tier(SizeTier.TIER_5K)
        assert spaces[0].code == "FOY"
        assert spaces[-1].code == "STAIR"
        order = {z.code: z.order for z in ZONES}
        zone_orders = [order[s.zone] for s in spaces]
        assert zone_orders == sorted(zone_orders)


# =============================================================================
# PRESET LIBRARY TESTS
# =============================================================================

class TestPresetLibrary:
    """Test benchmark presets."""

    def test_all_tiers_present(self):
        """Test one preset per tier, smallest first."""
        assert PRESET_LIBRARY.tier_ids() == ["5k", "10k", "15k", "20k"]

    def test_get_preset_unknown_tier(self):
        """Test unknown tier raises UnknownTierError."""
        with pytest.raises(UnknownTierError):
            get_preset("12k")

    def test_preset_for_area(self):
        """Test area lookup goes through resolve_tier."""
        assert PRESET_LIBRARY.preset_for_area(9_000).id == "10k"

    def test_relationship_counts(self):
        """Test layered matrix sizes."""
        counts = [len(p.adjacency_matrix) for p in PRESET_LIBRARY.all_presets()]
        assert counts == [88, 146, 176, 184]

    def test_matrices_symmetric(self):
        """Test benchmarks are populated symmetrically."""
        for preset in PRESET_LIBRARY.all_presets():
            matrix = preset.adjacency_matrix
            for (a, b), rel in matrix.items():
                assert matrix.between(b, a) is rel

    def test_larger_tier_includes_smaller(self):
        """Test each tier's matrix extends the one below."""
        presets = PRESET_LIBRARY.all_presets()
        for smaller, larger in zip(presets, presets[1:]):
            for key, rel in smaller.adjacency_matrix.items():
                assert larger.adjacency_matrix[key] is rel

    def test_key_benchmark_relationships(self):
        """Test representative benchmark entries."""
        matrix = get_preset("5k").adjacency_matrix
        assert matrix.between("FR", "KIT") is Relationship.ADJACENT
        assert matrix.between("KIT", "DR") is Relationship.NEAR
        assert matrix.between("GST1", "PRI") is Relationship.SEPARATE

    @pytest.mark.parametrize("tier_id,required", [
        ("5k", set()),
        ("10k", {"butlerPantry", "soundLock"}),
        ("15k", {"butlerPantry", "soundLock", "wetFeetIntercept", "opsCore"}),
        ("20k", set(BRIDGE_IDS)),
    ])
    def test_bridge_requirements(self, tier_id, required):
        """Test bridge requirements per tier."""
        preset = get_preset(tier_id)
        assert set(preset.bridge_requirements) == set(BRIDGE_IDS)
        assert {b for b in BRIDGE_IDS if preset.requires_bridge(b)} == required

    def test_benchmark_provides_required_bridges(self):
        """Test each benchmark layout includes every bridge its tier requires."""
        for preset in PRESET_LIBRARY.all_presets():
            required = {b for b in BRIDGE_IDS if preset.requires_bridge(b)}
            assert required <= preset.provided_bridges, preset.id
        assert get_preset("5k").provided_bridges == frozenset()
        assert get_preset("10k").provided_bridges == frozenset(BRIDGE_IDS)

    def test_benchmarks_trigger_no_red_flags(self):
        """Test no benchmark fails its own red flag rules."""
        for preset in PRESET_LIBRARY.all_presets():
            statuses = evaluate_red_flags(preset.adjacency_matrix, preset.spaces)
            assert not any(s.triggered for s in statuses), preset.id

    def test_library_instances_independent(self):
        """Test a fresh library builds equal presets."""
        fresh = PresetLibrary()
        assert fresh.get("15k").adjacency_matrix == PRESET_LIBRARY.get("15k").adjacency_matrix

    def test_preset_to_dict(self):
        """Test preset serialization."""
        data = get_preset("5k").to_dict()
        assert data["id"] == "5k"
        assert data["adjacency_matrix"]["KIT"]["FR"] == "A"
        assert len(data["spaces"]) == 22
