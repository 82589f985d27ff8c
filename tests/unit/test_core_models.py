"""
Unit tests for mansion_program core vocabulary.

Tests enums, space and relationship records, the adjacency matrix mapping,
decision records and preset integrity.
"""

import pytest

from mansion_program.core import (
    # Enums
    Relationship,
    GateStatus,
    SizeTier,
    # Spaces & matrices
    Space,
    AdjacencyRelationship,
    AdjacencyMatrix,
    # Decisions
    MatrixPatch,
    DecisionOption,
    AdjacencyDecision,
    Choice,
    # Validation vocabulary
    ValidationModule,
    RedFlagRule,
    # Presets
    Preset,
)


# =============================================================================
# ENUM TESTS
# =============================================================================

class TestEnums:
    """Test core enumerations."""

    def test_relationship_codes(self):
        """Test relationship values are the persisted single-letter codes."""
        assert [r.value for r in Relationship] == ["A", "N", "B", "S"]

    def test_relationship_parse_code_and_name(self):
        """Test parse accepts codes and names in any case."""
        assert Relationship.parse("A") is Relationship.ADJACENT
        assert Relationship.parse("n") is Relationship.NEAR
        assert Relationship.parse("Buffered") is Relationship.BUFFERED
        assert Relationship.parse(" separate ") is Relationship.SEPARATE
        assert Relationship.parse(Relationship.NEAR) is Relationship.NEAR

    def test_relationship_parse_rejects_unknown(self):
        """Test parse rejects values outside the closed set."""
        with pytest.raises(ValueError):
            Relationship.parse("X")

    def test_relationship_label(self):
        """Test human-readable label."""
        assert Relationship.ADJACENT.label == "Adjacent"

    def test_gate_status_values(self):
        """Test gate status values."""
        assert {g.value for g in GateStatus} == {"pass", "warning", "fail"}

    def test_size_tier_rank_order(self):
        """Test tiers rank smallest first."""
        ranks = [t.rank for t in (SizeTier.TIER_5K, SizeTier.TIER_10K, SizeTier.TIER_15K, SizeTier.TIER_20K)]
        assert ranks == [0, 1, 2, 3]


# =============================================================================
# SPACE & RELATIONSHIP TESTS
# =============================================================================

class TestSpace:
    """Test Space record."""

    def test_space_creation(self):
        """Test space with defaults."""
        space = Space("KIT", "Kitchen", "Z2_FAM")
        assert space.level == 1
        assert space.target_area == 0.0
        assert space.rationale is None

    def test_negative_area_rejected(self):
        """Test target area must be non-negative."""
        with pytest.raises(ValueError):
            Space("KIT", "Kitchen", "Z2_FAM", target_area=-1)

    def test_negative_level_rejected(self):
        """Test level must be non-negative."""
        with pytest.raises(ValueError):
            Space("KIT", "Kitchen", "Z2_FAM", level=-1)

    def test_empty_code_rejected(self):
        """Test code must be present."""
        with pytest.raises(ValueError):
            Space("", "Kitchen", "Z2_FAM")

    def test_space_to_dict(self):
        """Test serialization."""
        data = Space("PRI", "Primary Bedroom", "Z5_PRI", level=2, target_area=350).to_dict()
        assert data["code"] == "PRI"
        assert data["level"] == 2
        assert data["target_area"] == 350


class TestAdjacencyRelationship:
    """Test AdjacencyRelationship record."""

    def test_self_relationship_rejected(self):
        """Test endpoints must differ."""
        with pytest.raises(ValueError):
            AdjacencyRelationship("KIT", "KIT", Relationship.ADJACENT)

    def test_relationship_coerced_from_code(self):
        """Test relationship string is parsed to the enum."""
        rel = AdjacencyRelationship("KIT", "DR", "N")
        assert rel.relationship is Relationship.NEAR
        assert rel.key == ("KIT", "DR")


# =============================================================================
# MATRIX TESTS
# =============================================================================

class TestAdjacencyMatrix:
    """Test AdjacencyMatrix mapping."""

    def test_keys_are_structured_pairs(self):
        """Test keys are (from, to) tuples and directional."""
        matrix = AdjacencyMatrix({("KIT", "DR"): "A"})
        assert matrix[("KIT", "DR")] is Relationship.ADJACENT
        assert ("DR", "KIT") not in matrix
        assert matrix.between("DR", "KIT") is None

    def test_codes_containing_delimiters_do_not_collide(self):
        """Test pairs that would concatenate to the same string stay distinct."""
        matrix = AdjacencyMatrix({("A-B", "C"): "A", ("A", "B-C"): "S"})
        assert len(matrix) == 2
        assert matrix.between("A-B", "C") is Relationship.ADJACENT
        assert matrix.between("A", "B-C") is Relationship.SEPARATE

    def test_self_pair_rejected(self):
        """Test construction rejects self relationships."""
        with pytest.raises(ValueError):
            AdjacencyMatrix({("KIT", "KIT"): "A"})

    def test_duplicate_relationship_rejected(self):
        """Test from_relationships rejects a second entry for one key."""
        with pytest.raises(ValueError):
            AdjacencyMatrix.from_relationships([
                AdjacencyRelationship("KIT", "DR", "A"),
                AdjacencyRelationship("KIT", "DR", "B"),
            ])

    def test_iteration_sorted(self):
        """Test iteration is in sorted key order."""
        matrix = AdjacencyMatrix({("KIT", "DR"): "A", ("DR", "KIT"): "A", ("BKF", "KIT"): "N"})
        assert list(matrix) == [("BKF", "KIT"), ("DR", "KIT"), ("KIT", "DR")]

    def test_both_ways_single_direction(self):
        """Test both_ways finds an entry recorded only as b->a."""
        matrix = AdjacencyMatrix({("PRI", "GST1"): "N"})
        assert matrix.both_ways("GST1", "PRI") == (Relationship.NEAR,)
        assert matrix.both_ways("GST1", "KIT") == ()

    def test_both_ways_keeps_each_direction(self):
        """Test a Separate entry one way does not hide an Adjacent entry the other way."""
        matrix = AdjacencyMatrix({("GST1", "PRI"): "S", ("PRI", "GST1"): "A"})
        assert matrix.both_ways("GST1", "PRI") == (Relationship.SEPARATE, Relationship.ADJACENT)
        assert matrix.both_ways("PRI", "GST1") == (Relationship.ADJACENT, Relationship.SEPARATE)

    def test_equality_by_content(self):
        """Test matrices compare equal iff they hold the same entries."""
        a = AdjacencyMatrix({("KIT", "DR"): "A"})
        b = AdjacencyMatrix({("KIT", "DR"): Relationship.ADJACENT})
        c = AdjacencyMatrix({("KIT", "DR"): "B"})
        assert a == b
        assert a != c

    def test_nested_dict_roundtrip(self):
        """Test to_dict / from_dict preserve the entries."""
        matrix = AdjacencyMatrix({("KIT", "DR"): "A", ("KIT", "FR"): "N"})
        data = matrix.to_dict()
        assert data == {"KIT": {"DR": "A", "FR": "N"}}
        assert AdjacencyMatrix.from_dict(data) == matrix

    def test_relationships_and_space_codes(self):
        """Test derived listings."""
        matrix = AdjacencyMatrix({("KIT", "DR"): "A", ("FR", "KIT"): "N"})
        rels = matrix.relationships()
        assert [r.key for r in rels] == [("FR", "KIT"), ("KIT", "DR")]
        assert matrix.space_codes() == frozenset({"KIT", "DR", "FR"})

    def test_as_dict_is_a_copy(self):
        """Test mutating as_dict output leaves the matrix untouched."""
        matrix = AdjacencyMatrix({("KIT", "DR"): "A"})
        working = matrix.as_dict()
        working[("KIT", "DR")] = Relationship.SEPARATE
        assert matrix[("KIT", "DR")] is Relationship.ADJACENT


# =============================================================================
# DECISION TESTS
# =============================================================================

class TestDecisionRecords:
    """Test decision, option and choice records."""

    def test_empty_options_rejected(self):
        """Test a decision needs at least one option."""
        with pytest.raises(ValueError):
            AdjacencyDecision("d", "D", options=())

    def test_two_defaults_rejected(self):
        """Test at most one default option."""
        with pytest.raises(ValueError):
            AdjacencyDecision("d", "D", options=(
                DecisionOption("a", "A", is_default=True),
                DecisionOption("b", "B", is_default=True),
            ))

    def test_duplicate_option_ids_rejected(self):
        """Test option ids are unique within a decision."""
        with pytest.raises(ValueError):
            AdjacencyDecision("d", "D", options=(
                DecisionOption("a", "A"),
                DecisionOption("a", "Again"),
            ))

    def test_default_option_optional(self):
        """Test a decision may have no default."""
        decision = AdjacencyDecision("d", "D", options=(DecisionOption("a", "A"),))
        assert decision.default_option is None

    def test_get_option(self):
        """Test option lookup by id."""
        decision = AdjacencyDecision("d", "D", options=(
            DecisionOption("a", "A", is_default=True),
            DecisionOption("b", "B"),
        ))
        assert decision.get_option("b").label == "B"
        assert decision.get_option("z") is None
        assert decision.default_option.id == "a"

    def test_applicable_tiers_accept_enum(self):
        """Test tiers may be given as SizeTier members."""
        decision = AdjacencyDecision(
            "d", "D", options=(DecisionOption("a", "A"),),
            applicable_tiers={SizeTier.TIER_15K},
        )
        assert decision.applies_to("15k")
        assert decision.applies_to(SizeTier.TIER_15K)
        assert not decision.applies_to("5k")

    def test_patch_relationship_must_be_valid(self):
        """Test patches reject relationship values outside the enum."""
        with pytest.raises(ValueError):
            MatrixPatch("KIT", "DR", "Q")

    def test_negative_sf_impact_rejected(self):
        """Test sf_impact is additional area."""
        with pytest.raises(ValueError):
            DecisionOption("a", "A", sf_impact=-10)

    def test_choice_to_dict(self):
        """Test choice serialization."""
        assert Choice("d", "a").to_dict() == {"decision_id": "d", "selected_option_id": "a"}


# =============================================================================
# VALIDATION VOCABULARY TESTS
# =============================================================================

class TestValidationVocabulary:
    """Test module and red flag records."""

    def test_threshold_range(self):
        """Test threshold must be in [0, 100]."""
        with pytest.raises(ValueError):
            ValidationModule("m", "M", space_codes={"KIT"}, threshold=101)

    def test_module_involves_either_endpoint(self):
        """Test attribution by either endpoint."""
        module = ValidationModule("m", "M", space_codes={"KIT"})
        assert module.involves("KIT", "FR")
        assert module.involves("FR", "KIT")
        assert not module.involves("FR", "GR")

    def test_red_flag_rule_evaluates_predicate(self):
        """Test red flag rule wraps a pure predicate."""
        rule = RedFlagRule("x", "Has KIT->DR", lambda m, s: ("KIT", "DR") in m)
        assert rule.evaluate(AdjacencyMatrix({("KIT", "DR"): "A"}), [])
        assert not rule.evaluate(AdjacencyMatrix(), [])


# =============================================================================
# PRESET TESTS
# =============================================================================

class TestPreset:
    """Test Preset integrity checks."""

    def _spaces(self):
        return (Space("KIT", "Kitchen", "Z2_FAM"), Space("DR", "Dining", "Z1_APB"))

    def test_duplicate_space_codes_rejected(self):
        """Test space codes must be unique."""
        with pytest.raises(ValueError):
            Preset("p", "P", spaces=self._spaces() + (Space("KIT", "Again", "Z2_FAM"),),
                   adjacency_matrix=AdjacencyMatrix())

    def test_matrix_endpoints_must_exist(self):
        """Test matrix may only reference spaces in the preset."""
        with pytest.raises(ValueError):
            Preset("p", "P", spaces=self._spaces(),
                   adjacency_matrix=AdjacencyMatrix({("KIT", "FR"): "A"}))

    def test_bridge_requirements_read_only(self):
        """Test bridge requirements cannot be mutated."""
        preset = Preset("p", "P", spaces=self._spaces(), adjacency_matrix=AdjacencyMatrix(),
                        bridge_requirements={"butlerPantry": True})
        assert preset.requires_bridge("butlerPantry")
        assert not preset.requires_bridge("opsCore")
        with pytest.raises(TypeError):
            preset.bridge_requirements["opsCore"] = True

    def test_id_normalized_from_tier(self):
        """Test a SizeTier id is stored as its string value."""
        preset = Preset(SizeTier.TIER_10K, "P", spaces=self._spaces(), adjacency_matrix=AdjacencyMatrix())
        assert preset.id == "10k"
