"""
Unit tests for mansion_program payload schemas.

Tests choice parsing and stored-result auditing.
"""

import pytest
from pydantic import ValidationError

from mansion_program.core import Choice, GateStatus
from mansion_program.benchmarks import get_preset
from mansion_program.validation import run_validation
from mansion_program.schemas import (
    ChoiceRecord,
    parse_choices,
    ChecklistStateRecord,
    parse_checklist_state,
    ValidationResultRecord,
)


# =============================================================================
# CHOICE SCHEMA TESTS
# =============================================================================

class TestChoiceRecord:
    """Test persisted choice parsing."""

    def test_camel_case(self):
        """Test camelCase keys from the questionnaire store."""
        record = ChoiceRecord.model_validate({"decisionId": "kitchen-family", "selectedOptionId": "kit-semi"})
        assert record.to_choice() == Choice("kitchen-family", "kit-semi")

    def test_snake_case(self):
        """Test snake_case keys."""
        record = ChoiceRecord.model_validate({"decision_id": "kitchen-family", "selected_option_id": "kit-semi"})
        assert record.decision_id == "kitchen-family"

    def test_missing_field(self):
        """Test a record without an option id is rejected."""
        with pytest.raises(ValidationError):
            ChoiceRecord.model_validate({"decisionId": "kitchen-family"})

    def test_empty_id(self):
        """Test empty ids are rejected."""
        with pytest.raises(ValidationError):
            ChoiceRecord.model_validate({"decisionId": "", "selectedOptionId": "x"})


class TestParseChoices:
    """Test parse_choices input forms."""

    def test_mapping_form(self):
        """Test the decision-answer mapping."""
        assert parse_choices({"kitchen-family": "kit-semi", "office-location": "off-family"}) == [
            Choice("kitchen-family", "kit-semi"),
            Choice("office-location", "off-family"),
        ]

    def test_list_form_keeps_order(self):
        """Test list order is preserved."""
        data = [
            {"decisionId": "b", "selectedOptionId": "b1"},
            {"decision_id": "a", "selected_option_id": "a1"},
        ]
        assert [c.decision_id for c in parse_choices(data)] == ["b", "a"]

    def test_rejects_other_types(self):
        """Test scalars are rejected."""
        with pytest.raises(TypeError):
            parse_choices("kitchen-family=kit-semi")


# =============================================================================
# CHECKLIST SCHEMA TESTS
# =============================================================================

class TestChecklistState:
    """Test persisted checklist state parsing."""

    def test_valid_state(self):
        """Test module to item flag mapping."""
        state = parse_checklist_state({"module-01": {"k1": True, "k2": False}})
        assert state == {"module-01": {"k1": True, "k2": False}}

    def test_empty_state(self):
        """Test an empty mapping is valid."""
        assert ChecklistStateRecord.model_validate({}).to_state() == {}

    @pytest.mark.parametrize("data", [
        {"module-01": ["k1"]},
        {"module-01": {"k1": "maybe"}},
        ["module-01"],
        "module-01",
    ])
    def test_malformed_state(self, data):
        """Test shapes the scorer cannot read are rejected."""
        with pytest.raises(ValidationError):
            parse_checklist_state(data)


# =============================================================================
# RESULT SCHEMA TESTS
# =============================================================================

class TestValidationResultRecord:
    """Test stored result parsing and gate re-derivation."""

    def test_roundtrip_is_consistent(self):
        """Test a serialized result re-derives its own gate."""
        result = run_validation(get_preset("10k"), {"kitchen-family": "kit-separate"})
        record = ValidationResultRecord.model_validate(result.to_dict())

        assert record.gate_status is result.gate_status
        assert record.rederive_gate() == (result.overall_score, result.gate_status)
        assert record.is_consistent()
        assert len(record.deviations) == len(result.deviations)

    def test_tampered_gate_detected(self):
        """Test an edited gate status no longer matches its components."""
        data = run_validation(get_preset("5k"), {}).to_dict()
        assert data["gate_status"] == "pass"
        data["gate_status"] = "fail"

        record = ValidationResultRecord.model_validate(data)
        audit = record.audit()
        assert not record.is_consistent()
        assert audit["derived"]["gate_status"] == "pass"
        assert audit["stored"]["gate_status"] == "fail"
        assert audit["consistent"] is False

    def test_invalid_gate_value(self):
        """Test gate status is a closed set."""
        data = run_validation(get_preset("5k"), {}).to_dict()
        data["gate_status"] = "maybe"
        with pytest.raises(ValidationError):
            ValidationResultRecord.model_validate(data)

    def test_score_range(self):
        """Test scores outside [0, 100] are rejected."""
        data = run_validation(get_preset("5k"), {}).to_dict()
        data["overall_score"] = 140
        with pytest.raises(ValidationError):
            ValidationResultRecord.model_validate(data)

    def test_empty_components(self):
        """Test a result with no modules re-derives 100 / pass."""
        record = ValidationResultRecord(preset_id="5k", overall_score=100, gate_status=GateStatus.PASS)
        assert record.rederive_gate() == (100, GateStatus.PASS)
