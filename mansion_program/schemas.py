"""
mansion_program/schemas.py - Pydantic Payload Models

Schemas for externally persisted payloads: recorded choices coming in from
the questionnaire store, and stored validation results read back for
auditing.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, RootModel

from .core.enums import GateStatus, Relationship
from .core.models import Choice
from .validation.bridges import BridgeStatus
from .validation.gate import resolve_gate
from .validation.red_flags import RedFlagStatus
from .validation.scoring import ModuleScore


# =============================================================================
# Choice Schemas
# =============================================================================


class ChoiceRecord(BaseModel):
    """A persisted decision answer (camelCase or snake_case keys)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    decision_id: str = Field(..., alias="decisionId", min_length=1, description="Decision id")
    selected_option_id: str = Field(
        ..., alias="selectedOptionId", min_length=1, description="Chosen option id"
    )

    def to_choice(self) -> Choice:
        return Choice(self.decision_id, self.selected_option_id)


def parse_choices(data: Any) -> List[Choice]:
    """
    Parse persisted choices.

    Accepts the decision-answer mapping ({decisionId: optionId}) or a list
    of choice records. List order is preserved; it is the application order.

    Raises:
        pydantic.ValidationError: malformed record
        TypeError: neither a mapping nor a list
    """
    if isinstance(data, dict):
        records = [
            ChoiceRecord(decision_id=decision_id, selected_option_id=option_id)
            for decision_id, option_id in data.items()
        ]
    elif isinstance(data, list):
        records = [ChoiceRecord.model_validate(item) for item in data]
    else:
        raise TypeError(f"Expected a mapping or list of choices, got {type(data).__name__}")
    return [r.to_choice() for r in records]


# =============================================================================
# Checklist Schemas
# =============================================================================


class ChecklistStateRecord(RootModel[Dict[str, Dict[str, bool]]]):
    """Checklist completion per module: {module_id: {item_id: completed}}."""

    def to_state(self) -> Dict[str, Dict[str, bool]]:
        return {module_id: dict(items) for module_id, items in self.root.items()}


def parse_checklist_state(data: Any) -> Dict[str, Dict[str, bool]]:
    """
    Parse persisted checklist state.

    Raises:
        pydantic.ValidationError: not a mapping of module ids to item flags
    """
    return ChecklistStateRecord.model_validate(data).to_state()


# =============================================================================
# Validation Result Schemas
# =============================================================================


class ModuleScoreRecord(BaseModel):
    module_id: str
    name: str = ""
    score: int = Field(..., ge=0, le=100)
    threshold: int = Field(default=80, ge=0, le=100)
    deviation_count: int = Field(default=0, ge=0)
    penalty: int = Field(default=0, ge=0)
    checklist_bonus: int = Field(default=0, ge=0)


class BridgeStatusRecord(BaseModel):
    bridge_id: str
    name: str = ""
    required: bool
    present: bool


class RedFlagStatusRecord(BaseModel):
    flag_id: str
    name: str = ""
    triggered: bool


class DeviationRecord(BaseModel):
    from_space_code: str
    to_space_code: str
    desired: Relationship
    proposed: Relationship


class ValidationResultRecord(BaseModel):
    """Stored validation result, as produced by ValidationResult.to_dict()."""

    preset_id: str = Field(..., description="Tier id of the validated preset")
    computed_at: Optional[datetime] = Field(None, description="UTC time of the run")
    overall_score: int = Field(..., ge=0, le=100)
    gate_status: GateStatus
    module_scores: List[ModuleScoreRecord] = Field(default_factory=list)
    bridge_statuses: List[BridgeStatusRecord] = Field(default_factory=list)
    red_flag_statuses: List[RedFlagStatusRecord] = Field(default_factory=list)
    deviations: List[DeviationRecord] = Field(default_factory=list)

    def rederive_gate(self) -> Tuple[int, GateStatus]:
        """Recompute (overall_score, gate_status) from the component fields."""
        return resolve_gate(
            [ModuleScore(**m.model_dump()) for m in self.module_scores],
            [BridgeStatus(**b.model_dump()) for b in self.bridge_statuses],
            [RedFlagStatus(**f.model_dump()) for f in self.red_flag_statuses],
        )

    def is_consistent(self) -> bool:
        """True when the stored score and gate match the re-derived ones."""
        return self.rederive_gate() == (self.overall_score, self.gate_status)

    def audit(self) -> Dict[str, Any]:
        score, status = self.rederive_gate()
        return {
            "preset_id": self.preset_id,
            "stored": {"overall_score": self.overall_score, "gate_status": self.gate_status.value},
            "derived": {"overall_score": score, "gate_status": status.value},
            "consistent": (score, status) == (self.overall_score, self.gate_status),
        }
