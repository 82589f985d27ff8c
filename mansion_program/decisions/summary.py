"""
Personalization summary.

Aggregates what a resolved choice set adds to the benchmark: extra square
footage, advisory warnings, and the bridges the chosen options add to or
take away from the benchmark configuration.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple

from ..core.models import AdjacencyDecision, DecisionOption
from .transformer import ChoiceInput, normalize_choices, resolve_effective_selections


@dataclass(frozen=True)
class OptionWarning:
    decision_id: str
    option_id: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "decision_id": self.decision_id,
            "option_id": self.option_id,
            "message": self.message,
        }


@dataclass(frozen=True)
class PersonalizationSummary:
    """Effect of a choice set beyond the matrix patches themselves."""

    total_sf_impact: int
    warnings: Tuple[OptionWarning, ...]
    enabled_bridges: FrozenSet[str]
    removed_bridges: FrozenSet[str]
    non_default_count: int
    choice_count: int

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_sf_impact": self.total_sf_impact,
            "warnings": [w.to_dict() for w in self.warnings],
            "enabled_bridges": sorted(self.enabled_bridges),
            "removed_bridges": sorted(self.removed_bridges),
            "non_default_count": self.non_default_count,
            "choice_count": self.choice_count,
        }


def available_bridges(
    options: Iterable[DecisionOption],
    provided: Iterable[str] = (),
) -> FrozenSet[str]:
    """
    Bridges present after applying effective options to a base configuration.

    Options apply in order, like their matrix patches: each one first takes
    away its removed bridges, then adds its enabled ones.
    """
    bridges = set(provided)
    for option in options:
        bridges.difference_update(option.removes_bridges)
        bridges.update(option.enables_bridges)
    return frozenset(bridges)


def summarize_personalization(
    choices: Optional[ChoiceInput],
    decisions: Optional[Iterable[AdjacencyDecision]] = None,
) -> PersonalizationSummary:
    """Summarize a choice set; raises the same errors as choice resolution."""
    selections = resolve_effective_selections(choices, decisions)
    options = [option for _, option in selections]

    warnings: List[OptionWarning] = [
        OptionWarning(decision.id, option.id, message)
        for decision, option in selections
        for message in option.warnings
    ]

    return PersonalizationSummary(
        total_sf_impact=sum(o.sf_impact for o in options),
        warnings=tuple(warnings),
        enabled_bridges=frozenset(b for o in options for b in o.enables_bridges),
        removed_bridges=frozenset(b for o in options for b in o.removes_bridges),
        non_default_count=sum(1 for o in options if not o.is_default),
        choice_count=len(normalize_choices(choices)),
    )
