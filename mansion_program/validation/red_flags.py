"""
Red flag rules.

Hard-fail predicates over the proposed matrix and the space list. Pair
checks look at both ordered keys independently: the matrix is directional,
so a Separate entry one way never hides a close entry the other way.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from ..core.enums import Relationship
from ..core.models import AdjacencyMatrix, RedFlagRule, Space

CLOSE = frozenset({Relationship.ADJACENT, Relationship.NEAR})


def _close(matrix: AdjacencyMatrix, a: str, b: str) -> bool:
    return any(rel in CLOSE for rel in matrix.both_ways(a, b))


def _adjacent(matrix: AdjacencyMatrix, a: str, b: str) -> bool:
    return Relationship.ADJACENT in matrix.both_ways(a, b)


def _guest_to_primary(matrix: AdjacencyMatrix, spaces: Sequence[Space]) -> bool:
    return _close(matrix, "GST1", "PRI")


def _delivery_front_of_house(matrix: AdjacencyMatrix, spaces: Sequence[Space]) -> bool:
    return _close(matrix, "GAR", "FOY") or _adjacent(matrix, "GAR", "GR")


def _media_bedroom_bleed(matrix: AdjacencyMatrix, spaces: Sequence[Space]) -> bool:
    return _close(matrix, "MEDIA", "PRI") or _close(matrix, "MEDIA", "GST1")


def _kitchen_at_entry(matrix: AdjacencyMatrix, spaces: Sequence[Space]) -> bool:
    return _adjacent(matrix, "KIT", "FOY")


def _guest_through_kitchen(matrix: AdjacencyMatrix, spaces: Sequence[Space]) -> bool:
    return _close(matrix, "GST1", "KIT")


def _missing_show_kitchen(matrix: AdjacencyMatrix, spaces: Sequence[Space]) -> bool:
    return not any(s.code == "KIT" for s in spaces)


RED_FLAG_RULES: Sequence[RedFlagRule] = (
    RedFlagRule(
        "rf-1", "Guest → Primary Suite", _guest_to_primary,
        "Primary suite should not be directly accessible from guest areas",
    ),
    RedFlagRule(
        "rf-2", "Delivery → Front of House", _delivery_front_of_house,
        "Service/garage should not connect through formal areas",
    ),
    RedFlagRule(
        "rf-3", "Media → Bedroom Bleed", _media_bedroom_bleed,
        "Media room should be acoustically separated from bedrooms",
    ),
    RedFlagRule(
        "rf-4", "Kitchen at Entry", _kitchen_at_entry,
        "Kitchen should not be the first thing visible from entry",
    ),
    RedFlagRule(
        "rf-5", "Guest Through Kitchen", _guest_through_kitchen,
        "Guest circulation should not route through kitchen work zones",
    ),
    RedFlagRule(
        "rf-6", "Missing Show Kitchen", _missing_show_kitchen,
        "Program must include a principal-level show kitchen",
    ),
)


@dataclass(frozen=True)
class RedFlagStatus:
    flag_id: str
    name: str
    triggered: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"flag_id": self.flag_id, "name": self.name, "triggered": self.triggered}


def evaluate_red_flags(
    matrix: AdjacencyMatrix,
    spaces: Sequence[Space],
    rules: Optional[Sequence[RedFlagRule]] = None,
) -> List[RedFlagStatus]:
    """One status per rule, in rule order."""
    return [
        RedFlagStatus(rule.id, rule.name, rule.evaluate(matrix, spaces))
        for rule in (RED_FLAG_RULES if rules is None else rules)
    ]
