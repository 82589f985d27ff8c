"""
Gate resolution.

Precedence, first match wins:
  1. Any red flag triggered                          -> FAIL
  2. Any required bridge missing, or score < 80     -> WARNING
  3. Otherwise                                       -> PASS

Pure aggregation of component statuses, so a stored result's gate can be
re-derived from its fields alone.
"""

from __future__ import annotations
from fractions import Fraction
from typing import Sequence, Tuple

from ..core.enums import GateStatus
from .bridges import BridgeStatus
from .red_flags import RedFlagStatus
from .scoring import ModuleScore, round_half_up

GATE_SCORE_THRESHOLD = 80


def overall_score(module_scores: Sequence[ModuleScore]) -> int:
    """Mean module score rounded half-up; 100 when there are no modules."""
    if not module_scores:
        return 100
    return round_half_up(Fraction(sum(m.score for m in module_scores), len(module_scores)))


def resolve_gate(
    module_scores: Sequence[ModuleScore],
    bridge_statuses: Sequence[BridgeStatus],
    red_flag_statuses: Sequence[RedFlagStatus],
) -> Tuple[int, GateStatus]:
    """Returns (overall_score, gate_status)."""
    score = overall_score(module_scores)

    if any(flag.triggered for flag in red_flag_statuses):
        return score, GateStatus.FAIL
    if any(bridge.missing for bridge in bridge_statuses) or score < GATE_SCORE_THRESHOLD:
        return score, GateStatus.WARNING
    return score, GateStatus.PASS
