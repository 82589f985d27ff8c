"""
Validation result.

Immutable output of one validation run. The gate status and overall score
are never set independently: they are what resolve_gate returns for the
component statuses, and rederive_gate() recomputes them for auditing.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from ..core.enums import GateStatus
from ..core.models import AdjacencyMatrix
from .bridges import BridgeStatus
from .deviations import Deviation
from .gate import resolve_gate
from .red_flags import RedFlagStatus
from .scoring import ModuleScore


@dataclass(frozen=True)
class ValidationResult:
    """Complete validation result for a proposed design."""

    preset_id: str
    overall_score: int
    gate_status: GateStatus
    module_scores: Tuple[ModuleScore, ...]
    bridge_statuses: Tuple[BridgeStatus, ...]
    red_flag_statuses: Tuple[RedFlagStatus, ...]

    # Derived from the benchmark/proposed pair, kept for display
    deviations: Tuple[Deviation, ...] = ()
    proposed_matrix: Optional[AdjacencyMatrix] = None
    computed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def build(
        cls,
        preset_id: str,
        module_scores: List[ModuleScore],
        bridge_statuses: List[BridgeStatus],
        red_flag_statuses: List[RedFlagStatus],
        deviations: List[Deviation],
        proposed_matrix: Optional[AdjacencyMatrix] = None,
    ) -> "ValidationResult":
        """Assemble a result with its gate resolved from the components."""
        score, status = resolve_gate(module_scores, bridge_statuses, red_flag_statuses)
        return cls(
            preset_id=preset_id,
            overall_score=score,
            gate_status=status,
            module_scores=tuple(module_scores),
            bridge_statuses=tuple(bridge_statuses),
            red_flag_statuses=tuple(red_flag_statuses),
            deviations=tuple(deviations),
            proposed_matrix=proposed_matrix,
        )

    @property
    def passed_modules(self) -> List[ModuleScore]:
        return [m for m in self.module_scores if m.passed]

    @property
    def missing_bridges(self) -> List[BridgeStatus]:
        return [b for b in self.bridge_statuses if b.missing]

    @property
    def triggered_red_flags(self) -> List[RedFlagStatus]:
        return [f for f in self.red_flag_statuses if f.triggered]

    def rederive_gate(self) -> Tuple[int, GateStatus]:
        """Recompute (overall_score, gate_status) from the stored components."""
        return resolve_gate(self.module_scores, self.bridge_statuses, self.red_flag_statuses)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "preset_id": self.preset_id,
            "computed_at": self.computed_at.isoformat(),
            "overall_score": self.overall_score,
            "gate_status": self.gate_status.value,
            "module_scores": [m.to_dict() for m in self.module_scores],
            "bridge_statuses": [b.to_dict() for b in self.bridge_statuses],
            "red_flag_statuses": [f.to_dict() for f in self.red_flag_statuses],
            "deviations": [d.to_dict() for d in self.deviations],
            "summary": {
                "modules_passed": len(self.passed_modules),
                "modules_total": len(self.module_scores),
                "missing_bridges": [b.bridge_id for b in self.missing_bridges],
                "triggered_red_flags": [f.flag_id for f in self.triggered_red_flags],
                "deviation_count": len(self.deviations),
            },
        }
