"""
Deviation detection.

A deviation is an ordered (from, to) key present in both the benchmark and
the proposed matrix with different relationship values. Keys present in
only one matrix are additions or removals, not deviations.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from ..core.enums import Relationship
from ..core.models import AdjacencyMatrix, MatrixKey

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Deviation:
    """Benchmark vs. proposed mismatch for one ordered space pair."""

    from_space_code: str
    to_space_code: str
    desired: Relationship
    proposed: Relationship

    @property
    def key(self) -> MatrixKey:
        return (self.from_space_code, self.to_space_code)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from_space_code": self.from_space_code,
            "to_space_code": self.to_space_code,
            "desired": self.desired.value,
            "proposed": self.proposed.value,
        }


def detect_deviations(
    benchmark: AdjacencyMatrix,
    proposed: AdjacencyMatrix,
) -> List[Deviation]:
    """
    Diff two matrices directionally.

    Returns:
        Deviations sorted by (from_space_code, to_space_code)
    """
    deviations = [
        Deviation(from_code, to_code, benchmark[(from_code, to_code)], proposed[(from_code, to_code)])
        for from_code, to_code in sorted(set(benchmark) & set(proposed))
        if benchmark[(from_code, to_code)] != proposed[(from_code, to_code)]
    ]
    logger.debug(f"Detected {len(deviations)} deviations")
    return deviations
