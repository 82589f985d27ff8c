"""
Module scoring.

    score = clamp(base - min(n * per_deviation, max_penalty) + checklist_bonus, floor, 100)

n counts the deviations with at least one endpoint among the module's
spaces; each deviation counts once per module. The checklist bonus is
zero unless the caller supplies checklist completion state.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from ..core.models import ValidationModule
from .deviations import Deviation

ChecklistState = Mapping[str, bool]


@dataclass(frozen=True)
class ScoringConfig:
    """Module scoring constants."""

    base_score: int = 90
    per_deviation_penalty: int = 5
    max_penalty: int = 30
    floor_score: int = 60
    checklist_bonus_max: int = 10

    def __post_init__(self):
        if not 0 <= self.floor_score <= 100:
            raise ValueError(f"floor_score must be in [0, 100], got {self.floor_score}")
        for name in ("per_deviation_penalty", "max_penalty", "checklist_bonus_max"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "base_score": self.base_score,
            "per_deviation_penalty": self.per_deviation_penalty,
            "max_penalty": self.max_penalty,
            "floor_score": self.floor_score,
            "checklist_bonus_max": self.checklist_bonus_max,
        }


DEFAULT_SCORING = ScoringConfig()


@dataclass(frozen=True)
class ModuleScore:
    """Score of one validation module."""

    module_id: str
    name: str
    score: int
    threshold: int = 80
    deviation_count: int = 0
    penalty: int = 0
    checklist_bonus: int = 0

    @property
    def passed(self) -> bool:
        return self.score >= self.threshold

    def to_dict(self) -> Dict[str, Any]:
        return {
            "module_id": self.module_id,
            "name": self.name,
            "score": self.score,
            "threshold": self.threshold,
            "passed": self.passed,
            "deviation_count": self.deviation_count,
            "penalty": self.penalty,
            "checklist_bonus": self.checklist_bonus,
        }


def round_half_up(value: Union[int, Fraction]) -> int:
    """Round to the nearest integer; exact halves round up."""
    return math.floor(Fraction(value) + Fraction(1, 2))


def count_module_deviations(module: ValidationModule, deviations: Iterable[Deviation]) -> int:
    return sum(1 for d in deviations if module.involves(d.from_space_code, d.to_space_code))


def checklist_bonus(
    module: ValidationModule,
    checklist_state: Optional[ChecklistState],
    config: ScoringConfig = DEFAULT_SCORING,
) -> int:
    """Bonus points for completed checklist items; 0 without state."""
    if checklist_state is None or module.checklist_count == 0:
        return 0
    completed = sum(1 for item in module.checklist_items if checklist_state.get(item.id, False))
    return round_half_up(Fraction(config.checklist_bonus_max * completed, module.checklist_count))


def score_module(
    module: ValidationModule,
    deviations: Iterable[Deviation],
    config: ScoringConfig = DEFAULT_SCORING,
    checklist_state: Optional[ChecklistState] = None,
) -> ModuleScore:
    """Deterministic score for one module."""
    count = count_module_deviations(module, deviations)
    penalty = min(count * config.per_deviation_penalty, config.max_penalty)
    bonus = checklist_bonus(module, checklist_state, config)

    raw = config.base_score - penalty + bonus
    score = max(config.floor_score, min(100, raw))

    return ModuleScore(
        module_id=module.id,
        name=module.name,
        score=score,
        threshold=module.threshold,
        deviation_count=count,
        penalty=penalty,
        checklist_bonus=bonus,
    )
