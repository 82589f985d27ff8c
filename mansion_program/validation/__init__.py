"""
mansion_program Validation Module

Deviation detection, module scoring, bridge and red flag evaluation, and
the gate resolver, composed by ValidationEngine.
"""

from .deviations import Deviation, detect_deviations
from .modules import MODULE_LIBRARY, get_module
from .scoring import (
    ChecklistState,
    ScoringConfig,
    DEFAULT_SCORING,
    ModuleScore,
    round_half_up,
    count_module_deviations,
    checklist_bonus,
    score_module,
)
from .bridges import BRIDGES, BridgeStatus, evaluate_bridges
from .red_flags import RED_FLAG_RULES, RedFlagStatus, evaluate_red_flags
from .gate import GATE_SCORE_THRESHOLD, overall_score, resolve_gate
from .result import ValidationResult
from .engine import ValidationEngine, run_validation

__all__ = [
    # Deviations
    "Deviation",
    "detect_deviations",

    # Modules & scoring
    "MODULE_LIBRARY",
    "get_module",
    "ChecklistState",
    "ScoringConfig",
    "DEFAULT_SCORING",
    "ModuleScore",
    "round_half_up",
    "count_module_deviations",
    "checklist_bonus",
    "score_module",

    # Bridges & red flags
    "BRIDGES",
    "BridgeStatus",
    "evaluate_bridges",
    "RED_FLAG_RULES",
    "RedFlagStatus",
    "evaluate_red_flags",

    # Gate
    "GATE_SCORE_THRESHOLD",
    "overall_score",
    "resolve_gate",

    # Engine
    "ValidationResult",
    "ValidationEngine",
    "run_validation",
]
