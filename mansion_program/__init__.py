"""
mansion_program - Adjacency Matrix Personalization & Validation Engine

Starts from a size-tier benchmark of spatial relationships, applies a
client's design decisions as patches, and validates the proposed matrix
against module checklists, required bridges and red flag rules.

Entry points:
    resolve_tier(target_area_sf) -> SizeTier
    get_preset(tier_id) -> Preset
    apply_decisions_to_matrix(benchmark, choices) -> AdjacencyMatrix
    run_validation(preset, choices) -> ValidationResult
"""

from .core import (
    Relationship,
    GateStatus,
    SizeTier,
    Space,
    AdjacencyRelationship,
    AdjacencyMatrix,
    MatrixPatch,
    DecisionOption,
    AdjacencyDecision,
    Choice,
    ValidationModule,
    Bridge,
    RedFlagRule,
    Preset,
)
from .errors import (
    MansionProgramError,
    UnknownTierError,
    UnknownDecisionError,
    UnknownOptionError,
    DuplicateChoiceError,
)
from .benchmarks import resolve_tier, get_preset, PRESET_LIBRARY
from .decisions import (
    DECISION_CATALOG,
    get_decisions_for_preset,
    apply_decisions_to_matrix,
    partition_choices,
    summarize_personalization,
)
from .validation import (
    Deviation,
    detect_deviations,
    ScoringConfig,
    ValidationResult,
    ValidationEngine,
    resolve_gate,
    run_validation,
)

__version__ = "1.0.0"

__all__ = [
    # Vocabulary
    "Relationship",
    "GateStatus",
    "SizeTier",
    "Space",
    "AdjacencyRelationship",
    "AdjacencyMatrix",
    "MatrixPatch",
    "DecisionOption",
    "AdjacencyDecision",
    "Choice",
    "ValidationModule",
    "Bridge",
    "RedFlagRule",
    "Preset",

    # Errors
    "MansionProgramError",
    "UnknownTierError",
    "UnknownDecisionError",
    "UnknownOptionError",
    "DuplicateChoiceError",

    # Benchmarks
    "resolve_tier",
    "get_preset",
    "PRESET_LIBRARY",

    # Decisions
    "DECISION_CATALOG",
    "get_decisions_for_preset",
    "apply_decisions_to_matrix",
    "partition_choices",
    "summarize_personalization",

    # Validation
    "Deviation",
    "detect_deviations",
    "ScoringConfig",
    "ValidationResult",
    "ValidationEngine",
    "resolve_gate",
    "run_validation",
]
