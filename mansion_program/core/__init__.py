"""
mansion_program Core Module

Vocabulary shared by every engine component: relationship, gate and tier
enumerations plus the typed space, matrix, decision and preset records.
"""

from .enums import Relationship, GateStatus, SizeTier

from .models import (
    MatrixKey,
    Space,
    AdjacencyRelationship,
    AdjacencyMatrix,
    MatrixPatch,
    DecisionOption,
    AdjacencyDecision,
    Choice,
    ChecklistItem,
    ValidationModule,
    Bridge,
    RedFlagPredicate,
    RedFlagRule,
    Preset,
)

__all__ = [
    # Enumerations
    "Relationship",
    "GateStatus",
    "SizeTier",

    # Spaces & matrices
    "MatrixKey",
    "Space",
    "AdjacencyRelationship",
    "AdjacencyMatrix",

    # Decisions
    "MatrixPatch",
    "DecisionOption",
    "AdjacencyDecision",
    "Choice",

    # Validation vocabulary
    "ChecklistItem",
    "ValidationModule",
    "Bridge",
    "RedFlagPredicate",
    "RedFlagRule",

    # Presets
    "Preset",
]
