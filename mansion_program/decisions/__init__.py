"""
mansion_program Decisions Module

Decision catalog, choice resolution and the matrix transformer.
"""

from .catalog import DecisionCatalog, DECISION_CATALOG, get_decisions_for_preset
from .transformer import (
    ChoiceInput,
    normalize_choices,
    active_decisions,
    resolve_choice,
    resolve_effective_selections,
    resolve_effective_options,
    apply_options,
    apply_decisions_to_matrix,
    RejectedChoice,
    partition_choices,
)
from .summary import (
    OptionWarning,
    PersonalizationSummary,
    available_bridges,
    summarize_personalization,
)

__all__ = [
    # Catalog
    "DecisionCatalog",
    "DECISION_CATALOG",
    "get_decisions_for_preset",

    # Transformer
    "ChoiceInput",
    "normalize_choices",
    "active_decisions",
    "resolve_choice",
    "resolve_effective_selections",
    "resolve_effective_options",
    "apply_options",
    "apply_decisions_to_matrix",
    "RejectedChoice",
    "partition_choices",

    # Summary
    "OptionWarning",
    "PersonalizationSummary",
    "available_bridges",
    "summarize_personalization",
]
