"""
errors/ - Engine Error Taxonomy

Structured, catchable errors for malformed tiers and choice sets.
"""

from .taxonomy import (
    ErrorCategory,
    MansionProgramError,
    UnknownTierError,
    ChoiceError,
    UnknownDecisionError,
    UnknownOptionError,
    DuplicateChoiceError,
)

__all__ = [
    "ErrorCategory",
    "MansionProgramError",
    "UnknownTierError",
    "ChoiceError",
    "UnknownDecisionError",
    "UnknownOptionError",
    "DuplicateChoiceError",
]
