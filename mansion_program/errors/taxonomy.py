"""
errors/taxonomy.py - Engine error taxonomy

Structured exceptions for malformed engine input. Every error is local and
deterministic: the engine performs no I/O, so there is no retry path and
nothing is partially applied when one of these is raised.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(Enum):
    """Categories of engine errors."""
    TIER = "tier"                    # Size tier lookup
    CHOICE = "choice"                # Caller-supplied choice set
    CONFIGURATION = "configuration"  # Reference data / config


# =============================================================================
# BASE ERROR CLASS
# =============================================================================

class MansionProgramError(Exception):
    """
    Base class for engine errors.

    Carries a stable code for programmatic handling, a human-readable
    message, and a details dictionary for the caller to report.
    """

    code: str = "MVP_000"
    category: ErrorCategory = ErrorCategory.CONFIGURATION

    def __init__(
        self,
        message: str = "",
        *,
        details: Optional[Dict[str, Any]] = None,
        **kwargs,
    ):
        self.message = message or self.__class__.__doc__ or "Engine error"
        self.details = details or {}
        self.details.update(kwargs)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for reporting."""
        return {
            "code": self.code,
            "category": self.category.value,
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


# =============================================================================
# TIER ERRORS
# =============================================================================

class UnknownTierError(MansionProgramError):
    """Size tier is not one of the defined tiers."""

    code = "MVP_101"
    category = ErrorCategory.TIER

    def __init__(
        self,
        tier_id: Any = None,
        *,
        area: Optional[float] = None,
        **kwargs,
    ):
        if area is not None:
            message = f"Target area {area!r} maps to no defined size tier"
        else:
            message = f"Unknown size tier: {tier_id!r}"
        super().__init__(message, tier_id=tier_id, area=area, **kwargs)
        self.tier_id = tier_id
        self.area = area


# =============================================================================
# CHOICE ERRORS
# =============================================================================

class ChoiceError(MansionProgramError):
    """A caller-supplied choice could not be resolved."""

    code = "MVP_200"
    category = ErrorCategory.CHOICE

    def __init__(
        self,
        message: str,
        *,
        decision_id: str,
        option_id: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, decision_id=decision_id, option_id=option_id, **kwargs)
        self.decision_id = decision_id
        self.option_id = option_id


class UnknownDecisionError(ChoiceError):
    """Choice references a decision outside the active catalog."""

    code = "MVP_201"

    def __init__(
        self,
        decision_id: str,
        option_id: Optional[str] = None,
        tier: Optional[str] = None,
    ):
        message = f"Decision '{decision_id}' is not in the active catalog"
        if tier:
            message += f" for tier {tier}"
        super().__init__(message, decision_id=decision_id, option_id=option_id, tier=tier)
        self.tier = tier


class UnknownOptionError(ChoiceError):
    """Choice references an option absent from its decision."""

    code = "MVP_202"

    def __init__(self, decision_id: str, option_id: str):
        super().__init__(
            f"Option '{option_id}' does not belong to decision '{decision_id}'",
            decision_id=decision_id,
            option_id=option_id,
        )


class DuplicateChoiceError(ChoiceError):
    """More than one choice was recorded for the same decision."""

    code = "MVP_203"

    def __init__(self, decision_id: str, option_id: Optional[str] = None):
        super().__init__(
            f"Decision '{decision_id}' has more than one recorded choice",
            decision_id=decision_id,
            option_id=option_id,
        )
