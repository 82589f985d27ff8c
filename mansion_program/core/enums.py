"""
mansion_program Core Enumerations

Closed vocabularies shared by the benchmark library, the decision catalog
and the validation engine.
"""

from enum import Enum
from typing import Union


class Relationship(str, Enum):
    """
    Required spatial relationship between two spaces.

    Values are the single-letter codes used in persisted matrices.
    """
    ADJACENT = "A"   # Direct connection, shared opening
    NEAR = "N"       # Short walk, no intervening zone
    BUFFERED = "B"   # Connected through a transition space
    SEPARATE = "S"   # No direct connection

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def parse(cls, value: Union[str, "Relationship"]) -> "Relationship":
        """Parse a relationship from its code ("A") or name ("Adjacent")."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for member in cls:
            if text.upper() == member.value or text.upper() == member.name:
                return member
        raise ValueError(f"Unknown relationship: {value!r}")


class GateStatus(str, Enum):
    """Final verdict for a proposed design."""
    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"


class SizeTier(str, Enum):
    """
    Discrete size brackets selecting a benchmark preset.

    Ordered smallest first.
    """
    TIER_5K = "5k"
    TIER_10K = "10k"
    TIER_15K = "15k"
    TIER_20K = "20k"

    @property
    def rank(self) -> int:
        return list(SizeTier).index(self)
