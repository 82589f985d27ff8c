"""
mansion_program Core Models

Typed records for spaces, adjacency relationships, decisions and the
validation vocabulary. No engine logic lives here; construction only
enforces each record's own invariants.
"""

from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import (
    Any, Callable, Dict, FrozenSet, Iterable, Iterator, List, Optional,
    Sequence, Tuple,
)

from .enums import Relationship

MatrixKey = Tuple[str, str]


# =============================================================================
# SPACES & RELATIONSHIPS
# =============================================================================

@dataclass(frozen=True)
class Space:
    """A room or area in the residence program."""

    code: str
    name: str
    zone: str
    level: int = 1
    target_area: float = 0.0
    rationale: Optional[str] = None

    def __post_init__(self):
        if not self.code:
            raise ValueError("Space code must be non-empty")
        if self.level < 0:
            raise ValueError(f"Space {self.code}: level must be >= 0, got {self.level}")
        if self.target_area < 0:
            raise ValueError(
                f"Space {self.code}: target area must be >= 0, got {self.target_area}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "name": self.name,
            "zone": self.zone,
            "level": self.level,
            "target_area": self.target_area,
            "rationale": self.rationale,
        }


@dataclass(frozen=True)
class AdjacencyRelationship:
    """Directional relationship from one space to another."""

    from_space_code: str
    to_space_code: str
    relationship: Relationship

    def __post_init__(self):
        if self.from_space_code == self.to_space_code:
            raise ValueError(
                f"Relationship endpoints must differ: {self.from_space_code}"
            )
        object.__setattr__(self, "relationship", Relationship.parse(self.relationship))

    @property
    def key(self) -> MatrixKey:
        return (self.from_space_code, self.to_space_code)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from_space_code": self.from_space_code,
            "to_space_code": self.to_space_code,
            "relationship": self.relationship.value,
        }


class AdjacencyMatrix(Mapping):
    """
    Immutable mapping of (from_space_code, to_space_code) -> Relationship.

    Keys are structured pairs, never concatenated strings. Iteration is in
    sorted key order so that every derived listing is deterministic.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[Mapping] = None):
        built: Dict[MatrixKey, Relationship] = {}
        for key, value in (entries or {}).items():
            from_code, to_code = key
            if from_code == to_code:
                raise ValueError(f"Relationship endpoints must differ: {from_code}")
            built[(from_code, to_code)] = Relationship.parse(value)
        self._entries = built

    @classmethod
    def from_relationships(
        cls,
        relationships: Iterable[AdjacencyRelationship],
    ) -> "AdjacencyMatrix":
        """Build a matrix, rejecting a second entry for the same ordered pair."""
        entries: Dict[MatrixKey, Relationship] = {}
        for rel in relationships:
            if rel.key in entries:
                raise ValueError(
                    f"Duplicate relationship for {rel.from_space_code}->{rel.to_space_code}"
                )
            entries[rel.key] = rel.relationship
        return cls(entries)

    @classmethod
    def from_dict(cls, data: Dict[str, Dict[str, str]]) -> "AdjacencyMatrix":
        """Build from the nested {from: {to: code}} form produced by to_dict()."""
        return cls({
            (from_code, to_code): value
            for from_code, row in data.items()
            for to_code, value in row.items()
        })

    # Mapping protocol

    def __getitem__(self, key: MatrixKey) -> Relationship:
        return self._entries[tuple(key)]

    def __iter__(self) -> Iterator[MatrixKey]:
        return iter(sorted(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"AdjacencyMatrix({len(self._entries)} relationships)"

    # Lookups

    def between(self, from_code: str, to_code: str) -> Optional[Relationship]:
        """Relationship from_code->to_code, or None."""
        return self._entries.get((from_code, to_code))

    def both_ways(self, a: str, b: str) -> Tuple[Relationship, ...]:
        """Relationships recorded for a->b and b->a, each checked on its own."""
        return tuple(
            self._entries[key] for key in ((a, b), (b, a)) if key in self._entries
        )

    def relationships(self) -> List[AdjacencyRelationship]:
        return [
            AdjacencyRelationship(from_code, to_code, self._entries[(from_code, to_code)])
            for from_code, to_code in self
        ]

    def space_codes(self) -> FrozenSet[str]:
        codes = set()
        for from_code, to_code in self._entries:
            codes.add(from_code)
            codes.add(to_code)
        return frozenset(codes)

    def as_dict(self) -> Dict[MatrixKey, Relationship]:
        """Mutable copy of the entries, for building a derived matrix."""
        return dict(self._entries)

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        result: Dict[str, Dict[str, str]] = {}
        for from_code, to_code in self:
            result.setdefault(from_code, {})[to_code] = self._entries[(from_code, to_code)].value
        return result


# =============================================================================
# DECISIONS
# =============================================================================

@dataclass(frozen=True)
class MatrixPatch:
    """Overwrite-or-insert of one ordered matrix entry."""

    from_space_code: str
    to_space_code: str
    relationship: Relationship

    def __post_init__(self):
        if self.from_space_code == self.to_space_code:
            raise ValueError(f"Patch endpoints must differ: {self.from_space_code}")
        object.__setattr__(self, "relationship", Relationship.parse(self.relationship))

    @property
    def key(self) -> MatrixKey:
        return (self.from_space_code, self.to_space_code)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from_space_code": self.from_space_code,
            "to_space_code": self.to_space_code,
            "relationship": self.relationship.value,
        }


@dataclass(frozen=True)
class DecisionOption:
    """One mutually exclusive answer to a decision."""

    id: str
    label: str
    matrix_patches: Tuple[MatrixPatch, ...] = ()
    is_default: bool = False
    description: str = ""
    warnings: Tuple[str, ...] = ()
    sf_impact: int = 0
    enables_bridges: Tuple[str, ...] = ()
    removes_bridges: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "matrix_patches", tuple(self.matrix_patches))
        object.__setattr__(self, "warnings", tuple(self.warnings))
        object.__setattr__(self, "enables_bridges", tuple(self.enables_bridges))
        object.__setattr__(self, "removes_bridges", tuple(self.removes_bridges))
        if self.sf_impact < 0:
            raise ValueError(f"Option {self.id}: sf_impact must be >= 0")
        both = sorted(set(self.enables_bridges) & set(self.removes_bridges))
        if both:
            raise ValueError(f"Option {self.id}: bridges both enabled and removed {both}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "description": self.description,
            "is_default": self.is_default,
            "matrix_patches": [p.to_dict() for p in self.matrix_patches],
            "warnings": list(self.warnings),
            "sf_impact": self.sf_impact,
            "enables_bridges": list(self.enables_bridges),
            "removes_bridges": list(self.removes_bridges),
        }


@dataclass(frozen=True)
class AdjacencyDecision:
    """A discrete design decision with mutually exclusive options."""

    id: str
    title: str
    options: Tuple[DecisionOption, ...]
    question: str = ""
    primary_space: str = ""
    applicable_tiers: FrozenSet[str] = frozenset()
    priority: int = 100

    def __post_init__(self):
        options = tuple(self.options)
        object.__setattr__(self, "options", options)
        object.__setattr__(
            self, "applicable_tiers",
            frozenset(getattr(t, "value", t) for t in self.applicable_tiers),
        )
        if not options:
            raise ValueError(f"Decision {self.id}: options must be non-empty")
        defaults = [o.id for o in options if o.is_default]
        if len(defaults) > 1:
            raise ValueError(f"Decision {self.id}: more than one default option {defaults}")
        ids = [o.id for o in options]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Decision {self.id}: duplicate option ids")

    @property
    def default_option(self) -> Optional[DecisionOption]:
        for option in self.options:
            if option.is_default:
                return option
        return None

    def get_option(self, option_id: str) -> Optional[DecisionOption]:
        for option in self.options:
            if option.id == option_id:
                return option
        return None

    def applies_to(self, tier: str) -> bool:
        return getattr(tier, "value", tier) in self.applicable_tiers

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "question": self.question,
            "primary_space": self.primary_space,
            "applicable_tiers": sorted(self.applicable_tiers),
            "priority": self.priority,
            "options": [o.to_dict() for o in self.options],
        }


@dataclass(frozen=True)
class Choice:
    """A user's selection for one decision."""

    decision_id: str
    selected_option_id: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "decision_id": self.decision_id,
            "selected_option_id": self.selected_option_id,
        }


# =============================================================================
# VALIDATION VOCABULARY
# =============================================================================

@dataclass(frozen=True)
class ChecklistItem:
    """Single checklist line of a validation module."""
    id: str
    name: str
    description: str = ""


@dataclass(frozen=True)
class ValidationModule:
    """Functional module scored from checklist completion and deviations."""

    id: str
    name: str
    space_codes: FrozenSet[str]
    checklist_items: Tuple[ChecklistItem, ...] = ()
    threshold: int = 80
    number: int = 0
    short_name: str = ""

    def __post_init__(self):
        object.__setattr__(self, "space_codes", frozenset(self.space_codes))
        object.__setattr__(self, "checklist_items", tuple(self.checklist_items))
        if not 0 <= self.threshold <= 100:
            raise ValueError(f"Module {self.id}: threshold must be in [0, 100]")

    @property
    def checklist_count(self) -> int:
        return len(self.checklist_items)

    def involves(self, from_code: str, to_code: str) -> bool:
        return from_code in self.space_codes or to_code in self.space_codes


@dataclass(frozen=True)
class Bridge:
    """Required structural/programmatic connector."""
    id: str
    name: str
    description: str = ""


RedFlagPredicate = Callable[[AdjacencyMatrix, Sequence[Space]], bool]


@dataclass(frozen=True)
class RedFlagRule:
    """Hard-fail rule evaluated against the proposed matrix."""

    id: str
    name: str
    predicate: RedFlagPredicate
    description: str = ""

    def evaluate(self, matrix: AdjacencyMatrix, spaces: Sequence[Space]) -> bool:
        return bool(self.predicate(matrix, spaces))


# =============================================================================
# PRESET
# =============================================================================

@dataclass(frozen=True)
class Preset:
    """Benchmark program for one size tier."""

    id: str
    name: str
    spaces: Tuple[Space, ...]
    adjacency_matrix: AdjacencyMatrix
    bridge_requirements: Mapping = field(default_factory=dict)
    # Bridges the untouched benchmark layout already includes
    provided_bridges: FrozenSet[str] = frozenset()
    target_area: float = 0.0
    description: str = ""

    def __post_init__(self):
        object.__setattr__(self, "id", str(getattr(self.id, "value", self.id)))
        spaces = tuple(self.spaces)
        object.__setattr__(self, "spaces", spaces)
        object.__setattr__(
            self, "bridge_requirements", MappingProxyType(dict(self.bridge_requirements))
        )
        object.__setattr__(self, "provided_bridges", frozenset(self.provided_bridges))

        codes = [s.code for s in spaces]
        duplicates = sorted({c for c in codes if codes.count(c) > 1})
        if duplicates:
            raise ValueError(f"Preset {self.id}: duplicate space codes {duplicates}")

        unknown = sorted(self.adjacency_matrix.space_codes() - set(codes))
        if unknown:
            raise ValueError(f"Preset {self.id}: matrix references unknown spaces {unknown}")

    def get_space(self, code: str) -> Optional[Space]:
        for space in self.spaces:
            if space.code == code:
                return space
        return None

    @property
    def space_codes(self) -> FrozenSet[str]:
        return frozenset(s.code for s in self.spaces)

    @property
    def total_area(self) -> float:
        return sum(s.target_area for s in self.spaces)

    def requires_bridge(self, bridge_id: str) -> bool:
        return bool(self.bridge_requirements.get(bridge_id, False))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "target_area": self.target_area,
            "description": self.description,
            "spaces": [s.to_dict() for s in self.spaces],
            "adjacency_matrix": self.adjacency_matrix.to_dict(),
            "bridge_requirements": dict(self.bridge_requirements),
            "provided_bridges": sorted(self.provided_bridges),
        }
