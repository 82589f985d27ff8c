"""
mansion_program Matrix Transformer

Resolves a choice set against the decision catalog and applies the chosen
options' patches to a benchmark matrix.

Application order:
  1. Default options of decisions without a recorded choice, in catalog order
  2. Chosen options, in choice-list order
Within an option, patches apply in listed order. Later writes to the same
(from, to) key always win; nothing is merged.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from ..core.models import (
    AdjacencyDecision, AdjacencyMatrix, Choice, DecisionOption,
)
from ..errors import (
    ChoiceError, DuplicateChoiceError, UnknownDecisionError, UnknownOptionError,
)
from .catalog import DECISION_CATALOG

logger = logging.getLogger(__name__)

ChoiceInput = Union[Sequence[Choice], Mapping[str, str]]


def normalize_choices(choices: Optional[ChoiceInput]) -> List[Choice]:
    """Accept Choice records or a {decision_id: option_id} mapping."""
    if choices is None:
        return []
    if isinstance(choices, Mapping):
        return [Choice(decision_id, option_id) for decision_id, option_id in choices.items()]
    return list(choices)


def active_decisions(decisions: Optional[Iterable[AdjacencyDecision]]) -> List[AdjacencyDecision]:
    """Decisions to resolve against; the full catalog when none are given."""
    if decisions is None:
        return DECISION_CATALOG.all_decisions()
    return list(decisions)


def resolve_choice(
    choice: Choice,
    decisions_by_id: Mapping[str, AdjacencyDecision],
) -> Tuple[AdjacencyDecision, DecisionOption]:
    """Resolve one choice to its (decision, option), raising a ChoiceError subclass."""
    decision = decisions_by_id.get(choice.decision_id)
    if decision is None:
        raise UnknownDecisionError(choice.decision_id, choice.selected_option_id)

    option = decision.get_option(choice.selected_option_id)
    if option is None:
        raise UnknownOptionError(choice.decision_id, choice.selected_option_id)
    return decision, option


def resolve_effective_selections(
    choices: Optional[ChoiceInput],
    decisions: Optional[Iterable[AdjacencyDecision]] = None,
) -> List[Tuple[AdjacencyDecision, DecisionOption]]:
    """
    Ordered (decision, option) pairs to apply for a choice set.

    Every choice is resolved before anything is returned, so a malformed
    choice set never yields a partial result.

    Raises:
        UnknownDecisionError: choice names a decision outside `decisions`
        UnknownOptionError: choice names an option its decision lacks
        DuplicateChoiceError: two choices for the same decision
    """
    catalog = active_decisions(decisions)
    decisions_by_id = {d.id: d for d in catalog}

    chosen: List[Tuple[AdjacencyDecision, DecisionOption]] = []
    seen: Dict[str, str] = {}
    for choice in normalize_choices(choices):
        if choice.decision_id in seen:
            raise DuplicateChoiceError(choice.decision_id, choice.selected_option_id)
        chosen.append(resolve_choice(choice, decisions_by_id))
        seen[choice.decision_id] = choice.selected_option_id

    defaults = [
        (d, d.default_option)
        for d in catalog
        if d.id not in seen and d.default_option is not None
    ]
    return defaults + chosen


def resolve_effective_options(
    choices: Optional[ChoiceInput],
    decisions: Optional[Iterable[AdjacencyDecision]] = None,
) -> List[DecisionOption]:
    """Ordered options to apply for a choice set; see resolve_effective_selections."""
    return [option for _, option in resolve_effective_selections(choices, decisions)]


def apply_options(
    benchmark: AdjacencyMatrix,
    options: Iterable[DecisionOption],
) -> AdjacencyMatrix:
    """Apply option patches, in order, to a working copy of the benchmark."""
    working = benchmark.as_dict()
    for option in options:
        for patch in option.matrix_patches:
            working[patch.key] = patch.relationship
    return AdjacencyMatrix(working)


def apply_decisions_to_matrix(
    benchmark: AdjacencyMatrix,
    choices: Optional[ChoiceInput],
    decisions: Optional[Iterable[AdjacencyDecision]] = None,
) -> AdjacencyMatrix:
    """
    Produce the proposed matrix for a choice set.

    Args:
        benchmark: Tier benchmark matrix (never mutated)
        choices: Ordered Choice records or a {decision_id: option_id} mapping
        decisions: Active decisions; defaults to the full catalog

    Returns:
        New AdjacencyMatrix
    """
    options = resolve_effective_options(choices, decisions)
    proposed = apply_options(benchmark, options)
    logger.debug(
        f"Applied {sum(len(o.matrix_patches) for o in options)} patches "
        f"from {len(options)} options"
    )
    return proposed


@dataclass(frozen=True)
class RejectedChoice:
    """A choice that could not be applied, with the reason."""
    choice: Choice
    error: ChoiceError

    def to_dict(self) -> Dict:
        return {"choice": self.choice.to_dict(), "error": self.error.to_dict()}


def partition_choices(
    choices: Optional[ChoiceInput],
    decisions: Optional[Iterable[AdjacencyDecision]] = None,
) -> Tuple[List[Choice], List[RejectedChoice]]:
    """
    Split a choice set into (applicable, rejected) without raising.

    Used when choices were carried over a tier change: the caller decides
    whether to drop the rejected ones or ask the user again. For duplicate
    decision ids the first choice is kept.
    """
    decisions_by_id = {d.id: d for d in active_decisions(decisions)}

    applicable: List[Choice] = []
    rejected: List[RejectedChoice] = []
    seen = set()
    for choice in normalize_choices(choices):
        try:
            if choice.decision_id in seen:
                raise DuplicateChoiceError(choice.decision_id, choice.selected_option_id)
            resolve_choice(choice, decisions_by_id)
        except ChoiceError as e:
            rejected.append(RejectedChoice(choice, e))
            continue
        seen.add(choice.decision_id)
        applicable.append(choice)

    if rejected:
        logger.info(f"Rejected {len(rejected)} of {len(rejected) + len(applicable)} choices")
    return applicable, rejected
