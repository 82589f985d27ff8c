"""
mansion_program Validation Engine

Composes the full run for one preset and choice set:

    choices -> effective options -> proposed matrix
            -> deviations -> module scores
            -> bridges + red flags -> gate

Reference data (modules, bridges, red flag rules, scoring constants) is
bundled on the engine; the preset, decisions and choices are always passed
in. The engine holds no state between runs.
"""

from __future__ import annotations
import logging
from typing import Iterable, Mapping, Optional, Sequence

from ..core.models import AdjacencyDecision, Bridge, Preset, RedFlagRule, ValidationModule
from ..decisions.catalog import DECISION_CATALOG
from ..decisions.summary import available_bridges
from ..decisions.transformer import ChoiceInput, apply_options, resolve_effective_options
from .bridges import BRIDGES, evaluate_bridges
from .deviations import detect_deviations
from .modules import MODULE_LIBRARY
from .red_flags import RED_FLAG_RULES, evaluate_red_flags
from .result import ValidationResult
from .scoring import DEFAULT_SCORING, ChecklistState, ScoringConfig, score_module

logger = logging.getLogger(__name__)


class ValidationEngine:
    """
    Validation engine for personalized adjacency programs.

    Same (preset, choices) always yields the same scores and gate; only
    computed_at differs between runs.
    """

    def __init__(
        self,
        modules: Optional[Sequence[ValidationModule]] = None,
        bridges: Optional[Sequence[Bridge]] = None,
        red_flag_rules: Optional[Sequence[RedFlagRule]] = None,
        scoring: Optional[ScoringConfig] = None,
    ):
        """
        Initialize validation engine.

        Args:
            modules: Validation modules (defaults to MODULE_LIBRARY)
            bridges: Bridge definitions (defaults to BRIDGES)
            red_flag_rules: Hard-fail rules (defaults to RED_FLAG_RULES)
            scoring: Scoring constants (defaults to ScoringConfig())
        """
        self.modules = tuple(MODULE_LIBRARY if modules is None else modules)
        self.bridges = tuple(BRIDGES if bridges is None else bridges)
        self.red_flag_rules = tuple(RED_FLAG_RULES if red_flag_rules is None else red_flag_rules)
        self.scoring = scoring or DEFAULT_SCORING

    def run(
        self,
        preset: Preset,
        choices: Optional[ChoiceInput],
        decisions: Optional[Iterable[AdjacencyDecision]] = None,
        checklist_state: Optional[Mapping[str, ChecklistState]] = None,
    ) -> ValidationResult:
        """
        Validate a choice set against a preset.

        Args:
            preset: Tier benchmark
            choices: Choice records or {decision_id: option_id}
            decisions: Active decisions (defaults to the catalog for the preset's tier)
            checklist_state: Optional {module_id: {item_id: completed}}

        Returns:
            ValidationResult

        Raises:
            UnknownDecisionError, UnknownOptionError, DuplicateChoiceError
        """
        if decisions is None:
            decisions = DECISION_CATALOG.for_tier(preset.id)

        options = resolve_effective_options(choices, decisions)
        benchmark = preset.adjacency_matrix
        proposed = apply_options(benchmark, options)
        deviations = detect_deviations(benchmark, proposed)

        checklist_state = checklist_state or {}
        module_scores = [
            score_module(module, deviations, self.scoring, checklist_state.get(module.id))
            for module in self.modules
        ]
        available = available_bridges(options, preset.provided_bridges)
        bridge_statuses = evaluate_bridges(preset, available, self.bridges)
        red_flag_statuses = evaluate_red_flags(proposed, preset.spaces, self.red_flag_rules)

        result = ValidationResult.build(
            preset_id=preset.id,
            module_scores=module_scores,
            bridge_statuses=bridge_statuses,
            red_flag_statuses=red_flag_statuses,
            deviations=deviations,
            proposed_matrix=proposed,
        )
        logger.info(
            f"Validated preset {preset.id}: score={result.overall_score} "
            f"gate={result.gate_status.value} deviations={len(deviations)} "
            f"missing_bridges={len(result.missing_bridges)} "
            f"red_flags={len(result.triggered_red_flags)}"
        )
        return result


def run_validation(
    preset: Preset,
    choices: Optional[ChoiceInput],
    decisions: Optional[Iterable[AdjacencyDecision]] = None,
    *,
    scoring: Optional[ScoringConfig] = None,
    checklist_state: Optional[Mapping[str, ChecklistState]] = None,
) -> ValidationResult:
    """Run one validation with the default reference data."""
    engine = ValidationEngine(scoring=scoring)
    return engine.run(preset, choices, decisions, checklist_state=checklist_state)
