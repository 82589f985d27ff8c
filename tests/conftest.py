"""
mansion_program Test Configuration and Fixtures

Small hand-built presets and decisions for exercising the engine without
the full benchmark library.
"""

import pytest

from mansion_program.core import (
    AdjacencyDecision,
    AdjacencyMatrix,
    DecisionOption,
    MatrixPatch,
    Preset,
    Relationship,
    Space,
)
from mansion_program.benchmarks import get_preset


@pytest.fixture
def kitchen_dining_preset():
    """Two-space preset with a single Kitchen -> Dining Adjacent entry."""
    return Preset(
        id="kd",
        name="Kitchen / Dining",
        spaces=(
            Space("KIT", "Kitchen", "Z2_FAM", target_area=300),
            Space("DR", "Dining Room", "Z1_APB", target_area=250),
        ),
        adjacency_matrix=AdjacencyMatrix({("KIT", "DR"): Relationship.ADJACENT}),
    )


@pytest.fixture
def kitchen_dining_decision():
    """Decision whose non-default option buffers Kitchen -> Dining."""
    return AdjacencyDecision(
        id="kitchen-dining",
        title="Kitchen to Dining",
        options=(
            DecisionOption("kd-open", "Open", is_default=True),
            DecisionOption(
                "kd-buffered",
                "Buffered",
                matrix_patches=(MatrixPatch("KIT", "DR", Relationship.BUFFERED),),
            ),
        ),
    )


@pytest.fixture
def conflicting_decisions():
    """Two decisions whose options both target the A -> B entry."""
    first = AdjacencyDecision(
        id="first",
        title="First",
        options=(
            DecisionOption("first-keep", "Keep", is_default=True),
            DecisionOption(
                "first-near", "Near",
                matrix_patches=(MatrixPatch("A", "B", Relationship.NEAR),),
            ),
        ),
    )
    second = AdjacencyDecision(
        id="second",
        title="Second",
        options=(
            DecisionOption("second-keep", "Keep", is_default=True),
            DecisionOption(
                "second-separate", "Separate",
                matrix_patches=(MatrixPatch("A", "B", Relationship.SEPARATE),),
            ),
        ),
    )
    return [first, second]


@pytest.fixture
def preset_5k():
    return get_preset("5k")


@pytest.fixture
def preset_10k():
    return get_preset("10k")
