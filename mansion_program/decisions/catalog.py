"""
mansion_program Decision Catalog

Discrete design decisions a client answers to personalize the benchmark.
Each option's patches overwrite benchmark entries in both directions; the
default option of every decision reproduces the benchmark, so it carries
no patches.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Tuple

from ..core.enums import Relationship, SizeTier
from ..core.models import AdjacencyDecision, DecisionOption, MatrixPatch
from ..benchmarks.tiers import parse_tier

A = Relationship.ADJACENT
N = Relationship.NEAR
B = Relationship.BUFFERED
S = Relationship.SEPARATE

ALL_TIERS = frozenset(t.value for t in SizeTier)
FROM_10K = frozenset({"10k", "15k", "20k"})
FROM_15K = frozenset({"15k", "20k"})


def _both(a: str, b: str, rel: Relationship) -> Tuple[MatrixPatch, MatrixPatch]:
    return (MatrixPatch(a, b, rel), MatrixPatch(b, a, rel))


def _patches(*pairs: Tuple[str, str, Relationship]) -> Tuple[MatrixPatch, ...]:
    result: List[MatrixPatch] = []
    for a, b, rel in pairs:
        result.extend(_both(a, b, rel))
    return tuple(result)


class DecisionCatalog:
    """Repository of adjacency decisions."""

    def __init__(self):
        self._decisions: Dict[str, AdjacencyDecision] = {}

        self._load_public_decisions()
        self._load_family_decisions()
        self._load_private_decisions()
        self._load_service_decisions()

    def register(self, decision: AdjacencyDecision) -> None:
        """Register a decision in the catalog."""
        if decision.id in self._decisions:
            raise ValueError(f"Decision {decision.id} already registered")
        self._decisions[decision.id] = decision

    def get(self, decision_id: str) -> Optional[AdjacencyDecision]:
        """Get decision by ID."""
        return self._decisions.get(decision_id)

    def all_decisions(self) -> List[AdjacencyDecision]:
        """All decisions in priority order."""
        return sorted(self._decisions.values(), key=lambda d: (d.priority, d.id))

    def for_tier(self, tier_id) -> List[AdjacencyDecision]:
        """Decisions applicable to a tier, in priority order."""
        tier = parse_tier(tier_id)
        return [d for d in self.all_decisions() if d.applies_to(tier)]

    # -------------------------------------------------------------------------
    # Arrival + public
    # -------------------------------------------------------------------------

    def _load_public_decisions(self) -> None:
        self.register(AdjacencyDecision(
            id="office-location",
            title="Home Office Location",
            question="Where should your home office connect?",
            primary_space="OFF",
            applicable_tiers=ALL_TIERS,
            priority=1,
            options=(
                DecisionOption(
                    id="off-entry",
                    label="Near Entry (Front of House)",
                    description="Professional separation. Clients enter without seeing private areas.",
                    is_default=True,
                ),
                DecisionOption(
                    id="off-family",
                    label="Near Family Room",
                    description="Stay connected to household activities while working.",
                    matrix_patches=_patches(("OFF", "FR", N), ("OFF", "FOY", N)),
                    warnings=(
                        "Acoustic conflict: Family room noise may disrupt video calls",
                        "Privacy concern: Work visible to household members",
                    ),
                ),
                DecisionOption(
                    id="off-primary",
                    label="Near Primary Suite",
                    description="Maximum privacy and quiet for early or late work.",
                    matrix_patches=_patches(("OFF", "PRIHALL", N), ("OFF", "FOY", B)),
                    warnings=(
                        "Circulation conflict: Clients would need to enter private zone",
                        "Separation concern: May feel isolated from family",
                    ),
                ),
            ),
        ))

        self.register(AdjacencyDecision(
            id="dining-formality",
            title="Dining Room Relationship",
            question="How formal should your dining experience be?",
            primary_space="DR",
            applicable_tiers=ALL_TIERS,
            priority=6,
            options=(
                DecisionOption(
                    id="dr-formal",
                    label="Formal Separation",
                    description="Dedicated dining room near entry with butler pantry service.",
                    matrix_patches=_patches(("DR", "FOY", A), ("DR", "GR", N)),
                    enables_bridges=("butlerPantry",),
                ),
                DecisionOption(
                    id="dr-great-room",
                    label="Part of Great Room",
                    description="Open to living areas. Flexible space for various occasions.",
                    is_default=True,
                ),
                DecisionOption(
                    id="dr-kitchen",
                    label="Kitchen Adjacent",
                    description="Direct kitchen connection. Chef's table experience.",
                    matrix_patches=_patches(("DR", "KIT", A)),
                    warnings=(
                        "Formality reduced: Kitchen activities visible during meals",
                        "Noise: Cooking sounds during dinner",
                    ),
                    removes_bridges=("butlerPantry",),
                ),
            ),
        ))

        self.register(AdjacencyDecision(
            id="wine-access",
            title="Wine Storage Access",
            question="How should your wine storage be accessed?",
            primary_space="WINE",
            applicable_tiers=FROM_10K,
            priority=9,
            options=(
                DecisionOption(
                    id="wine-dining",
                    label="Near Dining Room",
                    description="Formal wine service with display cellar visible from dining.",
                    is_default=True,
                ),
                DecisionOption(
                    id="wine-kitchen",
                    label="Kitchen Adjacent",
                    description="Casual access while cooking.",
                    matrix_patches=_patches(("WINE", "KIT", N), ("WINE", "DR", N)),
                    warnings=("Temperature: Kitchen heat may affect wine storage",),
                ),
                DecisionOption(
                    id="wine-scullery",
                    label="Service Access",
                    description="Staff retrieves wine unseen from back-of-house staging.",
                    matrix_patches=_patches(("WINE", "SCUL", A), ("WINE", "DR", N)),
                ),
            ),
        ))

        self.register(AdjacencyDecision(
            id="salon-program",
            title="Second Formal Living Room",
            question="How should the salon relate to the entertaining spine?",
            primary_space="SAL",
            applicable_tiers=FROM_15K,
            priority=11,
            options=(
                DecisionOption(
                    id="sal-formal",
                    label="Formal Reception Room",
                    description="Salon opens off the great room for large receptions.",
                    is_default=True,
                ),
                DecisionOption(
                    id="sal-terrace",
                    label="Garden Salon",
                    description="Salon opens to the terrace for indoor-outdoor entertaining.",
                    matrix_patches=_patches(("SAL", "TERR", A), ("SAL", "GR", N)),
                ),
                DecisionOption(
                    id="sal-retreat",
                    label="Quiet Retreat",
                    description="Salon set apart as a reading and conversation room.",
                    matrix_patches=_patches(("SAL", "GR", B), ("SAL", "FOY", B)),
                    warnings=("Flow: Salon no longer extends the great room for large events",),
                ),
            ),
        ))

    # -------------------------------------------------------------------------
    # Family + entertainment
    # -------------------------------------------------------------------------

    def _load_family_decisions(self) -> None:
        self.register(AdjacencyDecision(
            id="kitchen-family",
            title="Kitchen & Family Room Connection",
            question="How should your kitchen relate to family living spaces?",
            primary_space="KIT",
            applicable_tiers=ALL_TIERS,
            priority=2,
            options=(
                DecisionOption(
                    id="kit-open",
                    label="Open to Family Room",
                    description="Modern open plan. Cook while engaging with family.",
                    is_default=True,
                ),
                DecisionOption(
                    id="kit-semi",
                    label="Connected but Defined",
                    description="Island or half-wall defines spaces while maintaining openness.",
                    matrix_patches=_patches(("KIT", "FR", N)),
                ),
                DecisionOption(
                    id="kit-separate",
                    label="Separate Kitchen",
                    description="Traditional separation. Staff can work unseen.",
                    matrix_patches=_patches(("KIT", "FR", B)),
                    warnings=(
                        "Lifestyle impact: May feel disconnected from family activities",
                        "Supervision concern: Cannot see children from kitchen",
                    ),
                    enables_bridges=("butlerPantry",),
                ),
            ),
        ))

        self.register(AdjacencyDecision(
            id="media-acoustics",
            title="Media Room Placement",
            question="How should your media room relate to sleeping areas?",
            primary_space="MEDIA",
            applicable_tiers=FROM_10K,
            priority=3,
            options=(
                DecisionOption(
                    id="media-family-zone",
                    label="Part of Family Zone",
                    description="Easy access from family room. Shared use by all household members.",
                    is_default=True,
                ),
                DecisionOption(
                    id="media-isolated",
                    label="Acoustically Isolated",
                    description="Sound lock vestibule between media and sleeping areas.",
                    matrix_patches=_patches(("MEDIA", "FR", B)),
                    sf_impact=60,
                    enables_bridges=("soundLock",),
                ),
                DecisionOption(
                    id="media-basement",
                    label="Basement Location",
                    description="Natural sound isolation on a dedicated entertainment level.",
                    matrix_patches=_patches(("MEDIA", "STAIR", N), ("MEDIA", "FR", S)),
                    warnings=(
                        "Accessibility: Requires stairs for every use",
                        "Integration: Separated from main living flow",
                    ),
                ),
            ),
        ))

        self.register(AdjacencyDecision(
            id="wellness-placement",
            title="Wellness Zone Placement",
            question="Where should your gym and spa facilities connect?",
            primary_space="GYM",
            applicable_tiers=FROM_15K,
            priority=7,
            options=(
                DecisionOption(
                    id="wellness-primary",
                    label="Near Primary Suite",
                    description="Morning workout without traversing house.",
                    matrix_patches=_patches(("GYM", "PRIHALL", N)),
                    warnings=("Separation: Wellness traffic in private zone",),
                ),
                DecisionOption(
                    id="wellness-pool",
                    label="Pool-Integrated Zone",
                    description="Gym, spa and pool as unified wellness destination.",
                    is_default=True,
                    enables_bridges=("wetFeetIntercept",),
                ),
                DecisionOption(
                    id="wellness-family",
                    label="Family Zone Adjacent",
                    description="Easy access for all family members.",
                    matrix_patches=_patches(("GYM", "FR", A), ("GYM", "POOL", N)),
                    removes_bridges=("wetFeetIntercept",),
                ),
            ),
        ))

    # -------------------------------------------------------------------------
    # Private zones
    # -------------------------------------------------------------------------

    def _load_private_decisions(self) -> None:
        self.register(AdjacencyDecision(
            id="guest-independence",
            title="Guest Suite Relationship",
            question="How independent should your guest suite be?",
            primary_space="GST1",
            applicable_tiers=ALL_TIERS,
            priority=4,
            options=(
                DecisionOption(
                    id="guest-independent",
                    label="Fully Independent",
                    description="Separate entry option and own kitchenette for extended stays.",
                    matrix_patches=_patches(("GST1", "FOY", S), ("GST1", "FR", B)),
                    sf_impact=150,
                    enables_bridges=("guestAutonomy",),
                ),
                DecisionOption(
                    id="guest-connected",
                    label="Connected to Family Areas",
                    description="Part of main house flow. Guests feel included in family life.",
                    is_default=True,
                ),
                DecisionOption(
                    id="guest-near-primary",
                    label="Near Primary Suite",
                    description="Close proximity for elderly parents or young guests needing attention.",
                    matrix_patches=_patches(("GST1", "PRIHALL", N), ("GST1", "PRI", N)),
                    warnings=(
                        "Privacy impact: Guest activity within private zone",
                        "Noise concern: Less separation from your sleeping area",
                    ),
                    removes_bridges=("guestAutonomy",),
                ),
            ),
        ))

        self.register(AdjacencyDecision(
            id="primary-privacy",
            title="Primary Suite Privacy",
            question="How separated should your primary suite be from household activity?",
            primary_space="PRI",
            applicable_tiers=ALL_TIERS,
            priority=5,
            options=(
                DecisionOption(
                    id="pri-separate-level",
                    label="Separate Level",
                    description="Primary suite on its own floor.",
                    is_default=True,
                ),
                DecisionOption(
                    id="pri-wing",
                    label="Dedicated Wing",
                    description="Same level but separate wing.",
                    matrix_patches=_patches(("PRI", "FR", B), ("PRI", "STAIR", B)),
                ),
                DecisionOption(
                    id="pri-connected",
                    label="Connected to Family",
                    description="Close to children's rooms for young families.",
                    matrix_patches=_patches(("PRI", "FR", N)),
                    warnings=(
                        "Privacy reduced: More household traffic near suite",
                        "Acoustic impact: Less buffer from family activities",
                    ),
                ),
            ),
        ))

        self.register(AdjacencyDecision(
            id="secondary-clustering",
            title="Secondary Bedroom Arrangement",
            question="How should secondary bedrooms be organized?",
            primary_space="KID1",
            applicable_tiers=ALL_TIERS,
            priority=10,
            options=(
                DecisionOption(
                    id="sec-clustered",
                    label="Clustered Together",
                    description="All secondary bedrooms in one wing.",
                    is_default=True,
                ),
                DecisionOption(
                    id="sec-distributed",
                    label="Distributed for Privacy",
                    description="Bedrooms separated so each feels like a private suite.",
                    matrix_patches=_patches(("KID1", "KID2", B)),
                    warnings=(
                        "Supervision: Harder to monitor young children",
                        "Circulation: More hallway required",
                    ),
                ),
                DecisionOption(
                    id="sec-split-level",
                    label="Split by Level",
                    description="Some secondary rooms on a different floor.",
                    matrix_patches=_patches(("KID1", "KID2", S), ("KID1", "PRIHALL", S)),
                ),
            ),
        ))

    # -------------------------------------------------------------------------
    # Service
    # -------------------------------------------------------------------------

    def _load_service_decisions(self) -> None:
        self.register(AdjacencyDecision(
            id="mudroom-flow",
            title="Mudroom & Service Entry",
            question="How should your service entry connect to the house?",
            primary_space="MUD",
            applicable_tiers=FROM_10K,
            priority=8,
            options=(
                DecisionOption(
                    id="mud-kitchen",
                    label="Direct to Kitchen",
                    description="Groceries straight to kitchen.",
                    matrix_patches=_patches(("MUD", "KIT", A)),
                    warnings=("Cleanliness: Outdoor elements enter near food prep",),
                    removes_bridges=("opsCore",),
                ),
                DecisionOption(
                    id="mud-scullery",
                    label="Through Scullery",
                    description="Buffer zone between garage and kitchen.",
                    is_default=True,
                ),
                DecisionOption(
                    id="mud-ops",
                    label="Operations Core Hub",
                    description="Dedicated service zone for staff and package staging.",
                    matrix_patches=_patches(("MUD", "OPS", A), ("MUD", "SCUL", N)),
                    sf_impact=150,
                    enables_bridges=("opsCore",),
                ),
            ),
        ))


# Singleton instance
DECISION_CATALOG = DecisionCatalog()


def get_decisions_for_preset(
    tier_id,
    catalog: Optional[DecisionCatalog] = None,
) -> List[AdjacencyDecision]:
    """Decisions applicable to a tier, in priority order."""
    return (catalog or DECISION_CATALOG).for_tier(tier_id)
