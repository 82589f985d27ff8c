"""
Space registry.

Master definition of zones and spaces. Each space is defined once with its
target area at every tier where it exists; a tier's space list is the
registry filtered to the spaces present at that tier.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..core.enums import SizeTier
from ..core.models import Space


@dataclass(frozen=True)
class Zone:
    """Program zone grouping related spaces."""
    code: str
    name: str
    order: int
    description: str = ""


ZONES: Tuple[Zone, ...] = (
    Zone("Z1_APB", "Arrival + Public", 10, "Entry, formal entertaining, office"),
    Zone("Z2_FAM", "Family + Kitchen", 20, "Daily living hub, kitchen, breakfast"),
    Zone("Z3_ENT", "Entertainment", 30, "Media, theater and recreation"),
    Zone("Z4_WEL", "Wellness", 40, "Gym, spa and pool support"),
    Zone("Z5_PRI", "Primary Suite", 50, "Primary bedroom, bath, closets, retreat"),
    Zone("Z6_GST", "Guest + Secondary", 60, "Guest suites, secondary bedrooms, staff"),
    Zone("Z7_SVC", "Service + BOH", 70, "Mudroom, laundry, mechanical, garage"),
    Zone("Z8_OUT", "Outdoor", 80, "Terrace and pool (not conditioned)"),
    Zone("Z9_CIR", "Circulation", 90, "Stair and vertical distribution"),
)

_ZONE_ORDER = {z.code: z.order for z in ZONES}


@dataclass(frozen=True)
class SpaceDefinition:
    """Registry entry: one space with per-tier target areas."""

    code: str
    name: str
    zone: str
    default_level: int
    base_sf: Dict[str, Optional[float]] = field(default_factory=dict)
    rationale: str = ""

    def exists_at(self, tier: SizeTier) -> bool:
        return self.base_sf.get(tier.value) is not None

    def to_space(self, tier: SizeTier) -> Space:
        return Space(
            code=self.code,
            name=self.name,
            zone=self.zone,
            level=self.default_level,
            target_area=float(self.base_sf[tier.value]),
            rationale=self.rationale or None,
        )


def _sf(t5k, t10k, t15k, t20k) -> Dict[str, Optional[float]]:
    return {"5k": t5k, "10k": t10k, "15k": t15k, "20k": t20k}


SPACE_REGISTRY: Tuple[SpaceDefinition, ...] = (
    # Zone 1: Arrival + Public
    SpaceDefinition("FOY", "Foyer / Gallery", "Z1_APB", 1, _sf(220, 350, 420, 500),
                    "Sets arrival sequence; controls privacy"),
    SpaceDefinition("PWD", "Powder Room", "Z1_APB", 1, _sf(40, 60, 80, 100)),
    SpaceDefinition("OFF", "Private Office", "Z1_APB", 1, _sf(150, 200, 280, 350),
                    "Quiet spur for meetings without entering family areas"),
    SpaceDefinition("GR", "Great Room", "Z1_APB", 1, _sf(400, 500, 600, 750),
                    "Primary showcase room"),
    SpaceDefinition("DR", "Dining Room", "Z1_APB", 1, _sf(220, 300, 400, 500),
                    "Seats 10-12 with service access"),
    SpaceDefinition("WINE", "Wine Room", "Z1_APB", 1, _sf(None, 100, 150, 200)),
    SpaceDefinition("SAL", "Salon / Second Living", "Z1_APB", 1, _sf(None, None, 350, 450),
                    "Second formal living room"),
    SpaceDefinition("LIB", "Library", "Z1_APB", 1, _sf(None, 200, 280, 350)),

    # Zone 2: Family + Kitchen
    SpaceDefinition("FR", "Family Room", "Z2_FAM", 1, _sf(380, 500, 650, 800),
                    "Daily distributor for the household"),
    SpaceDefinition("KIT", "Kitchen", "Z2_FAM", 1, _sf(280, 350, 450, 550),
                    "Principal show kitchen"),
    SpaceDefinition("BKF", "Breakfast Nook", "Z2_FAM", 1, _sf(100, 120, 180, 220)),
    SpaceDefinition("SCUL", "Scullery / Pantry", "Z2_FAM", 1, _sf(100, 180, 250, 320),
                    "Back-of-house prep and cleanup"),
    SpaceDefinition("CHEF", "Chef's Kitchen (service)", "Z2_FAM", 1, _sf(None, 150, 200, 280)),

    # Zone 3: Entertainment
    SpaceDefinition("MEDIA", "Media Room", "Z3_ENT", 1, _sf(None, 250, 350, 450),
                    "Close to family but acoustically controlled"),
    SpaceDefinition("THR", "Theater", "Z3_ENT", 1, _sf(None, None, None, 550)),

    # Zone 4: Wellness
    SpaceDefinition("GYM", "Gym", "Z4_WEL", 1, _sf(None, 250, 350, 450)),
    SpaceDefinition("SPA", "Spa", "Z4_WEL", 1, _sf(None, None, 250, 350)),
    SpaceDefinition("POOLSUP", "Pool Support", "Z4_WEL", 1, _sf(None, 100, 150, 200),
                    "Keeps wet traffic out of main house"),

    # Zone 5: Primary Suite
    SpaceDefinition("PRIHALL", "Primary Vestibule", "Z5_PRI", 2, _sf(60, 80, 100, 120),
                    "Privacy threshold for the suite"),
    SpaceDefinition("PRI", "Primary Bedroom", "Z5_PRI", 2, _sf(300, 350, 500, 650)),
    SpaceDefinition("PRIBATH", "Primary Bath", "Z5_PRI", 2, _sf(200, 250, 350, 450)),
    SpaceDefinition("PRICL", "Primary Closets", "Z5_PRI", 2, _sf(160, 200, 300, 400)),
    SpaceDefinition("PRILNG", "Primary Lounge", "Z5_PRI", 2, _sf(None, None, 200, 280)),

    # Zone 6: Guest + Secondary
    SpaceDefinition("GST1", "Guest Suite 1", "Z6_GST", 2, _sf(300, 400, 450, 500)),
    SpaceDefinition("GST2", "Guest Suite 2", "Z6_GST", 2, _sf(None, 400, 450, 500)),
    SpaceDefinition("GST3", "Guest Suite 3", "Z6_GST", 2, _sf(None, None, 450, 500)),
    SpaceDefinition("KID1", "Secondary Bedroom 1", "Z6_GST", 2, _sf(250, 350, 400, 450)),
    SpaceDefinition("KID2", "Secondary Bedroom 2", "Z6_GST", 2, _sf(250, 350, 400, 450)),
    SpaceDefinition("STF", "Staff Suite", "Z6_GST", 1, _sf(None, None, 350, 400)),

    # Zone 7: Service + BOH
    SpaceDefinition("MUD", "Mudroom", "Z7_SVC", 1, _sf(100, 150, 200, 280),
                    "Controls clutter; connects to scullery"),
    SpaceDefinition("LND", "Laundry", "Z7_SVC", 1, _sf(90, 140, 180, 250)),
    SpaceDefinition("MEP", "Mechanical / AV / IT", "Z7_SVC", 1, _sf(150, 300, 400, 550)),
    SpaceDefinition("OPS", "Operations Core", "Z7_SVC", 1, _sf(None, 120, 180, 250),
                    "Package staging and service hub"),
    SpaceDefinition("GAR", "Garage", "Z7_SVC", 1, _sf(500, 600, 900, 1200)),

    # Zone 8: Outdoor (not counted in conditioned area)
    SpaceDefinition("TERR", "Terrace", "Z8_OUT", 1, _sf(0, 0, 0, 0)),
    SpaceDefinition("POOL", "Pool + Deck", "Z8_OUT", 1, _sf(None, 0, 0, 0)),

    # Circulation
    SpaceDefinition("STAIR", "Main Stair", "Z9_CIR", 1, _sf(180, 300, 400, 500)),
)


def get_space_definition(code: str) -> Optional[SpaceDefinition]:
    for definition in SPACE_REGISTRY:
        if definition.code == code:
            return definition
    return None


def spaces_for_tier(tier: SizeTier) -> List[Space]:
    """Spaces present at a tier, ordered by zone then registry order."""
    present = [d for d in SPACE_REGISTRY if d.exists_at(tier)]
    present.sort(key=lambda d: _ZONE_ORDER.get(d.zone, 999))  # stable sort keeps registry order
    return [d.to_space(tier) for d in present]
