"""
Bridge evaluation.

A bridge is present when the tier requires it and the resolved configuration
provides it: the benchmark's own bridges, less those a chosen option takes
away, plus those an option enables. Required but not present means missing.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Sequence

from ..core.models import Bridge, Preset

BRIDGES: Sequence[Bridge] = (
    Bridge("butlerPantry", "Butler Pantry", "Service staging between kitchen and dining"),
    Bridge("guestAutonomy", "Guest Autonomy", "Independent guest suite access"),
    Bridge("soundLock", "Sound Lock", "Acoustic buffer for media spaces"),
    Bridge("wetFeetIntercept", "Wet-Feet Intercept", "Pool to house transition zone"),
    Bridge("opsCore", "Ops Core", "Service entry and operations hub"),
)


@dataclass(frozen=True)
class BridgeStatus:
    bridge_id: str
    name: str
    required: bool
    present: bool

    @property
    def missing(self) -> bool:
        return self.required and not self.present

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bridge_id": self.bridge_id,
            "name": self.name,
            "required": self.required,
            "present": self.present,
            "missing": self.missing,
        }


def evaluate_bridges(
    preset: Preset,
    available: Iterable[str],
    bridges: Optional[Sequence[Bridge]] = None,
) -> List[BridgeStatus]:
    """One status per bridge, in bridge order."""
    available_ids: FrozenSet[str] = frozenset(available)
    statuses = []
    for bridge in (BRIDGES if bridges is None else bridges):
        required = preset.requires_bridge(bridge.id)
        statuses.append(BridgeStatus(
            bridge_id=bridge.id,
            name=bridge.name,
            required=required,
            present=required and bridge.id in available_ids,
        ))
    return statuses
