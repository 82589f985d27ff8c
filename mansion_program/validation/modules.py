"""
Validation module library.

Eight functional modules, each owning the spaces whose deviations count
against it and a five-item checklist.
"""

from __future__ import annotations
from typing import Optional, Tuple

from ..core.models import ChecklistItem, ValidationModule


def _items(*rows: Tuple[str, str, str]) -> Tuple[ChecklistItem, ...]:
    return tuple(ChecklistItem(item_id, name, description) for item_id, name, description in rows)


MODULE_LIBRARY: Tuple[ValidationModule, ...] = (
    ValidationModule(
        id="module-01",
        number=1,
        name="Kitchen Rules Engine",
        short_name="Kitchen",
        space_codes=frozenset({"KIT", "CHEF", "SCUL", "BKF", "DR"}),
        checklist_items=_items(
            ("k1", "Principal-level show kitchen present", "Kitchen not hidden or basement-only"),
            ("k2", "Guest route avoids work aisle", "Guests reach dining/terrace without crossing work zone"),
            ("k3", "Scullery/prep kitchen connected", "Back-of-house support kitchen adjacent"),
            ("k4", "Service entry separate", "Deliveries don't pass through front of house"),
            ("k5", "Storage schedule complete", "Dry, cold, equipment storage documented"),
        ),
    ),
    ValidationModule(
        id="module-02",
        number=2,
        name="Entertaining Spine",
        short_name="Entertaining",
        space_codes=frozenset({"GR", "DR", "WINE", "FOY", "TERR", "SAL"}),
        checklist_items=_items(
            ("e1", "Clear arrival sequence", "Entry creates sense of procession"),
            ("e2", "Great room terrace connection", "Seamless indoor-outdoor flow"),
            ("e3", "Dining positioned correctly", "Serves both formal and casual entertaining"),
            ("e4", "Powder room strategically placed", "Accessible but discrete from social zones"),
            ("e5", "Lane separation maintained", "Guest, family, and service lanes distinct"),
        ),
    ),
    ValidationModule(
        id="module-03",
        number=3,
        name="Primary Suite Ecosystem",
        short_name="Primary Suite",
        space_codes=frozenset({"PRI", "PRIHALL", "PRIBATH", "PRICL", "PRILNG"}),
        checklist_items=_items(
            ("p1", "Privacy threshold defined", "Clear boundary between private and semi-private"),
            ("p2", "Two-person bath operation", "Both can prepare simultaneously"),
            ("p3", "His/hers closet separation", "Adequate storage for both"),
            ("p4", "Morning coffee route exists", "Can reach kitchen/coffee without full dress"),
            ("p5", "Service access without suite entry", "Housekeeping doesn't cross bedroom"),
        ),
    ),
    ValidationModule(
        id="module-04",
        number=4,
        name="Guest Wing Logic",
        short_name="Guest Wing",
        space_codes=frozenset({"GST1", "GST2", "GST3"}),
        checklist_items=_items(
            ("g1", "Guest suite mix defined", "Number and type of guest accommodations"),
            ("g2", "Autonomy node present", "Guests can operate independently"),
            ("g3", "Guest doesn't cross primary threshold", "Routes don't invade family zone"),
            ("g4", "Multi-family accommodation", "Can host extended family stays"),
            ("g5", "Buffer zones confirmed", "Adequate separation from primary suite"),
        ),
    ),
    ValidationModule(
        id="module-05",
        number=5,
        name="Media & Acoustic Control",
        short_name="Media/Acoustic",
        space_codes=frozenset({"MEDIA", "THR", "FR"}),
        checklist_items=_items(
            ("m1", "Zone 3 functions isolated", "No shared walls with bedrooms"),
            ("m2", "Sound lock vestibule present", "Acoustic buffer at media room entry"),
            ("m3", "Late-night route defined", "Can use media without disturbing sleepers"),
            ("m4", "AV equipment access planned", "Service can access without crossing living"),
            ("m5", "Acoustic treatment noted", "Wall/ceiling construction requirements flagged"),
        ),
    ),
    ValidationModule(
        id="module-06",
        number=6,
        name="Service Spine",
        short_name="Service",
        space_codes=frozenset({"SCUL", "MUD", "LND", "MEP", "GAR"}),
        checklist_items=_items(
            ("s1", "Receiving dock/area defined", "Deliveries have dedicated entry"),
            ("s2", "Laundry positioned correctly", "Near bedrooms, accessible to staff"),
            ("s3", "Storage hierarchy complete", "Bulk, linen, equipment separated"),
            ("s4", "Refuse route clear", "Trash never crosses front of house"),
            ("s5", "Housekeeping closets distributed", "Supplies accessible across zones"),
        ),
    ),
    ValidationModule(
        id="module-07",
        number=7,
        name="Wellness Program",
        short_name="Wellness",
        space_codes=frozenset({"GYM", "SPA", "POOL", "POOLSUP"}),
        checklist_items=_items(
            ("w1", "Training loop complete", "Gym flows to recovery spaces"),
            ("w2", "Wet-feet intercept present", "Pool/spa users don't track water"),
            ("w3", "Humidity zones isolated", "Steam/sauna don't affect adjacent"),
            ("w4", "Vibration considerations noted", "Gym equipment isolated from living"),
            ("w5", "Outdoor wellness connection", "Access to pool/terrace from wellness"),
        ),
    ),
    ValidationModule(
        id="module-08",
        number=8,
        name="Staff Layer",
        short_name="Staff",
        space_codes=frozenset({"STF", "OPS"}),
        checklist_items=_items(
            ("st1", "Ops core location defined", "Staff base of operations positioned"),
            ("st2", "Staff circulation overlay", "Staff routes don't cross family zones"),
            ("st3", "Security sight lines confirmed", "Monitoring positions functional"),
            ("st4", "Vendor access controlled", "Service providers have clear routes"),
            ("st5", "Event staging possible", "Can scale up for large gatherings"),
        ),
    ),
)


def get_module(module_id: str) -> Optional[ValidationModule]:
    for module in MODULE_LIBRARY:
        if module.id == module_id:
            return module
    return None
