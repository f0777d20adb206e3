# File: src/floorplan_drafter/layout_validation/validation_rules.py

"""Rule tables and geometric predicates for layout validation.

All distances are in feet, all areas in square feet.
"""

from typing import Dict, FrozenSet, Tuple

from ..layout.layout_types import RoomRecord, RoomType


# =============================================================================
# Tolerances and Limits
# =============================================================================

OVERLAP_TOLERANCE_FT = 0.25
ENVELOPE_TOLERANCE_FT = 0.5
ADJACENCY_TOLERANCE_FT = 0.5
DOOR_BBOX_TOLERANCE_FT = 0.5
OPENING_TOLERANCE_FT = 1e-6

ASPECT_SLACK = 0.1
DEFAULT_MAX_ASPECT = 2.0

AREA_RATIO_LIMIT = 1.15
FOYER_MAX_AREA_SF = 80.0
HALLWAY_MAX_FRACTION = 0.10


# =============================================================================
# Rule Tables
# =============================================================================

# Long side over short side, before ASPECT_SLACK
MAX_ASPECT: Dict[RoomType, float] = {
    RoomType.LIVING: 1.3,
    RoomType.DINING: 1.3,
    RoomType.KITCHEN: 1.4,
    RoomType.BEDROOM: 1.3,
    RoomType.BATHROOM: 1.8,
    RoomType.ENSUITE: 1.5,
    RoomType.FAMILY: 1.4,
    RoomType.OFFICE: 1.3,
    RoomType.ENTRY: 1.5,
    RoomType.MUDROOM: 1.5,
    RoomType.LAUNDRY: 1.5,
    RoomType.PANTRY: 1.5,
    RoomType.GARAGE: 2.0,
    RoomType.CLOSET: 4.0,
    RoomType.HALLWAY: 99.0,
    RoomType.STAIRWELL: 99.0,
    RoomType.UTILITY: 2.0,
    RoomType.OTHER: DEFAULT_MAX_ASPECT,
}

# Room type pairs that must not share a wall. Kitchen/bedroom is meant for the
# primary bedroom but applies to every bedroom.
FORBIDDEN_ADJACENCY: Tuple[Tuple[RoomType, RoomType], ...] = (
    (RoomType.BATHROOM, RoomType.KITCHEN),
    (RoomType.ENSUITE, RoomType.KITCHEN),
    (RoomType.GARAGE, RoomType.BEDROOM),
    (RoomType.GARAGE, RoomType.LIVING),
    (RoomType.KITCHEN, RoomType.BEDROOM),
)

DOORLESS_ROOM_TYPES: FrozenSet[RoomType] = frozenset({RoomType.CLOSET, RoomType.PANTRY})


def max_aspect_for(room_type: RoomType) -> float:
    return MAX_ASPECT.get(room_type, DEFAULT_MAX_ASPECT)


# =============================================================================
# Predicates
# =============================================================================


def _overlap_1d(a0: float, a1: float, b0: float, b1: float) -> float:
    """Length of the intersection of [a0, a1] and [b0, b1]; negative if apart."""
    return min(a1, b1) - max(a0, b0)


def rooms_overlap(a: RoomRecord, b: RoomRecord, tolerance: float = OVERLAP_TOLERANCE_FT) -> bool:
    """True when two rooms share interior area beyond the tolerance on both axes."""
    overlap_x = _overlap_1d(a.x, a.max_x, b.x, b.max_x)
    overlap_y = _overlap_1d(a.y, a.max_y, b.y, b.max_y)
    return overlap_x > tolerance and overlap_y > tolerance


def rooms_adjacent(a: RoomRecord, b: RoomRecord, tolerance: float = ADJACENCY_TOLERANCE_FT) -> bool:
    """True when two rooms share a collinear edge with more than `tolerance` overlap."""
    share_vertical = (
        abs(a.max_x - b.x) < tolerance or abs(b.max_x - a.x) < tolerance
    ) and _overlap_1d(a.y, a.max_y, b.y, b.max_y) > tolerance

    share_horizontal = (
        abs(a.max_y - b.y) < tolerance or abs(b.max_y - a.y) < tolerance
    ) and _overlap_1d(a.x, a.max_x, b.x, b.max_x) > tolerance

    return share_vertical or share_horizontal


def room_outside_envelope(
    room: RoomRecord,
    width: float,
    depth: float,
    tolerance: float = ENVELOPE_TOLERANCE_FT,
) -> bool:
    return (
        room.x < -tolerance
        or room.y < -tolerance
        or room.max_x > width + tolerance
        or room.max_y > depth + tolerance
    )
