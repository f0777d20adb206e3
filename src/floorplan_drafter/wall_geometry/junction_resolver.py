# File: src/floorplan_drafter/wall_geometry/junction_resolver.py

"""Wall junction classification and corner cleanup.

Builds an index of wall endpoints and reshapes the corners of the walls that
meet there:
1. Snap every centreline endpoint into a coarse bucket (snap-bucket step),
   joining neighbouring buckets whose endpoints lie under one bucket apart
2. Classify each bucket by how many walls meet and their orientations
3. L-corners (2 perpendicular walls): miter both footprints along the
   diagonal through the outer and inner corners
4. T-junctions (2 collinear through walls + 1 perpendicular butting wall):
   trim the butting wall flush with the through wall's near face

Free ends, inline continuations, and buckets of four or more walls are left
as they are. Every operation touches only the two corners at the wall end
inside the bucket, so buckets can be processed in any order.

resolve_junctions() never mutates its input; it works on arena.copy().
"""

import logging
import math
from collections import OrderedDict
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple

from ..config.drawing import get_drawing_param
from .wall_types import Orientation, Point, WallArena, WallSegment

logger = logging.getLogger(__name__)


# Endpoint snap-bucket size in feet, equal to the duplicate-wall tolerance.
# Neighbouring buckets are joined when their endpoints lie closer than one
# bucket size, so endpoints under half a foot apart always meet.
JUNCTION_BUCKET_FT = get_drawing_param("junction_bucket_ft")


# =============================================================================
# Types
# =============================================================================


class JunctionType(Enum):
    """Classification of one endpoint bucket."""

    FREE_END = "free_end"
    """One wall end, nothing attached."""

    L_CORNER = "l_corner"
    """Two walls of differing orientation."""

    T_JUNCTION = "t_junction"
    """Two collinear through walls and one perpendicular butting wall."""

    INLINE = "inline"
    """Two walls of the same orientation end to end."""

    UNRESOLVED = "unresolved"
    """Any other combination (three same-orientation walls, four or more walls)."""


@dataclass
class WallEnd:
    """One wall's participation in a junction.

    Attributes:
        wall_id: Wall identifier.
        end: Which record end is at the junction ("start" or "end").
    """

    wall_id: str
    end: str


@dataclass
class JunctionBucket:
    """All wall ends sharing one snap-bucket key."""

    key: Tuple[int, int]
    ends: List[WallEnd] = field(default_factory=list)
    junction_type: JunctionType = JunctionType.FREE_END


@dataclass
class JunctionSummary:
    """Counts per junction type, for logging and API responses."""

    counts: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, int]:
        result = {jt.value: self.counts.get(jt.value, 0) for jt in JunctionType}
        result["total"] = sum(self.counts.values())
        return result


# =============================================================================
# Endpoint Index
# =============================================================================


def endpoint_bucket_key(point: Point, bucket_size: float) -> Tuple[int, int]:
    """Snap a point to its bucket on a grid of `bucket_size` drawing units.

    Uses round-half-up so that a coordinate never flips bucket depending on
    the parity of its neighbour.
    """
    return (
        int(math.floor(point.x / bucket_size + 0.5)),
        int(math.floor(point.y / bucket_size + 0.5)),
    )


def _find(parent: Dict[Tuple[int, int], Tuple[int, int]], key: Tuple[int, int]) -> Tuple[int, int]:
    while parent[key] != key:
        parent[key] = parent[parent[key]]
        key = parent[key]
    return key


def _merge_neighbour_buckets(
    points: "OrderedDict[Tuple[int, int], List[Point]]",
    tolerance: float,
) -> Dict[Tuple[int, int], Tuple[int, int]]:
    """Map each bucket key to the key of the cluster it belongs to.

    Round-half-up alone splits two endpoints that sit a hair apart on either
    side of a bucket boundary, so adjacent buckets are joined whenever they
    hold endpoints closer than `tolerance` on both axes. The cluster keeps the
    key of its earliest bucket.
    """
    order = {key: i for i, key in enumerate(points)}
    parent = {key: key for key in points}

    for key, members in points.items():
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                other = (key[0] + dx, key[1] + dy)
                if other == key or other not in points:
                    continue
                close = any(
                    abs(p.x - q.x) < tolerance and abs(p.y - q.y) < tolerance
                    for p in members
                    for q in points[other]
                )
                if not close:
                    continue
                root_a, root_b = _find(parent, key), _find(parent, other)
                if root_a != root_b:
                    first, second = sorted((root_a, root_b), key=order.get)
                    parent[second] = first

    return {key: _find(parent, key) for key in points}


def build_endpoint_index(arena: WallArena) -> "OrderedDict[Tuple[int, int], JunctionBucket]":
    """Group every wall centreline endpoint by snap-bucket key.

    Endpoints in neighbouring buckets that lie within one bucket size of each
    other are grouped together.
    """
    bucket_size = JUNCTION_BUCKET_FT * arena.scale
    points: "OrderedDict[Tuple[int, int], List[Point]]" = OrderedDict()
    ends: List[Tuple[Tuple[int, int], WallEnd]] = []

    for segment in arena:
        for end in ("start", "end"):
            point = segment.endpoint(end)
            key = endpoint_bucket_key(point, bucket_size)
            points.setdefault(key, []).append(point)
            ends.append((key, WallEnd(wall_id=segment.wall_id, end=end)))

    cluster_of = _merge_neighbour_buckets(points, bucket_size)
    index: "OrderedDict[Tuple[int, int], JunctionBucket]" = OrderedDict()
    for key, wall_end in ends:
        cluster = cluster_of[key]
        bucket = index.get(cluster)
        if bucket is None:
            bucket = JunctionBucket(key=cluster)
            index[cluster] = bucket
        bucket.ends.append(wall_end)

    for bucket in index.values():
        bucket.junction_type = classify_bucket(bucket, arena)

    return index


def classify_bucket(bucket: JunctionBucket, arena: WallArena) -> JunctionType:
    """Classify a bucket by wall count and orientation mix."""
    orientations = [arena.get(e.wall_id).orientation for e in bucket.ends]
    count = len(orientations)

    if count == 1:
        return JunctionType.FREE_END
    if count == 2:
        if orientations[0] != orientations[1]:
            return JunctionType.L_CORNER
        return JunctionType.INLINE
    if count == 3:
        horizontal = orientations.count(Orientation.HORIZONTAL)
        if horizontal in (1, 2):
            return JunctionType.T_JUNCTION
    return JunctionType.UNRESOLVED


def classify_junctions(arena: WallArena) -> JunctionSummary:
    """Count junctions of each type in an arena."""
    summary = JunctionSummary()
    for bucket in build_endpoint_index(arena).values():
        key = bucket.junction_type.value
        summary.counts[key] = summary.counts.get(key, 0) + 1
    return summary


# =============================================================================
# L-Corner
# =============================================================================


def _direction_away(segment: WallSegment, end: str) -> float:
    """+1 or -1: direction along the running axis from `end` into the wall."""
    near = segment.endpoint(end)
    far = segment.far_endpoint(end)
    if segment.is_horizontal:
        return 1.0 if far.x > near.x else -1.0
    return 1.0 if far.y > near.y else -1.0


def miter_l_corner(
    seg_a: WallSegment,
    end_a: str,
    seg_b: WallSegment,
    end_b: str,
) -> None:
    """Miter two perpendicular walls meeting at one end each (in place).

    On each wall the corner on the outer face moves past the joint by the
    other wall's half-thickness and the corner on the inner face pulls back
    by the same amount. Both footprints then share the outer corner and the
    inner corner, meeting along the miter diagonal with no gap or overlap.

    Args:
        seg_a, seg_b: The two walls; one horizontal, one vertical, any order.
        end_a, end_b: Which record end of each wall sits at the joint.
    """
    if seg_a.is_horizontal:
        h_seg, h_end, v_seg, v_end = seg_a, end_a, seg_b, end_b
    else:
        h_seg, h_end, v_seg, v_end = seg_b, end_b, seg_a, end_a

    joint_x = v_seg.centerline
    joint_y = h_seg.centerline
    h_away = _direction_away(h_seg, h_end)  # along x
    v_away = _direction_away(v_seg, v_end)  # along y

    # Horizontal wall: outer face is the one facing away from the vertical wall
    h_low, h_high = h_seg.end_corners(h_end)  # (top, bottom)
    h_outer, h_inner = (h_low, h_high) if v_away > 0 else (h_high, h_low)
    h_outer.x = joint_x - h_away * v_seg.half_thickness
    h_inner.x = joint_x + h_away * v_seg.half_thickness

    # Vertical wall: outer face is the one facing away from the horizontal wall
    v_low, v_high = v_seg.end_corners(v_end)  # (left, right)
    v_outer, v_inner = (v_low, v_high) if h_away > 0 else (v_high, v_low)
    v_outer.y = joint_y - v_away * h_seg.half_thickness
    v_inner.y = joint_y + v_away * h_seg.half_thickness

    logger.debug(
        f"Mitered L-corner {h_seg.wall_id}/{v_seg.wall_id} at ({joint_x:.2f}, {joint_y:.2f})"
    )


# =============================================================================
# T-Junction
# =============================================================================


def trim_t_junction(
    through: List[Tuple[WallSegment, str]],
    butting: Tuple[WallSegment, str],
) -> None:
    """Trim a butting wall flush with the near face of the through wall (in place).

    The face is chosen from the side on which the butting wall's far end
    lies. The through walls are not modified.

    Args:
        through: The two collinear walls passing through the junction,
            as (segment, end) pairs.
        butting: The perpendicular wall ending at the junction.
    """
    b_seg, b_end = butting
    through_center = through[0][0].centerline
    through_half = max(seg.half_thickness for seg, _ in through)
    far = b_seg.far_endpoint(b_end)

    if b_seg.is_horizontal:
        approach = far.x - through_center
    else:
        approach = far.y - through_center
    near_face = through_center + through_half if approach > 0 else through_center - through_half

    for corner in b_seg.end_corners(b_end):
        if b_seg.is_horizontal:
            corner.x = near_face
        else:
            corner.y = near_face

    logger.debug(
        f"Trimmed {b_seg.wall_id} to face {near_face:.2f} of "
        f"{', '.join(seg.wall_id for seg, _ in through)}"
    )


# =============================================================================
# Main Entry Point
# =============================================================================


def resolve_junctions(arena: WallArena) -> WallArena:
    """Clean up L-corners and T-junctions.

    Args:
        arena: Segments straight from the builder.

    Returns:
        A new arena with reshaped corners; `arena` itself is unchanged.
    """
    resolved = arena.copy()
    index = build_endpoint_index(resolved)
    resolved_count = 0

    for bucket in index.values():
        pairs = [(resolved.get(e.wall_id), e.end) for e in bucket.ends]

        if bucket.junction_type == JunctionType.L_CORNER:
            (seg_a, end_a), (seg_b, end_b) = pairs
            miter_l_corner(seg_a, end_a, seg_b, end_b)
            resolved_count += 1

        elif bucket.junction_type == JunctionType.T_JUNCTION:
            horizontal = [p for p in pairs if p[0].is_horizontal]
            vertical = [p for p in pairs if not p[0].is_horizontal]
            if len(horizontal) == 2:
                trim_t_junction(horizontal, vertical[0])
            else:
                trim_t_junction(vertical, horizontal[0])
            resolved_count += 1

    unresolved = sum(
        1 for b in index.values() if b.junction_type == JunctionType.UNRESOLVED
    )
    logger.info(
        f"Resolved {resolved_count} junctions across {len(index)} endpoint buckets"
        + (f" ({unresolved} left unresolved)" if unresolved else "")
    )
    return resolved
