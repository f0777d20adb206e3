# File: src/floorplan_drafter/wall_geometry/opening_cutter.py

"""Cut door and window gaps out of wall footprints.

A wall with no openings is drawn as its whole footprint. A wall with
openings is walked from its low end along the running axis; every gap
between openings (and from either wall end to the nearest opening) becomes
one fill polygon, and nothing is drawn across an opening. The first and last
pieces keep the wall's end corners, so mitered and trimmed ends survive the
cut.
"""

import logging
from typing import List, Tuple

from ..config.drawing import HATCH_PATTERNS, get_drawing_param
from ..layout.layout_types import WallClass
from .wall_types import (
    AssignedOpening,
    OpeningPlacement,
    Point,
    WallArena,
    WallFill,
    WallSegment,
)

logger = logging.getLogger(__name__)


def hatch_for(wall_class: WallClass) -> str:
    """Pattern id for a wall class: cross-hatch for exterior, diagonal otherwise."""
    return HATCH_PATTERNS[wall_class.value]["id"]


def _fill_spans(segment: WallSegment) -> List[Tuple[float, float]]:
    """Offsets (from the centreline low end) of every solid piece of wall."""
    min_gap = get_drawing_param("min_gap")
    spans = []
    cursor = 0.0

    for opening in segment.sorted_openings():
        if opening.start_offset - cursor > min_gap:
            spans.append((cursor, opening.start_offset))
        cursor = max(cursor, opening.end_offset)

    if segment.length - cursor > min_gap:
        spans.append((cursor, segment.length))
    return spans


def _clip(points: List[Point], bound: float, keep_below: bool, horizontal: bool) -> List[Point]:
    """Clip a convex polygon to one side of an axis-normal line."""

    def axis(p: Point) -> float:
        return p.x if horizontal else p.y

    def inside(p: Point) -> bool:
        return axis(p) <= bound if keep_below else axis(p) >= bound

    def crossing(p: Point, q: Point) -> Point:
        t = (bound - axis(p)) / (axis(q) - axis(p))
        return Point(p.x + t * (q.x - p.x), p.y + t * (q.y - p.y))

    clipped: List[Point] = []
    prev = points[-1]
    for cur in points:
        if inside(cur):
            if not inside(prev):
                clipped.append(crossing(prev, cur))
            clipped.append(Point(cur.x, cur.y))
        elif inside(prev):
            clipped.append(crossing(prev, cur))
        prev = cur
    return clipped


def _piece_polygon(segment: WallSegment, u0: float, u1: float) -> List[Point]:
    """Polygon for the piece of wall between offsets u0 and u1.

    The footprint is clipped to the slab between the two cut lines. Pieces
    touching a wall end keep that end's (possibly reshaped) corners; a cut
    that falls inside a mitered end gives a triangle or pentagon rather than
    a folded quadrilateral.
    """
    points = [Point(p.x, p.y) for p in segment.corners()]
    horizontal = segment.is_horizontal
    if u0 > 0.0:
        points = _clip(points, segment.axis_start + u0, False, horizontal)
    if points and u1 < segment.length:
        points = _clip(points, segment.axis_start + u1, True, horizontal)
    return points


def cut_openings(segment: WallSegment) -> List[WallFill]:
    """Split one wall footprint into fill polygons around its openings.

    Args:
        segment: A (possibly junction-resolved) wall segment.

    Returns:
        Fill polygons ordered along the wall. Zero or negative length gaps,
        such as an opening flush with a wall end, produce no polygon.
    """
    hatch_id = hatch_for(segment.wall_class)

    if not segment.openings:
        return [
            WallFill(
                wall_id=segment.wall_id,
                wall_class=segment.wall_class,
                points=[Point(p.x, p.y) for p in segment.corners()],
                span=(0.0, segment.length),
                hatch_id=hatch_id,
            )
        ]

    fills: List[WallFill] = []
    for u0, u1 in _fill_spans(segment):
        points = _piece_polygon(segment, u0, u1)
        if len(points) < 3:
            # Cut falls entirely inside a trimmed end
            logger.debug(f"Dropped empty piece ({u0:.2f}, {u1:.2f}) of wall {segment.wall_id}")
            continue
        fills.append(
            WallFill(
                wall_id=segment.wall_id,
                wall_class=segment.wall_class,
                points=points,
                span=(u0, u1),
                hatch_id=hatch_id,
            )
        )
    return fills


def cut_all_openings(arena: WallArena) -> List[WallFill]:
    """Cut every wall in an arena, in arena order."""
    fills: List[WallFill] = []
    for segment in arena:
        fills.extend(cut_openings(segment))
    logger.debug(f"Cut {len(arena)} walls into {len(fills)} fill polygons")
    return fills


def opening_placement(segment: WallSegment, opening: AssignedOpening) -> OpeningPlacement:
    """Rectangle of an opening within its wall, for symbol drawing."""
    thickness = segment.half_thickness * 2.0
    along = segment.axis_start + opening.start_offset
    if segment.is_horizontal:
        x, y = along, segment.centerline - segment.half_thickness
    else:
        x, y = segment.centerline - segment.half_thickness, along
    return OpeningPlacement(
        wall_id=segment.wall_id,
        opening=opening,
        x=x,
        y=y,
        width=opening.width,
        thickness=thickness,
        is_horizontal_wall=segment.is_horizontal,
    )


def opening_placements(arena: WallArena) -> List[OpeningPlacement]:
    """Placements for every opening in an arena, in wall order."""
    return [
        opening_placement(segment, opening)
        for segment in arena
        for opening in segment.sorted_openings()
    ]
