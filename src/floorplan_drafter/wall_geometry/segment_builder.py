# File: src/floorplan_drafter/wall_geometry/segment_builder.py

"""Wall segment construction from layout records.

Converts wall, door and window records into drawing-space WallSegments:
1. Drop degenerate walls (zero length or non-positive thickness)
2. Deduplicate records describing the same physical wall
3. Build a four-corner rectangle around each wall centreline
4. Attach openings to their host wall as offset ranges along the wall

Inputs are in feet/inches; outputs are in drawing units.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from ..config.drawing import DEFAULT_SCALE, get_drawing_param
from ..config.units import feet_to_drawing, inches_to_drawing
from ..layout.layout_types import (
    DoorRecord,
    OpeningKind,
    WallRecord,
    WindowRecord,
)
from .wall_types import (
    AssignedOpening,
    Orientation,
    Point,
    WallArena,
    WallSegment,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Deduplication
# =============================================================================


def _close(p1: Tuple[float, float], p2: Tuple[float, float], tolerance: float) -> bool:
    return abs(p1[0] - p2[0]) <= tolerance and abs(p1[1] - p2[1]) <= tolerance


def _same_wall(a: WallRecord, b: WallRecord, tolerance: float) -> Optional[bool]:
    """Compare two wall records.

    Returns:
        None if they are different walls, False if they match in the same
        direction, True if they match with start and end swapped.
    """
    if _close(a.start, b.start, tolerance) and _close(a.end, b.end, tolerance):
        return False
    if _close(a.start, b.end, tolerance) and _close(a.end, b.start, tolerance):
        return True
    return None


def dedupe_walls(
    walls: Sequence[WallRecord],
    tolerance: Optional[float] = None,
) -> Tuple[List[WallRecord], Dict[str, Tuple[str, bool]]]:
    """Remove records that describe the same physical wall.

    Endpoints matching within `tolerance` feet, in either direction, mark a
    duplicate. The first occurrence wins.

    Args:
        walls: Wall records in generator order.
        tolerance: Endpoint match tolerance in feet.

    Returns:
        (unique walls, aliases) where aliases maps a dropped duplicate's id to
        (surviving wall id, whether the duplicate ran reversed).
    """
    if tolerance is None:
        tolerance = get_drawing_param("duplicate_wall_tolerance_ft")

    unique: List[WallRecord] = []
    aliases: Dict[str, Tuple[str, bool]] = {}

    for wall in walls:
        duplicate_of = None
        for kept in unique:
            reversed_match = _same_wall(kept, wall, tolerance)
            if reversed_match is not None:
                duplicate_of = (kept.id, reversed_match)
                break

        if duplicate_of is None:
            unique.append(wall)
        else:
            logger.debug(f"Wall {wall.id} duplicates {duplicate_of[0]}, dropping")
            if wall.id != duplicate_of[0]:
                aliases[wall.id] = duplicate_of

    if aliases:
        logger.info(f"Dropped {len(aliases)} duplicate wall record(s)")
    return unique, aliases


# =============================================================================
# Segment Construction
# =============================================================================


def build_segment(
    wall: WallRecord,
    scale: float = DEFAULT_SCALE,
    orientation_epsilon: Optional[float] = None,
) -> WallSegment:
    """Build the rectangular footprint of one wall.

    The wall is horizontal when its start and end y agree within epsilon,
    otherwise vertical. Corners sit symmetrically about the centreline at
    half the wall thickness.
    """
    if orientation_epsilon is None:
        orientation_epsilon = get_drawing_param("orientation_epsilon_ft")

    start = Point(feet_to_drawing(wall.start[0], scale), feet_to_drawing(wall.start[1], scale))
    end = Point(feet_to_drawing(wall.end[0], scale), feet_to_drawing(wall.end[1], scale))
    half = inches_to_drawing(wall.thickness, scale) / 2.0

    is_horizontal = abs(wall.end[1] - wall.start[1]) < orientation_epsilon

    if is_horizontal:
        min_x, max_x = min(start.x, end.x), max(start.x, end.x)
        y = start.y
        corners = (
            Point(min_x, y - half),
            Point(max_x, y - half),
            Point(min_x, y + half),
            Point(max_x, y + half),
        )
    else:
        if abs(wall.end[0] - wall.start[0]) >= orientation_epsilon:
            logger.warning(f"Wall {wall.id} is not axis-aligned; drawing it as vertical")
        min_y, max_y = min(start.y, end.y), max(start.y, end.y)
        x = start.x
        corners = (
            Point(x - half, min_y),
            Point(x + half, min_y),
            Point(x - half, max_y),
            Point(x + half, max_y),
        )

    top_left, top_right, bottom_left, bottom_right = corners
    return WallSegment(
        wall_id=wall.id,
        wall_class=wall.wall_class,
        start=start,
        end=end,
        half_thickness=half,
        orientation=Orientation.HORIZONTAL if is_horizontal else Orientation.VERTICAL,
        top_left=top_left,
        top_right=top_right,
        bottom_left=bottom_left,
        bottom_right=bottom_right,
    )


def _assign_opening(
    segment: WallSegment,
    record: Union[DoorRecord, WindowRecord],
    kind: OpeningKind,
    alias_reversed: bool,
    scale: float,
) -> AssignedOpening:
    """Convert a record's centre position into an offset range on the segment."""
    position = feet_to_drawing(record.position_along_wall, scale)
    width = inches_to_drawing(record.width, scale)

    # Positions are measured from the record's start point; re-express them
    # from the centreline low end.
    if alias_reversed:
        position = segment.length - position
    center = segment.length - position if segment.is_reversed else position

    return AssignedOpening(
        kind=kind,
        opening_id=record.id,
        start_offset=center - width / 2.0,
        width=width,
        record=record,
    )


def build_wall_segments(
    walls: Sequence[WallRecord],
    doors: Iterable[DoorRecord] = (),
    windows: Iterable[WindowRecord] = (),
    scale: float = DEFAULT_SCALE,
) -> WallArena:
    """Convert raw wall/door/window records into drawing-space segments.

    Args:
        walls: Wall records (feet / inches).
        doors: Door records.
        windows: Window records.
        scale: Drawing units per foot.

    Returns:
        WallArena keyed by wall id. Openings naming an unknown wall are
        dropped with a warning.
    """
    usable = []
    for wall in walls:
        if wall.thickness <= 0:
            logger.warning(f"Wall {wall.id} has non-positive thickness {wall.thickness}, skipping")
            continue
        if wall.length <= 0:
            logger.warning(f"Wall {wall.id} has zero length, skipping")
            continue
        usable.append(wall)

    unique, aliases = dedupe_walls(usable)

    arena = WallArena(scale=scale)
    for wall in unique:
        arena.add(build_segment(wall, scale))

    openings = [(d, OpeningKind.DOOR) for d in doors] + [(w, OpeningKind.WINDOW) for w in windows]
    dropped = 0
    for record, kind in openings:
        host_id, alias_reversed = aliases.get(record.wall_id, (record.wall_id, False))
        segment = arena.get(host_id)
        if segment is None:
            logger.warning(
                f"{kind.value.capitalize()} {record.id} references missing wall "
                f"'{record.wall_id}', dropping"
            )
            dropped += 1
            continue
        segment.openings.append(_assign_opening(segment, record, kind, alias_reversed, scale))

    logger.debug(
        f"Built {len(arena)} wall segments from {len(walls)} records, "
        f"{len(openings) - dropped} openings attached, {dropped} dropped"
    )
    return arena
