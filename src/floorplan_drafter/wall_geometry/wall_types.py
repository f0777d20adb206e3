# File: src/floorplan_drafter/wall_geometry/wall_types.py

"""Data models for drawing-space wall geometry.

All coordinates and lengths here are in drawing units (feet times the sheet
scale). Drawing space follows SVG conventions: +x runs right, +y runs down,
so "top" means the smaller y value.

Key Types:
    Orientation: Horizontal or vertical running axis of a wall
    WallSegment: The four-corner footprint of one wall plus its openings
    WallArena: Wall segments addressed by stable wall id
    WallFill: One filled polygon left after cutting openings
"""

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple, Union

from ..config.drawing import DEFAULT_SCALE
from ..layout.layout_types import (
    DoorRecord,
    OpeningKind,
    WallClass,
    WindowRecord,
)


# =============================================================================
# Enumerations
# =============================================================================


class Orientation(Enum):
    """Running axis of a wall segment."""

    HORIZONTAL = "horizontal"
    """Runs along x; its faces are top (min y) and bottom (max y)."""

    VERTICAL = "vertical"
    """Runs along y; its faces are left (min x) and right (max x)."""


# =============================================================================
# Data Models
# =============================================================================


@dataclass
class Point:
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass
class AssignedOpening:
    """An opening attached to a wall segment.

    Attributes:
        kind: Door or window.
        opening_id: Record identifier.
        start_offset: Distance from the centreline's low end (min x for
            horizontal walls, min y for vertical) to the opening's near edge.
        width: Opening width along the wall.
        record: The source door or window record.
    """

    kind: OpeningKind
    opening_id: str
    start_offset: float
    width: float
    record: Union[DoorRecord, WindowRecord, None] = None

    @property
    def end_offset(self) -> float:
        return self.start_offset + self.width


@dataclass
class WallSegment:
    """Drawing-space footprint of one wall.

    Corner names are geometric, not tied to the record's start/end order:
    for a horizontal wall the "left" corners sit at its min-x end, for a
    vertical wall the "top" corners sit at its min-y end. Junction
    resolution moves individual corners, so after resolution the footprint
    is a general quadrilateral (mitered ends).

    Attributes:
        wall_id: Wall record identifier.
        wall_class: Exterior, interior or partition.
        start: Centreline start point, in record order.
        end: Centreline end point, in record order.
        half_thickness: Half the wall thickness.
        orientation: Running axis.
        top_left, top_right, bottom_left, bottom_right: Footprint corners.
        openings: Openings on this wall, in insertion order.
    """

    wall_id: str
    wall_class: WallClass
    start: Point
    end: Point
    half_thickness: float
    orientation: Orientation
    top_left: Point
    top_right: Point
    bottom_left: Point
    bottom_right: Point
    openings: List[AssignedOpening] = field(default_factory=list)

    @property
    def is_horizontal(self) -> bool:
        return self.orientation == Orientation.HORIZONTAL

    @property
    def axis_start(self) -> float:
        """Centreline low end along the running axis."""
        if self.is_horizontal:
            return min(self.start.x, self.end.x)
        return min(self.start.y, self.end.y)

    @property
    def axis_end(self) -> float:
        """Centreline high end along the running axis."""
        if self.is_horizontal:
            return max(self.start.x, self.end.x)
        return max(self.start.y, self.end.y)

    @property
    def length(self) -> float:
        return self.axis_end - self.axis_start

    @property
    def is_reversed(self) -> bool:
        """True when the record runs from the high end to the low end."""
        if self.is_horizontal:
            return self.start.x > self.end.x
        return self.start.y > self.end.y

    @property
    def centerline(self) -> float:
        """Fixed coordinate of the centreline (y for horizontal, x for vertical)."""
        return self.start.y if self.is_horizontal else self.start.x

    def endpoint(self, end: str) -> Point:
        """Centreline point for "start" or "end"."""
        return self.start if end == "start" else self.end

    def far_endpoint(self, end: str) -> Point:
        """Centreline point at the opposite end from `end`."""
        return self.end if end == "start" else self.start

    def is_low_end(self, end: str) -> bool:
        """Whether the record end "start"/"end" lies at the axis low end."""
        return (end == "start") != self.is_reversed

    def end_corners(self, end: str) -> Tuple[Point, Point]:
        """The two footprint corners at record end `end`.

        Returns:
            (corner on the low face, corner on the high face). For horizontal
            walls the low face is the top; for vertical walls it is the left.
        """
        low = self.is_low_end(end)
        if self.is_horizontal:
            return (self.top_left, self.bottom_left) if low else (self.top_right, self.bottom_right)
        return (self.top_left, self.top_right) if low else (self.bottom_left, self.bottom_right)

    def corners(self) -> List[Point]:
        """Footprint corners in drawing order."""
        return [self.top_left, self.top_right, self.bottom_right, self.bottom_left]

    def sorted_openings(self) -> List[AssignedOpening]:
        return sorted(self.openings, key=lambda o: o.start_offset)


@dataclass
class WallArena:
    """Wall segments addressed by stable wall id, in insertion order.

    Stages that reshape geometry never mutate an arena they were given;
    they call copy() and return the modified copy.
    """

    segments: Dict[str, WallSegment] = field(default_factory=dict)
    scale: float = DEFAULT_SCALE

    def add(self, segment: WallSegment) -> None:
        self.segments[segment.wall_id] = segment

    def get(self, wall_id: str) -> Optional[WallSegment]:
        return self.segments.get(wall_id)

    def ids(self) -> List[str]:
        return list(self.segments.keys())

    def copy(self) -> "WallArena":
        return WallArena(segments=copy.deepcopy(self.segments), scale=self.scale)

    def __iter__(self) -> Iterator[WallSegment]:
        return iter(self.segments.values())

    def __len__(self) -> int:
        return len(self.segments)

    def __contains__(self, wall_id: str) -> bool:
        return wall_id in self.segments


@dataclass
class WallFill:
    """One filled wall polygon after openings are cut.

    Attributes:
        wall_id: Source wall identifier.
        wall_class: Class of the source wall.
        points: Polygon vertices in drawing order.
        span: (start, end) of this piece along the running axis, measured
            from the wall's centreline low end.
        hatch_id: Pattern id used to fill the polygon.
    """

    wall_id: str
    wall_class: WallClass
    points: List[Point]
    span: Tuple[float, float]
    hatch_id: str

    def to_path_data(self) -> str:
        """SVG path data for the polygon."""
        head, *rest = self.points
        commands = [f"M {head.x:.3f},{head.y:.3f}"]
        commands.extend(f"L {p.x:.3f},{p.y:.3f}" for p in rest)
        commands.append("Z")
        return " ".join(commands)


@dataclass
class OpeningPlacement:
    """Where to draw an opening symbol: the opening's rectangle in the wall.

    (x, y) is the corner at the opening's low end on the wall's low face.
    """

    wall_id: str
    opening: AssignedOpening
    x: float
    y: float
    width: float
    thickness: float
    is_horizontal_wall: bool
