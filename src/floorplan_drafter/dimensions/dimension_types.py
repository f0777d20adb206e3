# File: src/floorplan_drafter/dimensions/dimension_types.py

"""Data models for dimension annotations.

Spans are measured in feet on the plan; offsets and graphics are in drawing
units. A span measures along one axis from `start` to `end` and is drawn
away from a fixed base line (`base`, the coordinate of the measured edge on
the other axis) in the direction given by its side.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .formatting import format_feet_inches

Segment = Tuple[Tuple[float, float], Tuple[float, float]]


# =============================================================================
# Enumerations
# =============================================================================


class ChainSide(Enum):
    """Building side a dimension is drawn on, and the direction it is offset."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @property
    def measures_x(self) -> bool:
        """Top and bottom chains measure along x; left and right along y."""
        return self in (ChainSide.TOP, ChainSide.BOTTOM)

    @property
    def direction(self) -> float:
        """Sign of the offset in drawing space (+y is down)."""
        return -1.0 if self in (ChainSide.TOP, ChainSide.LEFT) else 1.0


class DimensionLevelKind(Enum):
    """Nesting level within a chain, closest to the building first."""

    DETAIL = "detail"
    """Every unique room boundary."""

    ROOM = "room"
    """Detail coordinates merged so no span is shorter than the threshold."""

    OVERALL = "overall"
    """One span over the whole envelope."""


# =============================================================================
# Data Models
# =============================================================================


@dataclass
class DimensionSpan:
    """One measured distance.

    Attributes:
        start: Low coordinate along the measured axis (feet).
        end: High coordinate along the measured axis (feet).
        base: Coordinate of the measured edge on the other axis (feet).
        side: Offset direction.
        offset: Distance from the base line to the dimension line (drawing units).
        owner_id: Room id for interior dimensions.
    """

    start: float
    end: float
    base: float
    side: ChainSide
    offset: float
    owner_id: Optional[str] = None

    @property
    def length(self) -> float:
        return self.end - self.start

    @property
    def label(self) -> str:
        return format_feet_inches(self.length)


@dataclass
class DimensionLevel:
    kind: DimensionLevelKind
    offset: float
    spans: List[DimensionSpan] = field(default_factory=list)

    def coordinates(self) -> List[float]:
        """Span boundaries in order, including both chain ends."""
        if not self.spans:
            return []
        return [self.spans[0].start] + [span.end for span in self.spans]

    @property
    def total(self) -> float:
        return sum(span.length for span in self.spans)


@dataclass
class DimensionChain:
    """The three nested dimension levels along one building side."""

    side: ChainSide
    levels: List[DimensionLevel] = field(default_factory=list)

    def level(self, kind: DimensionLevelKind) -> Optional[DimensionLevel]:
        for level in self.levels:
            if level.kind == kind:
                return level
        return None

    @property
    def overall(self) -> float:
        """Length of the overall span, or 0 when the chain is empty."""
        level = self.level(DimensionLevelKind.OVERALL)
        return level.total if level else 0.0


@dataclass
class DimensionGraphic:
    """Drawing-space geometry for one span.

    Attributes:
        extension_lines: Two lines from the measured edge out past the
            dimension line.
        dimension_line: The line carrying the ticks and label.
        ticks: Two 45 degree slashes at the dimension line ends.
        label_position: Anchor point of the centred label.
        label_rotation: Label rotation in degrees (-90 on vertical spans).
        label: Formatted feet-inches text.
    """

    extension_lines: List[Segment]
    dimension_line: Segment
    ticks: List[Segment]
    label_position: Tuple[float, float]
    label_rotation: float
    label: str
