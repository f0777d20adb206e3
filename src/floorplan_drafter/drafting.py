# File: src/floorplan_drafter/drafting.py

"""Floor plan drafting pipeline.

Runs one floor of a layout through every stage and assembles the drawing
tree handed to the SVG serializer:

    validate (snap + check) -> build wall segments -> resolve junctions
    -> cut openings -> dimension chains

Every stage is a pure function of its input, so independent layouts can be
drafted concurrently.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .config.drawing import get_drawing_param
from .dimensions.chain_builder import build_dimension_chains, build_room_dimensions
from .dimensions.dimension_types import DimensionChain, DimensionSpan
from .layout.layout_types import (
    BuildingEnvelope,
    FloorPlanLayout,
    RoomRecord,
    StairRecord,
)
from .layout_validation.layout_validator import validate_layout
from .layout_validation.validation_types import ValidationResult
from .wall_geometry.junction_resolver import JunctionSummary, classify_junctions, resolve_junctions
from .wall_geometry.opening_cutter import cut_all_openings, opening_placements
from .wall_geometry.segment_builder import build_wall_segments
from .wall_geometry.wall_types import OpeningPlacement, WallArena, WallFill

logger = logging.getLogger(__name__)


class EmptyLayoutError(ValueError):
    """Raised when a layout has no floors to draw."""


@dataclass
class FloorPlanDrawing:
    """Everything needed to draw one floor.

    Geometry (arena, fills, openings) is in drawing units; rooms, stairs and
    dimension spans stay in feet and are scaled at render time.
    """

    level: int
    scale: float
    envelope: BuildingEnvelope
    arena: WallArena
    fills: List[WallFill] = field(default_factory=list)
    openings: List[OpeningPlacement] = field(default_factory=list)
    rooms: List[RoomRecord] = field(default_factory=list)
    stairs: List[StairRecord] = field(default_factory=list)
    dimension_chains: List[DimensionChain] = field(default_factory=list)
    room_dimensions: List[DimensionSpan] = field(default_factory=list)
    junctions: JunctionSummary = field(default_factory=JunctionSummary)

    @property
    def width(self) -> float:
        """Envelope width in drawing units."""
        return self.envelope.width * self.scale

    @property
    def depth(self) -> float:
        return self.envelope.depth * self.scale

    @property
    def total_area(self) -> float:
        """Sum of room areas in square feet."""
        return sum(room.area for room in self.rooms)


@dataclass
class DraftResult:
    drawing: FloorPlanDrawing
    validation: ValidationResult


def draft_floor_plan(
    layout: FloorPlanLayout,
    level: int = 0,
    scale: Optional[float] = None,
) -> DraftResult:
    """Validate a layout and build the drawing tree for one floor.

    Validation issues never stop drafting; they are returned alongside the
    drawing. The snapped layout is what gets drawn.

    Args:
        layout: Layout as produced by the generator.
        level: Floor level to draw; falls back to the first floor.
        scale: Drawing units per foot, defaults to the configured sheet scale.

    Returns:
        DraftResult with the drawing and the validation result.

    Raises:
        EmptyLayoutError: If the layout has no floors.
    """
    if not layout.floors:
        raise EmptyLayoutError("Layout has no floors to draw")
    if scale is None:
        scale = get_drawing_param("scale")

    validation = validate_layout(layout)
    snapped = validation.snapped_layout
    floor = snapped.get_floor(level)

    arena = build_wall_segments(floor.walls, floor.doors, floor.windows, scale)
    junctions = classify_junctions(arena)
    resolved = resolve_junctions(arena)

    drawing = FloorPlanDrawing(
        level=floor.level,
        scale=scale,
        envelope=snapped.building,
        arena=resolved,
        fills=cut_all_openings(resolved),
        openings=opening_placements(resolved),
        rooms=list(floor.rooms),
        stairs=list(floor.stairs),
        dimension_chains=build_dimension_chains(floor, snapped.building),
        room_dimensions=build_room_dimensions(floor.rooms),
        junctions=junctions,
    )

    logger.info(
        f"Drafted floor {drawing.level}: {len(resolved)} walls, {len(drawing.fills)} fills, "
        f"{len(drawing.openings)} openings, {len(drawing.rooms)} rooms"
    )
    return DraftResult(drawing=drawing, validation=validation)
