# File: src/floorplan_drafter/dimensions/chain_builder.py

"""Exterior dimension chains and interior room dimensions.

Each building side gets three nested levels, measured along the side:
1. Detail: spans between every unique room boundary, envelope edges included
2. Room: detail coordinates merged until each span reaches the merge
   threshold; a short remainder at the far end joins the preceding span
3. Overall: one span over the full envelope

Levels are offset outward from the envelope edge, detail closest. Interior
room dimensions are independent: each room gets a width and a depth span
set slightly inside its own boundary.

Example:
    >>> chains = build_dimension_chains(floor, layout.building)
    >>> [c.overall for c in chains]
    [20.0, 20.0, 15.0, 15.0]
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from ..config.drawing import get_drawing_param
from ..layout.layout_types import BuildingEnvelope, FloorLayout, RoomRecord
from .dimension_types import (
    ChainSide,
    DimensionChain,
    DimensionGraphic,
    DimensionLevel,
    DimensionLevelKind,
    DimensionSpan,
    Segment,
)
from .formatting import format_feet_inches

logger = logging.getLogger(__name__)

# Boundary coordinates are compared after rounding to this many decimals
_COORD_DECIMALS = 6


# =============================================================================
# Coordinate Helpers
# =============================================================================


def boundary_coordinates(
    rooms: Iterable[RoomRecord],
    measures_x: bool,
    extent: float,
) -> List[float]:
    """Sorted unique room boundaries on one axis, plus 0 and the envelope extent."""
    coords = {0.0, round(extent, _COORD_DECIMALS)}
    for room in rooms:
        if measures_x:
            coords.update((room.x, room.max_x))
        else:
            coords.update((room.y, room.max_y))
    return sorted({round(c, _COORD_DECIMALS) for c in coords})


def merge_short_spans(
    coords: Sequence[float],
    threshold: Optional[float] = None,
) -> List[Tuple[float, float]]:
    """Collapse runs of short gaps into spans of at least `threshold` feet.

    Walks the coordinates from the low end, closing a span as soon as it
    reaches the threshold. Whatever is left at the far end is absorbed by
    the last closed span, or becomes the only span if none closed.
    """
    if threshold is None:
        threshold = get_drawing_param("room_merge_threshold_ft")
    if len(coords) < 2:
        return []

    spans: List[Tuple[float, float]] = []
    span_start = coords[0]
    for coord in coords[1:]:
        if coord - span_start >= threshold:
            spans.append((span_start, coord))
            span_start = coord

    if span_start < coords[-1]:
        if spans:
            spans[-1] = (spans[-1][0], coords[-1])
        else:
            spans.append((span_start, coords[-1]))
    return spans


def _base_for(side: ChainSide, envelope: BuildingEnvelope) -> float:
    """Envelope edge a chain on `side` is measured from."""
    if side == ChainSide.TOP or side == ChainSide.LEFT:
        return 0.0
    if side == ChainSide.BOTTOM:
        return envelope.depth
    return envelope.width


# =============================================================================
# Exterior Chains
# =============================================================================


def build_chain(
    side: ChainSide,
    rooms: Sequence[RoomRecord],
    envelope: BuildingEnvelope,
) -> DimensionChain:
    """Build the three dimension levels for one building side."""
    extent = envelope.width if side.measures_x else envelope.depth
    base = _base_for(side, envelope)

    def make_level(kind: DimensionLevelKind, param: str, pairs) -> DimensionLevel:
        offset = get_drawing_param(param)
        return DimensionLevel(
            kind=kind,
            offset=offset,
            spans=[
                DimensionSpan(start=a, end=b, base=base, side=side, offset=offset)
                for a, b in pairs
            ],
        )

    coords = boundary_coordinates(rooms, side.measures_x, extent)
    detail_pairs = list(zip(coords[:-1], coords[1:]))

    return DimensionChain(
        side=side,
        levels=[
            make_level(DimensionLevelKind.DETAIL, "detail_offset", detail_pairs),
            make_level(DimensionLevelKind.ROOM, "room_offset", merge_short_spans(coords)),
            make_level(DimensionLevelKind.OVERALL, "overall_offset", [(0.0, extent)]),
        ],
    )


def build_dimension_chains(
    floor: FloorLayout,
    envelope: BuildingEnvelope,
) -> List[DimensionChain]:
    """Build exterior dimension chains for all four sides of one floor.

    Args:
        floor: The floor whose room boundaries are dimensioned.
        envelope: Building envelope giving the overall extents.

    Returns:
        Chains in the order top, bottom, left, right.
    """
    chains = [
        build_chain(side, floor.rooms, envelope)
        for side in (ChainSide.TOP, ChainSide.BOTTOM, ChainSide.LEFT, ChainSide.RIGHT)
    ]
    logger.debug(
        f"Floor {floor.level}: dimension chains with "
        f"{[len(c.levels[0].spans) for c in chains]} detail spans per side"
    )
    return chains


# =============================================================================
# Interior Room Dimensions
# =============================================================================


def build_room_dimensions(
    rooms: Iterable[RoomRecord],
    inset: Optional[float] = None,
) -> List[DimensionSpan]:
    """Width and depth spans for each room, drawn just inside its boundary.

    The width span hangs below the room's top edge and the depth span to the
    right of its left edge, each `inset` drawing units in.
    """
    if inset is None:
        inset = get_drawing_param("interior_dimension_inset")

    spans: List[DimensionSpan] = []
    for room in rooms:
        spans.append(
            DimensionSpan(
                start=room.x, end=room.max_x, base=room.y,
                side=ChainSide.BOTTOM, offset=inset, owner_id=room.id,
            )
        )
        spans.append(
            DimensionSpan(
                start=room.y, end=room.max_y, base=room.x,
                side=ChainSide.RIGHT, offset=inset, owner_id=room.id,
            )
        )
    return spans


# =============================================================================
# Graphic Layout
# =============================================================================


def layout_dimension_span(span: DimensionSpan, scale: float) -> DimensionGraphic:
    """Place the lines, ticks and label of one span in drawing space.

    Extension lines start a small overshoot off the measured edge and run
    past the dimension line by the same overshoot. Ticks are 45 degree
    slashes centred on the dimension line ends.
    """
    overshoot = get_drawing_param("extension_overshoot")
    tick = get_drawing_param("tick_size") / 2.0
    gap = get_drawing_param("label_gap")
    sign = span.side.direction

    a, b = span.start * scale, span.end * scale
    base = span.base * scale
    line_at = base + sign * span.offset
    ext_from = base + sign * overshoot
    ext_to = line_at + sign * overshoot
    mid = (a + b) / 2.0

    if span.side.measures_x:
        extension_lines: List[Segment] = [((a, ext_from), (a, ext_to)), ((b, ext_from), (b, ext_to))]
        dimension_line: Segment = ((a, line_at), (b, line_at))
        ticks: List[Segment] = [
            ((x - tick, line_at + tick), (x + tick, line_at - tick)) for x in (a, b)
        ]
        label_position = (mid, line_at - gap)
        rotation = 0.0
    else:
        extension_lines = [((ext_from, a), (ext_to, a)), ((ext_from, b), (ext_to, b))]
        dimension_line = ((line_at, a), (line_at, b))
        ticks = [((line_at - tick, y + tick), (line_at + tick, y - tick)) for y in (a, b)]
        label_position = (line_at - gap, mid)
        rotation = -90.0

    return DimensionGraphic(
        extension_lines=extension_lines,
        dimension_line=dimension_line,
        ticks=ticks,
        label_position=label_position,
        label_rotation=rotation,
        label=format_feet_inches(span.length),
    )
