# File: src/floorplan_drafter/rendering/svg_renderer.py

"""SVG serialization of a drafted floor plan.

Lays the plan out on a sheet with room for dimension chains, grid bubbles
and a title block, then emits one group per layer:

    layer-walls, layer-doors, layer-windows, layer-stairs, layer-labels,
    layer-dimensions, layer-room-dimensions, layer-grid, layer-sections

Example:
    >>> result = draft_floor_plan(layout)
    >>> svg_text = to_svg_string(result.drawing)
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import svgwrite

from ..config.drawing import DRAWING_COLORS, LINE_WEIGHTS, SHEET, get_drawing_param
from ..drafting import FloorPlanDrawing
from ..layout.layout_types import DoorRecord, OpeningKind, WallClass
from . import symbols

logger = logging.getLogger(__name__)


@dataclass
class RenderOptions:
    """Which layers to draw, and the sheet title."""

    show_hatching: bool = True
    show_labels: bool = True
    show_dimensions: bool = True
    show_room_dimensions: bool = True
    show_grid: bool = True
    show_sections: bool = True
    show_title_block: bool = True
    title: Optional[str] = None


def sheet_padding() -> float:
    """Space between the sheet edge and the plan's envelope on every side."""
    return (
        SHEET["MARGIN"]
        + get_drawing_param("grid_bubble_clearance")
        + get_drawing_param("grid_bubble_radius")
    )


def sheet_size(drawing: FloorPlanDrawing) -> Tuple[float, float]:
    pad = sheet_padding()
    return (
        drawing.width + 2 * pad,
        drawing.depth + 2 * pad + SHEET["TITLE_BLOCK_HEIGHT"],
    )


def _wall_layer(dwg: svgwrite.Drawing, drawing: FloorPlanDrawing, options: RenderOptions):
    layer = dwg.g(id="layer-walls")
    for fill in drawing.fills:
        weight = "CUT" if fill.wall_class == WallClass.EXTERIOR else "OUTLINE"
        paint = f"url(#{fill.hatch_id})" if options.show_hatching else DRAWING_COLORS["BLACK"]
        layer.add(dwg.path(
            d=fill.to_path_data(),
            fill=paint,
            stroke=DRAWING_COLORS["BLACK"],
            stroke_width=LINE_WEIGHTS[weight],
        ))
    return layer


def _opening_layers(dwg: svgwrite.Drawing, drawing: FloorPlanDrawing):
    doors = dwg.g(id="layer-doors")
    windows = dwg.g(id="layer-windows")
    for placement in drawing.openings:
        record = placement.opening.record
        if placement.opening.kind == OpeningKind.DOOR and isinstance(record, DoorRecord):
            doors.add(symbols.door_symbol(dwg, placement, record.swing))
        elif placement.opening.kind == OpeningKind.WINDOW:
            windows.add(symbols.window_symbol(dwg, placement))
    return doors, windows


def _exterior_grid_lines(drawing: FloorPlanDrawing):
    """Centreline coordinates of exterior walls: x of vertical walls, y of horizontal."""
    exterior = [s for s in drawing.arena if s.wall_class == WallClass.EXTERIOR]
    vertical = symbols.unique_lines(s.centerline for s in exterior if not s.is_horizontal)
    horizontal = symbols.unique_lines(s.centerline for s in exterior if s.is_horizontal)
    return vertical, horizontal


def render_svg(
    drawing: FloorPlanDrawing,
    options: Optional[RenderOptions] = None,
    filename: str = "floor_plan.svg",
) -> svgwrite.Drawing:
    """Build the svgwrite document for a drafted floor.

    Args:
        drawing: Output of draft_floor_plan().
        options: Layer switches and title; defaults draw everything.
        filename: Path used by Drawing.save().

    Returns:
        The svgwrite Drawing; call tostring() or save() on it.
    """
    options = options or RenderOptions()
    sheet_w, sheet_h = sheet_size(drawing)
    pad = sheet_padding()
    scale = drawing.scale

    # Generator ids are not guaranteed to be valid XML names
    dwg = svgwrite.Drawing(filename, size=(f"{sheet_w:.2f}", f"{sheet_h:.2f}"), debug=False)
    dwg.viewbox(0, 0, sheet_w, sheet_h)
    dwg.add(dwg.rect(insert=(0, 0), size=(sheet_w, sheet_h), fill=DRAWING_COLORS["WHITE"]))
    symbols.add_hatch_defs(dwg)

    plan = dwg.g(id="plan", transform=f"translate({pad:.3f},{pad:.3f})")
    plan.add(_wall_layer(dwg, drawing, options))

    doors, windows = _opening_layers(dwg, drawing)
    plan.add(doors)
    plan.add(windows)

    if drawing.stairs:
        stairs = dwg.g(id="layer-stairs")
        for stair in drawing.stairs:
            stairs.add(symbols.stair_symbol(dwg, stair, scale))
        plan.add(stairs)

    if options.show_labels:
        labels = dwg.g(id="layer-labels")
        for room in drawing.rooms:
            if room.room_type not in symbols.UNLABELED_ROOM_TYPES:
                labels.add(symbols.room_label(dwg, room, scale))
        plan.add(labels)

    if options.show_dimensions:
        dims = dwg.g(id="layer-dimensions")
        for chain in drawing.dimension_chains:
            for level in chain.levels:
                for span in level.spans:
                    dims.add(symbols.dimension_symbol(dwg, span, scale))
        plan.add(dims)

    if options.show_room_dimensions:
        room_dims = dwg.g(id="layer-room-dimensions")
        for span in drawing.room_dimensions:
            room_dims.add(symbols.dimension_symbol(dwg, span, scale))
        plan.add(room_dims)

    if options.show_grid:
        vertical, horizontal = _exterior_grid_lines(drawing)
        plan.add(symbols.grid_bubbles(dwg, vertical, horizontal))

    if options.show_sections:
        plan.add(symbols.section_markers(dwg, drawing.width, drawing.depth))

    dwg.add(plan)

    size = SHEET["NORTH_ARROW_SIZE"]
    dwg.add(symbols.north_arrow(dwg, (sheet_w - SHEET["MARGIN"] - size / 2, SHEET["MARGIN"] + size / 2)))
    dwg.add(symbols.sheet_border(dwg, sheet_w, sheet_h))

    if options.show_title_block:
        title = options.title or f"{drawing.envelope.style.replace('_', ' ').title()} Floor Plan - Level {drawing.level}"
        dwg.add(symbols.title_block(dwg, sheet_w, sheet_h, title, scale, drawing.total_area))

    logger.debug(f"Rendered floor {drawing.level} on a {sheet_w:.0f}x{sheet_h:.0f} sheet")
    return dwg


def to_svg_string(drawing: FloorPlanDrawing, options: Optional[RenderOptions] = None) -> str:
    return render_svg(drawing, options).tostring()


def save_svg(drawing: FloorPlanDrawing, path: str, options: Optional[RenderOptions] = None) -> str:
    """Write the SVG to `path` and return the path."""
    dwg = render_svg(drawing, options, filename=path)
    dwg.save(pretty=True)
    logger.info(f"Saved floor plan SVG to {path}")
    return path
