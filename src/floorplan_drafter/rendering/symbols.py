# File: src/floorplan_drafter/rendering/symbols.py

"""Architectural drawing symbols built with svgwrite.

Every function takes the svgwrite Drawing (used as the element factory) and
returns a group ready to be added to a layer. Coordinates are drawing units
in the plan's own frame; the renderer translates the plan onto the sheet.
"""

import string
from typing import Any, Dict, Iterable, List, Tuple

import svgwrite

from ..config.drawing import (
    DEFAULT_SCALE,
    DRAWING_COLORS,
    FONTS,
    HATCH_PATTERNS,
    LINE_WEIGHTS,
    SHEET,
    get_drawing_param,
)
from ..dimensions.chain_builder import layout_dimension_span
from ..dimensions.dimension_types import DimensionSpan
from ..dimensions.formatting import format_feet_inches
from ..layout.layout_types import DoorSwing, RoomRecord, RoomType, StairDirection, StairRecord
from ..wall_geometry.wall_types import OpeningPlacement

BLACK = DRAWING_COLORS["BLACK"]
GRAY = DRAWING_COLORS["MEDIUM_GRAY"]


def _font(role: str) -> Dict[str, Any]:
    font = FONTS[role]
    return {
        "font_family": font["family"],
        "font_size": font["size"],
        "font_weight": font["weight"],
    }


def _line(dwg: svgwrite.Drawing, start, end, weight: str = "OUTLINE", color: str = BLACK, **extra):
    return dwg.line(start=start, end=end, stroke=color, stroke_width=LINE_WEIGHTS[weight], **extra)


# =============================================================================
# Hatch Patterns
# =============================================================================


def hatch_pattern(dwg: svgwrite.Drawing, hatch: Dict[str, Any]):
    """A user-space pattern of diagonal lines; two angles make a cross-hatch."""
    size = hatch["size"]
    pattern = dwg.pattern(id=hatch["id"], size=(size, size), patternUnits="userSpaceOnUse")
    for angle in hatch["lines"]:
        start, end = ((0, size), (size, 0)) if angle > 0 else ((0, 0), (size, size))
        pattern.add(dwg.line(
            start=start, end=end, stroke=hatch["color"], stroke_width=LINE_WEIGHTS["HATCH"],
        ))
    return pattern


def add_hatch_defs(dwg: svgwrite.Drawing) -> None:
    for hatch in HATCH_PATTERNS.values():
        dwg.defs.add(hatch_pattern(dwg, hatch))


# =============================================================================
# Openings
# =============================================================================


def _swing_leaf(dwg, group, x, y, width, thickness, horizontal, hinge_low: bool) -> None:
    """One hinged leaf drawn open at 90 degrees with its swing arc."""
    if horizontal:
        face = y + thickness
        hinge, tip = (x, x + width) if hinge_low else (x + width, x)
        open_end = (hinge, face + width)
        closed_end = (tip, face)
        group.add(_line(dwg, (hinge, face), open_end))
        sweep = 1 if hinge_low else 0
    else:
        face = x + thickness
        hinge, tip = (y, y + width) if hinge_low else (y + width, y)
        open_end = (face + width, hinge)
        closed_end = (face, tip)
        group.add(_line(dwg, (face, hinge), open_end))
        sweep = 0 if hinge_low else 1

    arc = (
        f"M {closed_end[0]:.3f},{closed_end[1]:.3f} "
        f"A {width:.3f},{width:.3f} 0 0,{sweep} {open_end[0]:.3f},{open_end[1]:.3f}"
    )
    group.add(dwg.path(
        d=arc, fill="none", stroke=GRAY,
        stroke_width=LINE_WEIGHTS["DIMENSION"], stroke_dasharray="2,1",
    ))


def door_symbol(dwg: svgwrite.Drawing, placement: OpeningPlacement, swing: DoorSwing):
    """Door leaf and swing arc, or a double line for sliding doors."""
    x, y = placement.x, placement.y
    width, thickness = placement.width, placement.thickness
    horizontal = placement.is_horizontal_wall
    group = dwg.g(class_="door", id=f"door-{placement.opening.opening_id}")

    if swing == DoorSwing.SLIDING:
        if horizontal:
            mid = y + thickness / 2
            group.add(_line(dwg, (x, mid - 1), (x + width, mid - 1)))
            group.add(_line(dwg, (x, mid + 1), (x + width, mid + 1)))
        else:
            mid = x + thickness / 2
            group.add(_line(dwg, (mid - 1, y), (mid - 1, y + width)))
            group.add(_line(dwg, (mid + 1, y), (mid + 1, y + width)))
    elif swing == DoorSwing.DOUBLE:
        half = width / 2
        if horizontal:
            _swing_leaf(dwg, group, x, y, half, thickness, True, True)
            _swing_leaf(dwg, group, x + half, y, half, thickness, True, False)
        else:
            _swing_leaf(dwg, group, x, y, half, thickness, False, True)
            _swing_leaf(dwg, group, x, y + half, half, thickness, False, False)
    else:
        _swing_leaf(dwg, group, x, y, width, thickness, horizontal, swing == DoorSwing.LEFT)

    return group


def window_symbol(dwg: svgwrite.Drawing, placement: OpeningPlacement):
    """Two frame lines a quarter thickness in from each face plus a centre glass line."""
    x, y = placement.x, placement.y
    width, thickness = placement.width, placement.thickness
    inset = thickness * 0.25
    group = dwg.g(class_="window", id=f"window-{placement.opening.opening_id}")

    offsets = [(inset, "OUTLINE"), (thickness - inset, "OUTLINE"), (thickness / 2, "MEDIUM")]
    for offset, weight in offsets:
        if placement.is_horizontal_wall:
            group.add(_line(dwg, (x, y + offset), (x + width, y + offset), weight))
        else:
            group.add(_line(dwg, (x + offset, y), (x + offset, y + width), weight))
    return group


# =============================================================================
# Stairs
# =============================================================================


def stair_symbol(dwg: svgwrite.Drawing, stair: StairRecord, scale: float):
    """Treads up to the cut line, a zigzag break, an arrow and an UP/DN note.

    The stair climbs along +y from (x, y); `run` is measured along y.
    """
    x, y = stair.x * scale, stair.y * scale
    width, run = stair.width * scale, stair.run * scale
    risers = max(stair.num_risers, 1)
    tread = run / risers
    break_index = int(risers * get_drawing_param("stair_break_fraction"))

    group = dwg.g(class_="stair", id=f"stair-{stair.id}")
    group.add(dwg.rect(
        insert=(x, y), size=(width, run), fill="none",
        stroke=BLACK, stroke_width=LINE_WEIGHTS["MEDIUM"],
    ))
    for i in range(break_index + 1):
        ty = y + i * tread
        group.add(_line(dwg, (x, ty), (x + width, ty), "MEDIUM"))

    by = y + break_index * tread
    group.add(dwg.polyline(
        points=[
            (x, by),
            (x + width * 0.3, by - 1.5),
            (x + width * 0.5, by + 1.5),
            (x + width * 0.7, by - 1.5),
            (x + width, by),
        ],
        fill="none", stroke=BLACK, stroke_width=LINE_WEIGHTS["OUTLINE"],
    ))

    cx = x + width / 2
    group.add(dwg.polygon(points=[(cx, y), (cx - 1.5, y + 3), (cx + 1.5, y + 3)], fill=BLACK))
    label = "UP" if stair.direction == StairDirection.UP else "DN"
    group.add(dwg.text(label, insert=(cx, y + run - 3), text_anchor="middle", fill=BLACK, **_font("NOTE")))
    return group


# =============================================================================
# Labels and Dimensions
# =============================================================================

UNLABELED_ROOM_TYPES = frozenset({RoomType.CLOSET, RoomType.HALLWAY})


def room_label(dwg: svgwrite.Drawing, room: RoomRecord, scale: float):
    """Room name, width x depth and area, centred in the room."""
    cx = (room.x + room.width / 2) * scale
    cy = (room.y + room.depth / 2) * scale
    group = dwg.g(class_="room-label", id=f"label-{room.id}")
    group.add(dwg.text(
        room.name.upper(), insert=(cx, cy - 3), text_anchor="middle", fill=BLACK, **_font("ROOM_LABEL"),
    ))
    group.add(dwg.text(
        f"{format_feet_inches(room.width)} × {format_feet_inches(room.depth)}",
        insert=(cx, cy + 2), text_anchor="middle", fill=GRAY, **_font("ROOM_AREA"),
    ))
    group.add(dwg.text(
        f"{round(room.area)} SF", insert=(cx, cy + 5.5), text_anchor="middle", fill=GRAY, **_font("ROOM_AREA"),
    ))
    return group


def dimension_symbol(dwg: svgwrite.Drawing, span: DimensionSpan, scale: float):
    """Extension lines, dimension line, ticks and label for one span."""
    graphic = layout_dimension_span(span, scale)
    group = dwg.g(class_="dimension")
    for start, end in graphic.extension_lines + [graphic.dimension_line] + graphic.ticks:
        group.add(_line(dwg, start, end, "DIMENSION"))

    lx, ly = graphic.label_position
    text = dwg.text(
        graphic.label, insert=(lx, ly), text_anchor="middle",
        fill=DRAWING_COLORS["DIMENSION_TEXT"], **_font("DIMENSION"),
    )
    if graphic.label_rotation:
        text["transform"] = f"rotate({graphic.label_rotation:g},{lx:.3f},{ly:.3f})"
    group.add(text)
    return group


# =============================================================================
# Reference Elements
# =============================================================================


def grid_label(index: int, numeric: bool) -> str:
    """1, 2, 3... for numeric grids; A, B, ... Z, A1, B1... otherwise."""
    if numeric:
        return str(index + 1)
    letters = string.ascii_uppercase
    cycle, pos = divmod(index, len(letters))
    return letters[pos] + (str(cycle) if cycle else "")


def grid_bubble(dwg: svgwrite.Drawing, center: Tuple[float, float], target: Tuple[float, float], label: str):
    """Circled grid reference with a dashed leader towards its wall line."""
    radius = get_drawing_param("grid_bubble_radius")
    cx, cy = center
    group = dwg.g(class_="grid-bubble")
    group.add(_line(dwg, center, target, "THIN", stroke_dasharray="6,2,1,2"))
    group.add(dwg.circle(center=center, r=radius, fill=DRAWING_COLORS["WHITE"],
                         stroke=BLACK, stroke_width=LINE_WEIGHTS["MEDIUM"]))
    group.add(dwg.text(label, insert=(cx, cy + 1.5), text_anchor="middle", fill=BLACK, **_font("NOTE")))
    return group


def grid_bubbles(
    dwg: svgwrite.Drawing,
    vertical_lines: Iterable[float],
    horizontal_lines: Iterable[float],
):
    """Numbered bubbles above vertical wall lines, lettered bubbles left of horizontal ones."""
    clearance = get_drawing_param("grid_bubble_clearance")
    group = dwg.g(id="layer-grid")
    for i, x in enumerate(sorted(vertical_lines)):
        group.add(grid_bubble(dwg, (x, -clearance), (x, 0.0), grid_label(i, numeric=True)))
    for i, y in enumerate(sorted(horizontal_lines)):
        group.add(grid_bubble(dwg, (-clearance, y), (0.0, y), grid_label(i, numeric=False)))
    return group


def section_marker(dwg: svgwrite.Drawing, center: Tuple[float, float], label: str, looking_right: bool):
    """Half-filled section-cut head with its reference letter."""
    radius = get_drawing_param("grid_bubble_radius")
    cx, cy = center
    side = 1 if looking_right else 0
    group = dwg.g(class_="section-marker")
    group.add(dwg.circle(center=center, r=radius, fill=DRAWING_COLORS["WHITE"],
                         stroke=BLACK, stroke_width=LINE_WEIGHTS["OUTLINE"]))
    group.add(dwg.path(
        d=f"M {cx:.3f},{cy - radius:.3f} A {radius:.3f},{radius:.3f} 0 0,{side} {cx:.3f},{cy + radius:.3f} Z",
        fill=BLACK,
    ))
    group.add(dwg.text(label, insert=(cx + (-radius - 2 if looking_right else radius + 2), cy + 1.5),
                       text_anchor="middle", fill=BLACK, **_font("NOTE")))
    return group


def section_markers(dwg: svgwrite.Drawing, width: float, depth: float, label: str = "A"):
    """A vertical section cut through the middle of the plan, marked top and bottom."""
    clearance = get_drawing_param("grid_bubble_clearance")
    x = width / 2
    group = dwg.g(id="layer-sections")
    group.add(_line(dwg, (x, -clearance), (x, depth + clearance), "THIN", stroke_dasharray="12,3,2,3"))
    group.add(section_marker(dwg, (x, -clearance), label, looking_right=True))
    group.add(section_marker(dwg, (x, depth + clearance), label, looking_right=True))
    return group


def north_arrow(dwg: svgwrite.Drawing, center: Tuple[float, float], size: float = SHEET["NORTH_ARROW_SIZE"]):
    x, y = center
    half = size / 2
    group = dwg.g(id="north-arrow")
    group.add(dwg.circle(center=center, r=half, fill="none", stroke=BLACK, stroke_width=LINE_WEIGHTS["OUTLINE"]))
    group.add(dwg.polygon(points=[(x, y - half + 2), (x - 3, y + 2), (x, y - 1), (x + 3, y + 2)], fill=BLACK))
    group.add(dwg.text("N", insert=(x, y - half - 2), text_anchor="middle", fill=BLACK, **_font("TITLE")))
    return group


def sheet_border(dwg: svgwrite.Drawing, sheet_width: float, sheet_height: float):
    inset = SHEET["BORDER_INSET"]
    return dwg.rect(
        insert=(inset, inset), size=(sheet_width - 2 * inset, sheet_height - 2 * inset),
        fill="none", stroke=BLACK, stroke_width=LINE_WEIGHTS["OUTLINE"],
    )


def scale_note(scale: float) -> str:
    if abs(scale - DEFAULT_SCALE) < 1e-9:
        return "Scale: 1/4\" = 1'-0\" (1:48)"
    return f"Scale: {scale:g} units = 1'-0\""


def title_block(
    dwg: svgwrite.Drawing,
    sheet_width: float,
    sheet_height: float,
    title: str,
    scale: float,
    total_area: float,
):
    """Title, scale and total area along the bottom of the sheet."""
    inset = SHEET["BORDER_INSET"]
    margin = SHEET["MARGIN"]
    top = sheet_height - SHEET["TITLE_BLOCK_HEIGHT"] - inset
    group = dwg.g(id="title-block")
    group.add(_line(dwg, (inset, top), (sheet_width - inset, top)))
    group.add(dwg.text(title, insert=(margin, top + 10), fill=BLACK, **_font("TITLE")))
    group.add(dwg.text(
        f"{scale_note(scale)}  |  Total: {total_area:.0f} SF",
        insert=(margin, top + 18), fill=DRAWING_COLORS["HATCH"], **_font("NOTE"),
    ))
    group.add(dwg.text(
        "FOR REFERENCE ONLY - NOT FOR CONSTRUCTION",
        insert=(sheet_width - margin, top + 10), text_anchor="end",
        fill=DRAWING_COLORS["HATCH"], **_font("NOTE"),
    ))
    return group


def unique_lines(values: Iterable[float], decimals: int = 3) -> List[float]:
    return sorted({round(v, decimals) for v in values})
