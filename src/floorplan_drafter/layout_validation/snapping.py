# File: src/floorplan_drafter/layout_validation/snapping.py

"""Grid snapping for generated layouts.

Rounds every plan coordinate and room/stair size to the snap grid (0.5 ft by
default), half-up. Wall thicknesses, opening widths and opening positions
are left alone. Snapping always returns a new layout and is idempotent.
"""

import copy
import math
from typing import Optional

from ..config.drawing import get_drawing_param
from ..layout.layout_types import FloorPlanLayout


def snap_value(value: float, grid: Optional[float] = None) -> float:
    """Round a value to the nearest grid multiple, halves rounding up."""
    if grid is None:
        grid = get_drawing_param("snap_grid_ft")
    return math.floor(value / grid + 0.5) * grid


def snap_layout(layout: FloorPlanLayout, grid: Optional[float] = None) -> FloorPlanLayout:
    """Return a copy of `layout` with all coordinates on the snap grid.

    Covers the envelope, room rectangles, wall endpoints and stair
    rectangles on every floor.
    """
    if grid is None:
        grid = get_drawing_param("snap_grid_ft")

    def snap(v: float) -> float:
        return snap_value(v, grid)

    snapped = copy.deepcopy(layout)
    snapped.building.width = snap(snapped.building.width)
    snapped.building.depth = snap(snapped.building.depth)

    for floor in snapped.floors:
        for room in floor.rooms:
            room.x = snap(room.x)
            room.y = snap(room.y)
            room.width = snap(room.width)
            room.depth = snap(room.depth)
        for wall in floor.walls:
            wall.start = (snap(wall.start[0]), snap(wall.start[1]))
            wall.end = (snap(wall.end[0]), snap(wall.end[1]))
        for stair in floor.stairs:
            stair.x = snap(stair.x)
            stair.y = snap(stair.y)
            stair.width = snap(stair.width)
            stair.run = snap(stair.run)

    return snapped
