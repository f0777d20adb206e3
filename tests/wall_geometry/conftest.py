# File: tests/wall_geometry/conftest.py

"""Shared helpers for wall geometry tests.

Walls default to 6" exterior walls. At the default scale of 6.35 drawing
units per foot a 6" wall is 3.175 units thick (half-thickness 1.5875).
"""

import pytest

from src.floorplan_drafter.config.drawing import DEFAULT_SCALE
from src.floorplan_drafter.layout.layout_types import (
    DoorRecord,
    WallClass,
    WallRecord,
    WindowRecord,
)

SCALE = DEFAULT_SCALE
HALF = 6.0 / 12.0 * SCALE / 2.0


def make_wall(
    wall_id: str,
    start: tuple,
    end: tuple,
    thickness: float = 6.0,
    wall_class: WallClass = WallClass.EXTERIOR,
) -> WallRecord:
    return WallRecord(
        id=wall_id,
        start=(float(start[0]), float(start[1])),
        end=(float(end[0]), float(end[1])),
        thickness=thickness,
        wall_class=wall_class,
    )


def make_door(door_id: str, wall_id: str, position: float, width: float = 36.0) -> DoorRecord:
    return DoorRecord(id=door_id, wall_id=wall_id, position_along_wall=position, width=width)


def make_window(window_id: str, wall_id: str, position: float, width: float = 48.0) -> WindowRecord:
    return WindowRecord(id=window_id, wall_id=wall_id, position_along_wall=position, width=width)


@pytest.fixture
def l_corner_walls():
    """Top wall and left wall meeting at the origin."""
    return [
        make_wall("h", (0, 0), (10, 0)),
        make_wall("v", (0, 0), (0, 10)),
    ]


@pytest.fixture
def t_junction_walls():
    """Two collinear walls along y=5 with a wall butting in from below."""
    return [
        make_wall("h1", (0, 5), (5, 5)),
        make_wall("h2", (5, 5), (10, 5)),
        make_wall("stem", (5, 5), (5, 10), thickness=4.5, wall_class=WallClass.INTERIOR),
    ]
