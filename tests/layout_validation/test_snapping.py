# File: tests/layout_validation/test_snapping.py

"""Tests for grid snapping."""

import pytest

from src.floorplan_drafter.layout.layout_types import FloorPlanLayout
from src.floorplan_drafter.layout_validation.snapping import snap_layout, snap_value
from tests.conftest import layout_dict, room_dict, wall_dict


def _on_grid(value: float, grid: float = 0.5) -> bool:
    steps = value / grid
    return abs(steps - round(steps)) < 1e-9


@pytest.fixture
def noisy_layout():
    return FloorPlanLayout.from_dict(layout_dict(
        30.1, 20.26,
        rooms=[
            room_dict("r1", "Living", "living", 0.1, 0.2, 14.8, 12.26),
            room_dict("r2", "Kitchen", "kitchen", 14.74, 0.0, 15.3, 11.9),
        ],
        walls=[wall_dict("w1", (0.1, 0.2), (30.2, 0.24), thickness=5.5)],
        doors=[{"id": "d1", "wall_id": "w1", "position_along_wall": 3.33, "width": 34}],
        stairs=[{"id": "s1", "x": 1.3, "y": 12.8, "width": 3.4, "run": 10.1}],
    ))


class TestSnapValue:

    def test_rounds_to_nearest_half_foot(self):
        assert snap_value(2.26) == 2.5
        assert snap_value(2.24) == 2.0

    def test_half_way_rounds_up(self):
        assert snap_value(2.25) == 2.5

    def test_custom_grid(self):
        assert snap_value(7.4, grid=1.0) == 7.0


class TestSnapLayout:

    def test_every_coordinate_on_grid(self, noisy_layout):
        snapped = snap_layout(noisy_layout)
        floor = snapped.floors[0]

        assert _on_grid(snapped.building.width) and _on_grid(snapped.building.depth)
        for room in floor.rooms:
            assert all(_on_grid(v) for v in (room.x, room.y, room.width, room.depth))
        for wall in floor.walls:
            assert all(_on_grid(v) for v in wall.start + wall.end)
        for stair in floor.stairs:
            assert all(_on_grid(v) for v in (stair.x, stair.y, stair.width, stair.run))

    def test_idempotent(self, noisy_layout):
        once = snap_layout(noisy_layout)
        twice = snap_layout(once)
        assert twice.to_dict() == once.to_dict()

    def test_input_not_mutated(self, noisy_layout):
        before = noisy_layout.to_dict()
        snap_layout(noisy_layout)
        assert noisy_layout.to_dict() == before

    def test_thickness_and_openings_untouched(self, noisy_layout):
        floor = snap_layout(noisy_layout).floors[0]
        assert floor.walls[0].thickness == 5.5
        assert floor.doors[0].position_along_wall == 3.33
        assert floor.doors[0].width == 34
