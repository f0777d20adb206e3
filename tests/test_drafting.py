# File: tests/test_drafting.py

"""End-to-end tests: layout in, drawing tree out."""

import pytest

from src.floorplan_drafter.drafting import EmptyLayoutError, draft_floor_plan
from src.floorplan_drafter.dimensions import DimensionLevelKind
from src.floorplan_drafter.layout.layout_types import FloorPlanLayout
from tests.conftest import layout_dict, perimeter_walls, room_dict


@pytest.fixture
def box_layout():
    """20 x 15 room inside four exterior walls, no openings."""
    return FloorPlanLayout.from_dict(layout_dict(
        20, 15,
        rooms=[room_dict("r1", "Living", "living", 0, 0, 20, 15)],
        walls=perimeter_walls(20, 15),
    ))


class TestDraftFloorPlan:

    def test_simple_box(self, box_layout):
        result = draft_floor_plan(box_layout)
        drawing = result.drawing

        assert result.validation.errors == []
        assert len(drawing.fills) == 4
        assert drawing.junctions.to_dict()["l_corner"] == 4
        assert len(drawing.dimension_chains) == 4
        for chain in drawing.dimension_chains:
            assert len(chain.levels) == 3
        assert drawing.dimension_chains[0].overall == 20
        assert drawing.dimension_chains[2].overall == 15

    def test_box_corners_closed(self, box_layout):
        arena = draft_floor_plan(box_layout).drawing.arena
        top, left = arena.get("w-top"), arena.get("w-left")

        assert top.top_left.as_tuple() == pytest.approx(left.top_left.as_tuple())

    def test_openings_cut_and_placed(self, single_room_layout):
        drawing = draft_floor_plan(single_room_layout).drawing

        # One door and one window, each splitting its wall in two
        assert len(drawing.fills) == 6
        assert len(drawing.openings) == 2

    def test_drawing_uses_snapped_layout(self):
        layout = FloorPlanLayout.from_dict(layout_dict(
            20.1, 14.9,
            rooms=[room_dict("r1", "Living", "living", 0.1, 0, 19.9, 15.1)],
        ))
        drawing = draft_floor_plan(layout).drawing

        assert drawing.envelope.width == 20.0
        assert drawing.rooms[0].x == 0.0

    def test_interior_wall_t_junctions(self, two_room_data):
        drawing = draft_floor_plan(FloorPlanLayout.from_dict(two_room_data)).drawing
        summary = drawing.junctions.to_dict()

        assert summary["t_junction"] == 2
        assert summary["l_corner"] == 4
        detail = drawing.dimension_chains[0].level(DimensionLevelKind.DETAIL)
        assert detail.coordinates() == [0.0, 12.0, 24.0]

    def test_scale_override(self, box_layout):
        drawing = draft_floor_plan(box_layout, scale=10.0).drawing
        assert drawing.width == pytest.approx(200.0)
        assert drawing.arena.scale == 10.0

    def test_total_area(self, box_layout):
        assert draft_floor_plan(box_layout).drawing.total_area == 300

    def test_invalid_layout_still_drafted(self):
        layout = FloorPlanLayout.from_dict(layout_dict(30, 30, [
            room_dict("r1", "Living", "living", 0, 0, 12, 12),
            room_dict("r2", "Office", "office", 6, 6, 12, 12),
        ]))
        result = draft_floor_plan(layout)

        assert len(result.validation.errors) == 1
        assert len(result.drawing.rooms) == 2

    def test_empty_layout_raises(self):
        layout = FloorPlanLayout.from_dict({"building": {"total_width_ft": 20, "total_depth_ft": 15}})
        with pytest.raises(EmptyLayoutError):
            draft_floor_plan(layout)
