# File: tests/layout/test_layout_types.py

"""Tests for parsing generator layout JSON into layout records."""

import pytest

from src.floorplan_drafter.layout.layout_types import (
    DoorSwing,
    FloorPlanLayout,
    LayoutParseError,
    RoomRecord,
    RoomType,
    StairDirection,
    WallClass,
    WallRecord,
)
from tests.conftest import layout_dict, room_dict, wall_dict


class TestFloorPlanLayoutParsing:

    def test_parses_building_and_floors(self, single_room_data):
        layout = FloorPlanLayout.from_dict(single_room_data)

        assert layout.building.width == 20
        assert layout.building.depth == 15
        assert len(layout.floors) == 1
        floor = layout.floors[0]
        assert len(floor.rooms) == 1
        assert len(floor.walls) == 4
        assert floor.doors[0].swing == DoorSwing.LEFT
        assert floor.windows[0].width == 48

    def test_missing_building_raises(self):
        with pytest.raises(LayoutParseError):
            FloorPlanLayout.from_dict({"floors": []})

    def test_non_numeric_field_raises(self):
        data = layout_dict(20, 15, rooms=[room_dict("r", "Room", "living", "left", 0, 10, 10)])
        with pytest.raises(LayoutParseError, match="not numeric"):
            FloorPlanLayout.from_dict(data)

    def test_missing_wall_field_raises(self):
        wall = wall_dict("w", (0, 0), (10, 0))
        del wall["end_y"]
        with pytest.raises(LayoutParseError, match="end_y"):
            FloorPlanLayout.from_dict(layout_dict(20, 15, rooms=[], walls=[wall]))

    def test_missing_optional_sections_default(self):
        layout = FloorPlanLayout.from_dict({
            "building": {"total_width_ft": 30, "total_depth_ft": 40},
        })
        assert layout.floors == []
        assert layout.roof.roof_type == "gable"
        assert layout.building.style == "modern"

    def test_to_dict_uses_generator_keys(self, single_room_data):
        data = FloorPlanLayout.from_dict(single_room_data).to_dict()

        assert data["building"]["total_width_ft"] == 20
        assert data["floors"][0]["walls"][0]["type"] == "exterior"
        assert data["floors"][0]["rooms"][0]["type"] == "living"

    def test_get_floor_falls_back_to_first(self, single_room_layout):
        assert single_room_layout.get_floor(3).level == 0


class TestRecords:

    def test_unknown_room_type_becomes_other(self):
        room = RoomRecord.from_dict(room_dict("r", "Den", "sunroom", 0, 0, 10, 10))
        assert room.room_type == RoomType.OTHER

    def test_enum_tags_case_insensitive(self):
        wall = WallRecord.from_dict(wall_dict("w", (0, 0), (10, 0), wall_type="Exterior"))
        assert wall.wall_class == WallClass.EXTERIOR

    def test_wall_thickness_in_feet(self):
        wall = WallRecord.from_dict(wall_dict("w", (0, 0), (10, 0), thickness=6))
        assert wall.thickness_ft == pytest.approx(0.5)
        assert wall.length == pytest.approx(10.0)

    def test_room_area_and_extent(self):
        room = RoomRecord.from_dict(room_dict("r", "Bed", "bedroom", 2, 3, 12, 11))
        assert room.area == 132
        assert (room.max_x, room.max_y) == (14, 14)

    def test_stair_defaults(self):
        layout = FloorPlanLayout.from_dict(layout_dict(
            20, 15, rooms=[],
            stairs=[{"id": "s1", "x": 2, "y": 2, "width": 3.5, "run": 10}],
        ))
        stair = layout.floors[0].stairs[0]
        assert stair.direction == StairDirection.UP
        assert stair.num_risers == 14
