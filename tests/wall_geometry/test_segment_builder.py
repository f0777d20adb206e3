# File: tests/wall_geometry/test_segment_builder.py

"""Tests for wall segment construction.

Tests cover:
- Rectangle footprints for horizontal and vertical walls
- Degenerate wall filtering
- Duplicate wall removal and opening re-homing
- Opening offsets on forward and reversed walls
"""

import pytest

from src.floorplan_drafter.layout.layout_types import OpeningKind
from src.floorplan_drafter.wall_geometry.segment_builder import (
    build_segment,
    build_wall_segments,
    dedupe_walls,
)
from src.floorplan_drafter.wall_geometry.wall_types import Orientation
from tests.wall_geometry.conftest import HALF, SCALE, make_door, make_wall, make_window


# =============================================================================
# Footprints
# =============================================================================


class TestBuildSegment:
    """Tests for the four-corner footprint of a single wall."""

    def test_horizontal_wall_corners(self):
        seg = build_segment(make_wall("w", (0, 0), (10, 0)), SCALE)

        assert seg.orientation == Orientation.HORIZONTAL
        assert seg.top_left.x == pytest.approx(0.0)
        assert seg.top_left.y == pytest.approx(-HALF)
        assert seg.bottom_right.x == pytest.approx(63.5)
        assert seg.bottom_right.y == pytest.approx(HALF)
        assert seg.length == pytest.approx(63.5)

    def test_vertical_wall_corners(self):
        seg = build_segment(make_wall("w", (2, 0), (2, 10)), SCALE)

        assert seg.orientation == Orientation.VERTICAL
        assert seg.top_left.x == pytest.approx(2 * SCALE - HALF)
        assert seg.top_right.x == pytest.approx(2 * SCALE + HALF)
        assert seg.bottom_left.y == pytest.approx(63.5)

    def test_reversed_wall_uses_geometric_corners(self):
        seg = build_segment(make_wall("w", (10, 0), (0, 0)), SCALE)

        assert seg.is_reversed
        assert seg.axis_start == pytest.approx(0.0)
        assert seg.top_left.x < seg.top_right.x

    def test_thickness_is_converted_from_inches(self):
        seg = build_segment(make_wall("w", (0, 0), (10, 0), thickness=12.0), SCALE)
        assert seg.half_thickness == pytest.approx(SCALE / 2.0)

    def test_small_y_drift_still_horizontal(self):
        seg = build_segment(make_wall("w", (0, 0), (10, 0.005)), SCALE)
        assert seg.is_horizontal


class TestDegenerateWalls:
    """Walls that cannot be drawn are skipped."""

    def test_zero_length_wall_skipped(self):
        arena = build_wall_segments([make_wall("w", (3, 3), (3, 3))], scale=SCALE)
        assert len(arena) == 0

    def test_zero_thickness_wall_skipped(self):
        arena = build_wall_segments([make_wall("w", (0, 0), (10, 0), thickness=0)], scale=SCALE)
        assert len(arena) == 0

    def test_empty_input(self):
        assert len(build_wall_segments([], scale=SCALE)) == 0


# =============================================================================
# Deduplication
# =============================================================================


class TestDedupeWalls:
    """Tests for duplicate wall detection."""

    def test_same_direction_duplicate(self):
        walls = [make_wall("a", (0, 0), (10, 0)), make_wall("b", (0.2, 0), (10, 0.1))]
        unique, aliases = dedupe_walls(walls)

        assert [w.id for w in unique] == ["a"]
        assert aliases == {"b": ("a", False)}

    def test_reversed_duplicate(self):
        walls = [make_wall("a", (0, 0), (10, 0)), make_wall("b", (10, 0), (0, 0))]
        unique, aliases = dedupe_walls(walls)

        assert len(unique) == 1
        assert aliases["b"] == ("a", True)

    def test_distinct_walls_kept(self):
        walls = [make_wall("a", (0, 0), (10, 0)), make_wall("b", (0, 5), (10, 5))]
        unique, aliases = dedupe_walls(walls)

        assert len(unique) == 2
        assert aliases == {}

    def test_first_occurrence_wins(self):
        walls = [
            make_wall("first", (0, 0), (10, 0), thickness=6),
            make_wall("second", (0, 0), (10, 0), thickness=8),
        ]
        arena = build_wall_segments(walls, scale=SCALE)
        assert arena.ids() == ["first"]


# =============================================================================
# Openings
# =============================================================================


class TestOpeningAssignment:
    """Openings become offset ranges measured from the centreline low end."""

    def test_door_centred_on_position(self):
        arena = build_wall_segments(
            [make_wall("w", (0, 0), (10, 0))],
            doors=[make_door("d", "w", 5.0, width=36)],
            scale=SCALE,
        )
        opening = arena.get("w").openings[0]

        assert opening.kind == OpeningKind.DOOR
        assert opening.width == pytest.approx(3 * SCALE)
        assert opening.start_offset == pytest.approx(5 * SCALE - 1.5 * SCALE)

    def test_position_on_reversed_wall_measured_from_record_start(self):
        arena = build_wall_segments(
            [make_wall("w", (10, 0), (0, 0))],
            doors=[make_door("d", "w", 3.0, width=36)],
            scale=SCALE,
        )
        opening = arena.get("w").openings[0]

        # 3 ft from x=10 is x=7; near edge at x=5.5
        assert opening.start_offset == pytest.approx(5.5 * SCALE)

    def test_opening_on_duplicate_rehomed_to_survivor(self):
        arena = build_wall_segments(
            [make_wall("a", (0, 0), (10, 0)), make_wall("b", (10, 0), (0, 0))],
            windows=[make_window("win", "b", 3.0, width=36)],
            scale=SCALE,
        )
        openings = arena.get("a").openings

        assert "b" not in arena
        assert len(openings) == 1
        assert openings[0].opening_id == "win"
        assert openings[0].start_offset == pytest.approx(5.5 * SCALE)

    def test_opening_with_unknown_wall_dropped(self):
        arena = build_wall_segments(
            [make_wall("w", (0, 0), (10, 0))],
            doors=[make_door("d", "missing", 5.0)],
            scale=SCALE,
        )
        assert arena.get("w").openings == []

    def test_doors_and_windows_share_a_wall(self):
        arena = build_wall_segments(
            [make_wall("w", (0, 0), (20, 0))],
            doors=[make_door("d", "w", 4.0)],
            windows=[make_window("win", "w", 14.0)],
            scale=SCALE,
        )
        kinds = [o.kind for o in arena.get("w").sorted_openings()]
        assert kinds == [OpeningKind.DOOR, OpeningKind.WINDOW]
