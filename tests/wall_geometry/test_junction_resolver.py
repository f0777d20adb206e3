# File: tests/wall_geometry/test_junction_resolver.py

"""Tests for junction classification and corner cleanup.

Tests cover:
- Endpoint bucketing (round-half-up, coordinate noise, bucket boundaries)
- Classification (FREE_END, L_CORNER, T_JUNCTION, INLINE, UNRESOLVED)
- L-corner miters sharing outer and inner corners
- T-junction trimming to the through wall's near face
- Input arena left untouched
"""

import pytest

from src.floorplan_drafter.wall_geometry.junction_resolver import (
    JunctionType,
    build_endpoint_index,
    classify_junctions,
    endpoint_bucket_key,
    resolve_junctions,
)
from src.floorplan_drafter.wall_geometry.segment_builder import build_wall_segments
from src.floorplan_drafter.wall_geometry.wall_types import Point
from tests.wall_geometry.conftest import HALF, SCALE, make_wall


def _types(arena):
    return sorted(b.junction_type.value for b in build_endpoint_index(arena).values())


# =============================================================================
# Bucketing and Classification
# =============================================================================


class TestEndpointBucketKey:

    def test_origin(self):
        assert endpoint_bucket_key(Point(0.0, 0.0), 3.175) == (0, 0)

    def test_half_rounds_up(self):
        assert endpoint_bucket_key(Point(1.5875, -1.5875), 3.175) == (1, 0)

    def test_noise_stays_in_bucket(self):
        assert endpoint_bucket_key(Point(0.6, 31.7), 3.175) == (0, 10)

    def test_keys_split_across_bucket_boundary(self):
        # 0.24 ft and 0.26 ft fall either side of the 0.25 ft boundary
        left = endpoint_bucket_key(Point(0.24 * SCALE, 0.0), 0.5 * SCALE)
        right = endpoint_bucket_key(Point(0.26 * SCALE, 0.0), 0.5 * SCALE)
        assert left == (0, 0)
        assert right == (1, 0)


class TestClassification:

    def test_l_corner(self, l_corner_walls):
        arena = build_wall_segments(l_corner_walls, scale=SCALE)
        assert _types(arena) == ["free_end", "free_end", "l_corner"]

    def test_l_corner_with_coordinate_noise(self):
        arena = build_wall_segments(
            [make_wall("h", (0, 0), (10, 0)), make_wall("v", (0.1, 0), (0.1, 10))],
            scale=SCALE,
        )
        assert "l_corner" in _types(arena)

    def test_l_corner_straddling_bucket_boundary(self):
        walls = [
            make_wall("h", (0.24, 0), (10, 0)),
            make_wall("v", (0.26, 0), (0.26, 10)),
        ]
        summary = classify_junctions(build_wall_segments(walls, scale=SCALE)).to_dict()

        assert summary["l_corner"] == 1
        assert summary["free_end"] == 2

    def test_straddling_l_corner_is_mitered(self):
        walls = [
            make_wall("h", (0.24, 0), (10, 0)),
            make_wall("v", (0.26, 0), (0.26, 10)),
        ]
        resolved = resolve_junctions(build_wall_segments(walls, scale=SCALE))
        h, v = resolved.get("h"), resolved.get("v")

        joint_x = 0.26 * SCALE
        assert (h.top_left.x, h.top_left.y) == pytest.approx((joint_x - HALF, -HALF))
        assert (v.top_left.x, v.top_left.y) == pytest.approx((joint_x - HALF, -HALF))

    def test_ends_half_a_foot_apart_stay_separate(self):
        walls = [
            make_wall("h", (0, 0), (10, 0)),
            make_wall("v", (0.5, 0), (0.5, 10)),
        ]
        summary = classify_junctions(build_wall_segments(walls, scale=SCALE)).to_dict()

        assert summary["l_corner"] == 0
        assert summary["free_end"] == 4

    def test_t_junction(self, t_junction_walls):
        arena = build_wall_segments(t_junction_walls, scale=SCALE)
        assert _types(arena).count("t_junction") == 1

    def test_inline(self):
        arena = build_wall_segments(
            [make_wall("a", (0, 0), (5, 0)), make_wall("b", (5, 0), (10, 0))],
            scale=SCALE,
        )
        assert "inline" in _types(arena)

    def test_four_way_crossing_unresolved(self):
        arena = build_wall_segments(
            [
                make_wall("w", (0, 5), (5, 5)),
                make_wall("e", (5, 5), (10, 5)),
                make_wall("n", (5, 0), (5, 5)),
                make_wall("s", (5, 5), (5, 10)),
            ],
            scale=SCALE,
        )
        assert "unresolved" in _types(arena)

    def test_summary_counts(self, l_corner_walls):
        arena = build_wall_segments(l_corner_walls, scale=SCALE)
        summary = classify_junctions(arena).to_dict()

        assert summary["l_corner"] == 1
        assert summary["free_end"] == 2
        assert summary["t_junction"] == 0
        assert summary["total"] == 3


# =============================================================================
# L-Corner Miter
# =============================================================================


class TestLCornerMiter:

    def test_outer_and_inner_corners_coincide(self, l_corner_walls):
        resolved = resolve_junctions(build_wall_segments(l_corner_walls, scale=SCALE))
        h, v = resolved.get("h"), resolved.get("v")

        # Outer corner shared at (-half, -half)
        assert (h.top_left.x, h.top_left.y) == pytest.approx((-HALF, -HALF))
        assert (v.top_left.x, v.top_left.y) == pytest.approx((-HALF, -HALF))

        # Inner corner shared at (half, half)
        assert (h.bottom_left.x, h.bottom_left.y) == pytest.approx((HALF, HALF))
        assert (v.top_right.x, v.top_right.y) == pytest.approx((HALF, HALF))

    def test_far_ends_untouched(self, l_corner_walls):
        resolved = resolve_junctions(build_wall_segments(l_corner_walls, scale=SCALE))
        h = resolved.get("h")

        assert h.top_right.x == pytest.approx(63.5)
        assert h.bottom_right.x == pytest.approx(63.5)

    def test_reversed_walls_meet_at_opposite_corner(self):
        # Bottom-right corner of a room, both walls drawn towards it
        walls = [make_wall("h", (0, 10), (10, 10)), make_wall("v", (10, 0), (10, 10))]
        resolved = resolve_junctions(build_wall_segments(walls, scale=SCALE))
        h, v = resolved.get("h"), resolved.get("v")

        corner = 10 * SCALE
        assert (h.bottom_right.x, h.bottom_right.y) == pytest.approx((corner + HALF, corner + HALF))
        assert (v.bottom_right.x, v.bottom_right.y) == pytest.approx((corner + HALF, corner + HALF))
        assert (h.top_right.x, h.top_right.y) == pytest.approx((corner - HALF, corner - HALF))
        assert (v.bottom_left.x, v.bottom_left.y) == pytest.approx((corner - HALF, corner - HALF))

    def test_input_arena_unchanged(self, l_corner_walls):
        arena = build_wall_segments(l_corner_walls, scale=SCALE)
        resolve_junctions(arena)

        assert arena.get("h").top_left.x == pytest.approx(0.0)
        assert arena.get("v").top_left.y == pytest.approx(0.0)


# =============================================================================
# T-Junction Trim
# =============================================================================


class TestTJunctionTrim:

    def test_stem_from_below_trimmed_to_bottom_face(self, t_junction_walls):
        resolved = resolve_junctions(build_wall_segments(t_junction_walls, scale=SCALE))
        stem = resolved.get("stem")

        face = 5 * SCALE + HALF
        assert stem.top_left.y == pytest.approx(face)
        assert stem.top_right.y == pytest.approx(face)

    def test_stem_from_above_trimmed_to_top_face(self):
        walls = [
            make_wall("h1", (0, 5), (5, 5)),
            make_wall("h2", (5, 5), (10, 5)),
            make_wall("stem", (5, 0), (5, 5)),
        ]
        resolved = resolve_junctions(build_wall_segments(walls, scale=SCALE))
        stem = resolved.get("stem")

        face = 5 * SCALE - HALF
        assert stem.bottom_left.y == pytest.approx(face)
        assert stem.bottom_right.y == pytest.approx(face)

    def test_through_walls_not_modified(self, t_junction_walls):
        arena = build_wall_segments(t_junction_walls, scale=SCALE)
        resolved = resolve_junctions(arena)

        for wall_id in ("h1", "h2"):
            before = [p.as_tuple() for p in arena.get(wall_id).corners()]
            after = [p.as_tuple() for p in resolved.get(wall_id).corners()]
            assert after == before

    def test_vertical_through_wall(self):
        walls = [
            make_wall("v1", (5, 0), (5, 5)),
            make_wall("v2", (5, 5), (5, 10)),
            make_wall("arm", (5, 5), (0, 5)),
        ]
        resolved = resolve_junctions(build_wall_segments(walls, scale=SCALE))
        arm = resolved.get("arm")

        # Arm extends to the left, so it stops at the through wall's left face
        face = 5 * SCALE - HALF
        assert arm.top_right.x == pytest.approx(face)
        assert arm.bottom_right.x == pytest.approx(face)
