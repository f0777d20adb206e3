# File: src/floorplan_drafter/wall_geometry/__init__.py

"""Wall geometry pipeline.

Builds drawing-space wall footprints from layout records, cleans up
L-corners and T-junctions, and cuts door/window gaps into fill polygons.

Usage:
    from src.floorplan_drafter.wall_geometry import (
        build_wall_segments, resolve_junctions, cut_all_openings,
    )

    arena = build_wall_segments(floor.walls, floor.doors, floor.windows, scale)
    resolved = resolve_junctions(arena)
    fills = cut_all_openings(resolved)
"""

from .wall_types import (
    Orientation,
    Point,
    AssignedOpening,
    WallSegment,
    WallArena,
    WallFill,
    OpeningPlacement,
)

from .segment_builder import build_wall_segments, build_segment, dedupe_walls

from .junction_resolver import (
    JUNCTION_BUCKET_FT,
    JunctionType,
    JunctionSummary,
    endpoint_bucket_key,
    build_endpoint_index,
    classify_junctions,
    resolve_junctions,
)

from .opening_cutter import (
    hatch_for,
    cut_openings,
    cut_all_openings,
    opening_placement,
    opening_placements,
)

__all__ = [
    # Types
    "Orientation",
    "Point",
    "AssignedOpening",
    "WallSegment",
    "WallArena",
    "WallFill",
    "OpeningPlacement",
    # Builder
    "build_wall_segments",
    "build_segment",
    "dedupe_walls",
    # Junctions
    "JUNCTION_BUCKET_FT",
    "JunctionType",
    "JunctionSummary",
    "endpoint_bucket_key",
    "build_endpoint_index",
    "classify_junctions",
    "resolve_junctions",
    # Openings
    "hatch_for",
    "cut_openings",
    "cut_all_openings",
    "opening_placement",
    "opening_placements",
]
