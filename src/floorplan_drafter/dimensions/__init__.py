# File: src/floorplan_drafter/dimensions/__init__.py

"""Dimension chain generation.

Usage:
    from src.floorplan_drafter.dimensions import build_dimension_chains, format_feet_inches

    chains = build_dimension_chains(floor, layout.building)
    print(format_feet_inches(chains[0].overall))
"""

from .formatting import format_feet_inches

from .dimension_types import (
    ChainSide,
    DimensionLevelKind,
    DimensionSpan,
    DimensionLevel,
    DimensionChain,
    DimensionGraphic,
)

from .chain_builder import (
    boundary_coordinates,
    merge_short_spans,
    build_chain,
    build_dimension_chains,
    build_room_dimensions,
    layout_dimension_span,
)

__all__ = [
    "format_feet_inches",
    "ChainSide",
    "DimensionLevelKind",
    "DimensionSpan",
    "DimensionLevel",
    "DimensionChain",
    "DimensionGraphic",
    "boundary_coordinates",
    "merge_short_spans",
    "build_chain",
    "build_dimension_chains",
    "build_room_dimensions",
    "layout_dimension_span",
]
