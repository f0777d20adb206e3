# File: src/floorplan_drafter/config/drawing.py

"""
Drawing-specific configuration for the Floor Plan Drafter.

This module contains the sheet scale, geometric tolerances, line weights,
hatch patterns and dimension-chain offsets used by the wall geometry,
dimension and rendering packages.
"""

from typing import Any, Dict


# 1/4" = 1'-0" (1:48) expressed as drawing units per foot
DEFAULT_SCALE = 6.35


DRAWING_PARAMS: Dict[str, Any] = {
    # Sheet scale
    "scale": DEFAULT_SCALE,
    # Layout grid
    "snap_grid_ft": 0.5,
    # Wall geometry tolerances
    "duplicate_wall_tolerance_ft": 0.5,  # endpoints closer than this are the same wall
    "junction_bucket_ft": 0.5,  # snap-bucket size for endpoint matching
    "orientation_epsilon_ft": 0.01,  # |dy| below this means horizontal
    "min_gap": 1e-6,  # drawing units; fill pieces shorter than this are dropped
    # Dimension chains
    "room_merge_threshold_ft": 3.0,
    "detail_offset": 12.0,  # drawing units outward from the envelope
    "room_offset": 24.0,
    "overall_offset": 36.0,
    "interior_dimension_inset": 4.0,  # drawing units inward from a room edge
    "extension_overshoot": 2.0,
    "tick_size": 2.5,
    "label_gap": 1.5,  # drawing units between a dimension line and its text
    # Symbols
    "stair_break_fraction": 0.5,
    "grid_bubble_radius": 5.0,
    "grid_bubble_clearance": 48.0,
}


LINE_WEIGHTS: Dict[str, float] = {
    "CUT": 2.5,
    "OUTLINE": 1.4,
    "MEDIUM": 1.0,
    "DIMENSION": 0.6,
    "HATCH": 0.4,
    "THIN": 0.3,
}


DRAWING_COLORS: Dict[str, str] = {
    "BLACK": "#000000",
    "WHITE": "#ffffff",
    "MEDIUM_GRAY": "#666666",
    "HATCH": "#333333",
    "DIMENSION_TEXT": "#000000",
}


SHEET: Dict[str, float] = {
    "MARGIN": 20.0,
    "TITLE_BLOCK_HEIGHT": 30.0,
    "BORDER_INSET": 2.0,
    "NORTH_ARROW_SIZE": 16.0,
}


FONTS: Dict[str, Dict[str, Any]] = {
    "ROOM_LABEL": {"family": "Helvetica, Arial, sans-serif", "size": 4.5, "weight": "600"},
    "ROOM_AREA": {"family": "Courier New, monospace", "size": 3.8, "weight": "400"},
    "DIMENSION": {"family": "Courier New, monospace", "size": 4.0, "weight": "400"},
    "NOTE": {"family": "Helvetica, Arial, sans-serif", "size": 3.5, "weight": "400"},
    "TITLE": {"family": "Helvetica, Arial, sans-serif", "size": 5.0, "weight": "700"},
}


# Hatch pattern definitions keyed by wall class value. "lines" are rotation
# angles in degrees; two angles draw a cross-hatch.
HATCH_PATTERNS: Dict[str, Dict[str, Any]] = {
    "exterior": {"id": "hatch-exterior", "size": 2.5, "lines": (45, -45), "color": "#333333"},
    "interior": {"id": "hatch-interior", "size": 3.0, "lines": (45,), "color": "#666666"},
    "partition": {"id": "hatch-partition", "size": 3.0, "lines": (45,), "color": "#666666"},
}


def get_drawing_param(name: str, default: Any = None) -> Any:
    """
    Look up a drawing parameter by name.

    Args:
        name: Key in DRAWING_PARAMS
        default: Value returned when the key is absent; if None a missing
            key raises KeyError

    Returns:
        The configured parameter value
    """
    if name in DRAWING_PARAMS:
        return DRAWING_PARAMS[name]
    if default is not None:
        return default
    raise KeyError(f"Unknown drawing parameter: {name}")
