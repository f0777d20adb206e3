# File: src/floorplan_drafter/config/__init__.py

"""
Configuration package for the Floor Plan Drafter.
Provides a unified interface to:
- Unit conversion between feet, inches and drawing units
- Drawing scale, tolerances, line weights and hatch patterns
"""

from .units import (
    ProjectUnits,
    convert_to_feet,
    feet_to_drawing,
    inches_to_drawing,
)

from .drawing import (
    DEFAULT_SCALE,
    DRAWING_PARAMS,
    LINE_WEIGHTS,
    DRAWING_COLORS,
    SHEET,
    FONTS,
    HATCH_PATTERNS,
    get_drawing_param,
)
