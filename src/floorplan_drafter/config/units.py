# File: src/floorplan_drafter/config/units.py

"""
Unit management and conversion functionality for the Floor Plan Drafter.

Layouts arrive in mixed units: plan coordinates and room sizes in feet,
wall thicknesses and opening widths in inches. Drawing space is measured in
drawing units, a linear scale of feet (see DRAWING_PARAMS["scale"]).
"""

from enum import Enum
from typing import Union, Dict


class ProjectUnits(Enum):
    """
    Enumeration of supported layout units.
    Using an enum provides type safety and autocompletion support.
    """
    FEET = "feet"
    INCHES = "inches"
    METERS = "meters"


# Conversion factors to feet
_CONVERSION_TO_FEET: Dict[ProjectUnits, float] = {
    ProjectUnits.FEET: 1.0,
    ProjectUnits.INCHES: 1 / 12.0,
    ProjectUnits.METERS: 3.28084,
}


def convert_to_feet(value: float, current_units: Union[ProjectUnits, str]) -> float:
    """
    Converts a value from the specified units to feet.

    Args:
        value: The numeric value to convert
        current_units: The units to convert from (ProjectUnits enum or string)

    Returns:
        The value converted to feet

    Raises:
        ValueError: If the provided units are not supported
    """
    if isinstance(current_units, str):
        try:
            current_units = ProjectUnits(current_units.lower())
        except ValueError:
            raise ValueError(f"Unsupported unit: {current_units}")

    conversion_factor = _CONVERSION_TO_FEET.get(current_units)
    if conversion_factor is None:
        raise ValueError(f"No conversion factor found for {current_units}")

    return value * conversion_factor


def feet_to_drawing(feet: float, scale: float) -> float:
    """Convert a length in feet to drawing units at the given scale."""
    return feet * scale


def inches_to_drawing(inches: float, scale: float) -> float:
    """Convert a length in inches to drawing units at the given scale."""
    return inches / 12.0 * scale
