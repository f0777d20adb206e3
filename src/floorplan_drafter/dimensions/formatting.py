# File: src/floorplan_drafter/dimensions/formatting.py

"""Feet-inches label formatting."""

import math


def format_feet_inches(value: float) -> str:
    """Format a length in feet as an architectural label.

    Inches are rounded half-up to the nearest whole inch and carried into
    the feet when they reach 12.

    Examples:
        >>> format_feet_inches(12.5)
        '12\\'-6"'
        >>> format_feet_inches(12.99)
        '13\\'-0"'
    """
    sign = "-" if value < 0 else ""
    value = abs(value)

    whole_feet = int(math.floor(value))
    inches = int(math.floor((value - whole_feet) * 12 + 0.5))
    if inches == 12:
        whole_feet += 1
        inches = 0

    return f"{sign}{whole_feet}'-{inches}\""
