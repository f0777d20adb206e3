# File: src/floorplan_drafter/layout_validation/__init__.py

"""Layout snapping and structural sanity checks.

Usage:
    from src.floorplan_drafter.layout_validation import validate_layout

    result = validate_layout(layout)
    for issue in result.warnings:
        print(issue.code.value, issue.message)
"""

from .validation_types import Severity, IssueCode, ValidationIssue, ValidationResult

from .snapping import snap_value, snap_layout

from .validation_rules import (
    MAX_ASPECT,
    FORBIDDEN_ADJACENCY,
    max_aspect_for,
    rooms_overlap,
    rooms_adjacent,
)

from .layout_validator import (
    validate_floor,
    validate_layout,
    errors_to_refinement_instruction,
)

__all__ = [
    "Severity",
    "IssueCode",
    "ValidationIssue",
    "ValidationResult",
    "snap_value",
    "snap_layout",
    "MAX_ASPECT",
    "FORBIDDEN_ADJACENCY",
    "max_aspect_for",
    "rooms_overlap",
    "rooms_adjacent",
    "validate_floor",
    "validate_layout",
    "errors_to_refinement_instruction",
]
