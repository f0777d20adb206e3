# File: src/floorplan_drafter/layout_validation/validation_types.py

"""Result types for layout validation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..layout.layout_types import FloorPlanLayout


class Severity(Enum):
    """How an issue affects the pipeline."""

    ERROR = "error"
    """Blocking: triggers the single automatic refinement retry."""

    WARNING = "warning"
    """Reported and logged, never blocks drawing."""


class IssueCode(Enum):
    ROOM_OVERLAP = "ROOM_OVERLAP"
    OUTSIDE_ENVELOPE = "OUTSIDE_ENVELOPE"
    BAD_ASPECT_RATIO = "BAD_ASPECT_RATIO"
    ADJACENCY_VIOLATION = "ADJACENCY_VIOLATION"
    AREA_EXCEEDS_ENVELOPE = "AREA_EXCEEDS_ENVELOPE"
    NO_DOOR = "NO_DOOR"
    FOYER_TOO_LARGE = "FOYER_TOO_LARGE"
    HALLWAY_TOO_LARGE = "HALLWAY_TOO_LARGE"
    UNKNOWN_WALL_REFERENCE = "UNKNOWN_WALL_REFERENCE"
    OPENING_OUTSIDE_WALL = "OPENING_OUTSIDE_WALL"
    INVALID_WALL_THICKNESS = "INVALID_WALL_THICKNESS"


@dataclass
class ValidationIssue:
    """One problem found in a layout.

    Attributes:
        code: Machine-readable issue code.
        message: Human-readable description, also used in refinement prompts.
        room_ids: Rooms involved, if any.
        severity: Error or warning.
        level: Floor level the issue was found on.
        element_ids: Walls or openings involved, if any.
    """

    code: IssueCode
    message: str
    room_ids: List[str] = field(default_factory=list)
    severity: Severity = Severity.WARNING
    level: Optional[int] = None
    element_ids: List[str] = field(default_factory=list)

    @property
    def is_blocking(self) -> bool:
        return self.severity == Severity.ERROR

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code.value,
            "message": self.message,
            "room_ids": list(self.room_ids),
            "element_ids": list(self.element_ids),
            "severity": self.severity.value,
            "level": self.level,
        }


@dataclass
class ValidationResult:
    """Outcome of validate_layout().

    `snapped_layout` is always a fresh copy; the input layout is untouched.
    """

    errors: List[ValidationIssue]
    warnings: List[ValidationIssue]
    snapped_layout: FloorPlanLayout

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def issues_with_code(self, code: IssueCode) -> List[ValidationIssue]:
        return [i for i in self.errors + self.warnings if i.code == code]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
            "snapped_layout": self.snapped_layout.to_dict(),
        }
