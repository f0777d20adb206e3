# File: src/floorplan_drafter/layout_validation/layout_validator.py

"""Post-generation validation of floor plan layouts.

Snaps the layout to the grid and runs every check on each floor
independently; no check short-circuits another. Room overlaps are the only
blocking errors. Everything else is a warning that is logged and reported
but never stops drawing.

Example:
    >>> result = validate_layout(layout)
    >>> if result.errors:
    ...     instruction = errors_to_refinement_instruction(result.errors)
"""

import logging
from typing import Iterable, List, Union

from ..layout.layout_types import (
    BuildingEnvelope,
    DoorRecord,
    FloorLayout,
    FloorPlanLayout,
    RoomType,
    WindowRecord,
)
from .snapping import snap_layout
from .validation_rules import (
    AREA_RATIO_LIMIT,
    ASPECT_SLACK,
    DOOR_BBOX_TOLERANCE_FT,
    DOORLESS_ROOM_TYPES,
    FOYER_MAX_AREA_SF,
    FORBIDDEN_ADJACENCY,
    HALLWAY_MAX_FRACTION,
    OPENING_TOLERANCE_FT,
    max_aspect_for,
    room_outside_envelope,
    rooms_adjacent,
    rooms_overlap,
)
from .validation_types import IssueCode, Severity, ValidationIssue, ValidationResult

logger = logging.getLogger(__name__)


# =============================================================================
# Room Checks
# =============================================================================


def check_room_overlaps(floor: FloorLayout) -> List[ValidationIssue]:
    issues = []
    rooms = floor.rooms
    for i, a in enumerate(rooms):
        for b in rooms[i + 1:]:
            if rooms_overlap(a, b):
                issues.append(ValidationIssue(
                    code=IssueCode.ROOM_OVERLAP,
                    message=f'Rooms "{a.name}" and "{b.name}" overlap',
                    room_ids=[a.id, b.id],
                    severity=Severity.ERROR,
                ))
    return issues


def check_envelope(floor: FloorLayout, envelope: BuildingEnvelope) -> List[ValidationIssue]:
    return [
        ValidationIssue(
            code=IssueCode.OUTSIDE_ENVELOPE,
            message=f'Room "{room.name}" extends outside building envelope',
            room_ids=[room.id],
        )
        for room in floor.rooms
        if room_outside_envelope(room, envelope.width, envelope.depth)
    ]


def check_aspect_ratios(floor: FloorLayout) -> List[ValidationIssue]:
    issues = []
    for room in floor.rooms:
        long_side = max(room.width, room.depth)
        short_side = min(room.width, room.depth)
        if short_side <= 0:
            continue
        aspect = long_side / short_side
        limit = max_aspect_for(room.room_type)
        if aspect > limit + ASPECT_SLACK:
            issues.append(ValidationIssue(
                code=IssueCode.BAD_ASPECT_RATIO,
                message=(
                    f'Room "{room.name}" aspect ratio {aspect:.1f}:1 '
                    f"exceeds max {limit:g}:1"
                ),
                room_ids=[room.id],
            ))
    return issues


def check_adjacency(floor: FloorLayout) -> List[ValidationIssue]:
    issues = []
    for type_a, type_b in FORBIDDEN_ADJACENCY:
        rooms_a = [r for r in floor.rooms if r.room_type == type_a]
        rooms_b = [r for r in floor.rooms if r.room_type == type_b]
        for a in rooms_a:
            for b in rooms_b:
                if rooms_adjacent(a, b):
                    issues.append(ValidationIssue(
                        code=IssueCode.ADJACENCY_VIOLATION,
                        message=(
                            f'"{a.name}" ({type_a.value}) should NOT be adjacent to '
                            f'"{b.name}" ({type_b.value})'
                        ),
                        room_ids=[a.id, b.id],
                    ))
    return issues


def check_area_ratios(floor: FloorLayout, envelope: BuildingEnvelope) -> List[ValidationIssue]:
    """Total area against the envelope, foyer size and hallway share."""
    issues = []
    garage_area = sum(r.area for r in floor.rooms if r.room_type == RoomType.GARAGE)
    room_area = sum(r.area for r in floor.rooms if r.room_type != RoomType.GARAGE)
    livable = envelope.area - garage_area

    if room_area > livable * AREA_RATIO_LIMIT:
        issues.append(ValidationIssue(
            code=IssueCode.AREA_EXCEEDS_ENVELOPE,
            message=(
                f"Total room area ({round(room_area)} SF) exceeds livable envelope "
                f"({round(livable)} SF) by >{round((AREA_RATIO_LIMIT - 1) * 100)}%"
            ),
        ))

    for foyer in (r for r in floor.rooms if r.room_type == RoomType.ENTRY):
        if foyer.area > FOYER_MAX_AREA_SF:
            issues.append(ValidationIssue(
                code=IssueCode.FOYER_TOO_LARGE,
                message=(
                    f'Foyer "{foyer.name}" is {round(foyer.area)} SF '
                    f"(max recommended: {FOYER_MAX_AREA_SF:g} SF)"
                ),
                room_ids=[foyer.id],
            ))

    hallways = [r for r in floor.rooms if r.room_type == RoomType.HALLWAY]
    hallway_area = sum(r.area for r in hallways)
    if room_area > 0 and hallway_area / room_area > HALLWAY_MAX_FRACTION:
        issues.append(ValidationIssue(
            code=IssueCode.HALLWAY_TOO_LARGE,
            message=(
                f"Hallway area ({round(hallway_area)} SF) is "
                f"{round(hallway_area / room_area * 100)}% of total "
                f"(max {round(HALLWAY_MAX_FRACTION * 100)}%)"
            ),
            room_ids=[h.id for h in hallways],
        ))

    return issues


def check_door_presence(floor: FloorLayout) -> List[ValidationIssue]:
    """Warn about rooms with no door-hosting wall inside their bounding box.

    A door counts for a room when its host wall lies within the room's
    rectangle grown by DOOR_BBOX_TOLERANCE_FT. This is a heuristic: a wall
    inside the box does not have to lie on the room's edge.
    """
    walls = {w.id: w for w in floor.walls}
    tol = DOOR_BBOX_TOLERANCE_FT
    rooms_with_doors = set()

    for door in floor.doors:
        wall = walls.get(door.wall_id)
        if wall is None:
            continue
        min_x, max_x = sorted((wall.start[0], wall.end[0]))
        min_y, max_y = sorted((wall.start[1], wall.end[1]))
        for room in floor.rooms:
            if (
                min_x >= room.x - tol
                and max_x <= room.max_x + tol
                and min_y >= room.y - tol
                and max_y <= room.max_y + tol
            ):
                rooms_with_doors.add(room.id)

    return [
        ValidationIssue(
            code=IssueCode.NO_DOOR,
            message=f'Room "{room.name}" may not have a door',
            room_ids=[room.id],
        )
        for room in floor.rooms
        if room.id not in rooms_with_doors and room.room_type not in DOORLESS_ROOM_TYPES
    ]


# =============================================================================
# Wall and Opening Checks
# =============================================================================


def check_walls(floor: FloorLayout) -> List[ValidationIssue]:
    return [
        ValidationIssue(
            code=IssueCode.INVALID_WALL_THICKNESS,
            message=f'Wall "{wall.id}" has invalid thickness {wall.thickness:g}"',
            element_ids=[wall.id],
        )
        for wall in floor.walls
        if wall.thickness <= 0
    ]


def check_openings(floor: FloorLayout) -> List[ValidationIssue]:
    """Openings must name an existing wall and fit within it."""
    issues = []
    walls = {w.id: w for w in floor.walls}
    openings: Iterable[Union[DoorRecord, WindowRecord]] = list(floor.doors) + list(floor.windows)

    for opening in openings:
        kind = "Door" if isinstance(opening, DoorRecord) else "Window"
        wall = walls.get(opening.wall_id)
        if wall is None:
            issues.append(ValidationIssue(
                code=IssueCode.UNKNOWN_WALL_REFERENCE,
                message=f'{kind} "{opening.id}" references unknown wall "{opening.wall_id}"',
                element_ids=[opening.id],
            ))
            continue

        half_width = opening.width / 24.0
        low = opening.position_along_wall - half_width
        high = opening.position_along_wall + half_width
        if low < -OPENING_TOLERANCE_FT or high > wall.length + OPENING_TOLERANCE_FT:
            issues.append(ValidationIssue(
                code=IssueCode.OPENING_OUTSIDE_WALL,
                message=(
                    f'{kind} "{opening.id}" extends past the ends of wall "{wall.id}"'
                ),
                element_ids=[opening.id, wall.id],
            ))
    return issues


# =============================================================================
# Main Entry Point
# =============================================================================


def validate_floor(floor: FloorLayout, envelope: BuildingEnvelope) -> List[ValidationIssue]:
    """Run every check on one (already snapped) floor."""
    issues: List[ValidationIssue] = []
    issues.extend(check_room_overlaps(floor))
    issues.extend(check_envelope(floor, envelope))
    issues.extend(check_aspect_ratios(floor))
    issues.extend(check_adjacency(floor))
    issues.extend(check_area_ratios(floor, envelope))
    issues.extend(check_door_presence(floor))
    issues.extend(check_walls(floor))
    issues.extend(check_openings(floor))
    for issue in issues:
        issue.level = floor.level
    return issues


def validate_layout(layout: FloorPlanLayout) -> ValidationResult:
    """Snap a layout to the grid and check it.

    Args:
        layout: Layout as produced by the generator. Not modified.

    Returns:
        ValidationResult with blocking errors, warnings and the snapped copy.
    """
    snapped = snap_layout(layout)
    errors: List[ValidationIssue] = []
    warnings: List[ValidationIssue] = []

    for floor in snapped.floors:
        for issue in validate_floor(floor, snapped.building):
            if issue.is_blocking:
                errors.append(issue)
            else:
                logger.warning(f"[{issue.code.value}] floor {floor.level}: {issue.message}")
                warnings.append(issue)

    logger.info(
        f"Validated {len(snapped.floors)} floor(s): "
        f"{len(errors)} error(s), {len(warnings)} warning(s)"
    )
    return ValidationResult(errors=errors, warnings=warnings, snapped_layout=snapped)


def errors_to_refinement_instruction(errors: List[ValidationIssue]) -> str:
    """Build the retry instruction sent back to the generator."""
    lines = "\n".join(f"- {e.message}" for e in errors)
    return (
        "The layout has the following critical issues that must be fixed:\n"
        f"{lines}\n\n"
        "Please fix these issues while maintaining the overall design intent. "
        "Ensure rooms do not overlap and all fit within the building envelope."
    )
