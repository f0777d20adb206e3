# File: src/floorplan_drafter/generation/prompts.py

"""Prompt text and tool schema for the layout generator.

The generator is asked to call a single function, `generate_floor_plan`,
whose arguments are the complete layout JSON understood by
FloorPlanLayout.from_dict().
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..layout.layout_types import (
    DoorKind,
    DoorSwing,
    FloorPlanLayout,
    RoomType,
    StairDirection,
    WallClass,
    WindowKind,
)

TOOL_NAME = "generate_floor_plan"


def _values(enum_cls) -> List[str]:
    return [member.value for member in enum_cls]


# =============================================================================
# Tool Schema
# =============================================================================

_ROOM_SCHEMA = {
    "type": "object",
    "properties": {
        "id": {"type": "string"},
        "name": {"type": "string"},
        "type": {"type": "string", "enum": [t for t in _values(RoomType) if t != RoomType.OTHER.value]},
        "x": {"type": "number", "description": "Room origin X in feet from the building origin"},
        "y": {"type": "number", "description": "Room origin Y in feet from the building origin"},
        "width": {"type": "number", "description": "Room width in feet (X axis)"},
        "depth": {"type": "number", "description": "Room depth in feet (Y axis)"},
        "ceiling_height": {"type": "number", "description": "Ceiling height in feet, default 9"},
    },
    "required": ["id", "name", "type", "x", "y", "width", "depth"],
}

_WALL_SCHEMA = {
    "type": "object",
    "properties": {
        "id": {"type": "string"},
        "start_x": {"type": "number"},
        "start_y": {"type": "number"},
        "end_x": {"type": "number"},
        "end_y": {"type": "number"},
        "thickness": {
            "type": "number",
            "description": "Wall thickness in inches. Exterior=5.5 (2x6), interior=3.5 (2x4)",
        },
        "type": {"type": "string", "enum": _values(WallClass)},
        "insulated": {"type": "boolean"},
    },
    "required": ["id", "start_x", "start_y", "end_x", "end_y", "thickness", "type"],
}

_DOOR_SCHEMA = {
    "type": "object",
    "properties": {
        "id": {"type": "string"},
        "wall_id": {"type": "string"},
        "position_along_wall": {
            "type": "number",
            "description": "Distance in feet from the wall start point to the door centre",
        },
        "width": {
            "type": "number",
            "description": "Door width in inches. Exterior=36, interior=32, bathroom=30, closet=24",
        },
        "swing": {"type": "string", "enum": _values(DoorSwing)},
        "type": {"type": "string", "enum": _values(DoorKind)},
    },
    "required": ["id", "wall_id", "position_along_wall", "width", "swing", "type"],
}

_WINDOW_SCHEMA = {
    "type": "object",
    "properties": {
        "id": {"type": "string"},
        "wall_id": {"type": "string"},
        "position_along_wall": {
            "type": "number",
            "description": "Distance in feet from the wall start point to the window centre",
        },
        "width": {"type": "number", "description": "Window width in inches"},
        "height": {"type": "number", "description": "Window height in inches"},
        "sill_height": {"type": "number", "description": "Sill height above the floor in inches"},
        "type": {"type": "string", "enum": _values(WindowKind)},
    },
    "required": ["id", "wall_id", "position_along_wall", "width", "height", "type"],
}

_STAIR_SCHEMA = {
    "type": "object",
    "properties": {
        "id": {"type": "string"},
        "x": {"type": "number"},
        "y": {"type": "number"},
        "width": {"type": "number", "description": "Stair width in feet"},
        "run": {"type": "number", "description": "Total run in feet"},
        "direction": {"type": "string", "enum": _values(StairDirection)},
        "num_risers": {"type": "integer"},
        "riser_height": {"type": "number", "description": "In inches"},
        "tread_depth": {"type": "number", "description": "In inches"},
    },
    "required": ["id", "x", "y", "width", "run", "direction", "num_risers"],
}

FLOOR_PLAN_TOOL_SCHEMA: Dict[str, Any] = {
    "type": "function",
    "function": {
        "name": TOOL_NAME,
        "description": "Generate a structured floor plan layout with rooms, walls, doors, windows and stairs.",
        "parameters": {
            "type": "object",
            "properties": {
                "building": {
                    "type": "object",
                    "properties": {
                        "total_width_ft": {"type": "number"},
                        "total_depth_ft": {"type": "number"},
                        "num_storeys": {"type": "integer"},
                        "style": {"type": "string"},
                    },
                    "required": ["total_width_ft", "total_depth_ft", "num_storeys", "style"],
                },
                "floors": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "level": {"type": "integer", "description": "0 = ground floor"},
                            "rooms": {"type": "array", "items": _ROOM_SCHEMA},
                            "walls": {"type": "array", "items": _WALL_SCHEMA},
                            "doors": {"type": "array", "items": _DOOR_SCHEMA},
                            "windows": {"type": "array", "items": _WINDOW_SCHEMA},
                            "stairs": {"type": "array", "items": _STAIR_SCHEMA},
                        },
                        "required": ["level", "rooms", "walls", "doors", "windows"],
                    },
                },
                "roof": {
                    "type": "object",
                    "properties": {
                        "type": {"type": "string", "enum": ["gable", "hip", "flat", "shed", "gambrel"]},
                        "pitch": {"type": "number", "description": "Rise per 12 of run"},
                        "overhang_ft": {"type": "number"},
                    },
                    "required": ["type", "pitch", "overhang_ft"],
                },
            },
            "required": ["building", "floors", "roof"],
        },
    },
}


# =============================================================================
# Prompts
# =============================================================================

SYSTEM_PROMPT = """You are a residential architect and space planner. Produce realistic, buildable floor plan layouts as structured JSON by calling the generate_floor_plan function.

Rules, in priority order:
1. Adjacency: kitchen next to dining; primary bedroom away from living areas; bathrooms back to back or stacked; laundry on an exterior wall; garage entry through a mudroom or utility room. Never place a bathroom or ensuite next to the kitchen, a garage next to a bedroom or living room, or the kitchen next to a bedroom.
2. Open concept: no wall between kitchen and living/dining. Model them as adjacent rooms with no wall on their shared edge.
3. Circulation: include a hallway (type "hallway", at least 3.5 ft wide) from the living area to the bedrooms. Every room must be reachable through doors.
4. Walls: exterior 5.5" thick, interior and partition 3.5". All walls axis-aligned. Exterior walls form a closed perimeter and every wall end meets another wall.
5. Front entry: a 36" exterior door on the bottom (street-facing) exterior wall.
6. Windows: every habitable room on an exterior wall gets windows; bedrooms at least one 36" egress window, living rooms three or more.
7. Sizes: primary bedroom 14x16 min, secondary 11x12, full bath 5x8, ensuite 8x10, kitchen 10x12, living 14x16, dining 10x12, garage 12x22 single or 22x22 double, closets 3x5 reach-in or 6x6 walk-in. Entry foyers no larger than 80 sq ft.
8. Doors: every room has one. Exterior 36", interior 32", bathroom 30", closet 24". Each bedroom has its own closet room with a door into the bedroom.
9. Coordinates: feet from the building origin (0, 0) at the top-left; +x right, +y down. Rooms must not overlap and must stay inside the building envelope.

When given a previous layout and a refinement instruction, return the complete revised layout, changing only what the instruction asks for."""


@dataclass
class DesignRequest:
    """Design brief for a new layout."""

    style: str = "modern"
    num_bedrooms: int = 3
    num_bathrooms: float = 2
    target_sqft: float = 1800
    num_storeys: int = 1
    has_garage: bool = False
    garage_type: str = "attached"
    location_country: str = "US"
    location_region: str = ""
    exterior_materials: List[str] = field(default_factory=list)
    description: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DesignRequest":
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)


def build_generation_prompt(request: DesignRequest) -> str:
    """User message for a fresh layout."""
    materials = ", ".join(request.exterior_materials) or "standard"
    if request.has_garage:
        size = "double" if request.num_bedrooms >= 3 else "single"
        garage = f"{request.garage_type} {size} garage"
    else:
        garage = "no garage"
    location = (
        f"{request.location_region}, {request.location_country}"
        if request.location_region
        else request.location_country
    )
    storeys = "storey" if request.num_storeys == 1 else "storeys"

    lines = [
        f"Design a {request.style.replace('_', ' ')} style residential floor plan with:",
        f"- {request.num_bedrooms} bedrooms, {request.num_bathrooms:g} bathrooms",
        f"- Target area: ~{request.target_sqft:g} sq ft",
        f"- {request.num_storeys} {storeys}",
        f"- {garage}",
        f"- Exterior materials: {materials}",
        f"- Location: {location}",
    ]
    if request.description:
        lines.append(f"- Additional requirements: {request.description}")
    lines.append("")
    lines.append(
        "Generate the complete layout with all rooms, walls with proper thicknesses, "
        "doors with swing directions, and windows with sizes and types."
    )
    return "\n".join(lines)


def build_refinement_prompt(previous: FloorPlanLayout, instruction: str) -> str:
    """User message asking for a full replacement of `previous`."""
    layout_json = json.dumps(previous.to_dict(), indent=2)
    return (
        "Here is the current floor plan layout:\n"
        f"```json\n{layout_json}\n```\n\n"
        f'Refinement request: "{instruction}"\n\n'
        "Return the complete modified layout. Keep every room, wall, door and window "
        "the request does not concern unchanged, and keep walls connected."
    )
