"""Layout record types produced by the floor plan generator."""

from .layout_types import (
    LayoutParseError,
    RoomType,
    WallClass,
    DoorSwing,
    DoorKind,
    WindowKind,
    StairDirection,
    OpeningKind,
    WallRecord,
    DoorRecord,
    WindowRecord,
    RoomRecord,
    StairRecord,
    BuildingEnvelope,
    RoofDescriptor,
    FloorLayout,
    FloorPlanLayout,
)

__all__ = [
    "LayoutParseError",
    "RoomType",
    "WallClass",
    "DoorSwing",
    "DoorKind",
    "WindowKind",
    "StairDirection",
    "OpeningKind",
    "WallRecord",
    "DoorRecord",
    "WindowRecord",
    "RoomRecord",
    "StairRecord",
    "BuildingEnvelope",
    "RoofDescriptor",
    "FloorLayout",
    "FloorPlanLayout",
]
