# File: src/floorplan_drafter/layout/layout_types.py

"""Data models for generated floor plan layouts.

Defines the record types produced by the layout generator and consumed by
the validator and the wall geometry pipeline. Plan coordinates and room
sizes are in feet; wall thicknesses and opening widths are in inches, as the
generator emits them.

Key Types:
    RoomType / WallClass / DoorSwing: Tagged classifications that drive the
        validation rule tables and hatch selection
    WallRecord / DoorRecord / WindowRecord / RoomRecord / StairRecord:
        One generator record each
    FloorLayout: All records on one storey
    FloorPlanLayout: The whole building, replaced wholesale on every
        generation or refinement
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar

from ..config.units import ProjectUnits, convert_to_feet

logger = logging.getLogger(__name__)


class LayoutParseError(ValueError):
    """Raised when a layout dictionary is missing required structure."""


# =============================================================================
# Enumerations
# =============================================================================


class RoomType(Enum):
    """Room classification tag used by the validation rule tables."""

    LIVING = "living"
    DINING = "dining"
    KITCHEN = "kitchen"
    BEDROOM = "bedroom"
    BATHROOM = "bathroom"
    ENSUITE = "ensuite"
    LAUNDRY = "laundry"
    GARAGE = "garage"
    HALLWAY = "hallway"
    ENTRY = "entry"
    CLOSET = "closet"
    PANTRY = "pantry"
    MUDROOM = "mudroom"
    OFFICE = "office"
    FAMILY = "family"
    UTILITY = "utility"
    STAIRWELL = "stairwell"
    OTHER = "other"
    """Any tag the generator invents outside the known set."""


class WallClass(Enum):
    """Wall construction class. Drives hatch pattern and line weight."""

    EXTERIOR = "exterior"
    INTERIOR = "interior"
    PARTITION = "partition"


class DoorSwing(Enum):
    LEFT = "left"
    RIGHT = "right"
    DOUBLE = "double"
    SLIDING = "sliding"


class DoorKind(Enum):
    INTERIOR = "interior"
    EXTERIOR = "exterior"
    GARAGE = "garage"
    SLIDING_GLASS = "sliding_glass"


class WindowKind(Enum):
    SINGLE_HUNG = "single_hung"
    DOUBLE_HUNG = "double_hung"
    CASEMENT = "casement"
    FIXED = "fixed"
    SLIDING = "sliding"
    PICTURE = "picture"


class StairDirection(Enum):
    UP = "up"
    DOWN = "down"


class OpeningKind(Enum):
    """Which kind of record an opening came from."""

    DOOR = "door"
    WINDOW = "window"


E = TypeVar("E", bound=Enum)


def _parse_enum(enum_cls: Type[E], value: Any, default: E, record_id: str) -> E:
    """Parse an enum tag, falling back to a default for unknown values."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        logger.warning(
            f"Unknown {enum_cls.__name__} '{value}' on record {record_id}, "
            f"using '{default.value}'"
        )
        return default


def _require(data: Dict, key: str, kind: str) -> Any:
    try:
        return data[key]
    except (KeyError, TypeError):
        raise LayoutParseError(f"{kind} record is missing required field '{key}'")


def _number(data: Dict, key: str, kind: str) -> float:
    value = _require(data, key, kind)
    try:
        return float(value)
    except (TypeError, ValueError):
        raise LayoutParseError(f"{kind} field '{key}' is not numeric: {value!r}")


# =============================================================================
# Records
# =============================================================================


@dataclass
class WallRecord:
    """One physical wall as emitted by the generator.

    Attributes:
        id: Unique wall identifier.
        start: (x, y) start point in feet.
        end: (x, y) end point in feet.
        thickness: Wall thickness in inches.
        wall_class: Exterior, interior or partition.
        insulated: Whether the wall is insulated.
    """

    id: str
    start: Tuple[float, float]
    end: Tuple[float, float]
    thickness: float
    wall_class: WallClass = WallClass.INTERIOR
    insulated: bool = False

    @property
    def thickness_ft(self) -> float:
        return convert_to_feet(self.thickness, ProjectUnits.INCHES)

    @property
    def length(self) -> float:
        dx = self.end[0] - self.start[0]
        dy = self.end[1] - self.start[1]
        return (dx * dx + dy * dy) ** 0.5

    @classmethod
    def from_dict(cls, data: Dict) -> "WallRecord":
        wall_id = str(_require(data, "id", "wall"))
        return cls(
            id=wall_id,
            start=(_number(data, "start_x", "wall"), _number(data, "start_y", "wall")),
            end=(_number(data, "end_x", "wall"), _number(data, "end_y", "wall")),
            thickness=_number(data, "thickness", "wall"),
            wall_class=_parse_enum(WallClass, data.get("type"), WallClass.INTERIOR, wall_id),
            insulated=bool(data.get("insulated", False)),
        )

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "start_x": self.start[0],
            "start_y": self.start[1],
            "end_x": self.end[0],
            "end_y": self.end[1],
            "thickness": self.thickness,
            "type": self.wall_class.value,
            "insulated": self.insulated,
        }


@dataclass
class DoorRecord:
    """A door opening in a host wall.

    Attributes:
        id: Unique door identifier.
        wall_id: Host wall identifier.
        position_along_wall: Distance in feet from the wall's start point to
            the door centre.
        width: Door width in inches.
        swing: Swing direction.
        kind: Door class.
    """

    id: str
    wall_id: str
    position_along_wall: float
    width: float
    swing: DoorSwing = DoorSwing.LEFT
    kind: DoorKind = DoorKind.INTERIOR

    @classmethod
    def from_dict(cls, data: Dict) -> "DoorRecord":
        door_id = str(_require(data, "id", "door"))
        return cls(
            id=door_id,
            wall_id=str(_require(data, "wall_id", "door")),
            position_along_wall=_number(data, "position_along_wall", "door"),
            width=_number(data, "width", "door"),
            swing=_parse_enum(DoorSwing, data.get("swing"), DoorSwing.LEFT, door_id),
            kind=_parse_enum(DoorKind, data.get("type"), DoorKind.INTERIOR, door_id),
        )

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "wall_id": self.wall_id,
            "position_along_wall": self.position_along_wall,
            "width": self.width,
            "swing": self.swing.value,
            "type": self.kind.value,
        }


@dataclass
class WindowRecord:
    """A window opening in a host wall. Width, height and sill in inches."""

    id: str
    wall_id: str
    position_along_wall: float
    width: float
    height: float = 48.0
    sill_height: Optional[float] = None
    kind: WindowKind = WindowKind.DOUBLE_HUNG

    @classmethod
    def from_dict(cls, data: Dict) -> "WindowRecord":
        window_id = str(_require(data, "id", "window"))
        sill = data.get("sill_height")
        return cls(
            id=window_id,
            wall_id=str(_require(data, "wall_id", "window")),
            position_along_wall=_number(data, "position_along_wall", "window"),
            width=_number(data, "width", "window"),
            height=float(data.get("height", 48.0)),
            sill_height=float(sill) if sill is not None else None,
            kind=_parse_enum(WindowKind, data.get("type"), WindowKind.DOUBLE_HUNG, window_id),
        )

    def to_dict(self) -> Dict:
        result = {
            "id": self.id,
            "wall_id": self.wall_id,
            "position_along_wall": self.position_along_wall,
            "width": self.width,
            "height": self.height,
            "type": self.kind.value,
        }
        if self.sill_height is not None:
            result["sill_height"] = self.sill_height
        return result


@dataclass
class RoomRecord:
    """A rectangular room. Origin (x, y) is the top-left corner, in feet."""

    id: str
    name: str
    room_type: RoomType
    x: float
    y: float
    width: float
    depth: float
    ceiling_height: Optional[float] = None

    @property
    def area(self) -> float:
        return self.width * self.depth

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.depth

    @classmethod
    def from_dict(cls, data: Dict) -> "RoomRecord":
        room_id = str(_require(data, "id", "room"))
        ceiling = data.get("ceiling_height")
        return cls(
            id=room_id,
            name=str(data.get("name", room_id)),
            room_type=_parse_enum(RoomType, data.get("type"), RoomType.OTHER, room_id),
            x=_number(data, "x", "room"),
            y=_number(data, "y", "room"),
            width=_number(data, "width", "room"),
            depth=_number(data, "depth", "room"),
            ceiling_height=float(ceiling) if ceiling is not None else None,
        )

    def to_dict(self) -> Dict:
        result = {
            "id": self.id,
            "name": self.name,
            "type": self.room_type.value,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "depth": self.depth,
        }
        if self.ceiling_height is not None:
            result["ceiling_height"] = self.ceiling_height
        return result


@dataclass
class StairRecord:
    """A straight stair run. Position and sizes in feet."""

    id: str
    x: float
    y: float
    width: float
    run: float
    direction: StairDirection = StairDirection.UP
    num_risers: int = 14
    riser_height: Optional[float] = None
    tread_depth: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "StairRecord":
        stair_id = str(_require(data, "id", "stair"))
        return cls(
            id=stair_id,
            x=_number(data, "x", "stair"),
            y=_number(data, "y", "stair"),
            width=_number(data, "width", "stair"),
            run=_number(data, "run", "stair"),
            direction=_parse_enum(StairDirection, data.get("direction"), StairDirection.UP, stair_id),
            num_risers=int(data.get("num_risers", 14)),
            riser_height=data.get("riser_height"),
            tread_depth=data.get("tread_depth"),
        )

    def to_dict(self) -> Dict:
        result = {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "run": self.run,
            "direction": self.direction.value,
            "num_risers": self.num_risers,
        }
        if self.riser_height is not None:
            result["riser_height"] = self.riser_height
        if self.tread_depth is not None:
            result["tread_depth"] = self.tread_depth
        return result


# =============================================================================
# Aggregates
# =============================================================================


@dataclass
class BuildingEnvelope:
    """Overall rectangular footprint of the building, in feet."""

    width: float
    depth: float
    num_storeys: int = 1
    style: str = "modern"

    @property
    def area(self) -> float:
        return self.width * self.depth


@dataclass
class RoofDescriptor:
    roof_type: str = "gable"
    pitch: float = 6.0
    overhang_ft: float = 1.0


@dataclass
class FloorLayout:
    """All records on one storey. Level 0 is the ground floor."""

    level: int
    rooms: List[RoomRecord] = field(default_factory=list)
    walls: List[WallRecord] = field(default_factory=list)
    doors: List[DoorRecord] = field(default_factory=list)
    windows: List[WindowRecord] = field(default_factory=list)
    stairs: List[StairRecord] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict) -> "FloorLayout":
        return cls(
            level=int(data.get("level", 0)),
            rooms=[RoomRecord.from_dict(r) for r in data.get("rooms") or []],
            walls=[WallRecord.from_dict(w) for w in data.get("walls") or []],
            doors=[DoorRecord.from_dict(d) for d in data.get("doors") or []],
            windows=[WindowRecord.from_dict(w) for w in data.get("windows") or []],
            stairs=[StairRecord.from_dict(s) for s in data.get("stairs") or []],
        )

    def to_dict(self) -> Dict:
        return {
            "level": self.level,
            "rooms": [r.to_dict() for r in self.rooms],
            "walls": [w.to_dict() for w in self.walls],
            "doors": [d.to_dict() for d in self.doors],
            "windows": [w.to_dict() for w in self.windows],
            "stairs": [s.to_dict() for s in self.stairs],
        }


@dataclass
class FloorPlanLayout:
    """A complete generated building layout.

    Produced wholesale by the layout generator and treated as an immutable
    value: refinement replaces it, snapping copies it.
    """

    building: BuildingEnvelope
    floors: List[FloorLayout] = field(default_factory=list)
    roof: RoofDescriptor = field(default_factory=RoofDescriptor)

    def get_floor(self, level: int = 0) -> Optional[FloorLayout]:
        """Return the floor at `level`, falling back to the first floor."""
        for floor in self.floors:
            if floor.level == level:
                return floor
        return self.floors[0] if self.floors else None

    @classmethod
    def from_dict(cls, data: Dict) -> "FloorPlanLayout":
        """Parse the generator's JSON structure.

        Raises:
            LayoutParseError: If a required section or field is missing.
        """
        building = _require(data, "building", "layout")
        roof = data.get("roof") or {}
        return cls(
            building=BuildingEnvelope(
                width=_number(building, "total_width_ft", "building"),
                depth=_number(building, "total_depth_ft", "building"),
                num_storeys=int(building.get("num_storeys", 1)),
                style=str(building.get("style", "modern")),
            ),
            floors=[FloorLayout.from_dict(f) for f in data.get("floors") or []],
            roof=RoofDescriptor(
                roof_type=str(roof.get("type", "gable")),
                pitch=float(roof.get("pitch", 6.0)),
                overhang_ft=float(roof.get("overhang_ft", 1.0)),
            ),
        )

    def to_dict(self) -> Dict:
        return {
            "building": {
                "total_width_ft": self.building.width,
                "total_depth_ft": self.building.depth,
                "num_storeys": self.building.num_storeys,
                "style": self.building.style,
            },
            "floors": [f.to_dict() for f in self.floors],
            "roof": {
                "type": self.roof.roof_type,
                "pitch": self.roof.pitch,
                "overhang_ft": self.roof.overhang_ft,
            },
        }
