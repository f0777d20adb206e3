# tests/conftest.py
import sys
import os

# Add project root to path so `src.floorplan_drafter` and `api` resolve
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import copy
import pytest
from typing import Dict, Any, List

from src.floorplan_drafter.layout.layout_types import FloorPlanLayout


# =============================================================================
# Helpers: raw generator-shaped dictionaries
# =============================================================================


def room_dict(room_id: str, name: str, room_type: str, x: float, y: float,
              width: float, depth: float) -> Dict[str, Any]:
    return {
        "id": room_id, "name": name, "type": room_type,
        "x": x, "y": y, "width": width, "depth": depth,
    }


def wall_dict(wall_id: str, start: tuple, end: tuple, thickness: float = 6.0,
              wall_type: str = "exterior") -> Dict[str, Any]:
    return {
        "id": wall_id,
        "start_x": start[0], "start_y": start[1],
        "end_x": end[0], "end_y": end[1],
        "thickness": thickness, "type": wall_type,
    }


def layout_dict(width: float, depth: float, rooms: List[Dict], walls: List[Dict] = None,
                doors: List[Dict] = None, windows: List[Dict] = None,
                stairs: List[Dict] = None) -> Dict[str, Any]:
    return {
        "building": {
            "total_width_ft": width,
            "total_depth_ft": depth,
            "num_storeys": 1,
            "style": "modern",
        },
        "floors": [{
            "level": 0,
            "rooms": rooms,
            "walls": walls or [],
            "doors": doors or [],
            "windows": windows or [],
            "stairs": stairs or [],
        }],
        "roof": {"type": "gable", "pitch": 6, "overhang_ft": 1},
    }


def perimeter_walls(width: float, depth: float) -> List[Dict]:
    """Four exterior walls running clockwise around the envelope."""
    return [
        wall_dict("w-top", (0, 0), (width, 0)),
        wall_dict("w-right", (width, 0), (width, depth)),
        wall_dict("w-bottom", (width, depth), (0, depth)),
        wall_dict("w-left", (0, depth), (0, 0)),
    ]


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def single_room_data() -> Dict[str, Any]:
    """20 x 15 ft living room inside four exterior walls, one front door."""
    return layout_dict(
        20, 15,
        rooms=[room_dict("r1", "Living", "living", 0, 0, 20, 15)],
        walls=perimeter_walls(20, 15),
        doors=[{
            "id": "d1", "wall_id": "w-top", "position_along_wall": 10,
            "width": 36, "swing": "left", "type": "exterior",
        }],
        windows=[{
            "id": "win1", "wall_id": "w-right", "position_along_wall": 7.5,
            "width": 48, "height": 48, "type": "double_hung",
        }],
    )


@pytest.fixture
def single_room_layout(single_room_data) -> FloorPlanLayout:
    return FloorPlanLayout.from_dict(copy.deepcopy(single_room_data))


@pytest.fixture
def two_room_data() -> Dict[str, Any]:
    """Living and kitchen side by side, split by one interior wall."""
    return layout_dict(
        24, 12,
        rooms=[
            room_dict("r1", "Living", "living", 0, 0, 12, 12),
            room_dict("r2", "Kitchen", "kitchen", 12, 0, 12, 12),
        ],
        walls=[
            wall_dict("w-top-a", (0, 0), (12, 0)),
            wall_dict("w-top-b", (12, 0), (24, 0)),
            wall_dict("w-right", (24, 0), (24, 12)),
            wall_dict("w-bottom-b", (24, 12), (12, 12)),
            wall_dict("w-bottom-a", (12, 12), (0, 12)),
            wall_dict("w-left", (0, 12), (0, 0)),
            wall_dict("w-mid", (12, 0), (12, 12), thickness=4.5, wall_type="interior"),
        ],
        doors=[
            {"id": "d1", "wall_id": "w-top-a", "position_along_wall": 6, "width": 36},
            {"id": "d2", "wall_id": "w-mid", "position_along_wall": 6, "width": 32},
        ],
    )
