# File: api/models/layout_models.py

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Dict, Any, Optional

from src.floorplan_drafter.layout.layout_types import FloorPlanLayout


# =============================================================================
# Layout Schema
# =============================================================================

class BuildingModel(BaseModel):
    """Overall building envelope."""
    total_width_ft: float = Field(description="Building width in feet", gt=0)
    total_depth_ft: float = Field(description="Building depth in feet", gt=0)
    num_storeys: int = Field(default=1, ge=1)
    style: str = Field(default="modern")


class RoomModel(BaseModel):
    """Rectangular room; origin is its top-left corner."""
    id: str
    name: str
    type: str = Field(description="Room type tag, e.g. 'kitchen'. Unknown tags are accepted")
    x: float
    y: float
    width: float = Field(ge=0)
    depth: float = Field(ge=0)
    ceiling_height: Optional[float] = None


class WallModel(BaseModel):
    """Straight wall between two points in feet."""
    id: str
    start_x: float
    start_y: float
    end_x: float
    end_y: float
    thickness: float = Field(description="Wall thickness in inches")
    type: str = Field(default="interior", description="exterior, interior or partition")
    insulated: bool = False


class DoorModel(BaseModel):
    id: str
    wall_id: str
    position_along_wall: float = Field(
        description="Distance in feet from the wall start point to the door centre"
    )
    width: float = Field(description="Door width in inches", gt=0)
    swing: str = "left"
    type: str = "interior"


class WindowModel(BaseModel):
    id: str
    wall_id: str
    position_along_wall: float = Field(
        description="Distance in feet from the wall start point to the window centre"
    )
    width: float = Field(description="Window width in inches", gt=0)
    height: float = Field(default=48.0, gt=0)
    sill_height: Optional[float] = None
    type: str = "double_hung"


class StairModel(BaseModel):
    id: str
    x: float
    y: float
    width: float = Field(gt=0)
    run: float = Field(gt=0)
    direction: str = "up"
    num_risers: int = Field(default=14, ge=1)
    riser_height: Optional[float] = None
    tread_depth: Optional[float] = None


class FloorModel(BaseModel):
    level: int = 0
    rooms: List[RoomModel] = Field(default_factory=list)
    walls: List[WallModel] = Field(default_factory=list)
    doors: List[DoorModel] = Field(default_factory=list)
    windows: List[WindowModel] = Field(default_factory=list)
    stairs: List[StairModel] = Field(default_factory=list)


class RoofModel(BaseModel):
    type: str = "gable"
    pitch: float = 6.0
    overhang_ft: float = 1.0


class FloorPlanLayoutModel(BaseModel):
    """Complete layout as produced by the generator."""
    building: BuildingModel
    floors: List[FloorModel] = Field(default_factory=list)
    roof: RoofModel = Field(default_factory=RoofModel)

    def to_layout(self) -> FloorPlanLayout:
        """Convert to the core layout value."""
        return FloorPlanLayout.from_dict(self.model_dump())


# =============================================================================
# Requests
# =============================================================================

class RenderRequest(BaseModel):
    """Layout to draw plus drawing switches."""
    layout: FloorPlanLayoutModel
    level: int = Field(default=0, description="Floor level to draw")
    scale: Optional[float] = Field(default=None, gt=0, description="Drawing units per foot")
    title: Optional[str] = None
    show_dimensions: bool = True
    show_labels: bool = True
    show_hatching: bool = True


class GenerateRequest(BaseModel):
    """Design brief for a new layout."""
    style: str = Field(default="modern", min_length=1, max_length=50)
    num_bedrooms: int = Field(default=3, ge=0, le=10)
    num_bathrooms: float = Field(default=2, ge=0, le=10)
    target_sqft: float = Field(default=1800, gt=0)
    num_storeys: int = Field(default=1, ge=1, le=4)
    has_garage: bool = False
    garage_type: str = "attached"
    location_country: str = "US"
    location_region: str = ""
    exterior_materials: List[str] = Field(default_factory=list)
    description: str = Field(default="", max_length=2000)


class RefineRequest(BaseModel):
    """Natural-language change to an existing layout."""
    previous_layout: FloorPlanLayoutModel
    instruction: str = Field(min_length=1, max_length=2000)

    @field_validator("instruction")
    @classmethod
    def validate_instruction(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Instruction must not be blank")
        return v.strip()


# =============================================================================
# Responses
# =============================================================================

class ValidationIssueModel(BaseModel):
    code: str
    message: str
    severity: str
    room_ids: List[str] = Field(default_factory=list)
    element_ids: List[str] = Field(default_factory=list)
    level: Optional[int] = None


class ValidationResponse(BaseModel):
    is_valid: bool
    errors: List[ValidationIssueModel]
    warnings: List[ValidationIssueModel]
    snapped_layout: Dict[str, Any]


class RenderResponse(BaseModel):
    svg: str
    level: int
    width: float = Field(description="Sheet width in drawing units")
    height: float = Field(description="Sheet height in drawing units")
    junctions: Dict[str, int]
    validation: ValidationResponse


class DesignResponse(BaseModel):
    layout: Dict[str, Any]
    validation: ValidationResponse
    retried: bool = False
    failure: Optional[str] = None

    @model_validator(mode='after')
    def check_layout(self) -> 'DesignResponse':
        """A design response always carries a layout to draw."""
        if "building" not in self.layout:
            raise ValueError("Design response layout is missing its building envelope")
        return self
