# File: api/endpoints/floor_plans.py

from fastapi import APIRouter, HTTPException, Depends
from typing import Dict, Any
import logging
import traceback

from api.models.layout_models import (
    FloorPlanLayoutModel,
    RenderRequest,
    GenerateRequest,
    RefineRequest,
    ValidationResponse,
    RenderResponse,
    DesignResponse,
)
from api.utils.config import Config
from api.utils.errors import (
    ValidationError,
    GenerationError,
    GeneratorUnavailableError,
    handle_exception,
)
from src.floorplan_drafter.drafting import EmptyLayoutError, draft_floor_plan
from src.floorplan_drafter.generation import (
    DesignRequest,
    GatewayLayoutGenerator,
    GenerationFailure,
    LayoutGenerator,
    generate_design,
    refine_design,
)
from src.floorplan_drafter.layout.layout_types import LayoutParseError
from src.floorplan_drafter.layout_validation import validate_layout
from src.floorplan_drafter.rendering import RenderOptions, render_svg, sheet_size

logger = logging.getLogger("floorplan_drafter.api")

router = APIRouter()


def get_layout_generator() -> LayoutGenerator:
    """Build the gateway-backed generator from configuration."""
    if not Config.generator_configured():
        raise GeneratorUnavailableError().to_http_exception()
    return GatewayLayoutGenerator(
        base_url=Config.LAYOUT_GATEWAY_URL,
        api_key=Config.LAYOUT_GATEWAY_API_KEY,
        model=Config.LAYOUT_MODEL,
        timeout=Config.LAYOUT_TIMEOUT,
    )


def _design_response(outcome) -> Dict[str, Any]:
    return {
        "layout": outcome.layout.to_dict(),
        "validation": outcome.validation.to_dict(),
        "retried": outcome.retried,
        "failure": outcome.failure,
    }


@router.post("/validate", response_model=ValidationResponse)
async def validate_floor_plan(layout: FloorPlanLayoutModel):
    """
    Check a layout against the architectural rules.

    Returns blocking errors, advisory warnings and the grid-snapped layout.
    Validation never rejects the request; an invalid layout is a 200 with errors.
    """
    try:
        result = validate_layout(layout.to_layout())
        logger.info(
            f"Validated layout: {len(result.errors)} errors, {len(result.warnings)} warnings"
        )
        return result.to_dict()
    except LayoutParseError as e:
        raise ValidationError(str(e), field="layout").to_http_exception()
    except Exception as e:
        logger.error(f"Error validating layout: {str(e)}")
        raise handle_exception(e, "layout")


@router.post("/render", response_model=RenderResponse)
async def render_floor_plan(request: RenderRequest):
    """
    Draft one floor of a layout and return it as an SVG document.

    The layout is validated and snapped first; validation issues are returned
    alongside the drawing rather than blocking it.
    """
    try:
        result = draft_floor_plan(request.layout.to_layout(), level=request.level, scale=request.scale)
        options = RenderOptions(
            show_hatching=request.show_hatching,
            show_labels=request.show_labels,
            show_dimensions=request.show_dimensions,
            show_room_dimensions=request.show_dimensions,
            title=request.title,
        )
        svg = render_svg(result.drawing, options).tostring()
        width, height = sheet_size(result.drawing)

        return {
            "svg": svg,
            "level": result.drawing.level,
            "width": width,
            "height": height,
            "junctions": result.drawing.junctions.to_dict(),
            "validation": result.validation.to_dict(),
        }
    except (EmptyLayoutError, LayoutParseError) as e:
        raise ValidationError(str(e), field="layout").to_http_exception()
    except HTTPException:
        raise
    except Exception as e:
        error_detail = traceback.format_exc()
        logger.error(f"Error rendering floor plan: {str(e)}\n{error_detail}")
        raise handle_exception(e, "floor_plan")


@router.post("/generate", response_model=DesignResponse)
def generate_floor_plan(
    request: GenerateRequest,
    generator: LayoutGenerator = Depends(get_layout_generator),
):
    """
    Generate a new layout from a design brief.

    A layout with blocking errors is sent back once for correction. If that
    retry fails the first layout is returned with `failure` set.
    """
    logger.info(
        f"Generating {request.style} layout: {request.num_bedrooms} bed, "
        f"{request.num_bathrooms} bath, {request.target_sqft} sqft"
    )
    try:
        outcome = generate_design(generator, DesignRequest.from_dict(request.model_dump()))
        return _design_response(outcome)
    except GenerationFailure as e:
        logger.error(f"Layout generation failed: {e.message}")
        raise GenerationError(e.message, upstream_status=e.status_code).to_http_exception()
    except Exception as e:
        logger.error(f"Error generating floor plan: {str(e)}")
        raise handle_exception(e, "floor_plan")


@router.post("/refine", response_model=DesignResponse)
def refine_floor_plan(
    request: RefineRequest,
    generator: LayoutGenerator = Depends(get_layout_generator),
):
    """
    Apply a natural-language change to an existing layout.

    A generator failure keeps the previous layout; the response carries the
    failure message instead of an error status.
    """
    try:
        previous = request.previous_layout.to_layout()
        outcome = refine_design(generator, previous, request.instruction)
        return _design_response(outcome)
    except LayoutParseError as e:
        raise ValidationError(str(e), field="previous_layout").to_http_exception()
    except Exception as e:
        logger.error(f"Error refining floor plan: {str(e)}")
        raise handle_exception(e, "floor_plan")
