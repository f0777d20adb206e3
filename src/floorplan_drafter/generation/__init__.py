# File: src/floorplan_drafter/generation/__init__.py

"""Client side of the external layout generator.

Usage:
    from src.floorplan_drafter.generation import (
        GatewayLayoutGenerator, DesignRequest, generate_design,
    )

    generator = GatewayLayoutGenerator(url, key, model)
    outcome = generate_design(generator, DesignRequest(num_bedrooms=3))
"""

from .prompts import (
    TOOL_NAME,
    FLOOR_PLAN_TOOL_SCHEMA,
    SYSTEM_PROMPT,
    DesignRequest,
    build_generation_prompt,
    build_refinement_prompt,
)

from .generator_client import (
    GenerationFailure,
    LayoutGenerator,
    GatewayLayoutGenerator,
    parse_tool_call,
)

from .design_pipeline import DesignOutcome, generate_design, refine_design

__all__ = [
    "TOOL_NAME",
    "FLOOR_PLAN_TOOL_SCHEMA",
    "SYSTEM_PROMPT",
    "DesignRequest",
    "build_generation_prompt",
    "build_refinement_prompt",
    "GenerationFailure",
    "LayoutGenerator",
    "GatewayLayoutGenerator",
    "parse_tool_call",
    "DesignOutcome",
    "generate_design",
    "refine_design",
]
