# File: src/floorplan_drafter/generation/design_pipeline.py

"""Generate-validate-retry orchestration.

generate_design() asks the generator for a layout, validates it and, when
there are blocking errors, makes exactly one refinement call seeded with
those errors. Whatever the retry returns is validated and kept, errors and
all. refine_design() is the user-driven counterpart: one refinement, and
the previous layout survives a failed call.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..layout.layout_types import FloorPlanLayout
from ..layout_validation.layout_validator import (
    errors_to_refinement_instruction,
    validate_layout,
)
from ..layout_validation.validation_types import ValidationResult
from .generator_client import GenerationFailure, LayoutGenerator
from .prompts import DesignRequest

logger = logging.getLogger(__name__)


@dataclass
class DesignOutcome:
    """Result of one generation or refinement round.

    Attributes:
        layout: Snapped layout to draw.
        validation: Validation of `layout`.
        retried: Whether the automatic retry was attempted.
        failure: Message of a generator failure that was absorbed, if any.
    """

    layout: FloorPlanLayout
    validation: ValidationResult
    retried: bool = False
    failure: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.failure is None


def generate_design(generator: LayoutGenerator, request: DesignRequest) -> DesignOutcome:
    """Generate a layout, retrying once through refinement on blocking errors.

    Raises:
        GenerationFailure: If the first generation call fails; there is no
            layout to fall back to.
    """
    layout = generator.generate(request)
    validation = validate_layout(layout)

    if not validation.errors:
        return DesignOutcome(layout=validation.snapped_layout, validation=validation)

    logger.info(f"Layout has {len(validation.errors)} blocking error(s), retrying once")
    instruction = errors_to_refinement_instruction(validation.errors)

    try:
        retry_layout = generator.refine(validation.snapped_layout, instruction)
    except GenerationFailure as e:
        logger.warning(f"Retry failed, keeping first layout: {e.message}")
        return DesignOutcome(
            layout=validation.snapped_layout,
            validation=validation,
            retried=True,
            failure=e.message,
        )

    retry_validation = validate_layout(retry_layout)
    if retry_validation.errors:
        logger.warning(
            f"Retried layout still has {len(retry_validation.errors)} blocking error(s)"
        )
    return DesignOutcome(
        layout=retry_validation.snapped_layout,
        validation=retry_validation,
        retried=True,
    )


def refine_design(
    generator: LayoutGenerator,
    previous: FloorPlanLayout,
    instruction: str,
) -> DesignOutcome:
    """Apply a user refinement; on failure keep `previous` unchanged."""
    try:
        layout = generator.refine(previous, instruction)
    except GenerationFailure as e:
        logger.warning(f"Refinement failed, keeping previous layout: {e.message}")
        return DesignOutcome(
            layout=previous,
            validation=validate_layout(previous),
            failure=e.message,
        )

    validation = validate_layout(layout)
    return DesignOutcome(layout=validation.snapped_layout, validation=validation)
