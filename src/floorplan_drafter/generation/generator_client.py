# File: src/floorplan_drafter/generation/generator_client.py

"""Clients for the external layout generator.

LayoutGenerator is the seam the design pipeline depends on; any object
returning complete FloorPlanLayout values from generate() and refine() will
do. GatewayLayoutGenerator talks to an OpenAI-compatible chat-completions
gateway and forces a single tool call carrying the layout JSON.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests

from ..layout.layout_types import FloorPlanLayout, LayoutParseError
from .prompts import (
    FLOOR_PLAN_TOOL_SCHEMA,
    SYSTEM_PROMPT,
    TOOL_NAME,
    DesignRequest,
    build_generation_prompt,
    build_refinement_prompt,
)

logger = logging.getLogger(__name__)


class GenerationFailure(Exception):
    """Raised when the generator cannot produce a usable layout.

    Attributes:
        status_code: HTTP status returned by the gateway, if any.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class LayoutGenerator(ABC):
    """Produces complete layouts. Refinement returns a replacement, never a diff."""

    @abstractmethod
    def generate(self, request: DesignRequest) -> FloorPlanLayout:
        """Create a new layout from a design brief."""

    @abstractmethod
    def refine(self, previous: FloorPlanLayout, instruction: str) -> FloorPlanLayout:
        """Return a revised copy of `previous` following `instruction`."""


class GatewayLayoutGenerator(LayoutGenerator):
    """
    Layout generator backed by a chat-completions gateway.

    Attributes:
        base_url: Gateway URL up to and including the API version
        api_key: Bearer token for the gateway
        model: Model name sent with every request
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        model: str,
        timeout: float = 120.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    def generate(self, request: DesignRequest) -> FloorPlanLayout:
        return self._call(build_generation_prompt(request))

    def refine(self, previous: FloorPlanLayout, instruction: str) -> FloorPlanLayout:
        return self._call(build_refinement_prompt(previous, instruction))

    def build_payload(self, user_prompt: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": user_prompt},
            ],
            "tools": [FLOOR_PLAN_TOOL_SCHEMA],
            "tool_choice": {"type": "function", "function": {"name": TOOL_NAME}},
        }

    def _call(self, user_prompt: str) -> FloorPlanLayout:
        """Send one chat-completions request and parse the forced tool call.

        Raises:
            GenerationFailure: On transport errors, non-2xx responses, a
                missing tool call or unparseable layout JSON.
        """
        url = f"{self.base_url}/chat/completions"
        try:
            response = self.session.post(
                url,
                json=self.build_payload(user_prompt),
                headers=self.headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Layout gateway request failed: {str(e)}")
            raise GenerationFailure(f"Layout gateway unreachable: {str(e)}")

        if response.status_code == 429:
            raise GenerationFailure("Rate limit exceeded. Please try again in a moment.", 429)
        if response.status_code == 402:
            raise GenerationFailure("Generation credits exhausted.", 402)
        if not response.ok:
            logger.error(f"Layout gateway error {response.status_code}: {response.text[:500]}")
            raise GenerationFailure(f"Layout gateway error: {response.status_code}", response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Layout gateway returned a non-JSON body: {response.text[:500]}")
            raise GenerationFailure(f"Layout gateway returned an unreadable response: {str(e)}")

        return parse_tool_call(body)


def parse_tool_call(result: Dict[str, Any]) -> FloorPlanLayout:
    """Extract the layout from a chat-completions response body."""
    try:
        tool_call = result["choices"][0]["message"]["tool_calls"][0]
        function = tool_call["function"]
    except (KeyError, IndexError, TypeError):
        raise GenerationFailure("Generator did not return a floor plan layout")
    if not isinstance(function, dict):
        raise GenerationFailure("Generator did not return a floor plan layout")

    if function.get("name") != TOOL_NAME:
        raise GenerationFailure(f"Generator called unexpected tool '{function.get('name')}'")

    arguments = function.get("arguments")
    try:
        data = json.loads(arguments) if isinstance(arguments, str) else arguments
        layout = FloorPlanLayout.from_dict(data)
    except (LayoutParseError, ValueError, TypeError, AttributeError) as e:
        raise GenerationFailure(f"Generator returned an invalid layout: {str(e)}")

    logger.info(
        f"Received layout {layout.building.width:g}x{layout.building.depth:g} ft "
        f"with {len(layout.floors)} floor(s)"
    )
    return layout
