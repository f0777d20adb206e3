# tests/api/conftest.py
import pytest
import sys
import os
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).parents[2]
sys.path.insert(0, str(project_root))

# Set test environment variables
os.environ["DEBUG"] = "true"
os.environ["API_KEY"] = "dev_key"

from src.floorplan_drafter.generation import LayoutGenerator, GenerationFailure
from src.floorplan_drafter.layout.layout_types import FloorPlanLayout


class ScriptedGenerator(LayoutGenerator):
    """Generator that replays prepared layouts or failures in order."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def _next(self):
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return FloorPlanLayout.from_dict(response)

    def generate(self, request):
        self.calls.append(("generate", request))
        return self._next()

    def refine(self, previous, instruction):
        self.calls.append(("refine", instruction))
        return self._next()


@pytest.fixture
def scripted_generator():
    """Factory for ScriptedGenerator instances."""
    return ScriptedGenerator


@pytest.fixture
def generation_failure():
    return GenerationFailure
