# tests/api/test_floor_plans.py
import pytest
from fastapi.testclient import TestClient

from api.main import app
from api.endpoints.floor_plans import get_layout_generator
from api.utils.config import Config
from tests.conftest import layout_dict, room_dict

# Create test client
client = TestClient(app)


@pytest.fixture
def api_headers():
    """Fixture for API headers with authentication."""
    return {"X-API-Key": Config.API_KEY}


@pytest.fixture
def overlapping_data():
    return layout_dict(30, 30, [
        room_dict("r1", "Living", "living", 0, 0, 12, 12),
        room_dict("r2", "Office", "office", 6, 6, 12, 12),
    ])


@pytest.fixture
def use_generator():
    """Install a generator override for the duration of one test."""
    def install(generator):
        app.dependency_overrides[get_layout_generator] = lambda: generator
        return generator

    yield install
    app.dependency_overrides.pop(get_layout_generator, None)


# =============================================================================
# Status and Auth
# =============================================================================


def test_health_check():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_auth_required(single_room_data):
    response = client.post("/floor-plans/validate", json=single_room_data)
    assert response.status_code in (401, 422)

    response = client.post("/floor-plans/validate", json=single_room_data,
                           headers={"X-API-Key": "invalid_key"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid API Key"


# =============================================================================
# Validate
# =============================================================================


def test_validate_valid_layout(api_headers, two_room_data):
    response = client.post("/floor-plans/validate", json=two_room_data, headers=api_headers)
    assert response.status_code == 200

    data = response.json()
    assert data["is_valid"] is True
    assert data["errors"] == []
    assert data["snapped_layout"]["building"]["total_width_ft"] == 24


def test_validate_reports_overlap(api_headers, overlapping_data):
    response = client.post("/floor-plans/validate", json=overlapping_data, headers=api_headers)
    assert response.status_code == 200

    data = response.json()
    assert data["is_valid"] is False
    assert data["errors"][0]["code"] == "ROOM_OVERLAP"
    assert data["errors"][0]["room_ids"] == ["r1", "r2"]


def test_validate_rejects_malformed_layout(api_headers):
    response = client.post("/floor-plans/validate", json={"floors": []}, headers=api_headers)
    assert response.status_code == 422


# =============================================================================
# Render
# =============================================================================


def test_render_returns_svg(api_headers, single_room_data):
    response = client.post("/floor-plans/render", json={"layout": single_room_data}, headers=api_headers)
    assert response.status_code == 200

    data = response.json()
    assert data["svg"].startswith("<svg")
    assert "layer-walls" in data["svg"]
    assert data["level"] == 0
    assert data["junctions"]["l_corner"] == 4
    assert data["validation"]["is_valid"] is True


def test_render_options(api_headers, single_room_data):
    payload = {"layout": single_room_data, "show_dimensions": False, "title": "Cabin"}
    response = client.post("/floor-plans/render", json=payload, headers=api_headers)
    svg = response.json()["svg"]

    assert 'id="layer-dimensions"' not in svg
    assert "Cabin" in svg


def test_render_layout_without_floors(api_headers):
    payload = {"layout": {"building": {"total_width_ft": 20, "total_depth_ft": 15}}}
    response = client.post("/floor-plans/render", json=payload, headers=api_headers)

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "validation_error"


# =============================================================================
# Generate and Refine
# =============================================================================


def test_generate(api_headers, use_generator, scripted_generator, two_room_data):
    generator = use_generator(scripted_generator([two_room_data]))

    response = client.post("/floor-plans/generate", json={"num_bedrooms": 2}, headers=api_headers)
    assert response.status_code == 200

    data = response.json()
    assert data["retried"] is False
    assert data["failure"] is None
    assert data["validation"]["is_valid"] is True
    assert generator.calls[0][0] == "generate"
    assert generator.calls[0][1].num_bedrooms == 2


def test_generate_retries_on_overlap(api_headers, use_generator, scripted_generator,
                                     overlapping_data, two_room_data):
    generator = use_generator(scripted_generator([overlapping_data, two_room_data]))

    response = client.post("/floor-plans/generate", json={}, headers=api_headers)
    data = response.json()

    assert data["retried"] is True
    assert data["validation"]["is_valid"] is True
    assert [call[0] for call in generator.calls] == ["generate", "refine"]


def test_generate_failure_maps_to_gateway_error(api_headers, use_generator, scripted_generator,
                                                generation_failure):
    use_generator(scripted_generator([generation_failure("Layout gateway error: 500", 500)]))

    response = client.post("/floor-plans/generate", json={}, headers=api_headers)
    assert response.status_code == 502
    assert response.json()["detail"]["code"] == "generation_error"


def test_generate_rate_limit_passed_through(api_headers, use_generator, scripted_generator,
                                            generation_failure):
    use_generator(scripted_generator([generation_failure("Rate limit exceeded.", 429)]))

    response = client.post("/floor-plans/generate", json={}, headers=api_headers)
    assert response.status_code == 429


def test_generate_without_configured_gateway(api_headers, monkeypatch):
    monkeypatch.setattr(Config, "LAYOUT_GATEWAY_URL", None)
    monkeypatch.setattr(Config, "LAYOUT_GATEWAY_API_KEY", None)

    response = client.post("/floor-plans/generate", json={}, headers=api_headers)
    assert response.status_code == 503


def test_refine_failure_keeps_previous(api_headers, use_generator, scripted_generator,
                                       generation_failure, two_room_data):
    use_generator(scripted_generator([generation_failure("Generation credits exhausted.", 402)]))

    payload = {"previous_layout": two_room_data, "instruction": "Add a porch"}
    response = client.post("/floor-plans/refine", json=payload, headers=api_headers)
    assert response.status_code == 200

    data = response.json()
    assert data["failure"] == "Generation credits exhausted."
    assert [r["id"] for r in data["layout"]["floors"][0]["rooms"]] == ["r1", "r2"]


def test_refine_rejects_blank_instruction(api_headers, use_generator, scripted_generator, two_room_data):
    use_generator(scripted_generator([]))

    payload = {"previous_layout": two_room_data, "instruction": "   "}
    response = client.post("/floor-plans/refine", json=payload, headers=api_headers)
    assert response.status_code == 422
