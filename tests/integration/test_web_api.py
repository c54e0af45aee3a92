"""Integration tests for the REST API."""

import json
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from fenestration.web.app import create_app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


def _fixture(name: str) -> dict[str, Any]:
    return json.loads((FIXTURES_PATH / name).read_text())


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the API."""
    return TestClient(create_app())


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestGeometryEndpoint:
    """Tests for POST /api/v1/geometry."""

    def test_rectangle(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/geometry",
            json={"shape": "rectangle", "dimensions": {"width": 60, "height": 30}},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["shape"] == "rectangle"
        assert len(data["vertices"]) == 4
        assert data["area_sq_in"] == 1800
        assert data["bounding_box"]["width"] == 60
        assert data["has_preview"] is True
        assert data["preview_scale"] == 5.0

    def test_camel_case_dimensions(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/geometry",
            json={"shape": "trapezoid", "dimensions": {"bottomWidth": 48, "topWidth": 24, "trapezoidHeight": 36}},
        )
        assert response.status_code == 200
        assert response.json()["area_sq_in"] == pytest.approx(1296)

    def test_custom_preview_size(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/geometry",
            json={"shape": "rectangle", "dimensions": {"width": 60, "height": 30}, "preview_size": 120},
        )
        assert response.json()["preview_scale"] == 2.0

    def test_degenerate_shape(self, client: TestClient) -> None:
        response = client.post("/api/v1/geometry", json={"shape": "hexagon"})
        assert response.status_code == 200
        data = response.json()
        assert data["has_preview"] is False
        assert data["preview_scale"] == 0
        assert data["area_sq_in"] == 0

    def test_unknown_shape(self, client: TestClient) -> None:
        response = client.post("/api/v1/geometry", json={"shape": "circle"})
        assert response.status_code == 422

    def test_oversized_dimension(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/geometry",
            json={"shape": "rectangle", "dimensions": {"width": 1e200, "height": 1e200}},
        )
        assert response.status_code == 422



class TestPricingEndpoints:
    """Tests for the /api/v1/pricing endpoints."""

    def test_defaults(self, client: TestClient) -> None:
        response = client.get("/api/v1/pricing/defaults")
        assert response.status_code == 200
        data = response.json()
        assert data["base_rate_sq_ft"] == 45.0
        assert data["min_order"] == 500.0
        assert data["max_multiplier"] == 2.0
        assert len(data["modifiers"]) == 17
        assert data["modifiers"]["thermal-break"]["pct"] == 0.15

    def test_price_window(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/pricing",
            json={
                "window": {
                    "width": 36,
                    "height": 48,
                    "opening_type": "double-hung",
                    "thermal_break": True,
                }
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["area_sq_ft"] == 12
        assert data["breakdown"]["multiplier_factor"] == 1.15
        assert data["breakdown"]["multipliers"] == [
            {"label": "Thermal Break (+15.0%)", "amount": 81.0}
        ]
        assert data["breakdown"]["total"] == 621.0
        assert data["shape"] is None

    def test_default_window(self, client: TestClient) -> None:
        response = client.post("/api/v1/pricing", json={})
        assert response.status_code == 200
        assert response.json()["window"]["opening_type"] == "in-swing"
        assert response.json()["breakdown"]["total"] == 990.0

    def test_custom_table(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/pricing",
            json={"window": {"screens": True}, "pricing": _fixture("pricing_table.json")},
        )
        assert response.status_code == 200
        assert response.json()["breakdown"]["total"] == 1180.0

    def test_invalid_table(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/pricing",
            json={"pricing": {"base_rate_sq_ft": 0}},
        )
        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "validation"
        assert data["details"][0]["path"] == "base_rate_sq_ft"
        assert "value" not in data["details"][0]

    def test_invalid_window(self, client: TestClient) -> None:
        response = client.post("/api/v1/pricing", json={"window": {"width": -1}})
        assert response.status_code == 422

    def test_oversized_window(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/pricing", json={"window": {"width": 1e200, "height": 1e200}}
        )
        assert response.status_code == 422


class TestQuoteEndpoint:
    """Tests for POST /api/v1/quote."""

    def test_full(self, client: TestClient) -> None:
        response = client.post("/api/v1/quote", json={"config": _fixture("valid_full.json")})
        assert response.status_code == 200
        breakdown = response.json()["breakdown"]
        assert breakdown["base"] == 1500.0
        assert breakdown["subtotal"] == 2999.43
        assert breakdown["total"] == 3274.0
        assert len(breakdown["multipliers"]) == 5
        assert len(breakdown["flats"]) == 2

    def test_hexagon(self, client: TestClient) -> None:
        response = client.post("/api/v1/quote", json={"config": _fixture("valid_hexagon.json")})
        assert response.status_code == 200
        data = response.json()
        assert data["shape"]["shape"] == "hexagon"
        assert data["shape"]["area_sq_in"] == pytest.approx(498.831, rel=1e-5)
        assert data["window"]["width"] == pytest.approx(22.33, abs=0.01)
        assert data["breakdown"]["total"] == 500.0

    def test_invalid_config(self, client: TestClient) -> None:
        response = client.post("/api/v1/quote", json={"config": _fixture("invalid_version.json")})
        assert response.status_code == 422
        assert response.json()["error_type"] == "validation"

    def test_large_shape_reports_equivalent_square(self, client: TestClient) -> None:
        """A house at the dimension limit prices as a square wider than any window input."""
        config = {
            "schema_version": "1.0",
            "shape": {
                "type": "house",
                "dimensions": {"houseWidth": 10000, "wallHeight": 10000, "gableRise": 10000},
            },
        }
        response = client.post("/api/v1/quote", json={"config": config})
        assert response.status_code == 200
        data = response.json()
        assert data["shape"]["area_sq_in"] == pytest.approx(1.5e8)
        assert data["window"]["width"] == pytest.approx(12247.45, abs=0.01)



class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_valid(self, client: TestClient) -> None:
        response = client.post("/api/v1/validate", json={"config": _fixture("valid_rectangle.json")})
        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is True
        assert data["errors"] == []
        assert data["warnings"] == []

    def test_warnings(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate", json={"config": _fixture("inverted_trapezoid.json")}
        )
        data = response.json()
        assert data["is_valid"] is True
        assert len(data["warnings"]) == 1
        assert data["warnings"][0]["path"] == "shape.dimensions"

    def test_errors(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate",
            json={"config": {"schema_version": "1.0", "window": {"width": 0}}},
        )
        data = response.json()
        assert data["is_valid"] is False
        assert data["errors"][0]["path"] == "window"

    def test_unparseable(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate", json={"config": _fixture("invalid_pricing.json")}
        )
        assert response.status_code == 422
        paths = [d["path"] for d in response.json()["details"]]
        assert "pricing.modifiers.screens" in paths
