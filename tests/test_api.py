"""Tests for API endpoints."""
from unittest.mock import patch

import pytest


class TestHealthEndpoint:
    """Tests for health check endpoint."""

    def test_health_check(self, client):
        """Health check always reports healthy."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data
        assert "version" in data

    def test_openapi_schema(self, client):
        """Every route is documented, including its 404 error model."""
        response = client.get("/openapi.json")

        assert response.status_code == 200
        paths = response.json()["paths"]
        assert "/api/v1/assessments/{method}" in paths
        assert "404" in paths["/api/v1/methods/{method}"]["get"]["responses"]


class TestMethodEndpoints:
    """Tests for the method catalogue endpoints."""

    def test_list_methods(self, client):
        response = client.get("/api/v1/methods")

        assert response.status_code == 200
        data = response.json()
        assert [m["method"] for m in data] == ["REBA", "RULA", "OWAS", "NIOSH"]
        reba = data[0]
        assert reba["full_name"] == "Rapid Entire Body Assessment"
        assert [f["name"] for f in reba["fields"]][:3] == ["neck", "trunk", "legs"]

    def test_list_methods_persian(self, client):
        response = client.get("/api/v1/methods", params={"locale": "fa"})

        assert response.status_code == 200
        assert response.json()[0]["fields"][0]["label"] == "گردن (Neck)"

    def test_get_method_case_insensitive(self, client):
        response = client.get("/api/v1/methods/owas")

        assert response.status_code == 200
        assert response.json()["method"] == "OWAS"

    def test_get_unknown_method(self, client):
        response = client.get("/api/v1/methods/LUBA")

        assert response.status_code == 404
        assert "LUBA" in response.json()["detail"]

    def test_defaults_use_camel_case(self, client):
        response = client.get("/api/v1/methods/RULA/defaults")

        assert response.status_code == 200
        data = response.json()
        assert data["upperArm"] == 1
        assert data["wristTwist"] == 1
        assert data["force"] == 0

    def test_niosh_defaults(self, client):
        response = client.get("/api/v1/methods/NIOSH/defaults")

        assert response.status_code == 200
        data = response.json()
        assert data["weight"] == 10
        assert data["vDist"] == 75
        assert data["coupling"] == "good"


class TestAssessmentEndpoints:
    """Tests for scoring observations over HTTP."""

    def test_reba_assessment(self, client):
        observation = {
            "neck": 2, "trunk": 3, "legs": 2,
            "upperArm": 3, "lowerArm": 2, "wrist": 2,
            "load": 1, "coupling": 1, "activity": 1,
        }
        response = client.post("/api/v1/assessments/REBA", json=observation)

        assert response.status_code == 200
        data = response.json()
        assert data["method"] == "REBA"
        assert data["result"]["score_a"] == 6
        assert data["result"]["score_b"] == 5
        assert data["result"]["score_c"] == 8
        assert data["result"]["total"] == 9
        assert data["result"]["classification"]["bucket"] == "high"
        assert data["result"]["classification"]["level"] == "High"
        assert data["corrections"][0]["title"] == "Monitor height"

    def test_persian_locale(self, client, neutral_reba):
        response = client.post(
            "/api/v1/assessments/reba", json=neutral_reba, params={"locale": "fa"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["result"]["classification"]["bucket"] == "negligible"
        assert data["result"]["classification"]["level"] == "بی‌خطر"

    def test_empty_body_uses_defaults(self, client):
        response = client.post("/api/v1/assessments/OWAS")

        assert response.status_code == 200
        data = response.json()
        assert data["result"]["category"] == 1
        assert data["result"]["code"] == "1111"

    def test_niosh_assessment(self, client, reference_lift):
        response = client.post("/api/v1/assessments/NIOSH", json=reference_lift)

        assert response.status_code == 200
        result = response.json()["result"]
        assert result["rwl"] == pytest.approx(15.79)
        assert result["li"] == pytest.approx(0.63)
        assert result["classification"]["bucket"] == "safe"
        assert len(response.json()["corrections"]) == 4

    def test_rula_assessment(self, client, worst_rula):
        response = client.post("/api/v1/assessments/RULA", json=worst_rula)

        assert response.status_code == 200
        result = response.json()["result"]
        assert result["total"] == 8
        assert result["classification"]["bucket"] == "investigate-immediately"

    def test_real_valued_ordinals(self, client):
        response = client.post("/api/v1/assessments/REBA", json={"neck": 2.5, "trunk": 3.7})

        assert response.status_code == 200
        expected = client.post("/api/v1/assessments/REBA", json={"neck": 2, "trunk": 3})
        assert response.json()["result"] == expected.json()["result"]

    def test_unknown_method(self, client):
        response = client.post("/api/v1/assessments/LUBA", json={})

        assert response.status_code == 404

    def test_unknown_field_rejected(self, client):
        response = client.post("/api/v1/assessments/REBA", json={"shoulder": 2})

        assert response.status_code == 422

    def test_invalid_value_rejected(self, client):
        response = client.post("/api/v1/assessments/OWAS", json={"back": "bent"})

        assert response.status_code == 422

    def test_negative_weight_rejected(self, client):
        response = client.post("/api/v1/assessments/NIOSH", json={"weight": -5})

        assert response.status_code == 422


class TestEstimateEndpoints:
    """Tests for merging estimated parameters."""

    def test_merge_clamps_values(self, client, neutral_reba):
        response = client.post(
            "/api/v1/assessments/REBA/estimates",
            json={"observation": neutral_reba, "estimates": {"neck": 7.2, "upperArm": 2.6}},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["neck"] == 3
        assert data["upperArm"] == 3
        assert data["trunk"] == 1

    def test_merge_without_observation(self, client):
        response = client.post(
            "/api/v1/assessments/OWAS/estimates",
            json={"estimates": {"legs": 9, "unknown": 1}},
        )

        assert response.status_code == 200
        assert response.json() == {"back": 1, "arms": 1, "legs": 7, "load": 1}

    def test_merge_unknown_method(self, client):
        response = client.post("/api/v1/assessments/LUBA/estimates", json={"estimates": {}})

        assert response.status_code == 404


class TestErrorHandling:
    """Unexpected errors become a 500 without leaking details."""

    def _failing_client(self, debug):
        from fastapi.testclient import TestClient

        from ergoscore.config import Settings
        from ergoscore.main import create_app

        with patch("ergoscore.main.get_settings", return_value=Settings(debug=debug)):
            app = create_app()

        @app.get("/boom")
        async def boom():
            raise RuntimeError("database password is hunter2")

        return TestClient(app, raise_server_exceptions=False)

    def test_error_text_hidden(self):
        response = self._failing_client(debug=False).get("/boom")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}

    def test_error_text_shown_in_debug(self):
        response = self._failing_client(debug=True).get("/boom")

        assert response.status_code == 500
        assert "hunter2" in response.json()["error"]
