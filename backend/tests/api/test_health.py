"""Tests for health check endpoints."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from api import app


client = TestClient(app)


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self):
        """Health endpoint should return 200 with status."""
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"

    def test_health_response_structure(self):
        response = client.get("/api/health")
        assert set(response.json().keys()) == {"status", "version"}

    def test_readiness_when_configured(self, settings):
        """Readiness reports ready when Stripe and Supabase are configured."""
        with patch("api.routes.health.get_settings", return_value=settings):
            response = client.get("/api/ready")

        assert response.status_code == 200
        assert response.json() == {
            "status": "ready",
            "stripe": "configured",
            "database": "configured",
        }

    def test_readiness_when_stripe_missing(self, settings):
        settings.stripe_secret_key = ""
        with patch("api.routes.health.get_settings", return_value=settings):
            response = client.get("/api/ready")

        data = response.json()
        assert data["status"] == "degraded"
        assert data["stripe"] == "missing"
        assert data["database"] == "configured"
