"""
API tests for root and health endpoints.
"""

from fastapi.testclient import TestClient

from app.api.main import app

client = TestClient(app)


class TestSystemEndpoints:
    """Tests for GET / and GET /api/health."""

    def test_root(self):
        r = client.get("/")
        assert r.status_code == 200
        assert r.json()["health"] == "/api/health"

    def test_health_with_key(self, monkeypatch):
        """Health reports the key as configured without exposing it."""
        monkeypatch.setenv("MOVIE_API_KEY", "secret-value")
        r = client.get("/api/health")
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "healthy"
        assert data["api_key_configured"] is True
        assert "secret-value" not in r.text

    def test_health_without_key(self, monkeypatch):
        monkeypatch.delenv("MOVIE_API_KEY", raising=False)
        r = client.get("/api/health")
        assert r.status_code == 200
        assert r.json()["status"] == "degraded"
        assert r.json()["api_key_configured"] is False

    def test_unknown_path_keeps_default_404(self):
        r = client.get("/api/does-not-exist")
        assert r.status_code == 404
        assert r.json() == {"detail": "Not Found"}
