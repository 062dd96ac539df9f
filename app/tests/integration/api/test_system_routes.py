"""Integration tests for system and metadata endpoints."""

import pytest

pytestmark = pytest.mark.integration


class TestSystemRoutes:
    """Tests for /health and /version."""

    def test_health_reports_capability(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["multilingual"] == "available"
        assert body["cache"]["backend"] == "memory"

    def test_health_without_cache(self, offline_client):
        body = offline_client.get("/health").json()

        assert body["status"] == "ok"
        assert body["multilingual"] == "unavailable"

    def test_version(self, client):
        response = client.get("/version")

        assert response.status_code == 200
        assert "version" in response.json()

    def test_request_id_echoed(self, client):
        response = client.get("/version", headers={"X-Request-ID": "req-42"})

        assert response.headers["X-Request-ID"] == "req-42"

    def test_request_id_generated(self, client):
        assert client.get("/version").headers["X-Request-ID"]


class TestLanguagesRoute:
    """Tests for GET /api/v1/languages."""

    def test_lists_languages(self, client):
        response = client.get("/api/v1/languages")

        assert response.json() == {
            "default": "zh-cn",
            "supported": ["zh-cn", "en-us", "ja-jp"],
        }
