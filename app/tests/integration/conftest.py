"""
Root-level conftest.py for integration tests.

Integration tests run the real FastAPI application with the in-memory
stores and cache backend selected through environment settings. Every
provider is rebuilt per test so no state leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from server import server


@pytest.fixture
def client(app_env, reset_providers):
    """Test client for an application with multilingual reads enabled."""
    with TestClient(server.handler) as test_client:
        yield test_client


@pytest.fixture
def offline_client(app_env, reset_providers):
    """Test client for an application started without a cache backend."""
    app_env.setenv("CACHE_BACKEND", "none")
    with TestClient(server.handler) as test_client:
        yield test_client


@pytest.fixture
def translation_payload():
    return {
        "language_code": "zh-cn",
        "title": "示例站点",
        "author": "作者",
        "description": "站点描述",
        "keywords": ["示例", "站点"],
    }


@pytest.fixture
def make_config(translation_payload):
    """Create a configuration with translations through the API."""

    def _make(test_client, languages=("zh-cn",), links=None):
        response = test_client.post(
            "/api/v1/configs", json={"links": links or {}, "permissions": {}}
        )
        assert response.status_code == 201
        config_id = response.json()["id"]
        for code in languages:
            payload = {**translation_payload, "language_code": code, "title": f"title-{code}"}
            created = test_client.post(
                f"/api/v1/configs/{config_id}/translations", json=payload
            )
            assert created.status_code == 201
        return config_id

    return _make
