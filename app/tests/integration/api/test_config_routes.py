"""Integration tests for configuration and domain endpoints."""

import pytest

pytestmark = pytest.mark.integration


class TestLocalizedConfigRoutes:
    """Tests for localized configuration reads."""

    def test_explicit_language(self, client, make_config):
        config_id = make_config(client, languages=("zh-cn", "en-us"))

        response = client.get(f"/api/v1/configs/{config_id}?lang=en_US")

        assert response.status_code == 200
        assert response.headers["X-Content-Language"] == "en-us"
        assert response.json()["title"] == "title-en-us"

    def test_sentinel_like_title_on_repeated_reads(self, client, make_config):
        config_id = make_config(client)
        client.put(
            f"/api/v1/configs/{config_id}/translations/zh-cn",
            json={"title": "__NAN__", "keywords": ["__INFINITY__"]},
        )

        first = client.get(f"/api/v1/configs/{config_id}")
        second = client.get(f"/api/v1/configs/{config_id}")

        assert first.status_code == second.status_code == 200
        assert second.json()["title"] == "__NAN__"
        assert second.json()["keywords"] == ["__INFINITY__"]

    def test_accept_language_header(self, client, make_config):
        config_id = make_config(client, languages=("zh-cn", "ja-jp"))

        response = client.get(
            f"/api/v1/configs/{config_id}",
            headers={"Accept-Language": "fr-FR;q=0.9,ja-JP;q=0.8"},
        )

        assert response.headers["X-Content-Language"] == "ja-jp"

    def test_explicit_outranks_header(self, client, make_config):
        config_id = make_config(client, languages=("zh-cn", "en-us", "ja-jp"))

        response = client.get(
            f"/api/v1/configs/{config_id}?lang=ja-jp",
            headers={"Accept-Language": "en-US"},
        )

        assert response.headers["X-Content-Language"] == "ja-jp"

    def test_fallback_header(self, client, make_config):
        config_id = make_config(client, languages=("zh-cn",))

        response = client.get(f"/api/v1/configs/{config_id}?lang=en-us")

        assert response.status_code == 200
        assert response.headers["X-Content-Language"] == "zh-cn"
        assert response.json()["language"] == "zh-cn"

    def test_missing_config(self, client):
        response = client.get("/api/v1/configs/999")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "CONFIG_NOT_FOUND"

    def test_list_configs(self, client, make_config):
        first = make_config(client)
        make_config(client, languages=())

        response = client.get("/api/v1/configs")

        assert response.status_code == 200
        assert [c["id"] for c in response.json()] == [first]


class TestOfflineConfigRoutes:
    """Tests for reads when no cache backend is available."""

    def test_language_free_view(self, offline_client, make_config):
        config_id = make_config(offline_client, links={"home": "/"})

        response = offline_client.get(f"/api/v1/configs/{config_id}")

        assert response.status_code == 200
        assert "X-Content-Language" not in response.headers
        assert response.json()["links"] == {"home": "/"}
        assert response.json()["title"] is None

    def test_explicit_language_unavailable(self, offline_client, make_config):
        config_id = make_config(offline_client)

        response = offline_client.get(f"/api/v1/configs/{config_id}?lang=zh-cn")

        assert response.status_code == 503
        assert response.json()["error"]["code"] == "MULTILINGUAL_UNAVAILABLE"

    def test_list_language_free(self, offline_client, make_config):
        make_config(offline_client)
        make_config(offline_client, languages=())

        assert len(offline_client.get("/api/v1/configs").json()) == 2


class TestConfigWriteRoutes:
    """Tests for configuration writes."""

    def test_update_config(self, client):
        config_id = client.post("/api/v1/configs", json={}).json()["id"]

        response = client.put(
            f"/api/v1/configs/{config_id}", json={"links": {"docs": "/docs"}}
        )

        assert response.status_code == 200
        assert response.json()["links"] == {"docs": "/docs"}

    def test_create_rejects_bad_body(self, client):
        response = client.post("/api/v1/configs", json={"links": "nope"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_delete_config(self, client, make_config):
        config_id = make_config(client, languages=("zh-cn", "en-us"))
        client.get(f"/api/v1/configs/{config_id}?lang=en-us")

        response = client.delete(f"/api/v1/configs/{config_id}")

        assert response.status_code == 204
        assert client.get(f"/api/v1/configs/{config_id}").status_code == 404
        translations = client.get(f"/api/v1/configs/{config_id}/translations")
        assert translations.json() == []

    def test_delete_config_in_use(self, client, make_config):
        config_id = make_config(client)
        client.post("/api/v1/domains", json={"domain": "example.com", "config_id": config_id})

        response = client.delete(f"/api/v1/configs/{config_id}")

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "CONFIG_IN_USE"


class TestDomainRoutes:
    """Tests for domain endpoints."""

    def test_create_and_lookup_by_subdomain(self, client, make_config):
        config_id = make_config(client, languages=("zh-cn", "en-us"))
        created = client.post(
            "/api/v1/domains",
            json={
                "domain": "https://Example.com/",
                "config_id": config_id,
                "homepage": "https://example.com",
            },
        )
        assert created.status_code == 201
        assert created.json()["domain"] == "example.com"

        response = client.get(
            "/api/v1/domains/www.example.com", headers={"Accept-Language": "en-US"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["domain"] == "example.com"
        assert body["homepage"] == "https://example.com"
        assert body["config"]["title"] == "title-en-us"
        assert response.headers["X-Content-Language"] == "en-us"

    def test_unknown_domain(self, client):
        response = client.get("/api/v1/domains/nowhere.example")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "DOMAIN_NOT_FOUND"

    def test_duplicate_domain(self, client, make_config):
        config_id = make_config(client)
        body = {"domain": "example.com", "config_id": config_id}
        client.post("/api/v1/domains", json=body)

        response = client.post("/api/v1/domains", json=body)

        assert response.status_code == 409

    def test_domain_for_missing_config(self, client):
        response = client.post(
            "/api/v1/domains", json={"domain": "example.com", "config_id": 404}
        )

        assert response.status_code == 404
