"""Tests for the services and version endpoints."""

from fastapi.testclient import TestClient

from api.app import create_app
from modules.catalog.models import ServiceRecord


BOB_PASSWORD = "battery-staple"


class TestServicesEndpoint:
    def test_lists_own_services_newest_first(self, client, alice_headers):
        response = client.get("/api/services", headers=alice_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert [s["id"] for s in data["services"]] == ["svc-a2", "svc-a1"]
        assert data["services"][0]["name"] == "Spotify"

    def test_never_returns_other_users_rows(self, client, alice_headers):
        bob_token = client.post(
            "/api/login", json={"email": "b@x.com", "password": BOB_PASSWORD}
        ).json()["token"]

        alice_rows = client.get("/api/services", headers=alice_headers).json()["services"]
        bob_rows = client.get(
            "/api/services", headers={"Authorization": f"Bearer {bob_token}"}
        ).json()["services"]

        assert {s["user_id"] for s in alice_rows} == {"user-alice"}
        assert {s["user_id"] for s in bob_rows} == {"user-bob"}

    def test_empty_list_is_success(self, client, alice_headers, catalog_repository):
        catalog_repository._services.clear()

        response = client.get("/api/services", headers=alice_headers)

        assert response.status_code == 200
        assert response.json() == {"success": True, "services": []}

    def test_new_rows_appear(self, client, alice_headers, catalog_repository):
        catalog_repository.add_service(ServiceRecord(id="svc-a9", user_id="user-alice"))
        ids = [s["id"] for s in client.get("/api/services", headers=alice_headers).json()["services"]]
        assert "svc-a9" in ids


class TestVersionEndpoint:
    def test_public_by_default(self, client):
        response = client.get("/api/version")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["version"]["id"] == "v2"
        assert data["version"]["version"] == "1.1.0"
        assert data["version"]["download_url"] == "https://example.com/ext-1.1.0.zip"

    def test_no_latest_version(self, client, catalog_repository):
        catalog_repository._versions.clear()

        response = client.get("/api/version")

        assert response.status_code == 200
        assert response.json() == {"success": True, "version": None}

    def test_can_require_auth(self, container, settings_factory):
        settings = settings_factory(version_requires_auth=True)
        container.settings = settings
        with TestClient(create_app(settings, container)) as client:
            assert client.get("/api/version").status_code == 401

            token = client.post(
                "/api/login", json={"email": "b@x.com", "password": BOB_PASSWORD}
            ).json()["token"]
            response = client.get("/api/version", headers={"Authorization": f"Bearer {token}"})
            assert response.status_code == 200
