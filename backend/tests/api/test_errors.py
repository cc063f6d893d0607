"""Tests for api/error_handlers.py."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer
from shared.exceptions import StorageError


@pytest.fixture
def broken_catalog(settings, auth_repository):
    catalog = MagicMock()
    container = ServiceContainer(
        settings,
        auth_repository=auth_repository,
        catalog_repository=catalog,
    )
    return catalog, create_app(settings, container)


class TestErrorHandlers:
    def test_storage_error_is_generic_500(self, broken_catalog):
        catalog, app = broken_catalog
        catalog.get_latest_version.side_effect = StorageError(
            "get_latest_version", details={"store_code": "08006"}
        )

        with TestClient(app) as client:
            response = client.get("/api/version")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "STORAGE_ERROR",
            "message": "Internal server error",
        }

    def test_unhandled_error_is_json_500(self, broken_catalog):
        catalog, app = broken_catalog
        catalog.get_latest_version.side_effect = RuntimeError("boom")

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/api/version")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "INTERNAL_ERROR",
            "message": "Internal server error",
        }

    def test_unknown_route(self, client):
        response = client.get("/api/nope")
        assert response.status_code == 404
        assert response.json()["success"] is False
        assert response.json()["error"] == "HTTP_ERROR"

    def test_wrong_method(self, client):
        response = client.get("/api/login")
        assert response.status_code == 405
        assert response.json()["success"] is False

    def test_storage_error_on_services_listing(self, broken_catalog):
        catalog, app = broken_catalog
        catalog.list_user_services.side_effect = StorageError(
            "list_user_services", details={"store_code": "57014"}
        )

        with TestClient(app) as client:
            login = client.post("/api/login", json={"email": "a@x.com", "password": "correct-horse"})
            response = client.get(
                "/api/services", headers={"Authorization": f"Bearer {login.json()['token']}"}
            )

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "STORAGE_ERROR",
            "message": "Internal server error",
        }

    def test_storage_error_on_session_insert(self, settings, alice, catalog_repository):
        auth = MagicMock()
        auth.find_user_by_email.return_value = alice
        auth.insert_session.side_effect = StorageError("insert_session", details={"store_code": "23505"})
        container = ServiceContainer(
            settings,
            auth_repository=auth,
            catalog_repository=catalog_repository,
        )

        with TestClient(create_app(settings, container)) as client:
            response = client.post("/api/login", json={"email": "a@x.com", "password": "correct-horse"})

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "STORAGE_ERROR",
            "message": "Internal server error",
        }
        auth.insert_session.assert_called_once()
