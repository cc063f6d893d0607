"""Tests for modules/catalog/repository.py."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import httpx
import pytest

from modules.catalog.interfaces import ICatalogRepository
from modules.catalog.models import ExtensionVersion, ServiceRecord
from modules.catalog.repository import InMemoryCatalogRepository, SupabaseCatalogRepository
from shared.exceptions import StorageError


class TestSupabaseCatalogRepository:
    @pytest.fixture
    def db(self):
        return MagicMock()

    @pytest.fixture
    def repo(self, db):
        return SupabaseCatalogRepository(db)

    def _services_query(self, db):
        return (
            db.table.return_value.select.return_value
            .eq.return_value.eq.return_value.order.return_value
        )

    def test_list_user_services(self, repo, db):
        self._services_query(db).execute.return_value.data = [
            {"id": 2, "user_id": 42, "is_active": True, "name": "Spotify",
             "created_at": "2026-01-02T00:00:00+00:00"},
            {"id": 1, "user_id": 42, "is_active": True, "name": "Netflix",
             "created_at": "2026-01-01T00:00:00+00:00"},
        ]

        services = repo.list_user_services("42")

        db.table.assert_called_once_with("user_services")
        select = db.table.return_value.select.return_value
        select.eq.assert_called_once_with("user_id", "42")
        select.eq.return_value.eq.assert_called_once_with("is_active", True)
        select.eq.return_value.eq.return_value.order.assert_called_once_with("created_at", desc=True)
        assert [s.id for s in services] == ["2", "1"]
        assert services[0].model_dump()["name"] == "Spotify"

    def test_list_user_services_empty(self, repo, db):
        self._services_query(db).execute.return_value.data = []
        assert repo.list_user_services("42") == []

    def test_list_user_services_store_failure(self, repo, db):
        self._services_query(db).execute.side_effect = httpx.ReadTimeout("timed out")
        with pytest.raises(StorageError):
            repo.list_user_services("42")

    def test_get_latest_version(self, repo, db):
        query = db.table.return_value.select.return_value.eq.return_value.limit.return_value
        query.execute.return_value.data = [
            {"id": 3, "is_latest": True, "version": "1.2.0", "download_url": "https://x/ext.zip"}
        ]

        version = repo.get_latest_version()

        db.table.assert_called_once_with("extension_versions")
        db.table.return_value.select.return_value.eq.assert_called_once_with("is_latest", True)
        assert version.id == "3"
        assert version.model_dump()["version"] == "1.2.0"

    def test_get_latest_version_none(self, repo, db):
        query = db.table.return_value.select.return_value.eq.return_value.limit.return_value
        query.execute.return_value.data = []
        assert repo.get_latest_version() is None

    def test_satisfies_interface(self, repo):
        assert isinstance(repo, ICatalogRepository)


class TestInMemoryCatalogRepository:
    def test_scopes_and_orders_services(self):
        repo = InMemoryCatalogRepository(services=[
            ServiceRecord(id="1", user_id="a", created_at=datetime(2026, 1, 1, tzinfo=timezone.utc)),
            ServiceRecord(id="2", user_id="a", created_at=datetime(2026, 1, 3, tzinfo=timezone.utc)),
            ServiceRecord(id="3", user_id="b", created_at=datetime(2026, 1, 2, tzinfo=timezone.utc)),
            ServiceRecord(id="4", user_id="a", is_active=False),
        ])
        assert [s.id for s in repo.list_user_services("a")] == ["2", "1"]
        assert [s.id for s in repo.list_user_services("b")] == ["3"]
        assert repo.list_user_services("c") == []

    def test_latest_version(self):
        repo = InMemoryCatalogRepository()
        assert repo.get_latest_version() is None
        repo.add_version(ExtensionVersion(id="1", is_latest=False))
        repo.add_version(ExtensionVersion(id="2", is_latest=True))
        assert repo.get_latest_version().id == "2"
