"""
Catalog repositories.

Encapsulates the Supabase queries for:
- user_services
- extension_versions
"""

from datetime import datetime, timezone
from typing import Optional, Any

from shared.repository import BaseRepository
from .models import ExtensionVersion, ServiceRecord

SERVICES_TABLE = "user_services"
VERSIONS_TABLE = "extension_versions"


class SupabaseCatalogRepository(BaseRepository[ServiceRecord]):
    """Repository for the read-only catalog tables in Supabase."""

    def list_user_services(self, user_id: str) -> list[ServiceRecord]:
        result = self._execute(
            self._db.table(SERVICES_TABLE)
            .select("*")
            .eq("user_id", user_id)
            .eq("is_active", True)
            .order("created_at", desc=True),
            "list_user_services",
        )
        return [self._map_to_service(row) for row in result.data or []]

    def get_latest_version(self) -> Optional[ExtensionVersion]:
        result = self._execute(
            self._db.table(VERSIONS_TABLE).select("*").eq("is_latest", True).limit(1),
            "get_latest_version",
        )
        if not result.data:
            return None
        return self._map_to_version(result.data[0])

    def _map_to_service(self, data: dict[str, Any]) -> ServiceRecord:
        """Map database row to ServiceRecord, keeping every column."""
        return ServiceRecord(**{**data, "id": str(data["id"]), "user_id": str(data["user_id"])})

    def _map_to_version(self, data: dict[str, Any]) -> ExtensionVersion:
        """Map database row to ExtensionVersion, keeping every column."""
        return ExtensionVersion(**{**data, "id": str(data["id"])})


class InMemoryCatalogRepository:
    """List-backed catalog repository for tests and local development."""

    def __init__(
        self,
        services: Optional[list[ServiceRecord]] = None,
        versions: Optional[list[ExtensionVersion]] = None,
    ) -> None:
        self._services = list(services or [])
        self._versions = list(versions or [])

    def add_service(self, service: ServiceRecord) -> ServiceRecord:
        self._services.append(service)
        return service

    def add_version(self, version: ExtensionVersion) -> ExtensionVersion:
        self._versions.append(version)
        return version

    def list_user_services(self, user_id: str) -> list[ServiceRecord]:
        rows = [s for s in self._services if s.user_id == user_id and s.is_active]
        oldest = datetime.min.replace(tzinfo=timezone.utc)
        return sorted(rows, key=lambda s: s.created_at or oldest, reverse=True)

    def get_latest_version(self) -> Optional[ExtensionVersion]:
        for version in self._versions:
            if version.is_latest:
                return version
        return None
