"""
Catalog module interfaces.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import ExtensionVersion, ServiceRecord


@runtime_checkable
class ICatalogRepository(Protocol):
    """Read-only store queries behind the listing endpoints."""

    def list_user_services(self, user_id: str) -> list[ServiceRecord]:
        """Active services owned by the user, newest first."""
        ...

    def get_latest_version(self) -> Optional[ExtensionVersion]:
        """The version flagged as latest, or None if there is none."""
        ...


@runtime_checkable
class ICatalogService(Protocol):
    """Interface for the read-only listings."""

    async def list_services(self, user_id: str) -> list[ServiceRecord]:
        """
        List the user's active services.

        Raises:
            StorageError: If the store query fails
        """
        ...

    async def latest_version(self) -> Optional[ExtensionVersion]:
        """
        Get the latest published extension version.

        Raises:
            StorageError: If the store query fails
        """
        ...
