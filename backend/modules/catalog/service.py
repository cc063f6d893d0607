"""
Catalog service implementation.

Thin pass-through to the repository; scoping by user happens in the
query, never by filtering results afterwards.
"""

import asyncio
from typing import Optional

from .interfaces import ICatalogRepository, ICatalogService
from .models import ExtensionVersion, ServiceRecord


class CatalogService(ICatalogService):
    """Serves the services listing and the latest extension version."""

    def __init__(self, repository: ICatalogRepository):
        self._repository = repository

    async def list_services(self, user_id: str) -> list[ServiceRecord]:
        return await asyncio.to_thread(self._repository.list_user_services, user_id)

    async def latest_version(self) -> Optional[ExtensionVersion]:
        return await asyncio.to_thread(self._repository.get_latest_version)
