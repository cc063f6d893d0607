"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

The container lives on ``app.state`` so each application built by
create_app() carries its own wiring.
"""

from datetime import timedelta
from typing import TYPE_CHECKING, Optional

from fastapi import Request

from shared.config import Settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthRepository, IAuthService
    from modules.catalog.interfaces import ICatalogRepository, ICatalogService


class ServiceContainer:
    """
    Container for all service instances.

    Repositories may be injected (tests pass in-memory fakes); otherwise
    Supabase-backed ones are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(
        self,
        settings: Settings,
        auth_repository: "Optional[IAuthRepository]" = None,
        catalog_repository: "Optional[ICatalogRepository]" = None,
    ) -> None:
        self.settings = settings
        self._injected_auth_repository = auth_repository
        self._injected_catalog_repository = catalog_repository
        self._auth_repository = auth_repository
        self._catalog_repository = catalog_repository
        self._auth_service: "IAuthService | None" = None
        self._catalog_service: "ICatalogService | None" = None

    @property
    def uses_store(self) -> bool:
        """Whether any repository will be backed by Supabase."""
        return self._injected_auth_repository is None or self._injected_catalog_repository is None

    def verify(self) -> None:
        """
        Fail fast when the store is needed but not configured.

        Raises:
            ConfigurationError: If Supabase settings are missing
        """
        if self.uses_store:
            self.settings.require_supabase()

    @property
    def auth_repository(self) -> "IAuthRepository":
        """Get the auth repository instance."""
        if self._auth_repository is None:
            from modules.auth.repository import SupabaseAuthRepository
            from shared.database import get_supabase_client
            self._auth_repository = SupabaseAuthRepository(get_supabase_client(self.settings))
        return self._auth_repository

    @property
    def catalog_repository(self) -> "ICatalogRepository":
        """Get the catalog repository instance."""
        if self._catalog_repository is None:
            from modules.catalog.repository import SupabaseCatalogRepository
            from shared.database import get_supabase_client
            self._catalog_repository = SupabaseCatalogRepository(get_supabase_client(self.settings))
        return self._catalog_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                repository=self.auth_repository,
                session_ttl=timedelta(days=self.settings.session_ttl_days),
            )
        return self._auth_service

    @property
    def catalog(self) -> "ICatalogService":
        """Get the catalog service instance."""
        if self._catalog_service is None:
            from modules.catalog.service import CatalogService
            self._catalog_service = CatalogService(repository=self.catalog_repository)
        return self._catalog_service

    def reset(self) -> None:
        """
        Reset all cached services.

        Injected repositories are kept; Supabase-backed ones are rebuilt.
        """
        self._auth_repository = self._injected_auth_repository
        self._catalog_repository = self._injected_catalog_repository
        self._auth_service = None
        self._catalog_service = None


def get_container(request: Request) -> ServiceContainer:
    """Get the container of the application serving this request."""
    return request.app.state.container


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service(request: Request) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container(request).auth


def get_catalog_service(request: Request) -> "ICatalogService":
    """FastAPI dependency for catalog service."""
    return get_container(request).catalog
