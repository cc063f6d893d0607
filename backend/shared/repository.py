"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the translation of store failures.
"""

import logging
from typing import Any, TypeVar, Generic

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all Supabase-backed repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - _execute() which turns client failures into StorageError
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class ServiceRepository(BaseRepository[ServiceRecord]):
            def list_for_user(self, user_id: str) -> list[ServiceRecord]:
                result = self._execute(
                    self._db.table("user_services").select("*").eq("user_id", user_id),
                    "list_for_user",
                )
                return [ServiceRecord(**row) for row in result.data or []]
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(self, query: Any, operation: str) -> Any:
        """
        Execute a PostgREST query builder.

        Args:
            query: Query builder returned by the Supabase client.
            operation: Name used in logs and in the raised StorageError.

        Returns:
            The client's APIResponse.

        Raises:
            StorageError: If the store rejects the query or is unreachable.
        """
        try:
            return query.execute()
        except APIError as e:
            logger.error("Store rejected %s: %s", operation, e.message)
            raise StorageError(operation, details={"store_code": e.code}) from e
        except httpx.HTTPError as e:
            logger.error("Store unreachable during %s: %s", operation, e)
            raise StorageError(operation) from e
