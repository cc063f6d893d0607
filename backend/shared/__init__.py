"""
Shared infrastructure for the MultiProfile backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- logging: Root logger setup
- repository: Base class for Supabase-backed repositories

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, get_supabase_anon_client, reset_client_cache
from .exceptions import (
    MultiProfileError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    StorageError,
    ConfigurationError,
    UnhandledError,
)
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "get_supabase_anon_client",
    "reset_client_cache",
    "MultiProfileError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "StorageError",
    "ConfigurationError",
    "UnhandledError",
    "AuthenticatedUser",
]
