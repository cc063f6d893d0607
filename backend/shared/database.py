"""
Database client factory for Supabase.

Provides the privileged service-role client used by repositories and the
public anon client. Both are cached per process.
"""

from typing import Optional
from supabase import create_client, Client

from .config import Settings, get_settings
from .exceptions import ConfigurationError

# Module-level client cache
_service_client: Optional[Client] = None
_anon_client: Optional[Client] = None


def get_supabase_client(settings: Optional[Settings] = None) -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    Repositories use this client: sessions are looked up by token on
    behalf of callers that are not yet identified to the store.

    Args:
        settings: Settings to build the client from (defaults to cached settings)

    Returns:
        Supabase client configured with service role key

    Raises:
        ConfigurationError: If the URL or service role key is missing
    """
    global _service_client

    if _service_client is None:
        settings = settings or get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise ConfigurationError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def get_supabase_anon_client(settings: Optional[Settings] = None) -> Client:
    """
    Get Supabase client with the public anon key (respects RLS).

    The built-in repositories all use the service-role client. This one is
    for callers that must act under row-level security, such as queries
    made on behalf of a Supabase Auth user.

    Raises:
        ConfigurationError: If the URL or anon key is missing
    """
    global _anon_client

    if _anon_client is None:
        settings = settings or get_settings()
        if not settings.supabase_url or not settings.supabase_anon_key:
            raise ConfigurationError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_ANON_KEY environment variables."
            )
        _anon_client = create_client(
            settings.supabase_url,
            settings.supabase_anon_key,
        )

    return _anon_client


def reset_client_cache() -> None:
    """
    Reset the cached database clients.

    Useful for testing or when configuration changes.
    """
    global _service_client, _anon_client
    _service_client = None
    _anon_client = None
