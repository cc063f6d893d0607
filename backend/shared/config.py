"""
Centralized configuration for the MultiProfile backend.

All settings are loaded from environment variables with sensible defaults.
Store settings are namespaced under SUPABASE_*.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "MultiProfile Backend API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = False
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Rate limiting (fixed window per client address)
    rate_limit_enabled: bool = True
    rate_limit_requests: int = 100
    rate_limit_window: int = 15 * 60  # seconds

    # Supabase
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_service_role_key: str = ""

    # Sessions
    session_ttl_days: int = 7

    # Whether GET /api/version requires a bearer token
    version_requires_auth: bool = False

    def missing_supabase_settings(self) -> list[str]:
        """Return the environment variable names of missing store settings."""
        required = {
            "SUPABASE_URL": self.supabase_url,
            "SUPABASE_ANON_KEY": self.supabase_anon_key,
            "SUPABASE_SERVICE_ROLE_KEY": self.supabase_service_role_key,
        }
        return [name for name, value in required.items() if not value]

    def require_supabase(self) -> None:
        """
        Ensure the store connection settings are present.

        Raises:
            ConfigurationError: If any of the Supabase settings is empty.
        """
        missing = self.missing_supabase_settings()
        if missing:
            raise ConfigurationError(
                "Supabase configuration missing. Set " + ", ".join(missing) + ".",
                details={"missing": missing},
            )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
