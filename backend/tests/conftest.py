"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
in-memory repositories seeded with two users, and an application wired to them.
"""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer
from modules.auth.models import UserRecord
from modules.auth.passwords import hash_password
from modules.auth.repository import InMemoryAuthRepository
from modules.catalog.models import ExtensionVersion, ServiceRecord
from modules.catalog.repository import InMemoryCatalogRepository
from shared.config import Settings, get_settings
from shared.database import reset_client_cache

ALICE_PASSWORD = "correct-horse"
BOB_PASSWORD = "battery-staple"


def make_hash(password: str) -> str:
    """bcrypt hash with a low cost factor to keep tests fast."""
    return hash_password(password, rounds=4)


def make_settings(**overrides) -> Settings:
    """Settings isolated from the environment's .env file."""
    values = {
        "supabase_url": "https://test.supabase.co",
        "supabase_anon_key": "test-anon-key",
        "supabase_service_role_key": "test-service-key",
        "rate_limit_enabled": False,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture(autouse=True)
def reset_caches():
    """Reset the cached settings and store clients around each test."""
    get_settings.cache_clear()
    reset_client_cache()
    yield
    get_settings.cache_clear()
    reset_client_cache()


@pytest.fixture
def alice() -> UserRecord:
    return UserRecord(
        id="user-alice",
        email="a@x.com",
        password_hash=make_hash(ALICE_PASSWORD),
        full_name="Alice Example",
        subscription_type="premium",
    )


@pytest.fixture
def bob() -> UserRecord:
    return UserRecord(
        id="user-bob",
        email="b@x.com",
        password_hash=make_hash(BOB_PASSWORD),
        full_name="Bob Example",
        subscription_type="free",
    )


@pytest.fixture
def auth_repository(alice: UserRecord, bob: UserRecord) -> InMemoryAuthRepository:
    return InMemoryAuthRepository(users=[alice, bob])


@pytest.fixture
def catalog_repository() -> InMemoryCatalogRepository:
    now = datetime.now(timezone.utc)
    return InMemoryCatalogRepository(
        services=[
            ServiceRecord(id="svc-a1", user_id="user-alice", name="Netflix",
                          created_at=now - timedelta(days=2)),
            ServiceRecord(id="svc-a2", user_id="user-alice", name="Spotify",
                          created_at=now - timedelta(days=1)),
            ServiceRecord(id="svc-a3", user_id="user-alice", name="Disabled",
                          is_active=False, created_at=now),
            ServiceRecord(id="svc-b1", user_id="user-bob", name="Hulu",
                          created_at=now),
        ],
        versions=[
            ExtensionVersion(id="v1", version="1.0.0", is_latest=False),
            ExtensionVersion(id="v2", version="1.1.0", is_latest=True,
                             download_url="https://example.com/ext-1.1.0.zip"),
        ],
    )


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def container(
    settings: Settings,
    auth_repository: InMemoryAuthRepository,
    catalog_repository: InMemoryCatalogRepository,
) -> ServiceContainer:
    return ServiceContainer(
        settings,
        auth_repository=auth_repository,
        catalog_repository=catalog_repository,
    )


@pytest.fixture
def app(settings: Settings, container: ServiceContainer):
    return create_app(settings, container)


@pytest.fixture
def client(app) -> TestClient:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def alice_token(client: TestClient) -> str:
    """Log alice in through the API and return her bearer token."""
    response = client.post("/api/login", json={"email": "a@x.com", "password": ALICE_PASSWORD})
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def alice_headers(alice_token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {alice_token}"}


@pytest.fixture
def settings_factory():
    """Build Settings with test defaults and the given overrides."""
    return make_settings
