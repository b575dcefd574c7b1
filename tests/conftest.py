"""Pytest configuration and fixtures for the access maintainer.

HTTP tests build a fresh app per test (create_app) so env-driven settings
such as ENABLED_SERVICES apply. Service dependencies can be overridden with
mocks; DB-dependent fixtures skip when DATABASE_URL is not configured.
"""

from collections.abc import AsyncIterator, Iterator
from datetime import UTC, datetime

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from maintainer.core.config import get_settings
from maintainer.infrastructure.persistence import database
from maintainer.main import create_app

NOW = datetime(2025, 3, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Drop cached settings around each test so monkeypatched env is honoured."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def app() -> Iterator[FastAPI]:
    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def _require_database() -> None:
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, "
            "then run: alembic upgrade head"
        )


@pytest.fixture
async def db_session() -> AsyncIterator[AsyncSession]:
    """Database session for repository/integration tests.

    Repositories commit, so tests use unique natural keys instead of relying
    on rollback. The engine is disposed afterwards because each test runs on
    its own event loop. Use @pytest.mark.requires_db on tests that need it;
    run without DB via: pytest -m 'not requires_db'.
    """
    _require_database()
    async with database.AsyncSessionLocal() as session:
        yield session
    await database.dispose_engine()


@pytest.fixture
async def db_client(client: AsyncClient) -> AsyncIterator[AsyncClient]:
    """HTTP client whose requests reach the real database."""
    _require_database()
    yield client
    await database.dispose_engine()
