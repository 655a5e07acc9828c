"""Shared fixtures: an isolated SQLite database per test and an HTTP client bound to it."""
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from api.main import app
from core.config import Settings, get_settings
from db.session import create_database_engine, init_db


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings pointing at a per-test data directory, with auth disabled."""
    return Settings(_env_file=None, data_dir=tmp_path, api_key="")


@pytest.fixture
async def db_engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine]:
    """Engine for a fresh database file with the schema created."""
    engine = create_database_engine(test_settings.database_url)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(
    db_engine: AsyncEngine,
    monkeypatch: pytest.MonkeyPatch,
) -> async_sessionmaker[AsyncSession]:
    """
    Session factory bound to the test engine.

    Also installed as the process-wide factory, so the real get_async_session
    dependency (commit on success, rollback on error) serves the test app.
    """
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    monkeypatch.setattr("db.session.get_session_factory", lambda: factory)
    return factory


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession]:
    """A session for calling services directly."""
    async with session_factory() as session:
        yield session


def _make_client(settings: Settings) -> AsyncClient:
    app.dependency_overrides[get_settings] = lambda: settings
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],  # noqa: ARG001
    test_settings: Settings,
) -> AsyncGenerator[AsyncClient]:
    """HTTP client for the app with auth disabled."""
    async with _make_client(test_settings) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def auth_client(
    session_factory: async_sessionmaker[AsyncSession],  # noqa: ARG001
    test_settings: Settings,
) -> AsyncGenerator[AsyncClient]:
    """HTTP client for the app with API key 'test-secret' required."""
    settings = test_settings.model_copy(update={"api_key": "test-secret"})
    async with _make_client(settings) as ac:
        yield ac
    app.dependency_overrides.clear()
