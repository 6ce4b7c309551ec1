"""
Pytest configuration and fixtures following kkb_fastapi pattern.
"""
import logging

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

import app.database.schemas  # noqa: F401
from app.core.config import Config, ConfigFile, get_config
from app.create_app import get_app
from app.database import Base
from app.database.base import get_db_url
from app.database.session_manager.db_session import Database
from app.services.factors.factor_table import get_default_factors

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


@pytest.fixture(scope="session")
def test_config():
    """
    Get test configuration.

    Returns configuration with test database settings.
    """
    return get_config(ConfigFile.TEST)


@pytest.fixture
def default_factors():
    """Built-in emission factor table."""
    return get_default_factors()


@pytest_asyncio.fixture(scope="function")
async def test_async_engine(test_config):
    """
    Create async database engine for testing.
    """
    test_engine = create_async_engine(get_db_url(test_config))

    yield test_engine

    await test_engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_cleanup(test_async_engine):
    """
    Clean database before and after each test.

    Drops all tables, recreates them, then drops again after test.
    Ensures clean state for each test.
    """
    async with test_async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield

    async with test_async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture(scope="function")
async def initialize_db_session(test_config, db_cleanup):
    """
    Initialize Database singleton for testing.

    Sets up database session manager with test configuration.
    """
    Database.init(get_db_url(test_config))

    yield

    await Database.dispose()


def build_test_app(config: Config):
    """FastAPI application using the given configuration."""
    app = get_app(ConfigFile.TEST)
    app.state.config = config
    return app


@pytest_asyncio.fixture(scope="function")
async def test_app(test_config, initialize_db_session):
    """
    Create FastAPI application with test configuration.

    Returns configured FastAPI app instance for testing.
    """
    yield build_test_app(test_config)


@pytest_asyncio.fixture(scope="function")
async def test_async_client(test_app):
    """
    Create async HTTP client for API testing.

    Uses httpx AsyncClient with ASGITransport for testing FastAPI endpoints.
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(
        transport=transport, base_url="http://localhost:8000", follow_redirects=True
    ) as ac:
        yield ac


@pytest_asyncio.fixture(scope="function")
async def test_db_session(initialize_db_session):
    """
    Provide database session for tests.

    Creates async session using Database context manager.
    """
    async with Database() as session:
        yield session


def build_test_client(config: Config) -> AsyncClient:
    """Async HTTP client for an app running with the given configuration."""
    transport = ASGITransport(app=build_test_app(config))
    return AsyncClient(
        transport=transport, base_url="http://localhost:8000", follow_redirects=True
    )


@pytest_asyncio.fixture(scope="function")
async def file_backend_client(test_config, initialize_db_session, tmp_path):
    """
    Async HTTP client for an app keeping emission factors in a JSON file.

    The settings file lives in the test's tmp_path.
    """
    data = dict(test_config.data)
    data["factors"] = {"backend": "file", "file_path": str(tmp_path / "settings.json")}

    async with build_test_client(Config(test_config.file_name, data)) as ac:
        yield ac


@pytest_asyncio.fixture(scope="function")
async def low_threshold_client(test_config, initialize_db_session):
    """Async HTTP client for an app with a 3 kg daily emissions threshold."""
    data = dict(test_config.data)
    data["rewards"] = {"daily_threshold_kg": 3.0}

    async with build_test_client(Config(test_config.file_name, data)) as ac:
        yield ac
