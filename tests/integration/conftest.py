"""
Fixtures for integration tests.

Provides:
- Test clients for FastAPI apps built with test settings
- In-memory database for the seeding utility
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from remitlend.core.config import Settings
from remitlend.infrastructure.database import Base
from remitlend.main import create_app

TEST_API_KEY = "test-internal-key"


def make_settings(**overrides) -> Settings:
    values = {
        "environment": "test",
        "internal_api_key": TEST_API_KEY,
        "rate_limit_enabled": False,
    }
    values.update(overrides)
    return Settings(**values)


async def make_client(app: FastAPI) -> AsyncClient:
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest.fixture
def api_key() -> str:
    return TEST_API_KEY


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Client for an app in the test environment with an API key configured."""
    async with await make_client(create_app(make_settings())) as ac:
        yield ac


@pytest_asyncio.fixture
async def production_client() -> AsyncGenerator[AsyncClient, None]:
    """Client for an app in production mode: no stacks, no diagnostics."""
    app = create_app(make_settings(environment="production"))
    async with await make_client(app) as ac:
        yield ac


@pytest_asyncio.fixture
async def unconfigured_client() -> AsyncGenerator[AsyncClient, None]:
    """Client for an app with no INTERNAL_API_KEY."""
    app = create_app(make_settings(internal_api_key=None))
    async with await make_client(app) as ac:
        yield ac


@pytest_asyncio.fixture
async def unconfigured_production_client() -> AsyncGenerator[AsyncClient, None]:
    app = create_app(make_settings(internal_api_key=None, environment="production"))
    async with await make_client(app) as ac:
        yield ac


@pytest_asyncio.fixture
async def cors_client() -> AsyncGenerator[AsyncClient, None]:
    app = create_app(make_settings(cors_allowed_origins="https://app.remitlend.io"))
    async with await make_client(app) as ac:
        yield ac


@pytest_asyncio.fixture
async def rate_limited_client() -> AsyncGenerator[AsyncClient, None]:
    """Client for an app with rate limiting on."""
    app = create_app(make_settings(rate_limit_enabled=True))
    async with await make_client(app) as ac:
        yield ac


@pytest.fixture
def client_for():
    """Build a client for a fresh app created with the given setting overrides."""

    def build(**overrides) -> AsyncClient:
        transport = ASGITransport(app=create_app(make_settings(**overrides)))
        return AsyncClient(transport=transport, base_url="http://test")

    return build


@pytest.fixture
def valid_update() -> dict:
    """Request body for a valid on-time repayment."""
    return {
        "userId": "ab",
        "repaymentAmount": 500,
        "onTime": True,
    }
