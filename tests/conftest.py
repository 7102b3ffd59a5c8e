"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator, Awaitable, Callable
from pathlib import Path

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.entities.profile import Profile
from domain.services.profile_cache import ProfileCache
from infrastructure.database.models import Base, ProfileModel

# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_WALLET_ID = "5GrwvaEF5zXb26Fz9rcQpDWS57CtERHpNehXCPcNoHGKutQY"

ProfileSeeder = Callable[..., Awaitable[Profile]]


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database per test.

    StaticPool keeps one connection so every session sees the same database.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def seed_profile(session_factory: async_sessionmaker[AsyncSession]) -> ProfileSeeder:
    """Insert a profile row directly, bypassing the service layer."""

    async def _seed(wallet_id: str = TEST_WALLET_ID, name: str = "alice", **fields) -> Profile:  # type: ignore[no-untyped-def]
        async with session_factory() as session:
            model = ProfileModel(wallet_id=wallet_id, name=name, **fields)
            session.add(model)
            await session.commit()
            return Profile(id=model.id, wallet_id=wallet_id, name=name)

    return _seed


@pytest.fixture
def profile_cache() -> ProfileCache:
    """A private cache so tests never share cached profiles."""
    return ProfileCache(ttl_seconds=300)


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client against the default app."""
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def api_client(
    session_factory: async_sessionmaker[AsyncSession],
    profile_cache: ProfileCache,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create test client wired to the in-memory database.

    This client:
    - Uses an in-memory SQLite database
    - Overrides the UoW factory to use the test session factory
    - Uses a per-test profile cache
    - Points the health check session at the test database
    """
    from api.v1.dependencies import get_profile_cache, get_profile_service
    from domain.services.profile_service import ProfileLookupService
    from domain.services.view_counter import ViewCounter
    from infrastructure.database.session import get_async_session
    from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
    from main import create_app

    app = create_app()

    def test_uow_factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    async def override_get_async_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    service = ProfileLookupService(
        test_uow_factory,
        cache=profile_cache,
        view_counter=ViewCounter(test_uow_factory),
    )

    app.dependency_overrides[get_profile_service] = lambda: service
    app.dependency_overrides[get_profile_cache] = lambda: profile_cache
    app.dependency_overrides[get_async_session] = override_get_async_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
