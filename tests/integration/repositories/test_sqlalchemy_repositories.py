"""Integration tests for the SQLAlchemy repositories and unit of work."""

from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from core.exceptions import StorageUnavailableError
from domain.entities.view_event import ViewEvent
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from tests.conftest import TEST_WALLET_ID, ProfileSeeder


@pytest.fixture
def uow_factory(session_factory: async_sessionmaker[AsyncSession]):  # type: ignore[no-untyped-def]
    return lambda: SQLAlchemyUnitOfWork(session_factory)


class TestProfileRepository:
    @pytest.mark.asyncio
    async def test_get_by_wallet_id(self, uow_factory, seed_profile: ProfileSeeder):  # type: ignore[no-untyped-def]
        await seed_profile(twitter_name="@alice", artist=True)

        async with uow_factory() as uow:
            profile = await uow.profiles.get_by_wallet_id(TEST_WALLET_ID)

        assert profile is not None
        assert profile.name == "alice"
        assert profile.twitter_name == "@alice"
        assert profile.artist is True

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, uow_factory):  # type: ignore[no-untyped-def]
        async with uow_factory() as uow:
            assert await uow.profiles.get_by_wallet_id("nonexistent") is None

    @pytest.mark.asyncio
    async def test_get_by_ids_skips_unknown_and_duplicates(self, uow_factory, seed_profile: ProfileSeeder):  # type: ignore[no-untyped-def]
        alice = await seed_profile()
        bob = await seed_profile(wallet_id="wallet-bob", name="bob")

        async with uow_factory() as uow:
            profiles = await uow.profiles.get_by_ids([bob.id, uuid4(), alice.id, bob.id])

        assert [p.wallet_id for p in profiles] == ["wallet-bob", TEST_WALLET_ID]

    @pytest.mark.asyncio
    async def test_get_by_ids_empty(self, uow_factory):  # type: ignore[no-untyped-def]
        async with uow_factory() as uow:
            assert await uow.profiles.get_by_ids([]) == []

    @pytest.mark.asyncio
    async def test_update_persists_fields(self, uow_factory, seed_profile: ProfileSeeder):  # type: ignore[no-untyped-def]
        await seed_profile()

        async with uow_factory() as uow:
            updated = await uow.profiles.update(TEST_WALLET_ID, {"bio": "hello"})
            await uow.commit()

        async with uow_factory() as uow:
            reloaded = await uow.profiles.get_by_wallet_id(TEST_WALLET_ID)

        assert updated is not None and updated.bio == "hello"
        assert reloaded is not None and reloaded.bio == "hello"

    @pytest.mark.asyncio
    async def test_update_missing_returns_none(self, uow_factory):  # type: ignore[no-untyped-def]
        async with uow_factory() as uow:
            assert await uow.profiles.update("nonexistent", {"bio": "x"}) is None

    @pytest.mark.asyncio
    async def test_update_rejects_identity_change(self, uow_factory, seed_profile: ProfileSeeder):  # type: ignore[no-untyped-def]
        await seed_profile()

        with pytest.raises(ValueError):
            async with uow_factory() as uow:
                await uow.profiles.update(TEST_WALLET_ID, {"wallet_id": "other"})


class TestViewEventRepository:
    @pytest.mark.asyncio
    async def test_append_and_read_history(self, uow_factory):  # type: ignore[no-untyped-def]
        async with uow_factory() as uow:
            await uow.view_events.create(
                ViewEvent(viewed="w1", viewer="v1", viewer_origin="10.0.0.1", timestamp=2000)
            )
            await uow.view_events.create(ViewEvent(viewed="w1", timestamp=1000))
            await uow.view_events.create(ViewEvent(viewed="w2", timestamp=1500))
            await uow.commit()

        async with uow_factory() as uow:
            events = await uow.view_events.get_for_viewed("w1")

        assert [e.timestamp for e in events] == [1000, 2000]
        assert events[0].viewer is None and events[0].viewer_origin is None
        assert events[1].viewer == "v1" and events[1].viewer_origin == "10.0.0.1"

    @pytest.mark.asyncio
    async def test_uncommitted_events_are_rolled_back(self, uow_factory):  # type: ignore[no-untyped-def]
        with pytest.raises(RuntimeError):
            async with uow_factory() as uow:
                await uow.view_events.create(ViewEvent(viewed="w1", timestamp=1000))
                raise RuntimeError("abort")

        async with uow_factory() as uow:
            assert await uow.view_events.get_for_viewed("w1") == []


class TestStorageFailure:
    @pytest.mark.asyncio
    async def test_missing_schema_surfaces_as_storage_unavailable(self):
        engine = create_async_engine("sqlite+aiosqlite:///:memory:")
        factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

        try:
            with pytest.raises(StorageUnavailableError) as exc_info:
                async with SQLAlchemyUnitOfWork(factory) as uow:
                    await uow.profiles.get_by_wallet_id(TEST_WALLET_ID)
        finally:
            await engine.dispose()

        assert exc_info.value.status_code == 503
        assert exc_info.value.__cause__ is not None
