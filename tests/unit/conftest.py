"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock

import pytest


class FakeUnitOfWork:
    """Fake Unit of Work with repository mocks for unit testing."""

    def __init__(self) -> None:
        self.profiles = AsyncMock()
        self.view_events = AsyncMock()
        self.view_events.get_for_viewed.return_value = []
        self.committed = False
        self.rolled_back = False
        self.opened = 0

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        self.opened += 1
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


class FakeClock:
    """Settable clock in epoch milliseconds."""

    def __init__(self, now: int = 1_700_000_000_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def clock() -> FakeClock:
    """A clock frozen at a fixed instant."""
    return FakeClock()


@pytest.fixture
def wallet_id() -> str:
    """Wallet address of the profile under test."""
    return "5FHneW46xGXgs5mUiveU4sbTyGBzmstUspZC92UhjJM694ty"
