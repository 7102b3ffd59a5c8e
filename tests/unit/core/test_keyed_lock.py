"""Unit tests for KeyedLock."""

import asyncio

import pytest

from core.locks import KeyedLock


class TestKeyedLock:
    @pytest.mark.asyncio
    async def test_same_key_runs_one_at_a_time(self):
        locks = KeyedLock()
        active = 0
        peak = 0

        async def worker() -> None:
            nonlocal active, peak
            async with locks.hold("k"):
                active += 1
                peak = max(peak, active)
                await asyncio.sleep(0)
                active -= 1

        await asyncio.gather(*(worker() for _ in range(4)))

        assert peak == 1

    @pytest.mark.asyncio
    async def test_different_keys_overlap(self):
        locks = KeyedLock()
        entered = asyncio.Event()

        async def first() -> None:
            async with locks.hold("a"):
                await asyncio.wait_for(entered.wait(), timeout=1)

        async def second() -> None:
            async with locks.hold("b"):
                entered.set()

        await asyncio.gather(first(), second())

    @pytest.mark.asyncio
    async def test_idle_keys_are_forgotten(self):
        locks = KeyedLock()

        async with locks.hold(("viewed", "origin")):
            assert len(locks) == 1

        assert len(locks) == 0

    @pytest.mark.asyncio
    async def test_released_on_error(self):
        locks = KeyedLock()

        with pytest.raises(ValueError):
            async with locks.hold("k"):
                raise ValueError("boom")

        assert len(locks) == 0
        async with locks.hold("k"):
            pass
