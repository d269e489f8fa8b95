"""ResponseCache, with_cache and dedup_request behaviour."""

from __future__ import annotations

import asyncio

import pytest

from playground_providers.base.resilience import CacheStrategies, ResponseCache, dedup_request, with_cache


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_strategies():
    assert (CacheStrategies.SHORT, CacheStrategies.MEDIUM, CacheStrategies.LONG) == (30, 300, 3600)


def test_entries_expire_lazily():
    clock = FakeClock()
    cache = ResponseCache(default_ttl=30, clock=clock)
    cache.set("k", "v")
    clock.now += 29.9
    assert cache.get("k") == "v"
    clock.now += 0.2
    assert cache.size() == 1  # still stored until read
    assert cache.get("k") is None
    assert cache.size() == 0


def test_maxsize_drops_oldest():
    clock = FakeClock()
    cache = ResponseCache(maxsize=2, clock=clock)
    cache.set("a", 1)
    clock.now += 1
    cache.set("b", 2)
    clock.now += 1
    cache.set("c", 3)
    assert "a" not in cache
    assert cache.get("b") == 2 and cache.get("c") == 3


def test_delete_and_clear():
    cache = ResponseCache()
    cache.set("a", 1)
    cache.set("b", 2)
    cache.delete("a")
    assert cache.size() == 1
    cache.clear()
    assert cache.size() == 0


def test_with_cache_only_stores_successes():
    store = ResponseCache()
    calls = []

    @with_cache(ttl=30, key_generator=lambda x: f"k:{x}", cache=store)
    async def work(x):
        calls.append(x)
        if x < 0:
            raise ValueError("negative")
        return x * 2

    assert asyncio.run(work(2)) == 4
    assert asyncio.run(work(2)) == 4
    assert calls == [2]
    with pytest.raises(ValueError):
        asyncio.run(work(-1))
    with pytest.raises(ValueError):
        asyncio.run(work(-1))
    assert calls == [2, -1, -1]
    assert work.cache is store


def test_dedup_coalesces_concurrent_calls():
    calls = 0
    pending = {}

    async def factory():
        nonlocal calls
        calls += 1
        await asyncio.sleep(0.05)
        return "value"

    async def main():
        results = await asyncio.gather(*(dedup_request("same", factory, pending) for _ in range(5)))
        assert pending == {}
        return results

    assert asyncio.run(main()) == ["value"] * 5
    assert calls == 1


def test_dedup_clears_entry_after_failure():
    pending = {}
    attempts = 0

    async def failing():
        nonlocal attempts
        attempts += 1
        raise RuntimeError("fail")

    async def main():
        for _ in range(2):
            with pytest.raises(RuntimeError):
                await dedup_request("k", failing, pending)
        await asyncio.sleep(0)
        assert pending == {}

    asyncio.run(main())
    assert attempts == 2
