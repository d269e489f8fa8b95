"""Time-based response cache and in-flight request deduplication.

``ResponseCache`` stores values with a per-entry deadline and evicts expired
entries lazily on read; there is no background sweep. ``with_cache`` wraps an
async callable with such a cache, and ``dedup_request`` coalesces concurrent
calls sharing a key onto one task.
"""
from __future__ import annotations

import asyncio
import functools
import time
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple, TypeVar

T = TypeVar("T")


class CacheStrategies:
    """Named TTLs in seconds."""

    SHORT = 30
    MEDIUM = 5 * 60
    LONG = 60 * 60


class ResponseCache:
    """Bounded key/value cache with lazy TTL eviction.

    ``clock`` defaults to ``time.monotonic`` and can be replaced in tests.
    When ``maxsize`` is reached the entry stored earliest is dropped.
    """

    def __init__(
        self,
        maxsize: int = 128,
        default_ttl: float = CacheStrategies.SHORT,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.maxsize = maxsize
        self.default_ttl = default_ttl
        self._clock = clock
        # key -> (stored_at, expires_at, value)
        self._entries: Dict[str, Tuple[float, float, Any]] = {}

    def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        _, expires_at, value = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        now = self._clock()
        if key not in self._entries and len(self._entries) >= self.maxsize:
            oldest = min(self._entries.items(), key=lambda item: item[1][0])[0]
            self._entries.pop(oldest, None)
        self._entries[key] = (now, now + (self.default_ttl if ttl is None else ttl), value)

    def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def size(self) -> int:
        """Number of stored entries, expired ones included until next read."""
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None


async def dedup_request(
    key: str,
    factory: Callable[[], Awaitable[T]],
    in_flight: Dict[str, "asyncio.Future[Any]"],
) -> T:
    """Share one pending call between concurrent callers using ``key``.

    The first caller schedules ``factory()`` as a task; callers arriving while
    it is pending await the same task. The entry is removed when the task
    settles, successfully or not, so later calls run independently.
    """
    task = in_flight.get(key)
    if task is None:
        task = asyncio.ensure_future(factory())
        in_flight[key] = task

        def _forget(done: "asyncio.Future[Any]", _key: str = key) -> None:
            if in_flight.get(_key) is done:
                del in_flight[_key]

        task.add_done_callback(_forget)
    # shield: one cancelled waiter must not cancel the shared call
    return await asyncio.shield(task)


def with_cache(
    *,
    ttl: float = CacheStrategies.SHORT,
    key_generator: Callable[..., str],
    cache: ResponseCache,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Decorate an async function with a TTL cache keyed by ``key_generator``.

    Only successful results are stored; exceptions propagate uncached.
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            key = key_generator(*args, **kwargs)
            cached = cache.get(key)
            if cached is not None:
                return cached
            result = await func(*args, **kwargs)
            cache.set(key, result, ttl)
            return result

        wrapper.cache = cache  # type: ignore[attr-defined]
        return wrapper

    return decorator


__all__ = [
    "CacheStrategies",
    "ResponseCache",
    "dedup_request",
    "with_cache",
]
