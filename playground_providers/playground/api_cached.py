"""Cached, deduplicated playground entry point.

Identical requests share one fingerprint. While a request is in flight, later
identical callers await the same task (``dedup_request``); once it settles,
the response is cached for a short TTL so repeats within the window are
served without touching any provider.

Error responses are cached like any other response: the router returns them
as data rather than raising.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Iterable, Optional

from ..base.logging import LogContext, get_logger, log_event
from ..base.models import PlaygroundRequest, PlaygroundResponse
from ..base.resilience import ResponseCache, dedup_request, with_cache
from ..config.defaults import FINGERPRINT_INPUT_PREFIX, PLAYGROUND_CACHE_TTL_SECONDS
from ..registry import ApiService
from . import api

_LOGGER = get_logger("playground.cache")

Generate = Callable[..., Awaitable[PlaygroundResponse]]


def _render(value: Any) -> str:
    # unset options render as "undefined"
    return "undefined" if value is None else str(value)


def fingerprint(request: PlaygroundRequest) -> str:
    """Cache key of a request: provider, model, input prefix and sampling options."""
    return "-".join(
        (
            request.provider,
            request.model_id,
            request.input[:FINGERPRINT_INPUT_PREFIX],
            _render(request.temperature),
            _render(request.max_tokens),
        )
    )


class CachedPlayground:
    """TTL cache plus in-flight deduplication around the playground router.

    Parameters:
        ttl_seconds: Lifetime of a cached response.
        cache: Backing :class:`ResponseCache`; a private one by default.
        generate: Uncached generator, ``api.generate_playground_response`` by
            default. Accepts ``(request, service=...)``.
    """

    def __init__(
        self,
        ttl_seconds: float = PLAYGROUND_CACHE_TTL_SECONDS,
        cache: Optional[ResponseCache] = None,
        generate: Optional[Generate] = None,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self.cache = cache if cache is not None else ResponseCache(default_ttl=ttl_seconds)
        self._generate = generate
        self._in_flight: Dict[str, "asyncio.Future[Any]"] = {}
        self._cached_call = with_cache(
            ttl=ttl_seconds,
            key_generator=lambda request, **_: fingerprint(request),
            cache=self.cache,
        )(self._deduplicated)

    async def _deduplicated(
        self,
        request: PlaygroundRequest,
        *,
        service: Optional[ApiService] = None,
    ) -> PlaygroundResponse:
        generate = self._generate or api.generate_playground_response
        return await dedup_request(
            f"playground:{fingerprint(request)}",
            lambda: generate(request, service=service),
            self._in_flight,
        )

    async def generate(
        self,
        request: PlaygroundRequest,
        *,
        service: Optional[ApiService] = None,
    ) -> PlaygroundResponse:
        if fingerprint(request) in self.cache:
            log_event(_LOGGER, "cache.hit", LogContext(provider=request.provider, model=request.model_id))
        return await self._cached_call(request, service=service)

    def clear(self) -> None:
        self.cache.clear()

    def size(self) -> int:
        return self.cache.size()

    async def preload(self, requests: Iterable[PlaygroundRequest], *, service: Optional[ApiService] = None) -> None:
        """Warm the cache concurrently; individual failures are logged only."""
        requests = list(requests)
        results = await asyncio.gather(
            *(self.generate(r, service=service) for r in requests),
            return_exceptions=True,
        )
        for request, result in zip(requests, results):
            if isinstance(result, Exception):
                log_event(
                    _LOGGER,
                    "cache.preload.error",
                    LogContext(provider=request.provider, model=request.model_id),
                    level=logging.ERROR,
                    error=str(result),
                )


playground_cache = CachedPlayground()


async def generate_playground_response(
    request: PlaygroundRequest,
    *,
    service: Optional[ApiService] = None,
) -> PlaygroundResponse:
    """Cached counterpart of :func:`api.generate_playground_response`."""
    return await playground_cache.generate(request, service=service)


__all__ = [
    "CachedPlayground",
    "fingerprint",
    "generate_playground_response",
    "playground_cache",
]
