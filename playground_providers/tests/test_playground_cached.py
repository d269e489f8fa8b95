"""Cached playground: fingerprinting, TTL and in-flight deduplication."""

from __future__ import annotations

import asyncio

from playground_providers.base.models import PlaygroundRequest, PlaygroundResponse
from playground_providers.base.resilience import ResponseCache
from playground_providers.playground import CachedPlayground, fingerprint
from playground_providers.playground import generate_playground_response as cached_generate
from playground_providers.playground import playground_cache
from playground_providers.registry import ApiService


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class CountingGenerator:
    def __init__(self, delay: float = 0.0) -> None:
        self.calls = 0
        self.delay = delay

    async def __call__(self, request, *, service=None):
        self.calls += 1
        await asyncio.sleep(self.delay)
        return PlaygroundResponse.success(
            f"reply {self.calls}", tokens_used=1, elapsed=0.0, model=request.model_id, confidence=0.95
        )


def test_fingerprint_renders_unset_options():
    request = PlaygroundRequest("gpt-4", "OpenAI", "hello")
    assert fingerprint(request) == "OpenAI-gpt-4-hello-undefined-undefined"
    tuned = PlaygroundRequest("gpt-4", "OpenAI", "hello", temperature=0.5, max_tokens=0)
    assert fingerprint(tuned) == "OpenAI-gpt-4-hello-0.5-0"


def test_fingerprint_uses_input_prefix():
    a = PlaygroundRequest("m", "Demo", "a" * 100 + "x")
    b = PlaygroundRequest("m", "Demo", "a" * 100 + "y")
    assert fingerprint(a) == fingerprint(b)


def test_concurrent_identical_requests_share_one_call():
    gen = CountingGenerator(delay=0.05)
    cached = CachedPlayground(generate=gen)
    request = PlaygroundRequest("m", "Demo", "same")

    async def main():
        return await asyncio.gather(*(cached.generate(request) for _ in range(5)))

    results = asyncio.run(main())
    assert gen.calls == 1
    assert all(r is results[0] for r in results)
    assert cached.size() == 1


def test_ttl_hit_then_expiry(log_events):
    clock = FakeClock()
    gen = CountingGenerator()
    cached = CachedPlayground(ttl_seconds=30, cache=ResponseCache(clock=clock), generate=gen)
    request = PlaygroundRequest("m", "Demo", "q")
    first = asyncio.run(cached.generate(request))
    clock.now += 29
    assert asyncio.run(cached.generate(request)) is first
    assert gen.calls == 1
    assert any(e["event"] == "cache.hit" for e in log_events)
    clock.now += 2
    second = asyncio.run(cached.generate(request))
    assert gen.calls == 2
    assert second.content == "reply 2"


def test_different_options_are_different_entries():
    gen = CountingGenerator()
    cached = CachedPlayground(generate=gen)
    asyncio.run(cached.generate(PlaygroundRequest("m", "Demo", "q")))
    asyncio.run(cached.generate(PlaygroundRequest("m", "Demo", "q", temperature=0.1)))
    assert gen.calls == 2
    cached.clear()
    assert cached.size() == 0


def test_preload_warms_cache():
    gen = CountingGenerator()
    cached = CachedPlayground(generate=gen)
    requests = [PlaygroundRequest("m", "Demo", str(i)) for i in range(3)]
    asyncio.run(cached.preload(requests))
    assert cached.size() == 3
    asyncio.run(cached.generate(requests[1]))
    assert gen.calls == 3


def test_preload_logs_failures(log_events):
    async def broken(request, *, service=None):
        raise RuntimeError("boom")

    cached = CachedPlayground(generate=broken)
    asyncio.run(cached.preload([PlaygroundRequest("m", "Demo", "x")]))
    assert cached.size() == 0
    event = next(e for e in log_events if e["event"] == "cache.preload.error")
    assert event["error"] == "boom"


def test_module_level_entry_point_caches_error_responses():
    request = PlaygroundRequest("gpt-4", "OpenAI", "hi")
    first = asyncio.run(cached_generate(request, service=ApiService()))
    assert first.error == "OpenAI API error: OpenAI API key is not configured"
    assert playground_cache.size() == 1
    assert asyncio.run(cached_generate(request, service=ApiService())) is first


def test_responses_are_stored_under_the_fingerprint():
    store = ResponseCache()
    cached = CachedPlayground(cache=store, generate=CountingGenerator())
    request = PlaygroundRequest("m", "Demo", "q", max_tokens=8)
    response = asyncio.run(cached.generate(request))
    assert store.get(fingerprint(request)) is response
    assert cached.cache is store
