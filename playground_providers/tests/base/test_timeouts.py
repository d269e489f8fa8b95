from __future__ import annotations

import asyncio

import pytest

from playground_providers.base.errors import ApiError, ErrorKind
from playground_providers.base.timeouts import get_timeout_config, reset_timeout_config, with_timeout


def test_defaults_and_env_override(monkeypatch):
    cfg = get_timeout_config()
    assert cfg.http_timeout_seconds == 30.0
    monkeypatch.setenv("PLAYGROUND_HTTP_TIMEOUT_SECONDS", "12.5")
    assert get_timeout_config() is cfg  # cached until reset
    reset_timeout_config()
    assert get_timeout_config().http_timeout_seconds == 12.5


def test_invalid_env_values_fall_back(monkeypatch):
    monkeypatch.setenv("PLAYGROUND_HTTP_TIMEOUT_SECONDS", "abc")
    monkeypatch.setenv("PLAYGROUND_CONNECT_TIMEOUT_SECONDS", "-3")
    reset_timeout_config()
    cfg = get_timeout_config()
    assert cfg.http_timeout_seconds == 30.0
    assert cfg.connect_timeout_seconds == 10.0


def test_with_timeout_passes_through_without_deadline():
    async def quick():
        return 7

    assert asyncio.run(with_timeout(quick(), None)) == 7
    assert asyncio.run(with_timeout(quick(), 0)) == 7


def test_with_timeout_cancels_the_slow_side():
    cancelled = []

    async def slow():
        try:
            await asyncio.sleep(5)
        except asyncio.CancelledError:
            cancelled.append(True)
            raise

    with pytest.raises(ApiError) as ei:
        asyncio.run(with_timeout(slow(), 20))
    assert ei.value.kind is ErrorKind.TIMEOUT
    assert ei.value.message == "Request timed out after 20ms"
    assert cancelled == [True]
