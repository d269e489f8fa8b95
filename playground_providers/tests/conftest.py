"""Pytest configuration for the playground_providers test suite.

Every test starts with:
- no process-default ``ApiService``;
- an empty default playground cache;
- no provider keys in the environment and no dotenv/config file;
- a freshly parsed timeout configuration.

Helpers for wire-level tests (``httpx.MockTransport``) and for capturing
structured log events are exposed as fixtures.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, Iterator, List

import httpx
import pytest

from playground_providers.base.logging import get_logger
from playground_providers.base.timeouts import reset_timeout_config
from playground_providers.config import defaults
from playground_providers.playground import playground_cache
from playground_providers.registry import ApiService

_ENV_VARS = (
    "OPENAI_API_KEY",
    "ANTHROPIC_API_KEY",
    "DEEPSEEK_API_KEY",
    "PERPLEXITY_API_KEY",
    "PPLX_API_KEY",
    "NEWS_API_KEY",
    "NEWSAPI_KEY",
    "PLAYGROUND_CONFIG_FILE",
    "PLAYGROUND_HTTP_TIMEOUT_SECONDS",
    "PLAYGROUND_CONNECT_TIMEOUT_SECONDS",
    "PLAYGROUND_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    ApiService.reset_instance()
    playground_cache.clear()
    reset_timeout_config()
    yield
    ApiService.reset_instance()
    playground_cache.clear()
    reset_timeout_config()


@pytest.fixture()
def fast_demo(monkeypatch: pytest.MonkeyPatch) -> None:
    """Shrink the Demo provider delay for tests that do not measure it."""
    monkeypatch.setattr(defaults, "DEMO_RESPONSE_DELAY_SECONDS", 0.01)


class Recorder:
    """Callable ``MockTransport`` handler that remembers every request."""

    def __init__(self, handler: Callable[[httpx.Request], Any]) -> None:
        self.handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> Any:
        self.requests.append(request)
        return self.handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.last.content)


@pytest.fixture()
def recorder() -> Callable[[Callable[[httpx.Request], Any]], Recorder]:
    """Factory building a :class:`Recorder` around a handler."""
    return Recorder


@pytest.fixture()
def json_reply() -> Callable[..., Callable[[httpx.Request], httpx.Response]]:
    """Factory for handlers that always answer with the same JSON payload."""

    def make(payload: Any, status: int = 200) -> Callable[[httpx.Request], httpx.Response]:
        return lambda request: httpx.Response(status, json=payload)

    return make


class _EventCollector(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.events: List[Dict[str, Any]] = []

    def emit(self, record: logging.LogRecord) -> None:
        try:
            payload = json.loads(record.getMessage())
        except ValueError:
            return
        if isinstance(payload, dict) and "event" in payload:
            payload["level"] = record.levelname
            self.events.append(payload)


@pytest.fixture()
def log_events() -> Iterator[List[Dict[str, Any]]]:
    """Collect structured events emitted under the ``playground`` logger."""
    collector = _EventCollector()
    base = get_logger()
    base.addHandler(collector)
    try:
        yield collector.events
    finally:
        base.removeHandler(collector)
