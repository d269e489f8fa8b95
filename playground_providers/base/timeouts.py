"""Unified timeout utilities for provider clients.

This module centralizes the timeout values used by the HTTP layer and exposes
an awaitable deadline guard for the opt-in per-call timeout.

Key Components
--------------
TimeoutConfig
    Dataclass capturing normalized timeout values.

get_timeout_config()
    Returns a process-cached configuration, parsing environment overrides on
    first use only. Supported environment variables (all optional):
        PLAYGROUND_HTTP_TIMEOUT_SECONDS
        PLAYGROUND_CONNECT_TIMEOUT_SECONDS

with_timeout(awaitable, timeout_ms)
    Races ``awaitable`` against a deadline using ``asyncio.wait_for``. The
    losing side is cancelled, so neither a pending request nor a timer
    outlives the call.

Failure Modes
-------------
:class:`ApiError` with ``kind=TIMEOUT`` and message
``"Request timed out after {timeout_ms}ms"`` when the deadline elapses first.
"""
from __future__ import annotations

import asyncio
import os
from dataclasses import dataclass
from typing import Awaitable, Optional, TypeVar

from .errors import ApiError, ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Transport-level read/write/pool timeout applied
            to every ``httpx.AsyncClient``.
        connect_timeout_seconds: Connection establishment timeout.
    """

    http_timeout_seconds: float = 30.0
    connect_timeout_seconds: float = 10.0


_CACHED: TimeoutConfig | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse a positive float from the environment, falling back to ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED  # noqa: PLW0603 - documented module cache
    if _CACHED is None:
        _CACHED = TimeoutConfig(
            http_timeout_seconds=_parse_env_float("PLAYGROUND_HTTP_TIMEOUT_SECONDS", 30.0),
            connect_timeout_seconds=_parse_env_float("PLAYGROUND_CONNECT_TIMEOUT_SECONDS", 10.0),
        )
    return _CACHED


def reset_timeout_config() -> None:
    """Drop the cached config so the next lookup re-reads the environment."""
    global _CACHED  # noqa: PLW0603
    _CACHED = None


def _format_ms(timeout_ms: float) -> str:
    value = float(timeout_ms)
    return str(int(value)) if value.is_integer() else str(value)


async def with_timeout(awaitable: Awaitable[T], timeout_ms: Optional[float]) -> T:
    """Await ``awaitable``, enforcing ``timeout_ms`` when it is set and positive."""
    if not timeout_ms or timeout_ms <= 0:
        return await awaitable
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout_ms / 1000.0)
    except asyncio.TimeoutError as exc:
        raise ApiError(
            kind=ErrorKind.TIMEOUT,
            message=f"Request timed out after {_format_ms(timeout_ms)}ms",
        ) from exc


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
    "reset_timeout_config",
    "with_timeout",
]
