"""
Error classification helpers mapping exceptions to normalized ErrorKind values.

Implements HTTP status extraction and a status-aware fallback so that any
exception reaching a boundary can be converted into an :class:`ApiError`.
"""
from __future__ import annotations

import asyncio
from typing import Optional

import httpx

from .api_error import ApiError
from .error_kind import ErrorKind


def _extract_status(exc: BaseException) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.status``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


def classify_exception(exc: BaseException) -> ErrorKind:
    """Classify an exception into a normalized :class:`ErrorKind`.

    Precedence:
        1. ApiError passthrough.
        2. Timeout exceptions (asyncio, builtin and httpx).
        3. Anything carrying an HTTP status is an upstream failure.
        4. ``TRANSPORT`` fallback.
    """
    if isinstance(exc, ApiError):
        return exc.kind
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError, httpx.TimeoutException)):
        return ErrorKind.TIMEOUT
    if _extract_status(exc) is not None:
        return ErrorKind.UPSTREAM
    return ErrorKind.TRANSPORT


def to_api_error(exc: BaseException, *, provider: Optional[str] = None) -> ApiError:
    """Wrap ``exc`` into an :class:`ApiError`, returning ApiErrors unchanged."""
    if isinstance(exc, ApiError):
        return exc
    return ApiError(
        kind=classify_exception(exc),
        message=str(exc) or "An unknown error occurred",
        status=_extract_status(exc),
        provider=provider,
    )


__all__ = [
    "classify_exception",
    "to_api_error",
    "_extract_status",
]
