"""Base HTTP client shared by every provider client.

Purpose:
    Provide the single request primitive used by the provider clients: URL
    building, header and body merging, an opt-in per-call timeout, JSON
    decoding, and normalization of every failure into :class:`ApiError`.

External dependencies:
    - ``httpx`` for the underlying asynchronous HTTP transport.

Timeout strategy:
    - Transport timeouts derive from :func:`get_timeout_config` and apply to
      every call.
    - ``timeout_ms`` adds a wall-clock deadline for one call via
      :func:`with_timeout`; the losing side of the race is cancelled.

Lifecycle & cleanup:
    - An ``httpx.AsyncClient`` is opened per request inside ``async with`` so
      no pooled connection is bound to an event loop that may already be
      closed (for example between ``asyncio.run`` calls).
    - A custom transport (``httpx.MockTransport`` in tests) may be injected.

Failure modes:
    - Non-2xx status: ``ApiError(kind=UPSTREAM)`` carrying status, the
      provider's message/code when the body has them, and the decoded body in
      ``details``.
    - Network failure or undecodable success body: ``ApiError(kind=TRANSPORT)``.
    - Deadline: ``ApiError(kind=TIMEOUT)``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from ..errors import ApiError, ErrorKind, to_api_error
from ..logging import LogContext, get_logger, log_event
from ..timeouts import get_timeout_config, with_timeout

JSON = Dict[str, Any]

# fetch-style cache modes that map onto a request Cache-Control directive;
# "default", "force-cache" and "only-if-cached" send no header
CACHE_CONTROL_BY_MODE: Dict[str, str] = {
    "no-cache": "no-cache",
    "no-store": "no-store",
    "reload": "no-cache",
}


class ApiClient:
    """Foundation for all upstream API interactions.

    Parameters:
        base_url: Prefix joined to relative endpoints.
        default_headers: Headers sent on every call; ``Content-Type:
            application/json`` is always present unless overridden.
        default_options: Defaults for ``method`` and ``cache_mode``.
        transport: Optional ``httpx.AsyncBaseTransport`` used instead of the
            network.
    """

    provider_name: str = "http"

    def __init__(
        self,
        base_url: str,
        default_headers: Optional[Mapping[str, str]] = None,
        default_options: Optional[Mapping[str, Any]] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url
        self.default_headers: Dict[str, str] = {
            "Content-Type": "application/json",
            **(default_headers or {}),
        }
        self.default_options: Dict[str, Any] = {
            "method": "GET",
            "cache_mode": "no-cache",
            **(default_options or {}),
        }
        self._transport = transport
        self._logger = get_logger(f"providers.{self.provider_name}")

    def build_url(self, endpoint: str) -> str:
        """Return the absolute URL for ``endpoint``."""
        if endpoint.startswith("http"):
            return endpoint
        base = self.base_url.rstrip("/")
        return f"{base}{endpoint if endpoint.startswith('/') else '/' + endpoint}"

    def _merge_headers(self, headers: Optional[Mapping[str, str]], cache_mode: Optional[str]) -> Dict[str, str]:
        merged = {**self.default_headers, **(headers or {})}
        directive = CACHE_CONTROL_BY_MODE.get(cache_mode or "")
        if directive and not any(k.lower() == "cache-control" for k in merged):
            merged["Cache-Control"] = directive
        return merged

    @staticmethod
    def _encode_body(body: Any) -> Optional[bytes | str]:
        if body is None:
            return None
        if isinstance(body, (str, bytes)):
            return body
        return json.dumps(body, ensure_ascii=False)

    async def _send(self, method: str, url: str, headers: Dict[str, str], content: Optional[bytes | str]) -> httpx.Response:
        cfg = get_timeout_config()
        timeout = httpx.Timeout(cfg.http_timeout_seconds, connect=cfg.connect_timeout_seconds)
        async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
            return await client.request(method, url, headers=headers, content=content)

    async def request(
        self,
        endpoint: str,
        *,
        method: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
        cache_mode: Optional[str] = None,
        timeout_ms: Optional[float] = None,
    ) -> Any:
        """Perform one request and return the decoded JSON body.

        Raises:
            ApiError: For every failure; raw transport exceptions never escape.
        """
        url = self.build_url(endpoint)
        verb = (method or self.default_options.get("method") or "GET").upper()
        merged_headers = self._merge_headers(headers, cache_mode or self.default_options.get("cache_mode"))
        try:
            response = await with_timeout(
                self._send(verb, url, merged_headers, self._encode_body(body)),
                timeout_ms,
            )
            return self._handle_response(response)
        except Exception as exc:
            err = to_api_error(exc, provider=self.provider_name)
            if err.provider is None:
                err.provider = self.provider_name
            log_event(
                self._logger,
                "http.timeout" if err.kind is ErrorKind.TIMEOUT else "http.error",
                LogContext(provider=self.provider_name),
                level=logging.WARNING,
                method=verb,
                url=url,
                status=err.status,
                kind=err.kind.value,
                error=err.message,
            )
            if err is exc:
                raise
            raise err from exc

    def _handle_response(self, response: httpx.Response) -> Any:
        if not response.is_success:
            raise self._error_from_response(response)
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(
                kind=ErrorKind.TRANSPORT,
                message=f"Invalid JSON in response: {exc}",
                status=response.status_code,
                details=response.text,
                provider=self.provider_name,
            ) from exc

    def _error_from_response(self, response: httpx.Response) -> ApiError:
        """Build an upstream error from a non-2xx response."""
        reason = response.reason_phrase
        try:
            data: Any = response.json()
        except ValueError:
            data = {"message": reason}

        message: Optional[str] = None
        code: Optional[str] = None
        if isinstance(data, dict):
            message = data.get("message") if isinstance(data.get("message"), str) else None
            code = data.get("code") if isinstance(data.get("code"), str) else None
            nested = data.get("error")
            # OpenAI-style providers nest details under "error"
            if isinstance(nested, dict):
                message = message or nested.get("message")
                code = code or nested.get("code") or nested.get("type")
            elif isinstance(nested, str):
                message = message or nested
        return ApiError(
            kind=ErrorKind.UPSTREAM,
            message=message or reason or "Unknown error",
            status=response.status_code,
            code=code,
            details=data,
            provider=self.provider_name,
        )

    # ----- convenience verbs -----

    async def get(self, endpoint: str, **options: Any) -> Any:
        return await self.request(endpoint, **{**options, "method": "GET"})

    async def post(self, endpoint: str, body: Any = None, **options: Any) -> Any:
        return await self.request(endpoint, **{**options, "method": "POST", "body": body})

    async def put(self, endpoint: str, body: Any = None, **options: Any) -> Any:
        return await self.request(endpoint, **{**options, "method": "PUT", "body": body})

    async def delete(self, endpoint: str, **options: Any) -> Any:
        return await self.request(endpoint, **{**options, "method": "DELETE"})

    async def patch(self, endpoint: str, body: Any = None, **options: Any) -> Any:
        return await self.request(endpoint, **{**options, "method": "PATCH", "body": body})


__all__ = ["ApiClient", "CACHE_CONTROL_BY_MODE", "JSON"]
