"""Anthropic Messages API client.

Purpose:
    Speak the native ``/v1/messages`` wire format (``x-api-key`` and
    ``anthropic-version`` headers, top-level ``system`` field, content blocks
    in the response).

External dependencies:
    - ``httpx`` through :class:`ApiClient`.

Failure modes:
    - ``create_message``/``generate_text`` raise :class:`ApiError`.
    - ``test_connection`` logs ``client.test_connection.failed`` and returns
      ``False``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx

from ..base.http import ApiClient, JSON
from ..base.logging import LogContext, log_event
from ..config.defaults import (
    ANTHROPIC_API_VERSION,
    ANTHROPIC_CONNECTION_TEST_MODEL,
    ANTHROPIC_DEFAULT_BASE_URL,
    ANTHROPIC_DEFAULT_MODEL,
    CONNECTION_TEST_MAX_TOKENS,
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
)
from .get_anthropic_models import get_models


def extract_text_blocks(response: Any) -> str:
    """Concatenate the ``text`` of every text block in a Messages response."""
    if not isinstance(response, Mapping):
        return ""
    parts: List[str] = []
    for block in response.get("content") or []:
        if isinstance(block, Mapping) and block.get("type") == "text" and block.get("text"):
            parts.append(block["text"])
    return "".join(parts)


class AnthropicClient(ApiClient):
    """Client for Anthropic's Claude models."""

    provider_name = "anthropic"

    def __init__(self, api_key: str, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self.api_key = api_key
        super().__init__(
            ANTHROPIC_DEFAULT_BASE_URL,
            {"x-api-key": api_key, "anthropic-version": ANTHROPIC_API_VERSION},
            transport=transport,
        )

    async def list_models(self) -> List[Dict[str, Any]]:
        return get_models()

    async def create_message(self, params: Mapping[str, Any]) -> JSON:
        """POST ``messages`` with ``params`` as the body."""
        return await self.post("/messages", dict(params))

    async def generate_text(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        model: Optional[str] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Single user turn; returns the joined text blocks."""
        params: Dict[str, Any] = {
            "model": model or ANTHROPIC_DEFAULT_MODEL,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": DEFAULT_MAX_TOKENS,
            "temperature": DEFAULT_TEMPERATURE,
        }
        # the Messages API rejects an empty system string
        if system_prompt:
            params["system"] = system_prompt
        params.update(options or {})
        return extract_text_blocks(await self.create_message(params))

    async def test_connection(self) -> bool:
        try:
            response = await self.create_message(
                {
                    "model": ANTHROPIC_CONNECTION_TEST_MODEL,
                    "messages": [{"role": "user", "content": "Hello, are you working?"}],
                    "max_tokens": CONNECTION_TEST_MAX_TOKENS,
                }
            )
        except Exception as exc:  # noqa: BLE001 - reported as False by contract
            log_event(
                self._logger,
                "client.test_connection.failed",
                LogContext(provider=self.provider_name),
                level=logging.WARNING,
                error=str(exc),
            )
            return False
        return isinstance(response, Mapping) and response.get("id") is not None


__all__ = ["AnthropicClient", "extract_text_blocks"]
