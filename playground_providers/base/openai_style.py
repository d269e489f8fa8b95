"""Shared base for providers speaking the OpenAI Chat Completions wire format.

Purpose:
- Hold the message building, default merging and text extraction used by the
  OpenAI, DeepSeek and Perplexity clients, so each concrete client only sets
  its base URL, headers and defaults.

External dependencies:
- ``httpx`` through :class:`ApiClient`; no provider SDK is involved.

Failure modes:
- ``create_chat_completion`` and ``generate_text`` propagate :class:`ApiError`.
- ``test_connection`` never raises; failures are logged as
  ``client.test_connection.failed`` and reported as ``False``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx

from ..config.defaults import CONNECTION_TEST_MAX_TOKENS, DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE
from .http import ApiClient, JSON
from .logging import LogContext, log_event


def build_messages(prompt: str, system_prompt: Optional[str] = None) -> List[Dict[str, str]]:
    """Return ``[system?, user]`` chat messages; an empty system prompt is skipped."""
    messages: List[Dict[str, str]] = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": prompt})
    return messages


def extract_openai_text(response: Any) -> str:
    """Return ``choices[0].message.content`` or ``""`` when any part is missing."""
    if not isinstance(response, Mapping):
        return ""
    choices = response.get("choices") or []
    if not choices or not isinstance(choices[0], Mapping):
        return ""
    message = choices[0].get("message") or {}
    content = message.get("content") if isinstance(message, Mapping) else None
    return content if isinstance(content, str) else ""


class BaseOpenAIStyleClient(ApiClient):
    """Reusable base for OpenAI-compatible HTTP clients.

    Subclasses set ``provider_name``, ``default_model`` and, where they differ,
    ``default_max_tokens`` / ``connection_test_model``.
    """

    provider_name = "openai_style"
    default_model: str = ""
    default_max_tokens: int = DEFAULT_MAX_TOKENS
    default_temperature: float = DEFAULT_TEMPERATURE
    connection_test_model: Optional[str] = None
    connection_test_prompt: str = "Hello!"

    def __init__(
        self,
        api_key: str,
        base_url: str,
        extra_headers: Optional[Mapping[str, str]] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        super().__init__(
            base_url,
            {"Authorization": f"Bearer {api_key}", **(extra_headers or {})},
            transport=transport,
        )

    async def create_chat_completion(self, params: Mapping[str, Any]) -> JSON:
        """POST ``chat/completions`` with ``params`` as the body."""
        return await self.post("/chat/completions", dict(params))

    async def generate_text(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        model: Optional[str] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Run a single chat turn and return the first choice's text.

        ``options`` override the provider defaults key by key.
        """
        params: Dict[str, Any] = {
            "model": model or self.default_model,
            "messages": build_messages(prompt, system_prompt),
            "max_tokens": self.default_max_tokens,
            "temperature": self.default_temperature,
            **(options or {}),
        }
        response = await self.create_chat_completion(params)
        return extract_openai_text(response)

    async def _connection_probe(self) -> bool:
        response = await self.create_chat_completion(
            {
                "model": self.connection_test_model or self.default_model,
                "messages": [{"role": "user", "content": self.connection_test_prompt}],
                "max_tokens": CONNECTION_TEST_MAX_TOKENS,
            }
        )
        return isinstance(response, Mapping) and response.get("id") is not None

    async def test_connection(self) -> bool:
        """Return ``True`` when a minimal authenticated call succeeds."""
        try:
            return await self._connection_probe()
        except Exception as exc:  # noqa: BLE001 - reported as False by contract
            log_event(
                self._logger,
                "client.test_connection.failed",
                LogContext(provider=self.provider_name),
                level=logging.WARNING,
                error=str(exc),
            )
            return False


__all__ = ["BaseOpenAIStyleClient", "build_messages", "extract_openai_text"]
