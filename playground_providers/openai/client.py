"""OpenAI REST client.

Purpose:
    Thin wrapper over ``https://api.openai.com/v1`` covering model lookup,
    chat completions, embeddings and moderation, plus convenience helpers used
    by the playground router and the CLI.

External dependencies:
    - ``httpx`` through :class:`ApiClient`.

Failure modes:
    - Every network-facing method raises :class:`ApiError`; only
      ``test_connection`` converts failures into ``False``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

import httpx

from ..base.http import JSON
from ..base.openai_style import BaseOpenAIStyleClient, extract_openai_text
from ..config.defaults import (
    DEFAULT_TEMPERATURE,
    OPENAI_DEFAULT_BASE_URL,
    OPENAI_DEFAULT_EMBEDDING_MODEL,
    OPENAI_DEFAULT_MAX_TOKENS,
    OPENAI_DEFAULT_MODEL,
    OPENAI_DEFAULT_SYSTEM_PROMPT,
)


class OpenAIClient(BaseOpenAIStyleClient):
    """Client for the OpenAI API."""

    provider_name = "openai"
    default_model = OPENAI_DEFAULT_MODEL
    default_max_tokens = OPENAI_DEFAULT_MAX_TOKENS

    def __init__(self, api_key: str, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        super().__init__(
            api_key,
            OPENAI_DEFAULT_BASE_URL,
            {"OpenAI-Beta": "assistants=v1"},
            transport=transport,
        )

    async def list_models(self) -> JSON:
        return await self.get("/models")

    async def get_model(self, model_id: str) -> JSON:
        return await self.get(f"/models/{model_id}")

    async def create_embeddings(self, params: Mapping[str, Any]) -> JSON:
        return await self.post("/embeddings", dict(params))

    async def create_moderation(self, params: Mapping[str, Any]) -> JSON:
        return await self.post("/moderations", dict(params))

    async def generate_text(
        self,
        prompt: str,
        system_prompt: Optional[str] = OPENAI_DEFAULT_SYSTEM_PROMPT,
        model: Optional[str] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Single chat turn; the system prompt defaults to a helpful assistant."""
        return await super().generate_text(prompt, system_prompt, model, options)

    async def generate_embedding(self, text: str, model: str = OPENAI_DEFAULT_EMBEDDING_MODEL) -> List[float]:
        """Return the embedding vector of ``text``."""
        response = await self.create_embeddings({"model": model, "input": text})
        return response["data"][0]["embedding"]

    async def generate_completion(
        self,
        prompt: str,
        model: str = OPENAI_DEFAULT_MODEL,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> Dict[str, Any]:
        """Single user turn returning ``{"content", "usage"}``.

        A falsy ``max_tokens`` falls back to the OpenAI default; ``temperature``
        falls back only when it is ``None`` so ``0`` is honoured.
        """
        response = await self.create_chat_completion(
            {
                "model": model,
                "messages": [{"role": "user", "content": prompt}],
                "max_tokens": max_tokens or OPENAI_DEFAULT_MAX_TOKENS,
                "temperature": DEFAULT_TEMPERATURE if temperature is None else temperature,
            }
        )
        return {"content": extract_openai_text(response), "usage": response.get("usage")}


__all__ = ["OpenAIClient"]
