"""Perplexity REST client (OpenAI-compatible Chat Completions).

Only ``sonar`` models can search the web. ``search_and_generate_text``
substitutes the default sonar model for any other id and logs
``perplexity.model_substituted``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx

from ..base.logging import LogContext, log_event
from ..base.openai_style import BaseOpenAIStyleClient
from ..config.defaults import (
    PERPLEXITY_CONNECTION_TEST_MODEL,
    PERPLEXITY_DEFAULT_BASE_URL,
    PERPLEXITY_DEFAULT_MODEL,
    PERPLEXITY_DEFAULT_SONAR_MODEL,
)
from .get_perplexity_models import get_models, is_search_model


class PerplexityClient(BaseOpenAIStyleClient):
    """Client for the Perplexity API."""

    provider_name = "perplexity"
    default_model = PERPLEXITY_DEFAULT_MODEL
    connection_test_model = PERPLEXITY_CONNECTION_TEST_MODEL

    def __init__(self, api_key: str, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        super().__init__(api_key, PERPLEXITY_DEFAULT_BASE_URL, transport=transport)

    async def list_models(self) -> List[Dict[str, Any]]:
        return get_models()

    async def search_and_generate_text(
        self,
        query: str,
        system_prompt: Optional[str] = None,
        model: str = PERPLEXITY_DEFAULT_SONAR_MODEL,
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Generate text with a web-search capable model."""
        if not is_search_model(model):
            log_event(
                self._logger,
                "perplexity.model_substituted",
                LogContext(provider=self.provider_name, model=model),
                level=logging.WARNING,
                substitute=PERPLEXITY_DEFAULT_SONAR_MODEL,
            )
            model = PERPLEXITY_DEFAULT_SONAR_MODEL
        return await self.generate_text(query, system_prompt, model, options)


__all__ = ["PerplexityClient"]
