"""DeepSeek REST client (OpenAI-compatible Chat Completions).

Model listing degrades to a static catalog when the upstream endpoint is
unavailable; the fallback is logged as ``deepseek.models.fallback``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from ..base.errors import ApiError
from ..base.logging import LogContext, log_event
from ..base.openai_style import BaseOpenAIStyleClient
from ..config.defaults import DEEPSEEK_DEFAULT_BASE_URL, DEEPSEEK_DEFAULT_MODEL
from .get_deepseek_models import fallback_models


class DeepSeekClient(BaseOpenAIStyleClient):
    """Client for the DeepSeek API."""

    provider_name = "deepseek"
    default_model = DEEPSEEK_DEFAULT_MODEL

    def __init__(self, api_key: str, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        super().__init__(api_key, DEEPSEEK_DEFAULT_BASE_URL, transport=transport)

    async def list_models(self) -> List[Dict[str, Any]]:
        """Return ``data`` from ``GET models`` or the static catalog on failure."""
        try:
            response = await self.get("/models")
        except ApiError as exc:
            log_event(
                self._logger,
                "deepseek.models.fallback",
                LogContext(provider=self.provider_name),
                level=logging.WARNING,
                error=exc.message,
                status=exc.status,
            )
            return fallback_models()
        return list(response.get("data") or []) if isinstance(response, dict) else []


__all__ = ["DeepSeekClient"]
