"""Per-provider generation strategies used by the playground router.

Each real provider is a :class:`ProviderGenerator` that turns
``(prompt, system_prompt, request)`` into a :class:`Generation`. Failures are
re-raised as :class:`ApiError` with the message prefixed by
``"<Provider> API error: "``; the router turns them into error responses.
"""

from __future__ import annotations

import asyncio
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict

from ..base.errors import ApiError, ErrorKind, to_api_error
from ..base.models import PlaygroundRequest
from ..base.openai_style import build_messages, extract_openai_text
from ..config import defaults
from ..perplexity.get_perplexity_models import is_search_model
from .prompts import DEMO_RESPONSES

if TYPE_CHECKING:  # pragma: no cover
    from ..registry import ApiService


class PlaygroundProvider(str, Enum):
    """Closed set of provider names accepted by the playground."""

    OPENAI = "OpenAI"
    ANTHROPIC = "Anthropic"
    DEEPSEEK = "DeepSeek"
    PERPLEXITY = "Perplexity"
    DEMO = "Demo"

    @classmethod
    def parse(cls, name: str) -> "PlaygroundProvider":
        try:
            return cls(name)
        except ValueError:
            raise ApiError(kind=ErrorKind.UNKNOWN_PROVIDER, message=f"Unknown provider: {name}") from None


@dataclass(frozen=True)
class Generation:
    text: str
    tokens_used: int


def estimate_tokens(response: str, prompt: str) -> int:
    """Rough four-characters-per-token estimate over response and prompt."""
    per = defaults.CHARS_PER_TOKEN
    return math.ceil(len(response) / per) + math.ceil(len(prompt) / per)


def resolve_sampling(request: PlaygroundRequest) -> Dict[str, Any]:
    """``temperature``/``max_tokens`` with defaults applied only when unset."""
    return {
        "temperature": defaults.DEFAULT_TEMPERATURE if request.temperature is None else request.temperature,
        "max_tokens": defaults.DEFAULT_MAX_TOKENS if request.max_tokens is None else request.max_tokens,
    }


class ProviderGenerator:
    """Base strategy; subclasses implement :meth:`_generate`."""

    provider: PlaygroundProvider

    async def generate(
        self,
        service: "ApiService",
        prompt: str,
        system_prompt: str,
        request: PlaygroundRequest,
    ) -> Generation:
        try:
            return await self._generate(service, prompt, system_prompt, request)
        except Exception as exc:
            err = to_api_error(exc)
            raise replace(err, message=f"{self.provider.value} API error: {err.message or 'Unknown error'}") from exc

    async def _generate(
        self,
        service: "ApiService",
        prompt: str,
        system_prompt: str,
        request: PlaygroundRequest,
    ) -> Generation:  # pragma: no cover - abstract
        raise NotImplementedError


class OpenAIGenerator(ProviderGenerator):
    """Native chat completion so the authoritative ``usage`` is available."""

    provider = PlaygroundProvider.OPENAI

    async def _generate(self, service, prompt, system_prompt, request):
        completion = await service.get_openai().create_chat_completion(
            {
                "model": request.model_id,
                "messages": build_messages(prompt, system_prompt),
                **resolve_sampling(request),
            }
        )
        usage = completion.get("usage") or {}
        return Generation(extract_openai_text(completion), int(usage.get("total_tokens") or 0))


class AnthropicGenerator(ProviderGenerator):
    provider = PlaygroundProvider.ANTHROPIC

    async def _generate(self, service, prompt, system_prompt, request):
        text = await service.get_anthropic().generate_text(
            prompt, system_prompt, request.model_id, resolve_sampling(request)
        )
        return Generation(text, estimate_tokens(text, prompt))


class DeepSeekGenerator(ProviderGenerator):
    provider = PlaygroundProvider.DEEPSEEK

    async def _generate(self, service, prompt, system_prompt, request):
        text = await service.get_deepseek().generate_text(
            prompt, system_prompt, request.model_id, resolve_sampling(request)
        )
        return Generation(text, estimate_tokens(text, prompt))


class PerplexityGenerator(ProviderGenerator):
    """Sonar model ids go through the web-search path."""

    provider = PlaygroundProvider.PERPLEXITY

    async def _generate(self, service, prompt, system_prompt, request):
        client = service.get_perplexity()
        call = client.search_and_generate_text if is_search_model(request.model_id) else client.generate_text
        text = await call(prompt, system_prompt, request.model_id, resolve_sampling(request))
        return Generation(text, estimate_tokens(text, prompt))


class DemoGenerator(ProviderGenerator):
    """Canned response after a fixed delay; tokens are character counts."""

    provider = PlaygroundProvider.DEMO

    async def generate(self, service, prompt, system_prompt, request):
        await asyncio.sleep(defaults.DEMO_RESPONSE_DELAY_SECONDS)
        text = DEMO_RESPONSES[request.input_format]
        return Generation(text, len(prompt) + len(text))


GENERATORS: Dict[PlaygroundProvider, ProviderGenerator] = {
    PlaygroundProvider.OPENAI: OpenAIGenerator(),
    PlaygroundProvider.ANTHROPIC: AnthropicGenerator(),
    PlaygroundProvider.DEEPSEEK: DeepSeekGenerator(),
    PlaygroundProvider.PERPLEXITY: PerplexityGenerator(),
    PlaygroundProvider.DEMO: DemoGenerator(),
}


__all__ = [
    "PlaygroundProvider",
    "Generation",
    "ProviderGenerator",
    "GENERATORS",
    "estimate_tokens",
    "resolve_sampling",
]
