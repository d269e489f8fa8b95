"""Request bodies, dependencies and response builders for the playground service."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import HTTPException
from pydantic import BaseModel, ConfigDict, Field

from playground_providers.base.errors import ApiError, ErrorKind
from playground_providers.base.models import InputFormat, PlaygroundRequest
from playground_providers.config import load_api_config
from playground_providers.playground import PlaygroundProvider
from playground_providers.registry import MODEL_PROVIDERS, TESTABLE_PROVIDERS, ApiService


class PlaygroundBody(BaseModel):
    """Body of ``POST /api/playground``; camelCase on the wire.

    Snake_case field names are accepted too.
    """

    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    model_id: str = Field(alias="modelId")
    provider: str
    input: str
    input_format: InputFormat = Field(default=InputFormat.TEXT, alias="inputFormat")
    max_tokens: Optional[int] = Field(default=None, alias="maxTokens")
    temperature: Optional[float] = None
    stream: Optional[bool] = None

    def to_request(self) -> PlaygroundRequest:
        return PlaygroundRequest(
            model_id=self.model_id,
            provider=self.provider,
            input=self.input,
            input_format=self.input_format,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            stream=self.stream,
        )


def get_service_dep() -> ApiService:
    """FastAPI dependency returning the process registry.

    The first call builds it from :func:`load_api_config`.
    """
    try:
        return ApiService.get_instance()
    except ApiError:
        return ApiService.get_instance(load_api_config())


def _client_or_raise(service: ApiService, provider: str, allowed: tuple[str, ...]) -> Any:
    key = (provider or "").lower().strip()
    if key not in allowed:
        raise HTTPException(status_code=404, detail=f"Unknown provider: {provider}")
    try:
        return service.get_client(key)
    except ApiError as e:
        status = 400 if e.kind is ErrorKind.CONFIGURATION else 404
        raise HTTPException(status_code=status, detail=e.message) from e


def _build_providers_response(service: ApiService) -> Dict[str, Any]:
    return {
        "ok": True,
        "configured": service.configured_providers(),
        "playground": [p.value for p in PlaygroundProvider],
    }


async def _build_models_response(service: ApiService, provider: str) -> Dict[str, Any]:
    client = _client_or_raise(service, provider, MODEL_PROVIDERS)
    try:
        listing = await client.list_models()
    except ApiError as e:
        raise HTTPException(status_code=502, detail=e.to_dict()) from e
    models: List[Any] = listing.get("data", []) if isinstance(listing, dict) else list(listing)
    return {"ok": True, "provider": provider.lower(), "models": models}


async def _build_test_response(service: ApiService, provider: str) -> Dict[str, Any]:
    client = _client_or_raise(service, provider, TESTABLE_PROVIDERS)
    return {"ok": await client.test_connection(), "provider": provider.lower()}


__all__ = [
    "PlaygroundBody",
    "get_service_dep",
    "_build_providers_response",
    "_build_models_response",
    "_build_test_response",
]
