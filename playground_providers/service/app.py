"""FastAPI surface for the playground.

Routes
------
- ``GET /api/health``
- ``GET /api/providers``: configured provider keys and playground variants
- ``GET /api/models?provider=``: model listing of a configured AI provider
- ``POST /api/playground``: cached playground run
- ``GET``/``DELETE /api/playground/cache``: inspect or clear the cache
- ``GET /api/providers/{provider}/test``: connection probe

CORS origins come from ``PLAYGROUND_SERVICE_CORS_ORIGINS`` (comma separated).
"""

from __future__ import annotations

import os
from typing import Any, Dict

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from playground_providers.config.defaults import PLAYGROUND_SERVICE_CORS_DEFAULT_ORIGINS
from playground_providers.playground import generate_playground_response, playground_cache
from playground_providers.registry import ApiService

from .app_parts.app_core import (
    PlaygroundBody,
    _build_models_response,
    _build_providers_response,
    _build_test_response,
    get_service_dep,
)

app = FastAPI(title="Playground Service", version="0.1.0")


# ---------------------------------------------------------------------------
# CORS configuration
# ---------------------------------------------------------------------------

cors_origins_env = os.getenv(
    "PLAYGROUND_SERVICE_CORS_ORIGINS", PLAYGROUND_SERVICE_CORS_DEFAULT_ORIGINS
)
allow_origins = [o.strip() for o in cors_origins_env.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/health")
def health() -> Dict[str, Any]:
    """Check the health status of the service."""
    return {"ok": True}


# ---------------------------------------------------------------------------
# Providers and models endpoints
# ---------------------------------------------------------------------------


@app.get("/api/providers")
def get_providers(service: ApiService = Depends(get_service_dep)) -> Dict[str, Any]:
    return _build_providers_response(service)


@app.get("/api/models")
async def get_models(provider: str, service: ApiService = Depends(get_service_dep)) -> Dict[str, Any]:
    """List models of ``provider``; 404 for unknown, 400 for unconfigured providers."""
    return await _build_models_response(service, provider)


@app.get("/api/providers/{provider}/test")
async def test_provider(provider: str, service: ApiService = Depends(get_service_dep)) -> Dict[str, Any]:
    return await _build_test_response(service, provider)


# ---------------------------------------------------------------------------
# Playground endpoints
# ---------------------------------------------------------------------------


@app.post("/api/playground")
async def post_playground(body: PlaygroundBody, service: ApiService = Depends(get_service_dep)) -> Dict[str, Any]:
    """Run the playground; provider failures arrive in the ``error`` field, not as HTTP errors."""
    response = await generate_playground_response(body.to_request(), service=service)
    return response.to_dict()


@app.get("/api/playground/cache")
def get_playground_cache() -> Dict[str, Any]:
    return {"size": playground_cache.size()}


@app.delete("/api/playground/cache")
def clear_playground_cache() -> Dict[str, Any]:
    playground_cache.clear()
    return {"ok": True, "size": playground_cache.size()}
