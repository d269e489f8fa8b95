"""Playground router.

Purpose
-------
Run one :class:`PlaygroundRequest` against the provider it names and return
a normalized :class:`PlaygroundResponse`. This is the single boundary where
exceptions become data: :func:`generate_playground_response` never raises.

Flow
----
1. Resolve the registry (explicit ``service`` or the process default).
2. Derive ``(prompt, system_prompt)`` from the input format.
3. Dispatch to the :class:`ProviderGenerator` of the named provider.
4. Stamp elapsed time, token usage and a confidence score.

Logging
-------
``playground.start``, ``playground.end`` and ``playground.error`` through the
structured logger.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Optional

from ..base.errors import to_api_error
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import PlaygroundRequest, PlaygroundResponse
from ..config import defaults
from ..registry import ApiService
from .generators import GENERATORS, PlaygroundProvider
from .prompts import derive_prompts

_LOGGER = get_logger("router")


def _confidence() -> float:
    return defaults.CONFIDENCE_FLOOR + random.random() * defaults.CONFIDENCE_SPAN


async def generate_playground_response(
    request: PlaygroundRequest,
    *,
    service: Optional[ApiService] = None,
) -> PlaygroundResponse:
    """Generate a playground response; failures come back as error responses."""
    start = time.perf_counter()
    ctx = LogContext(provider=request.provider, model=request.model_id)
    log_event(_LOGGER, "playground.start", ctx, input_format=request.input_format.value)
    try:
        registry = service if service is not None else ApiService.get_instance()
        prompt, system_prompt = derive_prompts(request.input, request.input_format)
        generator = GENERATORS[PlaygroundProvider.parse(request.provider)]
        generation = await generator.generate(registry, prompt, system_prompt, request)
    except Exception as exc:  # noqa: BLE001 - converted into an error response
        err = to_api_error(exc)
        elapsed = time.perf_counter() - start
        log_event(
            _LOGGER,
            "playground.error",
            ctx,
            level=logging.WARNING,
            kind=err.kind.value,
            status=err.status,
            error=err.message,
        )
        return PlaygroundResponse.failure(
            err.message or "An unknown error occurred",
            elapsed=elapsed,
            model=request.model_id,
        )

    elapsed = time.perf_counter() - start
    response = PlaygroundResponse.success(
        generation.text,
        tokens_used=generation.tokens_used,
        elapsed=elapsed,
        model=request.model_id,
        confidence=_confidence(),
    )
    log_event(
        _LOGGER,
        "playground.end",
        ctx,
        tokens_used=generation.tokens_used,
        processing_time=response.metadata.processing_time,
    )
    return response


__all__ = ["generate_playground_response"]
