"""CLI action handlers.

Each handler takes parsed ``argparse`` args and an optional registry, prints
to stdout (results) or stderr (errors), and returns the process exit code.
Handlers have no top-level side effects and are safe to import in tests.

Failure semantics
-----------------
- ``generate`` exits 1 when the playground response carries an error.
- ``models`` exits 1 on configuration or upstream errors.
- ``test`` exits 1 when the probe reports ``False``.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any, Optional

from ...base.errors import ApiError
from ...base.models import PlaygroundRequest
from ...config import load_api_config
from ...playground.api import generate_playground_response
from ...registry import MODEL_PROVIDERS, TESTABLE_PROVIDERS, ApiService


def resolve_service(service: Optional[ApiService] = None) -> ApiService:
    """Return ``service`` or a registry built from the environment."""
    return service if service is not None else ApiService(load_api_config())


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _print_error(message: str, kind: str) -> None:
    print(json.dumps({"error": message, "kind": kind}), file=sys.stderr)


def handle_generate(args: argparse.Namespace, service: Optional[ApiService] = None) -> int:
    request = PlaygroundRequest(
        model_id=args.model,
        provider=args.provider,
        input=args.input,
        input_format=args.input_format,
        max_tokens=args.max_tokens,
        temperature=args.temperature,
    )
    response = asyncio.run(generate_playground_response(request, service=resolve_service(service)))
    if args.json:
        _print_json(response.to_dict())
    elif response.error:
        print(response.error, file=sys.stderr)
    else:
        print(response.content)
    return 0 if response.ok else 1


def handle_models(args: argparse.Namespace, service: Optional[ApiService] = None) -> int:
    if args.provider not in MODEL_PROVIDERS:
        _print_error(f"Model listing is not supported for provider: {args.provider}", "unknown_provider")
        return 1
    registry = resolve_service(service)

    async def _list() -> Any:
        return await registry.get_client(args.provider).list_models()

    try:
        listing = asyncio.run(_list())
    except ApiError as e:
        _print_error(e.message, e.kind.value)
        return 1
    _print_json(listing)
    return 0


def handle_test(args: argparse.Namespace, service: Optional[ApiService] = None) -> int:
    if args.provider not in TESTABLE_PROVIDERS:
        _print_error(f"Connection test is not supported for provider: {args.provider}", "unknown_provider")
        return 1
    registry = resolve_service(service)
    try:
        client = registry.get_client(args.provider)
    except ApiError as e:
        _print_error(e.message, e.kind.value)
        return 1
    ok = asyncio.run(client.test_connection())
    _print_json({"provider": args.provider, "ok": ok})
    return 0 if ok else 1


__all__ = ["handle_generate", "handle_models", "handle_test", "resolve_service"]
