"""Anthropic model catalog.

The Messages API used here has no listing endpoint, so the supported models are
kept as a static catalog. Each entry carries ``name``, ``description``,
``context_window`` and ``max_tokens``.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List

PROVIDER = "anthropic"

_CATALOG: List[Dict[str, Any]] = [
    {
        "name": "claude-3-opus-20240229",
        "description": "Anthropic's most powerful model for highly complex tasks",
        "context_window": 200000,
        "max_tokens": 4096,
    },
    {
        "name": "claude-3-sonnet-20240229",
        "description": "Balanced model for most tasks with excellent performance",
        "context_window": 200000,
        "max_tokens": 4096,
    },
    {
        "name": "claude-3-haiku-20240307",
        "description": "Fastest and most compact model for simple tasks",
        "context_window": 200000,
        "max_tokens": 4096,
    },
    {
        "name": "claude-2.1",
        "description": "Previous generation model with good performance",
        "context_window": 100000,
        "max_tokens": 4096,
    },
]


def get_models() -> List[Dict[str, Any]]:
    """Return a copy of the catalog."""
    return copy.deepcopy(_CATALOG)


__all__ = ["get_models"]
