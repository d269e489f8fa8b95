"""
Perplexity: static model catalog

Perplexity exposes no listing endpoint, so the catalog is maintained here.
``sonar`` models are the online variants with web search.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List

PROVIDER = "perplexity"

_CATALOG: List[Dict[str, Any]] = [
    {
        "id": "sonar-small-online",
        "name": "Sonar Small (Online)",
        "description": "Fast model with internet search capabilities",
        "context_length": 12000,
        "capabilities": ["web_search", "coding", "summarization"],
    },
    {
        "id": "sonar-medium-online",
        "name": "Sonar Medium (Online)",
        "description": "Balanced model with internet search capabilities",
        "context_length": 12000,
        "capabilities": ["web_search", "coding", "summarization", "analysis"],
    },
    {
        "id": "sonar-large-online",
        "name": "Sonar Large (Online)",
        "description": "Most powerful model with internet search capabilities",
        "context_length": 12000,
        "capabilities": ["web_search", "coding", "summarization", "analysis", "creative_writing"],
    },
    {
        "id": "mistral-7b-instruct",
        "name": "Mistral 7B Instruct",
        "description": "Lightweight model for basic tasks",
        "context_length": 8000,
        "capabilities": ["coding", "conversation", "instruction_following"],
    },
    {
        "id": "llama-3-8b-instruct",
        "name": "Llama-3 8B Instruct",
        "description": "Small, efficient model for various tasks",
        "context_length": 8000,
        "capabilities": ["coding", "conversation", "instruction_following"],
    },
    {
        "id": "llama-3-70b-instruct",
        "name": "Llama-3 70B Instruct",
        "description": "Powerful general purpose model",
        "context_length": 8000,
        "capabilities": ["coding", "conversation", "instruction_following", "reasoning"],
    },
]


def get_models() -> List[Dict[str, Any]]:
    """Return a copy of the catalog so callers may mutate it freely."""
    return copy.deepcopy(_CATALOG)


def is_search_model(model_id: str) -> bool:
    return "sonar" in (model_id or "")


__all__ = ["get_models", "is_search_model"]
