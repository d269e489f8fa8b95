"""Playground: one request shape routed to any provider.

``generate_playground_response`` here is the cached entry point; the uncached
router lives in :mod:`.api`.
"""

from .api_cached import CachedPlayground, fingerprint, generate_playground_response, playground_cache
from .generators import Generation, PlaygroundProvider, ProviderGenerator
from .prompts import derive_prompts

__all__ = [
    "CachedPlayground",
    "Generation",
    "PlaygroundProvider",
    "ProviderGenerator",
    "derive_prompts",
    "fingerprint",
    "generate_playground_response",
    "playground_cache",
]
