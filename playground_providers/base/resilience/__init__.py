"""Resilience helpers: response caching and request deduplication."""

from .cache import CacheStrategies, ResponseCache, dedup_request, with_cache

__all__ = ["CacheStrategies", "ResponseCache", "dedup_request", "with_cache"]
