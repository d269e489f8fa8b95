"""Perplexity provider package."""

from .client import PerplexityClient

__all__ = ["PerplexityClient"]
