"""News API provider package."""

from .client import NewsClient

__all__ = ["NewsClient"]
