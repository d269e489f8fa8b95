"""DeepSeek provider package."""

from .client import DeepSeekClient

__all__ = ["DeepSeekClient"]
