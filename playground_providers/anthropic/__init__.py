"""Anthropic provider package."""

from .client import AnthropicClient

__all__ = ["AnthropicClient"]
