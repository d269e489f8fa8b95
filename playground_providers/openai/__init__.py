"""
OpenAI provider package.

Exports:
- OpenAIClient: HTTP client for the OpenAI REST API
"""

from .client import OpenAIClient

__all__ = ["OpenAIClient"]
