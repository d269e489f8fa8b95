"""HTTP primitives shared by provider clients."""

from .client import ApiClient, JSON
from .query import build_query

__all__ = ["ApiClient", "JSON", "build_query"]
