"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `playground_providers.base.errors` for the stable surface.
"""

from .error_kind import ErrorKind
from .api_error import ApiError
from .classification import classify_exception, to_api_error

__all__ = ["ErrorKind", "ApiError", "classify_exception", "to_api_error"]
