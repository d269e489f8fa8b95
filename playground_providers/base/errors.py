"""Unified API error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``playground_providers.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_kind import ErrorKind
from .errors_parts.api_error import ApiError
from .errors_parts.classification import classify_exception, to_api_error

__all__ = ["ErrorKind", "ApiError", "classify_exception", "to_api_error"]
