"""
Provider-agnostic playground models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``playground_providers.base.models_parts``.
"""

from .models_parts.input_format import InputFormat
from .models_parts.playground_request import PlaygroundRequest
from .models_parts.playground_response import (
    PlaygroundResponse,
    ResponseMetadata,
    format_processing_time,
)

__all__ = [
    "InputFormat",
    "PlaygroundRequest",
    "PlaygroundResponse",
    "ResponseMetadata",
    "format_processing_time",
]
