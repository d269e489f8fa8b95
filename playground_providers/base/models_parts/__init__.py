"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`playground_providers.base.models_parts` if needed, while
`playground_providers.base.models` remains the primary stable import path.
"""

from .input_format import InputFormat
from .playground_request import PlaygroundRequest
from .playground_response import PlaygroundResponse, ResponseMetadata, format_processing_time

__all__ = [
    "InputFormat",
    "PlaygroundRequest",
    "PlaygroundResponse",
    "ResponseMetadata",
    "format_processing_time",
]
