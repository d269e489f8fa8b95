"""playground_providers: one request shape for many AI providers.

Public surface:
- ``ApiService``: provider registry
- ``generate_playground_response``: cached playground entry point
- ``load_api_config``: credentials from file, dotenv and environment
"""

from .base import ApiConfig, ApiError, ErrorKind, InputFormat, PlaygroundRequest, PlaygroundResponse
from .config import load_api_config
from .playground import generate_playground_response, playground_cache
from .registry import ApiService

__version__ = "0.1.0"

__all__ = [
    "ApiConfig",
    "ApiError",
    "ApiService",
    "ErrorKind",
    "InputFormat",
    "PlaygroundRequest",
    "PlaygroundResponse",
    "generate_playground_response",
    "load_api_config",
    "playground_cache",
]
