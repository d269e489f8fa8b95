"""
Playground Providers Base Package

Exports the provider-agnostic pieces shared by every client:
- Errors: ``ApiError`` and its ``ErrorKind`` classification
- HTTP: the ``ApiClient`` request primitive
- Models (DTOs): playground request/response and ``ApiConfig``
- Timeouts: ``TimeoutConfig`` and the per-call deadline guard
"""

from .dto import ApiConfig, ProviderCredentials
from .errors import ApiError, ErrorKind, classify_exception, to_api_error
from .http import ApiClient
from .models import InputFormat, PlaygroundRequest, PlaygroundResponse, ResponseMetadata
from .timeouts import TimeoutConfig, get_timeout_config, with_timeout

__all__ = [
    # Errors
    "ApiError",
    "ErrorKind",
    "classify_exception",
    "to_api_error",
    # HTTP
    "ApiClient",
    # Models
    "ApiConfig",
    "ProviderCredentials",
    "InputFormat",
    "PlaygroundRequest",
    "PlaygroundResponse",
    "ResponseMetadata",
    # Timeouts
    "TimeoutConfig",
    "get_timeout_config",
    "with_timeout",
]
