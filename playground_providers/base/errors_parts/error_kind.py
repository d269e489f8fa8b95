"""
Normalized error kinds (taxonomy).

Defines the closed `ErrorKind` enumeration used by the HTTP client, the
provider registry and the playground router. Values are lowercase snake_case
and are considered a stable public contract for logging and API responses.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Enumerated failure categories.

    CONFIGURATION: a provider was requested without configured credentials.
    TRANSPORT: network failure or an undecodable upstream body.
    TIMEOUT: the opt-in per-call deadline elapsed first.
    UNKNOWN_PROVIDER: the playground request named no known provider.
    UPSTREAM: the provider answered with a non-2xx status.
    """

    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    TIMEOUT = "timeout"
    UNKNOWN_PROVIDER = "unknown_provider"
    UPSTREAM = "upstream"


__all__ = ["ErrorKind"]
