"""
Structured API error exception type.

Every failure raised by the HTTP client, provider clients and the registry is
an `ApiError`, so callers never see raw ``httpx`` or ``json`` exceptions.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .error_kind import ErrorKind


@dataclass
class ApiError(Exception):
    """Represents a normalized API failure.

    Attributes:
        kind: Normalized :class:`ErrorKind` classification for the failure.
        message: Human-readable message; surfaced verbatim to playground users.
        status: HTTP status code when the failure came from a response.
        code: Provider-supplied error code (e.g. ``"invalid_api_key"``).
        details: Decoded error body or other diagnostic payload.
        provider: Provider key where the error originated, when known.
    """

    kind: ErrorKind
    message: str
    status: Optional[int] = None
    code: Optional[str] = None
    details: Any = None
    provider: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Return the normalized ``{status, message, code, details}`` shape."""
        return {
            "status": self.status,
            "message": self.message,
            "code": self.code,
            "details": self.details,
        }


__all__ = ["ApiError"]
