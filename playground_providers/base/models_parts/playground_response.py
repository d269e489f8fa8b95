"""
Normalized playground response and its metadata.

Success and failure share one shape: failures carry ``error``, an empty
``content``, zero tokens and zero confidence, and still report timing.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


def format_processing_time(seconds: float) -> str:
    """Render elapsed seconds with three decimals and an ``s`` suffix."""
    return f"{max(seconds, 0.0):.3f}s"


@dataclass(frozen=True)
class ResponseMetadata:
    """Accounting attached to every playground response.

    Attributes:
        tokens_used: Authoritative or estimated token count; 0 on error.
        processing_time: Elapsed wall time such as ``"1.004s"``.
        model: Model identifier from the request.
        confidence: Synthetic score in ``[0.92, 1.0)`` on success, 0 on error.
    """

    tokens_used: int
    processing_time: str
    model: str
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tokens_used": self.tokens_used,
            "processing_time": self.processing_time,
            "model": self.model,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class PlaygroundResponse:
    """Tagged success-or-error result of one playground run."""

    content: str
    metadata: Optional[ResponseMetadata] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, content: str, *, tokens_used: int, elapsed: float, model: str, confidence: float) -> "PlaygroundResponse":
        return cls(
            content=content,
            metadata=ResponseMetadata(
                tokens_used=tokens_used,
                processing_time=format_processing_time(elapsed),
                model=model,
                confidence=confidence,
            ),
        )

    @classmethod
    def failure(cls, error: str, *, elapsed: float, model: str) -> "PlaygroundResponse":
        return cls(
            content="",
            metadata=ResponseMetadata(
                tokens_used=0,
                processing_time=format_processing_time(elapsed),
                model=model,
                confidence=0,
            ),
            error=error,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire dictionary; ``error`` appears only when set."""
        out: Dict[str, Any] = {"content": self.content}
        if self.metadata is not None:
            out["metadata"] = self.metadata.to_dict()
        if self.error is not None:
            out["error"] = self.error
        return out


__all__ = ["PlaygroundResponse", "ResponseMetadata", "format_processing_time"]
