"""
PlaygroundRequest DTO: one uniform request routed to any playground provider.

The wire form uses the camelCase keys of the browser playground
(``modelId``, ``inputFormat``, ``maxTokens``); :meth:`PlaygroundRequest.from_dict`
also accepts the snake_case spellings.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .input_format import InputFormat


@dataclass(frozen=True)
class PlaygroundRequest:
    """Immutable playground request.

    Attributes:
        model_id: Provider model identifier (ignored by the Demo provider).
        provider: Display name of the provider variant, e.g. ``"OpenAI"``.
        input: Raw user input.
        input_format: How ``input`` is interpreted.
        max_tokens: Optional completion budget; ``None`` selects the default.
        temperature: Optional sampling temperature; ``None`` selects the default.
        stream: Accepted for wire compatibility; responses are never streamed.
    """

    model_id: str
    provider: str
    input: str
    input_format: InputFormat = InputFormat.TEXT
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    stream: Optional[bool] = None

    def __post_init__(self) -> None:
        if not isinstance(self.input_format, InputFormat):
            object.__setattr__(self, "input_format", InputFormat(self.input_format))

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase wire representation, omitting unset options."""
        out: Dict[str, Any] = {
            "modelId": self.model_id,
            "provider": self.provider,
            "input": self.input,
            "inputFormat": self.input_format.value,
        }
        if self.max_tokens is not None:
            out["maxTokens"] = self.max_tokens
        if self.temperature is not None:
            out["temperature"] = self.temperature
        if self.stream is not None:
            out["stream"] = self.stream
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PlaygroundRequest":
        return cls(
            model_id=data.get("modelId", data.get("model_id", "")),
            provider=data["provider"],
            input=data.get("input", ""),
            input_format=data.get("inputFormat", data.get("input_format", InputFormat.TEXT)),
            max_tokens=data.get("maxTokens", data.get("max_tokens")),
            temperature=data.get("temperature"),
            stream=data.get("stream"),
        )


__all__ = ["PlaygroundRequest"]
