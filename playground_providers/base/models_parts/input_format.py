"""Input format tag carried by playground requests."""
from __future__ import annotations

from enum import Enum


class InputFormat(str, Enum):
    """How the playground interprets ``PlaygroundRequest.input``.

    - JSON: an object whose ``system``/``input`` keys override the prompts;
      anything unparsable is used as plain text.
    - TEXT: the raw input is the prompt.
    - CODE: the raw input is analysed under a fixed code-review system prompt.
    """

    JSON = "json"
    TEXT = "text"
    CODE = "code"


__all__ = ["InputFormat"]
