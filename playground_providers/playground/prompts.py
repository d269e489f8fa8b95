"""Prompt derivation and canned Demo texts for the playground router."""

from __future__ import annotations

import json
from typing import Tuple

from ..base.models import InputFormat

CODE_ANALYST_SYSTEM_PROMPT = (
    "You are a code analyst. Analyze the following code and provide insights, "
    "improvements, and potential issues."
)

DEMO_JSON_RESPONSE = (
    "This is a simulated response from a demo model. In a real implementation, this would be "
    "generated by an actual AI model API. The response would be tailored to the input JSON "
    "parameters and would provide relevant information or analysis."
)

DEMO_CODE_RESPONSE = (
    "Code Analysis Results:\n\n"
    "1. Structure: The code appears well-structured with clear function definitions.\n"
    "2. Best practices: Following standard naming conventions and patterns.\n"
    "3. Potential improvements:\n"
    "   - Consider adding more error handling\n"
    "   - Add documentation for complex logic\n"
    "   - Optimize performance in the main loop\n\n"
    "Overall, the code is well-written but could benefit from these minor improvements."
)

DEMO_TEXT_RESPONSE = (
    "This is a simulated response from a demo model. In a real implementation, this would be "
    "generated by an actual AI model based on your text input. For now, this is just placeholder "
    "text to demonstrate how the interface would work with real API connections."
)

DEMO_RESPONSES = {
    InputFormat.JSON: DEMO_JSON_RESPONSE,
    InputFormat.CODE: DEMO_CODE_RESPONSE,
    InputFormat.TEXT: DEMO_TEXT_RESPONSE,
}


def derive_prompts(raw: str, input_format: InputFormat) -> Tuple[str, str]:
    """Return ``(prompt, system_prompt)`` for ``raw`` interpreted as ``input_format``.

    JSON input is lenient: when it does not parse to an object the raw string
    is the prompt. Only truthy ``system``/``input`` keys override anything;
    other keys (``model``, ``temperature``...) are ignored here.
    """
    prompt, system_prompt = raw, ""
    if input_format is InputFormat.JSON:
        try:
            data = json.loads(raw)
        except ValueError:
            return prompt, system_prompt
        if isinstance(data, dict):
            if data.get("system"):
                system_prompt = data["system"] if isinstance(data["system"], str) else json.dumps(data["system"])
            if data.get("input"):
                prompt = data["input"] if isinstance(data["input"], str) else json.dumps(data["input"])
    elif input_format is InputFormat.CODE:
        system_prompt = CODE_ANALYST_SYSTEM_PROMPT
    return prompt, system_prompt


__all__ = [
    "CODE_ANALYST_SYSTEM_PROMPT",
    "DEMO_RESPONSES",
    "derive_prompts",
]
