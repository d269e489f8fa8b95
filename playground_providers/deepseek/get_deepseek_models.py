"""
DeepSeek: model catalog fallback

Behavior
- ``DeepSeekClient.list_models`` asks ``GET {base}/models`` first.
- When that fails for any reason, :func:`fallback_models` supplies the known
  model ids in the OpenAI-compatible list shape.
"""

from __future__ import annotations

import time
from typing import Any, Dict, List, Optional

PROVIDER = "deepseek"

FALLBACK_MODEL_IDS = ("deepseek-chat", "deepseek-coder", "deepseek-lite")


def fallback_models(created: Optional[int] = None) -> List[Dict[str, Any]]:
    """Return the static catalog, stamped with ``created`` (epoch ms, default now)."""
    stamp = int(time.time() * 1000) if created is None else created
    return [
        {"id": model_id, "object": "model", "created": stamp, "owned_by": PROVIDER}
        for model_id in FALLBACK_MODEL_IDS
    ]


__all__ = ["fallback_models", "FALLBACK_MODEL_IDS"]
