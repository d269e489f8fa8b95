"""Query-string helpers for GET-style endpoints."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Tuple
from urllib.parse import urlencode


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(
    params: Mapping[str, Any],
    order: Iterable[str],
    *,
    keep: str = "truthy",
) -> str:
    """Encode ``params`` in ``order`` and return ``"?a=1&b=2"`` or ``""``.

    ``keep="truthy"`` drops falsy values; ``keep="not_none"`` drops only
    ``None``. Keys absent from ``order`` are ignored. Booleans render in
    lowercase.
    """
    pairs: list[Tuple[str, str]] = []
    for key in order:
        value: Optional[Any] = params.get(key)
        if value is None or (keep == "truthy" and not value):
            continue
        pairs.append((key, _render(value)))
    return f"?{urlencode(pairs)}" if pairs else ""


__all__ = ["build_query"]
