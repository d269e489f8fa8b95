"""Typed configuration object held by the provider registry.

Purpose
-------
Capture which upstream services have credentials. Each provider key maps to an
optional :class:`ProviderCredentials`; an absent section means the feature is
disabled, not that configuration is broken.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``model_dump`` convenience.

Failure modes & side effects
----------------------------
- Pure data container: no I/O side effects. Pydantic raises
  ``ValidationError`` for inputs of the wrong shape.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel

# Keys of ApiConfig sections that carry credentials, in display order.
PROVIDER_KEYS: Tuple[str, ...] = ("openai", "anthropic", "deepseek", "perplexity", "news")


class ProviderCredentials(BaseModel):
    """Credentials for one upstream provider."""

    api_key: str


class ApiConfig(BaseModel):
    """Per-provider credential sections.

    Attributes
    ----------
    openai, anthropic, deepseek, perplexity, news:
        Optional :class:`ProviderCredentials`. ``None`` disables the provider.
    """

    openai: Optional[ProviderCredentials] = None
    anthropic: Optional[ProviderCredentials] = None
    deepseek: Optional[ProviderCredentials] = None
    perplexity: Optional[ProviderCredentials] = None
    news: Optional[ProviderCredentials] = None

    def api_key_for(self, provider: str) -> Optional[str]:
        """Return the configured key for ``provider`` or ``None``."""
        section = getattr(self, provider, None) if provider in PROVIDER_KEYS else None
        if section is None or not section.api_key:
            return None
        return section.api_key

    def configured(self) -> list[str]:
        """Provider keys that currently hold a non-empty key."""
        return [p for p in PROVIDER_KEYS if self.api_key_for(p)]

    @classmethod
    def from_keys(cls, keys: Mapping[str, Optional[str]]) -> "ApiConfig":
        """Build a config from a flat ``{provider: api_key}`` mapping."""
        sections: Dict[str, Any] = {
            p: ProviderCredentials(api_key=k) for p, k in keys.items() if p in PROVIDER_KEYS and k
        }
        return cls(**sections)


__all__ = ["ApiConfig", "ProviderCredentials", "PROVIDER_KEYS"]
