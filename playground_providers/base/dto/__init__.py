"""Typed data-transfer objects shared across the package."""

from .api_config import PROVIDER_KEYS, ApiConfig, ProviderCredentials

__all__ = ["ApiConfig", "ProviderCredentials", "PROVIDER_KEYS"]
