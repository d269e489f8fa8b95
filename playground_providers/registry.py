"""Provider registry: lazily built, configuration-keyed provider clients.

Purpose
-------
Hold the :class:`ApiConfig` and hand out at most one live client per provider.
Clients are imported lazily using ``importlib``
and cached until the configuration section they were built from changes.

Failure modes
-------------
- Accessing a provider without a key raises ``ApiError(kind=CONFIGURATION)``
  with ``"<Name> API key is not configured"``.
- Unknown provider keys raise ``ApiError(kind=UNKNOWN_PROVIDER)``.
- ``ApiService.get_instance()`` before any configuration raises
  ``ApiError(kind=CONFIGURATION)``.

Side effects
------------
Logs ``registry.client_created`` and ``registry.invalidated``. No I/O.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, List, Mapping, Optional, Union

import httpx

from .base.dto import PROVIDER_KEYS, ApiConfig, ProviderCredentials
from .base.errors import ApiError, ErrorKind
from .base.logging import LogContext, get_logger, log_event

_LOGGER = get_logger("registry")

# provider key -> import path, class and display name; "keyless" clients need no api key
_CLIENTS: Dict[str, Dict[str, Any]] = {
    "openai": {"module": "playground_providers.openai.client", "class": "OpenAIClient", "name": "OpenAI"},
    "anthropic": {"module": "playground_providers.anthropic.client", "class": "AnthropicClient", "name": "Anthropic"},
    "deepseek": {"module": "playground_providers.deepseek.client", "class": "DeepSeekClient", "name": "DeepSeek"},
    "perplexity": {
        "module": "playground_providers.perplexity.client",
        "class": "PerplexityClient",
        "name": "Perplexity",
    },
    "news": {"module": "playground_providers.news.client", "class": "NewsClient", "name": "News"},
    "weather": {
        "module": "playground_providers.weather.client",
        "class": "WeatherClient",
        "name": "Weather",
        "keyless": True,
    },
}

# providers exposing list_models; test_connection adds news
MODEL_PROVIDERS = ("openai", "anthropic", "deepseek", "perplexity")
TESTABLE_PROVIDERS = MODEL_PROVIDERS + ("news",)

ConfigUpdate = Union[ApiConfig, Mapping[str, Any]]


def _coerce_section(value: Any) -> Optional[ProviderCredentials]:
    if value is None or isinstance(value, ProviderCredentials):
        return value
    if isinstance(value, str):
        return ProviderCredentials(api_key=value)
    return ProviderCredentials.model_validate(value)


def _coerce_config(config: ConfigUpdate) -> ApiConfig:
    """Accept an :class:`ApiConfig` or a mapping whose sections are dicts or bare key strings."""
    if isinstance(config, ApiConfig):
        return config
    return ApiConfig(**{k: _coerce_section(v) for k, v in config.items() if k in PROVIDER_KEYS})


class ApiService:
    """Configuration holder and client cache for all upstream providers.

    Parameters
    ----------
    config:
        Initial :class:`ApiConfig`, or a mapping of provider key to
        ``{"api_key": ...}`` or the bare key string.
    transport:
        Optional ``httpx`` transport handed to every client the registry
        builds; used by tests and proxies.
    """

    _default: Optional["ApiService"] = None

    def __init__(
        self,
        config: Optional[ConfigUpdate] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._config = _coerce_config(config if config is not None else ApiConfig())
        self._transport = transport
        self._clients: Dict[str, Any] = {}

    # ----- process default -----
    @classmethod
    def get_instance(cls, config: Optional[ConfigUpdate] = None) -> "ApiService":
        """Return the process default registry, creating it on first use.

        ``config`` is only read on the first call; later configuration goes
        through :meth:`update_config`.
        """
        if cls._default is None:
            if config is None:
                raise ApiError(
                    kind=ErrorKind.CONFIGURATION,
                    message="ApiService must be initialized with a config first",
                )
            cls._default = cls(config)
        return cls._default

    @classmethod
    def reset_instance(cls) -> None:
        cls._default = None

    # ----- configuration -----
    @property
    def config(self) -> ApiConfig:
        return self._config

    def update_config(self, partial: ConfigUpdate) -> None:
        """Merge ``partial`` and drop the cached client of every touched section."""
        if isinstance(partial, ApiConfig):
            changes = {k: getattr(partial, k) for k in partial.model_fields_set}
        else:
            changes = {k: _coerce_section(v) for k, v in partial.items() if k in PROVIDER_KEYS}
        self._config = self._config.model_copy(update=changes)
        for key in changes:
            if self._clients.pop(key, None) is not None:
                log_event(_LOGGER, "registry.invalidated", LogContext(provider=key))

    def is_configured(self, provider: str) -> bool:
        entry = _CLIENTS.get(provider)
        if entry is None:
            return False
        return bool(entry.get("keyless")) or self._config.api_key_for(provider) is not None

    def configured_providers(self) -> List[str]:
        """Provider keys usable right now (keyless providers included)."""
        return [p for p in _CLIENTS if self.is_configured(p)]

    # ----- accessors -----
    def get_client(self, provider: str) -> Any:
        """Return the cached client for ``provider``, building it when absent."""
        key = (provider or "").lower().strip()
        entry = _CLIENTS.get(key)
        if entry is None:
            raise ApiError(kind=ErrorKind.UNKNOWN_PROVIDER, message=f"Unknown provider: {provider}")
        client = self._clients.get(key)
        if client is not None:
            return client

        klass = getattr(import_module(entry["module"]), entry["class"])
        if entry.get("keyless"):
            client = klass(transport=self._transport)
        else:
            api_key = self._config.api_key_for(key)
            if not api_key:
                raise ApiError(
                    kind=ErrorKind.CONFIGURATION,
                    message=f"{entry['name']} API key is not configured",
                    provider=key,
                )
            client = klass(api_key, transport=self._transport)
        self._clients[key] = client
        log_event(_LOGGER, "registry.client_created", LogContext(provider=key))
        return client

    def get_openai(self):
        return self.get_client("openai")

    def get_anthropic(self):
        return self.get_client("anthropic")

    def get_deepseek(self):
        return self.get_client("deepseek")

    def get_perplexity(self):
        return self.get_client("perplexity")

    def get_news(self):
        return self.get_client("news")

    def get_weather(self):
        return self.get_client("weather")


__all__ = ["ApiService", "MODEL_PROVIDERS", "TESTABLE_PROVIDERS"]
