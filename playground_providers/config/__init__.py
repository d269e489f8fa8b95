"""Unified configuration layer for the provider registry.

Goals
-----
* Centralize defaults (base URLs, models, generation parameters) in
  :mod:`.defaults` and env-var names in :mod:`.env`.
* Merge credential sources in a predictable order (later wins):
    1. Optional external config file (JSON or YAML) pointed to by
       ``PLAYGROUND_CONFIG_FILE``
    2. ``.env`` file (path from ``DOTENV_FILE``, default ``.env``)
    3. Process environment variables (``OPENAI_API_KEY`` and friends)
    4. In-code overrides passed to :func:`load_api_config`
* Provide a single call site: ``load_api_config(overrides=None) -> ApiConfig``.

External Config File (Optional)
-------------------------------
JSON is tried first, then YAML. A section may be a mapping with ``api_key``
or the bare key string::

    openai:
      api_key: sk-...
    news: 0123abcd

Placeholder values (see :func:`is_placeholder`) are treated as absent at every
stage.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from ..base.dto import PROVIDER_KEYS, ApiConfig
from .env import get_env_var_candidates, is_placeholder


def _usable(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    value = value.strip()
    if not value or is_placeholder(value):
        return None
    return value


def _load_external_config() -> Dict[str, Any]:
    """Read the optional config file; unreadable or malformed files yield ``{}``."""
    path = os.getenv("PLAYGROUND_CONFIG_FILE")
    if not path:
        return {}
    p = Path(path)
    if not p.is_file():
        return {}
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            data = {}
    return data if isinstance(data, dict) else {}


def _read_dotenv() -> Dict[str, str]:
    """Parse KEY=VALUE lines from the dotenv file without touching ``os.environ``."""
    path = os.getenv("DOTENV_FILE", ".env")
    if not os.path.isfile(path):
        return {}
    out: Dict[str, str] = {}
    with open(path, "r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            k, v = line.split("=", 1)
            k = k.strip()
            if k.startswith("export "):
                k = k[len("export "):].strip()
            v = v.strip().strip('"').strip("'")
            if k:
                out[k] = v
    return out


def _file_key(section: Any) -> Optional[str]:
    if isinstance(section, Mapping):
        return _usable(section.get("api_key"))
    return _usable(section)


def _lookup(variables: Mapping[str, str], provider: str) -> Optional[str]:
    for name in get_env_var_candidates(provider):
        if key := _usable(variables.get(name)):
            return key
    return None


def load_api_config(overrides: Optional[Mapping[str, Optional[str]]] = None) -> ApiConfig:
    """Return an :class:`ApiConfig` merged from file, dotenv, environment and overrides.

    ``overrides`` maps provider keys to API keys; ``None`` values are ignored.
    """
    file_cfg = _load_external_config()
    dotenv = _read_dotenv()
    keys: Dict[str, Optional[str]] = {}
    for provider in PROVIDER_KEYS:
        key = _file_key(file_cfg.get(provider))
        key = _lookup(dotenv, provider) or key
        key = _lookup(os.environ, provider) or key
        if overrides and overrides.get(provider) is not None:
            key = _usable(overrides[provider]) or key
        keys[provider] = key
    return ApiConfig.from_keys(keys)


__all__ = ["load_api_config"]
