"""Unified configuration layer for providers.

Goals
-----
* Centralize defaults (base URLs, token ceilings).
* Merge sources in a predictable order:
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       ``MODELBRIDGE_CONFIG_FILE``
    3. Environment variables (e.g. ``OLLAMA_BASE_URL``, ``ANTHROPIC_MAX_TOKENS``)
    4. In-code overrides passed to the helper
* Provide a single call site: ``get_provider_config(provider: str)``.

Environment Variable Conventions
--------------------------------
<PROVIDER>_BASE_URL, <PROVIDER>_API_KEY, <PROVIDER>_MAX_TOKENS,
<PROVIDER>_HTTP_REFERER, <PROVIDER>_APP_TITLE
e.g. LMSTUDIO_BASE_URL, OPENROUTER_HTTP_REFERER.

External Config File (Optional)
-------------------------------
If ``MODELBRIDGE_CONFIG_FILE`` is set to a path, JSON is attempted first and
YAML second. Structure example:

```
ollama:
  base_url: http://10.0.0.5:11434
anthropic:
  max_tokens: 8192
openrouter:
  http_referer: https://chat.example.org
  app_title: Example Chat
```

Public API
----------
* get_provider_config(provider: str, overrides: dict | None = None) -> dict
* reset_config_cache() -> None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    ANTHROPIC_DEFAULT_BASE_URL,
    ANTHROPIC_DEFAULT_MAX_TOKENS,
    GROQ_DEFAULT_BASE_URL,
    LLAMACPP_DEFAULT_BASE_URL,
    LMSTUDIO_DEFAULT_BASE_URL,
    OLLAMA_DEFAULT_BASE_URL,
    OPENAI_DEFAULT_BASE_URL,
    OPENROUTER_DEFAULT_BASE_URL,
    XAI_DEFAULT_BASE_URL,
)


# -------------------- Defaults --------------------

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "ollama": {"base_url": OLLAMA_DEFAULT_BASE_URL},
    "lmstudio": {"base_url": LMSTUDIO_DEFAULT_BASE_URL},
    "llamacpp": {"base_url": LLAMACPP_DEFAULT_BASE_URL},
    "openrouter": {"base_url": OPENROUTER_DEFAULT_BASE_URL},
    "openai": {"base_url": OPENAI_DEFAULT_BASE_URL},
    "groq": {"base_url": GROQ_DEFAULT_BASE_URL},
    "grok": {"base_url": XAI_DEFAULT_BASE_URL},
    "anthropic": {
        "base_url": ANTHROPIC_DEFAULT_BASE_URL,
        "max_tokens": ANTHROPIC_DEFAULT_MAX_TOKENS,
    },
}


ENV_FIELD_MAP: Dict[str, str] = {
    "base_url": "BASE_URL",
    "api_key": "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    "max_tokens": "MAX_TOKENS",
    "http_referer": "HTTP_REFERER",
    "app_title": "APP_TITLE",
}


_FILE_CACHE: Optional[Dict[str, Any]] = None


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv("MODELBRIDGE_CONFIG_FILE")
    if not path:
        _FILE_CACHE = {}
        return _FILE_CACHE
    p = Path(path)
    if not p.exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = p.read_text(encoding="utf-8")
    data: Any
    # Try JSON first
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            data = {}
    if not isinstance(data, dict):
        data = {}
    _FILE_CACHE = data
    return data


def reset_config_cache() -> None:
    """Forget the parsed external config file so the next read reloads it."""
    global _FILE_CACHE
    _FILE_CACHE = None


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val is not None:
            out[field] = val
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}

    # 1. Defaults
    cfg |= DEFAULTS.get(name, {})

    # 2. External config file section
    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    # 3. Env overrides
    cfg |= _env_overrides(name)

    # 4. Explicit overrides arg
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


__all__ = [
    "get_provider_config",
    "reset_config_cache",
    "DEFAULTS",
    "ENV_FIELD_MAP",
]
