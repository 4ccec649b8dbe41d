"""
Keys Repository

Purpose
- Give the connector a ``CredentialStore`` backed by the process environment
  and the unified provider config, for hosts that do not run their own
  secret store.
- Keep logic contained in the connector layer (read-only, no writes).

Design
- Non-throwing accessors that return None if a key is not resolved.
- Credential-storage keys (``openai_api_key``) are mapped to providers through
  the registry; env var names come from ``modelbridge.config.env``.

Usage
- repo = KeysRepository()
- key = repo.get("openai_api_key")
- key = repo.get_api_key("openai")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ...config import get_provider_config
from ...config.env import ENV_MAP, is_placeholder, resolve_provider_key
from ..interfaces_parts.credential_store import CredentialStore
from ..logging import get_logger, log_event
from ..registry import PROVIDER_KEY_MAP

_logger = get_logger("credentials")


@dataclass
class KeyResolution:
    provider: str
    api_key: Optional[str]
    source: str  # "env", "config", "none"
    extra: Dict[str, Any] = field(default_factory=dict)


_PROVIDER_BY_KEY: Dict[str, str] = {
    key: pid.value for pid, key in PROVIDER_KEY_MAP.items() if key is not None
}


class KeysRepository:
    """
    Resolve provider credentials with a strict priority order:

    1) Environment variables (authoritative)
    2) ``api_key`` in the provider's config section
    3) None
    """

    ENV_MAP = ENV_MAP

    def get(self, key: str) -> Optional[str]:
        """``CredentialStore`` entry point keyed by credential-storage key."""
        provider = _PROVIDER_BY_KEY.get(key)
        if provider is None:
            return None
        return self.get_api_key(provider)

    def get_api_key(self, provider: str) -> Optional[str]:
        return self.get_resolution(provider).api_key

    def get_resolution(self, provider: str) -> KeyResolution:
        p = (provider or "").lower().strip()
        val, used = resolve_provider_key(p)
        if val:
            return KeyResolution(provider=p, api_key=val, source="env", extra={"env_var": used})

        cfg_key = get_provider_config(p).get("api_key")
        if isinstance(cfg_key, str) and cfg_key.strip() and not is_placeholder(cfg_key):
            return KeyResolution(provider=p, api_key=cfg_key.strip(), source="config")

        return KeyResolution(provider=p, api_key=None, source="none")


class MappingCredentialStore:
    """``CredentialStore`` over a plain mapping; blank values count as absent."""

    def __init__(self, values: Optional[Mapping[str, Optional[str]]] = None) -> None:
        self._values: Dict[str, Optional[str]] = dict(values or {})

    def get(self, key: str) -> Optional[str]:
        val = self._values.get(key)
        if val is None or not str(val).strip():
            return None
        return val

    def __repr__(self) -> str:  # never print secrets
        return f"MappingCredentialStore(keys={sorted(self._values)!r})"


def read_credential(store: Optional[CredentialStore], key: Optional[str]) -> Optional[str]:
    """Return the stripped value stored under ``key`` or ``None``.

    A store that raises is treated as holding nothing; the failure is logged
    at DEBUG without the value.
    """
    if store is None or not key:
        return None
    try:
        value = store.get(key)
    except Exception as exc:  # host-supplied store; any failure means "absent"
        log_event(_logger, "credentials.read_failed", level=logging.DEBUG, key=key, error=type(exc).__name__)
        return None
    if value is None:
        return None
    value = str(value).strip()
    return value or None


__all__ = ["KeyResolution", "KeysRepository", "MappingCredentialStore", "read_credential"]
