"""Provider registry: the static catalog of known providers.

Purpose
-------
Identity, human label, local-vs-hosted classification and credential-storage
key for every provider the connector can talk to. The table is fixed at
import time and never mutated; lookups are pure.

Classification rules
--------------------
- Local providers have no credential key and are judged reachable or
  unreachable.
- Hosted ("online") providers have a credential key and are judged
  connected or missing a credential.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

from .errors import UnsupportedProviderError


class ProviderId(str, Enum):
    """Stable provider identifiers used as lookup keys everywhere."""

    OLLAMA = "ollama"
    LMSTUDIO = "lmstudio"
    LLAMACPP = "llamacpp"
    OPENROUTER = "openrouter"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GROQ = "groq"
    GROK = "grok"


class ProviderKind(str, Enum):
    LOCAL = "local"
    ONLINE = "online"


@dataclass(frozen=True)
class ProviderMeta:
    """Static description of one provider.

    Attributes:
        id: Provider identifier.
        label: Human-readable name shown in UIs.
        kind: ``local`` or ``online``.
        credential_key: Credential-storage key for hosted providers; ``None``
            for local ones.
    """

    id: ProviderId
    label: str
    kind: ProviderKind
    credential_key: Optional[str] = None

    @property
    def is_local(self) -> bool:
        return self.kind is ProviderKind.LOCAL

    @property
    def requires_credential(self) -> bool:
        return self.credential_key is not None


PROVIDERS: Tuple[ProviderMeta, ...] = (
    ProviderMeta(ProviderId.OLLAMA, "Ollama", ProviderKind.LOCAL),
    ProviderMeta(ProviderId.LMSTUDIO, "LM Studio", ProviderKind.LOCAL),
    ProviderMeta(ProviderId.LLAMACPP, "llama.cpp", ProviderKind.LOCAL),
    ProviderMeta(ProviderId.OPENROUTER, "OpenRouter", ProviderKind.ONLINE, "openrouter_api_key"),
    ProviderMeta(ProviderId.OPENAI, "OpenAI", ProviderKind.ONLINE, "openai_api_key"),
    ProviderMeta(ProviderId.ANTHROPIC, "Anthropic", ProviderKind.ONLINE, "anthropic_api_key"),
    ProviderMeta(ProviderId.GROQ, "Groq", ProviderKind.ONLINE, "groq_api_key"),
    ProviderMeta(ProviderId.GROK, "Grok (xAI)", ProviderKind.ONLINE, "grok_api_key"),
)

_BY_ID: Mapping[ProviderId, ProviderMeta] = MappingProxyType({p.id: p for p in PROVIDERS})

LOCAL_PROVIDERS: Tuple[ProviderId, ...] = tuple(p.id for p in PROVIDERS if p.kind is ProviderKind.LOCAL)
ONLINE_PROVIDERS: Tuple[ProviderId, ...] = tuple(p.id for p in PROVIDERS if p.kind is ProviderKind.ONLINE)
PROVIDER_KEY_MAP: Mapping[ProviderId, Optional[str]] = MappingProxyType(
    {p.id: p.credential_key for p in PROVIDERS}
)


def coerce_provider_id(provider: Union[ProviderId, str]) -> ProviderId:
    """Return the ``ProviderId`` for ``provider`` or raise ``UnsupportedProviderError``."""
    if isinstance(provider, ProviderId):
        return provider
    try:
        return ProviderId(str(provider).strip().lower())
    except ValueError as exc:
        raise UnsupportedProviderError(str(provider)) from exc


def resolve(provider: Union[ProviderId, str]) -> ProviderMeta:
    """Look up the static metadata for ``provider``.

    Raises:
        UnsupportedProviderError: ``provider`` is not in the catalog.
    """
    return _BY_ID[coerce_provider_id(provider)]


__all__ = [
    "ProviderId",
    "ProviderKind",
    "ProviderMeta",
    "PROVIDERS",
    "LOCAL_PROVIDERS",
    "ONLINE_PROVIDERS",
    "PROVIDER_KEY_MAP",
    "coerce_provider_id",
    "resolve",
]
