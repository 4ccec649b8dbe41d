"""Capability prober.

Derives a point-in-time ``ProviderStatus`` for every registered provider:

- local providers are ``connected`` when discovery found at least one of
  their models and ``unreachable`` otherwise (no extra network call);
- hosted providers are ``connected`` when the credential store holds a
  non-blank key and ``no-credential`` otherwise.

Checks are independent: a failing credential read only affects its own
provider.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional

import httpx

from ..base.interfaces import CredentialStore
from ..base.models import ModelInfo, ProviderStatus
from ..base.registry import PROVIDERS, ProviderId
from ..base.repositories.keys import read_credential
from .discovery import discover_local_models


def probe_all(
    known_local_models: Iterable[ModelInfo],
    credential_store: Optional[CredentialStore],
) -> Dict[ProviderId, ProviderStatus]:
    """Return the status of every provider, in registry order."""
    seen = {getattr(m.provider, "value", m.provider) for m in known_local_models}
    statuses: Dict[ProviderId, ProviderStatus] = {}
    for meta in PROVIDERS:
        if meta.is_local:
            ok = meta.id.value in seen
            statuses[meta.id] = ProviderStatus.CONNECTED if ok else ProviderStatus.UNREACHABLE
        else:
            ok = read_credential(credential_store, meta.credential_key) is not None
            statuses[meta.id] = ProviderStatus.CONNECTED if ok else ProviderStatus.NO_CREDENTIAL
    return statuses


async def probe_providers(
    credential_store: Optional[CredentialStore],
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dict[ProviderId, ProviderStatus]:
    """Discover local models, then derive every provider's status."""
    models = await discover_local_models(transport=transport)
    return probe_all(models, credential_store)


__all__ = ["probe_all", "probe_providers"]
