"""Model discovery across providers.

Local servers are probed concurrently, each under the discovery deadline
(2 s by default); an unreachable server simply contributes no models.
Hosted providers are listed only when the credential store holds a key.
Results are concatenated in registry order.
"""

from __future__ import annotations

import asyncio
from typing import List, Optional

import httpx

from ..base.factory import ProviderFactory
from ..base.interfaces import CredentialStore
from ..base.models import ModelInfo
from ..base.registry import LOCAL_PROVIDERS, PROVIDERS
from ..base.repositories.keys import read_credential


async def discover_local_models(*, transport: Optional[httpx.AsyncBaseTransport] = None) -> List[ModelInfo]:
    """List models of every local provider; unreachable servers yield none."""
    providers = [ProviderFactory.create(pid, transport=transport) for pid in LOCAL_PROVIDERS]
    listings = await asyncio.gather(*(p.list_models() for p in providers))
    return [model for listing in listings for model in listing]


async def discover_models(
    credential_store: Optional[CredentialStore],
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[ModelInfo]:
    """List models of every provider, local and hosted."""
    calls = []
    for meta in PROVIDERS:
        provider = ProviderFactory.create(meta.id, transport=transport)
        credential = read_credential(credential_store, meta.credential_key) if meta.requires_credential else None
        calls.append(provider.list_models(credential))
    listings = await asyncio.gather(*calls)
    return [model for listing in listings for model in listing]


__all__ = ["discover_local_models", "discover_models"]
