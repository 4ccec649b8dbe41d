"""ModelListingProvider Protocol (single-class module)."""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from ..models import ModelInfo


@runtime_checkable
class ModelListingProvider(Protocol):
    """Interface for providers that can enumerate their models.

    Implementations never raise for an unreachable server; they return an
    empty list instead.
    """

    async def list_models(self, credential: Optional[str] = None) -> List[ModelInfo]:  # pragma: no cover
        ...
