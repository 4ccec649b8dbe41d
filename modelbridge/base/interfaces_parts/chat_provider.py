"""ChatProvider Protocol (single-class module).

Core contract every provider family implements: build a wire payload and
send a normalized chat request.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Protocol, runtime_checkable

from ..cancellation import CancellationToken
from ..models import ChatModelRequest, ChatModelResponse


@runtime_checkable
class ChatProvider(Protocol):
    """Interface for chat-capable provider adapters."""

    @property
    def provider_name(self) -> str:  # pragma: no cover - interface
        ...

    def build_payload(self, request: ChatModelRequest) -> Dict[str, Any]:  # pragma: no cover - interface
        """Map ``request`` to the provider's JSON body (pure)."""
        ...

    async def send(
        self,
        request: ChatModelRequest,
        on_delta: Optional[Callable[[str], None]] = None,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> ChatModelResponse:  # pragma: no cover - interface
        """Execute one chat call, forwarding deltas when streaming."""
        ...
