"""
ChatModelRequest DTO for provider-agnostic chat invocations.

Constructed per call by the caller and never persisted by the connector.
Provider families map it to their wire payloads (see ``build_payload``).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .message import ChatMessage


@dataclass
class ChatModelRequest:
    """Normalized chat request sent to provider adapters.

    Attributes:
        provider: Provider id (``ProviderId`` or its string value).
        model: Target model identifier.
        messages: Ordered conversation turns.
        api_key: Credential for hosted providers; ignored by local ones.
        stream: When True, deltas are forwarded as they arrive.
        request_id: Optional correlation id echoed on the response so a
            remote observer can match streaming updates to this request.
    """

    provider: str
    model: str
    messages: List[ChatMessage] = field(default_factory=list)
    api_key: Optional[str] = None
    stream: bool = False
    request_id: Optional[str] = None

    def __repr__(self) -> str:  # keep credentials out of logs and tracebacks
        return (
            f"ChatModelRequest(provider={self.provider!r}, model={self.model!r}, "
            f"messages={len(self.messages)}, api_key={'***' if self.api_key else None}, "
            f"stream={self.stream!r}, request_id={self.request_id!r})"
        )


__all__ = ["ChatModelRequest"]
