"""
Message DTO used across providers.

Defines the `ChatMessage` dataclass and the `Role` literal representing the
sender role. An ordered sequence of messages forms the conversation.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal

# Message roles accepted by the connector.
Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class ChatMessage:
    """A single conversation turn.

    Attributes:
        role: ``"system"``, ``"user"`` or ``"assistant"``. System messages may
            be lifted into a dedicated field by providers that require it.
        content: Plain message text.
    """

    role: Role
    content: str

    def to_dict(self) -> Dict[str, str]:
        """Return the ``{role, content}`` wire shape shared by most providers."""
        return {"role": self.role, "content": self.content}


__all__ = ["ChatMessage", "Role"]
