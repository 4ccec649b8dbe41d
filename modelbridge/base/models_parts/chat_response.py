"""
ChatModelResponse DTO: the single terminal value of one request.

``raw`` carries the parsed provider document (non-streaming) or the list of
parsed frames in arrival order (streaming). It is meant for debugging and is
excluded from ``to_dict`` unless asked for.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class ChatModelResponse:
    """Provider-agnostic result of a chat invocation.

    Attributes:
        content: Aggregated completion text.
        raw: Raw provider payload(s) for diagnostics.
        request_id: Correlation id echoed from the request.
    """

    content: str
    raw: Optional[Any] = None
    request_id: Optional[str] = None

    def to_dict(self, *, include_raw: bool = False) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary (``raw`` only on request)."""
        return {
            "content": self.content,
            "raw": self.raw if include_raw else None,
            "request_id": self.request_id,
        }


__all__ = ["ChatModelResponse"]
