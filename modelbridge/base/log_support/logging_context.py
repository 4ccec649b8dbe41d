"""Correlation fields shared by every log event of one call."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Provider, model and request id attached to a call's log events.

    ``to_dict`` flattens ``extra`` into the result and drops ``None`` values.
    """

    provider: Optional[str] = None
    model: Optional[str] = None
    request_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def for_request(cls, provider: str, request: Any, **extra: Any) -> "LogContext":
        """Build a context from anything exposing ``model`` and ``request_id``."""
        return cls(
            provider=provider,
            model=getattr(request, "model", None),
            request_id=getattr(request, "request_id", None),
            extra=extra,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data.update(data.pop("extra") or {})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
