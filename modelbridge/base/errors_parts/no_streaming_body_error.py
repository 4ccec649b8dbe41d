"""Error raised when a streaming response exposes no readable body."""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


class NoStreamingBodyError(ProviderError):
    """Streaming was requested but the transport provided no body to read."""

    def __init__(self, provider: str = "unknown", *, model: Optional[str] = None) -> None:
        super().__init__(
            code=ErrorCode.INTERNAL,
            message="No streaming body available",
            provider=provider,
            model=model,
        )


__all__ = ["NoStreamingBodyError"]
