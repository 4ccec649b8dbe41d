"""Root exception for connector failures.

Every typed error the connector raises (unsupported provider, missing
credential, HTTP status, missing body) subclasses ``ProviderError`` so a
caller can catch a single class and branch on ``code``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """A failed provider call, tagged with an :class:`ErrorCode`.

    Attributes:
        code: Failure category.
        message: Short human-readable description.
        provider: Provider id the call was addressed to (``"openrouter"``).
        model: Model name of the request, when known.
        retryable: Whether repeating the call may help; derived from ``code``
            when not given. The connector itself never retries.
        raw: Underlying exception (an ``httpx`` error).
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    retryable: Optional[bool] = None
    raw: Optional[Exception] = None

    def __post_init__(self) -> None:
        if self.retryable is None:
            self.retryable = self.code.retryable

    def __str__(self) -> str:
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


__all__ = ["ProviderError"]
