"""Failure categories attached to every ``ProviderError``.

Values are lowercase strings; they appear verbatim as ``error_code`` in log
events and in terminal ``ChatStreamEvent`` objects.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Why a connector call failed."""

    AUTH = "auth"  # missing credential, 401/403
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    TRANSIENT = "transient"  # dropped connection, 502
    UNSUPPORTED = "unsupported"  # unknown provider id
    VALIDATION = "validation"  # 400/422 or a response body that does not parse
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    INTERNAL = "internal"  # connector-side fault (missing body, adapter load)
    UNAVAILABLE = "unavailable"  # connection refused, 503
    UNKNOWN = "unknown"

    @property
    def retryable(self) -> bool:
        """True for categories where repeating the same call may succeed."""
        return self in _RETRYABLE


_RETRYABLE = frozenset(
    {ErrorCode.RATE_LIMIT, ErrorCode.TRANSIENT, ErrorCode.UNAVAILABLE, ErrorCode.TIMEOUT}
)


__all__ = ["ErrorCode"]
