"""Map exceptions and HTTP statuses onto :class:`ErrorCode`.

Used where the connector turns a foreign failure into a ``ProviderError``:
network errors around a generation call, non-2xx responses, and anything a
``stream_chat`` producer did not expect.
"""
from __future__ import annotations

import asyncio
from typing import Any, Dict, Optional

import httpx

from .error_code import ErrorCode
from .provider_error import ProviderError

_STATUS_CODES: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}

# First match wins; checked against the lowercased message.
_MESSAGE_HINTS = (
    ("rate limit", ErrorCode.RATE_LIMIT),
    ("timed out", ErrorCode.TIMEOUT),
    ("timeout", ErrorCode.TIMEOUT),
    ("connection refused", ErrorCode.UNAVAILABLE),
    ("unauthorized", ErrorCode.AUTH),
    ("api key", ErrorCode.AUTH),
    ("not found", ErrorCode.NOT_FOUND),
    ("malformed", ErrorCode.VALIDATION),
)


def code_for_status(status: int) -> ErrorCode:
    """Return the code for an HTTP status; unlisted 5xx map to ``server_error``."""
    if status in _STATUS_CODES:
        return _STATUS_CODES[status]
    return ErrorCode.SERVER_ERROR if status >= 500 else ErrorCode.UNKNOWN


def _status_of(exc: Any) -> Optional[int]:
    """Find an HTTP status on ``exc`` or on its ``response``."""
    # httpx.RequestError.request raises when unset, so only look at .response
    for holder in (exc, getattr(exc, "response", None)):
        status = getattr(holder, "status_code", None)
        if isinstance(status, int) and 100 <= status < 600:
            return status
    return None


def classify_exception(exc: Exception) -> ErrorCode:
    """Classify ``exc``.

    Order: ``ProviderError`` passthrough, timeouts, refused connections,
    other transport failures, an HTTP status found on the exception, message
    hints, then ``unknown``.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError, httpx.TimeoutException)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, (httpx.ConnectError, ConnectionRefusedError)):
        return ErrorCode.UNAVAILABLE
    if isinstance(exc, (httpx.TransportError, ConnectionError)):
        return ErrorCode.TRANSIENT
    status = _status_of(exc)
    if status is not None:
        return code_for_status(status)
    message = str(exc).lower()
    for needle, code in _MESSAGE_HINTS:
        if needle in message:
            return code
    return ErrorCode.UNKNOWN


def is_connection_refused(exc: BaseException) -> bool:
    """Return True when ``exc`` or anything in its cause chain is a refused connection."""
    seen = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, ConnectionRefusedError):
            return True
        if "connection refused" in str(current).lower():
            return True
        current = current.__cause__ or current.__context__
    return False


__all__ = ["classify_exception", "code_for_status", "is_connection_refused"]
