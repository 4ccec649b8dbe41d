"""Cancellation error types.

Defines the public ``CancelledError`` used to signal caller-requested
cancellation, and ``StreamCancelledError`` which additionally carries the
partial output a generation call had accumulated when it was stopped.
"""

from __future__ import annotations

from typing import Any, List, Optional


class CancelledError(RuntimeError):
    """Raised when an operation is cancelled cooperatively.

    This specialized error distinguishes caller cancellation from other
    runtime failures, enabling targeted handling (suppress log noise, map to
    a structured status, keep partial output).
    """


class StreamCancelledError(CancelledError):
    """A generation call was stopped by its caller before completing.

    The connector never discards what it accumulated; the caller decides
    whether to keep ``partial_text``.

    Attributes:
        partial_text: Concatenation of every delta forwarded before the stop.
        raw_frames: Raw frames parsed before the stop, in arrival order.
        request_id: Correlation id of the cancelled request, if any.
    """

    def __init__(
        self,
        reason: str = "operation cancelled",
        *,
        partial_text: str = "",
        raw_frames: Optional[List[Any]] = None,
        request_id: Optional[str] = None,
    ) -> None:
        super().__init__(reason)
        self.partial_text = partial_text
        self.raw_frames = list(raw_frames or [])
        self.request_id = request_id


__all__ = ["CancelledError", "StreamCancelledError"]
