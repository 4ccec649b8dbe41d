"""Cooperative cancellation primitives (public API facade).

Purpose
-------
Expose stable, provider-agnostic cancellation constructs via the canonical
``modelbridge.base.cancellation`` import path while the concrete
implementations live under ``cancellation_parts``.

Notes
-----
- ``CancellationToken`` lets a caller stop a streaming generation call.
- ``CancelledError`` is raised by operations that observe a cancellation
  request; ``StreamCancelledError`` carries the partial output of a stopped
  generation call.
"""

from .cancellation_parts.cancelled_error import CancelledError, StreamCancelledError
from .cancellation_parts.cancellation_token import CancellationToken

__all__ = ["CancellationToken", "CancelledError", "StreamCancelledError"]
