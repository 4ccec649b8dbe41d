"""Per-call accumulation of deltas and raw frames.

``StreamAccumulator`` is the single place where a delta becomes visible: it
is appended to the running text and then handed to the caller's sink, so the
final text is always the exact concatenation of what the sink received.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

DeltaSink = Callable[[str], None]


@dataclass
class DecodedStream:
    """Outcome of decoding one response body.

    Attributes:
        full_text: Concatenation of all deltas, in forwarding order.
        raw_frames: Every successfully parsed frame, in arrival order.
        ended_by_marker: True when an explicit end-of-stream marker was seen.
    """

    full_text: str
    raw_frames: List[Any] = field(default_factory=list)
    ended_by_marker: bool = False


class StreamAccumulator:
    """Collect frames and deltas for a single streaming call."""

    def __init__(self, on_delta: Optional[DeltaSink] = None) -> None:
        self._on_delta = on_delta
        self._parts: List[str] = []
        self.raw_frames: List[Any] = []
        self.emitted = 0

    @property
    def full_text(self) -> str:
        return "".join(self._parts)

    def add_frame(self, frame: Any) -> None:
        self.raw_frames.append(frame)

    def add_delta(self, delta: str) -> None:
        """Record ``delta`` and forward it synchronously; empty deltas are dropped."""
        if not delta:
            return
        self._parts.append(delta)
        self.emitted += 1
        if self._on_delta is not None:
            self._on_delta(delta)

    async def drain(self) -> None:
        """Wait until the sink can accept more deltas.

        Sinks exposing an ``async drain()`` (like ``asyncio.StreamWriter``)
        slow the decoder down to the consumer's pace; plain callables never
        block.
        """
        drain = getattr(self._on_delta, "drain", None)
        if drain is not None:
            await drain()

    def result(self, *, ended_by_marker: bool = False) -> DecodedStream:
        return DecodedStream(
            full_text=self.full_text,
            raw_frames=list(self.raw_frames),
            ended_by_marker=ended_by_marker,
        )


__all__ = ["DecodedStream", "DeltaSink", "StreamAccumulator"]
