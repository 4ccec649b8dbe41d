"""Incremental decoders for the three streaming wire formats.

Every provider streams one of:

``NdjsonDecoder``
    One JSON object per line; text lives at ``message.content`` (Ollama).
``SseDeltaDecoder``
    Server-Sent Events whose ``data:`` payloads are OpenAI-style Chat
    Completion chunks; text lives at ``choices[0].delta.content`` and the
    literal payload ``[DONE]`` ends the stream.
``SseEventDecoder``
    Server-Sent Events whose payloads carry a ``type`` discriminator
    (Anthropic); text comes from ``content_block_delta`` and
    ``content_block_start`` payloads.

The three share one loop (``StreamDecoder.decode``): bytes go through a
:class:`LineBuffer`, each complete line is reduced to a JSON payload, parsed,
recorded as a raw frame and reduced to a text delta which is forwarded
through a :class:`StreamAccumulator` before the next line is looked at; a
sink with an async ``drain()`` is awaited after every delta, so a slow
consumer holds the decoder back even inside one large chunk. The
result is independent of how the body was split into chunks.

Failure handling
----------------
- A line whose payload is not valid JSON is skipped with a
  ``stream.decode_error`` warning; decoding continues.
- A payload that is valid JSON but does not fit the frame schema is kept as
  a raw frame and contributes no text.
- Text still buffered without a terminating newline when the body ends is
  discarded.
- A cancelled token is checked before every chunk and before every delta is
  forwarded; the decoder then raises ``StreamCancelledError`` carrying the
  text forwarded so far.
"""
from __future__ import annotations

import json
import logging
from typing import Any, AsyncIterable, ClassVar, Optional, Type

from pydantic import BaseModel, ValidationError

from ..cancellation import CancellationToken, CancelledError, StreamCancelledError
from ..errors import NoStreamingBodyError
from ..logging import LogContext, get_logger, log_event
from ..schemas.anthropic import AnthropicStreamEvent
from ..schemas.ollama import OllamaChatFrame
from ..schemas.openai_style import OpenAIStreamChunk
from .accumulator import DecodedStream, DeltaSink, StreamAccumulator
from .line_buffer import LineBuffer

_EXCERPT_CHARS = 200


class StreamDecoder:
    """Shared decode loop; subclasses define payload and delta extraction."""

    format_name: ClassVar[str] = "base"
    frame_model: ClassVar[Type[BaseModel]]
    end_marker: ClassVar[Optional[str]] = None

    def __init__(
        self,
        *,
        provider: str = "unknown",
        model: Optional[str] = None,
        request_id: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.provider = provider
        self.model = model
        self.request_id = request_id
        self._logger = logger or get_logger("streaming")

    # ------------------------------------------------------------ extension
    def payload_of(self, line: str) -> Optional[str]:
        """Return the JSON text carried by ``line`` or ``None`` to skip it."""
        raise NotImplementedError

    def delta_of(self, frame: Any) -> str:
        """Return the text contributed by a parsed frame (``""`` for none)."""
        try:
            return self.frame_model.model_validate(frame).text()
        except ValidationError:
            log_event(
                self._logger,
                "stream.frame_unrecognized",
                self._ctx(),
                level=logging.DEBUG,
                format=self.format_name,
            )
            return ""

    # ----------------------------------------------------------------- loop
    async def decode(
        self,
        byte_stream: Optional[AsyncIterable[bytes]],
        on_delta: Optional[DeltaSink] = None,
        *,
        cancellation: Optional[CancellationToken] = None,
        accumulator: Optional[StreamAccumulator] = None,
    ) -> DecodedStream:
        """Decode ``byte_stream`` to completion.

        Args:
            byte_stream: Async iterable of raw body chunks; ``None`` means the
                response carried no body.
            on_delta: Called synchronously with every non-empty delta, in
                arrival order.
            cancellation: Optional token checked between chunks and deltas.
            accumulator: Optional caller-owned accumulator (fresh per call,
                already bound to its sink; ``on_delta`` is then unused)
                letting the caller read partial output if the surrounding task
                is cancelled.

        Raises:
            NoStreamingBodyError: ``byte_stream`` is ``None``.
            StreamCancelledError: ``cancellation`` fired mid-stream.
        """
        if byte_stream is None:
            raise NoStreamingBodyError(self.provider, model=self.model)
        acc = accumulator if accumulator is not None else StreamAccumulator(on_delta)
        buffer = LineBuffer()
        try:
            async for chunk in byte_stream:
                _check(cancellation)
                for line in buffer.feed(chunk):
                    if await self._process_line(line, acc, cancellation):
                        return acc.result(ended_by_marker=True)
        except CancelledError as exc:
            raise StreamCancelledError(
                str(exc),
                partial_text=acc.full_text,
                raw_frames=acc.raw_frames,
                request_id=self.request_id,
            ) from exc
        leftover = buffer.close()
        if leftover.strip():
            log_event(
                self._logger,
                "stream.trailing_discarded",
                self._ctx(),
                level=logging.DEBUG,
                chars=len(leftover),
            )
        return acc.result()

    async def _process_line(
        self,
        line: str,
        acc: StreamAccumulator,
        cancellation: Optional[CancellationToken],
    ) -> bool:
        """Handle one complete line; return True when the stream has ended."""
        payload = self.payload_of(line)
        if payload is None:
            return False
        if self.end_marker is not None and payload == self.end_marker:
            return True
        try:
            frame = json.loads(payload)
        except json.JSONDecodeError as exc:
            log_event(
                self._logger,
                "stream.decode_error",
                self._ctx(),
                level=logging.WARNING,
                format=self.format_name,
                error=str(exc),
                line=payload[:_EXCERPT_CHARS],
            )
            return False
        acc.add_frame(frame)
        delta = self.delta_of(frame)
        if delta:
            _check(cancellation)
            acc.add_delta(delta)
            await acc.drain()
        return False

    def _ctx(self) -> LogContext:
        return LogContext(provider=self.provider, model=self.model, request_id=self.request_id)


def _check(cancellation: Optional[CancellationToken]) -> None:
    if cancellation is not None:
        cancellation.raise_if_cancelled()


class NdjsonDecoder(StreamDecoder):
    """Newline-delimited JSON; every non-blank line is one frame."""

    format_name = "ndjson"
    frame_model = OllamaChatFrame

    def payload_of(self, line: str) -> Optional[str]:
        text = line.strip()
        return text or None


class _SseDecoder(StreamDecoder):
    """Common ``data:`` handling; comments, ``event:`` and ``id:`` lines are ignored."""

    def payload_of(self, line: str) -> Optional[str]:
        text = line.strip()
        if not text.startswith("data:"):
            return None
        payload = text[len("data:"):].strip()
        return payload or None


class SseDeltaDecoder(_SseDecoder):
    """OpenAI-style chunks terminated by ``data: [DONE]``."""

    format_name = "sse-delta"
    frame_model = OpenAIStreamChunk
    end_marker = "[DONE]"


class SseEventDecoder(_SseDecoder):
    """Typed events (``content_block_delta`` and friends)."""

    format_name = "sse-typed"
    frame_model = AnthropicStreamEvent


__all__ = [
    "StreamDecoder",
    "NdjsonDecoder",
    "SseDeltaDecoder",
    "SseEventDecoder",
    "DecodedStream",
]
