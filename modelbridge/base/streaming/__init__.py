"""Streaming primitives: line buffering, delta accumulation and decoders."""

from .accumulator import DecodedStream, DeltaSink, StreamAccumulator
from .decoders import NdjsonDecoder, SseDeltaDecoder, SseEventDecoder, StreamDecoder
from .line_buffer import LineBuffer
from .streaming import ChatStreamEvent, accumulate_events

__all__ = [
    "DecodedStream",
    "DeltaSink",
    "StreamAccumulator",
    "StreamDecoder",
    "NdjsonDecoder",
    "SseDeltaDecoder",
    "SseEventDecoder",
    "LineBuffer",
    "ChatStreamEvent",
    "accumulate_events",
]
