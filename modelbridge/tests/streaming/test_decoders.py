"""Stream decoders: NDJSON, SSE-delta and SSE-typed-events.

Covers chunk-boundary independence, UTF-8 reassembly, the ``[DONE]`` marker,
malformed and off-schema frames, missing bodies and cancellation.
"""

from __future__ import annotations

import logging
from typing import List

import pytest

from modelbridge.base.cancellation import CancellationToken, StreamCancelledError
from modelbridge.base.errors import NoStreamingBodyError
from modelbridge.base.streaming.decoders import NdjsonDecoder, SseDeltaDecoder, SseEventDecoder
from modelbridge.tests.helpers import byte_stream, ndjson, openai_chunk, split_every, sse

NDJSON_BODY = ndjson(
    {"message": {"role": "assistant", "content": "Hel"}, "done": False},
    {"message": {"role": "assistant", "content": "lo, wörld"}, "done": False},
    {"done": True},
)
SSE_DELTA_BODY = sse(openai_chunk("He"), openai_chunk("llo "), openai_chunk("✓"), "[DONE]")
SSE_TYPED_BODY = (
    b"event: message_start\n"
    + sse({"type": "message_start", "message": {"id": "m1"}})
    + sse({"type": "content_block_start", "index": 0, "content_block": {"type": "text", "text": ""}})
    + sse({"type": "content_block_delta", "index": 0, "delta": {"type": "text_delta", "text": "Bon"}})
    + sse({"type": "content_block_delta", "index": 0, "delta": {"type": "text_delta", "text": "jour"}})
    + sse({"type": "message_stop"})
)

CASES = [
    (NdjsonDecoder, NDJSON_BODY, ["Hel", "lo, wörld"], 3),
    (SseDeltaDecoder, SSE_DELTA_BODY, ["He", "llo ", "✓"], 3),
    (SseEventDecoder, SSE_TYPED_BODY, ["Bon", "jour"], 5),
]


@pytest.mark.parametrize("decoder_cls,body,deltas,frames", CASES)
@pytest.mark.parametrize("size", [1, 2, 5, 13, 10_000])
async def test_output_is_independent_of_chunking(decoder_cls, body, deltas, frames, size):
    seen: List[str] = []
    result = await decoder_cls().decode(byte_stream(split_every(body, size)), seen.append)
    assert seen == deltas  # nosec B101
    assert result.full_text == "".join(deltas)  # nosec B101
    assert len(result.raw_frames) == frames  # nosec B101


async def test_done_marker_ends_stream_and_later_lines_are_ignored():
    body = sse(openai_chunk("a"), "[DONE]", openai_chunk("never"))
    seen: List[str] = []
    result = await SseDeltaDecoder().decode(byte_stream([body]), seen.append)
    assert seen == ["a"]  # nosec B101
    assert result.full_text == "a"  # nosec B101
    assert result.ended_by_marker is True  # nosec B101
    assert len(result.raw_frames) == 1  # nosec B101


async def test_malformed_line_is_logged_and_skipped(caplog):
    body = ndjson({"message": {"content": "x"}}) + b"{not json\n" + ndjson({"message": {"content": "y"}})
    with caplog.at_level(logging.WARNING, logger="modelbridge"):
        result = await NdjsonDecoder(provider="ollama").decode(byte_stream([body]))
    assert result.full_text == "xy"  # nosec B101
    assert len(result.raw_frames) == 2  # nosec B101
    assert any("stream.decode_error" in r.getMessage() for r in caplog.records)  # nosec B101


async def test_off_schema_frame_is_recorded_without_delta():
    body = sse({"choices": "not-a-list"}, [1, 2], openai_chunk("ok"), {"choices": []}, "[DONE]")
    result = await SseDeltaDecoder().decode(byte_stream([body]))
    assert result.full_text == "ok"  # nosec B101
    assert len(result.raw_frames) == 4  # nosec B101


async def test_missing_content_fields_yield_no_delta():
    body = sse({"choices": [{"delta": {}}]}, {"choices": [{"delta": {"content": None}}]}, "[DONE]")
    seen: List[str] = []
    result = await SseDeltaDecoder().decode(byte_stream([body]), seen.append)
    assert seen == []  # nosec B101
    assert result.full_text == ""  # nosec B101


async def test_unread_sibling_fields_do_not_hide_the_delta():
    ollama = await NdjsonDecoder().decode(
        byte_stream([ndjson({"message": {"content": "x", "role": 7}, "done": None, "eval_count": "n/a"})])
    )
    assert ollama.full_text == "x"  # nosec B101
    chunks = sse(
        {"choices": [{"delta": {"content": "y"}}, None]},
        {"choices": [{"delta": {"content": "z", "role": None}, "finish_reason": 3}, "junk"]},
        "[DONE]",
    )
    openai = await SseDeltaDecoder().decode(byte_stream([chunks]))
    assert openai.full_text == "yz"  # nosec B101
    typed = await SseEventDecoder().decode(
        byte_stream([sse({"type": "content_block_delta", "index": None, "delta": {"type": 1, "text": "w"}})])
    )
    assert typed.full_text == "w"  # nosec B101


@pytest.mark.parametrize(
    "frame",
    [
        {"choices": None},
        {"choices": [None]},
        {"choices": [{"delta": None}]},
        {"choices": [{"delta": {"content": 42}}]},
    ],
)
async def test_null_or_mistyped_read_path_yields_no_delta(frame):
    result = await SseDeltaDecoder().decode(byte_stream([sse(frame, openai_chunk("ok"), "[DONE]")]))
    assert result.full_text == "ok"  # nosec B101
    assert len(result.raw_frames) == 2  # nosec B101


class _SlowSink:
    """Sink tracking how many deltas were forwarded without an intervening drain."""

    def __init__(self) -> None:
        self.seen: List[str] = []
        self.pending = 0
        self.peak = 0

    def __call__(self, delta: str) -> None:
        self.seen.append(delta)
        self.pending += 1
        self.peak = max(self.peak, self.pending)

    async def drain(self) -> None:
        self.pending = 0


async def test_sink_is_drained_after_every_delta_within_one_chunk():
    body = sse(*[openai_chunk(str(i)) for i in range(20)], "[DONE]")
    sink = _SlowSink()
    result = await SseDeltaDecoder().decode(byte_stream([body]), sink)
    assert result.full_text == "".join(str(i) for i in range(20))  # nosec B101
    assert len(sink.seen) == 20 and sink.peak == 1  # nosec B101


async def test_non_data_sse_lines_are_ignored():
    body = b": keep-alive\nid: 7\nretry: 100\n" + sse(openai_chunk("z"))
    result = await SseDeltaDecoder().decode(byte_stream([body]))
    assert result.full_text == "z"  # nosec B101


async def test_unterminated_trailing_frame_is_discarded():
    body = ndjson({"message": {"content": "kept"}}) + b'{"message": {"content": "lost"}}'
    result = await NdjsonDecoder().decode(byte_stream([body]))
    assert result.full_text == "kept"  # nosec B101
    assert len(result.raw_frames) == 1  # nosec B101


async def test_typed_events_take_text_from_block_start():
    body = sse({"type": "content_block_start", "content_block": {"type": "text", "text": "Hi"}})
    result = await SseEventDecoder().decode(byte_stream([body]))
    assert result.full_text == "Hi"  # nosec B101


async def test_missing_body_raises_before_decoding():
    with pytest.raises(NoStreamingBodyError):
        await SseDeltaDecoder(provider="openai").decode(None)


async def test_cancellation_stops_forwarding_and_keeps_partial_text():
    token = CancellationToken()
    seen: List[str] = []

    def sink(delta: str) -> None:
        seen.append(delta)
        token.cancel("user stop")

    body = sse(openai_chunk("first"), openai_chunk("second"), "[DONE]")
    with pytest.raises(StreamCancelledError) as excinfo:
        await SseDeltaDecoder().decode(byte_stream([body]), sink, cancellation=token)
    assert seen == ["first"]  # nosec B101
    assert excinfo.value.partial_text == "first"  # nosec B101
    assert len(excinfo.value.raw_frames) == 2  # nosec B101


async def test_sink_errors_propagate():
    def sink(delta: str) -> None:
        raise RuntimeError("sink broke")

    with pytest.raises(RuntimeError, match="sink broke"):
        await NdjsonDecoder().decode(byte_stream([NDJSON_BODY]), sink)
