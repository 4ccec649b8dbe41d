"""LineBuffer: incremental UTF-8 decoding and partial-line retention."""

from __future__ import annotations

from modelbridge.base.streaming.line_buffer import LineBuffer


def test_partial_line_is_held_until_terminated():
    buf = LineBuffer()
    assert buf.feed(b'{"a": ') == []  # nosec B101
    assert buf.pending == '{"a": '  # nosec B101
    assert buf.feed(b'1}\n{"b"') == ['{"a": 1}']  # nosec B101
    assert buf.pending == '{"b"'  # nosec B101


def test_crlf_terminators_are_stripped():
    buf = LineBuffer()
    assert buf.feed(b"data: x\r\n\r\ndata: y\r\n") == ["data: x", "", "data: y"]  # nosec B101


def test_multibyte_character_split_across_chunks():
    encoded = "héllo ✓\n".encode("utf-8")
    buf = LineBuffer()
    lines = []
    for i in range(len(encoded)):
        lines.extend(buf.feed(encoded[i : i + 1]))
    assert lines == ["héllo ✓"]  # nosec B101


def test_close_returns_unterminated_remainder():
    buf = LineBuffer()
    buf.feed(b"complete\npartial")
    assert buf.close() == "partial"  # nosec B101
    assert buf.pending == ""  # nosec B101
