"""Incremental byte-to-line splitter used by every stream decoder.

Bytes are decoded with an incremental UTF-8 decoder so a multi-byte
character split across two network chunks is reassembled instead of being
replaced. Only complete lines (terminated by ``\\n``; a preceding ``\\r`` is
dropped) are handed out; the unterminated tail stays buffered until the next
chunk arrives.
"""
from __future__ import annotations

import codecs
from typing import List


class LineBuffer:
    """Per-stream text buffer. Never share an instance between streams."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._pending = ""

    @property
    def pending(self) -> str:
        """Text received after the last line terminator."""
        return self._pending

    def feed(self, chunk: bytes) -> List[str]:
        """Add ``chunk`` and return the lines it completed, in order."""
        self._pending += self._decoder.decode(chunk)
        if "\n" not in self._pending:
            return []
        *lines, self._pending = self._pending.split("\n")
        return [line[:-1] if line.endswith("\r") else line for line in lines]

    def close(self) -> str:
        """Flush the decoder and return (and clear) the unterminated remainder."""
        rest = self._pending + self._decoder.decode(b"", final=True)
        self._pending = ""
        return rest


__all__ = ["LineBuffer"]
