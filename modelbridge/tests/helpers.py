"""Shared builders for fake provider traffic."""

from __future__ import annotations

import json
from typing import Any, AsyncIterator, Callable, Iterable, List, Sequence

import httpx


def split_every(data: bytes, size: int) -> List[bytes]:
    return [data[i : i + size] for i in range(0, len(data), size)] or [b""]


async def byte_stream(chunks: Iterable[bytes]) -> AsyncIterator[bytes]:
    for chunk in chunks:
        yield chunk


def sse(*payloads: Any) -> bytes:
    """Encode payloads as SSE ``data:`` events (strings are sent verbatim)."""
    out = []
    for payload in payloads:
        text = payload if isinstance(payload, str) else json.dumps(payload)
        out.append(f"data: {text}\n\n")
    return "".join(out).encode("utf-8")


def ndjson(*frames: Any) -> bytes:
    return "".join(json.dumps(f) + "\n" for f in frames).encode("utf-8")


def openai_chunk(text: str) -> dict:
    return {"choices": [{"delta": {"content": text}}]}


class RecordingTransport(httpx.MockTransport):
    """``MockTransport`` that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], Any]) -> None:
        self.requests: List[httpx.Request] = []

        async def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            result = handler(request)
            if not isinstance(result, httpx.Response):
                result = await result
            return result

        super().__init__(_record)


def streaming_response(chunks: Sequence[bytes], status: int = 200) -> httpx.Response:
    return httpx.Response(status, content=byte_stream(chunks))
