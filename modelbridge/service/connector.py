"""Public entry points for chat generation.

Purpose
-------
``send_to_model`` is the single call the host application makes to run a
chat completion against any provider: it resolves the provider family
through ``ProviderFactory`` and delegates to its ``send``.

``stream_chat`` wraps the same call for hosts that forward updates over a
channel (IPC, websocket): it yields ``ChatStreamEvent`` objects from a
bounded ``asyncio.Queue`` and always ends with exactly one terminal event.

Fallback semantics
------------------
- ``send_to_model`` raises; nothing is swallowed.
- ``stream_chat`` never raises for a failed call. The failure becomes the
  terminal event (``finish=True`` with ``error`` and ``error_code``), which
  carries the text produced so far in ``content``.

Timeout strategy
----------------
- Generation has no deadline. Stop a call with a ``CancellationToken`` or
  by cancelling the awaiting task.
"""

from __future__ import annotations

import asyncio
import contextlib
import dataclasses
import logging
from collections import deque
from typing import Any, AsyncIterator, Deque, Dict, List, Optional

import httpx

from ..base.cancellation import CancellationToken, StreamCancelledError
from ..base.errors import ErrorCode, ProviderError, classify_exception
from ..base.factory import ProviderFactory
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import ChatModelRequest, ChatModelResponse
from ..base.registry import ProviderId
from ..base.streaming import ChatStreamEvent, DeltaSink
from ..base.timeouts import get_timeout_config

_logger = get_logger("connector")


def _provider_label(provider: Any) -> str:
    return provider.value if isinstance(provider, ProviderId) else str(provider)


async def send_to_model(
    request: ChatModelRequest,
    *,
    on_delta: Optional[DeltaSink] = None,
    cancellation: Optional[CancellationToken] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    base_url: Optional[str] = None,
) -> ChatModelResponse:
    """Run one chat completion and return its aggregated response.

    Parameters
    ----------
    request:
        Provider-agnostic request; ``request.provider`` selects the family.
    on_delta:
        Receives each non-empty text delta, in order, when
        ``request.stream`` is set.
    cancellation:
        Optional token; cancelling it aborts the exchange and raises
        ``StreamCancelledError`` with the partial text.
    transport, base_url:
        Forwarded to the family constructor (tests, custom endpoints).

    Raises
    ------
    UnsupportedProviderError, MissingCredentialError, ProviderHttpError,
    NoStreamingBodyError, StreamCancelledError, ProviderError
    """
    provider = ProviderFactory.create(request.provider, base_url=base_url, transport=transport)
    return await provider.send(request, on_delta, cancellation=cancellation)


def build_payload(request: ChatModelRequest) -> Dict[str, Any]:
    """Return the wire payload ``send_to_model`` would post for ``request``.

    Raises ``UnsupportedProviderError`` for an unknown provider and
    ``MissingCredentialError`` when a hosted provider has no key.
    """
    return ProviderFactory.create(request.provider).build_payload(request)


class _QueueSink:
    """Delta sink feeding a bounded queue.

    ``__call__`` must not block (the decoder calls it synchronously), so
    deltas that do not fit are parked in order and flushed by ``drain``,
    which the decoder awaits after every delta.
    """

    def __init__(self, queue: "asyncio.Queue[ChatStreamEvent]", request: ChatModelRequest) -> None:
        self._queue = queue
        self._request = request
        self._parked: Deque[ChatStreamEvent] = deque()
        self._parts: List[str] = []

    @property
    def content(self) -> str:
        return "".join(self._parts)

    def __call__(self, delta: str) -> None:
        self._parts.append(delta)
        event = ChatStreamEvent(
            request_id=self._request.request_id,
            provider=_provider_label(self._request.provider),
            model=self._request.model,
            delta=delta,
            content=self.content,
        )
        if self._parked or self._queue.full():
            self._parked.append(event)
        else:
            self._queue.put_nowait(event)

    async def drain(self) -> None:
        while self._parked:
            await self._queue.put(self._parked.popleft())


async def stream_chat(
    request: ChatModelRequest,
    *,
    cancellation: Optional[CancellationToken] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    base_url: Optional[str] = None,
    queue_size: Optional[int] = None,
) -> AsyncIterator[ChatStreamEvent]:
    """Yield delta events followed by one terminal event.

    The request is always sent in streaming mode. The queue between the
    decoding task and the consumer holds at most ``queue_size`` events
    (``MODELBRIDGE_STREAM_QUEUE_SIZE``, default 64); a slow consumer
    therefore slows the decoder down. Leaving the loop early cancels the
    underlying call.
    """
    streaming_request = dataclasses.replace(request, stream=True)
    size = queue_size or get_timeout_config().stream_queue_size
    queue: "asyncio.Queue[ChatStreamEvent]" = asyncio.Queue(maxsize=size)
    sink = _QueueSink(queue, streaming_request)

    async def _produce() -> None:
        final = await _run_to_terminal(streaming_request, sink, cancellation, transport, base_url)
        await sink.drain()
        await queue.put(final)

    task = asyncio.create_task(_produce())
    try:
        while True:
            event = await queue.get()
            yield event
            if event.finish:
                break
    finally:
        if not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task


async def _run_to_terminal(
    request: ChatModelRequest,
    sink: _QueueSink,
    cancellation: Optional[CancellationToken],
    transport: Optional[httpx.AsyncBaseTransport],
    base_url: Optional[str],
) -> ChatStreamEvent:
    terminal = dict(
        request_id=request.request_id,
        provider=_provider_label(request.provider),
        model=request.model,
        finish=True,
    )
    try:
        response = await send_to_model(
            request,
            on_delta=sink,
            cancellation=cancellation,
            transport=transport,
            base_url=base_url,
        )
    except StreamCancelledError as exc:
        return ChatStreamEvent(
            **terminal,
            content=exc.partial_text,
            error=str(exc),
            error_code=ErrorCode.CANCELLED.value,
        )
    except ProviderError as exc:
        return ChatStreamEvent(**terminal, content=sink.content, error=str(exc), error_code=exc.code.value)
    except Exception as exc:  # terminal event is the only failure channel here
        code = classify_exception(exc)
        log_event(
            _logger,
            "chat.error",
            LogContext.for_request(_provider_label(request.provider), request),
            level=logging.ERROR,
            error_code=code.value,
            error=f"{type(exc).__name__}: {exc}",
        )
        return ChatStreamEvent(**terminal, content=sink.content, error=str(exc) or type(exc).__name__, error_code=code.value)
    return ChatStreamEvent(**terminal, content=response.content, response=response)


__all__ = ["send_to_model", "build_payload", "stream_chat"]
