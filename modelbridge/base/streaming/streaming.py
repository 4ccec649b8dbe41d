"""Streaming event primitives for the connector.

Keeps streaming concerns separate from the request/response DTOs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..models import ChatModelResponse


@dataclass
class ChatStreamEvent:
    """One incremental update from :func:`modelbridge.service.connector.stream_chat`.

    Fields:
      request_id: correlation id of the originating request
      provider: provider id
      model: model id
      delta: textual delta (``None`` on terminal events)
      content: accumulated text so far (the partial text on cancellation)
      finish: True on the single terminal event
      error: error message when the call failed or was cancelled
      error_code: ``ErrorCode`` value (or ``"cancelled"``) for failures
      response: the final ``ChatModelResponse`` on successful completion
    """

    request_id: Optional[str]
    provider: str
    model: str
    delta: Optional[str] = None
    content: str = ""
    finish: bool = False
    error: Optional[str] = None
    error_code: Optional[str] = None
    response: Optional[ChatModelResponse] = None

    def is_error(self) -> bool:
        return self.error is not None


def accumulate_events(events: Iterable[ChatStreamEvent]) -> ChatModelResponse:
    """Fold a sequence of events into a ``ChatModelResponse``.

    - Concatenates text deltas.
    - A terminal event carrying a response wins (its content is authoritative).
    - An error event yields the partial content accumulated before it, with
      the error recorded in ``raw``.
    """
    events_list: List[ChatStreamEvent] = list(events)
    if not events_list:
        return ChatModelResponse(content="")

    request_id = events_list[0].request_id
    terminal = next((e for e in events_list if e.finish), None)
    if terminal is not None and terminal.response is not None:
        return terminal.response

    full_text = "".join(e.delta for e in events_list if e.delta)
    if error_event := next((e for e in events_list if e.error), None):
        return ChatModelResponse(
            content=full_text,
            raw={"stream_error": error_event.error, "error_code": error_event.error_code},
            request_id=request_id,
        )
    return ChatModelResponse(content=full_text, request_id=request_id)


__all__ = [
    "ChatStreamEvent",
    "accumulate_events",
]
