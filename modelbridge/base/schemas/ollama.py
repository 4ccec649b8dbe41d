"""Ollama wire shapes (``/api/chat`` frames and ``/api/tags`` listing).

Only ``message.content`` is read from a chat frame; ``done``, timing and
token counters are ignored whatever their values. A frame without text (the
final ``done`` frame) yields empty text.
"""
from __future__ import annotations

from typing import Annotated, List, Optional

from pydantic import BeforeValidator

from .fields import Lenient, OptionalText, object_or_none, objects_only


class OllamaMessage(Lenient):
    role: OptionalText = None
    content: OptionalText = None


class OllamaChatFrame(Lenient):
    """One NDJSON streaming frame, or the whole non-streaming response."""

    message: Annotated[Optional[OllamaMessage], BeforeValidator(object_or_none)] = None

    def text(self) -> str:
        if self.message is None or self.message.content is None:
            return ""
        return self.message.content


class OllamaTag(Lenient):
    name: str


class OllamaTagList(Lenient):
    models: Annotated[List[OllamaTag], BeforeValidator(objects_only)] = []


__all__ = ["OllamaMessage", "OllamaChatFrame", "OllamaTag", "OllamaTagList"]
