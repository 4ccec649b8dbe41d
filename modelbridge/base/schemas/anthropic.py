"""Anthropic Messages API wire shapes.

Streaming payloads carry an explicit ``type`` discriminator. Only
``content_block_start`` (initial block text) and ``content_block_delta``
(incremental text) contribute text; every other event type is recorded as a
raw frame but yields nothing.
"""
from __future__ import annotations

from typing import Annotated, List, Optional

from pydantic import BeforeValidator

from .fields import Lenient, OptionalText, object_or_none, objects_only


class AnthropicTextDelta(Lenient):
    type: OptionalText = None
    text: OptionalText = None


class AnthropicContentBlock(Lenient):
    type: OptionalText = None
    text: OptionalText = None


class AnthropicStreamEvent(Lenient):
    type: OptionalText = None
    delta: Annotated[Optional[AnthropicTextDelta], BeforeValidator(object_or_none)] = None
    content_block: Annotated[Optional[AnthropicContentBlock], BeforeValidator(object_or_none)] = None

    def text(self) -> str:
        if self.type == "content_block_delta" and self.delta is not None:
            return self.delta.text or ""
        if self.type == "content_block_start" and self.content_block is not None:
            return self.content_block.text or ""
        return ""


class AnthropicMessage(Lenient):
    """A non-streaming ``/v1/messages`` response; text blocks are joined."""

    content: Annotated[List[AnthropicContentBlock], BeforeValidator(objects_only)] = []

    def text(self) -> str:
        return "".join(block.text or "" for block in self.content if block.type in (None, "text"))


class AnthropicModel(Lenient):
    id: str
    display_name: OptionalText = None


class AnthropicModelList(Lenient):
    data: Annotated[List[AnthropicModel], BeforeValidator(objects_only)] = []


__all__ = [
    "AnthropicTextDelta",
    "AnthropicContentBlock",
    "AnthropicStreamEvent",
    "AnthropicMessage",
    "AnthropicModel",
    "AnthropicModelList",
]
