"""OpenAI-compatible wire shapes (Chat Completions and ``/models``).

Shared by OpenRouter, OpenAI, Groq, xAI and the OpenAI-compatible local
servers (LM Studio, llama.cpp). Only the fields the connector reads are
declared. Text comes from ``choices[0]``; later choices are never validated,
and a missing, ``null`` or wrong-typed step on the way yields empty text.
"""
from __future__ import annotations

from typing import Annotated, List, Optional

from pydantic import BeforeValidator

from .fields import Lenient, OptionalText, first_text, leading_object, object_or_none, objects_only


class OpenAIDelta(Lenient):
    content: OptionalText = None


class OpenAIStreamChoice(Lenient):
    delta: Annotated[Optional[OpenAIDelta], BeforeValidator(object_or_none)] = None


class OpenAIStreamChunk(Lenient):
    """A ``data:`` payload of a streamed Chat Completion."""

    choices: Annotated[Optional[List[Optional[OpenAIStreamChoice]]], BeforeValidator(leading_object)] = None

    def text(self) -> str:
        return first_text(self.choices, "delta")


class OpenAIMessage(Lenient):
    content: OptionalText = None


class OpenAIChoice(Lenient):
    message: Annotated[Optional[OpenAIMessage], BeforeValidator(object_or_none)] = None


class OpenAIChatCompletion(Lenient):
    """A non-streaming Chat Completion document."""

    choices: Annotated[Optional[List[Optional[OpenAIChoice]]], BeforeValidator(leading_object)] = None

    def text(self) -> str:
        return first_text(self.choices, "message")


class OpenAIModel(Lenient):
    id: str
    name: OptionalText = None


class OpenAIModelList(Lenient):
    data: Annotated[List[OpenAIModel], BeforeValidator(objects_only)] = []


__all__ = [
    "OpenAIDelta",
    "OpenAIStreamChoice",
    "OpenAIStreamChunk",
    "OpenAIMessage",
    "OpenAIChoice",
    "OpenAIChatCompletion",
    "OpenAIModel",
    "OpenAIModelList",
]
