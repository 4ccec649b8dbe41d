"""OpenAI-compatible provider bases.

Purpose:
- Provide reusable base classes for every family speaking the Chat
  Completions protocol: hosted (OpenRouter, OpenAI, Groq, xAI) and local
  servers (LM Studio, llama.cpp).

Wire protocol:
- Request body ``{model, messages: [{role, content}], stream}``.
- Streaming: SSE ``data:`` chunks terminated by ``data: [DONE]``; text at
  ``choices[0].delta.content`` (``SseDeltaDecoder``).
- Non-streaming: ``choices[0].message.content``.
- Listing: ``{"data": [{"id": ...}, ...]}``.

Auth:
- Hosted families send ``Authorization: Bearer <key>``; local servers send
  no credential.
"""

from __future__ import annotations

from typing import Any, List

from ..http_provider import HttpChatProvider
from ..models import ModelInfo
from ..schemas.openai_style import OpenAIChatCompletion, OpenAIModelList
from ..streaming.decoders import SseDeltaDecoder


class BaseOpenAIStyleProvider(HttpChatProvider):
    """Shared Chat Completions behaviour; subclasses set identity and paths."""

    response_model = OpenAIChatCompletion
    decoder_cls = SseDeltaDecoder

    def parse_models(self, body: Any) -> List[ModelInfo]:
        listing = OpenAIModelList.model_validate(body)
        return [
            ModelInfo(id=m.id, label=m.name or m.id, provider=self.provider_name)
            for m in listing.data
        ]


class HostedOpenAIStyleProvider(BaseOpenAIStyleProvider):
    """Hosted API whose base URL already ends in the version segment."""

    chat_path = "/chat/completions"
    models_path = "/models"


class LocalOpenAIStyleProvider(BaseOpenAIStyleProvider):
    """Local OpenAI-compatible server addressed by host and port only."""

    chat_path = "/v1/chat/completions"
    models_path = "/v1/models"


__all__ = [
    "BaseOpenAIStyleProvider",
    "HostedOpenAIStyleProvider",
    "LocalOpenAIStyleProvider",
]
