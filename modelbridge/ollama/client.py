"""Ollama provider adapter.

Purpose:
        Chat and streaming generation against the local Ollama HTTP API
        (default ``http://localhost:11434``), plus model listing through
        ``/api/tags``.

External dependencies:
        - HTTP client only (``httpx``). No API key is required since Ollama
            is a local daemon.

Wire protocol:
        - ``POST /api/chat`` with ``{model, messages, stream}``.
        - Streaming bodies are NDJSON; each frame carries ``message.content``
            and the last one sets ``done: true``.
        - ``GET /api/tags`` returns ``{"models": [{"name": ...}, ...]}``.
"""

from __future__ import annotations

from typing import Any, List

from ..base.http_provider import HttpChatProvider
from ..base.models import ModelInfo
from ..base.registry import ProviderId
from ..base.schemas.ollama import OllamaChatFrame, OllamaTagList
from ..base.streaming.decoders import NdjsonDecoder
from ..config.defaults import OLLAMA_DEFAULT_BASE_URL


class OllamaProvider(HttpChatProvider):
    provider_id = ProviderId.OLLAMA
    default_base_url = OLLAMA_DEFAULT_BASE_URL
    chat_path = "/api/chat"
    models_path = "/api/tags"
    response_model = OllamaChatFrame
    decoder_cls = NdjsonDecoder

    def parse_models(self, body: Any) -> List[ModelInfo]:
        tags = OllamaTagList.model_validate(body)
        return [ModelInfo(id=t.name, label=t.name, provider=self.provider_name) for t in tags.models]


__all__ = ["OllamaProvider"]
