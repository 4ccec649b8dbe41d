"""Anthropic provider adapter.

Purpose:
    Chat and streaming generation against the Anthropic Messages API
    (``POST /v1/messages``), plus model listing via ``GET /v1/models``.

Differences from the OpenAI-compatible families:
    - Auth uses ``x-api-key`` plus a fixed ``anthropic-version`` header
      instead of a Bearer token.
    - System messages travel in a top-level ``system`` field and
      ``max_tokens`` is mandatory (see ``helpers``).
    - Streaming events carry a ``type`` discriminator and are decoded by
      ``SseEventDecoder``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..base.http_provider import HttpChatProvider
from ..base.models import ChatModelRequest, ModelInfo
from ..base.registry import ProviderId
from ..base.schemas.anthropic import AnthropicMessage, AnthropicModelList
from ..base.streaming.decoders import SseEventDecoder
from ..config.defaults import ANTHROPIC_API_VERSION, ANTHROPIC_DEFAULT_BASE_URL
from .helpers import resolve_max_tokens, split_system


class AnthropicProvider(HttpChatProvider):
    provider_id = ProviderId.ANTHROPIC
    default_base_url = ANTHROPIC_DEFAULT_BASE_URL
    chat_path = "/v1/messages"
    models_path = "/v1/models"
    response_model = AnthropicMessage
    decoder_cls = SseEventDecoder

    @property
    def max_tokens(self) -> int:
        return resolve_max_tokens(self._config)

    def payload_for(self, request: ChatModelRequest) -> Dict[str, Any]:
        system, conversation = split_system(request.messages)
        payload: Dict[str, Any] = {
            "model": request.model,
            "messages": conversation,
            "max_tokens": self.max_tokens,
            "stream": bool(request.stream),
        }
        if system is not None:
            payload["system"] = system
        return payload

    def build_headers(self, api_key: Optional[str]) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "anthropic-version": ANTHROPIC_API_VERSION,
        }
        if api_key:
            headers["x-api-key"] = api_key
        return headers

    def parse_models(self, body: Any) -> List[ModelInfo]:
        listing = AnthropicModelList.model_validate(body)
        return [
            ModelInfo(id=m.id, label=m.display_name or m.id, provider=self.provider_name)
            for m in listing.data
        ]


__all__ = ["AnthropicProvider"]
