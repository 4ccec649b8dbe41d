"""llama.cpp provider adapter (``llama-server``, default port 8080)."""

from __future__ import annotations

from ..base.openai_style_parts import LocalOpenAIStyleProvider
from ..base.registry import ProviderId
from ..config.defaults import LLAMACPP_DEFAULT_BASE_URL


class LlamaCppProvider(LocalOpenAIStyleProvider):
    provider_id = ProviderId.LLAMACPP
    default_base_url = LLAMACPP_DEFAULT_BASE_URL


__all__ = ["LlamaCppProvider"]
