"""LM Studio provider adapter.

LM Studio's local server (default ``http://localhost:1234``) exposes the
OpenAI Chat Completions protocol under ``/v1``; no credential is sent.
"""

from __future__ import annotations

from ..base.openai_style_parts import LocalOpenAIStyleProvider
from ..base.registry import ProviderId
from ..config.defaults import LMSTUDIO_DEFAULT_BASE_URL


class LMStudioProvider(LocalOpenAIStyleProvider):
    provider_id = ProviderId.LMSTUDIO
    default_base_url = LMSTUDIO_DEFAULT_BASE_URL


__all__ = ["LMStudioProvider"]
