"""Groq provider adapter.

Groq serves an OpenAI-compatible API under ``/openai/v1``.
"""

from __future__ import annotations

from ..base.openai_style_parts import HostedOpenAIStyleProvider
from ..base.registry import ProviderId
from ..config.defaults import GROQ_DEFAULT_BASE_URL


class GroqProvider(HostedOpenAIStyleProvider):
    provider_id = ProviderId.GROQ
    default_base_url = GROQ_DEFAULT_BASE_URL


__all__ = ["GroqProvider"]
