"""OpenAI provider adapter.

Thin subclass of ``HostedOpenAIStyleProvider``: Bearer auth against
``https://api.openai.com/v1`` (override with ``OPENAI_BASE_URL``).
"""

from __future__ import annotations

from ..base.openai_style_parts import HostedOpenAIStyleProvider
from ..base.registry import ProviderId
from ..config.defaults import OPENAI_DEFAULT_BASE_URL


class OpenAIProvider(HostedOpenAIStyleProvider):
    provider_id = ProviderId.OPENAI
    default_base_url = OPENAI_DEFAULT_BASE_URL


__all__ = ["OpenAIProvider"]
