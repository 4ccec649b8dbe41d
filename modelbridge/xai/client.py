"""xAI (Grok) provider adapter.

Purpose:
    Chat and streaming generation against xAI's OpenAI-compatible API
    (``https://api.x.ai/v1``). Registered under the ``grok`` provider id;
    the key is read from ``XAI_API_KEY`` (alias ``GROK_API_KEY``) by
    ``KeysRepository``.
"""

from __future__ import annotations

from ..base.openai_style_parts import HostedOpenAIStyleProvider
from ..base.registry import ProviderId
from ..config.defaults import XAI_DEFAULT_BASE_URL


class XAIProvider(HostedOpenAIStyleProvider):
    provider_id = ProviderId.GROK
    default_base_url = XAI_DEFAULT_BASE_URL


__all__ = ["XAIProvider"]
