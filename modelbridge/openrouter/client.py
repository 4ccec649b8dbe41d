"""OpenRouter provider adapter.

Purpose:
    Route chat requests through OpenRouter's OpenAI-compatible API
    (``https://openrouter.ai/api/v1``).

Attribution headers:
    OpenRouter ranks apps by the optional ``HTTP-Referer`` and ``X-Title``
    headers. They are sent when ``http_referer`` / ``app_title`` are set in
    the provider config (``OPENROUTER_HTTP_REFERER``, ``OPENROUTER_APP_TITLE``
    or the config file) and omitted otherwise.

Listing:
    ``GET /models`` returns ``{"data": [{"id", "name", ...}]}``; the human
    ``name`` becomes the model label when present.
"""

from __future__ import annotations

from typing import Dict, Optional

from ..base.openai_style_parts import HostedOpenAIStyleProvider
from ..base.registry import ProviderId
from ..config.defaults import OPENROUTER_DEFAULT_BASE_URL


class OpenRouterProvider(HostedOpenAIStyleProvider):
    provider_id = ProviderId.OPENROUTER
    default_base_url = OPENROUTER_DEFAULT_BASE_URL

    def build_headers(self, api_key: Optional[str]) -> Dict[str, str]:
        headers = super().build_headers(api_key)
        referer = str(self._config.get("http_referer") or "").strip()
        title = str(self._config.get("app_title") or "").strip()
        if referer:
            headers["HTTP-Referer"] = referer
        if title:
            headers["X-Title"] = title
        return headers


__all__ = ["OpenRouterProvider"]
