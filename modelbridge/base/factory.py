"""Provider Factory utilities.

Purpose
-------
Centralize creation of provider family instances from a ``ProviderId``.
Adapters are imported lazily using ``importlib`` so importing the connector
does not pull in every family module.

Timeout and fallback semantics
------------------------------
- No timeouts are introduced here. The factory performs no retries or
  fallbacks; it either returns an instance or raises a clear error.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Tuple, Type, Union

from .errors import ErrorCode, ProviderError
from .http_provider import HttpChatProvider
from .registry import ProviderId, coerce_provider_id


class ProviderFactory:
    """Create provider families based on their id (e.g., ``"openrouter"``).

    Design notes
    ------------
    - Uses ``importlib.import_module`` for explicit import semantics.
    - Unknown ids raise ``UnsupportedProviderError`` (through the registry);
      import or constructor failures raise ``ProviderError`` with code
      ``internal``.
    """

    # Map provider ids to import paths and class names
    _PROVIDERS: Dict[ProviderId, Dict[str, str]] = {
        ProviderId.OLLAMA: {"module": "modelbridge.ollama.client", "class": "OllamaProvider"},
        ProviderId.LMSTUDIO: {"module": "modelbridge.lmstudio.client", "class": "LMStudioProvider"},
        ProviderId.LLAMACPP: {"module": "modelbridge.llamacpp.client", "class": "LlamaCppProvider"},
        ProviderId.OPENROUTER: {"module": "modelbridge.openrouter.client", "class": "OpenRouterProvider"},
        ProviderId.OPENAI: {"module": "modelbridge.openai.client", "class": "OpenAIProvider"},
        ProviderId.ANTHROPIC: {"module": "modelbridge.anthropic.client", "class": "AnthropicProvider"},
        ProviderId.GROQ: {"module": "modelbridge.groq.client", "class": "GroqProvider"},
        ProviderId.GROK: {"module": "modelbridge.xai.client", "class": "XAIProvider"},
    }

    @classmethod
    def create(cls, provider: Union[ProviderId, str], **kwargs: Any) -> HttpChatProvider:
        """Create a provider family instance.

        Parameters
        ----------
        provider:
            ``ProviderId`` or its string value.
        **kwargs:
            Constructor kwargs (``base_url``, ``transport``, ``config_overrides``).

        Raises
        ------
        UnsupportedProviderError
            ``provider`` is not a known id.
        ProviderError
            The family module failed to import or its constructor raised.
        """
        pid = coerce_provider_id(provider)
        spec = cls._PROVIDERS[pid]
        module_path, class_name = spec["module"], spec["class"]

        try:
            klass: Type[HttpChatProvider] = getattr(import_module(module_path), class_name)
        except (ImportError, AttributeError) as exc:
            raise ProviderError(
                code=ErrorCode.INTERNAL,
                message=f"Failed to load adapter '{module_path}.{class_name}': {exc}",
                provider=pid.value,
            ) from exc

        try:
            return klass(**kwargs)
        except TypeError as exc:
            raise ProviderError(
                code=ErrorCode.INTERNAL,
                message=f"Invalid arguments for '{pid.value}' adapter constructor: {exc}",
                provider=pid.value,
            ) from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the supported provider ids in registry order."""
        return tuple(pid.value for pid in cls._PROVIDERS)


def create_provider(provider: Union[ProviderId, str], **kwargs: Any) -> HttpChatProvider:
    """Shortcut for :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider, **kwargs)


__all__ = ["ProviderFactory", "create_provider"]
