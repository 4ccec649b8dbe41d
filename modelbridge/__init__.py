"""modelbridge package

Multi-provider model connector and streaming-response normalization layer.

Purpose:
    Dispatch chat completions to local (Ollama, LM Studio, llama.cpp) and
    hosted (OpenRouter, OpenAI, Anthropic, Groq, xAI) providers, normalize
    their streaming formats into one ordered delta stream, and report
    provider availability.

Public API (re-exported):
    - Version: ``__version__``
    - Calls: :func:`send_to_model`, :func:`stream_chat`, :func:`build_payload`
    - Discovery: :func:`discover_local_models`, :func:`discover_models`,
      :func:`probe_all`, :func:`probe_providers`
    - DTOs: :class:`ChatMessage`, :class:`ChatModelRequest`,
      :class:`ChatModelResponse`, :class:`ModelInfo`, :class:`ProviderStatus`
    - Errors: :class:`ProviderError` and its subclasses, :class:`ErrorCode`
    - Cancellation: :class:`CancellationToken`, :class:`StreamCancelledError`
"""

from .base.cancellation import CancellationToken, CancelledError, StreamCancelledError
from .base.errors import (
    ErrorCode,
    MissingCredentialError,
    NoStreamingBodyError,
    ProviderError,
    ProviderHttpError,
    UnsupportedProviderError,
)
from .base.logging import configure_logger, get_logger
from .base.models import ChatMessage, ChatModelRequest, ChatModelResponse, ModelInfo, ProviderStatus
from .base.registry import PROVIDERS, ProviderId, ProviderKind, ProviderMeta, resolve
from .base.repositories.keys import KeysRepository, MappingCredentialStore
from .base.streaming import ChatStreamEvent
from .service import (
    build_payload,
    discover_local_models,
    discover_models,
    probe_all,
    probe_providers,
    send_to_model,
    stream_chat,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CancellationToken",
    "CancelledError",
    "StreamCancelledError",
    "ErrorCode",
    "MissingCredentialError",
    "NoStreamingBodyError",
    "ProviderError",
    "ProviderHttpError",
    "UnsupportedProviderError",
    "configure_logger",
    "get_logger",
    "ChatMessage",
    "ChatModelRequest",
    "ChatModelResponse",
    "ModelInfo",
    "ProviderStatus",
    "PROVIDERS",
    "ProviderId",
    "ProviderKind",
    "ProviderMeta",
    "resolve",
    "KeysRepository",
    "MappingCredentialStore",
    "ChatStreamEvent",
    "build_payload",
    "discover_local_models",
    "discover_models",
    "probe_all",
    "probe_providers",
    "send_to_model",
    "stream_chat",
]
