"""
Connector Base Package

Exports provider-agnostic contracts, DTOs, repositories and the provider
factory used by the provider families and the service layer:

- Registry: static provider catalog
- Models (DTOs): request/response and listing records
- Streaming: line buffering, accumulation and the three wire decoders
- Repositories: credential resolution
- Factory: lazy creation of provider families by id
"""

from .cancellation import CancellationToken, CancelledError, StreamCancelledError
from .errors import (
    ErrorCode,
    MissingCredentialError,
    NoStreamingBodyError,
    ProviderError,
    ProviderHttpError,
    UnsupportedProviderError,
    classify_exception,
)
from .models import (
    ChatMessage,
    ChatModelRequest,
    ChatModelResponse,
    ModelInfo,
    ProviderStatus,
    Role,
)
from .registry import (
    LOCAL_PROVIDERS,
    ONLINE_PROVIDERS,
    PROVIDER_KEY_MAP,
    PROVIDERS,
    ProviderId,
    ProviderKind,
    ProviderMeta,
    resolve,
)
from .timeouts import TimeoutConfig, get_timeout_config, operation_timeout
from .streaming import (
    ChatStreamEvent,
    DecodedStream,
    LineBuffer,
    NdjsonDecoder,
    SseDeltaDecoder,
    SseEventDecoder,
    StreamAccumulator,
    StreamDecoder,
    accumulate_events,
)
from .interfaces import ChatProvider, CredentialStore, DeltaSink, ModelListingProvider
from .repositories.keys import KeyResolution, KeysRepository, MappingCredentialStore
from .http_provider import HttpChatProvider
from .factory import ProviderFactory, create_provider

__all__ = [
    "CancellationToken",
    "CancelledError",
    "StreamCancelledError",
    "ErrorCode",
    "MissingCredentialError",
    "NoStreamingBodyError",
    "ProviderError",
    "ProviderHttpError",
    "UnsupportedProviderError",
    "classify_exception",
    "ChatMessage",
    "ChatModelRequest",
    "ChatModelResponse",
    "ModelInfo",
    "ProviderStatus",
    "Role",
    "LOCAL_PROVIDERS",
    "ONLINE_PROVIDERS",
    "PROVIDER_KEY_MAP",
    "PROVIDERS",
    "ProviderId",
    "ProviderKind",
    "ProviderMeta",
    "resolve",
    "TimeoutConfig",
    "get_timeout_config",
    "operation_timeout",
    "ChatStreamEvent",
    "DecodedStream",
    "LineBuffer",
    "NdjsonDecoder",
    "SseDeltaDecoder",
    "SseEventDecoder",
    "StreamAccumulator",
    "StreamDecoder",
    "accumulate_events",
    "ChatProvider",
    "CredentialStore",
    "DeltaSink",
    "ModelListingProvider",
    "KeyResolution",
    "KeysRepository",
    "MappingCredentialStore",
    "HttpChatProvider",
    "ProviderFactory",
    "create_provider",
]
