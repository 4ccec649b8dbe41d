"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `modelbridge.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .classification import classify_exception, code_for_status, is_connection_refused
from .unsupported_provider_error import UnsupportedProviderError
from .missing_credential_error import MissingCredentialError
from .provider_http_error import ProviderHttpError
from .no_streaming_body_error import NoStreamingBodyError

__all__ = [
    "ErrorCode",
    "ProviderError",
    "classify_exception",
    "code_for_status",
    "is_connection_refused",
    "UnsupportedProviderError",
    "MissingCredentialError",
    "ProviderHttpError",
    "NoStreamingBodyError",
]
