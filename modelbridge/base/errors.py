"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``modelbridge.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.classification import classify_exception, code_for_status, is_connection_refused
from .errors_parts.unsupported_provider_error import UnsupportedProviderError
from .errors_parts.missing_credential_error import MissingCredentialError
from .errors_parts.provider_http_error import ProviderHttpError
from .errors_parts.no_streaming_body_error import NoStreamingBodyError

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
