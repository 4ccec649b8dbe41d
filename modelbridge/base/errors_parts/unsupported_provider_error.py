"""Error raised for provider identifiers outside the registry."""
from __future__ import annotations

from .error_code import ErrorCode
from .provider_error import ProviderError


class UnsupportedProviderError(ProviderError):
    """The provider id is not one of the known set; never retried."""

    def __init__(self, provider: str) -> None:
        super().__init__(
            code=ErrorCode.UNSUPPORTED,
            message=f"Unsupported provider: {provider!r}",
            provider=str(provider),
        )


__all__ = ["UnsupportedProviderError"]
