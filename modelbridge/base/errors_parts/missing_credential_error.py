"""Error raised when a hosted provider is invoked without an API key."""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


class MissingCredentialError(ProviderError):
    """Raised before any network call when a required credential is absent.

    Attributes:
        credential_key: Credential-storage key the caller should populate
            (e.g., ``"openrouter_api_key"``).
    """

    def __init__(self, provider: str, credential_key: Optional[str] = None, *, model: Optional[str] = None) -> None:
        super().__init__(
            code=ErrorCode.AUTH,
            message=f"{provider} API key missing",
            provider=provider,
            model=model,
        )
        self.credential_key = credential_key


__all__ = ["MissingCredentialError"]
