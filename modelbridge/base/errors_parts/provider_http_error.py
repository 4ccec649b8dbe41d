"""Error raised for non-2xx provider responses."""
from __future__ import annotations

from typing import Optional

from .classification import code_for_status
from .provider_error import ProviderError


class ProviderHttpError(ProviderError):
    """A provider answered with a non-success HTTP status.

    No retry is attempted by the connector.

    Attributes:
        status: The HTTP status code received.
        body: Short excerpt of the response body, when one could be read.
    """

    def __init__(
        self,
        provider: str,
        status: int,
        *,
        model: Optional[str] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(
            code=code_for_status(status),
            message=f"{provider} error {status}",
            provider=provider,
            model=model,
        )
        self.status = status
        self.body = body


__all__ = ["ProviderHttpError"]
