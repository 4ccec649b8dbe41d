"""Provider interfaces public surface.

Re-exports the Protocols under ``modelbridge.base.interfaces_parts``.
"""

from .interfaces_parts.chat_provider import ChatProvider
from .interfaces_parts.credential_store import CredentialStore
from .interfaces_parts.model_listing_provider import ModelListingProvider
from .streaming.accumulator import DeltaSink

__all__ = ["ChatProvider", "CredentialStore", "ModelListingProvider", "DeltaSink"]
