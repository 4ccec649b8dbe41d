"""One-Protocol-per-file interface definitions."""

from .chat_provider import ChatProvider
from .credential_store import CredentialStore
from .model_listing_provider import ModelListingProvider

__all__ = ["ChatProvider", "CredentialStore", "ModelListingProvider"]
