"""Read-only repositories used by the connector."""

from .keys import KeyResolution, KeysRepository, MappingCredentialStore, read_credential

__all__ = ["KeyResolution", "KeysRepository", "MappingCredentialStore", "read_credential"]
