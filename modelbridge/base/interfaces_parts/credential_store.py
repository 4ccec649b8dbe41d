"""CredentialStore Protocol (single-class module).

The connector only reads credentials; storing them is the host's concern.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class CredentialStore(Protocol):
    """Read-only lookup of provider credentials by storage key."""

    def get(self, key: str) -> Optional[str]:  # pragma: no cover - interface
        """Return the stored value for ``key`` or ``None`` when absent."""
        ...
