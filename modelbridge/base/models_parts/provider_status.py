"""
ProviderStatus enumeration.

A derived, point-in-time judgement recomputed on demand; it is not a
guarantee that the next real call will succeed.
"""
from __future__ import annotations

from enum import Enum


class ProviderStatus(str, Enum):
    """Availability of a provider as seen by the capability prober."""

    CONNECTED = "connected"
    NO_CREDENTIAL = "no-credential"
    UNREACHABLE = "unreachable"


__all__ = ["ProviderStatus"]
