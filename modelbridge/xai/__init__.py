"""xAI (Grok) provider package."""

from .client import XAIProvider

__all__ = ["XAIProvider"]
