"""OpenAI-compatible provider base classes."""

from .base import BaseOpenAIStyleProvider, HostedOpenAIStyleProvider, LocalOpenAIStyleProvider

__all__ = ["BaseOpenAIStyleProvider", "HostedOpenAIStyleProvider", "LocalOpenAIStyleProvider"]
