"""Groq provider package."""

from .client import GroqProvider

__all__ = ["GroqProvider"]
