"""llama.cpp provider package."""

from .client import LlamaCppProvider

__all__ = ["LlamaCppProvider"]
