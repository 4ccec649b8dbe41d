"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``modelbridge.base.models_parts``.
"""

from .models_parts.message import ChatMessage, Role
from .models_parts.chat_request import ChatModelRequest
from .models_parts.chat_response import ChatModelResponse
from .models_parts.model_info import ModelInfo
from .models_parts.provider_status import ProviderStatus

__all__ = [
    "ChatMessage",
    "Role",
    "ChatModelRequest",
    "ChatModelResponse",
    "ModelInfo",
    "ProviderStatus",
]
