"""Connector entry points: chat dispatch, model discovery and status probing."""

from .connector import build_payload, send_to_model, stream_chat
from .discovery import discover_local_models, discover_models
from .prober import probe_all, probe_providers

__all__ = [
    "build_payload",
    "send_to_model",
    "stream_chat",
    "discover_local_models",
    "discover_models",
    "probe_all",
    "probe_providers",
]
