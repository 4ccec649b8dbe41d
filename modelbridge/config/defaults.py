"""modelbridge.config.defaults
===========================

Central place for small, stable default values used across the modelbridge
package. These defaults can be overridden via environment variables or the
external configuration file, but provide sensible fallbacks for local
development and tests.

Module Purpose
--------------
- Provide a single import location for conservative default constants (no I/O).
- Keep provider adapters free of magic literals (base URLs, header values,
  token ceilings, deadlines).

This module intentionally avoids importing from other modelbridge packages to
prevent circular dependencies. Only plain constants should live here.
"""

from __future__ import annotations

# ---- Local providers ----
# Ollama daemon; listing at /api/tags, chat at /api/chat (NDJSON streaming).
OLLAMA_DEFAULT_BASE_URL = "http://localhost:11434"
# LM Studio local server (OpenAI-compatible).
LMSTUDIO_DEFAULT_BASE_URL = "http://localhost:1234"
# llama.cpp ``llama-server`` (OpenAI-compatible).
LLAMACPP_DEFAULT_BASE_URL = "http://localhost:8080"

# ---- Hosted providers ----
OPENROUTER_DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"
GROQ_DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"
XAI_DEFAULT_BASE_URL = "https://api.x.ai/v1"
ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com"

# Anthropic protocol version header value and completion ceiling.
ANTHROPIC_API_VERSION = "2023-06-01"
ANTHROPIC_DEFAULT_MAX_TOKENS = 4096

# ---- Deadlines & queues ----
# Reachability probes (model listings) are abandoned after this many seconds.
DISCOVERY_TIMEOUT_SECONDS = 2.0
# Bounded queue between the decoding task and a ``stream_chat`` consumer.
STREAM_QUEUE_SIZE = 64


__all__ = [
    "OLLAMA_DEFAULT_BASE_URL",
    "LMSTUDIO_DEFAULT_BASE_URL",
    "LLAMACPP_DEFAULT_BASE_URL",
    "OPENROUTER_DEFAULT_BASE_URL",
    "OPENAI_DEFAULT_BASE_URL",
    "GROQ_DEFAULT_BASE_URL",
    "XAI_DEFAULT_BASE_URL",
    "ANTHROPIC_DEFAULT_BASE_URL",
    "ANTHROPIC_API_VERSION",
    "ANTHROPIC_DEFAULT_MAX_TOKENS",
    "DISCOVERY_TIMEOUT_SECONDS",
    "STREAM_QUEUE_SIZE",
]
