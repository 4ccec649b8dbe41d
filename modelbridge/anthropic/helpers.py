"""Anthropic helpers module.

Purpose:
- Side-effect-free utilities that map a provider-agnostic message list onto
  the Messages API shape, keeping ``client.py`` lean.

Rules:
- System turns are lifted out of the conversation and joined with a blank
  line into the top-level ``system`` field.
- The Messages API only accepts ``user`` and ``assistant`` roles; any other
  role is sent as ``user``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..base.models import ChatMessage
from ..config.defaults import ANTHROPIC_DEFAULT_MAX_TOKENS

_ALLOWED_ROLES = ("user", "assistant")


def coerce_role(role: str) -> str:
    return role if role in _ALLOWED_ROLES else "user"


def split_system(messages: Iterable[ChatMessage]) -> Tuple[Optional[str], List[Dict[str, str]]]:
    """Return ``(system_text, conversation)``.

    ``system_text`` is ``None`` when no system message is present, so the
    caller can omit the field entirely.
    """
    system_parts: List[str] = []
    conversation: List[Dict[str, str]] = []
    for message in messages:
        if message.role == "system":
            system_parts.append(message.content)
        else:
            conversation.append({"role": coerce_role(message.role), "content": message.content})
    return ("\n\n".join(system_parts) if system_parts else None), conversation


def resolve_max_tokens(config: Dict[str, Any]) -> int:
    """Return the configured completion ceiling, falling back to the default.

    Non-numeric or non-positive overrides (e.g. a malformed
    ``ANTHROPIC_MAX_TOKENS``) are ignored.
    """
    raw = config.get("max_tokens")
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return ANTHROPIC_DEFAULT_MAX_TOKENS
    return value if value > 0 else ANTHROPIC_DEFAULT_MAX_TOKENS


__all__ = ["coerce_role", "split_system", "resolve_max_tokens"]
