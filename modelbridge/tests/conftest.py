"""Pytest configuration for the modelbridge test suite.

Isolates every test from the developer's environment: provider keys, base
URL overrides and the external config file are cleared, and the config
caches are reset so ``monkeypatch.setenv`` takes effect.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from modelbridge.config import ENV_FIELD_MAP, reset_config_cache
from modelbridge.config.env import ENV_ALIASES, ENV_MAP

_PROVIDERS = ("ollama", "lmstudio", "llamacpp", "openrouter", "openai", "anthropic", "groq", "grok")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    names = set(ENV_MAP.values())
    for aliases in ENV_ALIASES.values():
        names.update(aliases)
    for provider in _PROVIDERS:
        for suffix in ENV_FIELD_MAP.values():
            names.add(f"{provider.upper()}_{suffix}")
    names.update(
        {
            "MODELBRIDGE_CONFIG_FILE",
            "MODELBRIDGE_DISCOVERY_TIMEOUT_SECONDS",
            "MODELBRIDGE_STREAM_QUEUE_SIZE",
        }
    )
    for name in names:
        monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()
