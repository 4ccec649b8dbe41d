"""Unit tests for KeysRepository behavior across env/config fallbacks.

Covers presence/absence, ordering and the CredentialStore entry point.
"""

from __future__ import annotations

from modelbridge.base.interfaces import CredentialStore
from modelbridge.base.repositories.keys import KeysRepository, MappingCredentialStore, read_credential
from modelbridge.config import reset_config_cache


def test_env_precedence_over_config(monkeypatch, tmp_path):
    cfg = tmp_path / "c.yaml"
    cfg.write_text("openai:\n  api_key: from_config\n", encoding="utf-8")  # pragma: allowlist secret - dummy test value
    monkeypatch.setenv("MODELBRIDGE_CONFIG_FILE", str(cfg))
    reset_config_cache()
    monkeypatch.setenv("OPENAI_API_KEY", "from_env")  # pragma: allowlist secret - dummy test value
    res = KeysRepository().get_resolution("openai")
    assert res.api_key == "from_env" and res.source == "env"  # nosec B101 - test assertion
    assert res.extra == {"env_var": "OPENAI_API_KEY"}  # nosec B101


def test_config_fallback(monkeypatch, tmp_path):
    cfg = tmp_path / "c.yaml"
    cfg.write_text("anthropic:\n  api_key: sk-from-file\n", encoding="utf-8")  # pragma: allowlist secret - dummy test value
    monkeypatch.setenv("MODELBRIDGE_CONFIG_FILE", str(cfg))
    reset_config_cache()
    res = KeysRepository().get_resolution("anthropic")
    assert res.api_key == "sk-from-file" and res.source == "config"  # nosec B101


def test_missing_key_returns_none():
    res = KeysRepository().get_resolution("nope")
    assert res.api_key is None and res.source == "none"  # nosec B101


def test_get_by_credential_key(monkeypatch):
    monkeypatch.setenv("GROK_API_KEY", "alias_val")  # pragma: allowlist secret - dummy test value
    repo = KeysRepository()
    assert isinstance(repo, CredentialStore)  # nosec B101
    assert repo.get("grok_api_key") == "alias_val"  # nosec B101
    assert repo.get("ollama_api_key") is None  # nosec B101


def test_mapping_store_and_read_credential():
    store = MappingCredentialStore({"openai_api_key": "  sk  ", "groq_api_key": " "})
    assert read_credential(store, "openai_api_key") == "sk"  # nosec B101
    assert read_credential(store, "groq_api_key") is None  # nosec B101
    assert read_credential(store, None) is None  # nosec B101
    assert "sk" not in repr(store)  # nosec B101
