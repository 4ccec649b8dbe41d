"""Focused tests for modelbridge.base.logging.

Covers:
- _parse_level string parsing
- log_event / normalized_log_event payload shape
- JsonFormatter key hoisting
- configure_logger rotating file handler management
- LogContext.for_request
"""
from __future__ import annotations

import json
import logging

from modelbridge.base.log_support import JsonFormatter, LogContext
from modelbridge.base.models import ChatModelRequest
from modelbridge.base.logging import (
    _parse_level,  # type: ignore[attr-defined]
    configure_logger,
    get_logger,
    log_event,
    normalized_log_event,
)


class _ListHandler(logging.Handler):
    """Capture log records into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:  # pragma: no cover - exercised via tests
        self.messages.append(record.getMessage())


def _capture(name: str) -> tuple[logging.Logger, _ListHandler]:
    logger = get_logger(name)
    handler = _ListHandler()
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger, handler


def test_parse_level_variants():
    assert _parse_level(None) == logging.INFO  # nosec B101
    assert _parse_level("debug") == logging.DEBUG  # nosec B101
    assert _parse_level("WARN") == logging.WARNING  # nosec B101
    assert _parse_level("unknown", default=logging.ERROR) == logging.ERROR  # nosec B101


def test_get_logger_prefixes_names():
    assert get_logger("ollama").name == "modelbridge.ollama"  # nosec B101
    assert get_logger("modelbridge.anthropic").name == "modelbridge.anthropic"  # nosec B101


def test_log_event_merges_context_and_drops_none():
    logger, handler = _capture("test.log_event")
    log_event(logger, "models.list", LogContext(provider="ollama", model=None), count=2, skipped=None)
    payload = json.loads(handler.messages[-1])
    assert payload == {"event": "models.list", "provider": "ollama", "count": 2}  # nosec B101


def test_normalized_log_event_emits_required_keys():
    logger, handler = _capture("test.normalized")
    ctx = LogContext(provider="p", model="m", request_id="r")
    normalized_log_event(logger, "stream.end", ctx, phase="finalize", emitted=3, error_code=None)
    payload = json.loads(handler.messages[-1])
    assert payload["event"] == "stream.end" and payload["phase"] == "finalize"  # nosec B101
    assert payload["emitted"] == 3 and payload["request_id"] == "r"  # nosec B101
    assert "error_code" not in payload  # nosec B101


def test_json_formatter_hoists_message_keys():
    record = logging.LogRecord("modelbridge.x", logging.INFO, __file__, 1, json.dumps({"event": "e", "n": 1}), None, None)
    out = json.loads(JsonFormatter().format(record))
    assert out["event"] == "e" and out["n"] == 1 and out["level"] == "INFO"  # nosec B101
    assert "msg" not in out  # nosec B101


def test_configure_logger_attaches_and_removes_file_handler(tmp_path):
    path = tmp_path / "logs" / "bridge.log"
    logger = configure_logger(level="DEBUG", file_path=str(path))
    try:
        managed = [h for h in logger.handlers if getattr(h, "baseFilename", None) == str(path)]
        assert len(managed) == 1 and logger.level == logging.DEBUG  # nosec B101
        configure_logger(file_path=str(path))
        assert len([h for h in logger.handlers if getattr(h, "baseFilename", None) == str(path)]) == 1  # nosec B101
    finally:
        configure_logger(level="INFO", file_path=None)
    assert not any(getattr(h, "baseFilename", None) == str(path) for h in logger.handlers)  # nosec B101


def test_log_context_for_request_flattens_extra():
    request = ChatModelRequest(provider="groq", model="llama-3", messages=[], request_id="req-7")
    ctx = LogContext.for_request("groq", request, attempt=None, stream=True)
    assert ctx.to_dict() == {"provider": "groq", "model": "llama-3", "request_id": "req-7", "stream": True}  # nosec B101
