"""Structured JSON logging for the connector.

Every module logs through a child of the ``modelbridge`` logger
(``modelbridge.ollama``, ``modelbridge.connector``, ...). The base logger
owns one stderr handler rendering records with :class:`JsonFormatter`; its
level comes from ``MODELBRIDGE_LOG_LEVEL`` (default INFO). Records still
propagate to the root logger, so an application's own handlers see them.

Events are emitted with :func:`log_event` as a JSON object whose first key is
``event`` (``chat.start``, ``stream.decode_error``, ``models.list_failed``,
...), followed by the :class:`LogContext` fields and the event's own fields.
:func:`normalized_log_event` adds the ``phase`` / ``emitted`` /
``error_code`` keys shared by the chat lifecycle events.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "modelbridge"

_READY_ATTR = "_modelbridge_ready"
_MANAGED_FILE_ATTR = "_modelbridge_file_handler"
_FILE_MAX_BYTES = 10 * 1024 * 1024
_FILE_BACKUPS = 5

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Map a level name (any case) to its constant; unknown names give ``default``."""
    if not value:
        return default
    return _LEVELS.get(value.strip().upper(), default)


def _base_logger() -> logging.Logger:
    logger = logging.getLogger(BASE_LOGGER_NAME)
    if getattr(logger, _READY_ATTR, False):
        return logger
    level = _parse_level(os.getenv("MODELBRIDGE_LOG_LEVEL"))
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(JsonFormatter())
    console.setLevel(level)
    logger.setLevel(level)
    logger.handlers[:] = [console]
    setattr(logger, _READY_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME) -> logging.Logger:
    """Return ``modelbridge.<name>``; an already prefixed name is used as is."""
    base = _base_logger()
    if name == BASE_LOGGER_NAME:
        return base
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logger(*, level: int | str | None = None, file_path: Optional[str] = None) -> logging.Logger:
    """Adjust the shared logger at runtime.

    Args:
        level: New level (constant or name) for the logger and its handlers;
            ``None`` keeps the current one.
        file_path: Also write JSON lines to this file through a rotating
            handler (10 MB, 5 backups). ``None`` removes a handler previously
            added here. Handlers attached by the application are not touched.
    """
    logger = _base_logger()
    if level is not None:
        logger.setLevel(_parse_level(level, logger.level) if isinstance(level, str) else level)
        for handler in logger.handlers:
            handler.setLevel(logger.level)

    target = os.path.abspath(os.path.expanduser(file_path)) if file_path else None
    for handler in [h for h in logger.handlers if getattr(h, _MANAGED_FILE_ATTR, False)]:
        if getattr(handler, "baseFilename", None) == target:
            continue
        logger.removeHandler(handler)
        with contextlib.suppress(OSError):
            handler.close()
    if target is None or any(getattr(h, "baseFilename", None) == target for h in logger.handlers):
        return logger

    os.makedirs(os.path.dirname(target), exist_ok=True)
    file_handler = RotatingFileHandler(
        target, maxBytes=_FILE_MAX_BYTES, backupCount=_FILE_BACKUPS, encoding="utf-8"
    )
    file_handler.setFormatter(JsonFormatter())
    file_handler.setLevel(logger.level)
    setattr(file_handler, _MANAGED_FILE_ATTR, True)
    logger.addHandler(file_handler)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Log ``event`` as one JSON object.

    ``None`` field values are dropped unless ``keep_none`` is set. Nothing is
    serialized when ``level`` is disabled for ``logger``.
    """
    if not logger.isEnabledFor(level):
        return
    payload: Dict[str, Any] = {"event": event}
    if ctx is not None:
        payload.update(ctx.to_dict())
    payload.update(fields if keep_none else {k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    error_code: str | None = None,
    emitted: int | bool | None = None,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Chat lifecycle event: ``phase`` and ``emitted`` are always present.

    ``error_code`` appears only when set; extra fields cannot override the
    three normalized keys.
    """
    fields: Dict[str, Any] = {"phase": phase, "emitted": emitted}
    if error_code is not None:
        fields["error_code"] = error_code
    for key, value in extra_fields.items():
        if value is not None and key not in fields:
            fields[key] = value
    log_event(logger, event, ctx, level=level, keep_none=True, **fields)


__all__ = [
    "BASE_LOGGER_NAME",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
]
