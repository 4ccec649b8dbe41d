"""Unified timeout utilities for the connector.

This module centralizes the deadline values used across provider adapters
and exposes an async context manager that enforces them through ``asyncio``
cancellation, so the guarded HTTP exchange is aborted (its connection closed)
when the deadline passes.

Key Components
--------------
TimeoutConfig
    Dataclass capturing normalized values. Only reachability probes (model
    listings) carry a deadline; generation calls have none.

get_timeout_config()
    Returns a process-cached configuration, parsing environment overrides on
    first use (and again whenever they change). Supported variables:
        MODELBRIDGE_DISCOVERY_TIMEOUT_SECONDS
        MODELBRIDGE_STREAM_QUEUE_SIZE

operation_timeout(seconds)
    Async context manager raising ``TimeoutError`` when the body exceeds the
    deadline. ``None`` or a non-positive value makes the guard inert.
"""
from __future__ import annotations

import asyncio
import os
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Optional

from ..config.defaults import DISCOVERY_TIMEOUT_SECONDS, STREAM_QUEUE_SIZE


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values.

    Attributes:
        discovery_timeout_seconds: Hard deadline for a model-listing probe.
        stream_queue_size: Capacity of the bounded queue between a decoding
            task and a ``stream_chat`` consumer.
    """

    discovery_timeout_seconds: float = DISCOVERY_TIMEOUT_SECONDS
    stream_queue_size: int = STREAM_QUEUE_SIZE


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse a positive float from the environment, else return ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def _parse_env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = int(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`.

    The cache is refreshed when the relevant environment variables change,
    which lets tests adjust values with ``monkeypatch.setenv``.
    """
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - intentional module cache
    cur_guard = "/".join(
        [
            os.getenv("MODELBRIDGE_DISCOVERY_TIMEOUT_SECONDS", ""),
            os.getenv("MODELBRIDGE_STREAM_QUEUE_SIZE", ""),
        ]
    )
    if _CACHED is not None and _ENV_GUARD == cur_guard:
        return _CACHED

    _CACHED = TimeoutConfig(
        discovery_timeout_seconds=_parse_env_float(
            "MODELBRIDGE_DISCOVERY_TIMEOUT_SECONDS", DISCOVERY_TIMEOUT_SECONDS
        ),
        stream_queue_size=_parse_env_int("MODELBRIDGE_STREAM_QUEUE_SIZE", STREAM_QUEUE_SIZE),
    )
    _ENV_GUARD = cur_guard
    return _CACHED


@asynccontextmanager
async def operation_timeout(seconds: Optional[float]) -> AsyncIterator[None]:
    """Abort the guarded block with ``TimeoutError`` after ``seconds``.

    The enclosing task is cancelled at the deadline, so any awaited network
    operation inside the block is interrupted and its resources released.
    """
    if seconds is None or seconds <= 0:
        yield
        return
    async with asyncio.timeout(seconds):
        yield


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
    "operation_timeout",
]
