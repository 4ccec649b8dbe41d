"""Async HTTP client construction for providers.

Purpose:
    Provide one place where provider adapters obtain an ``httpx.AsyncClient``
    so base URL, default headers, transport and timeout policy are applied
    consistently.

External dependencies:
    - ``httpx`` for the underlying asynchronous HTTP client.

Timeout strategy:
    - Clients never carry an httpx-level timeout. Generation calls run until
      the provider ends them or the caller cancels; deadlines that do apply
      (model-listing probes) are enforced by the caller with
      :func:`modelbridge.base.timeouts.operation_timeout`, which cancels the
      exchange and closes its connection.

Lifecycle & cleanup:
    - An ``AsyncClient`` is bound to the event loop it was first used on, so
      clients are created per operation and closed with ``async with``.
      Nothing is pooled across calls.

Testing:
    - ``transport`` accepts any ``httpx.AsyncBaseTransport``; tests pass an
      ``httpx.MockTransport`` to script provider responses.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import httpx


def create_async_client(
    base_url: Optional[str] = None,
    *,
    headers: Optional[Mapping[str, str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Return a new ``httpx.AsyncClient`` configured for one provider call.

    Parameters:
        base_url: Provider API root; relative request paths resolve against it.
        headers: Auth and content headers sent with every request on this client.
        transport: Optional transport override (tests, proxies).
    """
    kwargs: Dict[str, Any] = {
        "timeout": httpx.Timeout(None),
        "headers": dict(headers or {}),
    }
    if base_url:
        kwargs["base_url"] = base_url
    if transport is not None:
        kwargs["transport"] = transport
    return httpx.AsyncClient(**kwargs)


__all__ = ["create_async_client"]
