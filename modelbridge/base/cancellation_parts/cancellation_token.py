"""Stop handle for in-flight generation calls.

A caller (a "stop" button handler, possibly on another thread) holds the
token and calls ``cancel``. The decoder polls ``raise_if_cancelled`` between
chunks and deltas; the transport registers a listener so the HTTP exchange
is aborted at once instead of at the next chunk.
"""

from __future__ import annotations

from threading import Lock
from typing import Callable, List, Optional

from .cancelled_error import CancelledError

Listener = Callable[[Optional[str]], None]


class CancellationToken:
    """Thread-safe, one-shot cancellation flag with listeners.

    Child tokens created through ``child()`` (or ``parent=``) are cancelled
    together with their parent, which lets one stop handle cover a
    ``stream_chat`` consumer and the generation call behind it.
    """

    def __init__(self, *, parent: "CancellationToken | None" = None) -> None:
        self._lock = Lock()
        self._cancelled = False
        self._reason: Optional[str] = None
        self._listeners: List[Listener] = []
        self._children: List[CancellationToken] = []
        if parent is not None:
            parent.link_child(self)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def reason(self) -> Optional[str]:
        return self._reason

    def cancel(self, reason: Optional[str] = None) -> None:
        """Mark the token cancelled; the first call wins, later ones are no-ops.

        Listeners run on the calling thread, outside the lock.
        """
        with self._lock:
            if self._cancelled:
                return
            self._cancelled = True
            self._reason = reason
            listeners, self._listeners = self._listeners, []
            children = list(self._children)
        for listener in listeners:
            listener(reason)
        for child in children:
            child.cancel(reason)

    def register(self, listener: Listener) -> Callable[[], None]:
        """Run ``listener(reason)`` on cancellation and return an unregister hook.

        On an already cancelled token the listener runs immediately.
        """
        with self._lock:
            fire_now = self._cancelled
            if not fire_now:
                self._listeners.append(listener)
        if fire_now:
            listener(self._reason)
            return lambda: None

        def _unregister() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return _unregister

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Cascade this token's cancellation to ``token`` and return it."""
        with self._lock:
            self._children.append(token)
            fire_now = self._cancelled
        if fire_now:
            token.cancel(self._reason)
        return token

    def child(self) -> "CancellationToken":
        return CancellationToken(parent=self)

    def raise_if_cancelled(self) -> None:
        """Raise :class:`CancelledError` once ``cancel`` has been called."""
        if self._cancelled:
            raise CancelledError(self._reason or "operation cancelled")

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"CancellationToken(cancelled={self._cancelled}, reason={self._reason!r})"


__all__ = ["CancellationToken"]
