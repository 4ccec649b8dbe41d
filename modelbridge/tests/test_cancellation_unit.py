"""Unit tests for cooperative cancellation primitives.

Covers idempotent cancel, cascade to children, late link of child after
parent cancel, listener registration and raise_if_cancelled behavior.
"""
from __future__ import annotations

import threading

import pytest

from modelbridge.base.cancellation import (
    CancellationToken,
    CancelledError,
    StreamCancelledError,
)


def test_cancel_cascades_to_children_and_is_idempotent():
    parent = CancellationToken()
    child1 = parent.child()
    child2 = parent.child()

    parent.cancel(reason="stop")
    # idempotent second call
    parent.cancel(reason="ignored")

    assert parent.cancelled is True and parent.reason == "stop"  # nosec B101 - pytest assert in tests
    assert child1.cancelled is True and child1.reason == "stop"  # nosec B101 - pytest assert in tests
    assert child2.cancelled is True and child2.reason == "stop"  # nosec B101 - pytest assert in tests


def test_link_child_after_parent_cancel_immediately_cancels_child():
    parent = CancellationToken()
    parent.cancel("done")
    late_child = CancellationToken(parent=parent)
    assert late_child.cancelled is True and late_child.reason == "done"  # nosec B101 - pytest assert in tests


def test_raise_if_cancelled_raises_custom_error():
    token = CancellationToken()
    token.raise_if_cancelled()
    token.cancel("terminate")
    with pytest.raises(CancelledError, match="terminate"):
        token.raise_if_cancelled()


def test_listeners_fire_once_and_can_unregister():
    token = CancellationToken()
    calls = []
    token.register(calls.append)
    unregister = token.register(lambda reason: calls.append(("removed", reason)))
    unregister()

    token.cancel("bye")
    token.cancel("again")

    assert calls == ["bye"]  # nosec B101 - pytest assert in tests


def test_listener_registered_after_cancel_runs_immediately():
    token = CancellationToken()
    token.cancel("late")
    calls = []
    token.register(calls.append)
    assert calls == ["late"]  # nosec B101 - pytest assert in tests


def test_cancel_from_another_thread():
    token = CancellationToken()
    fired = threading.Event()
    token.register(lambda reason: fired.set())
    worker = threading.Thread(target=token.cancel, args=("remote",))
    worker.start()
    worker.join(timeout=5)
    assert fired.is_set() and token.reason == "remote"  # nosec B101 - pytest assert in tests


def test_stream_cancelled_error_keeps_partial_output():
    err = StreamCancelledError("stop", partial_text="par", raw_frames=[{"a": 1}], request_id="r")
    assert isinstance(err, CancelledError)  # nosec B101 - pytest assert in tests
    assert (err.partial_text, err.raw_frames, err.request_id) == ("par", [{"a": 1}], "r")  # nosec B101
