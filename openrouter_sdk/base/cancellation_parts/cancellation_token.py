"""Cooperative cancellation token implementation.

Exposes the ``CancellationToken`` class used to stop long-running or
streaming operations either by polling (``raise_if_cancelled``) or by
registered callbacks (``on_cancel``), which is how an open stream reader is
closed from another thread when a deadline fires.
"""

from __future__ import annotations

import functools
import threading
from threading import Lock
from typing import Callable, List

from .state import State
from .cancelled_error import CancelledError


def _noop() -> None:
    return None


class CancellationToken:
    """A cooperative cancellation token with optional cascading semantics.

    Thread-safe for ``cancel``, ``on_cancel`` and ``raise_if_cancelled``.
    Child tokens inherit cancellation when the parent is cancelled.
    Callbacks run exactly once, on the thread that calls ``cancel``, outside
    the internal lock.
    """

    def __init__(self, *, parent: "CancellationToken | None" = None) -> None:
        self._state = State()
        self._lock = Lock()
        self._children: List[CancellationToken] = []
        self._timer: threading.Timer | None = None
        if parent is not None:
            parent.link_child(self)

    @property
    def cancelled(self) -> bool:  # noqa: D401 - short form
        """Whether cancellation has been requested."""
        return self._state.cancelled

    @property
    def reason(self) -> str | None:  # noqa: D401 - short form
        """Reason string supplied at cancel time (if any)."""
        return self._state.reason

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation, run callbacks and cascade to children.

        Every callback and child runs even if an earlier one raises; the first
        exception is re-raised once the cascade is complete.
        """
        with self._lock:
            if self._state.cancelled:
                return
            self._state.cancelled = True
            self._state.reason = reason
            callbacks = list(self._state.callbacks)
            self._state.callbacks.clear()
            children = list(self._children)
            timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()
        errors: List[Exception] = []
        for callback in callbacks:
            try:
                callback()
            except Exception as exc:  # noqa: BLE001 - re-raised below
                errors.append(exc)
        for child in children:
            try:
                child.cancel(reason)
            except Exception as exc:  # noqa: BLE001 - re-raised below
                errors.append(exc)
        if errors:
            raise errors[0]

    def on_cancel(self, callback: Callable[[], object]) -> Callable[[], None]:
        """Register ``callback`` to run on cancellation.

        Runs immediately (on the calling thread) if the token is already
        cancelled. Returns a function that removes the registration; calling
        it after cancellation is a no-op.
        """
        with self._lock:
            if not self._state.cancelled:
                self._state.callbacks.append(callback)
                return functools.partial(self._discard_callback, callback)
        callback()
        return _noop

    def _discard_callback(self, callback: Callable[[], object]) -> None:
        with self._lock:
            callbacks = self._state.callbacks
            for i, registered in enumerate(callbacks):
                if registered is callback:
                    del callbacks[i]
                    return

    def cancel_after(self, seconds: float, reason: str | None = None) -> "CancellationToken":
        """Arm a deadline that cancels this token after ``seconds``.

        Re-arming replaces any previous deadline. Returns ``self`` so a token
        can be created and armed in one expression.
        """
        timer = threading.Timer(seconds, self.cancel, args=(reason or f"deadline exceeded after {seconds}s",))
        timer.daemon = True
        with self._lock:
            if self._state.cancelled:
                return self
            previous, self._timer = self._timer, timer
        if previous is not None:
            previous.cancel()
        timer.start()
        return self

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Link a child token so parent cancellation cascades (returns child)."""
        with self._lock:
            self._children.append(token)
            should_cancel = self._state.cancelled
            reason = self._state.reason
        if should_cancel:
            token.cancel(reason)
        return token

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` if token is cancelled."""
        if self._state.cancelled:
            raise CancelledError(self._state.reason or "operation cancelled")

    def child(self) -> "CancellationToken":
        """Create and link a child token (shortcut)."""
        return CancellationToken(parent=self)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"CancellationToken(cancelled={self._state.cancelled}, "
            f"reason={self._state.reason!r}, children={len(self._children)})"
        )


__all__ = ["CancellationToken"]
