"""Cooperative cancellation primitives (public API facade).

Purpose
-------
Expose stable cancellation constructs via the canonical
``openrouter_sdk.base.cancellation`` import path while the concrete
implementations live under ``cancellation_parts``.

Notes
-----
- ``CancellationToken`` signals cancellation across threads. Stream
  initiation registers the returned reader's ``close`` on the token, so
  cancelling the token (or letting ``cancel_after`` fire) unblocks a pending
  read with ``StreamClosedError``.
- ``CancelledError`` is raised by operations that observe a cancellation
  request before they start.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken

__all__ = ["CancellationToken", "CancelledError"]
