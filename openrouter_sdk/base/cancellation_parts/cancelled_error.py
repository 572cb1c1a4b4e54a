"""Cancellation error type.

Defines the public ``CancelledError`` used to signal cooperative cancellation
in SDK operations. Kept isolated to satisfy one-class-per-file policy.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation is cancelled cooperatively.

    Distinguishes cooperative cancellation from other runtime failures, for
    example a stream request whose token was cancelled before it was sent.
    """

__all__ = ["CancelledError"]
