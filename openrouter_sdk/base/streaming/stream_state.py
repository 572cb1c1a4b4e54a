"""Lifecycle states of a stream reader."""
from __future__ import annotations

from enum import Enum


class StreamState(str, Enum):
    """``OPEN`` until the first terminal transition.

    ``COMPLETED`` and ``ERRORED`` may still move to ``CLOSED``; ``CLOSED`` is
    absorbing.
    """

    OPEN = "open"
    COMPLETED = "completed"
    ERRORED = "errored"
    CLOSED = "closed"


__all__ = ["StreamState"]
