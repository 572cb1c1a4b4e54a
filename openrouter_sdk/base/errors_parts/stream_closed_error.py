"""
Error raised when reading from a stream reader that has been closed.
"""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .openrouter_error import OpenRouterError


@dataclass(eq=False)
class StreamClosedError(OpenRouterError):
    """``recv()`` was called on (or was blocked in) a closed stream reader."""

    code: ErrorCode = ErrorCode.STREAM_CLOSED
    message: str = "stream reader is closed"


__all__ = ["StreamClosedError"]
