"""
Error raised when a synchronous call receives a streaming request.
"""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .openrouter_error import OpenRouterError


@dataclass(eq=False)
class StreamNotSupportedError(OpenRouterError):
    """A request with ``stream=True`` was passed to a non-streaming method."""

    code: ErrorCode = ErrorCode.UNSUPPORTED
    message: str = "streaming is not supported with this method"


__all__ = ["StreamNotSupportedError"]
