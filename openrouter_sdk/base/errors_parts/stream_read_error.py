"""
Stream I/O error raised after a stream has been established.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode
from .openrouter_error import OpenRouterError


@dataclass(eq=False)
class StreamReadError(OpenRouterError):
    """Failure while reading further bytes of an open event stream.

    Distinct from a clean end-of-stream, which is never an error. The
    underlying exception is kept in ``cause`` and chained as ``__cause__``
    by the raiser.
    """

    code: ErrorCode = ErrorCode.STREAM_IO
    message: str = "error reading stream"
    cause: Optional[BaseException] = None

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


__all__ = ["StreamReadError"]
