"""
Generic request error for non-success responses without an error envelope.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .openrouter_error import OpenRouterError


@dataclass(eq=False)
class RequestError(OpenRouterError):
    """Non-2xx response whose body could not be decoded as an error envelope.

    Attributes:
        status_code: Raw HTTP status code.
        reason: HTTP reason phrase (e.g. ``"Internal Server Error"``).
        body: Raw response body bytes kept for diagnostics.
        cause: Decode failure that prevented envelope extraction, if any.
    """

    status_code: int = 0
    reason: str = ""
    body: bytes = b""
    cause: Optional[BaseException] = None

    def __str__(self) -> str:
        body = self.body.decode("utf-8", errors="replace")
        return (
            f"error, status code: {self.status_code}, status: {self.reason}, "
            f"message: {self.cause}, body: {body}"
        )


__all__ = ["RequestError"]
