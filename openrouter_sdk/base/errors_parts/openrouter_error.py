"""
Base SDK exception type.

Every error raised by this package (other than raw transport failures, which
propagate unchanged) derives from `OpenRouterError` and carries a normalized
`ErrorCode` for consistent handling and structured logging.
"""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode


@dataclass(eq=False)
class OpenRouterError(Exception):
    """Represents a structured SDK error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
    """

    code: ErrorCode
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.code.value}: {self.message}"


__all__ = ["OpenRouterError"]
