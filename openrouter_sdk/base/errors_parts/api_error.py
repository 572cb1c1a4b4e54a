"""
Structured API error returned by the service.

Raised when a non-success HTTP response carries a well-formed error envelope
``{"error": {"code": ..., "message": ..., "metadata": ...}}``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .openrouter_error import OpenRouterError


@dataclass(eq=False)
class APIError(OpenRouterError):
    """Service-defined error decoded from the response envelope.

    Attributes:
        status_code: HTTP status of the response that carried the envelope.
        api_code: Numeric code supplied by the service inside the envelope
            (usually mirrors the HTTP status; may be absent).
        metadata: Free-form diagnostics supplied by the service (for example
            the upstream provider name or moderation reasons).
    """

    status_code: Optional[int] = None
    api_code: Optional[int] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        if self.api_code is not None and self.api_code > 0:
            return (
                f"error, status code: {self.api_code}, message: {self.message}, "
                f"metadata: {self.metadata}"
            )
        return self.message


__all__ = ["APIError"]
