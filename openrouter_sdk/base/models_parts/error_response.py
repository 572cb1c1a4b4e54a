"""
Error envelope returned by the service on non-success responses.

Shape::

    {"error": {"code": 401, "message": "No auth credentials found", "metadata": {...}}}
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from .wire_model import WireModel


class ErrorBody(WireModel):
    code: Optional[int] = None
    message: str = ""
    metadata: Optional[Dict[str, Any]] = None


class ErrorResponse(WireModel):
    """Top-level envelope; ``error`` is ``None`` when the body had no error object."""

    error: Optional[ErrorBody] = None


__all__ = ["ErrorBody", "ErrorResponse"]
