"""
Error classification helpers mapping statuses and exceptions to ErrorCode.

Implements HTTP status extraction, status-to-code mapping, and message-based
heuristics as a fallback for exceptions that carry no status at all.
"""
from __future__ import annotations

import asyncio
from typing import Dict, Optional

import httpx

from ..cancellation_parts.cancelled_error import CancelledError
from .error_code import ErrorCode
from .openrouter_error import OpenRouterError


def _extract_status(exc: BaseException) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.status``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    402: ErrorCode.PAYMENT_REQUIRED,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


def classify_status(status: Optional[int]) -> ErrorCode:
    """Map an HTTP status code to a normalized :class:`ErrorCode`.

    Exact matches win; otherwise any 5xx maps to ``SERVER_ERROR`` and any
    other 4xx to ``VALIDATION``. Everything else is ``UNKNOWN``.
    """
    if status is None:
        return ErrorCode.UNKNOWN
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    if 500 <= status < 600:
        return ErrorCode.SERVER_ERROR
    if 400 <= status < 500:
        return ErrorCode.VALIDATION
    return ErrorCode.UNKNOWN


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:  # pragma: no cover - simple mapping
    """Substring heuristic mapping for exceptions without a status."""
    PATTERN_GROUPS = (
        (ErrorCode.TIMEOUT, ("timeout", "timed out")),
        (ErrorCode.AUTH, ("unauthorized", "forbidden", "api key")),
        (ErrorCode.UNAVAILABLE, ("unavailable",)),
        (ErrorCode.NOT_FOUND, ("not found",)),
        (ErrorCode.VALIDATION, ("invalid", "malformed")),
    )
    for code, patterns in PATTERN_GROUPS:
        if any(p in msg for p in patterns):
            return code
    if "rate" in msg and "limit" in msg:
        return ErrorCode.RATE_LIMIT
    return None


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. OpenRouterError passthrough.
        2. Cooperative cancellation.
        3. Timeout exceptions (stdlib, asyncio and httpx).
        4. Other httpx transport failures (``TRANSIENT``).
        5. HTTP status mapping.
        6. Substring heuristics.
        7. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, OpenRouterError):
        return exc.code
    if isinstance(exc, CancelledError):
        return ErrorCode.CANCELLED
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError, httpx.TimeoutException)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, httpx.TransportError):
        return ErrorCode.TRANSIENT
    status = _extract_status(exc)
    if status is not None:
        return classify_status(status)
    code = _heuristic_from_message(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


__all__ = [
    "classify_status",
    "classify_exception",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
