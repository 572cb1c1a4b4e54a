"""Unified SDK error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``openrouter_sdk.base.errors_parts`` to maintain a stable import path.

Taxonomy:
    - Transport errors (``httpx.TransportError``) are not wrapped; they
      propagate as raised by the transport.
    - :class:`APIError`: non-2xx response with a structured error envelope.
    - :class:`RequestError`: non-2xx response without a decodable envelope.
    - :class:`StreamReadError`: I/O failure after a stream was established.
    - :class:`StreamClosedError`: read attempted on a closed stream reader.
    - :class:`StreamNotSupportedError`: streaming request on a sync method.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.openrouter_error import OpenRouterError
from .errors_parts.api_error import APIError
from .errors_parts.request_error import RequestError
from .errors_parts.stream_read_error import StreamReadError
from .errors_parts.stream_closed_error import StreamClosedError
from .errors_parts.stream_not_supported_error import StreamNotSupportedError
from .errors_parts.classification import classify_exception, classify_status

__all__ = [
    "ErrorCode",
    "OpenRouterError",
    "APIError",
    "RequestError",
    "StreamReadError",
    "StreamClosedError",
    "StreamNotSupportedError",
    "classify_exception",
    "classify_status",
]
