"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `openrouter_sdk.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .openrouter_error import OpenRouterError
from .api_error import APIError
from .request_error import RequestError
from .stream_read_error import StreamReadError
from .stream_closed_error import StreamClosedError
from .stream_not_supported_error import StreamNotSupportedError
from .classification import classify_exception, classify_status

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
