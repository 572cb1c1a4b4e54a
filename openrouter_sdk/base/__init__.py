"""
SDK Base Package

Exports the transport-independent building blocks used by the client:
- Models: pydantic wire types for requests, responses and stream chunks
- Streaming: event-stream decoding and the pull-based stream reader
- Errors: the SDK error taxonomy
- Cancellation: cooperative cancellation tokens
"""

from .cancellation import CancellationToken, CancelledError
from .errors import (
    APIError,
    ErrorCode,
    OpenRouterError,
    RequestError,
    StreamClosedError,
    StreamNotSupportedError,
    StreamReadError,
)
from .streaming import CHAT_CHUNKS, COMPLETION_CHUNKS, ChunkUnmarshaler, StreamReader, StreamState

__all__ = [
    "CancellationToken",
    "CancelledError",
    "APIError",
    "ErrorCode",
    "OpenRouterError",
    "RequestError",
    "StreamClosedError",
    "StreamNotSupportedError",
    "StreamReadError",
    "CHAT_CHUNKS",
    "COMPLETION_CHUNKS",
    "ChunkUnmarshaler",
    "StreamReader",
    "StreamState",
]
