"""Streaming package.

Exposes the event-stream decoding pipeline (line classification, frame
decoder, chunk unmarshaler), the stream reader and its metrics under a single
namespace.
"""

from .frames import FrameKind, StreamFrame, classify_line
from .frame_decoder import EventFrameDecoder
from .chunk_unmarshaler import CHAT_CHUNKS, COMPLETION_CHUNKS, ChunkUnmarshaler
from .stream_state import StreamState
from .streaming_metrics import StreamMetrics, apply_usage
from .stream_reader import StreamReader

__all__ = [
    "FrameKind",
    "StreamFrame",
    "classify_line",
    "EventFrameDecoder",
    "ChunkUnmarshaler",
    "COMPLETION_CHUNKS",
    "CHAT_CHUNKS",
    "StreamState",
    "StreamMetrics",
    "apply_usage",
    "StreamReader",
]
