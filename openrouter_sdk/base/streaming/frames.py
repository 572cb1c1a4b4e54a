"""Server-sent event line classification.

One line of an ``text/event-stream`` body maps to exactly one
:class:`StreamFrame`. Only ``data: `` lines carry information for the SDK;
comments (``: keep-alive``), blank separators and every other field name
(``event:``, ``id:``, ``retry:``) are recognised so they can be skipped.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..constants import SSE_COMMENT_PREFIX, SSE_DATA_PREFIX, SSE_DONE_SENTINEL


class FrameKind(str, Enum):
    DATA = "data"
    COMMENT = "comment"
    EMPTY = "empty"
    TERMINATOR = "terminator"
    OTHER = "other"


@dataclass(frozen=True)
class StreamFrame:
    """A classified stream line.

    ``payload`` is set only for :attr:`FrameKind.DATA` and holds the text after
    the ``data: `` prefix.
    """

    kind: FrameKind
    payload: Optional[str] = None

    @property
    def significant(self) -> bool:
        """Whether the frame must be surfaced to the reader (data or terminator)."""
        return self.kind in (FrameKind.DATA, FrameKind.TERMINATOR)


_EMPTY = StreamFrame(FrameKind.EMPTY)
_COMMENT = StreamFrame(FrameKind.COMMENT)
_TERMINATOR = StreamFrame(FrameKind.TERMINATOR)
_OTHER = StreamFrame(FrameKind.OTHER)


def classify_line(raw: Union[str, bytes]) -> StreamFrame:
    """Classify a single raw line of the event stream.

    The line is trimmed before classification, so ``"  data: [DONE]  "`` is a
    terminator. Note that ``"data:"`` without a trailing space is not a data
    line, and neither is ``"data: "`` once trimmed.
    """
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    line = raw.strip()
    if not line:
        return _EMPTY
    if line.startswith(SSE_COMMENT_PREFIX):
        return _COMMENT
    if line.startswith(SSE_DATA_PREFIX):
        payload = line[len(SSE_DATA_PREFIX):]
        if payload == SSE_DONE_SENTINEL:
            return _TERMINATOR
        return StreamFrame(FrameKind.DATA, payload)
    return _OTHER


__all__ = ["FrameKind", "StreamFrame", "classify_line"]
