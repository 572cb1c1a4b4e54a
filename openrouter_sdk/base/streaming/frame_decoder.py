"""Pull-based decoder turning a line iterator into significant frames."""
from __future__ import annotations

from typing import Iterable, Iterator, Optional, Union

from ..errors import StreamReadError
from .frames import FrameKind, StreamFrame, classify_line


class EventFrameDecoder:
    """Yield ``DATA`` and ``TERMINATOR`` frames from an event-stream body.

    ``lines`` is any iterable of ``str`` or ``bytes`` lines, typically
    ``httpx.Response.iter_lines()``. The decoder holds at most the line being
    classified and never reads ahead.

    Exhaustion of ``lines`` is a clean end-of-stream and reported as ``None``
    whether or not a terminator was seen. Any exception raised while pulling a
    line is wrapped in :class:`StreamReadError`.
    """

    def __init__(self, lines: Iterable[Union[str, bytes]]) -> None:
        self._lines: Iterator[Union[str, bytes]] = iter(lines)
        self.lines_seen = 0
        self.comments_seen = 0

    def next_frame(self) -> Optional[StreamFrame]:
        """Return the next significant frame, or ``None`` at end-of-stream."""
        while True:
            try:
                raw = next(self._lines)
            except StopIteration:
                return None
            except Exception as exc:
                raise StreamReadError(cause=exc) from exc
            self.lines_seen += 1
            frame = classify_line(raw)
            if frame.significant:
                return frame
            if frame.kind is FrameKind.COMMENT:
                self.comments_seen += 1


__all__ = ["EventFrameDecoder"]
