"""Pull-based reader over an established event stream.

The reader owns the response body once the request initiator hands it over.
Each :meth:`StreamReader.recv` call pulls lines until one decodes into a chunk,
the stream ends, or reading fails.

State machine::

    OPEN --[DONE] / EOF--> COMPLETED
    OPEN --read failure--> ERRORED
    any  --close()-------> CLOSED   (absorbing)

Concurrency: one consumer calls ``recv``; ``close`` may be called from any
thread at any time, including while ``recv`` is blocked on the network.
Reads are not locked. Only state transitions are, which is what lets a
chunk decoded concurrently with ``close`` be discarded instead of returned.
"""
from __future__ import annotations

import functools
import logging
import threading
import time
from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar, Union

import httpx
from pydantic import BaseModel

from ..cancellation import CancellationToken
from ..errors import StreamClosedError, StreamReadError
from ..http import abort_response
from ..logging import LogContext, get_logger, log_event, normalized_log_event
from .chunk_unmarshaler import ChunkUnmarshaler
from .frame_decoder import EventFrameDecoder
from .frames import FrameKind
from .stream_state import StreamState
from .streaming_metrics import StreamMetrics, apply_usage

T = TypeVar("T", bound=BaseModel)


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000.0, 3)


class StreamReader(Generic[T]):
    """Typed chunk reader with explicit end-of-stream and close semantics.

    Parameters:
        lines: Iterable of raw body lines (``str`` or ``bytes``).
        unmarshaler: Decoder binding this reader to one chunk schema.
        closer: Callable releasing the underlying body; invoked once.
        logger: Logger for lifecycle events; defaults to ``openrouter_sdk.stream``.
        ctx: Structured context attached to every event.

    ``recv`` returns ``None`` at end-of-stream, on that call and every later
    one. Iteration stops at the same point. Using the reader as a context
    manager closes it on exit.
    """

    def __init__(
        self,
        lines: Iterable[Union[str, bytes]],
        unmarshaler: ChunkUnmarshaler[T],
        *,
        closer: Optional[Callable[[], object]] = None,
        logger: Optional[logging.Logger] = None,
        ctx: Optional[LogContext] = None,
    ) -> None:
        self._decoder = EventFrameDecoder(lines)
        self._unmarshaler = unmarshaler
        self._closer = closer
        self._unregister: Optional[Callable[[], None]] = None
        self._logger = logger or get_logger("stream")
        self._ctx = ctx or LogContext()
        self._lock = threading.Lock()
        self._state = StreamState.OPEN
        self._error: Optional[StreamReadError] = None
        self._metrics = StreamMetrics()
        self._started = time.perf_counter()

    @classmethod
    def from_response(
        cls,
        response: httpx.Response,
        unmarshaler: ChunkUnmarshaler[T],
        *,
        logger: Optional[logging.Logger] = None,
        ctx: Optional[LogContext] = None,
    ) -> "StreamReader[T]":
        """Bind a reader to an open streaming ``httpx.Response``.

        Closing the reader aborts the connection, so a ``recv`` blocked on
        the network in another thread fails immediately.
        """
        return cls(
            response.iter_lines(),
            unmarshaler,
            closer=functools.partial(abort_response, response),
            logger=logger,
            ctx=ctx,
        )

    # Properties -----------------------------------------------------------
    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._state is StreamState.CLOSED

    @property
    def metrics(self) -> StreamMetrics:
        return self._metrics

    def bind_cancellation(self, token: CancellationToken) -> None:
        """Close this reader when ``token`` is cancelled.

        The registration is dropped again when the reader closes, so a
        long-lived token does not keep finished readers alive.
        """
        unregister = token.on_cancel(self.close)
        with self._lock:
            if self._state is not StreamState.CLOSED:
                self._unregister = unregister
                return
        unregister()

    # Reading --------------------------------------------------------------
    def recv(self) -> Optional[T]:
        """Return the next chunk, or ``None`` once the stream has ended.

        Raises:
            StreamReadError: Reading the body failed. Later calls raise the
                same error again.
            StreamClosedError: The reader was closed before or during the call.
        """
        if not self._readable():
            return None
        while True:
            try:
                frame = self._decoder.next_frame()
            except StreamReadError as exc:
                self._fail(exc)
                raise
            if frame is None or frame.kind is FrameKind.TERMINATOR:
                self._complete(saw_terminator=frame is not None)
                return None
            chunk = self._unmarshaler.unmarshal(frame.payload or "")
            if chunk is None:
                self._skip(frame.payload or "")
                continue
            return self._emit(chunk)

    def _readable(self) -> bool:
        with self._lock:
            state = self._state
        if state is StreamState.CLOSED:
            raise StreamClosedError()
        if state is StreamState.ERRORED and self._error is not None:
            raise self._error
        return state is StreamState.OPEN

    def _emit(self, chunk: T) -> T:
        with self._lock:
            if self._state is StreamState.CLOSED:
                raise StreamClosedError()
            self._metrics.emitted += 1
            if self._metrics.time_to_first_chunk_ms is None:
                self._metrics.time_to_first_chunk_ms = _elapsed_ms(self._started)
        usage = getattr(chunk, "usage", None)
        if usage is not None:
            apply_usage(self._metrics, usage)
        return chunk

    def _skip(self, payload: str) -> None:
        self._metrics.skipped += 1
        log_event(
            self._logger,
            "stream.decode_error",
            self._ctx,
            level=logging.DEBUG,
            schema=self._unmarshaler.model.__name__,
            payload_preview=payload[:200],
            skipped_count=self._metrics.skipped,
        )

    def _complete(self, *, saw_terminator: bool) -> None:
        with self._lock:
            if self._state is StreamState.CLOSED:
                raise StreamClosedError()
            self._state = StreamState.COMPLETED
            self._metrics.total_duration_ms = _elapsed_ms(self._started)
        normalized_log_event(
            self._logger,
            "stream.finalize",
            self._ctx,
            phase="finalize",
            emitted=self._metrics.emitted,
            tokens=self._metrics.tokens,
            skipped_count=self._metrics.skipped,
            lines_seen=self._decoder.lines_seen,
            comments_seen=self._decoder.comments_seen,
            time_to_first_chunk_ms=self._metrics.time_to_first_chunk_ms,
            total_duration_ms=self._metrics.total_duration_ms,
            terminator=saw_terminator,
        )

    def _fail(self, exc: StreamReadError) -> None:
        with self._lock:
            if self._state is StreamState.CLOSED:
                raise StreamClosedError() from exc
            self._state = StreamState.ERRORED
            self._error = exc
            self._metrics.total_duration_ms = _elapsed_ms(self._started)
        normalized_log_event(
            self._logger,
            "stream.error",
            self._ctx,
            phase="finalize",
            level=logging.WARNING,
            error_code=exc.code.value,
            emitted=self._metrics.emitted,
            tokens=self._metrics.tokens,
            error=str(exc),
            failure_class=type(exc.cause).__name__ if exc.cause is not None else None,
        )

    # Lifecycle ------------------------------------------------------------
    def close(self) -> None:
        """Release the response body. Idempotent and safe from any thread."""
        with self._lock:
            if self._state is StreamState.CLOSED:
                return
            previous = self._state
            self._state = StreamState.CLOSED
            closer, self._closer = self._closer, None
            unregister, self._unregister = self._unregister, None
        if unregister is not None:
            unregister()
        try:
            if closer is not None:
                closer()
        finally:
            log_event(
                self._logger,
                "stream.close",
                self._ctx,
                previous_state=previous.value,
                emitted_count=self._metrics.emitted,
            )

    # Protocols ------------------------------------------------------------
    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        chunk = self.recv()
        if chunk is None:
            raise StopIteration
        return chunk

    def __enter__(self) -> "StreamReader[T]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"StreamReader(schema={self._unmarshaler.model.__name__}, state={self._state.value})"


__all__ = ["StreamReader"]
