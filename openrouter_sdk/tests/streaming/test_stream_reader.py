"""Stream reader state machine tests.

Covers completion, repeated end-of-stream, errored re-raise, close semantics
(idempotent, absorbing, closer invoked once) and ``close`` racing a ``recv``
blocked on another thread.
"""
from __future__ import annotations

import threading
from typing import List

import pytest

from openrouter_sdk.base.cancellation import CancellationToken
from openrouter_sdk.base.errors import StreamClosedError, StreamReadError
from openrouter_sdk.base.streaming import COMPLETION_CHUNKS, StreamReader, StreamState


class CountingCloser:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


def _reader(lines, closer=None) -> StreamReader:
    return StreamReader(lines, COMPLETION_CHUNKS, closer=closer)


def test_yields_chunks_then_end_of_stream_forever():
    reader = _reader(
        [
            'data: {"id":"a","choices":[{"index":0,"text":"one"}]}',
            'data: {"id":"b","choices":[{"index":0,"text":"two"}]}',
            "data: [DONE]",
            'data: {"id":"after-done"}',
        ]
    )
    assert reader.recv().id == "a"  # nosec B101
    assert reader.recv().id == "b"  # nosec B101
    assert reader.recv() is None  # nosec B101
    assert reader.state is StreamState.COMPLETED  # nosec B101
    for _ in range(3):
        assert reader.recv() is None  # nosec B101


def test_iteration_stops_at_end_of_stream():
    reader = _reader(['data: {"id":"a"}', 'data: {"id":"b"}'])
    assert [c.id for c in reader] == ["a", "b"]  # nosec B101
    assert list(reader) == []  # nosec B101


def test_read_error_moves_to_errored_and_is_reraised():
    boom = OSError("socket gone")

    def lines():
        yield 'data: {"id":"a"}'
        raise boom

    reader = _reader(lines())
    assert reader.recv().id == "a"  # nosec B101
    with pytest.raises(StreamReadError) as first:
        reader.recv()
    assert reader.state is StreamState.ERRORED  # nosec B101
    assert first.value.cause is boom  # nosec B101
    with pytest.raises(StreamReadError) as second:
        reader.recv()
    assert second.value is first.value  # nosec B101


def test_close_is_idempotent_and_invokes_closer_once():
    closer = CountingCloser()
    reader = _reader(['data: {"id":"a"}'], closer=closer)
    reader.close()
    reader.close()
    assert closer.calls == 1  # nosec B101
    assert reader.closed  # nosec B101


@pytest.mark.parametrize("advance", ["open", "completed", "errored"])
def test_closed_is_absorbing_from_every_state(advance):
    def failing():
        raise OSError("x")
        yield  # pragma: no cover

    lines = failing() if advance == "errored" else ['data: {"id":"a"}']
    reader = _reader(lines)
    if advance == "completed":
        reader.recv()
        assert reader.recv() is None  # nosec B101
    if advance == "errored":
        with pytest.raises(StreamReadError):
            reader.recv()
    reader.close()
    for _ in range(2):
        with pytest.raises(StreamClosedError):
            reader.recv()
    assert reader.state is StreamState.CLOSED  # nosec B101


def test_buffered_chunk_is_not_returned_after_close():
    reader = _reader(['data: {"id":"a"}', 'data: {"id":"b"}'])
    assert reader.recv().id == "a"  # nosec B101
    reader.close()
    with pytest.raises(StreamClosedError):
        reader.recv()


def test_context_manager_closes_reader():
    closer = CountingCloser()
    with _reader(['data: {"id":"a"}'], closer=closer) as reader:
        assert reader.recv().id == "a"  # nosec B101
    assert closer.calls == 1  # nosec B101
    assert reader.closed  # nosec B101


class BlockingLines:
    """Line source whose next line is only released by the closer."""

    def __init__(self) -> None:
        self.entered = threading.Event()
        self.release = threading.Event()

    def __iter__(self):
        return self

    def __next__(self) -> str:
        self.entered.set()
        if not self.release.wait(timeout=5):
            raise TimeoutError("line source never released")
        return 'data: {"id":"decoded-during-close"}'


def test_close_from_another_thread_unblocks_pending_recv():
    lines = BlockingLines()
    reader = _reader(lines, closer=lines.release.set)
    outcome: List[BaseException] = []
    returned: List[object] = []

    def consume() -> None:
        try:
            returned.append(reader.recv())
        except BaseException as exc:  # noqa: BLE001 - captured for assertion
            outcome.append(exc)

    worker = threading.Thread(target=consume)
    worker.start()
    assert lines.entered.wait(timeout=5)  # nosec B101
    reader.close()
    worker.join(timeout=5)

    if worker.is_alive():
        raise AssertionError("recv() stayed blocked after close()")
    assert returned == []  # nosec B101
    assert len(outcome) == 1 and isinstance(outcome[0], StreamClosedError)  # nosec B101


def test_read_failure_caused_by_close_reports_closed():
    lines = BlockingLines()

    def failing_lines():
        next(lines)
        raise OSError("connection closed")

    reader = _reader(failing_lines(), closer=lines.release.set)
    errors: List[BaseException] = []

    def consume() -> None:
        try:
            reader.recv()
        except BaseException as exc:  # noqa: BLE001
            errors.append(exc)

    worker = threading.Thread(target=consume)
    worker.start()
    assert lines.entered.wait(timeout=5)  # nosec B101
    reader.close()
    worker.join(timeout=5)
    assert len(errors) == 1 and isinstance(errors[0], StreamClosedError)  # nosec B101
    assert reader.state is StreamState.CLOSED  # nosec B101


def test_metrics_count_emitted_and_skipped_and_usage():
    reader = _reader(
        [
            'data: {"id":"a","choices":[{"index":0,"text":"x"}]}',
            "data: {broken",
            'data: {"id":"b","choices":[],"usage":{"prompt_tokens":5,"completion_tokens":2,"total_tokens":7}}',
            "data: [DONE]",
        ]
    )
    list(reader)
    m = reader.metrics
    assert (m.emitted, m.skipped) == (2, 1)  # nosec B101
    assert m.tokens == {"prompt": 5, "completion": 2, "total": 7}  # nosec B101
    assert m.time_to_first_chunk_ms is not None  # nosec B101
    assert m.total_duration_ms is not None and m.total_duration_ms >= m.time_to_first_chunk_ms  # nosec B101


def test_closed_reader_releases_cancellation_registration():
    token = CancellationToken()
    readers = [_reader(['data: {"id":"a"}']) for _ in range(3)]
    for reader in readers:
        reader.bind_cancellation(token)
    assert len(token._state.callbacks) == 3  # nosec B101
    for reader in readers[:2]:
        reader.close()
    assert len(token._state.callbacks) == 1  # nosec B101
    token.cancel("shutdown")
    assert readers[2].closed  # nosec B101


def test_bind_to_cancelled_token_closes_immediately():
    token = CancellationToken()
    token.cancel()
    closer = CountingCloser()
    reader = _reader(['data: {"id":"a"}'], closer=closer)
    reader.bind_cancellation(token)
    assert reader.closed and closer.calls == 1  # nosec B101
