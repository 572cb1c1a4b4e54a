"""Event-stream line classification tests."""
from __future__ import annotations

import pytest

from openrouter_sdk.base.streaming import FrameKind, classify_line


@pytest.mark.parametrize(
    "line, kind",
    [
        ("", FrameKind.EMPTY),
        ("   \t", FrameKind.EMPTY),
        (": OPENROUTER PROCESSING", FrameKind.COMMENT),
        (":", FrameKind.COMMENT),
        ("data: [DONE]", FrameKind.TERMINATOR),
        ("  data: [DONE]  \r", FrameKind.TERMINATOR),
        ("event: message", FrameKind.OTHER),
        ("id: 42", FrameKind.OTHER),
        ("retry: 1000", FrameKind.OTHER),
        ("data:{\"id\":\"x\"}", FrameKind.OTHER),
        ("data: ", FrameKind.OTHER),
    ],
)
def test_classify_line_kinds(line, kind):
    assert classify_line(line).kind is kind  # nosec B101


def test_data_line_carries_payload_without_prefix():
    frame = classify_line('data: {"id":"x"}\n')
    assert frame.kind is FrameKind.DATA  # nosec B101
    assert frame.payload == '{"id":"x"}'  # nosec B101


def test_bytes_lines_are_decoded():
    frame = classify_line(b'data: {"text":"caf\xc3\xa9"}')
    assert frame.payload == '{"text":"café"}'  # nosec B101


def test_invalid_utf8_is_replaced_not_raised():
    frame = classify_line(b"data: \xff\xfe")
    assert frame.kind is FrameKind.DATA  # nosec B101
    assert "�" in (frame.payload or "")  # nosec B101


def test_done_must_match_exactly():
    assert classify_line("data: [DONE] extra").kind is FrameKind.DATA  # nosec B101
    assert classify_line("data: [done]").kind is FrameKind.DATA  # nosec B101


def test_only_data_and_terminator_are_significant():
    assert classify_line("data: {}").significant  # nosec B101
    assert classify_line("data: [DONE]").significant  # nosec B101
    assert not classify_line(": ping").significant  # nosec B101
    assert not classify_line("").significant  # nosec B101
