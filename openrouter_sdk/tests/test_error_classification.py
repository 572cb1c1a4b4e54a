"""Status and exception classification into ``ErrorCode``."""
from __future__ import annotations

import httpx
import pytest

from openrouter_sdk.base.errors import (
    ErrorCode,
    StreamClosedError,
    StreamReadError,
    classify_exception,
    classify_status,
)


@pytest.mark.parametrize(
    "status,code",
    [
        (400, ErrorCode.VALIDATION),
        (401, ErrorCode.AUTH),
        (402, ErrorCode.PAYMENT_REQUIRED),
        (403, ErrorCode.AUTH),
        (408, ErrorCode.TIMEOUT),
        (418, ErrorCode.VALIDATION),
        (429, ErrorCode.RATE_LIMIT),
        (502, ErrorCode.TRANSIENT),
        (503, ErrorCode.UNAVAILABLE),
        (520, ErrorCode.SERVER_ERROR),
        (304, ErrorCode.UNKNOWN),
        (None, ErrorCode.UNKNOWN),
    ],
)
def test_classify_status(status, code):
    assert classify_status(status) is code  # nosec B101


def test_sdk_errors_pass_through():
    assert classify_exception(StreamClosedError()) is ErrorCode.STREAM_CLOSED  # nosec B101
    assert classify_exception(StreamReadError(cause=OSError())) is ErrorCode.STREAM_IO  # nosec B101


def test_transport_errors():
    request = httpx.Request("GET", "https://openrouter.test")
    assert classify_exception(httpx.ReadTimeout("slow", request=request)) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(httpx.ConnectError("refused", request=request)) is ErrorCode.TRANSIENT  # nosec B101
    assert classify_exception(TimeoutError()) is ErrorCode.TIMEOUT  # nosec B101


def test_status_attribute_and_message_fallbacks():
    class WithStatus(Exception):
        status_code = 404

    assert classify_exception(WithStatus()) is ErrorCode.NOT_FOUND  # nosec B101
    assert classify_exception(RuntimeError("Rate limit hit")) is ErrorCode.RATE_LIMIT  # nosec B101
    assert classify_exception(RuntimeError("nothing useful")) is ErrorCode.UNKNOWN  # nosec B101


def test_stream_read_error_message_includes_cause():
    err = StreamReadError(cause=OSError("reset"))
    assert str(err) == "error reading stream: reset"  # nosec B101
