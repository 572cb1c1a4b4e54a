"""Pytest configuration for the SDK test suite.

Every test runs with the SDK's environment variables cleared and the config
caches reset, so a developer's real ``OPENROUTER_API_KEY`` or ``.env`` never
leaks into assertions.

Fixtures
--------
- ``sse_body``: build an event-stream body from chunk dicts and raw lines.
- ``make_client``: build an ``OpenRouterClient`` on an ``httpx.MockTransport``.
- ``sdk_records``: capture records emitted under the ``openrouter_sdk`` logger.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Iterator, List

import httpx
import pytest

from openrouter_sdk.client import OpenRouterClient
from openrouter_sdk.config import reset_config_cache

_SDK_ENV_VARS = (
    "OPENROUTER_API_KEY",
    "OPENROUTER_BASE_URL",
    "OPENROUTER_SITE_URL",
    "OPENROUTER_SITE_TITLE",
    "OPENROUTER_CONFIG_FILE",
    "OPENROUTER_LOG_LEVEL",
    "OPENROUTER_TIMEOUT_CONNECT_SECONDS",
    "OPENROUTER_TIMEOUT_HTTP_SECONDS",
    "OPENROUTER_TIMEOUT_STREAM_SECONDS",
)

TEST_BASE_URL = "https://openrouter.test/api/v1"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Clear SDK env vars and point the ``.env`` loader at a missing file."""
    for name in _SDK_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "absent.env"))
    reset_config_cache()
    yield
    reset_config_cache()


def _render_event(item: Any) -> str:
    if isinstance(item, str):
        return item + "\n"
    return "data: " + json.dumps(item) + "\n\n"


@pytest.fixture()
def sse_body() -> Callable[..., bytes]:
    """Return a builder: ``sse_body(chunk_or_line, ..., done=True) -> bytes``.

    Dicts become ``data: <json>`` frames followed by a blank line; strings are
    emitted verbatim as one line. ``data: [DONE]`` is appended unless
    ``done=False``.
    """

    def _build(*items: Any, done: bool = True) -> bytes:
        text = "".join(_render_event(item) for item in items)
        if done:
            text += "data: [DONE]\n\n"
        return text.encode("utf-8")

    return _build


@pytest.fixture()
def make_client() -> Iterator[Callable[..., OpenRouterClient]]:
    """Return a factory building clients over ``httpx.MockTransport(handler)``.

    Keyword arguments are forwarded to ``OpenRouterClient``; ``api_key`` and
    ``base_url`` default to test values.
    """
    transports: List[httpx.Client] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response], **kwargs: Any) -> OpenRouterClient:
        http = httpx.Client(transport=httpx.MockTransport(handler))
        transports.append(http)
        kwargs.setdefault("api_key", "sk-or-unit")
        kwargs.setdefault("base_url", TEST_BASE_URL)
        return OpenRouterClient(http_client=http, **kwargs)

    yield _make
    for http in transports:
        http.close()


@pytest.fixture()
def sdk_records(monkeypatch: pytest.MonkeyPatch) -> Iterator[List[logging.LogRecord]]:
    """Capture every record reaching the ``openrouter_sdk`` logger at DEBUG."""
    from openrouter_sdk.base.logging import get_logger

    monkeypatch.setenv("OPENROUTER_LOG_LEVEL", "DEBUG")
    base = get_logger()
    records: List[logging.LogRecord] = []
    handler = logging.Handler(level=logging.DEBUG)
    handler.emit = records.append  # type: ignore[method-assign]
    base.addHandler(handler)
    try:
        yield records
    finally:
        base.removeHandler(handler)


def events_of(records: List[logging.LogRecord]) -> List[dict]:
    """Decode the JSON payloads of captured ``log_event`` records."""
    out = []
    for record in records:
        try:
            payload = json.loads(record.getMessage())
        except ValueError:
            continue
        if isinstance(payload, dict):
            out.append(payload)
    return out


@pytest.fixture()
def decode_events() -> Callable[[List[logging.LogRecord]], List[dict]]:
    return events_of
