"""Timeout configuration and derived ``httpx.Timeout`` values."""
from __future__ import annotations

from openrouter_sdk.base.http import build_httpx_client, default_timeout, stream_timeout
from openrouter_sdk.base.timeouts import TimeoutConfig, get_timeout_config


def test_defaults_without_env():
    cfg = get_timeout_config()
    assert cfg == TimeoutConfig()  # nosec B101


def test_env_overrides_are_reparsed_when_changed(monkeypatch):
    first = get_timeout_config()
    monkeypatch.setenv("OPENROUTER_TIMEOUT_STREAM_SECONDS", "5")
    monkeypatch.setenv("OPENROUTER_TIMEOUT_CONNECT_SECONDS", "-1")
    monkeypatch.setenv("OPENROUTER_TIMEOUT_HTTP_SECONDS", "abc")
    second = get_timeout_config()
    assert second is not first  # nosec B101
    assert second.stream_timeout_seconds == 5.0  # nosec B101
    assert second.connect_timeout_seconds == TimeoutConfig().connect_timeout_seconds  # nosec B101
    assert second.http_timeout_seconds == TimeoutConfig().http_timeout_seconds  # nosec B101
    assert get_timeout_config() is second  # nosec B101


def test_stream_timeout_uses_idle_read_bound():
    cfg = TimeoutConfig(connect_timeout_seconds=2.0, http_timeout_seconds=30.0, stream_timeout_seconds=7.5)
    t = stream_timeout(cfg)
    assert (t.connect, t.read, t.write) == (2.0, 7.5, 30.0)  # nosec B101
    d = default_timeout(cfg)
    assert (d.connect, d.read) == (2.0, 30.0)  # nosec B101


def test_built_client_carries_default_timeout():
    cfg = TimeoutConfig(connect_timeout_seconds=3.0, http_timeout_seconds=9.0)
    client = build_httpx_client(cfg)
    try:
        assert client.timeout.connect == 3.0 and client.timeout.read == 9.0  # nosec B101
    finally:
        client.close()
