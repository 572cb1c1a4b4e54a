"""Unified timeout configuration for the SDK.

This module centralizes the timeout values used when building the HTTP
transport and when opening event streams. No other module hard-codes a
timeout literal.

Key Components
--------------
TimeoutConfig
    Dataclass capturing normalized timeout values (seconds).

get_timeout_config()
    Returns a process-cached configuration. Environment overrides are parsed
    on first use and re-parsed only when one of the variables changes:
        OPENROUTER_TIMEOUT_CONNECT_SECONDS
        OPENROUTER_TIMEOUT_HTTP_SECONDS
        OPENROUTER_TIMEOUT_STREAM_SECONDS

Stream idle timeout
-------------------
``stream_timeout_seconds`` bounds the wait for the *next* bytes of an open
event stream (the transport read timeout), not the total stream duration.
When it elapses the blocked read fails inside the transport and the stream
reader surfaces a ``StreamReadError``. This is the deadline mechanism for a
stalled stream; the reader itself runs no timer.
"""
from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        connect_timeout_seconds: Timeout for establishing the TCP/TLS
            connection (both sync and streaming calls).
        http_timeout_seconds: Read/write/pool timeout for non-streaming
            request/response exchanges.
        stream_timeout_seconds: Idle read timeout while waiting for the next
            line of an event stream.
    """

    connect_timeout_seconds: float = 10.0
    http_timeout_seconds: float = 60.0
    stream_timeout_seconds: float = 60.0


_ENV_VARS = (
    "OPENROUTER_TIMEOUT_CONNECT_SECONDS",
    "OPENROUTER_TIMEOUT_HTTP_SECONDS",
    "OPENROUTER_TIMEOUT_STREAM_SECONDS",
)

_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse a positive float from env var ``name``; fall back to ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(os.getenv(name, "") for name in _ENV_VARS)
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        connect_timeout_seconds=_parse_env_float(_ENV_VARS[0], defaults.connect_timeout_seconds),
        http_timeout_seconds=_parse_env_float(_ENV_VARS[1], defaults.http_timeout_seconds),
        stream_timeout_seconds=_parse_env_float(_ENV_VARS[2], defaults.stream_timeout_seconds),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
]
