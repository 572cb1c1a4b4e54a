"""HTTP transport construction.

Purpose:
    Build the ``httpx.Client`` a :class:`~openrouter_sdk.client.OpenRouterClient`
    uses when the caller does not inject one, and derive the per-request
    ``httpx.Timeout`` values. Timeouts come exclusively from
    :func:`get_timeout_config`.

External dependencies:
    - ``httpx`` for the underlying synchronous HTTP client.

Lifecycle:
    There is no process-wide client. A client built here is owned by the
    ``OpenRouterClient`` that requested it and closed with it. Injected
    clients are never closed by the SDK.
"""

from __future__ import annotations

import contextlib
import socket
from typing import Optional

import httpx

from ..timeouts import TimeoutConfig, get_timeout_config


def default_timeout(cfg: Optional[TimeoutConfig] = None) -> httpx.Timeout:
    """Return the timeout used for ordinary request/response calls."""
    cfg = cfg or get_timeout_config()
    return httpx.Timeout(cfg.http_timeout_seconds, connect=cfg.connect_timeout_seconds)


def stream_timeout(cfg: Optional[TimeoutConfig] = None) -> httpx.Timeout:
    """Return the timeout used when opening an event stream.

    The read component is the idle timeout between stream lines; connect and
    write keep their usual bounds.
    """
    cfg = cfg or get_timeout_config()
    return httpx.Timeout(
        cfg.http_timeout_seconds,
        connect=cfg.connect_timeout_seconds,
        read=cfg.stream_timeout_seconds,
    )


def build_httpx_client(cfg: Optional[TimeoutConfig] = None) -> httpx.Client:
    """Create a new ``httpx.Client`` configured with SDK timeouts.

    Parameters:
        cfg: Optional explicit timeout configuration; defaults to
            :func:`get_timeout_config`.

    Returns:
        A fresh client. The caller owns it and must close it.
    """
    return httpx.Client(timeout=default_timeout(cfg))


def abort_response(response: httpx.Response) -> None:
    """Close ``response`` and wake any read blocked on its connection.

    ``Response.close`` does not interrupt a thread already waiting on the
    socket. Shutting the socket down first makes that read return at once.
    Responses without a network stream (mock transports) are just closed.
    """
    network_stream = response.extensions.get("network_stream")
    sock = network_stream.get_extra_info("socket") if network_stream is not None else None
    if sock is not None:
        with contextlib.suppress(OSError):  # peer already gone
            sock.shutdown(socket.SHUT_RDWR)
    response.close()


__all__ = ["abort_response", "build_httpx_client", "default_timeout", "stream_timeout"]
