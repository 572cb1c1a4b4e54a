"""HTTP utilities package.

Exposes the httpx client factory, timeout helpers and response abort.
"""

from .client import abort_response, build_httpx_client, default_timeout, stream_timeout

__all__ = ["abort_response", "build_httpx_client", "default_timeout", "stream_timeout"]
