"""Common request assembly for the OpenRouter client.

Purpose:
    Provide the URL, header and ``httpx.Request`` builders shared by the
    synchronous and streaming paths so both send identical common headers.

Notes:
    These helpers assume the consumer is an instance that provides attributes:
    ``_api_key`` (str|None), ``_base_url`` (str), ``_site_url`` (str|None),
    ``_site_title`` (str|None) and ``_http`` (``httpx.Client``).
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import httpx

from ..base.constants import HEADER_REFERER, HEADER_TITLE, JSON_MEDIA_TYPE


class OpenRouterCommonMixin:
    """Mixin offering shared URL/header/request builders."""

    def _full_url(self, suffix: str) -> str:
        """Join the configured base URL (trailing ``/`` stripped) with ``suffix``."""
        base_url: str = getattr(self, "_base_url", "")
        return f"{base_url.rstrip('/')}{suffix}"

    def _build_headers(self, *, accept: str = JSON_MEDIA_TYPE, has_body: bool = False) -> Dict[str, str]:
        """Build HTTP headers including authorization and attribution when available.

        Returns:
            Mapping of headers; ``Authorization`` is present only when an API
            key is configured, ``HTTP-Referer`` and ``X-Title`` only when the
            site URL and title are set.
        """
        headers: Dict[str, str] = {"Accept": accept}
        api_key: Optional[str] = getattr(self, "_api_key", None)
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        site_url: Optional[str] = getattr(self, "_site_url", None)
        if site_url:
            headers[HEADER_REFERER] = site_url
        site_title: Optional[str] = getattr(self, "_site_title", None)
        if site_title:
            headers[HEADER_TITLE] = site_title
        if has_body:
            headers["Content-Type"] = JSON_MEDIA_TYPE
        return headers

    def _build_request(
        self,
        method: str,
        suffix: str,
        *,
        payload: Optional[Dict[str, Any]] = None,
        params: Optional[Mapping[str, str]] = None,
        accept: str = JSON_MEDIA_TYPE,
        extra_headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[httpx.Timeout] = None,
    ) -> httpx.Request:
        """Assemble an ``httpx.Request`` against the configured base URL.

        ``timeout`` overrides the transport default for this request only.
        """
        headers = self._build_headers(accept=accept, has_body=payload is not None)
        if extra_headers:
            headers.update(extra_headers)
        kwargs: Dict[str, Any] = {"headers": headers}
        if payload is not None:
            kwargs["json"] = payload
        if params:
            kwargs["params"] = dict(params)
        if timeout is not None:
            kwargs["timeout"] = timeout
        http: httpx.Client = getattr(self, "_http")
        return http.build_request(method, self._full_url(suffix), **kwargs)


__all__ = ["OpenRouterCommonMixin"]
