"""OpenRouter HTTP client.

Summary:
- Synchronous completion, chat, credits, generation and catalogue calls via
  an injected (or owned) ``httpx.Client``
- Streaming completion and chat via :class:`StreamReader`, one typed chunk
  per ``recv()``

Timeouts:
- Transport timeouts come from ``get_timeout_config()``; the streaming request
  uses the stream idle timeout as its read timeout

Errors & Observability:
- Non-2xx responses raise ``APIError`` or ``RequestError``; transport
  exceptions propagate unchanged
- Emit structured start/end events through the ``openrouter_sdk.client`` logger

This module orchestrates I/O only; decoding lives in the models and streaming
layers.
"""

from __future__ import annotations

from typing import List, Optional

import httpx

from ..base.cancellation import CancellationToken
from ..base.constants import (
    CHAT_COMPLETIONS_PATH,
    COMPLETIONS_PATH,
    CREDITS_PATH,
    ENDPOINTS_PATH_TEMPLATE,
    GENERATION_PATH,
    MODELS_PATH,
)
from ..base.errors import StreamNotSupportedError
from ..base.http import build_httpx_client
from ..base.logging import LogContext, get_logger
from ..base.models import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatCompletionStreamChunk,
    CompletionRequest,
    CompletionResponse,
    CompletionStreamChunk,
    CreditsData,
    CreditsResponse,
    EndpointData,
    EndpointsResponse,
    GenerationData,
    GenerationResponse,
    ModelData,
    ModelsResponse,
)
from ..base.streaming import CHAT_CHUNKS, COMPLETION_CHUNKS, StreamReader
from ..base.timeouts import TimeoutConfig, get_timeout_config
from ..config import get_client_config
from ..config.defaults import OPENROUTER_DEFAULT_BASE_URL

from .helpers import OpenRouterCommonMixin
from .request_helpers import OpenRouterRequestMixin
from .stream_helpers import OpenRouterStreamingMixin


class OpenRouterClient(
    OpenRouterCommonMixin,
    OpenRouterRequestMixin,
    OpenRouterStreamingMixin,
):
    """Client for the OpenRouter completion API.

    Parameters:
        api_key: Explicit API key; if not provided, resolved from config
            (``OPENROUTER_API_KEY``). Requests are sent without
            ``Authorization`` when no key is available.
        base_url: API base URL; defaults to ``https://openrouter.ai/api/v1``.
        site_url: Sent as ``HTTP-Referer`` for app attribution.
        site_title: Sent as ``X-Title`` for app attribution.
        http_client: Transport to use. When omitted the client builds one
            with SDK timeouts and closes it in :meth:`close`; an injected
            client is never closed by the SDK.
        timeouts: Explicit timeout configuration; defaults to
            ``get_timeout_config()``.

    Example:
        >>> with OpenRouterClient() as client:
        ...     with client.chat_completion_stream(request) as reader:
        ...         for chunk in reader:
        ...             print(chunk.choices[0].delta.content or "", end="")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        site_url: Optional[str] = None,
        site_title: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        timeouts: Optional[TimeoutConfig] = None,
    ) -> None:
        cfg = get_client_config(
            {
                "api_key": api_key,
                "base_url": base_url,
                "site_url": site_url,
                "site_title": site_title,
            }
        )
        self._api_key: Optional[str] = cfg.get("api_key")
        self._base_url: str = cfg.get("base_url") or OPENROUTER_DEFAULT_BASE_URL
        self._site_url: Optional[str] = cfg.get("site_url")
        self._site_title: Optional[str] = cfg.get("site_title")
        self._timeouts = timeouts or get_timeout_config()
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else build_httpx_client(self._timeouts)
        self._logger = get_logger("client")

    @property
    def base_url(self) -> str:
        return self._base_url

    # ---- Completions ----
    def completion(self, request: CompletionRequest) -> CompletionResponse:
        """Perform a non-streaming text completion.

        Raises:
            StreamNotSupportedError: ``request.stream`` is ``True``; use
                :meth:`completion_stream` instead. Nothing is sent.
        """
        if request.wants_stream():
            raise StreamNotSupportedError()
        http_request = self._build_request("POST", COMPLETIONS_PATH, payload=request.to_payload())
        ctx = LogContext(endpoint=COMPLETIONS_PATH, model=request.model)
        return self._send_json(http_request, CompletionResponse, ctx)

    def completion_stream(
        self,
        request: CompletionRequest,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> StreamReader[CompletionStreamChunk]:
        """Open a streaming text completion.

        Returns an unread reader; the caller must close it (or use it as a
        context manager). Cancelling ``cancellation`` closes the reader.
        """
        return self._open_stream(COMPLETIONS_PATH, request, COMPLETION_CHUNKS, cancellation=cancellation)

    # ---- Chat ----
    def chat_completion(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        """Perform a non-streaming chat completion.

        Raises:
            StreamNotSupportedError: ``request.stream`` is ``True``.
        """
        if request.wants_stream():
            raise StreamNotSupportedError()
        http_request = self._build_request("POST", CHAT_COMPLETIONS_PATH, payload=request.to_payload())
        ctx = LogContext(endpoint=CHAT_COMPLETIONS_PATH, model=request.model)
        return self._send_json(http_request, ChatCompletionResponse, ctx)

    def chat_completion_stream(
        self,
        request: ChatCompletionRequest,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> StreamReader[ChatCompletionStreamChunk]:
        """Open a streaming chat completion; see :meth:`completion_stream`."""
        return self._open_stream(CHAT_COMPLETIONS_PATH, request, CHAT_CHUNKS, cancellation=cancellation)

    # ---- Account & catalogue ----
    def get_credits(self) -> CreditsData:
        """Return purchased and used credits for the configured key."""
        http_request = self._build_request("GET", CREDITS_PATH)
        return self._send_json(http_request, CreditsResponse, LogContext(endpoint=CREDITS_PATH)).data

    def get_generation(self, generation_id: str) -> GenerationData:
        """Return cost and token statistics for a past generation."""
        http_request = self._build_request("GET", GENERATION_PATH, params={"id": generation_id})
        ctx = LogContext(endpoint=GENERATION_PATH, response_id=generation_id)
        return self._send_json(http_request, GenerationResponse, ctx).data

    def list_models(self) -> List[ModelData]:
        """Return the model catalogue."""
        http_request = self._build_request("GET", MODELS_PATH)
        return self._send_json(http_request, ModelsResponse, LogContext(endpoint=MODELS_PATH)).data

    def list_endpoints(self, author: str, slug: str) -> EndpointData:
        """Return the provider endpoints serving ``author/slug``."""
        path = ENDPOINTS_PATH_TEMPLATE.format(author=author, slug=slug)
        http_request = self._build_request("GET", path)
        ctx = LogContext(endpoint=path, model=f"{author}/{slug}")
        return self._send_json(http_request, EndpointsResponse, ctx).data

    # ---- Lifecycle ----
    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "OpenRouterClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["OpenRouterClient"]
