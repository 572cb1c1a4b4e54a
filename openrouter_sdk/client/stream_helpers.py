"""Stream initiation for the OpenRouter client.

Purpose:
    Open an event-stream request and hand the response body to a
    :class:`~openrouter_sdk.base.streaming.StreamReader`, or fail before any
    reader exists.

Ownership:
    Until the reader is returned, this module owns the response and closes it
    on every error path. Afterwards the reader owns it and only
    ``StreamReader.close`` releases it.
"""

from __future__ import annotations

from typing import Optional, TypeVar

from pydantic import BaseModel

from ..base.cancellation import CancellationToken
from ..base.constants import EVENT_STREAM_MEDIA_TYPE, NO_CACHE
from ..base.http import stream_timeout
from ..base.logging import LogContext, normalized_log_event
from ..base.models import GenerationParams
from ..base.streaming import ChunkUnmarshaler, StreamReader
from .request_helpers import handle_error_response, is_success

T = TypeVar("T", bound=BaseModel)

STREAM_HEADERS = {"Accept": EVENT_STREAM_MEDIA_TYPE, "Cache-Control": NO_CACHE}


class OpenRouterStreamingMixin:
    """Mixin providing the shared stream initiation path.

    Consumers must define ``_http``, ``_logger``, ``_timeouts`` and the
    request builders from ``OpenRouterCommonMixin``.
    """

    def _open_stream(
        self,
        path: str,
        request: GenerationParams,
        unmarshaler: ChunkUnmarshaler[T],
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> StreamReader[T]:
        """POST ``request`` to ``path`` as a stream and return an unread reader.

        The caller's ``request`` is never mutated; ``stream=True`` is forced on
        a copy.

        Failure modes:
            - ``CancelledError`` when ``cancellation`` is already cancelled;
              nothing is sent.
            - Transport exceptions (``httpx.TransportError``) propagate
              unchanged.
            - Non-2xx statuses raise ``APIError`` or ``RequestError`` after
              the body is read and the response closed.
        """
        if cancellation is not None:
            cancellation.raise_if_cancelled()
        streaming_request = request.model_copy(update={"stream": True})
        ctx = LogContext(endpoint=path, model=getattr(request, "model", None))
        http_request = self._build_request(
            "POST",
            path,
            payload=streaming_request.to_payload(),
            extra_headers=STREAM_HEADERS,
            accept=EVENT_STREAM_MEDIA_TYPE,
            timeout=stream_timeout(self._timeouts),
        )
        normalized_log_event(
            self._logger,
            "stream.start",
            ctx,
            phase="start",
            max_tokens=request.max_tokens,
            temperature=request.temperature,
        )
        response = self._http.send(http_request, stream=True)
        if not is_success(response.status_code):
            try:
                error = handle_error_response(response)
            finally:
                response.close()
            normalized_log_event(
                self._logger,
                "stream.start_error",
                ctx,
                phase="start",
                error_code=error.code.value,
                emitted=False,
                status_code=response.status_code,
                error=str(error),
            )
            raise error
        reader = StreamReader.from_response(response, unmarshaler, logger=self._logger, ctx=ctx)
        if cancellation is not None:
            reader.bind_cancellation(cancellation)
        return reader


__all__ = ["OpenRouterStreamingMixin", "STREAM_HEADERS"]
