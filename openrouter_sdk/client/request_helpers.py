"""Synchronous request execution and shared error extraction.

``handle_error_response`` is the single place a non-success response is turned
into an SDK error. Both the synchronous calls and stream initiation use it, so
an error body looks the same whichever path produced it.
"""

from __future__ import annotations

import time
from typing import Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..base.errors import (
    APIError,
    ErrorCode,
    OpenRouterError,
    RequestError,
    classify_status,
)
from ..base.logging import LogContext, normalized_log_event
from ..base.models import ErrorResponse

M = TypeVar("M", bound=BaseModel)


def is_success(status_code: int) -> bool:
    """Return True for 2xx statuses."""
    return 200 <= status_code < 300


def handle_error_response(response: httpx.Response) -> OpenRouterError:
    """Build the SDK error for a non-success ``response``.

    The body is read fully (streaming responses included). A body of the form
    ``{"error": {...}}`` yields an :class:`APIError`; anything else, including
    an unreadable body, yields a :class:`RequestError` that keeps the raw bytes.

    The caller raises the returned error and remains responsible for closing
    the response.
    """
    status = response.status_code
    reason = response.reason_phrase
    code = classify_status(status)
    try:
        body = response.read()
    except httpx.HTTPError as exc:
        return RequestError(
            code=code,
            message="error reading response body",
            status_code=status,
            reason=reason,
            cause=exc,
        )
    try:
        envelope = ErrorResponse.model_validate_json(body)
    except ValidationError as exc:
        return RequestError(
            code=code,
            message="error decoding error response",
            status_code=status,
            reason=reason,
            body=body,
            cause=exc,
        )
    if envelope.error is None:
        return RequestError(
            code=code,
            message="error response without error object",
            status_code=status,
            reason=reason,
            body=body,
        )
    err = envelope.error
    return APIError(
        code=code,
        message=err.message,
        status_code=status,
        api_code=err.code,
        metadata=dict(err.metadata or {}),
    )


class OpenRouterRequestMixin:
    """Mixin providing the request/response exchange for synchronous calls.

    Consumers must define ``_http`` (``httpx.Client``) and ``_logger``.
    """

    def _send_json(self, request: httpx.Request, model: Type[M], ctx: LogContext) -> M:
        """Send ``request`` and decode a 2xx JSON body into ``model``.

        Failure modes:
            - Transport exceptions propagate unchanged.
            - Non-2xx responses raise the error built by ``handle_error_response``.
            - A 2xx body that does not fit ``model`` raises ``RequestError``.
        """
        normalized_log_event(
            self._logger,
            "request.start",
            ctx,
            phase="start",
            method=request.method,
        )
        t0 = time.perf_counter()
        response = self._http.send(request)
        try:
            if not is_success(response.status_code):
                error = handle_error_response(response)
                self._log_request_error(ctx, error, response.status_code)
                raise error
            try:
                result = model.model_validate_json(response.read())
            except ValidationError as exc:
                error = RequestError(
                    code=ErrorCode.UNKNOWN,
                    message="error decoding response body",
                    status_code=response.status_code,
                    reason=response.reason_phrase,
                    body=response.content,
                    cause=exc,
                )
                self._log_request_error(ctx, error, response.status_code)
                raise error from exc
        finally:
            response.close()
        normalized_log_event(
            self._logger,
            "request.end",
            ctx,
            phase="finalize",
            emitted=True,
            status_code=response.status_code,
            latency_ms=round((time.perf_counter() - t0) * 1000.0, 3),
        )
        return result

    def _log_request_error(self, ctx: LogContext, error: OpenRouterError, status_code: int) -> None:
        normalized_log_event(
            self._logger,
            "request.error",
            ctx,
            phase="finalize",
            error_code=error.code.value,
            emitted=False,
            status_code=status_code,
            error=str(error),
        )


__all__ = ["OpenRouterRequestMixin", "handle_error_response", "is_success"]
