"""openrouter_sdk package

Python client for the OpenRouter completion API with a pull-based reader for
server-sent event streams.

Public API (re-exported):
    - Version: ``__version__``
    - Client: :class:`OpenRouterClient`
    - Streaming: :class:`StreamReader`, :class:`StreamState`
    - Requests: :class:`CompletionRequest`, :class:`ChatCompletionRequest`,
      :class:`ChatMessage` and the routing option models
    - Exceptions: :class:`OpenRouterError` and its subclasses,
      :class:`CancelledError`
    - Cancellation: :class:`CancellationToken`

Example:
    >>> from openrouter_sdk import OpenRouterClient, ChatCompletionRequest, ChatMessage
    >>> with OpenRouterClient() as client:
    ...     request = ChatCompletionRequest(
    ...         model="openai/gpt-4o-mini",
    ...         messages=[ChatMessage(role="user", content="Hello")],
    ...     )
    ...     with client.chat_completion_stream(request) as reader:
    ...         for chunk in reader:
    ...             print(chunk.choices[0].delta.content or "", end="")
"""

from .base.cancellation import CancellationToken, CancelledError
from .base.errors import (
    APIError,
    ErrorCode,
    OpenRouterError,
    RequestError,
    StreamClosedError,
    StreamNotSupportedError,
    StreamReadError,
)
from .base.logging import configure_logger, get_logger
from .base.models import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatCompletionStreamChunk,
    ChatMessage,
    CompletionRequest,
    CompletionResponse,
    CompletionStreamChunk,
    CreditsData,
    Effort,
    EndpointData,
    ExperimentalOptions,
    GenerationData,
    MaxPrice,
    ModelData,
    ProviderOptions,
    Quantization,
    ReasoningOptions,
    Usage,
    UsageOptions,
)
from .base.streaming import StreamReader, StreamState
from .client import OpenRouterClient

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "OpenRouterClient",
    "StreamReader",
    "StreamState",
    "CancellationToken",
    "CancelledError",
    "APIError",
    "ErrorCode",
    "OpenRouterError",
    "RequestError",
    "StreamClosedError",
    "StreamNotSupportedError",
    "StreamReadError",
    "configure_logger",
    "get_logger",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatCompletionStreamChunk",
    "ChatMessage",
    "CompletionRequest",
    "CompletionResponse",
    "CompletionStreamChunk",
    "CreditsData",
    "Effort",
    "EndpointData",
    "ExperimentalOptions",
    "GenerationData",
    "MaxPrice",
    "ModelData",
    "ProviderOptions",
    "Quantization",
    "ReasoningOptions",
    "Usage",
    "UsageOptions",
]
