"""
Wire models public surface.

This module re-exports the pydantic models under
``openrouter_sdk.base.models_parts`` so callers import from one stable path.
"""

from .models_parts.wire_model import WireModel
from .models_parts.usage import CompletionTokensDetails, PromptTokensDetails, Usage
from .models_parts.logprobs import LogProbs, LogProbToken, TokenLogProbs
from .models_parts.completion_stream_chunk import CompletionStreamChunk, StreamingChoice
from .models_parts.chat_stream_chunk import (
    ChatCompletionStreamChunk,
    ChatDelta,
    ChatStreamingChoice,
)
from .models_parts.routing_options import (
    Effort,
    ExperimentalOptions,
    MaxPrice,
    ProviderOptions,
    Quantization,
    ReasoningOptions,
    UsageOptions,
)
from .models_parts.generation_params import GenerationParams
from .models_parts.completion_request import CompletionRequest
from .models_parts.chat_request import ChatCompletionRequest, ChatMessage
from .models_parts.completion_response import CompletionChoice, CompletionResponse
from .models_parts.chat_response import ChatChoice, ChatCompletionResponse
from .models_parts.error_response import ErrorBody, ErrorResponse
from .models_parts.credits import CreditsData, CreditsResponse
from .models_parts.generation import GenerationData, GenerationResponse
from .models_parts.model_data import (
    ModelArchitecture,
    ModelData,
    ModelPricing,
    ModelsResponse,
    ModelTopProvider,
)
from .models_parts.endpoint_data import (
    EndpointArchitecture,
    EndpointData,
    EndpointDetail,
    EndpointPricing,
    EndpointsResponse,
)

__all__ = [
    "WireModel",
    "Usage",
    "PromptTokensDetails",
    "CompletionTokensDetails",
    "LogProbs",
    "LogProbToken",
    "TokenLogProbs",
    "CompletionStreamChunk",
    "StreamingChoice",
    "ChatCompletionStreamChunk",
    "ChatStreamingChoice",
    "ChatDelta",
    "Effort",
    "Quantization",
    "MaxPrice",
    "ExperimentalOptions",
    "ProviderOptions",
    "ReasoningOptions",
    "UsageOptions",
    "GenerationParams",
    "CompletionRequest",
    "ChatCompletionRequest",
    "ChatMessage",
    "CompletionChoice",
    "CompletionResponse",
    "ChatChoice",
    "ChatCompletionResponse",
    "ErrorBody",
    "ErrorResponse",
    "CreditsData",
    "CreditsResponse",
    "GenerationData",
    "GenerationResponse",
    "ModelArchitecture",
    "ModelTopProvider",
    "ModelPricing",
    "ModelData",
    "ModelsResponse",
    "EndpointArchitecture",
    "EndpointPricing",
    "EndpointDetail",
    "EndpointData",
    "EndpointsResponse",
]
