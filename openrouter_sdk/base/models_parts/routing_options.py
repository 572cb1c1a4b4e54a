"""
Request-side routing and behaviour options.

These objects are nested inside completion and chat requests and steer how
the service selects an upstream provider, how much reasoning a model does and
whether usage accounting is returned.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from .wire_model import WireModel


class Effort(str, Enum):
    """Reasoning effort level."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Quantization(str, Enum):
    """Model weight quantization levels a request may restrict routing to."""

    INT4 = "int4"
    INT8 = "int8"
    FP4 = "fp4"
    FP6 = "fp6"
    FP8 = "fp8"
    FP16 = "fp16"
    BF16 = "bf16"
    FP32 = "fp32"
    UNKNOWN = "unknown"


class MaxPrice(WireModel):
    """Per-unit price ceilings (USD per million tokens, per image, per request)."""

    prompt: Optional[float] = None
    completion: Optional[float] = None
    image: Optional[float] = None
    request: Optional[float] = None


class ExperimentalOptions(WireModel):
    force_chat_completions: Optional[bool] = None


class ProviderOptions(WireModel):
    """Provider routing preferences.

    Attributes:
        allow_fallbacks: Permit backup providers when the primary is down.
        require_parameters: Only route to providers that support every
            request parameter.
        data_collection: ``"allow"`` or ``"deny"`` providers that store data.
        order: Provider slugs to try in order.
        only: Allow-list of provider slugs.
        ignore: Deny-list of provider slugs.
        quantizations: Restrict routing to these quantization levels.
        sort: ``"price"``, ``"throughput"`` or ``"latency"``.
        max_price: Price ceilings for this request.
        experimental: Experimental switches.
    """

    allow_fallbacks: Optional[bool] = None
    require_parameters: Optional[bool] = None
    data_collection: Optional[str] = None
    order: Optional[List[str]] = None
    only: Optional[List[str]] = None
    ignore: Optional[List[str]] = None
    quantizations: Optional[List[Quantization]] = None
    sort: Optional[str] = None
    max_price: Optional[MaxPrice] = None
    experimental: Optional[ExperimentalOptions] = None


class ReasoningOptions(WireModel):
    """Reasoning token controls; ``effort`` and ``max_tokens`` are alternatives."""

    effort: Optional[Effort] = None
    max_tokens: Optional[int] = None
    exclude: Optional[bool] = None


class UsageOptions(WireModel):
    """Usage accounting switch.

    Serialises as ``{"include": true}``, the key the service expects inside the
    request's ``usage`` object.
    """

    include: Optional[bool] = None


__all__ = [
    "Effort",
    "Quantization",
    "MaxPrice",
    "ExperimentalOptions",
    "ProviderOptions",
    "ReasoningOptions",
    "UsageOptions",
]
