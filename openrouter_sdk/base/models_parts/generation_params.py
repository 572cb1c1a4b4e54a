"""
Sampling and routing parameters shared by completion and chat requests.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from .routing_options import ProviderOptions, ReasoningOptions, UsageOptions
from .wire_model import WireModel


class GenerationParams(WireModel):
    """Optional parameters accepted by both generation endpoints.

    Every field defaults to ``None`` and is omitted from the request body
    unless set. ``stream`` is managed by the client: the synchronous calls
    reject ``True`` and the streaming calls force it on a copy.
    """

    models: Optional[List[str]] = None
    provider: Optional[ProviderOptions] = None
    reasoning: Optional[ReasoningOptions] = None
    usage: Optional[UsageOptions] = None
    transforms: Optional[List[str]] = None
    stream: Optional[bool] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    seed: Optional[int] = None
    top_p: Optional[float] = None
    top_k: Optional[int] = None
    frequency_penalty: Optional[float] = None
    presence_penalty: Optional[float] = None
    repetition_penalty: Optional[float] = None
    logit_bias: Optional[Dict[str, float]] = None
    top_logprobs: Optional[int] = None
    min_p: Optional[float] = None
    top_a: Optional[float] = None
    logprobs: Optional[bool] = None
    stop: Optional[List[str]] = None

    def wants_stream(self) -> bool:
        """Return True when the caller explicitly asked for streaming."""
        return bool(self.stream)


__all__ = ["GenerationParams"]
